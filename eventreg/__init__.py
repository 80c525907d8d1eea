"""Event registration service: intake, one-time SMS notification and listing."""

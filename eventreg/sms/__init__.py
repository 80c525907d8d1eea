"""SMS gateway integration."""

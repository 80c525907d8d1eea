"""Registration errors."""


class SubmissionValidationError(ValueError):
    """The submission payload is missing a required field."""

"""Doz exception hierarchy.

Rules never raise for bad input; they return ``Invalid`` outcomes.
These exceptions cover configuration mistakes and callers that
prefer exceptions over checking ``Result.valid``.
"""


class DozError(Exception):
    """Base for all doz-specific errors."""


class ConfigurationError(DozError):
    """Raised when a ``ValidationConfig`` is built with invalid settings."""


class ValidationFailed(DozError):  # noqa: N818
    """Raised by ``Result.raise_for_errors()`` when validation did not pass.

    Attributes:
        errors: Dict mapping failing field names to resolved messages.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Validation failed for: {fields}")

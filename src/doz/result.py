"""Validation result — immutable container for validated data or errors."""

from dataclasses import dataclass
from typing import Any

from doz.errors import ValidationFailed


@dataclass(frozen=True, slots=True)
class Result:
    """The outcome of aggregating field outcomes.

    Exactly one of ``data`` and ``exception`` is set:

    - valid: ``data`` maps every field to its validated (possibly coerced)
      value.
    - invalid: ``exception`` maps each failing field to its message.
      Values of fields that passed are not carried.

    The result is falsy when invalid, so you can write::

        result = aggregate({...})
        if not result:
            return render_errors(result.exception)
    """

    valid: bool
    data: dict[str, Any] | None = None
    exception: dict[str, str] | None = None

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.valid

    @property
    def errors(self) -> dict[str, str]:
        """Field → message for failing fields; empty when valid."""
        return dict(self.exception or {})

    def raise_for_errors(self) -> dict[str, Any]:
        """Return ``data`` when valid, otherwise raise ``ValidationFailed``."""
        if not self.valid:
            raise ValidationFailed(self.errors)
        return dict(self.data or {})

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form: ``{"valid": ..., "data": ...}`` or ``{"valid": ..., "exception": ...}``."""
        if self.valid:
            return {"valid": True, "data": dict(self.data or {})}
        return {"valid": False, "exception": dict(self.exception or {})}

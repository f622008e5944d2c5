"""Scalar rules — strings, numbers, booleans and string formats.

Each rule has the signature::

    def rule(value: Any, ...) -> Outcome

and returns the input unchanged on success.
"""

import math
import re
from dataclasses import dataclass, replace
from numbers import Real
from typing import Any

from doz.messages import MessageTemplate, as_template
from doz.outcome import Outcome, invalid, valid

# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


def string(value: Any) -> Outcome:
    """Value must be a non-empty string."""
    if isinstance(value, str) and len(value) > 0:
        return valid(value)
    return invalid(value, "must be string")


def number(value: Any, min: float | None = None, max: float | None = None) -> Outcome:  # noqa: A002
    """Value must be a real number within the optional inclusive bounds.

    ``bool`` is rejected even though it subclasses ``int``, and so is NaN.
    A bound of ``0`` is enforced; only ``None`` means "no bound".
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return invalid(value, "must be number")
    if isinstance(value, float) and math.isnan(value):
        return invalid(value, "must be number")
    if min is not None and value < min:
        return invalid(value, f"must be greater than {min}")
    if max is not None and value > max:
        return invalid(value, f"must be less than {max}")
    return valid(value)


def boolean(value: Any) -> Outcome:
    """Value must be ``True`` or ``False``."""
    if isinstance(value, bool):
        return valid(value)
    return invalid(value, "must be boolean")


def instance_of(value: Any, *classes: type) -> Outcome:
    """Value must be an instance of at least one of *classes*."""
    if isinstance(value, classes):
        return valid(value)
    names = " or ".join(cls.__name__ for cls in classes)
    return invalid(value, f"must be instance of {names}")


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def email(value: Any) -> Outcome:
    """Value must look like an email address (structure, not deliverability)."""
    if not isinstance(value, str):
        return invalid(value, "must be string")
    if not _EMAIL_RE.fullmatch(value):
        return invalid(value, "must be valid email address")
    return valid(value)


def regex(
    value: Any,
    pattern: str | re.Pattern[str],
    message: str | MessageTemplate | None = None,
) -> Outcome:
    """Value must contain a match for *pattern*.

    Anchor the pattern (``^...$``) to require a full match. A custom
    *message* string is used verbatim; pass a ``MessageTemplate`` to
    have the field name rendered into it.
    """
    if not isinstance(value, str):
        return invalid(value, "must be string")
    if not re.search(pattern, value):
        if message:
            return invalid(value, as_template(message))
        return invalid(value, "does not match required pattern")
    return valid(value)


_UUID4_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def uuidv4(value: Any) -> Outcome:
    """Value must be a UUID string with version nibble 4 and an RFC 4122 variant."""
    if not isinstance(value, str):
        return invalid(value, "must be string")
    if not _UUID4_RE.fullmatch(value):
        return invalid(value, "must be a valid UUIDv4")
    return valid(value)


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------

_SPECIAL_RE = re.compile(r'[!@#$%^&*(),.?":{}|<>]')


@dataclass(frozen=True, slots=True)
class PasswordPolicy:
    """Password strength requirements.

    Defaults require 8–100 characters with at least one uppercase letter,
    one lowercase letter, one digit and one special character::

        password(value, PasswordPolicy(min_length=12))
        password(value, require_special_chars=False)
    """

    min_length: int = 8
    max_length: int = 100
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = True


DEFAULT_PASSWORD_POLICY = PasswordPolicy()

# Checked in this order; the first missing class is reported.
_CHARACTER_CLASSES: tuple[tuple[str, re.Pattern[str], str], ...] = (
    ("require_uppercase", re.compile(r"[A-Z]"), "must contain at least one uppercase letter"),
    ("require_lowercase", re.compile(r"[a-z]"), "must contain at least one lowercase letter"),
    ("require_numbers", re.compile(r"\d"), "must contain at least one number"),
    ("require_special_chars", _SPECIAL_RE, "must contain at least one special character"),
)


def password(value: Any, policy: PasswordPolicy | None = None, **overrides: Any) -> Outcome:
    """Value must satisfy *policy*, with keyword *overrides* applied on top.

    Length is checked before character classes.
    """
    if not isinstance(value, str):
        return invalid(value, "must be string")

    policy = policy or DEFAULT_PASSWORD_POLICY
    if overrides:
        policy = replace(policy, **overrides)

    if len(value) < policy.min_length:
        return invalid(value, f"must be at least {policy.min_length} characters")
    if len(value) > policy.max_length:
        return invalid(value, f"must be at most {policy.max_length} characters")

    for option, pattern, message in _CHARACTER_CLASSES:
        if getattr(policy, option) and not pattern.search(value):
            return invalid(value, message)

    return valid(value)

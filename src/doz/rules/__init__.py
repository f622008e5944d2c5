"""The rule library — independent, stateless validation functions.

Every rule has the signature ``(value, ...options) -> Outcome`` and never
raises for bad input::

    from doz import rules

    rules.string("John")                  # Valid("John")
    rules.number(150, min=0, max=100)     # Invalid(150, "$ must be less than 100")
    rules.array_of([1, 2, 3], rules.number)

Composite rules (``array_of``, ``shape``, ``form_data``) accept any
callable matching ``(value) -> Outcome``, so custom rules and bound
parameterized rules nest freely.
"""

from doz.rules.containers import (
    array,
    array_includes,
    array_of,
    form_data,
    has_properties,
    mapping,
    shape,
)
from doz.rules.primitives import (
    DEFAULT_PASSWORD_POLICY,
    PasswordPolicy,
    boolean,
    email,
    instance_of,
    number,
    password,
    regex,
    string,
    uuidv4,
)
from doz.rules.resources import file, mime, url
from doz.rules.temporal import date, date_between

__all__ = [
    "DEFAULT_PASSWORD_POLICY",
    "PasswordPolicy",
    "array",
    "array_includes",
    "array_of",
    "boolean",
    "date",
    "date_between",
    "email",
    "file",
    "form_data",
    "has_properties",
    "instance_of",
    "mapping",
    "mime",
    "number",
    "password",
    "regex",
    "shape",
    "string",
    "url",
    "uuidv4",
]

"""Rule outcomes — what one rule says about one value.

Every rule returns exactly one of:

- ``Valid(value)`` — the value passed; ``value`` is the rule's output,
  which may be a coerced form of the input (a parsed date, a split URL).
- ``Invalid(raw_input, message)`` — the value failed; ``message`` is a
  ``MessageTemplate`` waiting for a field name.

Both are immutable and truthy/falsy by status, so rules compose with
plain ``if``::

    item = rule(value)
    if not item:
        return invalid(value, item.message)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from doz.messages import MessageTemplate, subject


@dataclass(frozen=True, slots=True)
class Valid[T]:
    """A passing outcome carrying the (possibly coerced) value."""

    value: T

    @property
    def ok(self) -> Literal[True]:
        return True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Invalid:
    """A failing outcome carrying the rejected input and a message template."""

    raw_input: Any
    message: MessageTemplate

    @property
    def ok(self) -> Literal[False]:
        return False

    def __bool__(self) -> bool:
        return False


type Outcome = Valid[Any] | Invalid

# Any callable matching ``(value) -> Outcome`` is a rule. Parameterized
# rules are bound with a lambda or ``functools.partial`` before being
# handed to a composite rule.
type Rule = Callable[[Any], Outcome]


def valid[T](value: T) -> Valid[T]:
    return Valid(value)


def invalid(raw_input: Any, message: str | MessageTemplate) -> Invalid:
    """Build an ``Invalid`` outcome.

    A plain string is treated as a subject predicate, so
    ``invalid(v, "must be string")`` renders as ``"<field> must be string"``.
    """
    if isinstance(message, str):
        message = subject(message)
    return Invalid(raw_input, message)

"""Collection rules — arrays, mappings and forms.

The composite rules here take other rules as arguments::

    array_of(tags, string)
    shape(user, {"name": string, "age": lambda v: number(v, min=0)})
    form_data(form, {"email": email})

``array_of`` stops at the first failing item. ``shape`` and
``form_data`` check every declared key and report all failures,
joined with ``"; "``.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from doz._internal.multimap import MultiValueMapping
from doz.messages import MessageTemplate, literal
from doz.outcome import Invalid, Outcome, Rule, invalid, valid

_ARRAY_TYPES = (list, tuple)


def _join(items: Iterable[Any]) -> str:
    return ", ".join(str(item) for item in items)


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


def array(
    value: Any,
    min_length: int | None = None,
    max_length: int | None = None,
) -> Outcome:
    """Value must be a list or tuple within the optional length bounds."""
    if not isinstance(value, _ARRAY_TYPES):
        return invalid(value, "must be array")
    if min_length is not None and len(value) < min_length:
        return invalid(value, f"length must be at least {min_length}")
    if max_length is not None and len(value) > max_length:
        return invalid(value, f"length must be at most {max_length}")
    return valid(value)


def array_includes(value: Any, items: Iterable[Any]) -> Outcome:
    """Value must be an array containing every one of *items*.

    All missing items are reported, in the order *items* lists them.
    """
    if not isinstance(value, _ARRAY_TYPES):
        return invalid(value, "must be array")
    missing = [item for item in items if item not in value]
    if missing:
        return invalid(value, f"must include all of these items: {_join(missing)}")
    return valid(value)


def array_of(value: Any, rule: Rule) -> Outcome:
    """Value must be an array whose every item passes *rule*.

    The first failing item is reported as ``Item at index {i}: ...``,
    with the item's message rendered for the same field.
    """
    if not isinstance(value, _ARRAY_TYPES):
        return invalid(value, "must be array")
    for index, item in enumerate(value):
        outcome = rule(item)
        if isinstance(outcome, Invalid):
            message = MessageTemplate(
                f"Item at index {index}: ", subject=False, inner=outcome.message
            )
            return invalid(value, message)
    return valid(value)


# ---------------------------------------------------------------------------
# Mappings
# ---------------------------------------------------------------------------


def mapping(value: Any) -> Outcome:
    """Value must be a mapping (the "object" rule): not a list, not ``None``."""
    if not isinstance(value, Mapping):
        return invalid(value, "must be object")
    return valid(value)


def has_properties(value: Any, properties: Iterable[str]) -> Outcome:
    """Value must be a mapping holding every key in *properties*.

    All missing keys are reported, in the order *properties* lists them.
    """
    if not isinstance(value, Mapping):
        return invalid(value, "must be object")
    missing = [prop for prop in properties if prop not in value]
    if missing:
        return invalid(value, f"must have all of these properties: {_join(missing)}")
    return valid(value)


def _key_errors(lookup: Mapping[str, Outcome | None], rules: Mapping[str, Rule]) -> list[str]:
    errors: list[str] = []
    for key in rules:
        outcome = lookup[key]
        if outcome is None:
            errors.append(f"Missing required property: {key}")
        elif isinstance(outcome, Invalid):
            errors.append(f"{key}: {outcome.message.render(key)}")
    return errors


def shape(value: Any, rules: Mapping[str, Rule]) -> Outcome:
    """Value must be a mapping whose declared keys each pass their rule.

    Every declared key is checked. Absent keys are reported as
    ``Missing required property: {key}``; failing keys as
    ``{key}: {message}``. Keys not declared in *rules* are ignored.
    """
    if not isinstance(value, Mapping):
        return invalid(value, "must be object")

    outcomes: dict[str, Outcome | None] = {
        key: rule(value[key]) if key in value else None for key, rule in rules.items()
    }
    errors = _key_errors(outcomes, rules)
    if errors:
        return invalid(value, literal("; ".join(errors)))
    return valid(value)


# ---------------------------------------------------------------------------
# Forms
# ---------------------------------------------------------------------------


def _form_value(form: MultiValueMapping, key: str) -> Any:
    raw = form.get(key)
    if raw is None:
        files = getattr(form, "files", None)
        if isinstance(files, Mapping):
            return files.get(key)
    return raw


def form_data(value: Any, rules: Mapping[str, Rule]) -> Outcome:
    """Value must be form data whose declared keys each pass their rule.

    Values are read by key lookup (first value, then uploaded files), so
    an absent key reaches its rule as ``None``. On success the outcome
    carries a plain ``dict`` of each key's validated value.
    """
    if not isinstance(value, MultiValueMapping):
        return invalid(value, "must be FormData")

    outcomes: dict[str, Outcome | None] = {
        key: rule(_form_value(value, key)) for key, rule in rules.items()
    }
    errors = _key_errors(outcomes, rules)
    if errors:
        return invalid(value, literal("; ".join(errors)))
    return valid({key: outcome.value for key, outcome in outcomes.items()})  # type: ignore[union-attr]

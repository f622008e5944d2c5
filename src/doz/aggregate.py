"""The aggregator — many field outcomes in, one ``Result`` out.

Usage::

    from doz import aggregate, rules

    result = aggregate({
        "name": rules.string(form["name"]),
        "age": rules.number(age, min=0, max=120),
    })
    if not result:
        # result.exception == {"age": "age must be less than 120"}
        ...
"""

import logging
from collections.abc import Mapping
from typing import Any

from doz.config import DEFAULT_CONFIG, ValidationConfig
from doz.outcome import Outcome, Rule, Valid
from doz.result import Result

logger = logging.getLogger("doz.aggregate")


def aggregate(
    request: Mapping[str, Outcome],
    config: ValidationConfig | None = None,
) -> Result:
    """Merge already-evaluated field outcomes into a single ``Result``.

    Walks *request* once, in iteration order. Passing fields collect
    their values into ``data``; failing fields collect their message,
    rendered with the field name, into ``exception``. The overall flag
    follows ``config.flag_policy`` and selects which of the two maps is
    attached to the result.

    Args:
        request: Field name → outcome of the rule applied to that field.
        config: Aggregation settings. Defaults to ``DEFAULT_CONFIG``.

    Returns:
        A ``Result`` carrying either ``data`` or ``exception``.
    """
    config = config or DEFAULT_CONFIG
    last_write_wins = config.flag_policy == "last"

    data: dict[str, Any] = {}
    exception: dict[str, str] = {}
    flag = True

    for field, outcome in request.items():
        if isinstance(outcome, Valid):
            data[field] = outcome.value
            if last_write_wins:
                flag = True
        else:
            exception[field] = outcome.message.render(field)
            flag = False
            if config.log_failures:
                logger.debug("Field %r failed: %s", field, exception[field])

    logger.debug(
        "Aggregated %d fields: %d passed, %d failed, valid=%s",
        len(request),
        len(data),
        len(exception),
        flag,
    )

    if flag:
        return Result(valid=True, data=data)
    return Result(valid=False, exception=exception)


class Validation:
    """Constructor-style entry point: aggregate on creation, expose ``.result``.

    Usage::

        validation = Validation({"name": rules.string("John")})
        validation.result   # Result(valid=True, data={"name": "John"})
    """

    __slots__ = ("result",)

    def __init__(
        self,
        request: Mapping[str, Outcome],
        config: ValidationConfig | None = None,
    ) -> None:
        self.result = aggregate(request, config)

    def __repr__(self) -> str:
        return f"Validation({self.result!r})"


def validate(
    data: Mapping[str, Any],
    schema: Mapping[str, Rule],
    config: ValidationConfig | None = None,
) -> Result:
    """Validate *data* against a schema of per-field rules.

    Each declared field's value (``None`` when absent) is passed to its
    rule, then the outcomes are aggregated. Fields of *data* that the
    schema does not declare are ignored.

    Example::

        result = validate(payload, {
            "email": rules.email,
            "age": lambda v: rules.number(v, min=18),
        })
    """
    outcomes = {field: rule(data.get(field)) for field, rule in schema.items()}
    return aggregate(outcomes, config)

"""Doz — declarative field validation.

Rules check one value each and return an outcome; the aggregator turns
a mapping of field outcomes into one result.

Basic usage::

    from doz import Validation, rules

    validation = Validation({
        "name": rules.string("John"),
        "age": rules.number(150, min=0, max=100),
    })
    validation.result
    # Result(valid=False, exception={"age": "age must be less than 100"})

Forms::

    from doz.forms import FormData
    form = FormData({"email": ["a@example.com"]})
    rules.form_data(form, {"email": rules.email})
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DozError",
    "Invalid",
    "MessageTemplate",
    "Outcome",
    "Result",
    "Rule",
    "Valid",
    "Validation",
    "ValidationConfig",
    "ValidationFailed",
    "aggregate",
    "rules",
    "validate",
]

# Public name → defining module.
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "doz.errors",
    "DozError": "doz.errors",
    "ValidationFailed": "doz.errors",
    "Invalid": "doz.outcome",
    "Outcome": "doz.outcome",
    "Rule": "doz.outcome",
    "Valid": "doz.outcome",
    "MessageTemplate": "doz.messages",
    "Result": "doz.result",
    "ValidationConfig": "doz.config",
    "Validation": "doz.aggregate",
    "aggregate": "doz.aggregate",
    "validate": "doz.aggregate",
    "rules": "doz.rules",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import doz`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    module = importlib.import_module(module_path)
    if name == "rules":
        return module
    return getattr(module, name)

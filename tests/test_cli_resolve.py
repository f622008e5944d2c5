"""Tests for doz.cli._resolve — schema import resolution."""

import sys
import types

import pytest

from doz import rules
from doz.cli._resolve import resolve_schema

USER = {"name": rules.string, "email": rules.email}


@pytest.fixture
def _fake_schema_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module holding schemas on sys.modules."""
    mod = types.ModuleType("_fake_doz_schemas")
    mod.schema = USER  # type: ignore[attr-defined]
    mod.custom = {"age": rules.number}  # type: ignore[attr-defined]
    mod.build = lambda: USER  # type: ignore[attr-defined]
    mod.broken = lambda: 1 / 0  # type: ignore[attr-defined]
    mod.not_a_schema = "just a string"  # type: ignore[attr-defined]
    mod.bad_rules = {"name": "string"}  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_doz_schemas", mod)


@pytest.mark.usefixtures("_fake_schema_module")
class TestResolveSchema:
    def test_explicit_attribute(self) -> None:
        assert resolve_schema("_fake_doz_schemas:custom") == {"age": rules.number}

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'schema'."""
        assert resolve_schema("_fake_doz_schemas") is USER

    def test_factory_called(self) -> None:
        assert resolve_schema("_fake_doz_schemas:build") is USER

    def test_factory_error_wrapped(self) -> None:
        with pytest.raises(TypeError, match="raised an error"):
            resolve_schema("_fake_doz_schemas:broken")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_schema("nonexistent_module_xyz:schema")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_schema("_fake_doz_schemas:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="not a schema mapping"):
            resolve_schema("_fake_doz_schemas:not_a_schema")

    def test_non_callable_rule(self) -> None:
        with pytest.raises(TypeError, match="non-callable rules for: name"):
            resolve_schema("_fake_doz_schemas:bad_rules")

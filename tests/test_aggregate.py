"""Tests for doz.aggregate — aggregate(), Validation and validate()."""

import logging

import pytest

from doz import rules
from doz.aggregate import Validation, aggregate, validate
from doz.config import ValidationConfig
from doz.result import Result

LAST = ValidationConfig(flag_policy="last")


class TestAggregate:
    def test_single_valid_field(self) -> None:
        result = aggregate({"name": rules.string("John")})
        assert result == Result(valid=True, data={"name": "John"})

    def test_single_invalid_field(self) -> None:
        result = aggregate({"age": rules.number(150, min=0, max=100)})
        assert result == Result(valid=False, exception={"age": "age must be less than 100"})

    def test_coerced_values_in_data(self) -> None:
        result = aggregate({"birthdate": rules.date("2000-01-01")})
        assert result.data["birthdate"].year == 2000

    def test_mixed_drops_passing_values(self) -> None:
        result = aggregate({"a": rules.string("ok"), "b": rules.number(200, max=100)})
        assert result.valid is False
        assert result.exception == {"b": "b must be less than 100"}
        assert result.data is None

    def test_all_failures_reported(self) -> None:
        result = aggregate({"a": rules.string(1), "b": rules.boolean("no")})
        assert result.exception == {"a": "a must be string", "b": "b must be boolean"}

    def test_earlier_failure_not_hidden(self) -> None:
        result = aggregate({"b": rules.number(200, max=100), "a": rules.string("ok")})
        assert result.valid is False
        assert result.exception == {"b": "b must be less than 100"}

    def test_empty_request_is_valid(self) -> None:
        assert aggregate({}) == Result(valid=True, data={})

    def test_only_top_level_field_substituted(self) -> None:
        result = aggregate({"numbers": rules.array_of([1, "2", 3], rules.number)})
        assert result.exception == {"numbers": "Item at index 1: numbers must be number"}

    def test_composite_message_not_substituted(self) -> None:
        outcome = rules.shape({"name": 5}, {"name": rules.string})
        result = aggregate({"user": outcome})
        assert result.exception == {"user": "name: name must be string"}

    def test_iteration_order_preserved(self) -> None:
        result = aggregate({"z": rules.string("1"), "a": rules.string("2")})
        assert list(result.data) == ["z", "a"]

    def test_idempotent(self) -> None:
        request = {
            "name": rules.string("John"),
            "age": rules.number(150, max=100),
            "email": rules.email("bad"),
        }
        first = aggregate(request)
        assert all(aggregate(request) == first for _ in range(5))
        assert aggregate(request, LAST) == aggregate(request, LAST)

    def test_result_maps_not_shared_between_calls(self) -> None:
        request = {"name": rules.string("John")}
        first = aggregate(request)
        first.data["name"] = "mutated"
        assert aggregate(request).data == {"name": "John"}

    def test_logs_failures_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="doz.aggregate"):
            aggregate({"age": rules.number("x")})
        assert "'age' failed: age must be number" in caplog.text

    def test_log_failures_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="doz.aggregate"):
            aggregate({"age": rules.number("x")}, ValidationConfig(log_failures=False))
        assert "failed:" not in caplog.text


class TestLastWriteWinsPolicy:
    """``flag_policy="last"``: the flag reflects only the last field visited."""

    def test_last_invalid_makes_result_invalid(self) -> None:
        result = aggregate({"a": rules.string("ok"), "b": rules.number(200, max=100)}, LAST)
        assert result == Result(valid=False, exception={"b": "b must be less than 100"})

    def test_last_valid_hides_earlier_failure(self) -> None:
        result = aggregate({"b": rules.number(200, max=100), "a": rules.string("ok")}, LAST)
        assert result == Result(valid=True, data={"a": "ok"})

    def test_exception_keeps_every_failure_when_last_fails(self) -> None:
        request = {
            "x": rules.string(""),
            "y": rules.string("fine"),
            "z": rules.boolean(None),
        }
        result = aggregate(request, LAST)
        assert result == Result(
            valid=False,
            exception={"x": "x must be string", "z": "z must be boolean"},
        )

    @pytest.mark.parametrize(
        ("last_ok", "expected"),
        [(True, True), (False, False)],
    )
    def test_flag_follows_last_entry(self, last_ok: bool, expected: bool) -> None:
        last = rules.boolean(True) if last_ok else rules.boolean("no")
        request = {"first": rules.boolean("no"), "middle": rules.boolean(True), "last": last}
        assert aggregate(request, LAST).valid is expected

    def test_agrees_with_all_policy_when_uniform(self) -> None:
        request = {"a": rules.string("x"), "b": rules.string("y")}
        assert aggregate(request, LAST) == aggregate(request)


class TestValidation:
    def test_result_attribute(self) -> None:
        validation = Validation({"name": rules.string("John")})
        assert validation.result == Result(valid=True, data={"name": "John"})

    def test_config_passed_through(self) -> None:
        validation = Validation({"a": rules.string(""), "b": rules.string("x")}, LAST)
        assert validation.result.valid is True

    def test_repr(self) -> None:
        assert "Validation(Result(" in repr(Validation({}))

    def test_uuid_scenario(self) -> None:
        validation = Validation({"field": rules.uuidv4("123e4567-e89b-5d3c-8456-426614174000")})
        assert validation.result.exception == {"field": "field must be a valid UUIDv4"}


class TestValidate:
    def test_all_valid(self) -> None:
        result = validate(
            {"name": "alice", "age": 30},
            {"name": rules.string, "age": lambda v: rules.number(v, min=0)},
        )
        assert result == Result(valid=True, data={"name": "alice", "age": 30})

    def test_missing_field_reaches_rule_as_none(self) -> None:
        result = validate({}, {"email": rules.email})
        assert result.exception == {"email": "email must be string"}

    def test_undeclared_fields_ignored(self) -> None:
        result = validate({"name": "bob", "admin": True}, {"name": rules.string})
        assert result.data == {"name": "bob"}

    def test_example_payload(self) -> None:
        payload = {
            "name": "Josh",
            "age": 17,
            "isAdmin": True,
            "hobbies": ["reading", "coding"],
            "email": "josh@example.com",
            "password": "P@ssw0rd",
        }
        schema = {
            "name": rules.string,
            "age": lambda v: rules.number(v, min=0, max=100),
            "isAdmin": rules.boolean,
            "hobbies": lambda v: rules.array_of(v, rules.string),
            "email": rules.email,
            "password": rules.password,
        }
        result = validate(payload, schema)
        assert result.valid
        assert result.data == payload

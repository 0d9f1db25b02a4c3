"""Tests for response shape classification and normalization."""

import copy

import pytest

from whmctl.models import NormalizedResult, ResponseShape
from whmctl.response import (
    classify_response,
    normalize_response,
    parse_status,
    symbolize_keys,
)


class TestClassifyResponse:
    @pytest.mark.parametrize("body", [None, 1, 1.5, "ok", True, [], [{"status": 1}]])
    def test_non_objects_are_unknown(self, body) -> None:
        assert classify_response(body) is ResponseShape.UNKNOWN

    def test_error(self) -> None:
        assert classify_response({"error": "nope"}) is ResponseShape.ERROR

    def test_error_takes_precedence(self) -> None:
        body = {
            "error": "nope",
            "result": [{"status": 1, "statusmsg": "ok"}],
            "status": 1,
            "statusmsg": "ok",
        }
        assert classify_response(body) is ResponseShape.ERROR

    def test_action(self) -> None:
        assert classify_response({"result": []}) is ResponseShape.ACTION

    def test_action_checked_before_query(self) -> None:
        body = {"result": [{"status": 0}], "status": 1, "statusmsg": "ok"}
        assert classify_response(body) is ResponseShape.ACTION

    def test_custom_result_key(self) -> None:
        body = {"data": [{"status": 1, "statusmsg": "ok"}]}
        assert classify_response(body, "data") is ResponseShape.ACTION
        assert classify_response(body) is ResponseShape.UNKNOWN

    def test_query_needs_both_fields(self) -> None:
        assert classify_response({"status": 1, "statusmsg": "ok"}) is ResponseShape.QUERY
        assert classify_response({"status": 1}) is ResponseShape.UNKNOWN
        assert classify_response({"statusmsg": "ok"}) is ResponseShape.UNKNOWN

    def test_empty_object_is_unknown(self) -> None:
        assert classify_response({}) is ResponseShape.UNKNOWN


class TestParseStatus:
    @pytest.mark.parametrize("value", [1, "1", 1.0, " 1", "1.0", "+1", "1 ok"])
    def test_one(self, value) -> None:
        assert parse_status(value) == 1

    @pytest.mark.parametrize(
        "value", [None, "", "abc", "ok1", "\uff11", True, False, [], {}, float("nan")]
    )
    def test_garbage_is_zero(self, value) -> None:
        assert parse_status(value) == 0

    def test_other_numbers(self) -> None:
        assert parse_status(0) == 0
        assert parse_status("2") == 2
        assert parse_status("-1") == -1


class TestSymbolizeKeys:
    def test_recursive(self) -> None:
        value = {
            "Disk-Used": [{"Sub Key": 1}, [{"A": 2}], "x"],
            "options": {"IP": "1.2.3.4", "nested": {"Max-Ftp": None}},
        }
        assert symbolize_keys(value) == {
            "disk_used": [{"sub_key": 1}, [{"a": 2}], "x"],
            "options": {"ip": "1.2.3.4", "nested": {"max_ftp": None}},
        }

    def test_leaves_unchanged(self) -> None:
        assert symbolize_keys("Some-Value") == "Some-Value"
        assert symbolize_keys(3) == 3
        assert symbolize_keys(None) is None

    def test_input_not_mutated(self) -> None:
        value = {"A": [{"B": 1}]}
        snapshot = copy.deepcopy(value)
        symbolize_keys(value)
        assert value == snapshot


class TestNormalizeResponse:
    def test_action_success(self) -> None:
        body = {
            "result": [
                {"status": "1", "statusmsg": "Account Creation Ok", "options": {"ip": "1.2.3.4"}}
            ]
        }
        assert normalize_response(body) == NormalizedResult(
            success=True,
            message="Account Creation Ok",
            parameters={"options": {"ip": "1.2.3.4"}},
        )

    def test_action_uses_first_record_only(self) -> None:
        body = {
            "result": [
                {"status": 0, "statusmsg": "first", "rawout": "a"},
                {"status": 1, "statusmsg": "second", "rawout": "b"},
            ]
        }
        result = normalize_response(body)
        assert result.success is False
        assert result.message == "first"
        assert result.parameters == {"rawout": "a"}

    def test_action_with_custom_key(self) -> None:
        body = {"data": [{"status": 1, "statusmsg": "Suspended", "User": "bob"}]}
        result = normalize_response(body, result_key="data")
        assert result.success is True
        assert result.parameters == {"user": "bob"}

    @pytest.mark.parametrize("records", [[], "oops", None, [1, 2], {"status": 1}])
    def test_action_with_malformed_records(self, records) -> None:
        result = normalize_response({"result": records})
        assert result == NormalizedResult(success=False, message=None, parameters={})

    def test_action_missing_status(self) -> None:
        result = normalize_response({"result": [{"rawout": "x"}]})
        assert result.success is False
        assert result.message is None
        assert result.parameters == {"rawout": "x"}

    def test_error(self) -> None:
        result = normalize_response({"error": "username already exists"})
        assert result == NormalizedResult(
            success=False, message="username already exists", parameters={}
        )

    def test_query(self) -> None:
        body = {"status": 0, "statusmsg": "notreal does not exist", "rawout": ""}
        assert normalize_response(body) == NormalizedResult(
            success=False, message="notreal does not exist", parameters={"rawout": ""}
        )

    def test_query_success_with_float_status(self) -> None:
        body = {"status": 1.0, "statusmsg": "ok", "Acct": [{"User-Name": "bob"}]}
        result = normalize_response(body)
        assert result.success is True
        assert result.parameters == {"acct": [{"user_name": "bob"}]}

    def test_status_fields_never_in_parameters(self) -> None:
        for body in (
            {"status": 1, "statusmsg": "ok", "x": 1},
            {"result": [{"status": 1, "statusmsg": "ok", "x": 1}]},
        ):
            params = normalize_response(body).parameters
            assert "status" not in params
            assert "statusmsg" not in params

    def test_unknown(self) -> None:
        result = normalize_response({"foo": "bar"})
        assert result.success is False
        assert "foo" in result.message
        assert result.parameters == {}

    def test_unknown_scalar(self) -> None:
        result = normalize_response(42)
        assert result.success is False
        assert "42" in result.message

    def test_body_not_mutated(self) -> None:
        body = {"result": [{"status": 1, "statusmsg": "ok", "Opts": {"A-B": 1}}]}
        snapshot = copy.deepcopy(body)
        normalize_response(body)
        assert body == snapshot

    def test_to_dict(self) -> None:
        result = NormalizedResult(success=True, message="ok", parameters={"a": 1})
        assert result.to_dict() == {"success": True, "message": "ok", "params": {"a": 1}}

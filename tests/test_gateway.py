"""Tests for the REST gateway verbs and response normalization."""

import pytest

from az_arm.azure_api import POST_OK, RestGateway
from az_arm.errors import ApiError, RetryableError
from az_arm.models import HardwareProfile


class TestStatusClassification:
    """Success means the status code starts with "20"."""

    @pytest.mark.parametrize("status", [200, 201, 202, 204, 209])
    def test_codes_starting_with_20_succeed(self, gateway, http, status):
        http.add("GET", "thing", status, {"ok": True})
        assert gateway.get("thing") == {"ok": True}

    @pytest.mark.parametrize("status", [199, 210, 250, 301, 404, 500])
    def test_other_codes_fail(self, gateway, http, status):
        http.add("GET", "thing", status, {"error": {"message": "nope"}})
        with pytest.raises(ApiError, match="nope") as exc_info:
            gateway.get("thing")
        assert exc_info.value.status_code == status

    @pytest.mark.parametrize("verb", ["PUT", "POST", "DELETE"])
    @pytest.mark.parametrize(
        ("status", "succeeds"), [(199, False), (209, True), (210, False), (301, False)]
    )
    def test_boundaries_apply_to_every_verb(self, gateway, http, verb, status, succeeds):
        http.add(verb, "thing", status, None if succeeds else {"error": {"message": "nope"}})
        call = getattr(gateway, verb.lower())
        if succeeds:
            call("thing")
        else:
            with pytest.raises(ApiError, match="nope"):
                call("thing")


class TestRequests:
    def test_leading_slash_is_stripped(self, gateway, http):
        http.add("GET", "providers/x", 200, {})
        gateway.get("/providers/x?api-version=1")
        _, url, _ = http.calls[-1]
        assert url == "https://management.azure.com/subscriptions/sub-1/providers/x?api-version=1"

    def test_session_headers_installed(self, gateway, http):
        assert http.headers == {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": "Bearer fake-token",
        }

    def test_put_serializes_dict_body(self, gateway, http):
        http.add("PUT", "thing", 201, {"id": "x"})
        gateway.put("thing", {"location": "westeurope"})
        _, _, kwargs = http.calls[-1]
        assert kwargs["json"] == {"location": "westeurope"}

    def test_put_serializes_model_body(self, gateway, http):
        http.add("PUT", "thing", 200, {"id": "x"})
        gateway.put("thing", HardwareProfile(vmSize="Standard_B2s"))
        _, _, kwargs = http.calls[-1]
        assert kwargs["json"] == {"vmSize": "Standard_B2s"}

    def test_timeout_passed_to_transport(self, session, http):
        http.add("GET", "thing", 200, {})
        RestGateway(session, timeout=12.5, http=http).get("thing")  # type: ignore[arg-type]
        _, _, kwargs = http.calls[-1]
        assert kwargs["timeout"] == 12.5

    def test_close_closes_transport(self, gateway, http):
        gateway.close()
        assert http.closed


class TestGet:
    def test_returns_parsed_body(self, gateway, http):
        http.add("GET", "thing", 200, {"value": [1, 2]})
        assert gateway.get("thing") == {"value": [1, 2]}

    def test_empty_success_body_is_none(self, gateway, http):
        http.add("GET", "thing", 200)
        assert gateway.get("thing") is None

    def test_malformed_error_envelope_uses_raw_body(self, gateway, http):
        http.add("GET", "thing", 502, "<html>Bad Gateway</html>")
        with pytest.raises(ApiError) as exc_info:
            gateway.get("thing")
        assert exc_info.value.message == "<html>Bad Gateway</html>"
        assert exc_info.value.body == "<html>Bad Gateway</html>"

    def test_envelope_without_message_uses_raw_body(self, gateway, http):
        http.add("GET", "thing", 400, {"error": {"code": "Bad"}})
        with pytest.raises(ApiError) as exc_info:
            gateway.get("thing")
        assert exc_info.value.message == '{"error": {"code": "Bad"}}'

    def test_retryable_message_is_not_classified_on_get(self, gateway, http):
        http.add("GET", "thing", 409, {"error": {"message": "Retryable error"}})
        with pytest.raises(ApiError) as exc_info:
            gateway.get("thing")
        assert type(exc_info.value) is ApiError

    def test_malformed_success_body_raises(self, gateway, http):
        http.add("GET", "thing", 200, "not json")
        with pytest.raises(ApiError, match="Malformed JSON"):
            gateway.get("thing")


class TestDelete:
    @pytest.mark.parametrize("status", [200, 202, 204])
    def test_returns_status_code(self, gateway, http, status):
        http.add("DELETE", "thing", status)
        assert gateway.delete("thing") == status

    def test_error_message_from_envelope(self, gateway, http):
        http.add("DELETE", "thing", 404, {"error": {"message": "Not there"}})
        with pytest.raises(ApiError, match="Not there"):
            gateway.delete("thing")

    def test_sends_no_body(self, gateway, http):
        http.add("DELETE", "thing", 204)
        gateway.delete("thing")
        _, _, kwargs = http.calls[-1]
        assert "json" not in kwargs


class TestRetryableClassification:
    """PUT and POST flag messages containing "retryable error"."""

    @pytest.mark.parametrize("verb", ["PUT", "POST"])
    @pytest.mark.parametrize(
        "message",
        [
            "Retryable error: another operation is in progress",
            "A RETRYABLE ERROR occurred",
            "operation failed with retryable error.",
        ],
    )
    def test_retryable_message(self, gateway, http, verb, message):
        http.add(verb, "thing", 409, {"error": {"message": message}})
        with pytest.raises(RetryableError) as exc_info:
            getattr(gateway, verb.lower())("thing", {})
        assert exc_info.value.message == message
        assert exc_info.value.status_code == 409

    @pytest.mark.parametrize("verb", ["PUT", "POST"])
    def test_other_message_is_plain_api_error(self, gateway, http, verb):
        http.add(verb, "thing", 400, {"error": {"message": "Invalid vmSize"}})
        with pytest.raises(ApiError) as exc_info:
            getattr(gateway, verb.lower())("thing", {})
        assert not isinstance(exc_info.value, RetryableError)
        assert exc_info.value.message == "Invalid vmSize"

    def test_retryable_is_an_api_error(self):
        assert issubclass(RetryableError, ApiError)


class TestPost:
    def test_empty_success_body_returns_ok(self, gateway, http):
        http.add("POST", "vm/start", 202)
        assert gateway.post("vm/start") == POST_OK == "ok"

    def test_json_success_body_returned_unchanged(self, gateway, http):
        body = {"status": "Succeeded", "nested": {"a": [1, 2]}}
        http.add("POST", "vm/action", 200, body)
        assert gateway.post("vm/action", {"x": 1}) == body

    def test_empty_json_object_returned_unchanged(self, gateway, http):
        http.add("POST", "vm/action", 200, {})
        assert gateway.post("vm/action") == {}

    def test_default_body_is_empty_object(self, gateway, http):
        http.add("POST", "vm/start", 202)
        gateway.post("vm/start")
        _, _, kwargs = http.calls[-1]
        assert kwargs["json"] == {}

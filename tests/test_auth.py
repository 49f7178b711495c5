"""Tests for bearer-token acquisition."""

from unittest.mock import MagicMock, patch

import pytest
from azure.core.exceptions import ClientAuthenticationError

from az_arm.azure_api import Session, get_token, get_token_from_credential, open_session
from az_arm.errors import AuthenticationError


class TestGetToken:
    def test_returns_access_token(self, respond):
        resp = respond(200, {"token_type": "Bearer", "access_token": "tok-123"})
        with patch("az_arm.azure_api._auth.requests.post", return_value=resp) as post:
            token = get_token("tenant-1", "app-1", "s3cret")

        assert token == "tok-123"
        post.assert_called_once_with(
            "https://login.windows.net/tenant-1/oauth2/token",
            data={
                "resource": "https://management.core.windows.net/",
                "client_id": "app-1",
                "client_secret": "s3cret",
                "grant_type": "client_credentials",
            },
            timeout=None,
        )

    def test_custom_login_url(self, respond):
        resp = respond(200, {"token_type": "Bearer", "access_token": "tok"})
        with patch("az_arm.azure_api._auth.requests.post", return_value=resp) as post:
            get_token("t", "a", "s", login_url="https://login.example/")
        assert post.call_args.args[0] == "https://login.example/t/oauth2/token"

    @pytest.mark.parametrize(
        "body",
        [
            {"token_type": "MAC", "access_token": "tok"},
            {"token_type": "Bearer"},
            {"token_type": "Bearer", "access_token": ""},
            {},
            None,
        ],
    )
    def test_rejects_non_bearer_responses(self, respond, body):
        resp = respond(200, body)
        with (
            patch("az_arm.azure_api._auth.requests.post", return_value=resp),
            pytest.raises(AuthenticationError, match="Unable to fetch Access Token"),
        ):
            get_token("t", "a", "s")

    def test_error_description_surfaces(self, respond):
        resp = respond(
            401,
            {"error": "invalid_client", "error_description": "AADSTS7000215: Invalid secret."},
        )
        with (
            patch("az_arm.azure_api._auth.requests.post", return_value=resp),
            pytest.raises(AuthenticationError, match="AADSTS7000215"),
        ):
            get_token("t", "a", "bad")

    def test_raw_error_body_surfaces(self, respond):
        resp = respond(500, "upstream down")
        with (
            patch("az_arm.azure_api._auth.requests.post", return_value=resp),
            pytest.raises(AuthenticationError, match="upstream down"),
        ):
            get_token("t", "a", "s")


class TestOpenSession:
    def test_builds_subscription_scoped_session(self, respond):
        resp = respond(200, {"token_type": "Bearer", "access_token": "tok"})
        with patch("az_arm.azure_api._auth.requests.post", return_value=resp):
            session = open_session("t", "sub-9", "a", "s")

        assert session == Session(
            subscription_id="sub-9",
            bearer_token="tok",
            base_url="https://management.azure.com/subscriptions/sub-9/",
        )

    def test_repr_hides_token(self):
        session = Session.for_subscription("sub-1", "very-secret")
        assert "very-secret" not in repr(session)


class TestCredential:
    def test_token_from_credential(self):
        credential = MagicMock()
        credential.get_token.return_value = MagicMock(token="cred-token")
        assert get_token_from_credential(credential, "tenant-1") == "cred-token"
        credential.get_token.assert_called_once_with(
            "https://management.azure.com/.default", tenant_id="tenant-1"
        )

    def test_credential_failure_is_authentication_error(self):
        credential = MagicMock()
        credential.get_token.side_effect = ClientAuthenticationError("no login")
        with pytest.raises(AuthenticationError, match="no login"):
            get_token_from_credential(credential)

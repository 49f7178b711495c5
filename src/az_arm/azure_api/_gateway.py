"""JSON-over-HTTP gateway bound to one subscription."""

from __future__ import annotations

import logging
from typing import Any

import requests

from az_arm.azure_api._auth import Session
from az_arm.azure_api._responses import _error_message, _is_retryable, _is_success
from az_arm.errors import ApiError, RetryableError
from az_arm.models import ArmModel

logger = logging.getLogger(__name__)

#: Returned by :meth:`RestGateway.post` when an action succeeds without a body.
POST_OK = "ok"


class RestGateway:
    """Send ARM requests relative to the subscription URL of a :class:`Session`.

    Paths are relative to ``https://management.azure.com/subscriptions/{id}/``
    and may carry a leading slash.  Every verb normalizes failures into
    :class:`ApiError`; PUT and POST additionally raise
    :class:`RetryableError` when the provider flags the conflict as
    transient.  Nothing is retried here.

    One gateway owns one ``requests.Session`` and is not safe to share
    across threads.
    """

    def __init__(
        self,
        session: Session,
        *,
        timeout: float | None = None,
        http: requests.Session | None = None,
    ) -> None:
        self.session = session
        self.timeout = timeout
        self._http = http if http is not None else requests.Session()
        self._http.headers.update(session.headers)

    def close(self) -> None:
        self._http.close()

    def url_for(self, path: str) -> str:
        return self.session.base_url + path.lstrip("/")

    # -- verbs ---------------------------------------------------------------

    def get(self, path: str) -> Any:
        resp = self._send("GET", path)
        if not _is_success(resp.status_code):
            self._raise_for(resp)
        return self._decode(resp)

    def delete(self, path: str) -> int:
        """Delete and return the raw status code (``200``, ``202`` or ``204``)."""
        resp = self._send("DELETE", path)
        if not _is_success(resp.status_code):
            self._raise_for(resp)
        return resp.status_code

    def put(self, path: str, body: ArmModel | dict | None = None) -> Any:
        resp = self._send("PUT", path, body)
        if not _is_success(resp.status_code):
            self._raise_for(resp, classify=True)
        return self._decode(resp)

    def post(self, path: str, body: ArmModel | dict | None = None) -> Any:
        """POST to an action endpoint; an empty success body yields :data:`POST_OK`."""
        resp = self._send("POST", path, body)
        if not _is_success(resp.status_code):
            self._raise_for(resp, classify=True)
        data = self._decode(resp)
        return POST_OK if data is None else data

    # -- internals -----------------------------------------------------------

    def _send(
        self,
        method: str,
        path: str,
        body: ArmModel | dict | None = None,
    ) -> requests.Response:
        url = self.url_for(path)
        kwargs: dict[str, Any] = {"timeout": self.timeout}
        if method in ("PUT", "POST"):
            kwargs["json"] = body.to_body() if isinstance(body, ArmModel) else (body or {})
        logger.debug("%s %s", method, url)
        return self._http.request(method, url, **kwargs)

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        """Decode a success body; an empty body decodes to ``None``."""
        if not resp.text or not resp.text.strip():
            return None
        try:
            return resp.json()
        except ValueError:
            raise ApiError(
                f"Malformed JSON in response: {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            ) from None

    @staticmethod
    def _raise_for(resp: requests.Response, *, classify: bool = False) -> None:
        body = resp.text or ""
        message = _error_message(body)
        logger.warning("ARM request failed (%s): %s", resp.status_code, message)
        if classify and _is_retryable(message):
            raise RetryableError(message, status_code=resp.status_code, body=body)
        raise ApiError(message, status_code=resp.status_code, body=body)

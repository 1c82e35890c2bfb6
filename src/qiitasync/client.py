"""Core Qiita client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

from .errors import AuthError, DecodeError, EncodeError, NetworkError, RemoteError
from .resources.items import Items
from .utils import dump_request

DEFAULT_HOST = os.environ.get("QIITA_HOST", "qiita.com")
TOKEN_ENV = "QIITA_API_TOKEN"
API_PREFIX = "/api/v2"


class Qiita:
    """Resource-grouped client for the Qiita v2 API."""

    items: Items

    def __init__(
        self,
        *,
        host: Optional[str] = None,
        dry_run: bool = False,
        default_timeout: float = 20,
        session: Optional[requests.Session] = None,
        token_env: str = TOKEN_ENV,
    ) -> None:
        """Create a Qiita client bound to an API host.

        Parameters
        ----------
        host
            Hostname of the Qiita API.
        dry_run
            If True, requests are prepared and printed but never sent.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        token_env
            Environment variable holding the bearer token. It is read on
            every request.
        """
        self.host = host or DEFAULT_HOST
        self.dry_run = dry_run
        self.default_timeout = default_timeout
        self.token_env = token_env
        self.last_request: Optional[requests.PreparedRequest] = None
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.items: Items = Items(self)

    def _build_url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        if not path.startswith(API_PREFIX + "/"):
            path = API_PREFIX + path
        return f"https://{self.host}{path}"

    def _token(self) -> str:
        return os.environ.get(self.token_env, "")

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send a raw request to the Qiita API.

        Parameters
        ----------
        method
            HTTP method (GET, POST, PATCH, DELETE).
        path
            Endpoint path, with or without a leading `/api/v2`.
        params
            Query parameters for the request.
        json
            JSON payload for the request.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, or None for an empty body or a dry run.

        Raises
        ------
        EncodeError
            If ``json`` cannot be serialized.
        AuthError
            If no token is configured, or the service answers 401/403.
        NetworkError
            On connection failures and timeouts.
        RemoteError
            On any other error status.
        DecodeError
            If the response body is not JSON.
        """
        url = self._build_url(path)
        headers = {"Authorization": f"Bearer {self._token()}"}
        if json is not None:
            headers["Content-Type"] = "application/json"

        session = self._session or requests.Session()
        try:
            try:
                prepared = session.prepare_request(
                    requests.Request(method, url, headers=headers, params=params, json=json)
                )
            except (requests.exceptions.InvalidJSONError, TypeError, ValueError) as exc:
                raise EncodeError(str(exc), method=method, url=url, stage="prepare") from exc
            self.last_request = prepared

            if self.dry_run:
                print(dump_request(prepared))
                return None

            if not self._token():
                raise AuthError(
                    f"{self.token_env} is not set",
                    method=method,
                    url=url,
                    stage="prepare",
                )

            self._logger.debug("Sending %s %s", method, url)
            try:
                response = session.send(prepared, timeout=timeout or self.default_timeout)
            except requests.Timeout as exc:
                self._logger.warning("Request timed out for %s %s: %s", method, url, exc)
                raise NetworkError(f"timed out: {exc}", method=method, url=url, stage="transport") from exc
            except requests.RequestException as exc:
                self._logger.warning("Request failed for %s %s: %s", method, url, exc)
                raise NetworkError(str(exc), method=method, url=url, stage="transport") from exc

            try:
                try:
                    content = response.content
                except requests.RequestException as exc:
                    raise NetworkError(
                        f"failed to read response body: {exc}",
                        method=method,
                        url=url,
                        stage="transport",
                    ) from exc
                self._check_status(response, method, url)
            finally:
                response.close()
        finally:
            if self._session is None:
                session.close()

        if not content:
            return None
        try:
            payload = response.json()
        except ValueError as exc:
            self._logger.warning("Response from %s %s was not JSON", method, url)
            raise DecodeError("Response body was not JSON", method=method, url=url, stage="decode") from exc
        if isinstance(payload, (dict, list)):
            return payload
        raise DecodeError(
            f"Response JSON was a {type(payload).__name__}, expected an object or array",
            method=method,
            url=url,
            stage="decode",
        )

    def _check_status(self, response: requests.Response, method: str, url: str) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            # Extract error message from response body if available
            error_msg = str(exc)
            try:
                error_body = response.json()
                if isinstance(error_body, dict):
                    if "message" in error_body:
                        error_msg = f"{exc}\nServer message: {error_body['message']}"
                    elif "error" in error_body:
                        error_msg = f"{exc}\nServer error: {error_body['error']}"
            except ValueError:
                pass  # Response wasn't JSON
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            status_code = response.status_code
            error_cls = AuthError if status_code in (401, 403) else RemoteError
            raise error_cls(
                error_msg,
                method=method,
                url=url,
                stage="status",
                status_code=status_code,
            ) from exc

"""HTTP transport shared by the Jira services: client, response and error types."""

from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import urljoin

import requests


class JiraError(Exception):
    """Raised when a request to Jira fails or its answer cannot be used.

    Carries the response (if one arrived) and the error details that Jira
    reported in the body under ``errorMessages`` and ``errors``.
    """

    def __init__(self, message: str, response: Response | None = None) -> None:
        self.message = message
        self.response = response
        self.error_messages: list[str] = []
        self.errors: dict[str, str] = {}
        if response is not None:
            self._read_details(response)
        super().__init__(self._describe())

    def _read_details(self, response: Response) -> None:
        try:
            body = json.loads(response.content)
        except ValueError:
            return
        if not isinstance(body, dict):
            return
        messages = body.get("errorMessages")
        if isinstance(messages, list):
            self.error_messages = [str(item) for item in messages]
        errors = body.get("errors")
        if isinstance(errors, dict):
            self.errors = {str(key): str(value) for key, value in errors.items()}

    def _describe(self) -> str:
        details = list(self.error_messages)
        details.extend(f"{key} - {value}" for key, value in self.errors.items())
        if not details:
            return self.message
        return f"{self.message}: {', '.join(details)}"


class Response:
    """A successful answer from the Jira API."""

    def __init__(self, raw: requests.Response) -> None:
        self.raw = raw

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.raw.headers

    @property
    def content(self) -> bytes:
        return self.raw.content

    @property
    def text(self) -> str:
        return self.raw.text

    def json(self) -> Any:
        """Decode the body as JSON, raising JiraError if it is not JSON."""
        try:
            return json.loads(self.raw.content)
        except ValueError as exc:
            raise JiraError("could not decode the response body", self) from exc


class Client:
    """Sends requests to a Jira instance rooted at ``base_url``."""

    def __init__(
        self, base_url: str, session: requests.Session | None = None
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.session = session if session is not None else requests.Session()

    def request(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Response:
        """Send ``method`` to ``endpoint`` (relative to the base URL).

        ``payload`` is sent as a JSON body; ``params`` are added to the query
        string. Any status outside 2xx raises JiraError.
        """
        url = urljoin(self.base_url, endpoint.lstrip("/"))
        headers = {"Accept": "application/json"}
        options: dict[str, Any] = {"headers": headers}
        if params:
            options["params"] = dict(params)
        if payload is not None:
            options["json"] = payload
        try:
            raw = self.session.request(method, url, **options)
        except requests.RequestException as exc:
            raise JiraError(f"request to {url} failed: {exc}") from exc
        response = Response(raw)
        if not 200 <= raw.status_code < 300:
            raise JiraError(
                f"request failed with status code {raw.status_code}", response
            )
        return response
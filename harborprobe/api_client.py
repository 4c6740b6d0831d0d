"""HTTP client for the registry REST API with basic authentication."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests

_JSON = "application/json"


class APIError(Exception):
    """Raised when the API answers with an unexpected status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class APIClientConfig:
    """Options for :class:`APIClient`."""

    username: str = ""
    password: str = ""
    ca_file: str = ""
    cert_file: str = ""
    key_file: str = ""
    proxy: str = ""


def _status_text(response: requests.Response) -> str:
    return f"{response.status_code} {response.reason or ''}".strip()


def _error_for(response: requests.Response) -> APIError:
    status = _status_text(response)
    body = response.content
    if body:
        return APIError(
            f"{status}:{body.decode('utf-8', errors='replace')}", response.status_code
        )
    return APIError(status, response.status_code)


class APIClient:
    """Sends JSON requests to the API, trusting the configured CA bundle."""

    def __init__(self, config: APIClientConfig) -> None:
        # Fail early if the CA bundle cannot be read.
        Path(config.ca_file).read_bytes()

        self.config = config
        self._session = requests.Session()
        self._session.verify = config.ca_file
        if config.proxy.strip():
            self._session.proxies = {"http": config.proxy, "https": config.proxy}

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._session.close()

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        return self._session.request(
            method, url, auth=(self.config.username, self.config.password), **kwargs
        )

    def get(self, url: str) -> bytes:
        """Fetch ``url`` and return the response body; only 200 is accepted."""
        if not url.strip():
            raise ValueError("empty url")
        response = self._request("GET", url, headers={"Accept": _JSON})
        if response.status_code != 200:
            raise APIError(_status_text(response), response.status_code)
        return response.content

    def post(self, url: str, data: Optional[bytes]) -> None:
        """Post a JSON body; 200, 201 and 202 count as success."""
        if not url.strip():
            raise ValueError("empty url")
        response = self._request(
            "POST", url, data=data, headers={"Content-Type": _JSON}
        )
        if response.status_code not in (200, 201, 202):
            raise _error_for(response)

    def delete(self, url: str) -> None:
        """Delete the resource at ``url``; only 200 is accepted."""
        if not url.strip():
            raise ValueError("empty url")
        response = self._request("DELETE", url, headers={"Accept": _JSON})
        if response.status_code != 200:
            raise _error_for(response)

    def switch_account(self, username: str, password: str) -> None:
        """Use other credentials; blank values leave the account unchanged."""
        if not username.strip() or not password.strip():
            return
        self.config.username = username
        self.config.password = password
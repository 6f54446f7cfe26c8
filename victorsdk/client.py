"""HTTP client for the vector server's API."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, TypeVar

import requests

from .commands import (
    ClientOptions,
    CreateIndexInput,
    CreateIndexOutput,
    DeleteVectorInput,
    DeleteVectorOutput,
    InsertVectorInput,
    InsertVectorOutput,
    SearchOutput,
    SearchVectorInput,
)
from .routes import (
    create_index_path,
    delete_vector_path,
    insert_vector_path,
    search_vector_path,
)

_log = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = "7007"
DEFAULT_TIMEOUT = 30.0
_LOCAL_HOSTS = ("localhost", "127.0.0.1")
_JSON_HEADERS = {"Content-Type": "application/json"}

_T = TypeVar("_T")


class ApiError(Exception):
    """A request to the server failed or its reply could not be understood."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _error_message(response: requests.Response) -> Optional[str]:
    """The ``message`` of a JSON error body made only of strings, if any."""
    try:
        data = json.loads(response.content)
    except ValueError:
        return None
    if data is None:
        return ""
    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        return None
    return data.get("message", "")


def _decode(response: requests.Response, build: Callable[[Any], _T]) -> _T:
    try:
        data = json.loads(response.content)
        if data is not None and not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return build(data)
    except (ValueError, TypeError) as exc:
        raise ApiError(
            f"failed to decode response: {exc}", response.status_code
        ) from exc


class Client:
    """Talks to a vector server over HTTP."""

    def __init__(self, options: Optional[ClientOptions] = None) -> None:
        if options is None:
            options = ClientOptions()
        host = options.host or DEFAULT_HOST
        port = options.port or DEFAULT_PORT
        self.is_local = host in _LOCAL_HOSTS
        scheme = "http" if self.is_local else "https"
        self.base_url = f"{scheme}://{host}:{port}"
        self.timeout = DEFAULT_TIMEOUT
        self.session = requests.Session()

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            return self.session.request(
                method, url, headers=_JSON_HEADERS, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as exc:
            raise ApiError(f"failed to execute request: {exc}") from exc

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        if response.status_code == requests.codes.ok:
            return
        message = _error_message(response)
        if message is not None:
            raise ApiError(f"API error: {message}", response.status_code)
        raise ApiError(f"API error: status {response.status_code}", response.status_code)

    def create_index(self, command: CreateIndexInput) -> CreateIndexOutput:
        """Create an index on the server."""
        url = self.base_url + create_index_path(command.index_name)
        _log.debug("URL %s %s", url, command.index_name)
        response = self._send("POST", url, data=json.dumps(command.to_dict()))
        _log.debug("RESP %s", response.status_code)
        self._raise_for_status(response)
        return _decode(response, CreateIndexOutput.from_dict)

    def insert_vector(self, command: InsertVectorInput) -> InsertVectorOutput:
        """Store a vector in an index."""
        url = self.base_url + insert_vector_path(command.index_name)
        response = self._send("POST", url, data=json.dumps(command.to_dict()))
        if response.status_code not in (requests.codes.ok, requests.codes.created):
            message = _error_message(response)
            if message:
                raise ApiError(
                    f"API error ({response.status_code}): {message}",
                    response.status_code,
                )
            raise ApiError("failed to decode response: EOF", response.status_code)
        return _decode(response, InsertVectorOutput.from_dict)

    def search_vector(self, command: SearchVectorInput) -> SearchOutput:
        """Find the nearest neighbour of a vector in an index."""
        params = command.query_params()
        url = (
            self.base_url
            + search_vector_path(command.index_name)
            + f"?vector={params['vector']}&k={params['k']}"
        )
        response = self._send("GET", url)
        self._raise_for_status(response)
        return _decode(response, SearchOutput.from_dict)

    def delete_vector(self, command: DeleteVectorInput) -> DeleteVectorOutput:
        """Remove a vector from an index."""
        url = self.base_url + delete_vector_path(command.index_name, command.vector_id)
        response = self._send("DELETE", url)
        self._raise_for_status(response)
        return _decode(response, DeleteVectorOutput.from_dict)

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
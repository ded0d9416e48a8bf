"""
MongoDB Atlas Administration API client.

Provides a session-based client with HTTP digest authentication,
JSON request bodies, typed response decoding, and error handling.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar
from urllib.parse import urljoin

import requests
from pydantic import BaseModel, SecretStr, ValidationError
from requests.auth import HTTPDigestAuth

from atlas_tools.api.response import Response
from atlas_tools.constants import AtlasAPIConfig
from atlas_tools.core.config import AtlasCredentials
from atlas_tools.core.exceptions import (
    APIConnectionError,
    APIDecodeError,
    APIError,
    APINotFoundError,
    APIRateLimitError,
    APITimeoutError,
    APIValidationError,
    InvalidCredentialsError,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class AtlasClient:
    """
    Atlas Administration API client with digest authentication.

    Request construction and execution are separate steps so resource
    services can build a request, then execute it and decode the body
    into the model they expect.

    Usage:
        # From credentials
        client = AtlasClient.from_credentials(creds)

        # Direct instantiation
        client = AtlasClient("public_key", "private_key")

        # Build and execute
        req = client.new_request("GET", "groups/5f1a/integrations")
        resp = client.do(req, IntegrationListResult)
        print(resp.data.total_count)
    """

    DEFAULT_TIMEOUT: int = AtlasAPIConfig.DEFAULT_TIMEOUT

    def __init__(
        self,
        public_key: str,
        private_key: str | SecretStr,
        base_url: str = AtlasAPIConfig.DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the Atlas API client.

        Args:
            public_key: API public key
            private_key: API private key
            base_url: API root; resource paths are resolved against it
            timeout: Default request timeout in seconds
        """
        self.public_key = public_key
        self._private_key = private_key if isinstance(private_key, SecretStr) else SecretStr(private_key)
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self._session = requests.Session()

    @classmethod
    def from_credentials(cls, credentials: AtlasCredentials, timeout: int = DEFAULT_TIMEOUT) -> AtlasClient:
        """
        Create client from AtlasCredentials object.

        Args:
            credentials: AtlasCredentials instance
            timeout: Request timeout in seconds

        Returns:
            Configured AtlasClient instance
        """
        return cls(
            public_key=credentials.public_key,
            private_key=credentials.private_key,
            base_url=credentials.base_url,
            timeout=timeout,
        )

    def _auth(self) -> HTTPDigestAuth:
        return HTTPDigestAuth(self.public_key, self._private_key.get_secret_value())

    @staticmethod
    def _serialize(body: Any) -> str:
        """Serialize a request body to compact JSON."""
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(body, separators=(",", ":"))

    def new_request(self, method: str, path: str, body: Any = None) -> requests.PreparedRequest:
        """
        Build an authenticated request for an API path.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Resource path relative to the API root (e.g. 'groups/{id}/integrations')
            body: Pydantic model or JSON-serializable value; None sends no body

        Returns:
            Prepared request ready for do()
        """
        url = urljoin(self.base_url, path.lstrip("/"))
        headers = {
            "Accept": AtlasAPIConfig.MEDIA_TYPE,
            "User-Agent": AtlasAPIConfig.USER_AGENT,
        }

        data = None
        if body is not None:
            data = self._serialize(body)
            headers["Content-Type"] = AtlasAPIConfig.MEDIA_TYPE

        return self._session.prepare_request(
            requests.Request(
                method=method.upper(),
                url=url,
                headers=headers,
                data=data,
                auth=self._auth(),
            )
        )

    def _check_response(self, response: requests.Response) -> None:
        """
        Raise the matching exception for a non-success response.

        Raises:
            InvalidCredentialsError: For 401 responses
            APINotFoundError: For 404 responses
            APIRateLimitError: For 429 responses
            APIValidationError: For 400 responses
            APIError: For other error responses
        """
        if 200 <= response.status_code < 300:
            return

        try:
            data = response.json()
        except ValueError:
            data = {"raw": response.text}
        if not isinstance(data, dict):
            data = {"raw": data}

        message = data.get("detail") or data.get("reason") or response.text or f"HTTP {response.status_code}"
        error_code = data.get("errorCode")

        if response.status_code == 401:
            raise InvalidCredentialsError(data.get("detail") or "Invalid credentials")

        if response.status_code == 404:
            raise APINotFoundError(response.url, message, data, error_code)

        if response.status_code == 429:
            retry_after = response.headers.get(AtlasAPIConfig.RETRY_AFTER_HEADER)
            raise APIRateLimitError(int(retry_after) if retry_after and retry_after.isdigit() else None)

        if response.status_code == 400:
            raise APIValidationError(message, response.status_code, data, error_code)
        raise APIError(message, response.status_code, data, error_code)

    @staticmethod
    def _decode(response: requests.Response, model: type[ModelT]) -> ModelT:
        """Decode a JSON body into model; an empty body yields the model defaults."""
        if not response.content:
            return model()
        try:
            return model.model_validate(response.json())
        except ValueError as e:
            # pydantic's ValidationError is a ValueError too
            kind = "Unexpected response shape" if isinstance(e, ValidationError) else "Invalid JSON response"
            raise APIDecodeError(f"{kind}: {e}", response.status_code)

    def do(
        self,
        request: requests.PreparedRequest,
        model: type[ModelT] | None = None,
        timeout: float | None = None,
    ) -> Response:
        """
        Execute a prepared request.

        Args:
            request: Request built by new_request()
            model: Pydantic model to decode the body into (None skips decoding)
            timeout: Per-call timeout in seconds (None uses the client default)

        Returns:
            Response metadata; ``data`` holds the decoded model

        Raises:
            APIError: If the API returns an error or the body can't be decoded
            APIConnectionError: If connection fails
            APITimeoutError: If request times out
        """
        logger.debug(f"API {request.method} {request.path_url}")

        # Proxy and CA bundle settings from the environment
        settings = self._session.merge_environment_settings(request.url, {}, None, None, None)

        try:
            raw = self._session.send(
                request,
                timeout=timeout if timeout is not None else self.timeout,
                **settings,
            )
        except requests.exceptions.Timeout as e:
            raise APITimeoutError(f"Request timed out: {e}")
        except requests.exceptions.ConnectionError as e:
            raise APIConnectionError(f"Connection failed: {e}")

        self._check_response(raw)

        response = Response(status_code=raw.status_code, url=raw.url, headers=dict(raw.headers))
        if model is not None:
            response.data = self._decode(raw, model)
        return response

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        model: type[ModelT] | None = None,
        timeout: float | None = None,
    ) -> Response:
        """Build and execute a request in one step."""
        return self.do(self.new_request(method, path, body), model, timeout=timeout)

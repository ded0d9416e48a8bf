"""
Base service class for Atlas API resources.

Provides the client contract, argument validation and request plumbing
shared by resource-specific service classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Protocol, TypeVar

import requests
from pydantic import BaseModel

from atlas_tools.api.response import Response
from atlas_tools.core.exceptions import ArgumentError

ModelT = TypeVar("ModelT", bound=BaseModel)


class APIClient(Protocol):
    """Contract a service needs from the generic API client."""

    def new_request(self, method: str, path: str, body: Any = None) -> requests.PreparedRequest: ...

    def do(
        self,
        request: requests.PreparedRequest,
        model: type[ModelT] | None = None,
        timeout: float | None = None,
    ) -> Response: ...


class BaseService(ABC):
    """
    Base class for Atlas API resource services.

    Subclasses define base_path as a template over the identifiers that
    scope the resource (e.g. 'groups/{project_id}/integrations').

    Usage:
        class IntegrationsService(BaseService):
            @property
            def base_path(self) -> str:
                return "groups/{project_id}/integrations"

        svc = IntegrationsService(client)
        result, resp = svc.list("5f1a...")
    """

    def __init__(self, client: APIClient):
        """
        Initialize service with an authenticated API client.

        Args:
            client: Configured AtlasClient (or any APIClient implementation)
        """
        self.client = client

    @property
    @abstractmethod
    def base_path(self) -> str:
        """Return the base API path template for this resource."""
        ...

    @staticmethod
    def require(argument: str, value: str | Enum) -> str:
        """
        Return the string value of a required identifier.

        Raises:
            ArgumentError: If the value is empty
        """
        text = value.value if isinstance(value, Enum) else value
        if not text:
            raise ArgumentError(argument, "must be set")
        return text

    def path(self, *segments: str, **identifiers: str) -> str:
        """Format base_path with identifiers and append item segments."""
        return "/".join([self.base_path.format(**identifiers), *segments])

    def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        model: type[ModelT] | None = None,
        timeout: float | None = None,
    ) -> Response:
        """Build a request through the client and execute it."""
        request = self.client.new_request(method, path, body)
        return self.client.do(request, model, timeout=timeout)

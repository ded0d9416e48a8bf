"""
Service for Atlas third-party integrations.

Provides operations for managing a project's third-party service
configurations (PagerDuty, Slack, Datadog, etc).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from atlas_tools.api.response import Response
from atlas_tools.constants import AtlasEndpoints
from atlas_tools.models.integrations import (
    IntegrationConfig,
    IntegrationListResult,
    IntegrationType,
    IntegrationVariant,
)
from atlas_tools.services.base import APIClient, BaseService

ConfigBody = Union[IntegrationConfig, IntegrationVariant, Mapping[str, Any]]


class IntegrationsService(BaseService):
    """
    Service for managing a project's third-party integrations.

    Atlas keeps at most one configuration per integration type per
    project, so the type doubles as the item identifier.

    Usage:
        svc = IntegrationsService(client)
        result, resp = svc.create("5f1a...", IntegrationType.SLACK,
                                  SlackIntegration(api_token="xoxb-...", channel_name="alerts"))
        config, resp = svc.get("5f1a...", "SLACK")
    """

    @property
    def base_path(self) -> str:
        return AtlasEndpoints.INTEGRATIONS

    @staticmethod
    def _body(config: ConfigBody) -> IntegrationConfig:
        if isinstance(config, IntegrationConfig):
            return config
        if isinstance(config, IntegrationVariant):
            return config.to_config()
        return IntegrationConfig.model_validate(dict(config))

    def _item_path(self, project_id: str, integration_type: str | IntegrationType) -> str:
        project = self.require("projectID", project_id)
        kind = self.require("integrationType", integration_type)
        return self.path(kind, project_id=project)

    def _write(
        self,
        method: str,
        project_id: str,
        integration_type: str | IntegrationType,
        config: ConfigBody,
        timeout: float | None,
    ) -> tuple[IntegrationListResult, Response]:
        path = self._item_path(project_id, integration_type)
        response = self.send(method, path, self._body(config), IntegrationListResult, timeout=timeout)
        root: IntegrationListResult = response.data
        if root.links:
            response.links = root.links
        return root, response

    def create(
        self,
        project_id: str,
        integration_type: str | IntegrationType,
        config: ConfigBody,
        timeout: float | None = None,
    ) -> tuple[IntegrationListResult, Response]:
        """
        Add a third-party integration configuration to a project.

        Args:
            project_id: Project (group) ID
            integration_type: Integration type, e.g. 'PAGER_DUTY' or IntegrationType.SLACK
            config: Configuration as IntegrationConfig, a typed variant, or a mapping
            timeout: Per-call timeout passed through to the client

        Returns:
            Tuple of (updated integration list, response metadata)

        Raises:
            ArgumentError: If project_id or integration_type is empty
        """
        return self._write("POST", project_id, integration_type, config, timeout)

    def replace(
        self,
        project_id: str,
        integration_type: str | IntegrationType,
        config: ConfigBody,
        timeout: float | None = None,
    ) -> tuple[IntegrationListResult, Response]:
        """
        Replace an integration configuration, creating it if absent.

        The new configuration fully overwrites the old one; fields left
        unset are not carried over.

        Returns:
            Tuple of (updated integration list, response metadata)
        """
        return self._write("PUT", project_id, integration_type, config, timeout)

    def delete(
        self,
        project_id: str,
        integration_type: str | IntegrationType,
        timeout: float | None = None,
    ) -> Response:
        """
        Remove an integration configuration from a project.

        Errors from the API are raised, including when the
        configuration does not exist.

        Returns:
            Response metadata
        """
        path = self._item_path(project_id, integration_type)
        return self.send("DELETE", path, timeout=timeout)

    def get(
        self,
        project_id: str,
        integration_type: str | IntegrationType,
        timeout: float | None = None,
    ) -> tuple[IntegrationConfig, Response]:
        """
        Get the configuration for one integration type.

        Returns:
            Tuple of (integration configuration, response metadata)

        Raises:
            APINotFoundError: If the project has no configuration of that type
        """
        path = self._item_path(project_id, integration_type)
        response = self.send("GET", path, model=IntegrationConfig, timeout=timeout)
        return response.data, response

    def list(
        self,
        project_id: str,
        timeout: float | None = None,
    ) -> tuple[IntegrationListResult, Response]:
        """
        List all integration configurations for a project.

        Returns:
            Tuple of (integration list, response metadata)
        """
        path = self.path(project_id=self.require("projectID", project_id))
        response = self.send("GET", path, model=IntegrationListResult, timeout=timeout)
        root: IntegrationListResult = response.data
        if root.links:
            response.links = root.links
        return root, response


def integrations_service(client: APIClient) -> IntegrationsService:
    """Create an IntegrationsService instance."""
    return IntegrationsService(client)

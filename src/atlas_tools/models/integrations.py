"""
Third-party integration models.

Atlas stores one configuration per external service type per project
(PagerDuty, Slack, Datadog, ...). On the wire every type shares a single
flat object whose fields are the union of all provider-specific settings.
IntegrationConfig mirrors that object exactly; the IntegrationVariant
subclasses give a per-type view carrying only the relevant fields.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from atlas_tools.core.exceptions import ConfigValidationError
from atlas_tools.models.common import Link


class IntegrationType(str, Enum):
    """Third-party service types known to Atlas."""

    PAGER_DUTY = "PAGER_DUTY"
    SLACK = "SLACK"
    DATADOG = "DATADOG"
    NEW_RELIC = "NEW_RELIC"
    OPS_GENIE = "OPS_GENIE"
    VICTOR_OPS = "VICTOR_OPS"
    FLOWDOCK = "FLOWDOCK"
    WEBHOOK = "WEBHOOK"


class IntegrationConfig(BaseModel):
    """
    Connection settings for one third-party service.

    Only the fields relevant to ``type`` are meaningful; Atlas validates
    the field/type correspondence. Empty strings are treated as unset so
    they are omitted from the wire payload.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    type: str | None = None
    license_key: str | None = None
    account_id: str | None = None
    write_token: str | None = None
    read_token: str | None = None
    api_key: str | None = None
    region: str | None = None
    service_key: str | None = None
    api_token: str | None = None
    team_name: str | None = None
    channel_name: str | None = None
    routing_key: str | None = None
    flow_name: str | None = None
    org_name: str | None = None
    url: str | None = None
    secret: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def empty_to_none(cls, v: Any) -> Any:
        if isinstance(v, Enum):
            v = v.value
        return None if v == "" else v

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the wire representation, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def as_variant(self) -> IntegrationVariant:
        """
        Project this flat configuration onto its typed variant.

        Returns:
            The IntegrationVariant subclass instance matching ``type``

        Raises:
            ConfigValidationError: If type is unset or not a known integration type
        """
        if not self.type:
            raise ConfigValidationError("type", self.type, "integration type is not set")
        variant_cls = VARIANTS.get(self.type)
        if variant_cls is None:
            raise ConfigValidationError("type", self.type, "unknown integration type")
        return variant_cls.model_validate(self.model_dump(include=set(variant_cls.model_fields)))


class IntegrationListResult(BaseModel):
    """
    Envelope returned by list, create and replace.

    Attributes:
        links: Hypermedia links for the result page
        results: Configured integrations for the project
        total_count: Total number of configured integrations
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    links: list[Link] = Field(default_factory=list)
    results: list[IntegrationConfig] = Field(default_factory=list)
    total_count: int = 0

    def find(self, integration_type: IntegrationType | str) -> IntegrationConfig | None:
        """Return the configuration for a type, or None if it is not configured."""
        wanted = integration_type.value if isinstance(integration_type, Enum) else integration_type
        for config in self.results:
            if config.type == wanted:
                return config
        return None


# =============================================================================
# Typed variant views
# =============================================================================


class IntegrationVariant(BaseModel):
    """Base class for per-type integration views."""

    model_config = ConfigDict(extra="forbid")

    integration_type: ClassVar[IntegrationType]

    def to_config(self) -> IntegrationConfig:
        """Flatten back to the wire model with ``type`` filled in."""
        return IntegrationConfig(type=self.integration_type.value, **self.model_dump())


class PagerDutyIntegration(IntegrationVariant):
    integration_type: ClassVar[IntegrationType] = IntegrationType.PAGER_DUTY

    service_key: str | None = None


class SlackIntegration(IntegrationVariant):
    integration_type: ClassVar[IntegrationType] = IntegrationType.SLACK

    api_token: str | None = None
    team_name: str | None = None
    channel_name: str | None = None


class DatadogIntegration(IntegrationVariant):
    integration_type: ClassVar[IntegrationType] = IntegrationType.DATADOG

    api_key: str | None = None
    region: str | None = None


class NewRelicIntegration(IntegrationVariant):
    integration_type: ClassVar[IntegrationType] = IntegrationType.NEW_RELIC

    license_key: str | None = None
    account_id: str | None = None
    write_token: str | None = None
    read_token: str | None = None


class OpsGenieIntegration(IntegrationVariant):
    integration_type: ClassVar[IntegrationType] = IntegrationType.OPS_GENIE

    api_key: str | None = None
    region: str | None = None


class VictorOpsIntegration(IntegrationVariant):
    integration_type: ClassVar[IntegrationType] = IntegrationType.VICTOR_OPS

    api_key: str | None = None
    routing_key: str | None = None


class FlowdockIntegration(IntegrationVariant):
    integration_type: ClassVar[IntegrationType] = IntegrationType.FLOWDOCK

    flow_name: str | None = None
    api_token: str | None = None
    org_name: str | None = None


class WebhookIntegration(IntegrationVariant):
    integration_type: ClassVar[IntegrationType] = IntegrationType.WEBHOOK

    url: str | None = None
    secret: str | None = None


# Mapping of integration type values to their variant view
VARIANTS: dict[str, type[IntegrationVariant]] = {
    cls.integration_type.value: cls
    for cls in (
        PagerDutyIntegration,
        SlackIntegration,
        DatadogIntegration,
        NewRelicIntegration,
        OpsGenieIntegration,
        VictorOpsIntegration,
        FlowdockIntegration,
        WebhookIntegration,
    )
}

"""
Pydantic models for atlas-tools.

Contains data models for:
- Common: Hypermedia links shared by Atlas responses
- Integrations: Third-party service configurations and their envelope
"""

from __future__ import annotations

from atlas_tools.models.common import Link
from atlas_tools.models.integrations import (
    DatadogIntegration,
    FlowdockIntegration,
    IntegrationConfig,
    IntegrationListResult,
    IntegrationType,
    IntegrationVariant,
    NewRelicIntegration,
    OpsGenieIntegration,
    PagerDutyIntegration,
    SlackIntegration,
    VictorOpsIntegration,
    WebhookIntegration,
)

__all__ = [
    "Link",
    "IntegrationType",
    "IntegrationConfig",
    "IntegrationListResult",
    "IntegrationVariant",
    "PagerDutyIntegration",
    "SlackIntegration",
    "DatadogIntegration",
    "NewRelicIntegration",
    "OpsGenieIntegration",
    "VictorOpsIntegration",
    "FlowdockIntegration",
    "WebhookIntegration",
]

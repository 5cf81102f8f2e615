"""
Weather Alert Tools

Active US weather alerts from the National Weather Service API.
Every failure is returned as text in the result envelope; nothing is raised.
"""

import logging
from typing import Any, Dict, List, Optional, Type

import httpx
from pydantic import Field

from ..base import MCPTool, ToolArguments, ToolResult
from ..config import Settings

logger = logging.getLogger(__name__)

NO_ALERTS = "No active alerts for this state."
ALERT_SEPARATOR = "\n---\n"


class GetAlertsArguments(ToolArguments):
    state: str = Field(
        min_length=2,
        max_length=2,
        description="Two-letter US state code (e.g. CA, NY, IL)",
    )


def format_alert(properties: Dict[str, Any]) -> str:
    """Render one alert feature's properties as a 5-line block."""
    return "\n".join([
        f"Event: {properties.get('event') or 'Unknown'}",
        f"Area: {properties.get('areaDesc') or 'Unknown'}",
        f"Severity: {properties.get('severity') or 'Unknown'}",
        f"Description: {properties.get('description') or 'No description available'}",
        f"Instructions: {properties.get('instruction') or 'No specific instructions provided'}",
    ])


def format_alerts(data: Any) -> str:
    """Turn an NWS GeoJSON body into the tool's text output."""
    if not isinstance(data, dict):
        raise ValueError(f"Unexpected response body: expected a JSON object, got {type(data).__name__}")

    features = data.get("features")
    if not features:
        return NO_ALERTS
    if not isinstance(features, list):
        raise ValueError("Unexpected response body: 'features' is not a list")

    blocks: List[str] = []
    for feature in features:
        if not isinstance(feature, dict):
            raise ValueError("Unexpected response body: feature is not an object")
        blocks.append(format_alert(feature.get("properties") or {}))

    return ALERT_SEPARATOR.join(blocks)


class GetAlertsTool(MCPTool):
    """
    Look up active weather alerts for a US state.

    Issues a single GET to {api_base}/alerts/active/area/{STATE}.
    A transport can be injected for testing (httpx.MockTransport).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or Settings()
        self.transport = transport

    @property
    def name(self) -> str:
        return "get_alerts"

    @property
    def description(self) -> str:
        return "Get active weather alerts for a US state"

    @property
    def arguments(self) -> Type[ToolArguments]:
        return GetAlertsArguments

    def alerts_url(self, state: str) -> str:
        return f"{self.settings.nws_api_base}/alerts/active/area/{state.upper()}"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.settings.nws_user_agent,
            "Accept": "application/geo+json",
        }

    async def execute(self, args: GetAlertsArguments) -> ToolResult:
        url = self.alerts_url(args.state)
        logger.info(f"Fetching alerts: {url}")

        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.settings.nws_timeout,
            ) as client:
                response = await client.get(url, headers=self.headers)

                if not response.is_success:
                    logger.warning(f"NWS API error: {response.status_code} {response.reason_phrase}")
                    return ToolResult.text(
                        f"Error fetching alerts: {response.status_code} {response.reason_phrase}"
                    )

                return ToolResult.text(format_alerts(response.json()))

        except Exception as e:
            logger.warning(f"Failed to fetch weather alerts from {url}: {e!r}")
            return ToolResult.text(f"Error fetching weather alerts: {str(e) or repr(e)}")

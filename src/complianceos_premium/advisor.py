"""HTTP client for the advisor service.

The advisor is an opaque remote endpoint: each operation posts a JSON body
to ``<base_url>/<operation>`` and reads a JSON object back.
"""

import logging
import os
from typing import Any

import httpx

from complianceos_core.config import get_config_loader
from complianceos_core.errors import create_error

logger = logging.getLogger(__name__)

ADVISOR_URL_ENV_VAR = "COMPLIANCEOS_ADVISOR_URL"
DEFAULT_ADVISOR_URL = "http://localhost:3002/api/ai"


class AdvisorClient:
    """Posts advisor operations and returns their JSON results."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize advisor client.

        Args:
            base_url: Advisor root URL (defaults to COMPLIANCEOS_ADVISOR_URL)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        base_url = base_url or os.environ.get(ADVISOR_URL_ENV_VAR) or DEFAULT_ADVISOR_URL
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def call(self, operation: str, tenant_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Run one advisor operation.

        Raises:
            ComplianceError: ADVISOR_REQUEST_FAILED on transport errors,
                non-2xx responses or a body that is not a JSON object
        """
        url = f"{self.base_url}/{operation}"
        body = {"tenant_id": tenant_id, **payload}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=body)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise create_error(
                "ADVISOR_REQUEST_FAILED",
                capability=operation,
                tenant_id=tenant_id,
                detail=f"Advisor returned {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            raise create_error(
                "ADVISOR_REQUEST_FAILED",
                capability=operation,
                tenant_id=tenant_id,
                detail=f"Cannot reach advisor at {self.base_url}: {e}",
            ) from e
        except ValueError as e:
            raise create_error(
                "ADVISOR_REQUEST_FAILED",
                capability=operation,
                tenant_id=tenant_id,
                detail="Advisor response is not valid JSON",
            ) from e

        if not isinstance(data, dict):
            raise create_error(
                "ADVISOR_REQUEST_FAILED",
                capability=operation,
                tenant_id=tenant_id,
                detail="Advisor response is not a JSON object",
            )

        logger.debug("Advisor %s completed for tenant %s", operation, tenant_id)
        return data


# Shared client (configured at startup)
_client: AdvisorClient | None = None


def _client_from_config() -> AdvisorClient:
    """Environment URL first, then the loaded config, then the default."""
    loader = get_config_loader()
    if not loader.is_loaded:
        return AdvisorClient()
    advisor = loader.get().advisor
    return AdvisorClient(
        base_url=os.environ.get(ADVISOR_URL_ENV_VAR) or advisor.base_url,
        timeout=advisor.timeout,
    )


def get_advisor_client() -> AdvisorClient:
    global _client
    if _client is None:
        _client = _client_from_config()
    return _client


def set_advisor_client(client: AdvisorClient) -> None:
    global _client
    _client = client


def reset_advisor_client() -> None:
    """Reset the shared client (for testing)."""
    global _client
    _client = None

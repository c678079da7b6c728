import asyncio
from urllib.parse import urlencode

import httpx
import structlog

from status_api.config import Settings, settings as default_settings
from status_api.core.exceptions import UpstreamError

logger = structlog.get_logger()

HOST_STATUS_COMMAND = "getHostStatus"
REDACTED = "HIDDEN"


def create_http_client(settings: Settings = default_settings) -> httpx.AsyncClient:
    """Shared outbound client with per-phase timeouts taken from settings."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=settings.http_connect_timeout,
            read=settings.http_read_timeout,
            write=settings.http_write_timeout,
            pool=settings.http_pool_timeout,
        )
    )


def create_wormly_client(settings: Settings = default_settings) -> "WormlyClient":
    return WormlyClient(
        base_url=settings.wormly_base_url,
        api_key=settings.wormly_api_key,
        http_client=create_http_client(settings),
        deadline=settings.http_total_timeout,
    )


class WormlyClient:
    """Thin async client for the Wormly HTTP API.

    httpx timeouts apply per phase (a slow trickle of bytes resets the read
    timeout), so every call is also bounded by ``deadline`` seconds in total.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        deadline: float | None = 30.0,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.deadline = deadline
        self._client = http_client or create_http_client()

    @property
    def key_configured(self) -> bool:
        return bool(self.api_key)

    def _params(self, command: str) -> dict[str, str]:
        return {"key": self.api_key or "", "response": "json", "cmd": command}

    def request_url(self, command: str = HOST_STATUS_COMMAND, redact: bool = True) -> str:
        """Full request URL, with the API key replaced by HIDDEN unless redact is False."""
        params = self._params(command)
        if redact:
            params["key"] = REDACTED
        return f"{self.base_url}?{urlencode(params)}"

    async def get_host_status(self) -> dict:
        """Fetch the raw getHostStatus payload.

        Transport failures, non-2xx responses, undecodable bodies and an
        exceeded deadline raise UpstreamError. The vendor errorcode is
        returned untouched.
        """
        try:
            async with asyncio.timeout(self.deadline):
                response = await self._client.get(self.base_url, params=self._params(HOST_STATUS_COMMAND))
            response.raise_for_status()
            data = response.json()
        except TimeoutError:
            raise UpstreamError(f"Wormly API request exceeded the {self.deadline}s deadline.")
        except httpx.TimeoutException:
            raise UpstreamError("Wormly API request timed out.")
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"Wormly API returned HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            raise UpstreamError(f"Cannot connect to Wormly at {self.base_url}: {e}")
        except ValueError:
            raise UpstreamError("Wormly API returned a non-JSON response.")

        if not isinstance(data, dict):
            raise UpstreamError("Wormly API returned an unexpected payload.")
        return data

    async def close(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()

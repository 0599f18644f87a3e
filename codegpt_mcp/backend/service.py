"""HTTP access to the CodeGPT backend."""

from typing import Any, Dict, Optional

import httpx

from ..core import BaseService, NetworkError, NotInitializedError
from ..config import BackendConfig


ORG_ID_HEADER = "CodeGPT-Org-Id"


class BackendService(BaseService):
    """Owns the shared ``httpx.AsyncClient`` used by every tool."""

    def __init__(
        self,
        config: BackendConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        super().__init__(config=config)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _initialize(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.config.api_base,
            timeout=self.config.timeout,
            transport=self._transport,
        )
        self._logger.info(f"BackendService initialized for {self.config.api_base}")

    async def _shutdown(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def headers(self, method: str) -> Dict[str, str]:
        """Headers sent with a request of the given method."""
        headers = {
            "accept": "application/json",
            "authorization": f"Bearer {self.config.api_key.get_secret_value()}",
            ORG_ID_HEADER: self.config.org_id,
        }
        if method.upper() == "POST":
            headers["content-type"] = "application/json"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """Send one request and return the response whatever its status.

        Raises:
            NetworkError: when no response could be obtained.
        """
        if not self._client:
            raise NotInitializedError("BackendService")

        self._logger.debug(f"{method} {path}")
        try:
            return await self._client.request(
                method,
                path,
                headers=self.headers(method),
                json=body,
            )
        except httpx.HTTPError as e:
            url = f"{self.config.api_base}{path}"
            raise NetworkError(str(e) or e.__class__.__name__, url=url) from e

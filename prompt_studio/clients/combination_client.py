"""HTTP client for the combinations endpoints of a prompt-studio service."""

import logging
from typing import Dict, List, Optional

import httpx

from prompt_studio.domain import PromptCombination
from prompt_studio.exceptions import CombinationStorageError
from prompt_studio.models.responses import CombinationResponse

logger = logging.getLogger(__name__)


class CombinationClient:
    """
    HTTP combination bridge.

    Used by a composer that runs outside the service process. Non-2xx
    responses surface as CombinationStorageError carrying the server's
    ``message`` when the body has one.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        api_prefix: str = "/api",
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize combination client.

        Args:
            base_url: Base URL of prompt-studio (e.g., http://localhost:5000)
            timeout: Request timeout in seconds
            api_prefix: Prefix the API routers are mounted under
            transport: Optional httpx transport (ASGI or mock transports in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self) -> "CombinationClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    def _get_headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"HTTP {response.status_code}"

    async def create_combination(
        self,
        name: str,
        prompt_ids: List[int],
        order: List[int]
    ) -> PromptCombination:
        """
        Create a combination.

        Returns:
            The stored combination

        Raises:
            CombinationStorageError: On a non-2xx response or transport failure
        """
        url = f"{self.base_url}{self.api_prefix}/combinations"
        payload = {"name": name, "promptIds": list(prompt_ids), "order": list(order)}

        try:
            response = await self.client.post(url, json=payload, headers=self._get_headers())
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach combination storage: {e}")
            raise CombinationStorageError(f"Storage unreachable: {e}") from e

        if not response.is_success:
            message = self._error_message(response)
            logger.error(f"Failed to create combination: HTTP {response.status_code} {message}")
            raise CombinationStorageError(message, status_code=response.status_code)

        return CombinationResponse.model_validate(response.json()).to_domain()

    async def list_combinations(self) -> List[PromptCombination]:
        """List stored combinations"""
        url = f"{self.base_url}{self.api_prefix}/combinations"

        try:
            response = await self.client.get(url, headers=self._get_headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to list combinations: HTTP {e.response.status_code}")
            raise CombinationStorageError(self._error_message(e.response), status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to list combinations: {e}")
            raise CombinationStorageError(f"Storage unreachable: {e}") from e

        return [CombinationResponse.model_validate(item).to_domain() for item in response.json()]

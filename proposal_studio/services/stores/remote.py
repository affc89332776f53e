"""Remote store: JSON over HTTP against a configured base URL.

Endpoints:
    GET    /proposals                 -> list of proposals
    POST   /proposals                 <- one proposal (upsert)
    DELETE /proposals/{id}
    GET    /account-executives        -> list of AEs
    PUT    /account-executives        <- whole list
    GET    /settings/prompt           -> {"value": str | null}; 404 = no custom prompt
    PUT    /settings/prompt           <- {"value": str}

Any non-2xx status or transport exception raises StorageError.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from proposal_studio.config import StorageMode
from proposal_studio.exceptions import StorageError
from proposal_studio.models import AccountExecutive, SavedProposal

from .base import ProposalStore

logger = logging.getLogger(__name__)


class RemoteStore(ProposalStore):
    """HTTP API backed store shared by the whole team."""

    mode = StorageMode.REMOTE

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )
        logger.info(f"[RemoteStore] using {self.base_url}")

    # ==================== Proposals ====================

    async def list_proposals(self) -> list[SavedProposal]:
        response = await self._request("GET", "/proposals")
        return self._validate_list(response, SavedProposal)

    async def save_proposal(self, proposal: SavedProposal) -> None:
        await self._request("POST", "/proposals", json=proposal.to_wire())

    async def delete_proposal(self, proposal_id: str) -> bool:
        await self._request("DELETE", f"/proposals/{quote(proposal_id, safe='')}")
        return True

    # ==================== Account executives ====================

    async def list_account_executives(self) -> list[AccountExecutive]:
        response = await self._request("GET", "/account-executives")
        return self._validate_list(response, AccountExecutive)

    async def save_account_executives(self, account_executives: list[AccountExecutive]) -> None:
        await self._request(
            "PUT", "/account-executives", json=[ae.to_wire() for ae in account_executives]
        )

    # ==================== Shared prompt ====================

    async def get_prompt(self) -> Optional[str]:
        response = await self._request("GET", "/settings/prompt", allow_not_found=True)
        if response is None:
            return None
        body = self._json(response)
        value = body.get("value") if isinstance(body, dict) else None
        return value if isinstance(value, str) else None

    async def set_prompt(self, value: str) -> None:
        await self._request("PUT", "/settings/prompt", json={"value": value})

    async def close(self) -> None:
        await self._client.aclose()

    # ==================== Internal helpers ====================

    async def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        allow_not_found: bool = False,
    ) -> Optional[httpx.Response]:
        """Issue one request; None only for an allowed 404."""
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.RequestError as e:
            logger.error(f"[RemoteStore] {method} {path} failed: {e}")
            raise StorageError(
                "Remote store is unreachable",
                details={"method": method, "path": path, "error": str(e)},
            ) from e

        if allow_not_found and response.status_code == 404:
            return None

        if not response.is_success:
            logger.error(
                f"[RemoteStore] {method} {path} returned {response.status_code}: {response.text[:200]}"
            )
            raise StorageError(
                f"Remote store returned {response.status_code}",
                details={"method": method, "path": path, "status_code": response.status_code},
            )
        return response

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise StorageError(
                "Remote store returned invalid JSON",
                details={"url": str(response.request.url)},
            ) from e

    def _validate_list(self, response: httpx.Response, model_class):
        body = self._json(response)
        if not isinstance(body, list):
            raise StorageError(
                "Remote store returned an unexpected payload",
                details={"url": str(response.request.url)},
            )
        try:
            return [model_class.model_validate(item) for item in body]
        except ValidationError as e:
            raise StorageError(
                "Remote store returned invalid records",
                details={"url": str(response.request.url), "errors": e.error_count()},
            ) from e

"""
Local store: durable key/value storage on the local disk.

Each resource lives under one fixed key, stored as one JSON document:
1. proposals_v1            - list of saved proposals
2. account_executives_v2   - list of account executives
3. prompt_v1               - custom prompt template (JSON string)

Every access re-reads or re-writes the whole document; nothing is cached.
Read-modify-write cycles on one key are serialized by a per-key asyncio.Lock,
and documents are replaced atomically (temp file + os.replace), so readers
never see a half-written file.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

import aiofiles
import aiofiles.os
from pydantic import ValidationError

from proposal_studio.config import StorageMode
from proposal_studio.exceptions import StorageError
from proposal_studio.models import AccountExecutive, DEFAULT_ACCOUNT_EXECUTIVES, SavedProposal

from .base import ProposalStore

logger = logging.getLogger(__name__)

PROPOSALS_KEY = "proposals_v1"
ACCOUNT_EXECUTIVES_KEY = "account_executives_v2"
PROMPT_KEY = "prompt_v1"

_MISSING = object()


class LocalStore(ProposalStore):
    """JSON-file key/value store scoped to this machine."""

    mode = StorageMode.LOCAL

    def __init__(self, base_path: str = "data/store"):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, asyncio.Lock] = {}
        logger.info(f"[LocalStore] using {self.base_path.resolve()}")

    # ==================== Proposals ====================

    async def list_proposals(self) -> list[SavedProposal]:
        raw = await self._read_key(PROPOSALS_KEY)
        if raw is _MISSING:
            return []
        return self._validate_list(PROPOSALS_KEY, raw, SavedProposal)

    async def save_proposal(self, proposal: SavedProposal) -> None:
        async with self._lock(PROPOSALS_KEY):
            proposals = [p for p in await self.list_proposals() if p.id != proposal.id]
            proposals.append(proposal)
            await self._write_key(PROPOSALS_KEY, [p.to_wire() for p in proposals])

    async def delete_proposal(self, proposal_id: str) -> bool:
        async with self._lock(PROPOSALS_KEY):
            proposals = await self.list_proposals()
            remaining = [p for p in proposals if p.id != proposal_id]
            if len(remaining) == len(proposals):
                return False
            await self._write_key(PROPOSALS_KEY, [p.to_wire() for p in remaining])
            return True

    # ==================== Account executives ====================

    async def list_account_executives(self) -> list[AccountExecutive]:
        raw = await self._read_key(ACCOUNT_EXECUTIVES_KEY)
        if raw is _MISSING:
            # First run on this machine: seed the defaults
            defaults = list(DEFAULT_ACCOUNT_EXECUTIVES)
            await self.save_account_executives(defaults)
            return defaults
        return self._validate_list(ACCOUNT_EXECUTIVES_KEY, raw, AccountExecutive)

    async def save_account_executives(self, account_executives: list[AccountExecutive]) -> None:
        async with self._lock(ACCOUNT_EXECUTIVES_KEY):
            await self._write_key(ACCOUNT_EXECUTIVES_KEY, [ae.to_wire() for ae in account_executives])

    # ==================== Shared prompt ====================

    async def get_prompt(self) -> Optional[str]:
        raw = await self._read_key(PROMPT_KEY)
        if raw is _MISSING or raw is None:
            return None
        if not isinstance(raw, str):
            raise StorageError(
                f"Corrupt value under key: {PROMPT_KEY}",
                details={"key": PROMPT_KEY, "type": type(raw).__name__},
            )
        return raw

    async def set_prompt(self, value: str) -> None:
        async with self._lock(PROMPT_KEY):
            await self._write_key(PROMPT_KEY, value)

    # ==================== Internal helpers ====================

    def _key_path(self, key: str) -> Path:
        return self.base_path / f"{key}.json"

    def _lock(self, key: str) -> asyncio.Lock:
        if key not in self._locks:
            self._locks[key] = asyncio.Lock()
        return self._locks[key]

    async def _read_key(self, key: str) -> Any:
        """Read and decode one key; returns _MISSING when the key was never written."""
        file_path = self._key_path(key)
        if not file_path.exists():
            return _MISSING

        try:
            async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                content = await f.read()
            return json.loads(content)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"[LocalStore] failed to read {file_path}: {e}", exc_info=True)
            raise StorageError(
                f"Failed to read key: {key}",
                details={"path": str(file_path), "error": str(e)},
            ) from e

    async def _write_key(self, key: str, value: Any) -> None:
        """Write the whole document to a temp file, then swap it in."""
        file_path = self._key_path(key)
        tmp_path = file_path.with_name(f"{file_path.name}.tmp")
        try:
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(value, ensure_ascii=False, indent=2))
            await aiofiles.os.replace(tmp_path, file_path)
        except OSError as e:
            logger.error(f"[LocalStore] failed to write {file_path}: {e}", exc_info=True)
            raise StorageError(
                f"Failed to write key: {key}",
                details={"path": str(file_path), "error": str(e)},
            ) from e

    def _validate_list(self, key: str, raw: Any, model_class):
        if not isinstance(raw, list):
            raise StorageError(f"Corrupt value under key: {key}", details={"key": key})
        try:
            return [model_class.model_validate(item) for item in raw]
        except ValidationError as e:
            logger.error(f"[LocalStore] invalid records under {key}: {e.error_count()} errors")
            raise StorageError(f"Corrupt value under key: {key}", details={"key": key}) from e

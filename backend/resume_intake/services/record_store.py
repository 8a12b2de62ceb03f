"""
Record Store — YAML-backed persistence for extracted resume records.

Records are upserted by id and persisted to settings.records_path so they
survive server restarts. The file is loaded lazily on first access. Every
write rewrites the whole file, so writes share one store-wide asyncio.Lock.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import yaml

from resume_intake.config import settings
from resume_intake.models.resume_models import StoredResume

logger = logging.getLogger(__name__)


class ResumeRecordStore:
    """Keyed upsert store for StoredResume entries."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._records: dict[str, StoredResume] | None = None
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ── YAML Persistence ────────────────────────────────────────────────────

    def _load_from_yaml(self) -> dict[str, StoredResume]:
        """Load records from the YAML file into memory."""
        if not self._path.exists():
            return {}

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to read {self._path}: {e}")
            return {}

        if not raw or not isinstance(raw, dict):
            return {}

        items = raw.get("records", [])
        if not isinstance(items, list):
            return {}

        records: dict[str, StoredResume] = {}
        for item in items:
            if not isinstance(item, dict):
                continue
            try:
                entry = StoredResume.model_validate(item)
            except ValueError as e:
                logger.warning(f"Skipping invalid record entry: {e}")
                continue
            records[entry.id] = entry
        logger.info(f"Loaded {len(records)} resume records from {self._path}")
        return records

    def _save_to_yaml(self) -> None:
        """Persist the in-memory records to YAML."""
        records = self._get_records()
        data = {"records": [r.model_dump() for r in records.values()]}

        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
        logger.info(f"Saved {len(records)} resume records to {self._path}")

    def _get_records(self) -> dict[str, StoredResume]:
        if self._records is None:
            self._records = self._load_from_yaml()
        return self._records

    # ── CRUD ────────────────────────────────────────────────────────────────

    async def upsert(self, stored: StoredResume) -> bool:
        """Insert or replace a record. Returns True if the id was new."""
        async with self._lock:
            records = self._get_records()
            created = stored.id not in records
            records[stored.id] = stored
            self._save_to_yaml()
        logger.info(f"{'Inserted' if created else 'Updated'} resume record '{stored.id}'")
        return created

    def get(self, record_id: str) -> Optional[StoredResume]:
        return self._get_records().get(record_id)

    def list_records(self) -> list[StoredResume]:
        return list(self._get_records().values())

    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if it existed."""
        async with self._lock:
            records = self._get_records()
            if record_id not in records:
                return False
            del records[record_id]
            self._save_to_yaml()
        logger.info(f"Deleted resume record '{record_id}'")
        return True

    async def clear(self) -> int:
        """Remove every record. Returns the count removed."""
        async with self._lock:
            records = self._get_records()
            count = len(records)
            records.clear()
            self._save_to_yaml()
        return count


# ── Default Store (lazy singleton) ───────────────────────────────────────────

_store: ResumeRecordStore | None = None


def get_record_store() -> ResumeRecordStore:
    """Get or create the store at settings.records_path."""
    global _store
    if _store is None:
        logger.info(f"Initializing resume record store at '{settings.records_path}'")
        _store = ResumeRecordStore(settings.records_path)
    return _store

"""Scan result storage with freshness metadata.

Scan output is kept as JSON files organized by how long it stays useful:
  - live/: The latest observation set, valid for ``cache_hours`` (24h default)
  - derived/: Views computed from it (map markers, stats), always rewritten

Every JSON file is wrapped in a metadata envelope with ``valid_until`` so
the scan flow can skip a rescan while the previous one is still fresh.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import Any

from butterfly_gallery.schemas import Observation


class DataStore:
    """Reads and writes enveloped JSON files under one base directory."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.live = base_dir / "live"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any | None:
        """Read the ``data`` payload of an enveloped JSON file.

        Returns None if the file doesn't exist.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``live/observations.json``).
            data: Payload to store under the ``data`` key.
            source: Where the data came from (e.g. ``"butterflyexplorers.com"``).
            valid_until: Expiry timestamp. None means derived/no-cache.
            **params: Extra metadata fields (page count, errors, ...).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2, ensure_ascii=False)

        return full

    def write_observations(
        self,
        path: Path,
        observations: list[Observation],
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Serialize observations and write them with ``write``."""
        payload = [obs.model_dump(mode="json") for obs in observations]
        return self.write(path, payload, source=source, valid_until=valid_until, **params)

    def read_observations(self, path: Path) -> list[Observation] | None:
        """Load observations written by ``write_observations``."""
        payload = self.read(path)
        if payload is None:
            return None
        return [Observation.model_validate(item) for item in payload]

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return False

        valid_until = envelope.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

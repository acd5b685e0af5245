"""Per-profile anonymous identifier provisioning."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from luxor.domain.identity import generate_user_id, is_valid_user_id

IDENTITY_KEY = "luxor_user_id"

_logger = logging.getLogger(__name__)


class IdentityStorage(Protocol):
    """Durable key-value storage for the client profile."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Persist a value, raising when storage is unavailable."""


@dataclass
class InMemoryIdentityStorage(IdentityStorage):
    """Storage that lives only as long as the process."""

    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def clear(self) -> None:
        self.items.clear()


@dataclass
class FileIdentityStorage(IdentityStorage):
    """Storage backed by a JSON document on disk."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the stored value, treating unreadable files as empty."""
        data = self._read()
        value = data.get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Write the value, keeping other keys in the document."""
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def _read(self) -> dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError:
            _logger.warning(
                "Identity storage unreadable", extra={"path": str(self.path)}
            )
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            _logger.warning(
                "Identity storage corrupt", extra={"path": str(self.path)}
            )
            return {}
        return data if isinstance(data, dict) else {}


@dataclass
class IdentityProvider:
    """Supplies the stable anonymous identifier for this profile."""

    storage: IdentityStorage
    _unsaved: str | None = field(default=None, init=False, repr=False)

    def get_or_create_identifier(self) -> str:
        """Return the stored identifier, generating and persisting one if needed.

        When the identifier cannot be persisted it is kept for the lifetime of
        this provider so the current session still has a stable owner.
        """
        stored = self.storage.get_item(IDENTITY_KEY)
        if is_valid_user_id(stored):
            return stored
        if self._unsaved is not None:
            return self._unsaved

        created = generate_user_id()
        try:
            self.storage.set_item(IDENTITY_KEY, created)
        except Exception as exc:
            _logger.warning("Failed to persist user id: %s", exc)
            self._unsaved = created
        return created

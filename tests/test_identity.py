"""Tests for anonymous identifier provisioning."""

import json
import logging
from pathlib import Path

import pytest

from luxor.client.identity import (
    IDENTITY_KEY,
    FileIdentityStorage,
    IdentityProvider,
    InMemoryIdentityStorage,
)
from luxor.domain.identity import USER_ID_PATTERN, generate_user_id, is_valid_user_id


class _ReadOnlyStorage:
    def get_item(self, key: str) -> str | None:
        return None

    def set_item(self, key: str, value: str) -> None:
        raise PermissionError("storage is read-only")


def test_generated_identifier_is_uuid_v4() -> None:
    identifier = generate_user_id()

    assert USER_ID_PATTERN.match(identifier)
    assert identifier[14] == "4"
    assert identifier[19] in "89ab"


def test_user_id_validation() -> None:
    assert is_valid_user_id("550E8400-E29B-41D4-A716-446655440000")
    assert not is_valid_user_id("550e8400-e29b-11d4-a716-446655440000")
    assert not is_valid_user_id("not-a-uuid")
    assert not is_valid_user_id(None)


def test_identifier_is_stable_across_calls() -> None:
    storage = InMemoryIdentityStorage()
    provider = IdentityProvider(storage)

    first = provider.get_or_create_identifier()
    second = provider.get_or_create_identifier()

    assert first == second
    assert storage.items[IDENTITY_KEY] == first


def test_identifier_is_shared_by_providers_on_same_storage() -> None:
    storage = InMemoryIdentityStorage()

    first = IdentityProvider(storage).get_or_create_identifier()
    second = IdentityProvider(storage).get_or_create_identifier()

    assert first == second


def test_cleared_storage_yields_new_identifier() -> None:
    storage = InMemoryIdentityStorage()
    provider = IdentityProvider(storage)
    first = provider.get_or_create_identifier()

    storage.clear()
    second = provider.get_or_create_identifier()

    assert second != first
    assert is_valid_user_id(second)


def test_invalid_stored_identifier_is_replaced() -> None:
    storage = InMemoryIdentityStorage(items={IDENTITY_KEY: "tampered"})

    identifier = IdentityProvider(storage).get_or_create_identifier()

    assert is_valid_user_id(identifier)
    assert storage.items[IDENTITY_KEY] == identifier


def test_unwritable_storage_keeps_session_identifier(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger("luxor"), "propagate", True)
    provider = IdentityProvider(_ReadOnlyStorage())

    with caplog.at_level(logging.WARNING, logger="luxor.client.identity"):
        first = provider.get_or_create_identifier()
        second = provider.get_or_create_identifier()

    assert is_valid_user_id(first)
    assert first == second
    warnings = [
        record for record in caplog.records if record.name == "luxor.client.identity"
    ]
    assert len(warnings) == 1
    assert warnings[0].levelno == logging.WARNING
    assert "storage is read-only" in warnings[0].getMessage()


def test_file_storage_persists_between_instances(tmp_path: Path) -> None:
    path = tmp_path / "profile" / "identity.json"

    first = IdentityProvider(FileIdentityStorage(path)).get_or_create_identifier()
    second = IdentityProvider(FileIdentityStorage(path)).get_or_create_identifier()

    assert first == second
    assert json.loads(path.read_text(encoding="utf-8")) == {IDENTITY_KEY: first}


def test_file_storage_keeps_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "identity.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

    FileIdentityStorage(path).set_item(IDENTITY_KEY, "value")

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "theme": "dark",
        IDENTITY_KEY: "value",
    }


def test_file_storage_treats_corrupt_file_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "identity.json"
    path.write_text("{not json", encoding="utf-8")
    storage = FileIdentityStorage(path)

    assert storage.get_item(IDENTITY_KEY) is None

    identifier = IdentityProvider(storage).get_or_create_identifier()
    assert storage.get_item(IDENTITY_KEY) == identifier

#!/usr/bin/env python3
"""
Unit tests for storage key derivation.
"""
import hashlib
from datetime import datetime, timedelta, timezone

import pytest

from wakeword_gateway.core.models import AcceptedUpload
from wakeword_gateway.core.services.storage_key import (
    StorageKeyDeriver,
    format_timestamp,
    hash_user
)


@pytest.fixture
def accepted_upload() -> AcceptedUpload:
    return AcceptedUpload(
        content_type="audio/webm",
        key_extension="webm",
        distance="2",
        speed="1",
        wake_word="casita"
    )


@pytest.mark.unit
def test_reference_key(key_deriver, accepted_upload):
    """Unit test: fixed instant and address give the documented key."""
    expected_hash = hashlib.sha256(b"1.2.3.4").hexdigest()

    key = key_deriver.derive_key(accepted_upload, "1.2.3.4")

    assert key == f"casita-2024-01-01T00-00-00.000-2-1-{expected_hash}.webm"


@pytest.mark.unit
def test_timestamp_is_millisecond_precision_without_colons():
    instant = datetime(2023, 7, 14, 9, 5, 3, 987654, tzinfo=timezone.utc)

    assert format_timestamp(instant) == "2023-07-14T09-05-03.987"


@pytest.mark.unit
def test_timestamp_converted_to_utc():
    instant = datetime(2024, 1, 1, 2, 30, 0, tzinfo=timezone(timedelta(hours=2)))

    assert format_timestamp(instant) == "2024-01-01T00-30-00.000"


@pytest.mark.unit
def test_timestamp_length():
    assert len(format_timestamp(datetime.now(timezone.utc))) == 23


@pytest.mark.unit
def test_user_hash_is_lowercase_sha256_hex():
    user_hash = hash_user("1.2.3.4")

    assert len(user_hash) == 64
    assert user_hash == user_hash.lower()
    assert user_hash == hashlib.sha256("1.2.3.4".encode("utf-8")).hexdigest()


@pytest.mark.unit
def test_user_hash_is_deterministic():
    assert hash_user("203.0.113.7") == hash_user("203.0.113.7")


@pytest.mark.unit
def test_different_clients_get_different_keys(key_deriver, accepted_upload):
    first = key_deriver.derive_key(accepted_upload, "1.2.3.4")
    second = key_deriver.derive_key(accepted_upload, "5.6.7.8")

    assert first != second
    assert first.split("-")[:-1] == second.split("-")[:-1]


@pytest.mark.unit
def test_same_inputs_same_instant_collide(key_deriver, accepted_upload):
    """Unit test: identical uploads in one millisecond map to one key."""
    assert key_deriver.derive_key(accepted_upload, "1.2.3.4") == key_deriver.derive_key(accepted_upload, "1.2.3.4")


@pytest.mark.unit
def test_clock_is_read_per_key(accepted_upload):
    instants = iter([
        datetime(2024, 1, 1, 0, 0, 0, 1000, tzinfo=timezone.utc),
        datetime(2024, 1, 1, 0, 0, 0, 2000, tzinfo=timezone.utc),
    ])
    deriver = StorageKeyDeriver(clock=lambda: next(instants))

    first = deriver.derive_key(accepted_upload, "1.2.3.4")
    second = deriver.derive_key(accepted_upload, "1.2.3.4")

    assert "2024-01-01T00-00-00.001" in first
    assert "2024-01-01T00-00-00.002" in second


@pytest.mark.unit
def test_ipv6_address_hashed(key_deriver, accepted_upload):
    key = key_deriver.derive_key(accepted_upload, "2001:db8::1")

    assert ":" not in key
    assert key.endswith(hash_user("2001:db8::1") + ".webm")

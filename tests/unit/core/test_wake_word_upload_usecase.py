#!/usr/bin/env python3
"""
Unit tests for WakeWordUploadUseCase.
Tests the validate -> derive key -> write pipeline with in-memory collaborators.
"""
import dataclasses
import hashlib
from unittest.mock import AsyncMock, Mock

import pytest

from wakeword_gateway.core.models import BlobStoreError, UploadResult
from wakeword_gateway.core.usecases.wake_word_upload import WakeWordUploadUseCase
from tests.utils.mock_helpers import MockHelpers, async_chunks


@pytest.mark.unit
@pytest.mark.asyncio
async def test_accepted_upload_is_stored(upload_use_case, memory_store, mock_error_reporter):
    """Unit test: a valid upload is written once under the derived key."""
    request = MockHelpers.create_upload_request(body=b"clip-bytes")
    expected_key = f"casita-2024-01-01T00-00-00.000-2-1-{hashlib.sha256(b'1.2.3.4').hexdigest()}.webm"

    result = await upload_use_case.upload(request)

    assert result == UploadResult(status_code=201, message="success", key=expected_key)
    assert result.is_success
    assert memory_store.put_calls == 1
    assert memory_store.get(expected_key) == b"clip-bytes"
    mock_error_reporter.capture_exception.assert_not_called()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_body_streamed_in_chunks(upload_use_case, memory_store):
    request = dataclasses.replace(
        MockHelpers.create_upload_request(body=b"abcdef"),
        body=async_chunks(b"abc", b"", b"def")
    )

    result = await upload_use_case.upload(request)

    assert memory_store.get(result.key) == b"abcdef"


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("overrides,status_code", [
    ({"method": "GET"}, 405),
    ({"content_type": "audio/wav"}, 415),
    ({"content_length": "256001"}, 413),
    ({"content_length": None}, 411),
    ({"speed": None}, 400),
    ({"wake_word": "alexa"}, 400),
    ({"distance": "far"}, 400),
])
async def test_rejected_upload_never_reaches_store(
    upload_use_case, memory_store, mock_error_reporter, overrides, status_code
):
    """Unit test: rejections are returned, not stored and not reported."""
    result = await upload_use_case.upload(MockHelpers.create_upload_request(**overrides))

    assert result.status_code == status_code
    assert result.key is None
    assert not result.is_success
    assert memory_store.put_calls == 0
    mock_error_reporter.capture_exception.assert_not_called()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_storage_failure_maps_to_500_and_is_reported(validator, key_deriver, mock_error_reporter):
    store = MockHelpers.create_mock_blob_store()
    error = BlobStoreError("Access denied to S3 bucket", "put", "some-key")
    store.put = AsyncMock(side_effect=error)
    use_case = WakeWordUploadUseCase(validator, key_deriver, store, mock_error_reporter)

    result = await use_case.upload(MockHelpers.create_upload_request())

    assert result == UploadResult(status_code=500, message="Failed to store audio file")
    store.put.assert_awaited_once()
    mock_error_reporter.capture_exception.assert_called_once()
    reported, context = mock_error_reporter.capture_exception.call_args[0]
    assert reported is error
    assert context == {"operation": "put", "key": "some-key"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unexpected_store_error_is_generic_500(validator, key_deriver, mock_error_reporter):
    store = MockHelpers.create_mock_blob_store()
    store.put = AsyncMock(side_effect=RuntimeError("socket closed"))
    use_case = WakeWordUploadUseCase(validator, key_deriver, store, mock_error_reporter)

    result = await use_case.upload(MockHelpers.create_upload_request())

    assert result == UploadResult(status_code=500, message="Internal server error")
    mock_error_reporter.capture_exception.assert_called_once()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_key_derivation_failure_is_reported(validator, memory_store, mock_error_reporter):
    """Unit test: a digest failure is fatal for the request, nothing is written."""
    key_deriver = Mock()
    key_deriver.derive_key.side_effect = ValueError("digest unavailable")
    use_case = WakeWordUploadUseCase(validator, key_deriver, memory_store, mock_error_reporter)

    result = await use_case.upload(MockHelpers.create_upload_request())

    assert result.status_code == 500
    assert memory_store.put_calls == 0
    reported, context = mock_error_reporter.capture_exception.call_args[0]
    assert isinstance(reported, ValueError)
    assert context == {"operation": "upload", "key": None}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_store_receives_key_body_and_content_type(validator, key_deriver, mock_error_reporter):
    store = MockHelpers.create_mock_blob_store()
    use_case = WakeWordUploadUseCase(validator, key_deriver, store, mock_error_reporter)
    request = MockHelpers.create_upload_request(content_type="audio/ogg", wake_word="ok_nabu")

    result = await use_case.upload(request)

    store.put.assert_awaited_once_with(result.key, request.body, "audio/ogg")
    assert result.key.startswith("ok_nabu-2024-01-01T00-00-00.000-2-1-")
    assert result.key.endswith(".ogg")

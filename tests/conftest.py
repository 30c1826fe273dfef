"""
Shared test configuration and fixtures for Wake Word Gateway tests.
"""
import os
import sys
from pathlib import Path

import pytest

# Setup Python path once for all tests
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.utils.mock_helpers import FIXED_INSTANT, MockHelpers

# Settings are read at import time
for _key, _value in MockHelpers.create_test_environment_config().items():
    os.environ.setdefault(_key, _value)

from fastapi.testclient import TestClient

from wakeword_gateway.adapters.storage.memory_blob_store import InMemoryBlobStore
from wakeword_gateway.api.dependencies import get_dependency_container
from wakeword_gateway.core.services.storage_key import StorageKeyDeriver
from wakeword_gateway.core.services.upload_constraints import UploadPolicy
from wakeword_gateway.core.services.upload_validator import UploadRequestValidator
from wakeword_gateway.core.usecases.wake_word_upload import WakeWordUploadUseCase
from wakeword_gateway.main import app
from tests.utils.infrastructure_test_helpers import InfrastructureTestHelpers


# ENVIRONMENT & CONFIGURATION FIXTURES

@pytest.fixture
def infrastructure_helpers():
    """Fixture to provide InfrastructureTestHelpers instance for all tests."""
    return InfrastructureTestHelpers()


@pytest.fixture
def upload_policy() -> UploadPolicy:
    return UploadPolicy.default()


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-01-01T00:00:00.000Z."""
    return lambda: FIXED_INSTANT


# MOCK FIXTURES (for unit tests)

@pytest.fixture
def mock_error_reporter():
    """Mock error reporter for unit tests."""
    return MockHelpers.create_mock_error_reporter()


@pytest.fixture
def memory_store() -> InMemoryBlobStore:
    return InMemoryBlobStore(bucket_name="test-bucket")


# SERVICE FIXTURES

@pytest.fixture
def validator(upload_policy) -> UploadRequestValidator:
    return UploadRequestValidator(upload_policy)


@pytest.fixture
def key_deriver(fixed_clock) -> StorageKeyDeriver:
    return StorageKeyDeriver(clock=fixed_clock)


@pytest.fixture
def upload_use_case(validator, key_deriver, memory_store, mock_error_reporter) -> WakeWordUploadUseCase:
    return WakeWordUploadUseCase(
        validator=validator,
        key_deriver=key_deriver,
        blob_store=memory_store,
        error_reporter=mock_error_reporter
    )


# API TESTING FIXTURES

@pytest.fixture
def container(memory_store, mock_error_reporter, fixed_clock):
    """Fresh dependency container wired to in-memory collaborators."""
    get_dependency_container.cache_clear()
    container = get_dependency_container()
    container.override_blob_store(memory_store)
    container.override_error_reporter(mock_error_reporter)
    container.override_clock(fixed_clock)
    yield container
    get_dependency_container.cache_clear()


@pytest.fixture
def client(container):
    """Create FastAPI test client."""
    return TestClient(app)


@pytest.fixture(scope="session")
def upload_path() -> str:
    return "/assist/wake_word/training_data/upload"

"""
Dependency injection configuration for Wake Word Gateway.
Central wiring of ports, services and the upload use case.
"""
from datetime import datetime
from functools import lru_cache
from typing import Callable

# Domain ports
from wakeword_gateway.core.ports.blob_store import BlobStorePort
from wakeword_gateway.core.ports.error_reporter import ErrorReporterPort

# Domain services and use cases
from wakeword_gateway.core.services.storage_key import StorageKeyDeriver, utc_now
from wakeword_gateway.core.services.upload_constraints import UploadPolicy
from wakeword_gateway.core.services.upload_validator import UploadRequestValidator
from wakeword_gateway.core.usecases.wake_word_upload import WakeWordUploadUseCase

# Infrastructure adapters
from wakeword_gateway.adapters.services.logging_error_reporter import LoggingErrorReporter
from wakeword_gateway.adapters.storage.memory_blob_store import InMemoryBlobStore
from wakeword_gateway.adapters.storage.s3_blob_store import S3BlobStore
from wakeword_gateway.infrastructure.config.infrastructure_settings import infra_settings


class DependencyContainer:
    """
    Dependency injection container following Clean Architecture.
    """

    def __init__(self):
        """Initialize dependency container."""
        self._upload_policy = None
        self._clock: Callable[[], datetime] = utc_now
        self._blob_store = None
        self._error_reporter = None
        self._upload_use_case = None

    # CONFIGURATION
    @property
    def upload_policy(self) -> UploadPolicy:
        """Get upload policy (immutable, built once)."""
        if self._upload_policy is None:
            self._upload_policy = UploadPolicy.default()
        return self._upload_policy

    # INFRASTRUCTURE LAYER (Outer layer)
    @property
    def blob_store(self) -> BlobStorePort:
        """Get blob store instance (singleton)."""
        if self._blob_store is None:
            if infra_settings.use_memory_store:
                self._blob_store = InMemoryBlobStore()
            else:
                self._blob_store = S3BlobStore()
        return self._blob_store

    @property
    def error_reporter(self) -> ErrorReporterPort:
        """Get error reporter instance (singleton)."""
        if self._error_reporter is None:
            self._error_reporter = LoggingErrorReporter()
        return self._error_reporter

    # APPLICATION LAYER (Use cases)
    @property
    def upload_use_case(self) -> WakeWordUploadUseCase:
        """Get wake word upload use case (singleton)."""
        if self._upload_use_case is None:
            self._upload_use_case = WakeWordUploadUseCase(
                validator=UploadRequestValidator(self.upload_policy),
                key_deriver=StorageKeyDeriver(clock=self._clock),
                blob_store=self.blob_store,
                error_reporter=self.error_reporter
            )
        return self._upload_use_case

    # TESTING SUPPORT
    def override_blob_store(self, store: BlobStorePort) -> None:
        """Override blob store (for testing)."""
        self._blob_store = store
        self._upload_use_case = None

    def override_error_reporter(self, reporter: ErrorReporterPort) -> None:
        """Override error reporter (for testing)."""
        self._error_reporter = reporter
        self._upload_use_case = None

    def override_clock(self, clock: Callable[[], datetime]) -> None:
        """Override the key timestamp clock (for testing)."""
        self._clock = clock
        self._upload_use_case = None


# GLOBAL CONTAINER INSTANCE
@lru_cache()
def get_dependency_container() -> DependencyContainer:
    """Get global dependency container (singleton)."""
    return DependencyContainer()


# FASTAPI DEPENDENCY FUNCTIONS
def get_error_reporter() -> ErrorReporterPort:
    """FastAPI dependency for error reporter."""
    return get_dependency_container().error_reporter


def get_upload_use_case() -> WakeWordUploadUseCase:
    """FastAPI dependency for the upload use case."""
    return get_dependency_container().upload_use_case


# CONFIGURATION VALIDATION
def validate_dependencies() -> None:
    """
    Validate that all dependencies can be created successfully.
    Call this at application startup.
    """
    container = get_dependency_container()
    container.blob_store
    container.error_reporter
    container.upload_use_case

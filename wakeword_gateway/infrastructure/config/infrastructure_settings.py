"""
Infrastructure settings for Wake Word Gateway.
Configuration for the blob store and logging.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class InfrastructureSettings(BaseSettings):
    """
    Infrastructure configuration.
    Settings for external services and infrastructure components.
    """

    # ENVIRONMENT & DEPLOYMENT
    environment: str = "development"

    # AWS CORE CONFIGURATION
    aws_region: str = "us-east-1"

    # AWS Client Configuration
    aws_max_retry_attempts: int = 3
    aws_max_pool_connections: int = 50

    # STORAGE CONFIGURATION
    # "s3" for S3-compatible buckets (AWS, R2, MinIO), "memory" for local runs
    blob_store_backend: str = "s3"

    # S3 Settings
    s3_bucket_name: str = "wakeword-training-data"
    s3_endpoint_url: Optional[str] = None
    s3_use_ssl: bool = True
    s3_signature_version: str = "s3v4"
    s3_auto_create_bucket: bool = False

    # MONITORING & LOGGING CONFIGURATION
    log_level: str = "INFO"
    service_name: str = "wakeword-gateway"

    # Configuration
    model_config = SettingsConfigDict(
        env_file=[".env.local", ".env.development", ".env.staging", ".env.production"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def use_local_s3(self) -> bool:
        """Check if should use local S3 (MinIO)."""
        return self.s3_endpoint_url is not None

    @property
    def use_memory_store(self) -> bool:
        """Check if uploads are kept in process memory."""
        return self.blob_store_backend.lower() == "memory"

    @property
    def is_production_env(self) -> bool:
        """Check if running in production environment (computed from environment)."""
        return self.environment.lower() == "production"


# Global infrastructure settings instance
infra_settings = InfrastructureSettings()

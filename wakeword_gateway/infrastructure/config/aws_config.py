"""
AWS service configuration and client management.
Handles the S3 connection used for training uploads with environment-specific settings.
"""
import boto3
from botocore.config import Config
from typing import Optional
from .infrastructure_settings import infra_settings


class AWSConfig:
    """
    Manages S3 client creation and configuration.
    Works against AWS S3 or any S3-compatible endpoint (R2, MinIO).
    """

    def __init__(self):
        self._s3_client: Optional[boto3.client] = None

    @property
    def s3_client(self) -> boto3.client:
        """
        Get or create S3 client with proper configuration.
        """
        if self._s3_client is None:
            self._s3_client = self._create_s3_client()
        return self._s3_client

    def _create_s3_client(self) -> boto3.client:
        """
        Create S3 client with environment-specific configuration.
        """
        s3_config = Config(
            region_name=infra_settings.aws_region,
            retries={
                'max_attempts': infra_settings.aws_max_retry_attempts,
                'mode': 'adaptive'
            },
            max_pool_connections=infra_settings.aws_max_pool_connections,
            signature_version=infra_settings.s3_signature_version
        )
        kwargs = {
            'service_name': 's3',
            'config': s3_config
        }
        if infra_settings.use_local_s3:
            # Credentials come from the standard AWS environment variables
            kwargs.update({
                'endpoint_url': infra_settings.s3_endpoint_url,
                'region_name': infra_settings.aws_region,
                'use_ssl': infra_settings.s3_use_ssl
            })
        else:
            kwargs.update({
                'region_name': infra_settings.aws_region
            })
        return boto3.client(**kwargs)

    def get_s3_config(self) -> dict:
        """
        Get S3 configuration summary (no credentials).

        Returns:
            Dict with S3 client configuration
        """
        config = {
            'region_name': infra_settings.aws_region,
            'signature_version': infra_settings.s3_signature_version,
            'use_ssl': infra_settings.s3_use_ssl,
            'bucket_name': infra_settings.s3_bucket_name
        }
        if infra_settings.use_local_s3:
            config['endpoint_url'] = infra_settings.s3_endpoint_url
        return config


# Global AWS configuration instance
aws_config = AWSConfig()

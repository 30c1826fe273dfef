"""
S3 Blob Store Adapter for Wake Word Gateway.
Pure infrastructure implementation - only S3 operations.
"""
from functools import partial
from typing import AsyncIterator, Optional

import anyio.to_thread
from boto3.exceptions import S3UploadFailedError
from boto3.s3.transfer import TransferConfig
from botocore.exceptions import ClientError, NoCredentialsError

from wakeword_gateway.adapters.storage.stream_reader import AsyncStreamReader
from wakeword_gateway.core.models import BlobStoreError, StoredUpload
from wakeword_gateway.core.ports.blob_store import BlobStorePort
from wakeword_gateway.infrastructure.config.aws_config import aws_config
from wakeword_gateway.infrastructure.config.infrastructure_settings import infra_settings
from wakeword_gateway.infrastructure.logging.log_decorators import log_infrastructure_operation

# The stream reader hops back to the event loop, so the transfer must stay
# on the calling worker thread.
_TRANSFER_CONFIG = TransferConfig(use_threads=False)


class S3BlobStore(BlobStorePort):
    """
    S3 implementation of BlobStorePort.

    ONLY handles technical storage operations.
    """

    def __init__(self, s3_client=None, bucket_name: Optional[str] = None):
        """Initialize blob store with AWS configuration."""
        self.s3_client = s3_client if s3_client is not None else aws_config.s3_client
        self.bucket_name = bucket_name or infra_settings.s3_bucket_name

    @log_infrastructure_operation("store_training_upload", include_args=True)
    async def put(
        self,
        key: str,
        body: AsyncIterator[bytes],
        content_type: str
    ) -> StoredUpload:
        """
        Stream the body to S3 with a managed upload.

        Args:
            key: S3 object key
            body: Async iterator of byte chunks
            content_type: MIME type stored as object metadata

        Returns:
            StoredUpload with the written key and streamed size

        Raises:
            BlobStoreError: If S3 operation fails
        """
        reader = AsyncStreamReader(body)
        try:
            await anyio.to_thread.run_sync(partial(
                self.s3_client.upload_fileobj,
                Fileobj=reader,
                Bucket=self.bucket_name,
                Key=key,
                ExtraArgs={'ContentType': content_type},
                Config=_TRANSFER_CONFIG
            ))
        except ClientError as e:
            raise self._handle_client_error(e, "put", key)
        except NoCredentialsError:
            raise BlobStoreError("S3 credentials not configured", "put", key)
        except S3UploadFailedError as e:
            raise BlobStoreError(f"S3 upload failed: {str(e)}", "put", key)
        except Exception as e:
            raise BlobStoreError(f"Failed to store upload: {str(e)}", "put", key)

        return StoredUpload(
            key=key,
            bucket=self.bucket_name,
            content_type=content_type,
            size_bytes=reader.bytes_read
        )

    def get_store_info(self) -> dict:
        """Describe the S3 target."""
        return {
            "backend": "s3",
            **aws_config.get_s3_config(),
            "bucket_name": self.bucket_name
        }

    # ERROR HANDLING

    def _handle_client_error(self, error: ClientError, operation: str, key: str) -> BlobStoreError:
        """Handle AWS client errors and convert to BlobStoreError."""
        error_code = error.response.get('Error', {}).get('Code', 'Unknown')
        error_message = error.response.get('Error', {}).get('Message', str(error))

        if error_code == 'NoSuchBucket':
            return BlobStoreError(f"S3 bucket not found: {self.bucket_name}", operation, key)
        elif error_code == 'AccessDenied':
            return BlobStoreError("Access denied to S3 bucket", operation, key)
        elif error_code == 'EntityTooLarge':
            return BlobStoreError("Upload exceeds the S3 object size limit", operation, key)
        else:
            return BlobStoreError(f"AWS error ({error_code}): {error_message}", operation, key)

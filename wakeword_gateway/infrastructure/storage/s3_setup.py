"""
S3 storage setup utilities.
Makes sure the training bucket exists before uploads arrive.
"""
from botocore.exceptions import ClientError
from wakeword_gateway.infrastructure.config.aws_config import aws_config
from wakeword_gateway.infrastructure.config.infrastructure_settings import infra_settings
from wakeword_gateway.infrastructure.logging.log_config import get_logger

logger = get_logger("S3Setup")


class S3Setup:
    """
    Manages S3 bucket infrastructure operations.
    """

    def __init__(self, s3_client=None):
        self.s3_client = s3_client if s3_client is not None else aws_config.s3_client

    def setup_training_bucket(self) -> bool:
        """
        Create the training bucket if it does not exist.

        Returns:
            True if the bucket is available, False otherwise
        """
        bucket_name = infra_settings.s3_bucket_name

        try:
            if self.bucket_exists(bucket_name):
                logger.info("Training bucket already exists", extra={
                    "extra_fields": {"bucket_name": bucket_name}
                })
                return True

            logger.info("Creating training bucket", extra={
                "extra_fields": {"bucket_name": bucket_name}
            })
            return self._create_bucket(bucket_name)

        except Exception as e:
            logger.error("Failed to setup training bucket", extra={"extra_fields": {
                "bucket_name": bucket_name,
                "error": str(e)
            }})
            return False

    def bucket_exists(self, bucket_name: str) -> bool:
        """
        Check if bucket exists.

        Args:
            bucket_name: Name of the bucket to check

        Returns:
            True if bucket exists, False otherwise
        """
        try:
            self.s3_client.head_bucket(Bucket=bucket_name)
            return True
        except ClientError as e:
            error_code = e.response['Error']['Code']
            if error_code in ['404', 'NoSuchBucket']:
                return False
            logger.warning("Error checking bucket existence", extra={"extra_fields": {
                "bucket_name": bucket_name,
                "error_code": error_code
            }})
            return False

    def _create_bucket(self, bucket_name: str) -> bool:
        """
        Create S3 bucket with region-appropriate configuration.

        Args:
            bucket_name: Name of the bucket to create

        Returns:
            True if creation successful, False otherwise
        """
        try:
            if infra_settings.use_local_s3 or infra_settings.aws_region == 'us-east-1':
                # MinIO and us-east-1 take no location constraint
                self.s3_client.create_bucket(Bucket=bucket_name)
            else:
                self.s3_client.create_bucket(
                    Bucket=bucket_name,
                    CreateBucketConfiguration={
                        'LocationConstraint': infra_settings.aws_region
                    }
                )

            logger.info("Bucket created successfully", extra={
                "extra_fields": {"bucket_name": bucket_name}
            })
            return True

        except ClientError as e:
            error_code = e.response['Error']['Code']
            if error_code in ('BucketAlreadyOwnedByYou', 'BucketAlreadyExists'):
                return True
            logger.error("Failed to create bucket", extra={"extra_fields": {
                "bucket_name": bucket_name,
                "error_code": error_code,
                "error_message": e.response['Error']['Message']
            }})
            return False

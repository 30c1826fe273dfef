#!/usr/bin/env python3
"""
Storage setup script for Wake Word Gateway.
Creates the training bucket or reports whether it exists.
"""
import sys
import argparse
from pathlib import Path

# Add the project root to Python path
current_dir = Path(__file__).parent.parent
sys.path.append(str(current_dir))

from wakeword_gateway.infrastructure.config.aws_config import aws_config
from wakeword_gateway.infrastructure.config.infrastructure_settings import infra_settings
from wakeword_gateway.infrastructure.logging.log_config import get_logger
from wakeword_gateway.infrastructure.storage.s3_setup import S3Setup

logger = get_logger("StorageSetupScript")


def show_status(setup: S3Setup) -> bool:
    """Log the bucket configuration and whether it exists."""
    exists = setup.bucket_exists(infra_settings.s3_bucket_name)
    logger.info("Storage status", extra={"extra_fields": {
        **aws_config.get_s3_config(),
        "bucket_exists": exists
    }})
    return exists


def main() -> int:
    parser = argparse.ArgumentParser(description="Wake Word Gateway storage setup")
    parser.add_argument("--status", action="store_true", help="only check whether the bucket exists")
    args = parser.parse_args()

    setup = S3Setup()
    if args.status:
        return 0 if show_status(setup) else 1

    if not setup.setup_training_bucket():
        logger.error("Storage setup failed", extra={"extra_fields": {
            "bucket_name": infra_settings.s3_bucket_name
        }})
        return 1
    show_status(setup)
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Unit tests for S3Setup bucket provisioning.
"""
import pytest
from botocore.exceptions import ClientError

from wakeword_gateway.infrastructure.storage.s3_setup import S3Setup
from tests.utils.mock_helpers import MockHelpers


@pytest.mark.unit
def test_existing_bucket_is_not_recreated(infrastructure_helpers):
    mock_client = MockHelpers.create_mock_s3_client()
    infrastructure_helpers.setup_mock_head_bucket(mock_client, exists=True)

    assert S3Setup(s3_client=mock_client).setup_training_bucket() is True
    mock_client.create_bucket.assert_not_called()


@pytest.mark.unit
def test_missing_bucket_is_created(infrastructure_helpers):
    mock_client = MockHelpers.create_mock_s3_client()
    infrastructure_helpers.setup_mock_head_bucket(mock_client, exists=False)

    assert S3Setup(s3_client=mock_client).setup_training_bucket() is True
    mock_client.create_bucket.assert_called_once()
    assert mock_client.create_bucket.call_args[1]["Bucket"] == "test-bucket"


@pytest.mark.unit
def test_bucket_creation_failure(infrastructure_helpers):
    mock_client = MockHelpers.create_mock_s3_client()
    infrastructure_helpers.setup_mock_head_bucket(mock_client, exists=False)
    mock_client.create_bucket.side_effect = ClientError(
        {'Error': {'Code': 'AccessDenied', 'Message': 'Access denied'}},
        'CreateBucket'
    )

    assert S3Setup(s3_client=mock_client).setup_training_bucket() is False


@pytest.mark.unit
def test_bucket_already_owned_counts_as_available(infrastructure_helpers):
    mock_client = MockHelpers.create_mock_s3_client()
    infrastructure_helpers.setup_mock_head_bucket(mock_client, exists=False)
    mock_client.create_bucket.side_effect = ClientError(
        {'Error': {'Code': 'BucketAlreadyOwnedByYou', 'Message': 'Already owned'}},
        'CreateBucket'
    )

    assert S3Setup(s3_client=mock_client).setup_training_bucket() is True

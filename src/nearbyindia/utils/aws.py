"""AWS utility functions for nearbyindia."""
import logging
from typing import Union

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


def upload_to_s3(bucket_name: str, key: str, data: Union[str, bytes],
                 content_type: str = 'application/json', s3_client=None) -> bool:
    """Upload data to an S3 bucket.

    Args:
        bucket_name: S3 bucket name
        key: S3 object key
        data: Data to upload (string or bytes)
        content_type: MIME type of the data
        s3_client: Optional boto3 S3 client

    Returns:
        True if upload succeeded, False otherwise
    """
    client = s3_client or boto3.client('s3')

    try:
        body = data if isinstance(data, bytes) else data.encode('utf-8')
        client.put_object(
            Bucket=bucket_name,
            Key=key,
            Body=body,
            ContentType=content_type
        )
        return True
    except ClientError:
        logger.exception(f"Error uploading to S3: {key}")
        return False

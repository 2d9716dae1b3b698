"""S3-compatible storage backend (AWS S3 / MinIO)."""

from __future__ import annotations

from typing import Optional

from .interfaces import FetchedObject


class S3StorageBackend:
    """S3 storage backend with lazy boto3 initialization."""

    def __init__(self, *, bucket: str, region: Optional[str] = None, endpoint_url: Optional[str] = None,
                 access_key_id: Optional[str] = None, secret_access_key: Optional[str] = None,
                 use_path_style: bool = True, verify_ssl: bool = True, timeout_seconds: float = 10.0):
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.use_path_style = use_path_style
        self.verify_ssl = verify_ssl
        self.timeout_seconds = timeout_seconds
        self._client = None

    def _get_client(self):
        if self._client is not None:
            return self._client

        try:
            import boto3
            from botocore.config import Config
        except ImportError as exc:
            raise RuntimeError('S3 backend requires boto3 and botocore installed') from exc

        client_kwargs = {
            'service_name': 's3',
            'verify': self.verify_ssl,
        }
        if self.region:
            client_kwargs['region_name'] = self.region
        if self.endpoint_url:
            client_kwargs['endpoint_url'] = self.endpoint_url
        if self.access_key_id:
            client_kwargs['aws_access_key_id'] = self.access_key_id
        if self.secret_access_key:
            client_kwargs['aws_secret_access_key'] = self.secret_access_key

        addressing_style = 'path' if self.use_path_style else 'auto'
        client_kwargs['config'] = Config(
            signature_version='s3v4',
            s3={'addressing_style': addressing_style},
            connect_timeout=self.timeout_seconds,
            read_timeout=self.timeout_seconds,
            retries={'max_attempts': 1},
        )

        self._client = boto3.client(**client_kwargs)
        return self._client

    def get_object(self, key: str) -> FetchedObject:
        client = self._get_client()
        resp = client.get_object(Bucket=self.bucket, Key=key)
        stream = resp['Body']
        try:
            body = stream.read()
        finally:
            stream.close()
        return FetchedObject(key=key, body=body, content_type=resp.get('ContentType'))

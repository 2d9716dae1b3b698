"""
Application configuration and logging setup.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PORT = int(os.environ.get('PORT', '8080'))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Where "/" redirects to, and the name shown on embed pages
CANONICAL_URL = os.environ.get('CANONICAL_URL', 'https://higure.wtf')
SITE_NAME = os.environ.get('SITE_NAME', 'higure.wtf')
STYLESHEET_URL = os.environ.get('STYLESHEET_URL', 'https://cdn.higure.wtf/higure/cdn.css')

# Metadata store
MONGO_URI = os.environ.get('MONGO_URI', 'mongodb://localhost:27017')
MONGO_DATABASE = os.environ.get('MONGO_DATABASE', 'higure')
MONGO_TIMEOUT_MS = int(os.environ.get('MONGO_TIMEOUT_MS', '5000'))

# Object store
FILE_STORAGE_BACKEND = os.environ.get('FILE_STORAGE_BACKEND', 's3')
UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', './uploads')
S3_ENDPOINT = os.environ.get('S3_ENDPOINT', '')
S3_BUCKET_NAME = os.environ.get('S3_BUCKET_NAME', '')
S3_REGION = os.environ.get('S3_REGION', 'us-east-1')
S3_ACCESS_KEY_ID = os.environ.get('AWS_ACCESS_KEY_ID')
S3_SECRET_ACCESS_KEY = os.environ.get('AWS_SECRET_ACCESS_KEY')
S3_USE_PATH_STYLE = os.environ.get('S3_USE_PATH_STYLE', 'true').lower() == 'true'
S3_VERIFY_SSL = os.environ.get('S3_VERIFY_SSL', 'true').lower() == 'true'
S3_TIMEOUT_SECONDS = float(os.environ.get('S3_TIMEOUT_SECONDS', '10'))

# HTTP behaviour
ERROR_STATUS_CODES = os.environ.get('ERROR_STATUS_CODES', 'false').lower() == 'true'
ENABLE_COMPRESSION = os.environ.get('ENABLE_COMPRESSION', 'true').lower() == 'true'
TRUSTED_PROXY_HOPS = int(os.environ.get('TRUSTED_PROXY_HOPS', '1'))


def configure_logging(level=None):
    """Send all log records to stdout with a single handler."""
    level = (level or LOG_LEVEL).upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)

    # Get the root logger and clear any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Silence chatty client libraries
    for name in ('botocore', 'boto3', 'urllib3', 'pymongo'):
        logging.getLogger(name).setLevel(logging.WARNING)

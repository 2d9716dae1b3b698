"""
Application startup functions.
"""

from higure.config.version import get_version


def run_startup_tasks(app, services):
    """Log which backends this instance is serving from."""
    storage = services.storage
    settings = storage.settings

    app.logger.info(f"=== Higure {get_version()} Starting Up ===")
    app.logger.info(f"Canonical site: {services.composer.canonical_url}")

    if storage.backend_kind == 's3':
        if not settings.s3_bucket_name:
            app.logger.warning("S3 backend selected but S3_BUCKET_NAME is empty")
        app.logger.info(f"Object storage: s3 bucket '{settings.s3_bucket_name}' at {settings.s3_endpoint or 'AWS default endpoint'}")
    else:
        app.logger.info(f"Object storage: {storage.backend_kind} ({settings.local_root})")

    store_settings = getattr(services.metadata.store, 'settings', None)
    if store_settings is not None:
        app.logger.info(f"Metadata store: database '{store_settings.database}'")

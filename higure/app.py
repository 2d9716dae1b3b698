# Higure - file, embed and short-link content server
import argparse

from flask import Flask
from flask_compress import Compress
from werkzeug.middleware.proxy_fix import ProxyFix

from higure.config import app_config
from higure.config.app_config import configure_logging


def create_app(services=None, config=None):
    """
    Build the Flask application.

    ``services`` is a ContentServices instance; when omitted the production
    MongoDB and object storage clients are built from the environment.
    """
    from higure.services.container import build_services
    from higure.config.startup import run_startup_tasks
    from higure.api.content import content_bp

    configure_logging()

    app = Flask(__name__, template_folder='templates')
    app.config['ERROR_STATUS_CODES'] = app_config.ERROR_STATUS_CODES
    app.config['ENABLE_COMPRESSION'] = app_config.ENABLE_COMPRESSION
    if config:
        app.config.update(config)

    # Apply ProxyFix so the Host header seen here is the public one
    trusted_proxy_hops = app_config.TRUSTED_PROXY_HOPS
    app.wsgi_app = ProxyFix(
        app.wsgi_app,
        x_for=trusted_proxy_hops,
        x_proto=trusted_proxy_hops,
        x_host=trusted_proxy_hops,
        x_prefix=trusted_proxy_hops
    )

    if app.config['ENABLE_COMPRESSION']:
        Compress(app)

    if services is None:
        services = build_services()
    app.extensions['content_services'] = services

    app.register_blueprint(content_bp)

    run_startup_tasks(app, services)
    return app


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--debug', action='store_true', help='Run in debug mode')
    parser.add_argument('--port', type=int, default=app_config.PORT, help='Port to listen on')
    args = parser.parse_args()

    # Consider using waitress or gunicorn for production
    # gunicorn 'higure.app:create_app()'
    app = create_app()
    app.run(host='0.0.0.0', port=args.port, debug=args.debug)

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix
from dotenv import load_dotenv
from typing import Optional, Dict, Any

from .config.settings import load_settings, normalize_mount_path
from .openapi import get_spec_document

load_dotenv()


def create_app(config: Optional[Dict[str, Any]] = None):
    app = Flask(__name__)

    app.config.update(load_settings())

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    app.config['DOCS_MOUNT_PATH'] = normalize_mount_path(app.config['DOCS_MOUNT_PATH'])
    app.logger.setLevel(str(app.config['LOG_LEVEL']).upper())

    # Document is built at start-up; SpecBuildError aborts create_app
    from .routes.docs import docs_bp, EXTENSION_KEY
    document = get_spec_document(app.config['SPEC_GENERATION'])
    app.extensions[EXTENSION_KEY] = document

    CORS(app, origins='*', send_wildcard=True, methods=['GET', 'OPTIONS'], allow_headers=['Content-Type'])

    if app.config['TRUST_PROXY_HEADERS']:
        # honour X-Forwarded-Proto / X-Forwarded-Host when building the UI's spec URL
        app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1)

    app.register_blueprint(docs_bp, url_prefix=app.config['DOCS_MOUNT_PATH'])

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    app.logger.info(
        'Serving OpenAPI %s (version %s, %d paths, %d operations) under %s',
        document.generation,
        document.version,
        document.path_count,
        document.operation_count,
        app.config['DOCS_MOUNT_PATH'],
    )
    return app

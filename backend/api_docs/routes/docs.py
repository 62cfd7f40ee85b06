from __future__ import annotations
from flask import Blueprint, Response, current_app, jsonify, render_template_string, url_for
from api_docs.openapi_builder import SpecDocument

docs_bp = Blueprint('api_docs', __name__)

EXTENSION_KEY = 'api_docs'

SWAGGER_UI_VERSION = '5.9.0'

SWAGGER_UI_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{ title }} Documentation</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{{ ui_version }}/swagger-ui.css" />
  <style>
    html { box-sizing: border-box; overflow-y: scroll; }
    *, *:before, *:after { box-sizing: inherit; }
    body { margin: 0; background: #fafafa; }
    .swagger-ui .topbar { display: none; }
    .swagger-ui .info { margin: 30px 0; }
    .swagger-ui .info .title { font-size: 36px; }
    .swagger-ui .scheme-container { background: #fff; box-shadow: 0 1px 2px rgba(0,0,0,0.1); }
    .swagger-ui .info hgroup.main a { color: #6366f1; }
    .swagger-ui .btn.authorize { background: #6366f1; border-color: #6366f1; }
    .swagger-ui .btn.authorize:hover { background: #4f46e5; }
    .swagger-ui .opblock.opblock-get .opblock-summary-method { background: #6366f1; }
    .swagger-ui .opblock.opblock-post .opblock-summary-method { background: #22c55e; }
    .swagger-ui .opblock.opblock-put .opblock-summary-method { background: #f59e0b; }
    .swagger-ui .opblock.opblock-delete .opblock-summary-method { background: #ef4444; }
  </style>
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@{{ ui_version }}/swagger-ui-bundle.js"></script>
  <script src="https://unpkg.com/swagger-ui-dist@{{ ui_version }}/swagger-ui-standalone-preset.js"></script>
  <script>
    window.onload = function() {
      window.ui = SwaggerUIBundle({
        url: {{ spec_url|tojson }},
        dom_id: '#swagger-ui',
        deepLinking: true,
        presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
        plugins: [SwaggerUIBundle.plugins.DownloadUrl],
        layout: "StandaloneLayout",
        defaultModelsExpandDepth: 1,
        defaultModelExpandDepth: 1,
        docExpansion: "list",
        filter: true,
        showExtensions: true,
        showCommonExtensions: true,
        tryItOutEnabled: true,
        persistAuthorization: true
      });
    };
  </script>
</body>
</html>
"""


def _document() -> SpecDocument:
    return current_app.extensions[EXTENSION_KEY]


def _endpoint_paths():
    mount = current_app.config['DOCS_MOUNT_PATH']
    return {
        'swagger_ui': mount,
        'openapi_json': f'{mount}/openapi.json',
        'openapi_yaml': f'{mount}/openapi.yaml',
        'health': f'{mount}/health',
    }


@docs_bp.get('/', strict_slashes=False)
def swagger_ui():
    doc = _document()
    # Absolute URL built from the incoming request's scheme and host
    spec_url = url_for('api_docs.openapi_json', _external=True)
    html = render_template_string(SWAGGER_UI_HTML, title=doc.title, ui_version=SWAGGER_UI_VERSION, spec_url=spec_url)
    return Response(html, mimetype='text/html')


@docs_bp.get('/openapi.json')
def openapi_json():
    return Response(_document().body, mimetype='application/json')


@docs_bp.get('/openapi.yaml')
def openapi_yaml():
    # Same JSON bytes, relabeled
    return Response(_document().body, mimetype='application/x-yaml')


@docs_bp.get('/health')
def health():
    endpoints = _endpoint_paths()
    endpoints.pop('health')
    return jsonify({
        'success': True,
        'message': 'API Documentation is available',
        'endpoints': endpoints,
        'version': _document().version,
    })


# Mount root answers GET with the UI; every other method lands here
@docs_bp.route('/', methods=['POST', 'PUT', 'PATCH', 'DELETE'], strict_slashes=False)
@docs_bp.route('/<path:subpath>', methods=['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE'])
def not_found(subpath=None):
    return jsonify({
        'success': False,
        'error': 'Documentation endpoint not found',
        'available_endpoints': list(_endpoint_paths().values()),
    }), 404

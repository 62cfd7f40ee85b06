from api_docs import create_app


ENDPOINTS = ['/api-docs', '/api-docs/openapi.json', '/api-docs/openapi.yaml', '/api-docs/health']


def test_swagger_ui_embeds_absolute_spec_url(client):
    resp = client.get('/api-docs/', base_url='https://docs.example.com')
    assert resp.status_code == 200
    assert resp.mimetype == 'text/html'
    html = resp.get_data(as_text=True)
    assert '"https://docs.example.com/api-docs/openapi.json"' in html
    assert 'swagger-ui-dist@5.9.0/swagger-ui-bundle.js' in html
    assert 'Rozo Backend API Documentation' in html


def test_swagger_ui_without_trailing_slash(client):
    resp = client.get('/api-docs')
    assert resp.status_code == 200
    assert '"http://localhost/api-docs/openapi.json"' in resp.get_data(as_text=True)


def test_json_and_yaml_serve_identical_bytes(client, app_instance):
    j = client.get('/api-docs/openapi.json')
    y = client.get('/api-docs/openapi.yaml')
    assert j.status_code == y.status_code == 200
    assert j.mimetype == 'application/json'
    assert y.mimetype == 'application/x-yaml'
    assert j.data == y.data
    assert j.data == app_instance.extensions['api_docs'].body


def test_health(client):
    resp = client.get('/api-docs/health')
    assert resp.status_code == 200
    body = resp.get_json()
    assert body == {
        'success': True,
        'message': 'API Documentation is available',
        'endpoints': {
            'swagger_ui': '/api-docs',
            'openapi_json': '/api-docs/openapi.json',
            'openapi_yaml': '/api-docs/openapi.yaml',
        },
        'version': client.get('/api-docs/openapi.json').get_json()['info']['version'],
    }
    assert body['version'] == '2.0.0'


def test_unknown_docs_path_lists_endpoints(client):
    for method in ('get', 'post', 'delete'):
        resp = getattr(client, method)('/api-docs/not-a-real-path')
        assert resp.status_code == 404, method
        assert resp.get_json() == {
            'success': False,
            'error': 'Documentation endpoint not found',
            'available_endpoints': ENDPOINTS,
        }


def test_non_get_on_mount_root_is_not_found(client):
    for path in ('/api-docs', '/api-docs/'):
        for method in ('post', 'put', 'patch', 'delete'):
            resp = getattr(client, method)(path)
            assert resp.status_code == 404, (method, path)
            body = resp.get_json()
            assert body['success'] is False, (method, path)
            assert body['available_endpoints'] == ENDPOINTS
    assert client.get('/api-docs').status_code == 200


def test_non_get_on_known_path_is_not_found(client):
    resp = client.post('/api-docs/openapi.json')
    assert resp.status_code == 404
    assert resp.get_json()['available_endpoints'] == ENDPOINTS


def test_path_outside_mount_uses_error_envelope(client):
    resp = client.get('/elsewhere')
    assert resp.status_code == 404
    err = resp.get_json()['error']
    assert err['status'] == 404
    assert err['title'] == 'Not Found'


def test_cors_allows_any_origin_for_reads(client):
    resp = client.get('/api-docs/openapi.json', headers={'Origin': 'https://editor.swagger.io'})
    assert resp.headers['Access-Control-Allow-Origin'] == '*'

    pre = client.options('/api-docs/openapi.json', headers={
        'Origin': 'https://editor.swagger.io',
        'Access-Control-Request-Method': 'GET',
        'Access-Control-Request-Headers': 'Content-Type',
    })
    assert pre.status_code == 200
    assert pre.headers['Access-Control-Allow-Origin'] == '*'
    methods = {m.strip() for m in pre.headers['Access-Control-Allow-Methods'].split(',')}
    assert methods == {'GET', 'OPTIONS'}
    assert pre.headers['Access-Control-Allow-Headers'].lower() == 'content-type'


def test_custom_mount_path_is_normalized():
    app = create_app({'SPEC_GENERATION': 'v2', 'DOCS_MOUNT_PATH': 'docs/', 'TRUST_PROXY_HEADERS': False})
    c = app.test_client()
    assert c.get('/docs/openapi.json').status_code == 200
    assert c.get('/api-docs/openapi.json').status_code == 404
    assert c.get('/docs/health').get_json()['endpoints']['openapi_yaml'] == '/docs/openapi.yaml'
    assert c.get('/docs/nope').get_json()['available_endpoints'][0] == '/docs'


def test_forwarded_headers_honoured_when_trusted():
    app = create_app({'SPEC_GENERATION': 'v2', 'DOCS_MOUNT_PATH': '/api-docs', 'TRUST_PROXY_HEADERS': True})
    resp = app.test_client().get('/api-docs/', headers={
        'X-Forwarded-Proto': 'https',
        'X-Forwarded-Host': 'api.rozo.ai',
    })
    assert '"https://api.rozo.ai/api-docs/openapi.json"' in resp.get_data(as_text=True)


def test_forwarded_headers_ignored_by_default(client):
    resp = client.get('/api-docs/', headers={'X-Forwarded-Host': 'evil.example'})
    assert 'evil.example' not in resp.get_data(as_text=True)


def test_v1_deployment(v1_client):
    spec = v1_client.get('/api-docs/openapi.json').get_json()
    assert spec['info']['version'] == '1.0.0'
    assert '/merchants' in spec['paths']
    assert v1_client.get('/api-docs/health').get_json()['version'] == '1.0.0'


def test_repeated_slashes_in_mount_collapse():
    app = create_app({'SPEC_GENERATION': 'v2', 'DOCS_MOUNT_PATH': '//docs', 'TRUST_PROXY_HEADERS': False})
    c = app.test_client()
    assert c.get('/docs/health').get_json()['endpoints']['swagger_ui'] == '/docs'
    assert c.get('/docs/nope').get_json()['available_endpoints'][1] == '/docs/openapi.json'

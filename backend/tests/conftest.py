import os, sys, pytest
# Ensure the backend directory is on path so 'api_docs' and 'scripts' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from api_docs import create_app


@pytest.fixture(scope='session')
def app_instance():
    app = create_app({'SPEC_GENERATION': 'v2', 'DOCS_MOUNT_PATH': '/api-docs', 'TRUST_PROXY_HEADERS': False})
    yield app


@pytest.fixture(scope='session')
def v1_app():
    return create_app({'SPEC_GENERATION': 'v1', 'DOCS_MOUNT_PATH': '/api-docs', 'TRUST_PROXY_HEADERS': False})


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()


@pytest.fixture()
def v1_client(v1_app):
    return v1_app.test_client()

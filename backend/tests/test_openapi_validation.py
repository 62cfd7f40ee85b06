import pytest
from api_docs import create_app
from api_docs.errors import SpecBuildError
from api_docs.openapi import build_openapi_spec, get_spec_document
from api_docs.openapi_parts import generations
from api_docs.openapi_parts.generations import Generation
from api_docs.openapi_parts.helpers import error_responses, json_response, operation, path_param
from api_docs.openapi_parts.validation import find_problems


def _spec(paths, schemas=None, parameters=None):
    return {
        'tags': [{'name': 'Orders'}],
        'paths': paths,
        'components': {
            'securitySchemes': {'BearerAuth': {'type': 'http', 'scheme': 'bearer'}},
            'parameters': parameters or {},
            'responses': {'NotFound': {'description': 'Not found'}},
            'schemas': schemas or {'Order': {'type': 'object'}},
        },
    }


def _op(**overrides):
    op = {
        'tags': ['Orders'],
        'responses': {'200': {'description': 'ok', 'content': {'application/json': {'schema': {'$ref': '#/components/schemas/Order'}}}}},
        'security': [{'BearerAuth': []}],
    }
    op.update(overrides)
    return op


def test_consistent_document_has_no_problems():
    assert find_problems(_spec({'/orders': {'get': _op()}})) == []


def test_dangling_reference_reported():
    op = _op(responses={'404': {'$ref': '#/components/responses/Gone'}})
    problems = find_problems(_spec({'/orders': {'get': op}}))
    assert any('dangling reference #/components/responses/Gone' in p for p in problems)


def test_tag_problems():
    problems = find_problems(_spec({'/a': {'get': _op(tags=['Nope'])}, '/b': {'get': _op(tags=[])}}))
    assert "GET /a uses undeclared tag 'Nope'" in problems
    assert 'GET /b has no tag' in problems


def test_response_problems():
    spec = _spec({
        '/a': {'get': _op(responses={})},
        '/b': {'get': _op(responses={'200': {'description': 'ok', 'content': {'application/json': {}}}})},
        '/c': {'get': _op(responses={'200': {'$ref': '#/components/schemas/Order'}})},
        '/d': {'get': _op(responses={'200': {}})},
    })
    problems = find_problems(spec)
    assert 'GET /a declares no responses' in problems
    assert 'GET /b response 200 (application/json) has no schema' in problems
    assert 'GET /c response 200 must reference components.responses' in problems
    assert 'GET /d response 200 has no description' in problems


def test_pin_header_without_pattern_reported():
    params = {'Pin': {'name': 'X-Pin-Code', 'in': 'header', 'schema': {'type': 'string'}}}
    op = _op(parameters=[{'$ref': '#/components/parameters/Pin'}])
    problems = find_problems(_spec({'/w': {'post': op}}, parameters=params))
    assert 'components.parameters.Pin: X-Pin-Code must carry pattern ^[0-9]{6}$' in problems
    assert 'POST /w: X-Pin-Code must carry pattern ^[0-9]{6}$' in problems


def test_pagination_rules():
    limit = {'name': 'limit', 'in': 'query', 'schema': {'type': 'integer'}}
    offset = {'name': 'offset', 'in': 'query', 'schema': {'type': 'integer', 'minimum': 1}}
    spec = _spec({
        '/a': {'get': _op(parameters=[dict(limit)])},
        '/b': {'get': _op(parameters=[dict(limit), dict(offset)])},
    })
    problems = find_problems(spec)
    assert 'GET /a must declare both limit and offset' in problems
    assert 'GET /b: limit must be bounded and have a default' in problems
    assert 'GET /b: offset must have minimum 0 and default 0' in problems


def test_undeclared_path_parameter_reported():
    spec = _spec({
        '/orders/{orderId}': {'get': _op()},
        '/ok/{orderId}': {'get': _op(parameters=[path_param('orderId')])},
    })
    problems = find_problems(spec)
    assert problems == ["GET /orders/{orderId} does not declare path parameter 'orderId'"]


def test_security_rules():
    spec = _spec({
        '/orders': {'get': _op(security=[])},
        '/cron/run': {'post': _op()},
    })
    problems = find_problems(spec, unauthenticated=('/cron/',))
    assert 'GET /orders must require BearerAuth' in problems
    assert 'POST /cron/run is internal and must declare an empty security requirement' in problems

    spec['components']['securitySchemes'] = {}
    assert 'security scheme BearerAuth is not declared' in find_problems(spec)


def test_schema_cycle_reported():
    schemas = {
        'Order': {'type': 'object', 'properties': {'wallet': {'$ref': '#/components/schemas/Wallet'}}},
        'Wallet': {'type': 'object', 'properties': {'order': {'$ref': '#/components/schemas/Order'}}},
    }
    problems = find_problems(_spec({'/orders': {'get': _op()}}, schemas=schemas))
    assert 'schema reference cycle: Order -> Wallet -> Order' in problems


def _broken_paths():
    return {
        '/orders/{orderId}': {
            'get': operation('Orders', 'Get order', 'Get order', {
                '200': json_response('ok', 'MissingSchema'),
                **error_responses('404'),
            }),
        },
    }


def _duplicate_paths():
    return {
        '/orders': {
            'get': operation('Orders', 'List orders', 'List orders', {'200': json_response('ok', 'SuccessResponse')}),
        },
    }


@pytest.fixture()
def fresh_cache():
    get_spec_document.cache_clear()
    yield
    get_spec_document.cache_clear()


def test_inconsistent_generation_fails_build(monkeypatch, fresh_cache):
    broken = Generation('v2', [{'name': 'Orders'}], [(_broken_paths, dict)])
    monkeypatch.setitem(generations.GENERATIONS, 'v2', broken)
    with pytest.raises(SpecBuildError) as excinfo:
        build_openapi_spec('v2')
    problems = excinfo.value.problems
    assert any('MissingSchema' in p for p in problems)
    assert "GET /orders/{orderId} does not declare path parameter 'orderId'" in problems
    assert str(excinfo.value).startswith('OpenAPI document is inconsistent: ')

    with pytest.raises(SpecBuildError):
        create_app({'SPEC_GENERATION': 'v2', 'DOCS_MOUNT_PATH': '/api-docs'})


def test_duplicate_operation_fails_build(monkeypatch, fresh_cache):
    dup = Generation('v2', [{'name': 'Orders'}], [(_duplicate_paths, dict), (_duplicate_paths, dict)])
    monkeypatch.setitem(generations.GENERATIONS, 'v2', dup)
    with pytest.raises(SpecBuildError) as excinfo:
        build_openapi_spec('v2')
    assert excinfo.value.problems == ['GET /orders is declared twice']


def test_error_message_truncates_long_problem_lists():
    err = SpecBuildError([f'problem {i}' for i in range(8)])
    assert str(err).endswith('(+3 more)')
    assert len(err.problems) == 8

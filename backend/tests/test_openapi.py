import dataclasses
import pytest
from api_docs.openapi import build_openapi_spec, get_spec_document
from api_docs.openapi_parts.validation import iter_operations, iter_refs, resolve_ref

GENERATIONS = ['v1', 'v2']


def test_openapi_spec_available(client):
    resp = client.get('/api-docs/openapi.json')
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['openapi'].startswith('3.')
    assert '/profile' in body['paths']
    assert body['info']['contact']['name'] == 'Rozo Support'
    assert [s['description'] for s in body['servers']] == ['Production server', 'Local development']


@pytest.mark.parametrize('generation', GENERATIONS)
def test_every_ref_resolves(generation):
    spec = build_openapi_spec(generation)
    refs = list(iter_refs(spec))
    assert refs, 'document should reuse components'
    for where, target in refs:
        assert resolve_ref(spec, target) is not None, f"{where} -> {target}"


@pytest.mark.parametrize('generation', GENERATIONS)
def test_every_operation_has_response_and_declared_tag(generation):
    spec = build_openapi_spec(generation)
    declared = {t['name'] for t in spec['tags']}
    for path, method, op in iter_operations(spec):
        assert op['responses'], f"{method} {path} has no responses"
        assert op['tags'] and set(op['tags']) <= declared, f"{method} {path} tags {op['tags']}"
        assert op['summary'] and op['description']


@pytest.mark.parametrize('generation', GENERATIONS)
def test_protected_operations_require_bearer(generation):
    spec = build_openapi_spec(generation)
    assert spec['components']['securitySchemes']['BearerAuth']['scheme'] == 'bearer'
    for path, method, op in iter_operations(spec):
        if path.startswith('/cron/'):
            assert op['security'] == [], f"{method} {path} should be unauthenticated"
        else:
            assert op['security'] == [{'BearerAuth': []}], f"{method} {path} missing bearer auth"


@pytest.mark.parametrize('generation', GENERATIONS)
def test_pin_header_always_six_digits(generation):
    spec = build_openapi_spec(generation)
    seen = 0
    for path, method, op in iter_operations(spec):
        for param in op.get('parameters', []):
            resolved = resolve_ref(spec, param['$ref']) if '$ref' in param else param
            if resolved['name'] == 'X-Pin-Code':
                seen += 1
                assert resolved['in'] == 'header'
                assert resolved['schema']['pattern'] == '^[0-9]{6}$', f"{method} {path}"
    assert seen >= 4


def test_pin_header_on_sensitive_operations():
    spec = build_openapi_spec('v2')
    pin_ref = {'$ref': '#/components/parameters/PinCodeHeader'}
    for path in ['/transfers/{walletId}/send', '/transfers/{walletId}/stellar/trustline',
                 '/transfers/{walletId}/stellar/send', '/withdrawals']:
        assert pin_ref in spec['paths'][path]['post']['parameters'], path


def test_list_operations_are_paginated():
    spec = build_openapi_spec('v2')
    for p in ['/orders', '/deposits', '/withdrawals']:
        params = spec['paths'][p]['get']['parameters']
        assert {'$ref': '#/components/parameters/LimitParam'} in params, p
        assert {'$ref': '#/components/parameters/OffsetParam'} in params, p
    comps = spec['components']['parameters']
    assert comps['LimitParam']['schema'] == {'type': 'integer', 'minimum': 1, 'maximum': 20, 'default': 10}
    assert comps['OffsetParam']['schema'] == {'type': 'integer', 'minimum': 0, 'default': 0}


def test_error_response_shape():
    spec = build_openapi_spec('v2')
    err = spec['components']['schemas']['ErrorResponse']
    assert set(err['properties']) == {'success', 'error', 'code'}
    assert 'code' not in err['required']
    for name in ['BadRequest', 'Unauthorized', 'Forbidden', 'NotFound', 'InternalError']:
        schema = spec['components']['responses'][name]['content']['application/json']['schema']
        assert schema == {'$ref': '#/components/schemas/ErrorResponse'}


def test_build_is_deterministic():
    import json
    a = json.dumps(build_openapi_spec('v2'))
    b = json.dumps(build_openapi_spec('v2'))
    assert a == b


def test_spec_document_is_shared_and_immutable():
    doc = get_spec_document('v2')
    assert get_spec_document('v2') is doc
    copy = doc.as_dict()
    copy['info']['version'] = '9.9.9'
    assert doc.as_dict()['info']['version'] == '2.0.0'
    assert doc.version == '2.0.0'
    with pytest.raises(dataclasses.FrozenInstanceError):
        doc.version = '9.9.9'  # type: ignore[misc]


def test_unknown_generation_rejected():
    with pytest.raises(ValueError):
        build_openapi_spec('v3')

import json
import re
from scripts import generate_spec
from api_docs.errors import SpecBuildError


def test_prints_fingerprint_by_default(capsys):
    assert generate_spec.main([]) == 0
    out = capsys.readouterr().out.strip()
    assert re.fullmatch(r'[0-9a-f]{64}', out)
    _, h = generate_spec.compute_spec_and_hash('v2')
    assert out == h


def test_fingerprint_differs_per_generation():
    _, v1 = generate_spec.compute_spec_and_hash('v1')
    _, v2 = generate_spec.compute_spec_and_hash('v2')
    assert v1 != v2


def test_writes_json(tmp_path, capsys):
    out = tmp_path / 'nested' / 'openapi.json'
    assert generate_spec.main(['--out', str(out)]) == 0
    assert 'Wrote v2 spec JSON' in capsys.readouterr().out
    spec = json.loads(out.read_text(encoding='utf-8'))
    assert spec['info']['version'] == '2.0.0'


def test_writes_yaml(tmp_path):
    import yaml
    out = tmp_path / 'openapi.v1.yaml'
    assert generate_spec.main(['--generation', 'v1', '--format', 'yaml', '--out', str(out)]) == 0
    text = out.read_text(encoding='utf-8')
    assert not text.lstrip().startswith('{')
    spec = yaml.safe_load(text)
    assert '/merchants' in spec['paths']
    assert spec['info']['version'] == '1.0.0'


def test_build_failure_exit_code(monkeypatch, capsys):
    def boom(generation):
        raise SpecBuildError(['GET /x declares no responses'])
    monkeypatch.setattr(generate_spec, 'build_openapi_spec', boom)
    assert generate_spec.main([]) == 3
    err = capsys.readouterr().err
    assert '  - GET /x declares no responses' in err

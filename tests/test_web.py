import pytest

from linkrisk import config, web


@pytest.fixture
def client():
    web.app.config['TESTING'] = True
    web.IP_REQS.clear()
    with web.app.test_client() as c:
        yield c
    web.IP_REQS.clear()


def test_index_form(client):
    rv = client.get('/')
    assert rv.status_code == 200
    assert b'name="url"' in rv.data


def test_index_post_renders_result(client):
    rv = client.post('/', data={'url': 'http://go0gle.com'})
    assert rv.status_code == 200
    assert b'UNSAFE' in rv.data
    assert b'Safety Score:</strong> 5%' in rv.data
    assert b'#e74c3c' in rv.data


def test_index_post_empty_url(client):
    rv = client.post('/', data={'url': '  '})
    assert rv.status_code == 200
    assert b'missing url' in rv.data


def test_api_analyze_get(client):
    rv = client.get('/api/analyze', query_string={'url': 'https://www.google.com'})
    assert rv.status_code == 200
    data = rv.get_json()
    assert data['result'] == {'score': 0, 'safePercent': 100, 'verdict': 'SAFE', 'findings': []}
    assert data['scanned_at'].endswith('Z')


def test_api_analyze_post_json(client):
    rv = client.post('/api/analyze', json={'url': 'http://www.paypa1-login-secure-verify.com'})
    assert rv.status_code == 200
    result = rv.get_json()['result']
    assert result['verdict'] == 'UNSAFE'
    assert result['score'] == 100


def test_api_analyze_missing_url(client):
    rv = client.post('/api/analyze', json={})
    assert rv.status_code == 400
    assert rv.get_json()['error'] == 'missing url'


def test_api_analyze_strict_mode(client, monkeypatch):
    monkeypatch.setattr(config, 'STRICT_INPUT', True)
    rv = client.get('/api/analyze', query_string={'url': 'go0gle'})
    assert rv.status_code == 400
    assert rv.get_json()['error'] == 'invalid url'


def test_rate_limit(client, monkeypatch):
    monkeypatch.setattr(config, 'RATE_LIMIT', 2)
    for _ in range(2):
        assert client.get('/api/analyze', query_string={'url': 'example.com'}).status_code == 200
    rv = client.get('/api/analyze', query_string={'url': 'example.com'})
    assert rv.status_code == 429
    assert rv.get_json()['error'] == 'rate_limited'


def test_health(client):
    rv = client.get('/health')
    assert rv.status_code == 200
    assert rv.get_json()['status'] == 'ok'


def test_api_analyze_non_object_json_body(client):
    for body in (["http://go0gle.com"], "http://go0gle.com", 42):
        rv = client.post('/api/analyze', json=body)
        assert rv.status_code == 400
        assert rv.get_json()['error'] == 'missing url'


def test_rate_limit_purges_expired_clients(client, monkeypatch):
    monkeypatch.setattr(config, 'RATE_WINDOW', 60.0)
    clock = {'now': 1000.0}
    monkeypatch.setattr(web.time, 'time', lambda: clock['now'])
    for i in range(50):
        client.get('/api/analyze', query_string={'url': 'example.com'},
                   headers={'X-Forwarded-For': f'10.0.0.{i}'})
    assert len(web.IP_REQS) == 50

    clock['now'] += 61.0
    rv = client.get('/api/analyze', query_string={'url': 'example.com'},
                    headers={'X-Forwarded-For': '10.0.1.1'})
    assert rv.status_code == 200
    assert list(web.IP_REQS) == ['10.0.1.1']

import pytest

from app import app as flask_app


@pytest.fixture
def client():
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as client:
        yield client


def test_health(client) -> None:
    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.get_json() == {'status': 'ok'}


def test_encode_defaults(client) -> None:
    resp = client.get('/api/encode', query_string={'text': 'HELLO WORLD'})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['version'] == 1
    assert body['error'] == 'M'
    assert body['mode'] == 'alphanumeric'
    assert body['size'] == 21
    assert body['border'] == 4
    assert len(body['matrix']) == 29
    assert all(len(row) == 29 for row in body['matrix'])
    assert body['segments'] == [{'mode': 'alphanumeric', 'length': 11}]
    assert len(body['codewords']) == 26


def test_encode_metrics(client) -> None:
    resp = client.get('/api/encode', query_string={'text': 'HELLO', 'border': '0'})
    metrics = resp.get_json()['metrics']
    assert metrics['modules'] == 441
    assert metrics['functional_modules'] == 233
    assert metrics['data_modules'] == 208
    assert 0 < metrics['dark_modules'] < 441


def test_encode_post_form(client) -> None:
    resp = client.post('/api/encode', data={
        'text': '12345', 'ecc': 'h', 'version': '3', 'mode': 'numeric', 'mask': '5',
    })
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['version'] == 3
    assert body['error'] == 'H'
    assert body['mask'] == 5
    assert body['mode'] == 'numeric'


def test_encode_invalid_border_falls_back(client) -> None:
    resp = client.get('/api/encode', query_string={'text': 'A', 'border': '99'})
    assert resp.get_json()['border'] == 4


def test_encode_missing_text(client) -> None:
    resp = client.get('/api/encode')
    assert resp.status_code == 400
    assert 'error' in resp.get_json()


def test_encode_invalid_error_level(client) -> None:
    resp = client.get('/api/encode', query_string={'text': 'A', 'ecc': 'X'})
    assert resp.status_code == 400
    assert 'error correction level' in resp.get_json()['error']


def test_encode_version_too_small(client) -> None:
    resp = client.get('/api/encode', query_string={'text': 'x' * 100, 'version': '1'})
    assert resp.status_code == 400
    assert 'version 1' in resp.get_json()['error']


def test_encode_invalid_character(client) -> None:
    resp = client.get('/api/encode', query_string={'text': 'abc', 'mode': 'numeric'})
    assert resp.status_code == 400


def test_encode_unknown_encoding(client) -> None:
    resp = client.get('/api/encode', query_string={'text': 'abc', 'encoding': 'no-such-codec'})
    assert resp.status_code == 400
    assert 'encoding' in resp.get_json()['error']


def test_masks(client) -> None:
    resp = client.get('/api/masks', query_string={'text': 'HELLO WORLD', 'ecc': 'Q'})
    assert resp.status_code == 200
    body = resp.get_json()
    scores = body['scores']
    assert sorted(scores) == [str(i) for i in range(8)]
    assert body['best_score'] == min(scores.values())
    assert scores[str(body['best_mask'])] == body['best_score']


def test_masks_missing_text(client) -> None:
    resp = client.post('/api/masks', data={})
    assert resp.status_code == 400

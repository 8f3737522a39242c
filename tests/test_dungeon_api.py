import roomcarver.routes.dungeon_api as dungeon_api
from roomcarver import create_app
from roomcarver.dungeon import ROOM_COUNT_MAX, ROOM_COUNT_MIN


def test_generate_returns_full_payload(client):
    r = client.get('/api/dungeon/generate?rooms=10')
    assert r.status_code == 200
    data = r.get_json()
    assert data['width'] == 64 and data['height'] == 64
    assert len(data['grid']) == 64
    assert all(v in (0, 1) for row in data['grid'] for v in row)
    assert 1 <= len(data['rooms']) <= 10
    assert len(data['corridors']) == len(data['rooms']) - 1
    assert data['metrics']['rooms_requested'] == 10


def test_seed_param_is_reproducible(client):
    a = client.get('/api/dungeon/generate?rooms=8&seed=77').get_json()
    b = client.get('/api/dungeon/generate?rooms=8&seed=77').get_json()
    assert a['seed'] == 77
    assert a['grid'] == b['grid']
    assert a['rooms'] == b['rooms']


def test_room_count_clamped_to_slider_bounds(client):
    low = client.get('/api/dungeon/generate?rooms=0').get_json()
    high = client.get('/api/dungeon/generate?rooms=500').get_json()
    assert low['metrics']['rooms_requested'] == ROOM_COUNT_MIN
    assert high['metrics']['rooms_requested'] == ROOM_COUNT_MAX


def test_invalid_query_param(client):
    r = client.get('/api/dungeon/generate?rooms=many')
    assert r.status_code == 400
    assert 'rooms' in r.get_json()['error']


def test_strict_config_error_is_400(tmp_path):
    app = create_app({'TESTING': True, 'DUNGEON_WIDTH': 3, 'DUNGEON_STRICT': True})
    r = app.test_client().get('/api/dungeon/generate')
    assert r.status_code == 400
    assert 'room bounds exceed grid size' in r.get_json()['error']


def test_metrics_disabled_omits_metrics():
    app = create_app({'TESTING': True, 'DUNGEON_ENABLE_GENERATION_METRICS': False, 'DUNGEON_SEED': 5})
    data = app.test_client().get('/api/dungeon/generate').get_json()
    assert 'metrics' not in data


def test_env_config_reaches_app(monkeypatch):
    monkeypatch.setenv('DUNGEON_WIDTH', '40')
    monkeypatch.setenv('DUNGEON_HEIGHT', '30')
    app = create_app({'TESTING': True})
    data = app.test_client().get('/api/dungeon/generate?seed=3').get_json()
    assert (data['width'], data['height']) == (40, 30)


def test_config_endpoint(client):
    r = client.get('/api/dungeon/config')
    assert r.status_code == 200
    data = r.get_json()
    assert data['config']['width'] == 64
    assert data['config']['seed'] == 1234
    assert data['room_count_bounds'] == {'min': ROOM_COUNT_MIN, 'max': ROOM_COUNT_MAX}


def test_healthz(client):
    r = client.get('/healthz')
    assert r.status_code == 200
    assert r.get_json()['status'] == 'ok'


def test_unexpected_error_returns_json_500(monkeypatch):
    app = create_app({'TESTING': False, 'PROPAGATE_EXCEPTIONS': False})

    def explode(self, room_count=None):
        raise RuntimeError('generator blew up')

    monkeypatch.setattr(dungeon_api.DungeonGenerator, 'generate', explode)
    r = app.test_client().get('/api/dungeon/generate?rooms=5')
    assert r.status_code == 500
    data = r.get_json()
    assert data['error'] == 'internal server error'
    assert len(data['error_id']) == 8

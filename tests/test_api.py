from datetime import datetime


def _data(res):
    body = res.get_json()
    assert body['success'] is True
    assert body['error'] is None
    return body['data']


def _error(res):
    body = res.get_json()
    assert body['success'] is False
    assert body['data'] is None
    return body['error']


def test_health(client):
    res = client.get('/health')
    assert res.status_code == 200
    assert _data(res) == {'status': 'ok', 'backend': 'file'}


def test_fetch_creates_default_card(client):
    res = client.get('/api/bingo')
    assert res.status_code == 200
    assert res.headers['Cache-Control'] == 'no-store'
    card = _data(res)
    assert card['id'] == 'main'
    assert card['cells'] == [''] * 25
    assert card['markedCells'] == []
    datetime.fromisoformat(card['updatedAt'])


def test_fetch_is_stable_across_polls(client):
    first = _data(client.get('/api/bingo'))
    second = _data(client.get('/api/bingo'))
    assert first == second


def test_toggle_cell(client):
    res = client.post('/api/bingo', json={'cellIndex': 12})
    assert res.status_code == 200
    assert _data(res)['markedCells'] == [12]

    res = client.post('/api/bingo', json={'cellIndex': 12})
    assert _data(res)['markedCells'] == []


def test_marks_are_shared_between_clients(flask_app):
    alice = flask_app.test_client()
    bob = flask_app.test_client()
    alice.post('/api/bingo', json={'cellIndex': 3})
    bob.post('/api/bingo', json={'cellIndex': 4})
    assert sorted(_data(alice.get('/api/bingo'))['markedCells']) == [3, 4]


def test_toggle_rejects_out_of_range_and_non_integer(client):
    for payload in ({'cellIndex': -1}, {'cellIndex': 25}, {'cellIndex': 1.5},
                    {'cellIndex': '3'}, {'cellIndex': None}, {}):
        res = client.post('/api/bingo', json=payload)
        assert res.status_code == 400, payload
        error = _error(res)
        assert error['code'] == 'validation_error'
        assert 'between 0 and 24' in error['message']

    assert _data(client.get('/api/bingo'))['markedCells'] == []


def test_invalid_json_body(client):
    res = client.post('/api/bingo', data='{nope', content_type='application/json')
    assert res.status_code == 400
    assert _error(res)['message'] == 'Invalid JSON body'


def test_save_requires_admin(client, cells):
    res = client.put('/api/bingo', json={'cells': cells})
    assert res.status_code == 401
    assert _error(res)['code'] == 'unauthorized'
    assert _data(client.get('/api/bingo'))['cells'] == [''] * 25


def test_unauthenticated_save_is_401_even_with_bad_payload(client):
    res = client.put('/api/bingo', json={'cells': 'nope'})
    assert res.status_code == 401


def test_admin_save_keeps_marks(admin_client, cells):
    admin_client.post('/api/bingo', json={'cellIndex': 0})
    admin_client.post('/api/bingo', json={'cellIndex': 6})

    res = admin_client.put('/api/bingo', json={'cells': cells})
    assert res.status_code == 200
    card = _data(res)
    assert card['cells'] == cells
    assert card['markedCells'] == [0, 6]

    assert _data(admin_client.get('/api/bingo'))['cells'] == cells


def test_admin_save_validation_messages(admin_client):
    res = admin_client.put('/api/bingo', json={'cells': [''] * 24})
    assert res.status_code == 400
    assert 'exactly 25 cells' in _error(res)['message']

    res = admin_client.put('/api/bingo', json={'cells': None})
    assert res.status_code == 400
    assert 'must be an array' in _error(res)['message']

    res = admin_client.put('/api/bingo', json={})
    assert res.status_code == 400
    assert 'must be an array' in _error(res)['message']

    cells = [''] * 25
    cells[5] = 'x' * 36
    res = admin_client.put('/api/bingo', json={'cells': cells})
    assert res.status_code == 400
    error = _error(res)
    assert error['message'].startswith('Cell 6:')
    assert error['details'] == {'cells': [error['message']]}


def test_reset_requires_admin(client):
    client.post('/api/bingo', json={'cellIndex': 1})
    res = client.delete('/api/bingo')
    assert res.status_code == 401
    assert _data(client.get('/api/bingo'))['markedCells'] == [1]


def test_admin_reset(admin_client, cells):
    admin_client.put('/api/bingo', json={'cells': cells})
    for index in (0, 1, 2):
        admin_client.post('/api/bingo', json={'cellIndex': index})

    res = admin_client.delete('/api/bingo')
    assert res.status_code == 200
    card = _data(res)
    assert card['markedCells'] == []
    assert card['cells'] == cells


def test_state_reports_win(client):
    for index in (4, 8, 12, 16):
        client.post('/api/bingo', json={'cellIndex': index})
    state = _data(client.get('/api/bingo/state'))
    assert state['hasWon'] is False
    assert state['winningCells'] == []

    client.post('/api/bingo', json={'cellIndex': 20})
    state = _data(client.get('/api/bingo/state'))
    assert state['hasWon'] is True
    assert state['winningCells'] == [4, 8, 12, 16, 20]
    assert state['markedCells'] == [4, 8, 12, 16, 20]


def test_persistence_failure_is_generic_503(client, flask_app):
    path = flask_app.config['CARD_FILE_PATH']
    with open(path, 'w', encoding='utf-8') as fh:
        fh.write('{corrupt')

    res = client.get('/api/bingo')
    assert res.status_code == 503
    error = _error(res)
    assert error['code'] == 'persistence_error'
    assert error['message'] == 'Card storage is unavailable'
    assert 'corrupt' not in res.get_data(as_text=True)

    res = client.post('/api/bingo', json={'cellIndex': 0})
    assert res.status_code == 503


def test_unknown_route(client):
    res = client.get('/api/nope')
    assert res.status_code == 404
    assert _error(res)['code'] == 'not_found'


def test_toggle_body_must_be_an_object(client):
    for body in (5, [], [3], 'x'):
        res = client.post('/api/bingo', json=body)
        assert res.status_code == 400, body
        assert _error(res)['message'] == 'Invalid cellIndex. Must be a number between 0 and 24'


def test_save_body_must_be_an_object(admin_client):
    res = admin_client.put('/api/bingo', json=[''] * 25)
    assert res.status_code == 400
    assert _error(res)['message'] == 'Cells must be an array'

import pytest

from bingo_board import create_app
from bingo_board.repositories.file_backend import FileCardBackend
from bingo_board.services.card_store import CardStore

ADMIN_PASSWORD = 'letmein'


@pytest.fixture()
def flask_app(tmp_path):
    application = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'ADMIN_PASSWORD': ADMIN_PASSWORD,
        'CARD_BACKEND': 'file',
        'CARD_FILE_PATH': str(tmp_path / 'card.json'),
        'CARD_CENTER_LABEL': '',
    })
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def admin_client(flask_app):
    test_client = flask_app.test_client()
    res = test_client.post('/api/auth/login', json={'password': ADMIN_PASSWORD})
    assert res.status_code == 200
    return test_client


@pytest.fixture()
def file_backend(tmp_path):
    return FileCardBackend(tmp_path / 'store' / 'card.json')


@pytest.fixture()
def store(file_backend):
    return CardStore(file_backend)


@pytest.fixture()
def cells():
    return [f'Cell {i}' for i in range(25)]

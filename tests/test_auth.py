import pytest
from flask import Flask
from flask.sessions import SecureCookieSessionInterface

from bingo_board import create_app


def test_session_starts_anonymous(client):
    res = client.get('/api/auth/session')
    assert res.get_json()['data'] == {'authenticated': False}


def test_login_and_logout(client):
    res = client.post('/api/auth/login', json={'password': 'letmein'})
    assert res.status_code == 200
    assert client.get('/api/auth/session').get_json()['data']['authenticated'] is True

    res = client.post('/api/auth/logout')
    assert res.status_code == 200
    assert client.get('/api/auth/session').get_json()['data']['authenticated'] is False
    assert client.delete('/api/bingo').status_code == 401


def test_wrong_password(client):
    res = client.post('/api/auth/login', json={'password': 'guess'})
    assert res.status_code == 401
    assert res.get_json()['error']['message'] == 'Invalid password'
    assert client.get('/api/auth/session').get_json()['data']['authenticated'] is False


def test_login_requires_password_field(client):
    res = client.post('/api/auth/login', json={})
    assert res.status_code == 400


def test_unset_admin_password_disables_login(tmp_path):
    application = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'ADMIN_PASSWORD': '',
        'CARD_BACKEND': 'file',
        'CARD_FILE_PATH': str(tmp_path / 'card.json'),
    })
    test_client = application.test_client()
    assert test_client.post('/api/auth/login', json={'password': ''}).status_code == 401
    assert test_client.put('/api/bingo', json={'cells': [''] * 25}).status_code == 401


def _production_app(tmp_path, monkeypatch, secret_key):
    monkeypatch.setenv('APP_ENV', 'production')
    return create_app({
        'APP_ENV': 'production',
        'SECRET_KEY': secret_key,
        'ADMIN_PASSWORD': 'real-secret',
        'CARD_BACKEND': 'file',
        'CARD_FILE_PATH': str(tmp_path / 'card.json'),
    })


@pytest.mark.parametrize('secret_key', ['', None, 'dev-secret'])
def test_production_refuses_default_secret_key(tmp_path, monkeypatch, secret_key):
    with pytest.raises(RuntimeError, match='SECRET_KEY'):
        _production_app(tmp_path, monkeypatch, secret_key)


def test_session_signed_with_dev_key_is_not_admin_in_production(tmp_path, monkeypatch):
    application = _production_app(tmp_path, monkeypatch, 'a-long-private-production-key')
    test_client = application.test_client()
    test_client.post('/api/bingo', json={'cellIndex': 7})

    signer = Flask('forger')
    signer.secret_key = 'dev-secret'
    forged = SecureCookieSessionInterface().get_signing_serializer(signer).dumps({'is_admin': True})
    test_client.set_cookie('session', forged)

    assert test_client.delete('/api/bingo').status_code == 401
    assert test_client.get('/api/bingo').get_json()['data']['markedCells'] == [7]

import pytest

from backend import create_app
from frontend.api import ApiClient

API_BASE = "http://testserver"


@pytest.fixture
def app(tmp_path):
    """
    App backed by a fresh SQLite file per test.
    """
    app = create_app({
        "TESTING": True,
        "DB_PATH": str(tmp_path / "finance.db"),
        "JWT_SECRET_KEY": "test-secret-key-with-enough-length-for-hs256",
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


def signup(client, username="alice", password="secret"):
    resp = client.post("/auth/signup", json={"username": username, "password": password})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    data = signup(client, "alice", "secret")
    return {"user": data["user"], "token": data["token"], "headers": auth_headers(data["token"])}


@pytest.fixture
def bob(client):
    data = signup(client, "bob", "hunter2")
    return {"user": data["user"], "token": data["token"], "headers": auth_headers(data["token"])}


class FlaskResponse:
    """requests.Response look-alike over a Flask test response."""

    def __init__(self, resp):
        self._resp = resp
        self.status_code = resp.status_code

    def json(self):
        data = self._resp.get_json(silent=True)
        if data is None:
            raise ValueError("no JSON body")
        return data


class FlaskSession:
    """Routes ApiClient calls to the Flask test client instead of the network."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, headers=None, json=None, params=None, timeout=None):
        path = url[len(API_BASE):]
        self.calls.append((method, path))
        resp = self.test_client.open(path, method=method, headers=headers, json=json, query_string=params)
        return FlaskResponse(resp)


@pytest.fixture
def flask_session(client):
    return FlaskSession(client)


@pytest.fixture
def api(flask_session):
    return ApiClient(base_url=API_BASE, session=flask_session)

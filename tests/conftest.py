import pytest
from fastapi.testclient import TestClient

import config
from main import app


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "USERS_FILE", tmp_path / "users.json")
    monkeypatch.setattr(config, "POSTS_FILE", tmp_path / "posts.json")
    return tmp_path


@pytest.fixture
def client(data_dir):
    return TestClient(app)


@pytest.fixture
def register(client):
    def _register(username, password, email=None):
        res = client.post("/register", json={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        })
        assert res.status_code == 201
        return res.json()
    return _register


@pytest.fixture
def create_post(client):
    def _create(username, password, title="T", content="C"):
        res = client.post("/posts", json={
            "username": username,
            "password": password,
            "title": title,
            "content": content,
        })
        assert res.status_code == 201
        return res.json()
    return _create

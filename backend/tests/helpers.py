import uuid
from fastapi.testclient import TestClient
from gymtracker.main import app

client = TestClient(app)

PWD = "StrongPassw0rd!"

def uniq(prefix="u"):
    return f"{prefix}_{uuid.uuid4().hex[:10]}"

def register(username, pwd=PWD):
    return client.post("/register", json={"username": username, "password": pwd})

def login(username, pwd=PWD):
    return client.post("/login", json={"username": username, "password": pwd})

def auth_headers(username=None):
    """Register a fresh user and return (headers, user_id)."""
    username = username or uniq()
    register(username)
    body = login(username).json()
    return {"Authorization": f"Bearer {body['token']}"}, body["userId"]

def make_definition(h, name=None, description=None):
    payload = {"name": name or uniq("ex")}
    if description is not None:
        payload["description"] = description
    r = client.post("/exercise-definitions", headers=h, json=payload)
    assert r.status_code == 201, r.text
    return r.json()

from helpers import client, uniq, register, login, PWD

def test_register_201_then_duplicate_409_regardless_of_password():
    name = uniq()
    assert register(name).status_code == 201
    r = register(name, "another-password")
    assert r.status_code == 409

def test_register_missing_fields_400():
    r = client.post("/register", json={"username": uniq()})
    assert r.status_code == 400
    r = client.post("/register", json={"password": PWD})
    assert r.status_code == 400
    r = client.post("/register", json={"username": "", "password": PWD})
    assert r.status_code == 400

def test_usernames_are_case_sensitive():
    name = uniq("Case")
    assert register(name).status_code == 201
    assert register(name.lower()).status_code == 201

def test_login_returns_token_and_user_id():
    name = uniq()
    register(name)
    r = login(name)
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Login successful"
    assert body["token"]
    assert body["userId"]

def test_two_logins_issue_different_tokens():
    name = uniq()
    register(name)
    assert login(name).json()["token"] != login(name).json()["token"]

def test_wrong_password_and_unknown_user_look_the_same():
    name = uniq()
    register(name)
    wrong = login(name, "WrongPass123!")
    unknown = login(uniq())
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json()

def test_login_missing_fields_401():
    r = client.post("/login", json={})
    assert r.status_code == 401

def test_password_is_not_stored_in_plain_text():
    from gymtracker.db import SessionLocal
    from gymtracker.repositories.user_repo import UserRepository

    name = uniq()
    register(name)
    db = SessionLocal()
    user = UserRepository(db).get_by_username(name)
    assert user.password_hash != PWD
    db.close()

def test_long_passwords_compare_in_full():
    name = uniq()
    assert register(name, "a" * 72 + "RIGHT").status_code == 201
    r = login(name, "a" * 72 + "WRONG")
    assert r.status_code == 401
    assert login(name, "a" * 72 + "RIGHT").status_code == 200

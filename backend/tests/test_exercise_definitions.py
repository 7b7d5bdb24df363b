from helpers import client, auth_headers, make_definition

def test_create_defaults_description_to_empty():
    h, user_id = auth_headers()
    d = make_definition(h, "Bench Press")
    assert d["name"] == "Bench Press"
    assert d["description"] == ""
    assert d["userId"] == user_id
    assert d["id"]

def test_duplicate_name_409_per_user_only():
    h, _ = auth_headers()
    make_definition(h, "Deadlift", "hinge")
    r = client.post("/exercise-definitions", headers=h, json={"name": "Deadlift"})
    assert r.status_code == 409

    other, _ = auth_headers()
    r = client.post("/exercise-definitions", headers=other, json={"name": "Deadlift"})
    assert r.status_code == 201

def test_missing_or_blank_name_400():
    h, _ = auth_headers()
    assert client.post("/exercise-definitions", headers=h, json={"description": "x"}).status_code == 400
    assert client.post("/exercise-definitions", headers=h, json={"name": "   "}).status_code == 400

def test_list_sorted_by_name_and_scoped_to_owner():
    h, _ = auth_headers()
    for name in ("Squat", "Bench Press", "Overhead Press"):
        make_definition(h, name)
    other, _ = auth_headers()
    make_definition(other, "Curl")

    r = client.get("/exercise-definitions", headers=h)
    assert r.status_code == 200
    assert [d["name"] for d in r.json()] == ["Bench Press", "Overhead Press", "Squat"]

def test_names_are_stored_as_sent():
    h, _ = auth_headers()
    padded = make_definition(h, "Squat ")
    assert padded["name"] == "Squat "
    # distinct from the unpadded name
    assert make_definition(h, "Squat")["name"] == "Squat"
    names = [d["name"] for d in client.get("/exercise-definitions", headers=h).json()]
    assert sorted(names) == ["Squat", "Squat "]

from helpers import client, auth_headers, make_definition

def log(h, date, *exercises):
    payload = {
        "date": date,
        "completedExercises": [
            {"exerciseDefinitionId": ex_id, "exerciseName": "X", "sets": [{"reps": r, "weight": w} for r, w in sets]}
            for ex_id, sets in exercises
        ],
    }
    r = client.post("/workouts", headers=h, json=payload)
    assert r.status_code == 201, r.text
    return r.json()

def test_most_recent_date_wins():
    h, _ = auth_headers()
    squat = make_definition(h, "Squat")["id"]
    log(h, "2024-02-01T09:00:00Z", (squat, [(5, 140)]))
    log(h, "2024-01-01T09:00:00Z", (squat, [(5, 100), (5, 105)]))
    log(h, "2024-03-01T09:00:00Z", (squat, [(3, 150), (2, 155)]))

    r = client.get(f"/workouts/last-exercise/{squat}", headers=h)
    assert r.status_code == 200
    body = r.json()
    assert body["date"] == "2024-03-01T09:00:00Z"
    assert [(s["reps"], s["weight"]) for s in body["sets"]] == [(3, 150), (2, 155)]

def test_skips_newer_sessions_without_the_exercise():
    h, _ = auth_headers()
    squat = make_definition(h, "Squat")["id"]
    bench = make_definition(h, "Bench Press")["id"]
    log(h, "2024-01-01", (squat, [(5, 100)]))
    log(h, "2024-06-01", (bench, [(8, 60)]))

    body = client.get(f"/workouts/last-exercise/{squat}", headers=h).json()
    assert body["date"] == "2024-01-01"
    assert [s["reps"] for s in body["sets"]] == [5]

def test_first_occurrence_within_session_wins():
    h, _ = auth_headers()
    squat = make_definition(h, "Squat")["id"]
    log(h, "2024-04-01", (squat, [(5, 100)]), (squat, [(10, 60)]))

    body = client.get(f"/workouts/last-exercise/{squat}", headers=h).json()
    assert [(s["reps"], s["weight"]) for s in body["sets"]] == [(5, 100)]

def test_no_history_404():
    h, _ = auth_headers()
    squat = make_definition(h, "Squat")["id"]
    assert client.get(f"/workouts/last-exercise/{squat}", headers=h).status_code == 404

def test_other_users_history_is_invisible():
    owner, _ = auth_headers()
    intruder, _ = auth_headers()
    squat = make_definition(owner, "Squat")["id"]
    log(owner, "2024-01-01", (squat, [(5, 100)]))
    assert client.get(f"/workouts/last-exercise/{squat}", headers=intruder).status_code == 404

def test_equal_dates_pick_the_session_listed_first():
    h, _ = auth_headers()
    squat = make_definition(h, "Squat")["id"]
    for reps in (1, 2, 3):
        log(h, "2024-05-05", (squat, [(reps, 100)]))

    newest = client.get("/workouts", headers=h).json()[0]
    expected = [s["reps"] for s in newest["completedExercises"][0]["sets"]]

    answers = [client.get(f"/workouts/last-exercise/{squat}", headers=h).json() for _ in range(3)]
    for body in answers:
        assert body["date"] == "2024-05-05"
        assert [s["reps"] for s in body["sets"]] == expected

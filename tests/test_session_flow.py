from datetime import datetime

def template_id(client, name):
    return next(t["id"] for t in client.get("/templates").json() if t["name"] == name)

def log_set(client, tid, reps, weight):
    return client.post("/session/sets", json={"template_id": tid, "reps": reps, "weight": weight})

def test_templates_listed_by_name(client):
    r = client.get("/templates")
    assert r.status_code == 200
    names = [t["name"] for t in r.json()]
    assert len(names) == 25
    assert names == sorted(names)

def test_templates_filtered_by_group(client):
    push = client.get("/templates", params={"group": "push"}).json()
    assert push and all(t["muscle_group"] == "push" for t in push)
    assert client.get("/templates", params={"group": "arms"}).status_code == 422

def test_template_404(client):
    assert client.get("/templates/999999").status_code == 404

def test_full_workout(client):
    assert client.get("/session").status_code == 404

    r = client.post("/session", json={"notes": "  push day  "})
    assert r.status_code == 201
    body = r.json()
    workout_id = body["id"]
    assert body["notes"] == "push day"
    assert body["title"].endswith(" Workout")
    assert body["totals"] == {"exercises": 0, "sets": 0, "reps": 0, "lbs": 0}

    bench = template_id(client, "Bench Press")
    assert log_set(client, bench, 8, 100).status_code == 201
    r = log_set(client, bench, 5, 120)
    assert r.status_code == 201
    assert r.json()["completed"] is True

    r = client.get("/session")
    assert r.status_code == 200
    active = r.json()
    assert len(active["exercises"]) == 1
    assert active["exercises"][0]["name"] == "Bench Press"
    assert active["total_weight"] == 1400
    assert active["totals"] == {"exercises": 1, "sets": 2, "reps": 13, "lbs": 1400}

    r = client.get(f"/session/exercises/{bench}")
    assert r.json() == {"template_id": bench, "sets": 2, "reps": 13, "lbs": 1400}

    r = client.post("/session/end")
    assert r.status_code == 200
    assert r.json()["id"] == workout_id
    assert r.json()["ended_at"] is not None

    assert client.get(f"/templates/{bench}").json()["personal_best"] == 120
    assert client.get("/session").status_code == 404

def test_second_start_conflicts(client):
    first = client.post("/session").json()["id"]
    r = client.post("/session")
    assert r.status_code == 409
    assert client.get("/session").json()["id"] == first

def test_record_set_requires_session(client):
    squat = template_id(client, "Squat")
    assert log_set(client, squat, 5, 100).status_code == 409

def test_record_set_validation(client):
    client.post("/session")
    squat = template_id(client, "Squat")
    assert log_set(client, squat, 0, 100).status_code == 422
    assert log_set(client, squat, 5, -1).status_code == 422
    assert log_set(client, 999999, 5, 100).status_code == 404

def test_end_when_idle(client):
    assert client.post("/session/end").status_code == 204

def test_live_stats_for_untouched_exercise(client):
    client.post("/session")
    squat = template_id(client, "Squat")
    r = client.get(f"/session/exercises/{squat}")
    assert r.json() == {"template_id": squat, "sets": 0, "reps": 0, "lbs": 0}

def test_history_newest_first(client):
    row = template_id(client, "Bent-over Rows")
    for weight in (95, 105, 115, 125, 135):
        client.post("/session")
        log_set(client, row, 8, weight)
        log_set(client, row, 10, weight)
        client.post("/session/end")

    r = client.get(f"/templates/{row}/history")
    assert r.status_code == 200
    body = r.json()
    assert body["personal_best"] == 135
    assert [e["summary"] for e in body["entries"]] == [
        "2 x 8-10 x 135 lbs",
        "2 x 8-10 x 125 lbs",
        "2 x 8-10 x 115 lbs",
        "2 x 8-10 x 105 lbs",
    ]
    assert len(client.get(f"/templates/{row}/history", params={"limit": 2}).json()["entries"]) == 2

def test_stats_and_workout_listing(client):
    bench, squat = template_id(client, "Bench Press"), template_id(client, "Squat")
    client.post("/session")
    log_set(client, bench, 5, 100)
    log_set(client, squat, 5, 200)
    client.post("/session/end")

    assert client.get("/stats").json() == {
        "workouts_per_week": 1,
        "workouts_this_month": 1,
        "exercises_per_workout": 2,
        "exercises_this_month": 2,
    }

    workouts = client.get("/workouts").json()
    assert len(workouts) == 1
    assert workouts[0]["exercise_count"] == 2
    assert workouts[0]["total_weight"] == 1500

    detail = client.get(f"/workouts/{workouts[0]['id']}").json()
    assert [ex["name"] for ex in detail["exercises"]] == ["Bench Press", "Squat"]
    assert client.get("/workouts/999999").status_code == 404

def test_workouts_by_month(client):
    client.post("/session")
    client.post("/session/end")
    now = datetime.now()
    assert len(client.get("/workouts", params={"year": now.year, "month": now.month}).json()) == 1
    other = 1 if now.month != 1 else 2
    assert client.get("/workouts", params={"year": now.year, "month": other}).json() == []
    assert client.get("/workouts", params={"year": now.year}).status_code == 422

def test_workouts_in_last_month_of_year_9999(client):
    resp = client.get("/workouts", params={"year": 9999, "month": 12})
    assert resp.status_code == 200
    assert resp.json() == []

def test_empty_stats(client):
    assert client.get("/stats").json() == {
        "workouts_per_week": 0,
        "workouts_this_month": 0,
        "exercises_per_workout": 0,
        "exercises_this_month": 0,
    }

from conftest import register


def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_register_login_and_me(client):
    headers = register(client, email="Pat@Example.com", password="long-enough-pw", name="Pat")
    me = client.get("/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "pat@example.com"

    ok = client.post("/auth/login", json={"email": "pat@example.com", "password": "long-enough-pw"})
    assert ok.status_code == 200
    assert ok.json()["token_type"] == "bearer"

    bad = client.post("/auth/login", json={"email": "pat@example.com", "password": "wrong-password"})
    assert bad.status_code == 401

    dup = client.post("/auth/register", json={"email": "pat@example.com", "password": "another-pw"})
    assert dup.status_code == 409


def test_requires_auth(client):
    assert client.get("/logs/").status_code == 401
    assert client.get("/users/me", headers={"Authorization": "Bearer nope"}).status_code == 401


def test_goals_and_preferences(client, auth):
    r = client.put("/users/me/goals", json={"steps_goal": 8000, "water_goal_liters": 2.5}, headers=auth)
    assert r.status_code == 200, r.text
    assert r.json()["steps_goal"] == 8000
    assert r.json()["sleep_goal_hours"] is None

    # partial update keeps other goals
    r = client.put("/users/me/goals", json={"sleep_goal_hours": 7.5}, headers=auth)
    assert r.json()["steps_goal"] == 8000
    assert r.json()["sleep_goal_hours"] == 7.5

    r = client.put("/users/me/preferences", json={"dark_mode": True}, headers=auth)
    assert r.json()["dark_mode"] is True


def test_create_update_and_list_log(client, auth):
    payload = {
        "weight": 80.4,
        "steps": 9000,
        "calories": 2100.6,
        "water_liters": 2.0,
        "workout_done": True,
        "workout_type": "Push",
        "wake_time": "06:30",
        "sleep_time": "22:45",
        "notes": "",
    }
    cr = client.put("/logs/2025-01-06", json=payload, headers=auth)
    assert cr.status_code == 200, cr.text
    log = cr.json()
    assert log["calories"] == 2101
    assert log["wake_time"] == "06:30"

    # second save on the same date updates the same row
    up = client.put("/logs/2025-01-06", json={"steps": 12000, "workout_done": False}, headers=auth)
    assert up.status_code == 200
    assert up.json()["id"] == log["id"]
    assert up.json()["steps"] == 12000
    assert up.json()["workout_type"] is None
    assert up.json()["weight"] == 80.4

    client.put("/logs/2025-01-07", json={"steps": 100}, headers=auth)
    client.put("/logs/2025-02-01", json={"steps": 100}, headers=auth)

    lr = client.get("/logs/", params={"start_date": "2025-01-01", "end_date": "2025-01-31"}, headers=auth)
    assert lr.status_code == 200
    assert [r["date"] for r in lr.json()] == ["2025-01-07", "2025-01-06"]

    one = client.get("/logs/2025-01-07", headers=auth)
    assert one.json()["steps"] == 100
    assert client.get("/logs/2025-01-08", headers=auth).status_code == 404


def test_log_normalization(client, auth):
    r = client.put(
        "/logs/2025-01-06",
        json={"water_liters": 0, "wake_time": "", "workout_done": False, "workout_type": "Legs"},
        headers=auth,
    )
    assert r.status_code == 200
    body = r.json()
    assert body["water_liters"] is None
    assert body["wake_time"] is None
    assert body["workout_type"] is None

    bad = client.put("/logs/2025-01-06", json={"sleep_time": "25:00"}, headers=auth)
    assert bad.status_code == 422
    assert "sleep_time" in bad.json()["detail"]

    neg = client.put("/logs/2025-01-06", json={"steps": -5}, headers=auth)
    assert neg.status_code == 422


def test_logs_are_private_per_user(client, auth):
    client.put("/logs/2025-01-06", json={"steps": 5000}, headers=auth)
    other = register(client, email="other@example.com")
    assert client.get("/logs/2025-01-06", headers=other).status_code == 404
    assert client.get("/logs/", headers=other).json() == []


def test_summary_and_export(client, auth):
    client.put("/logs/2025-01-06", json={"weight": 80, "steps": 10000, "workout_done": True}, headers=auth)
    client.put("/logs/2025-01-07", json={"steps": 5000, "notes": 'said "hi", left'}, headers=auth)
    params = {"start_date": "2025-01-01", "end_date": "2025-01-31"}

    s = client.get("/reports/summary", params=params, headers=auth).json()
    assert s["count"] == 2
    assert s["weight_entries"] == 1
    assert s["workout_days"] == 1
    assert s["avg_steps"] == 7500

    ex = client.get("/reports/export", params=params, headers=auth)
    assert ex.status_code == 200
    assert ex.headers["content-type"].startswith("text/csv")
    assert "fitness-report-2025-01-01-to-2025-01-31.csv" in ex.headers["content-disposition"]
    lines = ex.text.splitlines()
    assert len(lines) == 3
    assert lines[1].startswith('"2025-01-07"')

    empty = client.get("/reports/export", params={"start_date": "2024-01-01", "end_date": "2024-01-31"}, headers=auth)
    assert empty.status_code == 404


def test_empty_summary(client, auth):
    s = client.get("/reports/summary", params={"start_date": "2025-01-01", "end_date": "2025-01-31"}, headers=auth)
    assert s.json()["count"] == 0
    assert s.json()["avg_steps"] == 0


def test_calendar_and_consistency(client, auth):
    client.put("/users/me/goals", json={"steps_goal": 8000}, headers=auth)
    client.put("/logs/2025-01-08", json={"workout_done": False, "steps": 9000}, headers=auth)
    client.put("/logs/2025-01-09", json={"workout_done": True, "steps": 1000}, headers=auth)
    client.put("/logs/2025-01-10", json={"workout_done": True, "steps": 8000}, headers=auth)

    cal = client.get("/calendar/", params={"month": "2025-01", "goal": "workout"}, headers=auth)
    assert cal.status_code == 200, cal.text
    body = cal.json()
    assert body["streak"] == 2
    assert len(body["days"]) == 31
    status = {d["date"]: d["status"] for d in body["days"]}
    assert status["2025-01-08"] == "not-met"
    assert status["2025-01-10"] == "met"
    assert status["2025-01-11"] == "empty"

    steps = client.get("/calendar/", params={"month": "2025-01", "goal": "steps"}, headers=auth).json()
    assert steps["streak"] == 1

    c = client.get(
        "/reports/consistency",
        params={"goal": "steps", "start_date": "2025-01-01", "end_date": "2025-01-31"},
        headers=auth,
    ).json()
    assert c == {"goal": "steps", "score": 67, "streak": 1, "days": 3}


def test_series(client, auth):
    client.put("/logs/2025-01-06", json={"weight": 81, "steps": 4000, "wake_time": "07:00", "sleep_time": "23:00"}, headers=auth)
    client.put("/logs/2025-01-07", json={"steps": 6000, "water_liters": 2}, headers=auth)
    r = client.get("/reports/series", params={"start_date": "2025-01-01", "end_date": "2025-01-31"}, headers=auth)
    assert r.status_code == 200
    body = r.json()
    # oldest first for charts
    assert [p["date"] for p in body["series"]["steps"]] == ["2025-01-06", "2025-01-07"]
    assert body["series"]["sleep"] == [{"date": "2025-01-06", "hours": 8.0}]
    assert body["overall_consistency"] == 50


def test_foods_search_and_add(client, auth):
    for name in ["Paneer Tikka", "Masala Dosa", "paneer butter masala"]:
        r = client.post("/foods/", json={"name": name, "calories_per_unit": 250}, headers=auth)
        assert r.status_code == 200
    found = client.get("/foods/", params={"q": "PANEER"}, headers=auth).json()
    assert sorted(f["name"] for f in found) == ["Paneer Tikka", "paneer butter masala"]
    assert found[0]["protein_per_unit"] == 0


def test_push_subscription_upsert_and_delete(client, auth):
    sub = {"endpoint": "https://push.example/abc", "keys": {"p256dh": "k1", "auth": "a1"}}
    first = client.post("/push/subscriptions", json=sub, headers=auth).json()
    sub["keys"]["p256dh"] = "k2"
    second = client.post("/push/subscriptions", json=sub, headers=auth).json()
    assert first["id"] == second["id"]

    r = client.delete("/push/subscriptions", params={"endpoint": sub["endpoint"]}, headers=auth)
    assert r.json()["deleted"] == 1


def test_workout_type_needs_a_done_workout(client, auth):
    # label alone on a new day
    r = client.put("/logs/2025-01-06", json={"workout_type": "Legs"}, headers=auth)
    assert r.status_code == 200
    assert r.json()["workout_done"] is None
    assert r.json()["workout_type"] is None

    # label alone on a day already saved as not done
    client.put("/logs/2025-01-07", json={"workout_done": False}, headers=auth)
    r = client.put("/logs/2025-01-07", json={"workout_type": "Push"}, headers=auth)
    assert r.json()["workout_done"] is False
    assert r.json()["workout_type"] is None

    # a done workout keeps its label across later partial saves
    client.put("/logs/2025-01-08", json={"workout_done": True, "workout_type": "Pull"}, headers=auth)
    r = client.put("/logs/2025-01-08", json={"steps": 4000}, headers=auth)
    assert r.json()["workout_type"] == "Pull"

    ex = client.get("/reports/export", params={"start_date": "2025-01-06", "end_date": "2025-01-08"}, headers=auth)
    assert '"No","Push"' not in ex.text
    assert '"No","Legs"' not in ex.text

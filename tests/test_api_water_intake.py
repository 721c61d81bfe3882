def test_intakes_accumulate_for_today(client):
    for amount in (0.5, 0.7, 0.5):
        assert client.post("/api/water-intake", json={"amount": amount}).status_code == 200
    client.patch("/api/settings", json={"dailyGoal": 2.0})

    body = client.get("/api/water-intake").get_json()

    assert len(body["intakes"]) == 3
    assert body["totalIntake"] == 1.7
    assert body["dailyGoal"] == 2.0
    assert body["progress"] == 85.0
    assert body["remaining"] == 0.3


def test_post_returns_running_total_and_first_sip(client):
    first = client.post("/api/water-intake", json={"amount": 0.25}).get_json()
    second = client.post("/api/water-intake", json={"amount": 0.25}).get_json()

    assert first["intake"]["amount"] == 0.25
    assert first["totalIntake"] == 0.25
    assert [a["name"] for a in first["unlockedAchievements"]] == ["First Sip"]
    assert second["totalIntake"] == 0.5
    assert second["unlockedAchievements"] == []


def test_yesterdays_intake_is_not_counted_today(client, clock):
    client.post("/api/water-intake", json={"amount": 1.0})
    clock.advance(days=1)

    body = client.get("/api/water-intake").get_json()
    assert body["intakes"] == []
    assert body["totalIntake"] == 0


def test_amount_must_be_positive(client):
    for payload in ({"amount": 0}, {"amount": -0.2}, {}):
        assert client.post("/api/water-intake", json=payload).status_code == 400


def test_delete_clears_every_day(client, clock):
    client.post("/api/water-intake", json={"amount": 1.0})
    clock.advance(days=1)
    client.post("/api/water-intake", json={"amount": 1.0})

    resp = client.delete("/api/water-intake")

    assert resp.status_code == 200
    assert resp.get_json()["removed"] == 2
    history = client.post("/api/water-intake/history",
                          json={"startDate": "2026-10-01", "endDate": "2026-10-31"}).get_json()
    assert history["intakes"] == []


def test_history_returns_zero_filled_daily_totals(client, clock):
    client.post("/api/water-intake", json={"amount": 0.5})
    client.post("/api/water-intake", json={"amount": 0.25})
    clock.advance(days=2)
    client.post("/api/water-intake", json={"amount": 1.0})

    body = client.post("/api/water-intake/history",
                       json={"startDate": "2026-10-19", "endDate": "2026-10-22"}).get_json()

    assert len(body["intakes"]) == 3
    assert body["dailyTotals"] == [
        {"date": "2026-10-19", "amount": 0.75},
        {"date": "2026-10-20", "amount": 0.0},
        {"date": "2026-10-21", "amount": 1.0},
        {"date": "2026-10-22", "amount": 0.0},
    ]


def test_history_rejects_bad_ranges(client):
    backwards = client.post("/api/water-intake/history",
                            json={"startDate": "2026-10-19", "endDate": "2026-10-01"})
    too_long = client.post("/api/water-intake/history",
                           json={"startDate": "2025-10-18", "endDate": "2026-10-19"})
    not_a_date = client.post("/api/water-intake/history",
                             json={"startDate": "yesterday", "endDate": "2026-10-19"})

    assert backwards.status_code == 400
    assert too_long.status_code == 400
    assert not_a_date.status_code == 400


def test_intake_is_private(client, other_client):
    client.post("/api/water-intake", json={"amount": 1.0})
    assert other_client.get("/api/water-intake").get_json()["totalIntake"] == 0

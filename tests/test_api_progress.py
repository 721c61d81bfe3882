def drink_goal(client, amount=2.5):
    client.post("/api/water-intake", json={"amount": amount})


def test_missing_streak_reads_as_unsaved_baseline(client, storage):
    body = client.get("/api/streaks").get_json()

    assert body == {
        "id": None, "userId": client.user_id,
        "currentStreak": 0, "longestStreak": 0, "lastUpdated": None,
    }
    assert storage.get_streak(client.user_id) is None


def test_streak_grows_on_consecutive_goal_days(client, clock):
    drink_goal(client)
    first = client.patch("/api/streaks").get_json()
    assert (first["currentStreak"], first["longestStreak"], first["lastUpdated"]) == (1, 1, "2026-10-19")

    clock.advance(days=1)
    drink_goal(client)
    second = client.patch("/api/streaks").get_json()
    assert (second["currentStreak"], second["longestStreak"]) == (2, 2)

    assert client.get("/api/streaks").get_json()["currentStreak"] == 2


def test_second_patch_on_same_day_changes_nothing(client):
    client.patch("/api/streaks")
    drink_goal(client)
    again = client.patch("/api/streaks").get_json()

    assert again["currentStreak"] == 0
    assert again["unlockedAchievements"] == []


def test_missed_day_restarts_streak(client, clock):
    for _ in range(3):
        drink_goal(client)
        client.patch("/api/streaks")
        clock.advance(days=1)

    clock.advance(days=1)
    drink_goal(client)
    body = client.patch("/api/streaks").get_json()

    assert (body["currentStreak"], body["longestStreak"]) == (1, 3)


def test_third_goal_day_unlocks_hydration_starter(client, clock):
    unlocked = []
    for _ in range(3):
        drink_goal(client)
        unlocked += client.patch("/api/streaks").get_json()["unlockedAchievements"]
        clock.advance(days=1)

    assert [a["name"] for a in unlocked] == ["Hydration Starter"]
    starter = next(a for a in client.get("/api/achievements").get_json() if a["name"] == "Hydration Starter")
    assert starter["achieved"]
    assert starter["achievedDate"].startswith("2026-10-21")


def test_achievements_are_seeded_on_first_read(client):
    body = client.get("/api/achievements").get_json()

    assert [a["name"] for a in body] == [
        "First Sip", "Hydration Starter", "Week Warrior", "Hydration Hero", "Consistent Logger",
    ]
    assert {a["type"] for a in body} == {"intake", "streak", "logging"}
    assert not any(a["achieved"] for a in body)


def test_manual_unlock_keeps_first_date(client, clock):
    hero = client.get("/api/achievements").get_json()[3]

    first = client.patch(f"/api/achievements/{hero['id']}").get_json()
    clock.advance(days=5)
    second = client.patch(f"/api/achievements/{hero['id']}").get_json()

    assert first["achieved"] and second["achieved"]
    assert second["achievedDate"] == first["achievedDate"]
    assert client.get(f"/api/achievements/{hero['id']}").get_json()["achieved"]


def test_other_users_achievements_are_forbidden(client, other_client):
    mine = client.get("/api/achievements").get_json()[0]

    assert other_client.get(f"/api/achievements/{mine['id']}").status_code == 403
    resp = other_client.patch(f"/api/achievements/{mine['id']}")
    assert resp.status_code == 403
    assert not client.get(f"/api/achievements/{mine['id']}").get_json()["achieved"]


def test_unknown_achievement_is_404(client):
    resp = client.get("/api/achievements/9999")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Achievement not found"}

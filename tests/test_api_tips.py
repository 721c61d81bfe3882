def test_tips_are_seeded_and_filterable(client):
    everything = client.get("/api/hydration-tips").get_json()
    health = client.get("/api/hydration-tips?category=health").get_json()

    assert len(everything) == 9
    assert {t["category"] for t in everything} == {"general", "health", "habit"}
    assert len(health) == 3
    assert all(t["category"] == "health" for t in health)


def test_random_tip_by_category(client):
    resp = client.get("/api/hydration-tips/random?category=habit")

    assert resp.status_code == 200
    assert resp.get_json()["category"] == "habit"
    assert resp.get_json()["tip"]


def test_seeding_happens_once(client):
    client.get("/api/hydration-tips/random")
    assert len(client.get("/api/hydration-tips").get_json()) == 9


def test_unknown_category_is_rejected(client):
    resp = client.get("/api/hydration-tips/random?category=snacks")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Unknown category: snacks"}

# tests/test_storage.py
"""Behaviour shared by both storage backends (the `app` fixture runs each test twice)."""
import datetime as dt

DAY = dt.date(2026, 10, 19)


def at(day, hour, minute=0):
    return dt.datetime.combine(day, dt.time(hour, minute))


def test_user_lookup(storage):
    user = storage.create_user("frank", "hash")

    assert storage.get_user(user.id).username == "frank"
    assert storage.get_user_by_username("frank").id == user.id
    assert storage.get_user_by_username("nobody") is None
    assert storage.get_user(user.id + 100) is None


def test_settings_created_with_defaults(storage):
    user = storage.create_user("frank", "hash")

    settings = storage.get_or_create_settings(user.id)
    assert (settings.daily_goal, settings.default_cup_size, settings.sound_enabled) == (2.5, 350, False)
    assert storage.get_or_create_settings(user.id).id == settings.id

    updated = storage.update_settings(settings.id, daily_goal=3.0)
    assert updated.daily_goal == 3.0
    assert storage.get_settings(user.id).daily_goal == 3.0


def test_reminder_settings_defaults(storage):
    user = storage.create_user("frank", "hash")
    rs = storage.get_or_create_reminder_settings(user.id)

    assert (rs.interval, rs.start_time, rs.end_time) == (60, "08:00", "20:00")
    assert rs.active_days == (True, True, True, True, True, False, False)
    assert rs.active and rs.notifications_enabled


def test_water_intake_is_filtered_by_calendar_day(storage):
    user = storage.create_user("frank", "hash")
    storage.add_water_intake(user.id, 0.4, at(DAY - dt.timedelta(days=1), 23, 59))
    storage.add_water_intake(user.id, 0.3, at(DAY, 0, 0))
    storage.add_water_intake(user.id, 0.2, at(DAY, 23, 59))

    today = storage.get_water_intake(user.id, DAY)

    assert [i.amount for i in today] == [0.3, 0.2]
    assert len(storage.get_water_intake(user.id)) == 3


def test_history_range_is_inclusive(storage):
    user = storage.create_user("frank", "hash")
    for offset in range(5):
        storage.add_water_intake(user.id, 0.5, at(DAY - dt.timedelta(days=offset), 12))

    rows = storage.get_water_intake_history(user.id, DAY - dt.timedelta(days=3), DAY - dt.timedelta(days=1))

    assert [r.timestamp.date() for r in rows] == [DAY - dt.timedelta(days=n) for n in (3, 2, 1)]


def test_clear_water_intake_only_touches_owner(storage):
    alice = storage.create_user("alice", "hash")
    bob = storage.create_user("bob", "hash")
    storage.add_water_intake(alice.id, 0.5, at(DAY, 9))
    storage.add_water_intake(alice.id, 0.5, at(DAY - dt.timedelta(days=10), 9))
    storage.add_water_intake(bob.id, 0.5, at(DAY, 9))

    assert storage.clear_water_intake(alice.id) == 2
    assert storage.get_water_intake(alice.id) == []
    assert len(storage.get_water_intake(bob.id)) == 1


def test_streak_crud(storage):
    user = storage.create_user("frank", "hash")
    assert storage.get_streak(user.id) is None

    streak = storage.create_streak(user.id, current_streak=1, longest_streak=1, last_updated=DAY)
    storage.update_streak(streak.id, current_streak=0)

    stored = storage.get_streak(user.id)
    assert (stored.current_streak, stored.longest_streak, stored.last_updated) == (0, 1, DAY)
    assert [s.id for s in storage.get_streaks()] == [streak.id]


def test_reminder_message_lifecycle(storage):
    user = storage.create_user("frank", "hash")
    keep = storage.create_reminder_message(user.id, message="Water time!", is_active=True)
    muted = storage.create_reminder_message(user.id, message="Muted one", is_active=False)

    assert [m.id for m in storage.get_reminder_messages(user.id, active_only=True)] == [keep.id]

    storage.update_reminder_message(muted.id, is_active=True)
    assert len(storage.get_reminder_messages(user.id, active_only=True)) == 2

    assert storage.delete_reminder_message(keep.id)
    assert not storage.delete_reminder_message(keep.id)
    assert storage.get_reminder_message(keep.id) is None


def test_random_tip_respects_category(storage):
    storage.create_hydration_tip("Drink before meals", "habit")
    storage.create_hydration_tip("Dehydration causes headaches", "health")

    assert storage.get_random_hydration_tip("health").category == "health"
    assert storage.get_random_hydration_tip("general") is None
    assert len(storage.get_hydration_tips()) == 2

from hydrotrack.extensions import socketio
from hydrotrack.services.notifier import PermissionState, get_notifier


def test_connection_without_cookie_is_refused(app):
    sio = socketio.test_client(app, flask_test_client=app.test_client())
    assert not sio.is_connected()


def test_connect_schedules_reminders(app, client, scheduler):
    sio = socketio.test_client(app, flask_test_client=client)

    assert sio.is_connected()
    assert scheduler.get_job(f"hydration-reminder-{client.user_id}") is not None
    sio.disconnect()


def test_permission_event_updates_notifier(app, client, emitter):
    get_notifier().notify(client.user_id, "Held reminder")
    sio = socketio.test_client(app, flask_test_client=client)

    sio.emit("notification_permission", {"state": "granted"})

    assert get_notifier().permission(client.user_id) is PermissionState.GRANTED
    assert emitter.names[-1] == "hydration_reminder"
    assert emitter.events[-1][1]["message"] == "Held reminder"
    sio.disconnect()


def test_invalid_permission_state_is_reported(app, client):
    sio = socketio.test_client(app, flask_test_client=client)

    sio.emit("notification_permission", {"state": "maybe"})

    received = sio.get_received()
    assert received[-1]["name"] == "error"
    assert get_notifier().permission(client.user_id) is PermissionState.DEFAULT
    sio.disconnect()

# tests/conftest.py
"""
Shared fixtures.

- `clock`: pins hydrotrack.utils.timeutils.local_now (Monday 2026-10-19 10:00 by default)
- `app`: one application per test, run once per storage backend
- `scheduler` / `emitter`: fakes standing in for APScheduler and Socket.IO
- `client` / `other_client`: test clients logged in as two different users
"""
import datetime as dt

import pytest

from hydrotrack import create_app
from hydrotrack.extensions import db
from hydrotrack.storage import get_storage, init_storage
from hydrotrack.utils import timeutils


class Clock:
    def __init__(self, now):
        self.now = now

    def set(self, *args):
        self.now = dt.datetime(*args)

    def advance(self, **kwargs):
        self.now += dt.timedelta(**kwargs)


class FakeJob:
    def __init__(self, id, func, kwargs):
        self.id = id
        self.func = func
        self.args = kwargs.pop("args", [])
        self.trigger = kwargs.pop("trigger", None)
        kwargs.pop("replace_existing", None)
        self.trigger_args = kwargs


class FakeScheduler:
    """The subset of Flask-APScheduler used by ReminderScheduler."""

    def __init__(self):
        self.jobs = {}
        self.removed = []

    def add_job(self, id, func, **kwargs):
        job = FakeJob(id, func, dict(kwargs))
        self.jobs[id] = job
        return job

    def get_job(self, id):
        return self.jobs.get(id)

    def remove_job(self, id):
        del self.jobs[id]
        self.removed.append(id)

    def fire(self, id):
        job = self.jobs[id]
        return job.func(*job.args)


class FakeEmitter:
    def __init__(self):
        self.events = []

    def __call__(self, event, payload, room):
        self.events.append((event, payload, room))

    @property
    def names(self):
        return [event for event, _, _ in self.events]


@pytest.fixture
def clock(monkeypatch):
    c = Clock(dt.datetime(2026, 10, 19, 10, 0))
    monkeypatch.setattr(timeutils, "local_now", lambda: c.now)
    return c


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def emitter():
    return FakeEmitter()


@pytest.fixture(params=["database", "memory"])
def app(request, clock, scheduler, emitter):
    app = create_app("testing")

    app.config["STORAGE_BACKEND"] = request.param
    init_storage(app)

    app.extensions["hydrotrack.reminders"].scheduler = scheduler
    app.extensions["hydrotrack.notifier"].init_app(app, emitter)

    with app.app_context():
        yield app
        get_storage().close()
        db.session.remove()
        db.drop_all()


@pytest.fixture
def storage(app):
    return get_storage()


def register(client, username, password="secret123"):
    return client.post("/api/register", json={"username": username, "password": password})


@pytest.fixture
def client(app):
    c = app.test_client()
    resp = register(c, "alice")
    assert resp.status_code == 201
    c.user_id = resp.get_json()["id"]
    return c


@pytest.fixture
def other_client(app):
    c = app.test_client()
    resp = register(c, "bob")
    assert resp.status_code == 201
    c.user_id = resp.get_json()["id"]
    return c

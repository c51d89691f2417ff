"""
Pytest fixtures for the profile service.

The store is an in-memory stand-in for the subset of the Supabase query
builder the services use; FastAPI dependencies are swapped through
``app.dependency_overrides``.
"""

import copy
import re
import uuid
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from profile_service.core.dependencies import get_current_user_id
from profile_service.database.supabase_client import get_supabase
from profile_service.main import app, limiter

EMBED_PATTERN = re.compile(r"(\w+):(\w+)\(([^)]*)\)")


class FakeQuery:
    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.op = "select"
        self.columns = "*"
        self.payload = None
        self.on_conflict = None
        self.filters = []
        self.order_by = None
        self.limit_n = None

    def select(self, columns="*"):
        self.op = "select"
        self.columns = columns
        return self

    def insert(self, row):
        self.op, self.payload = "insert", row
        return self

    def upsert(self, row, on_conflict=None):
        self.op, self.payload, self.on_conflict = "upsert", row, on_conflict
        return self

    def update(self, values):
        self.op, self.payload = "update", values
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def _embed(self, row):
        for alias, table, cols in EMBED_PATTERN.findall(self.columns):
            wanted = [c.strip() for c in cols.split(",") if c.strip()]
            target = next(
                (r for r in self.db.tables[table] if r.get("id") == row.get(f"{alias}_id")),
                None,
            )
            row[alias] = {c: target.get(c) for c in wanted} if target else None
        return row

    def execute(self):
        self.db.calls.append((self.table, self.op))
        rows = self.db.tables[self.table]
        if self.op == "select":
            data = [copy.deepcopy(r) for r in rows if self._matches(r)]
            if self.order_by:
                column, desc = self.order_by
                data.sort(key=lambda r: r.get(column) or "", reverse=desc)
            if self.limit_n is not None:
                data = data[: self.limit_n]
            data = [self._embed(r) for r in data]
        elif self.op == "insert":
            data = [self.db.insert_row(self.table, self.payload)]
        elif self.op == "upsert":
            existing = None
            if self.on_conflict:
                existing = next(
                    (r for r in rows if r.get(self.on_conflict) == self.payload.get(self.on_conflict)),
                    None,
                )
            if existing is not None:
                existing.update(copy.deepcopy(self.payload))
                data = [copy.deepcopy(existing)]
            else:
                data = [self.db.insert_row(self.table, self.payload)]
        elif self.op == "update":
            data = []
            for r in rows:
                if self._matches(r):
                    r.update(copy.deepcopy(self.payload))
                    data.append(copy.deepcopy(r))
        elif self.op == "delete":
            data = [copy.deepcopy(r) for r in rows if self._matches(r)]
            self.db.tables[self.table] = [r for r in rows if not self._matches(r)]
        else:
            raise AssertionError(f"unsupported op {self.op}")
        return SimpleNamespace(data=data)


class FakeSupabase:
    def __init__(self):
        self.tables = defaultdict(list)
        self.calls = []
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def table(self, name):
        return FakeQuery(self, name)

    def _tick(self):
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def insert_row(self, table, payload):
        row = {"id": str(uuid.uuid4()), "created_at": self._tick()}
        row.update(copy.deepcopy(payload))
        self.tables[table].append(row)
        return copy.deepcopy(row)

    def add_user(self, name="Jane Doe", avatar="//www.gravatar.com/avatar/jane"):
        return self.insert_row("users", {"name": name, "avatar": avatar, "email": f"{name.split()[0].lower()}@example.com"})

    def profiles_for(self, user_id):
        return [r for r in self.tables["profiles"] if r["user_id"] == user_id]


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def user(fake_supabase):
    return fake_supabase.add_user()


@pytest.fixture
def client(fake_supabase):
    limiter.reset()
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    test_client = TestClient(app, raise_server_exceptions=False)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client, user):
    app.dependency_overrides[get_current_user_id] = lambda: {"id": user["id"], "email": user["email"]}
    yield client
    app.dependency_overrides.pop(get_current_user_id, None)


@pytest.fixture
def profile_payload():
    return {
        "company": "Acme",
        "website": "https://acme.dev",
        "location": "Berlin",
        "bio": "Backend developer",
        "status": "Developer",
        "githubusername": "janedoe",
        "skills": "node, react, css",
        "twitter": "https://twitter.com/janedoe",
        "linkedin": "https://linkedin.com/in/janedoe",
    }


@pytest.fixture
def experience_payload():
    return {
        "title": "Senior Engineer",
        "company": "Acme",
        "location": "Berlin",
        "from": "2019-03-01",
        "current": True,
        "description": "Payments platform",
    }


@pytest.fixture
def education_payload():
    return {
        "school": "TU Berlin",
        "degree": "MSc",
        "fieldofstudy": "Computer Science",
        "from": "2012-10-01",
        "to": "2014-09-30",
    }

"""Tests for the in-memory session store."""

import time

from workflow_engine.sessions import SessionStore
from workflow_engine.types import WorkflowContext, WorkflowResult, WorkflowSession, WorkflowType


def _session(finished: bool = False, created_at: float | None = None) -> WorkflowSession:
    session = WorkflowSession.create(WorkflowType.SEQUENTIAL, "t", "d", WorkflowContext())
    if created_at is not None:
        session.created_at = created_at
        session.updated_at = created_at
    session.start()
    if finished:
        session.complete(WorkflowResult(final_output="", confidence=0.0))
    if created_at is not None:
        session.updated_at = created_at
    return session


class TestSessionStore:
    """Tests for SessionStore CRUD."""

    def test_add_and_get(self):
        store = SessionStore()
        session = _session()
        store.add(session)
        assert store.get(session.id) is session
        assert store.count == 1

    def test_get_unknown(self):
        assert SessionStore().get("missing") is None

    def test_get_does_not_mutate(self):
        store = SessionStore()
        session = _session(finished=True)
        store.add(session)
        before = session.to_dict()
        store.get(session.id)
        store.get(session.id)
        assert session.to_dict() == before

    def test_list_newest_first(self):
        store = SessionStore()
        old = _session(created_at=1000.0)
        new = _session(created_at=2000.0)
        store.add(old)
        store.add(new)
        assert [s.id for s in store.list()] == [new.id, old.id]

    def test_delete(self):
        store = SessionStore()
        session = _session()
        store.add(session)
        assert store.delete(session.id) is True
        assert store.delete(session.id) is False
        assert store.get(session.id) is None


class TestRetention:
    """Tests for eviction of finished sessions."""

    def test_max_sessions_evicts_oldest_finished(self):
        store = SessionStore(max_sessions=2)
        oldest = _session(finished=True, created_at=1000.0)
        newer = _session(finished=True, created_at=2000.0)
        store.add(oldest)
        store.add(newer)

        latest = _session()
        store.add(latest)

        assert store.get(oldest.id) is None
        assert store.get(newer.id) is newer
        assert store.get(latest.id) is latest

    def test_running_sessions_never_evicted(self):
        store = SessionStore(max_sessions=1)
        running = _session()
        store.add(running)
        another = _session()
        store.add(another)
        assert store.count == 2
        assert store.get(running.id) is running

    def test_ttl_expires_finished_sessions(self):
        store = SessionStore(session_ttl=60)
        an_hour_ago = time.time() - 3600
        stale = _session()
        fresh = _session()
        running = _session(created_at=an_hour_ago)
        for session in (stale, fresh, running):
            store.add(session)

        for session in (stale, fresh):
            session.complete(WorkflowResult(final_output="", confidence=0.0))
        stale.updated_at = an_hour_ago

        assert store.cleanup_expired() == 1
        assert store.get(stale.id) is None
        assert store.get(fresh.id) is fresh
        assert store.get(running.id) is running

    def test_no_limits(self):
        store = SessionStore()
        for _ in range(20):
            store.add(_session(finished=True, created_at=1.0))
        assert store.cleanup_expired() == 0
        assert store.count == 20

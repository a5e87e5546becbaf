# tests/conftest.py
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.agent import AgentResponse, AgentTransportError
from app.deps import get_agent_client, get_normalizer, get_scheduler_client
from app.normalizers import NormalizerPipeline
from app.scheduler import SchedulerError
from app.scheduler.types import ExecutionLog, Schedule, ScheduleAction, ScheduleList, ScheduleLogs

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def pipeline():
    """Normalizer with a frozen clock so last_checked is comparable."""
    return NormalizerPipeline(clock=lambda: FIXED_NOW)


# --- Fake collaborators ---
class FakeAgent:
    def __init__(self):
        self.envelope = {"success": True, "response": {"result": {"answer": "ok"}}}
        self.error = None
        self.calls = []

    def invoke_agent(self, message, agent_id, session_id=None):
        self.calls.append({"message": message, "agent_id": agent_id, "session_id": session_id})
        if self.error:
            raise AgentTransportError(self.error)
        return AgentResponse.model_validate(self.envelope)


class FakeScheduler:
    def __init__(self):
        self.active = True
        self.down = False

    def _check(self):
        if self.down:
            raise SchedulerError("connection refused")

    def _schedule(self):
        return Schedule(id="sched-1", cron_expression="0 9 * * *", is_active=self.active,
                        cron_human="Every day at 9:00 AM")

    def list_schedules(self):
        self._check()
        return ScheduleList(success=True, schedules=[self._schedule()])

    def get_schedule_logs(self, schedule_id, limit=10):
        self._check()
        logs = [ExecutionLog(id=f"run-{i}", success=True) for i in range(limit)]
        return ScheduleLogs(success=True, executions=logs)

    def pause_schedule(self, schedule_id):
        self._check()
        self.active = False
        return ScheduleAction(success=True, schedule=self._schedule())

    def resume_schedule(self, schedule_id):
        self._check()
        self.active = True
        return ScheduleAction(success=True, schedule=self._schedule())


@pytest.fixture
def fake_agent():
    return FakeAgent()


@pytest.fixture
def fake_scheduler():
    return FakeScheduler()


# --- Override FastAPI's dependencies to use the fakes ---
@pytest.fixture(autouse=True)
def override_deps(fake_agent, fake_scheduler, pipeline):
    app.dependency_overrides[get_agent_client] = lambda: fake_agent
    app.dependency_overrides[get_scheduler_client] = lambda: fake_scheduler
    app.dependency_overrides[get_normalizer] = lambda: pipeline
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c

import logging
from typing import Any, Dict

import requests
from pydantic import ValidationError

from app import settings
from app.scheduler.cron import cron_to_human
from app.scheduler.types import Schedule, ScheduleAction, ScheduleList, ScheduleLogs

log = logging.getLogger(__name__)


class SchedulerError(RuntimeError):
    """Scheduler API unreachable or answered with something unusable."""


class SchedulerClient:
    """
    CRUD calls for the cron job that runs the MeitY update monitor.
    The only state the platform tracks for us is active vs paused.
    """

    def __init__(self, url: str | None = None, timeout: float = 30,
                 session: requests.Session | None = None):
        self.url = (url or settings.SCHEDULER_API_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if settings.AGENT_API_KEY:
            self.session.headers.update({"x-api-key": settings.AGENT_API_KEY})

    # ------------------------------------------------------------
    # HTTP helper
    # ------------------------------------------------------------
    def _call(self, method: str, path: str, **kw) -> Any:
        try:
            r = self.session.request(method, f"{self.url}{path}", timeout=self.timeout, **kw)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            log.warning("scheduler %s %s failed: %s", method, path, e)
            raise SchedulerError(str(e)) from e
        except ValueError as e:
            raise SchedulerError(f"scheduler {method} {path} returned non-JSON") from e

    @staticmethod
    def _with_cron_text(s: Schedule) -> Schedule:
        s.cron_human = cron_to_human(s.cron_expression)
        return s

    # ------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------
    def list_schedules(self) -> ScheduleList:
        data = self._call("GET", "/schedules")
        if isinstance(data, list):      # some deployments return the bare list
            data = {"success": True, "schedules": data}
        try:
            out = ScheduleList.model_validate(data)
        except ValidationError as e:
            raise SchedulerError(f"malformed schedule list: {e.error_count()} error(s)") from e
        out.schedules = [self._with_cron_text(s) for s in out.schedules]
        return out

    def get_schedule_logs(self, schedule_id: str, limit: int = 10) -> ScheduleLogs:
        data = self._call("GET", f"/schedules/{schedule_id}/executions", params={"limit": int(limit)})
        if isinstance(data, list):
            data = {"success": True, "executions": data}
        try:
            return ScheduleLogs.model_validate(data)
        except ValidationError as e:
            raise SchedulerError(f"malformed execution log: {e.error_count()} error(s)") from e

    def pause_schedule(self, schedule_id: str) -> ScheduleAction:
        return self._toggle(schedule_id, "pause")

    def resume_schedule(self, schedule_id: str) -> ScheduleAction:
        return self._toggle(schedule_id, "resume")

    def _toggle(self, schedule_id: str, action: str) -> ScheduleAction:
        data: Dict[str, Any] = self._call("POST", f"/schedules/{schedule_id}/{action}") or {}
        if not isinstance(data, dict):
            raise SchedulerError(f"unexpected {action} response")
        data.setdefault("success", True)
        try:
            out = ScheduleAction.model_validate(data)
        except ValidationError as e:
            raise SchedulerError(f"malformed {action} response: {e.error_count()} error(s)") from e
        if out.schedule:
            out.schedule = self._with_cron_text(out.schedule)
        log.info("schedule %s %s: success=%s", schedule_id, action, out.success)
        return out

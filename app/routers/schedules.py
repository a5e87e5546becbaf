from fastapi import APIRouter, Depends, HTTPException, Query

from app.deps import get_scheduler_client
from app.scheduler import SchedulerClient, SchedulerError
from app.scheduler.types import ScheduleAction, ScheduleList, ScheduleLogs

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/schedules", tags=["schedules"])


@router.get("", response_model=ScheduleList)
def list_schedules(scheduler: SchedulerClient = Depends(get_scheduler_client)):
    """All schedules on the platform, each with a human-readable `cron_human`."""
    try:
        return scheduler.list_schedules()
    except SchedulerError as e:
        raise HTTPException(502, f"Scheduler unavailable: {e}")


@router.get("/{schedule_id}/logs", response_model=ScheduleLogs)
def schedule_logs(
    schedule_id: str,
    limit: int = Query(10, ge=1, le=100),
    scheduler: SchedulerClient = Depends(get_scheduler_client),
):
    """Most recent executions of one schedule."""
    try:
        return scheduler.get_schedule_logs(schedule_id, limit=limit)
    except SchedulerError as e:
        raise HTTPException(502, f"Scheduler unavailable: {e}")


@router.post("/{schedule_id}/pause", response_model=ScheduleAction)
def pause(schedule_id: str, scheduler: SchedulerClient = Depends(get_scheduler_client)):
    try:
        return scheduler.pause_schedule(schedule_id)
    except SchedulerError as e:
        raise HTTPException(502, f"Scheduler unavailable: {e}")


@router.post("/{schedule_id}/resume", response_model=ScheduleAction)
def resume(schedule_id: str, scheduler: SchedulerClient = Depends(get_scheduler_client)):
    try:
        return scheduler.resume_schedule(schedule_id)
    except SchedulerError as e:
        raise HTTPException(502, f"Scheduler unavailable: {e}")

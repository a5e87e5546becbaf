# app/scheduler/types.py
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Schedule(BaseModel):
    # the platform sends more than we render; keep it around for the client
    model_config = ConfigDict(extra="allow")

    id: str
    agent_id: Optional[str] = None
    cron_expression: str = ""
    timezone: Optional[str] = None
    is_active: bool = False
    next_run_time: Optional[str] = None
    last_run_at: Optional[str] = None
    cron_human: str = ""             # filled in by us, not the platform


class ExecutionLog(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    executed_at: Optional[str] = None
    success: bool = False
    response_output: Any = None
    error_message: Optional[str] = None


class ScheduleList(BaseModel):
    success: bool = False
    schedules: List[Schedule] = Field(default_factory=list)
    error: Optional[str] = None


class ScheduleLogs(BaseModel):
    success: bool = False
    executions: List[ExecutionLog] = Field(default_factory=list)
    error: Optional[str] = None


class ScheduleAction(BaseModel):
    success: bool = False
    schedule: Optional[Schedule] = None
    error: Optional[str] = None

# app/agent/types.py
from typing import Any, Optional
from pydantic import BaseModel


class AgentResult(BaseModel):
    result: Any = None              # the raw payload; shape not guaranteed
    message: Optional[str] = None   # some agents put a plain-text reply here


class AgentResponse(BaseModel):
    success: bool = False
    response: Optional[AgentResult] = None
    error: Optional[str] = None


class UploadResult(BaseModel):
    success: bool = False
    rag_id: str
    filename: str
    error: Optional[str] = None

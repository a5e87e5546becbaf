from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field

CallSite = Literal["answer", "updates"]

# -----------------------------
# Canonical records handed to the dashboard
# -----------------------------
class SourceCitation(BaseModel):
    # a statute reference the agent relied on; every field always present
    act: str = ""
    section: str = ""
    description: str = ""


class RegulatoryUpdate(BaseModel):
    # MeitY portal item. None means "the agent didn't say"; the dashboard
    # substitutes "Untitled Update" / "N/A" / "Unknown" when it renders.
    title: Optional[str] = None
    date: Optional[str] = None
    summary: Optional[str] = None
    affected_provisions: List[str] = Field(default_factory=list)
    impact_level: Optional[str] = None
    framework: Optional[str] = None
    source_url: Optional[str] = None


class NormalizedAnswer(BaseModel):
    """
    The one shape every call site gets back, whatever the agent sent.
    Chat uses answer..compliance_steps, the update feed uses updates/summary/last_checked.
    """
    answer: str = ""
    sources: List[SourceCitation] = Field(default_factory=list)
    cross_framework_analysis: str = ""
    precedence_notes: str = ""
    compliance_steps: List[str] = Field(default_factory=list)
    updates: List[RegulatoryUpdate] = Field(default_factory=list)
    summary: str = ""
    last_checked: str = ""   # ISO-8601, stamped by the pipeline clock when absent


# -----------------------------
# API request/response bodies
# -----------------------------
class ChatRequest(BaseModel):
    message: str
    framework: str = "All"            # All | DPDPA | IT Act 2000 | IT Act 2008
    session_id: Optional[str] = None


class ChatReply(BaseModel):
    ok: bool
    session_id: str
    answer: Optional[NormalizedAnswer] = None
    frameworks: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class UpdateFeed(BaseModel):
    ok: bool
    updates: List[RegulatoryUpdate] = Field(default_factory=list)
    summary: str = ""
    last_checked: str = ""
    error: Optional[str] = None


class NormalizeRequest(BaseModel):
    payload: Any = None
    site: CallSite = "answer"
    message: Optional[str] = None


class NormalizeReply(BaseModel):
    answer: NormalizedAnswer
    frameworks: List[str]

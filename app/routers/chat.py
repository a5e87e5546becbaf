import logging
import time
import uuid

from fastapi import APIRouter, Depends, HTTPException

from app import settings
from app.agent import AgentClient, AgentTransportError
from app.deps import get_agent_client, get_chat_gate, get_normalizer
from app.frameworks import FRAMEWORK_FILTERS, apply_framework_filter, detect_frameworks
from app.gate import GateBusy, SingleFlightGate
from app.normalizers import Normalizer
from app.schemas import ChatReply, ChatRequest

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["chat"])

UNPARSED_ANSWER = "Unable to parse response"


def new_session_id() -> str:
    return f"session_{uuid.uuid4().hex[:9]}_{int(time.time() * 1000)}"


@router.post("/chat", response_model=ChatReply)
def chat(
    req: ChatRequest,
    agent: AgentClient = Depends(get_agent_client),
    normalizer: Normalizer = Depends(get_normalizer),
    gate: SingleFlightGate = Depends(get_chat_gate),
) -> ChatReply:
    """
    Ask the Legal Knowledge Assistant one question and return a render-ready answer.

    Request body:
      {"message": "What are the consent requirements?", "framework": "DPDPA", "session_id": null}

    Response JSON:
      {
        "ok": True,
        "session_id": "session_...",
        "answer": {answer, sources, cross_framework_analysis, precedence_notes, compliance_steps, ...},
        "frameworks": ["DPDPA"]
      }
    """
    message = (req.message or "").strip()
    if not message:
        raise HTTPException(400, "Missing 'message'")
    if req.framework not in FRAMEWORK_FILTERS:
        raise HTTPException(400, f"Unknown framework filter '{req.framework}'")

    session_id = req.session_id or new_session_id()

    try:
        with gate.hold():
            result = agent.invoke_agent(
                apply_framework_filter(message, req.framework),
                settings.LEGAL_AGENT_ID,
                session_id=session_id,
            )
    except GateBusy as e:
        raise HTTPException(409, str(e))
    except AgentTransportError as e:
        raise HTTPException(502, f"Network error. Please try again. ({e})")

    if not result.success:
        return ChatReply(
            ok=False,
            session_id=session_id,
            error=result.error or "Failed to get response from Legal Knowledge Assistant",
        )

    envelope = result.response
    # answer keys first, then the envelope's own message, then a bare `text` key
    parsed = normalizer.normalize_payload(
        envelope.result if envelope else None,
        site="answer",
        message=envelope.message if envelope else None,
    )
    if not parsed.answer:
        parsed.answer = (envelope.message if envelope else None) or UNPARSED_ANSWER
        log.info("chat payload carried no answer text: session_id=%s", session_id)

    return ChatReply(
        ok=True,
        session_id=session_id,
        answer=parsed,
        frameworks=detect_frameworks(parsed.answer, parsed.sources),
    )

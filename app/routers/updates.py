from fastapi import APIRouter, Depends, HTTPException

from app import settings
from app.agent import AgentClient, AgentTransportError
from app.deps import get_agent_client, get_normalizer, get_updates_gate
from app.gate import GateBusy, SingleFlightGate
from app.normalizers import Normalizer
from app.schemas import UpdateFeed

router = APIRouter(prefix="/updates", tags=["updates"])


@router.post("/check", response_model=UpdateFeed)
def check_updates(
    agent: AgentClient = Depends(get_agent_client),
    normalizer: Normalizer = Depends(get_normalizer),
    gate: SingleFlightGate = Depends(get_updates_gate),
) -> UpdateFeed:
    """
    Ask the MeitY monitor agent for new regulatory updates.
    Items are returned as the agent sent them; missing titles/dates stay null.
    """
    try:
        with gate.hold():
            result = agent.invoke_agent(settings.UPDATES_PROMPT, settings.MEITY_AGENT_ID)
    except GateBusy as e:
        raise HTTPException(409, str(e))
    except AgentTransportError as e:
        raise HTTPException(502, f"Network error. Please try again. ({e})")

    if not result.success:
        return UpdateFeed(ok=False, error=result.error or "Failed to check for updates")

    parsed = normalizer.normalize_payload(result.response.result if result.response else None, site="updates")
    return UpdateFeed(
        ok=True,
        updates=parsed.updates,
        summary=parsed.summary,
        last_checked=parsed.last_checked,
    )

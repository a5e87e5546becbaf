from fastapi import Request

from app.agent import AgentClient
from app.gate import SingleFlightGate
from app.normalizers import Normalizer, get_default_normalizer
from app.scheduler import SchedulerClient

# One gate per request class: a chat question and an update check may overlap,
# two chat questions may not.
chat_gate = SingleFlightGate("chat")
updates_gate = SingleFlightGate("update check")


def get_agent_client(request: Request) -> AgentClient:
    client = getattr(request.app.state, "agent_client", None)
    if client is None:
        client = request.app.state.agent_client = AgentClient()
    return client

def get_scheduler_client(request: Request) -> SchedulerClient:
    client = getattr(request.app.state, "scheduler_client", None)
    if client is None:
        client = request.app.state.scheduler_client = SchedulerClient()
    return client

def get_normalizer() -> Normalizer:
    return get_default_normalizer()

def get_chat_gate() -> SingleFlightGate:
    return chat_gate

def get_updates_gate() -> SingleFlightGate:
    return updates_gate

from contextlib import asynccontextmanager
from fastapi import FastAPI

from app import settings
from app.agent import AgentClient
from app.deps import chat_gate, updates_gate
from app.scheduler import SchedulerClient
from .routers.chat import router as chat_router
from .routers.updates import router as updates_router
from .routers.normalize import router as normalize_router
from .routers.schedules import router as schedules_router
from .routers.knowledge import router as knowledge_router
from app.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(settings.LOG_LEVEL) # Init Logging


# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context runs once at startup and once at shutdown.
    Builds the HTTP clients for the agent platform once so every request
    reuses the same connection pools.
    """
    app.state.agent_client = AgentClient()
    app.state.scheduler_client = SchedulerClient()

    yield

    app.state.agent_client.session.close()
    app.state.scheduler_client.session.close()

# Create the FastAPI app instance
app = FastAPI(title="DPDPA & IT Act Legal Knowledge Dashboard", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - chat_busy / updates_busy: whether a request of that class is in flight
      - agents: which agent ids this deployment talks to
    """
    return {
        "ok": True,
        "service": "legal-dashboard",
        "version": 1,
        "chat_busy": chat_gate.busy,
        "updates_busy": updates_gate.busy,
        "agents": {"legal": settings.LEGAL_AGENT_ID, "meity": settings.MEITY_AGENT_ID},
    }

# Register API routers:
app.include_router(chat_router)
app.include_router(updates_router)
app.include_router(normalize_router)
app.include_router(schedules_router)
app.include_router(knowledge_router)

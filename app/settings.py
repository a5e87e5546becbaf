# app/settings.py
import os

# Agent platform endpoints
AGENT_API_URL = os.getenv("AGENT_API_URL", "http://localhost:8080/api/agent")
SCHEDULER_API_URL = os.getenv("SCHEDULER_API_URL", "http://localhost:8080/api/scheduler")
KNOWLEDGE_API_URL = os.getenv("KNOWLEDGE_API_URL", "http://localhost:8080/api/rag")
AGENT_API_KEY = os.getenv("AGENT_API_KEY", "")
AGENT_TIMEOUT_S = float(os.getenv("AGENT_TIMEOUT_S", "120"))

# Legal Knowledge Assistant answers chat questions; the MeitY monitor feeds the updates page.
LEGAL_AGENT_ID = os.getenv("LEGAL_AGENT_ID", "699be53fabc429f336b46816")
MEITY_AGENT_ID = os.getenv("MEITY_AGENT_ID", "699be53f0ed57996e7d19026")
LEGAL_KB_RAG_ID = os.getenv("LEGAL_KB_RAG_ID", "699be518e12ce16820316e45")
MEITY_KB_RAG_ID = os.getenv("MEITY_KB_RAG_ID", "699be5183dc9e9e5282863a1")
UPDATES_SCHEDULE_ID = os.getenv("UPDATES_SCHEDULE_ID", "699be546399dfadeac3879a6")

UPDATES_PROMPT = (
    "Check for latest regulatory updates from MeitY portal regarding "
    "DPDPA, IT Act 2000, and IT Act 2008"
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

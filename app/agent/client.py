import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from app import settings
from app.agent.types import AgentResponse

log = logging.getLogger(__name__)


class AgentTransportError(RuntimeError):
    """The agent platform couldn't be reached or sent back something that isn't an envelope."""


def _headers() -> Dict[str, str]:
    h = {"Content-Type": "application/json"}
    if settings.AGENT_API_KEY:
        h["x-api-key"] = settings.AGENT_API_KEY
    return h


class AgentClient:
    """Thin wrapper over the agent platform's invoke endpoint."""

    def __init__(self, url: str | None = None, timeout: float | None = None,
                 session: requests.Session | None = None):
        self.url = url or settings.AGENT_API_URL
        self.timeout = timeout or settings.AGENT_TIMEOUT_S
        self.session = session or requests.Session()
        self.session.headers.update(_headers())

    def invoke_agent(self, message: str, agent_id: str, session_id: Optional[str] = None) -> AgentResponse:
        """
        Send one natural-language message to an agent.

        Request body:
          {"message": "...", "agent_id": "...", "session_id": "..."}   (session_id optional)

        Returns the platform envelope as-is: {success, response: {result, message}, error}.
        `response.result` is handed to the normalizer untouched.
        """
        body: Dict[str, Any] = {"message": message, "agent_id": agent_id}
        if session_id:
            body["session_id"] = session_id

        try:
            r = self.session.post(self.url, json=body, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            log.warning("agent call failed: agent_id=%s error=%s", agent_id, e)
            raise AgentTransportError(str(e)) from e
        except ValueError as e:
            log.warning("agent sent non-JSON envelope: agent_id=%s", agent_id)
            raise AgentTransportError("agent response was not JSON") from e

        try:
            return AgentResponse.model_validate(data)
        except ValidationError as e:
            log.warning("agent envelope malformed: agent_id=%s", agent_id)
            raise AgentTransportError(f"malformed agent envelope: {e.error_count()} error(s)") from e

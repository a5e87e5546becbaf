from .client import AgentClient, AgentTransportError
from .types import AgentResponse, AgentResult, UploadResult

__all__ = ["AgentClient", "AgentTransportError", "AgentResponse", "AgentResult", "UploadResult"]

import logging

import requests

from app import settings
from app.agent.types import UploadResult

log = logging.getLogger(__name__)

# corpus name -> knowledge base the agents retrieve from
CORPORA = {
    "legal": settings.LEGAL_KB_RAG_ID,   # statutes, rules, commentary for the legal assistant
    "meity": settings.MEITY_KB_RAG_ID,   # MeitY notifications for the update monitor
}


def upload_document(rag_id: str, filename: str, content: bytes,
                    content_type: str = "application/octet-stream",
                    session: requests.Session | None = None) -> UploadResult:
    """
    Push one file into an agent knowledge base.
    Transport failures come back as success=False with the error text.
    """
    s = session or requests.Session()
    headers = {"x-api-key": settings.AGENT_API_KEY} if settings.AGENT_API_KEY else {}
    try:
        r = s.post(
            f"{settings.KNOWLEDGE_API_URL}/{rag_id}/documents",
            files={"file": (filename, content, content_type)},
            headers=headers,
            timeout=settings.AGENT_TIMEOUT_S,
        )
        r.raise_for_status()
    except requests.RequestException as e:
        log.warning("knowledge upload failed: rag_id=%s file=%s error=%s", rag_id, filename, e)
        return UploadResult(success=False, rag_id=rag_id, filename=filename, error=str(e))
    log.info("uploaded %s to knowledge base %s", filename, rag_id)
    return UploadResult(success=True, rag_id=rag_id, filename=filename)

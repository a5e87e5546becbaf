from fastapi import APIRouter, File, HTTPException, UploadFile

from app.agent.knowledge import CORPORA, upload_document
from app.agent.types import UploadResult

router = APIRouter(prefix="/knowledge", tags=["knowledge"])


@router.post("/{corpus}/upload", response_model=UploadResult)
def upload(corpus: str, file: UploadFile = File(...)):
    """
    Add a document to one of the two agent knowledge bases.
    corpus: "legal" (statutes and commentary) or "meity" (ministry notifications).
    """
    rag_id = CORPORA.get(corpus)
    if rag_id is None:
        raise HTTPException(404, f"Unknown corpus '{corpus}'")
    content = file.file.read()
    if not content:
        raise HTTPException(400, "Empty file")

    res = upload_document(rag_id, file.filename or "upload", content,
                          content_type=file.content_type or "application/octet-stream")
    if not res.success:
        raise HTTPException(502, f"Upload failed: {res.error}")
    return res

from fastapi import APIRouter, Depends

from app.deps import get_normalizer
from app.frameworks import detect_frameworks
from app.normalizers import Normalizer
from app.schemas import NormalizeReply, NormalizeRequest

router = APIRouter(prefix="", tags=["normalize"])


@router.post("/normalize", response_model=NormalizeReply)
def normalize(req: NormalizeRequest, normalizer: Normalizer = Depends(get_normalizer)) -> NormalizeReply:
    """
    Run an agent payload through the normalization pipeline without calling any agent.
    Useful for replaying captured agent output. Always 200: bad payloads come back as plain answers.
    """
    answer = normalizer.normalize_payload(req.payload, site=req.site, message=req.message)
    return NormalizeReply(answer=answer, frameworks=detect_frameworks(answer.answer, answer.sources))

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from app.schemas import NormalizedAnswer
from .base import Normalizer
from .decoder import REPAIR_RULES, RepairRule, decode
from .fences import strip_fences
from .locator import locate_candidate
from .rules import SchemaNormalizer
from .types import CallSite, DecodeResult, RawPayload

log = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NormalizerPipeline(Normalizer):
    """
    raw payload -> fence stripper -> candidate locator -> tolerant decoder -> schema normalizer.

    Each stage hands a value to the next instead of raising, so the chain
    always ends in a NormalizedAnswer; the weakest outcome is the raw agent
    text shown as a plain answer.
    """
    def __init__(
        self,
        schema: Optional[SchemaNormalizer] = None,
        repair_rules: Optional[List[RepairRule]] = None,
        clock: Optional[Clock] = None,
    ):
        self.schema = schema or SchemaNormalizer()
        self.repair_rules = repair_rules if repair_rules is not None else REPAIR_RULES
        self.clock = clock or utc_now

    def decode_payload(self, raw: RawPayload) -> DecodeResult:
        candidate = source = None
        if isinstance(raw, str):
            source = raw.strip()
            candidate = locate_candidate(source)
            # a payload that is one JSON value isn't fenced, though its strings may contain ```
            if candidate != source:
                source = strip_fences(source)
                candidate = locate_candidate(source)
        return decode(candidate, raw, self.repair_rules, source=source)

    def normalize_payload(
        self,
        raw: RawPayload,
        site: CallSite = "answer",
        message: Optional[str] = None,
    ) -> NormalizedAnswer:
        try:
            now = self.clock().isoformat()
        except Exception:
            log.exception("pipeline clock failed; stamping with system UTC time")
            now = utc_now().isoformat()
        try:
            result = self.decode_payload(raw)
            log.debug("agent payload for %s site decoded as %s", site, type(result).__name__)
            return self.schema.normalize(result, site, now=now, message=message)
        except Exception:
            # last resort: a stage bug must not reach the dashboard
            log.exception("normalization failed; showing raw agent text")
            return self.schema.prose(raw, now)


def get_default_normalizer() -> Normalizer:
    """
    Factory for the default pipeline.
    Swapping the repair rules or the clock is a constructor argument away.
    """
    return NormalizerPipeline()

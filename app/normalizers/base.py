# app/normalizers/base.py
from typing import Optional, Protocol
from app.schemas import NormalizedAnswer
from .types import CallSite, RawPayload

class Normalizer(Protocol):
    def normalize_payload(
        self, raw: RawPayload, site: CallSite = "answer", message: Optional[str] = None
    ) -> NormalizedAnswer:
        """
        Return a NEW NormalizedAnswer. Never raises, never mutates `raw`.
        `message` is the agent envelope's own text, tried before a bare `text` key.
        """
        ...

# app/normalizers/types.py
from dataclasses import dataclass
from typing import Any, Union

from app.schemas import CallSite

RawPayload = Any


@dataclass(frozen=True)
class Decoded:
    """
    Decoding worked; `data` is whatever JSON value came out of `raw`.
    `embedded` marks a region cut out of surrounding prose rather than the whole text.
    """
    data: Any
    raw: RawPayload
    from_text: bool = True
    embedded: bool = False


@dataclass(frozen=True)
class NoCandidate:
    """No balanced bracket region and the whole text isn't JSON either."""
    raw: RawPayload


@dataclass(frozen=True)
class DecodeFailure:
    """A candidate region existed but neither strict nor repaired decode worked."""
    raw: RawPayload
    candidate: str
    reason: str


@dataclass(frozen=True)
class ShapeMismatch:
    """Decoded fine, but the top-level shape isn't what the call site can use."""
    raw: RawPayload
    reason: str


DecodeResult = Union[Decoded, NoCandidate, DecodeFailure, ShapeMismatch]

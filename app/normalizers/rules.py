import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from app.schemas import NormalizedAnswer, RegulatoryUpdate, SourceCitation
from .types import CallSite, Decoded, DecodeResult, RawPayload, ShapeMismatch

log = logging.getLogger(__name__)

KeyPath = Tuple[str, ...]
_MISSING = object()


# --- Individual field helpers (coercions; None means "not usable") ---

def as_text(v: Any) -> Optional[str]:
    """Strings as-is, numbers/booleans spelled the way JSON spells them, anything else None."""
    if isinstance(v, str):
        return v
    if isinstance(v, (bool, int, float)):
        return json.dumps(v)
    return None

def as_text_list(v: Any) -> Optional[List[str]]:
    """Keep the elements that coerce to text; drop objects, arrays and nulls."""
    if not isinstance(v, list):
        return None
    return [t for t in map(as_text, v) if t is not None]

def as_citation(v: Dict[str, Any]) -> SourceCitation:
    return SourceCitation(
        act=as_text(v.get("act")) or "",
        section=as_text(v.get("section")) or "",
        description=as_text(v.get("description")) or "",
    )

def as_citations(v: Any) -> Optional[List[SourceCitation]]:
    if not isinstance(v, list):
        return None
    return [as_citation(x) for x in v if isinstance(x, dict)]

def as_update(v: Dict[str, Any]) -> RegulatoryUpdate:
    # absent text stays None; render-time sentinels are the dashboard's job
    return RegulatoryUpdate(
        title=as_text(v.get("title")),
        date=as_text(v.get("date")),
        summary=as_text(v.get("summary")),
        affected_provisions=as_text_list(v.get("affected_provisions")) or [],
        impact_level=as_text(v.get("impact_level")),
        framework=as_text(v.get("framework")),
        source_url=as_text(v.get("source_url")),
    )

def as_updates(v: Any) -> Optional[List[RegulatoryUpdate]]:
    if not isinstance(v, list):
        return None
    return [as_update(x) for x in v if isinstance(x, dict)]

def is_citation_shaped(v: Any) -> bool:
    return isinstance(v, dict) and any(k in v for k in ("act", "section", "description"))


# --- Field table ---

@dataclass(frozen=True)
class FieldSpec:
    """One canonical field: how to coerce it and which key paths feed it, in precedence order."""
    name: str
    coerce: Callable[[Any], Any]
    paths: Tuple[KeyPath, ...]


def _own_or_enveloped(name: str) -> Tuple[KeyPath, ...]:
    # agents sometimes wrap the whole body in {"result": {...}}
    return ((name,), ("result", name))


FIELD_TABLE: List[FieldSpec] = [
    FieldSpec("answer", as_text, _own_or_enveloped("answer")),
    FieldSpec("sources", as_citations, _own_or_enveloped("sources")),
    FieldSpec("cross_framework_analysis", as_text, _own_or_enveloped("cross_framework_analysis")),
    FieldSpec("precedence_notes", as_text, _own_or_enveloped("precedence_notes")),
    FieldSpec("compliance_steps", as_text_list, _own_or_enveloped("compliance_steps")),
    FieldSpec("updates", as_updates, _own_or_enveloped("updates")),
    FieldSpec("summary", as_text, _own_or_enveloped("summary")),
    FieldSpec("last_checked", as_text, _own_or_enveloped("last_checked")),
]

# bare `text` ranks below the agent envelope's own message
TEXT_FALLBACK = FieldSpec("answer", as_text, _own_or_enveloped("text"))


def _lookup(data: Dict[str, Any], path: KeyPath) -> Any:
    cur: Any = data
    for key in path:
        if not isinstance(cur, dict) or key not in cur:
            return _MISSING
        cur = cur[key]
    return cur


def _pick(data: Dict[str, Any], spec: FieldSpec) -> Any:
    """First path whose value is present, well-shaped and non-empty; None if there is none."""
    for path in spec.paths:
        raw = _lookup(data, path)
        if raw is _MISSING:
            continue
        value = spec.coerce(raw)
        if value:
            return value
    return None


def prose_fallback_text(raw: RawPayload) -> str:
    """What the user sees when nothing structured could be recovered."""
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    return json.dumps(raw, ensure_ascii=False, default=str)


class SchemaNormalizer:
    """
    Maps a decode result onto the canonical NormalizedAnswer.
    Wrong-typed fields fall back to their defaults instead of failing;
    anything the call site can't use degrades to the plain-prose answer.
    """
    def __init__(self, fields: Optional[List[FieldSpec]] = None):
        self.fields = fields or FIELD_TABLE

    def normalize(
        self,
        result: DecodeResult,
        site: CallSite,
        now: str,
        message: Optional[str] = None,
    ) -> NormalizedAnswer:
        if isinstance(result, Decoded):
            result = self._shape_check(result, site)
        if not isinstance(result, Decoded):
            log.debug("plain-prose fallback: %s", type(result).__name__)
            return self.prose(result.raw, now)

        data = result.data
        if isinstance(data, list):
            if site == "updates":
                return NormalizedAnswer(updates=as_updates(data), last_checked=now)
            return NormalizedAnswer(sources=as_citations(data), last_checked=now)

        values: Dict[str, Any] = {}
        for spec in self.fields:
            value = _pick(data, spec)
            if value is not None:
                values[spec.name] = value
        if "answer" not in values:
            fallback = as_text(message) or _pick(data, TEXT_FALLBACK)
            if fallback:
                values["answer"] = fallback
        values.setdefault("last_checked", now)
        return NormalizedAnswer(**values)

    def prose(self, raw: RawPayload, now: str) -> NormalizedAnswer:
        return NormalizedAnswer(answer=prose_fallback_text(raw), last_checked=now)

    def _shape_check(self, result: Decoded, site: CallSite) -> DecodeResult:
        data = result.data
        if isinstance(data, dict):
            known = any(
                _lookup(data, p) is not _MISSING
                for spec in self.fields + [TEXT_FALLBACK]
                for p in spec.paths
            )
            # braces inside prose ("the set {}") aren't an answer object
            if result.embedded and not known:
                return ShapeMismatch(result.raw, "object carries no known fields")
            return result
        if isinstance(data, list):
            if site == "updates" or (data and all(is_citation_shaped(x) for x in data)):
                return result
            return ShapeMismatch(result.raw, "array does not fit the %s call site" % site)
        return ShapeMismatch(result.raw, "top-level %s is not an object or array" % type(data).__name__)

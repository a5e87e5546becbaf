# app/normalizers/decoder.py
import json
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from pydantic import BaseModel

from .types import Decoded, DecodeFailure, DecodeResult, NoCandidate, RawPayload

log = logging.getLogger(__name__)

OPEN_CURLY = "“”„‟"
CLOSE_CURLY = "“”‟"


@dataclass(frozen=True)
class RepairRule:
    """A named rewrite applied to text that failed strict decoding."""
    name: str
    apply: Callable[[str], str]


# ---------------------------------------------------------------------
# Repair rules (each one only rewrites what is outside / inside strings
# as it claims to, so they can be stacked)
# ---------------------------------------------------------------------

def straighten_quotes(text: str) -> str:
    """Curly double quotes acting as string delimiters become straight quotes."""
    out: List[str] = []
    closer = None   # '"' or "curly" while inside a literal
    escaped = False
    for ch in text:
        if closer is None:
            if ch == '"':
                closer = '"'
                out.append(ch)
            elif ch in OPEN_CURLY:
                closer = "curly"
                out.append('"')
            else:
                out.append(ch)
            continue
        if escaped:
            escaped = False
            out.append(ch)
        elif ch == "\\":
            escaped = True
            out.append(ch)
        elif closer == '"' and ch == '"':
            closer = None
            out.append(ch)
        elif closer == "curly" and ch in CLOSE_CURLY:
            closer = None
            out.append('"')
        elif closer == "curly" and ch == '"':
            # straight quote inside a curly-delimited literal
            out.append('\\"')
        else:
            out.append(ch)
    return "".join(out)


_CONTROL_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t", "\b": "\\b", "\f": "\\f"}


def escape_control_chars(text: str) -> str:
    """Raw control characters inside string literals become JSON escapes."""
    out: List[str] = []
    in_str = False
    escaped = False
    for ch in text:
        if not in_str:
            if ch == '"':
                in_str = True
            out.append(ch)
            continue
        if escaped:
            escaped = False
            out.append(ch)
        elif ch == "\\":
            escaped = True
            out.append(ch)
        elif ch == '"':
            in_str = False
            out.append(ch)
        elif ord(ch) < 0x20:
            out.append(_CONTROL_ESCAPES.get(ch, "\\u%04x" % ord(ch)))
        else:
            out.append(ch)
    return "".join(out)


def strip_trailing_commas(text: str) -> str:
    """Drop a comma (outside strings) that is followed only by whitespace and } or ]."""
    out: List[str] = []
    in_str = False
    escaped = False
    n = len(text)
    for i, ch in enumerate(text):
        if in_str:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_str = False
            out.append(ch)
            continue
        if ch == '"':
            in_str = True
        elif ch == ",":
            j = i + 1
            while j < n and text[j].isspace():
                j += 1
            if j < n and text[j] in "}]":
                continue
        out.append(ch)
    return "".join(out)


# Order matters: later rules rely on straight quotes to find string literals.
REPAIR_RULES: List[RepairRule] = [
    RepairRule("straighten_quotes", straighten_quotes),
    RepairRule("escape_control_chars", escape_control_chars),
    RepairRule("strip_trailing_commas", strip_trailing_commas),
]


def repair(text: str, rules: Optional[List[RepairRule]] = None) -> str:
    """Run every repair rule once, in order."""
    for rule in REPAIR_RULES if rules is None else rules:
        text = rule.apply(text)
    return text


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def plain_data(raw: RawPayload) -> RawPayload:
    """Pydantic records (our own NormalizedAnswer included) become plain dicts/lists."""
    if isinstance(raw, BaseModel):
        return raw.model_dump()
    if isinstance(raw, list):
        return [plain_data(x) for x in raw]
    if isinstance(raw, dict):
        return {k: plain_data(v) for k, v in raw.items()}
    return raw


def decode(
    candidate: Optional[str],
    raw: RawPayload,
    rules: Optional[List[RepairRule]] = None,
    source: Optional[str] = None,
) -> DecodeResult:
    """
    Tolerant decode of one agent payload.

    `candidate` is the located JSON region (None if the locator found none),
    `source` the text it was located in (defaults to `raw`);
    `raw` is the untouched payload. Structured payloads pass straight through.
    Failures come back as NoCandidate / DecodeFailure, never as exceptions.
    """
    if not isinstance(raw, str):
        data = plain_data(raw)
        return Decoded(data, data, from_text=False)

    text = candidate if candidate is not None else raw.strip()
    embedded = text != (raw if source is None else source).strip()
    try:
        return Decoded(json.loads(text), raw, embedded=embedded)
    except ValueError:
        pass

    repaired = repair(text, rules)
    try:
        data = json.loads(repaired)
        log.debug("decoded agent payload after repair pass")
        return Decoded(data, raw, embedded=embedded)
    except ValueError as e:
        if candidate is None:
            return NoCandidate(raw)
        return DecodeFailure(raw, candidate, str(e))

import json
import re
from typing import Iterable, List, Sequence, Tuple

from app.schemas import SourceCitation

GENERAL = "General"
FRAMEWORK_FILTERS = ("All", "DPDPA", "IT Act 2000", "IT Act 2008")

# separators models put between "Act" and the year: "Act 2000", "Act, 2000", "Act-2000"
_SEP = r"[\s,.\-]*"

# Checked in this order; the output keeps it.
FRAMEWORK_PATTERNS: Sequence[Tuple[str, re.Pattern]] = (
    ("DPDPA", re.compile(
        r"\bDPDPA\b|Digital\s+Personal\s+Data\s+Protection", re.I)),
    ("IT Act 2000", re.compile(
        rf"\bIT\s*Act{_SEP}2000\b|Information\s+Technology\s+Act{_SEP}2000\b", re.I)),
    ("IT Act 2008", re.compile(
        rf"\bIT\s*Act{_SEP}2008\b"
        rf"|\b(?:IT|Information\s+Technology)[\s.\-]*\(?\s*Amendment\s*\)?[\s.\-]*Act{_SEP}2008\b", re.I)),
)


def detect_frameworks(text: str, sources: Iterable[SourceCitation] = ()) -> List[str]:
    """
    Label an answer with the legal frameworks it mentions.
    Looks at the answer text plus the serialized citations; falls back to ["General"].
    """
    cites = [s.model_dump() if isinstance(s, SourceCitation) else s for s in sources or ()]
    combined = f"{text or ''} {json.dumps(cites, ensure_ascii=False)}"
    found = [label for label, rx in FRAMEWORK_PATTERNS if rx.search(combined)]
    return found or [GENERAL]


def apply_framework_filter(message: str, framework: str) -> str:
    """Prefix the question with the selected framework, e.g. "[DPDPA] ..."; "All" leaves it alone."""
    if not framework or framework == "All":
        return message
    return f"[{framework}] {message}"

# app/normalizers/locator.py
from typing import Optional

OPENERS = "{["
CLOSERS = "}]"
# opening delimiter -> the character that closes it
QUOTES = {"\"": "\"", "'": "'", "“": "”"}


def locate_candidate(text: str) -> Optional[str]:
    """
    Return the first balanced {...} or [...] region of `text`, or None.

    Walks forward from the first opening bracket keeping a depth counter.
    Brackets inside string literals (straight or curly quotes, backslash escapes
    honored) don't count. Anything after the matching close is ignored, so
    trailing commentary like "Let me know if you need more." drops off.
    """
    start = next((i for i, ch in enumerate(text) if ch in OPENERS), -1)
    if start == -1:
        return None

    depth = 0
    quote = None      # closing delimiter of the literal we are inside, if any
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue
        if ch in QUOTES:
            quote = QUOTES[ch]
        elif ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    # ran off the end: truncated
    return None

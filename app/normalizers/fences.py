# app/normalizers/fences.py
import re

# ```json\n ... ``` (language hint optional, first block wins)
FENCE_RE = re.compile(r"```[ \t]*[\w+.-]*[ \t]*\r?\n?(.*?)```", flags=re.S)
# Opening fence whose closing marker never arrived (truncated output)
OPEN_FENCE_RE = re.compile(r"```[ \t]*[\w+.-]*[ \t]*\r?\n?(.*)\Z", flags=re.S)


def strip_fences(text: str) -> str:
    """Return the interior of the first fenced block, or `text` unchanged if there is none."""
    m = FENCE_RE.search(text)
    if m:
        return m.group(1).strip()
    m = OPEN_FENCE_RE.search(text)
    if m:
        return m.group(1).strip()
    return text

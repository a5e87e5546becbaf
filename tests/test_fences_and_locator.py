from app.normalizers import locate_candidate, strip_fences


def test_strip_fences_json_hint():
    text = 'Here you go:\n```json\n{"answer": "x"}\n```\nAnything else?'
    assert strip_fences(text) == '{"answer": "x"}'

def test_strip_fences_no_hint():
    assert strip_fences('```\n[1, 2]\n```') == "[1, 2]"

def test_strip_fences_first_block_wins():
    text = '```json\n{"a": 1}\n```\nand\n```json\n{"b": 2}\n```'
    assert strip_fences(text) == '{"a": 1}'

def test_strip_fences_passthrough_without_fence():
    text = "The consent rules are strict."
    assert strip_fences(text) is text

def test_strip_fences_unclosed_fence():
    assert strip_fences('```json\n{"answer": "cut off') == '{"answer": "cut off'


def test_locate_ignores_trailing_commentary():
    text = 'Here is the result: {"answer": "yes"} Let me know if you need more.'
    assert locate_candidate(text) == '{"answer": "yes"}'

def test_locate_nested_and_brackets_in_strings():
    text = 'x {"a": {"b": [1, 2]}, "c": "not } a [close"} y'
    assert locate_candidate(text) == '{"a": {"b": [1, 2]}, "c": "not } a [close"}'

def test_locate_respects_escaped_quotes():
    text = r'{"a": "she said \"}\" loudly"} trailing'
    assert locate_candidate(text) == r'{"a": "she said \"}\" loudly"}'

def test_locate_single_quoted_strings():
    assert locate_candidate("{'a': '}'}") == "{'a': '}'}"

def test_locate_curly_quoted_strings():
    assert locate_candidate("{“a”: “x } y”} tail") == "{“a”: “x } y”}"

def test_locate_first_opening_bracket_wins():
    assert locate_candidate('[1] then {"a": 2}') == "[1]"

def test_locate_none_without_brackets():
    assert locate_candidate("no json here") is None

def test_locate_none_when_truncated():
    assert locate_candidate('{"answer": "half", "sources": [') is None

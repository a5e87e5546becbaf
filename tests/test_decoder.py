from app.normalizers import REPAIR_RULES, Decoded, DecodeFailure, NoCandidate, decode
from app.normalizers.decoder import escape_control_chars, straighten_quotes, strip_trailing_commas
from app.schemas import NormalizedAnswer, SourceCitation


def test_repair_rule_order_is_fixed():
    assert [r.name for r in REPAIR_RULES] == [
        "straighten_quotes",
        "escape_control_chars",
        "strip_trailing_commas",
    ]

def test_strip_trailing_commas():
    assert strip_trailing_commas('{"a": [1, 2, ], }') == '{"a": [1, 2 ] }'

def test_strip_trailing_commas_leaves_strings_alone():
    assert strip_trailing_commas('{"a": ",]"}') == '{"a": ",]"}'

def test_straighten_quotes():
    assert straighten_quotes("{“answer”: “yes”}") == '{"answer": "yes"}'

def test_straighten_quotes_keeps_curly_inside_straight_strings():
    text = '{"answer": "he said “hi”"}'
    assert straighten_quotes(text) == text

def test_escape_control_chars():
    assert escape_control_chars('{"a": "line1\nline2\tend"}') == '{"a": "line1\\nline2\\tend"}'

def test_escape_control_chars_outside_strings_untouched():
    text = '{\n  "a": 1\n}'
    assert escape_control_chars(text) == text


def test_decode_strict():
    res = decode('{"answer": "x"}', '{"answer": "x"}')
    assert isinstance(res, Decoded)
    assert res.data == {"answer": "x"}

def test_decode_after_repairs():
    broken = '{“answer”: “line one\nline two”, "compliance_steps": ["a", "b",],}'
    res = decode(broken, broken)
    assert isinstance(res, Decoded)
    assert res.data == {"answer": "line one\nline two", "compliance_steps": ["a", "b"]}

def test_decode_structured_passthrough():
    payload = {"answer": "x"}
    res = decode(None, payload)
    assert isinstance(res, Decoded)
    assert res.data == payload
    assert res.from_text is False

def test_decode_flattens_pydantic_records():
    record = NormalizedAnswer(answer="a", sources=[SourceCitation(act="DPDPA 2023")])
    res = decode(None, record)
    assert isinstance(res, Decoded)
    assert res.data["answer"] == "a"
    assert res.data["sources"] == [{"act": "DPDPA 2023", "section": "", "description": ""}]
    assert decode(None, [SourceCitation(section="43A")]).data == [{"act": "", "section": "43A", "description": ""}]

def test_decode_marks_regions_cut_from_prose():
    region = '{"x": 1}'
    assert decode(region, f"see {region} here").embedded is True
    assert decode(region, f" {region}\n").embedded is False
    fenced = f"```json\n{region}\n```"
    assert decode(region, fenced, source=region + "\n").embedded is False

def test_decode_failure_carries_raw_text():
    raw = "prefix {not json at all} suffix"
    res = decode("{not json at all}", raw)
    assert isinstance(res, DecodeFailure)
    assert res.raw == raw

def test_decode_no_candidate_plain_prose():
    res = decode(None, "The consent rules are strict.")
    assert isinstance(res, NoCandidate)

def test_decode_custom_rule_list():
    raw = '{"a": 1,}'
    assert isinstance(decode(raw, raw, rules=[]), DecodeFailure)
    assert isinstance(decode(raw, raw), Decoded)

from app import settings
from app.deps import chat_gate


def test_chat_fenced_answer(client, fake_agent):
    fake_agent.envelope = {"success": True, "response": {"result": (
        'Here you go:\n```json\n{"answer": "Consent is required under DPDPA.", '
        '"sources": [{"act": "DPDPA 2023", "section": "Section 6", "description": "Consent basis"}]}\n```'
    )}}
    r = client.post("/chat", json={"message": "What are the consent requirements?"})
    assert r.status_code == 200, r.text
    out = r.json()
    assert out["ok"] is True
    assert out["answer"]["answer"] == "Consent is required under DPDPA."
    assert out["answer"]["sources"][0]["section"] == "Section 6"
    assert out["frameworks"] == ["DPDPA"]
    assert out["session_id"].startswith("session_")
    assert fake_agent.calls[0]["agent_id"] == settings.LEGAL_AGENT_ID

def test_chat_framework_filter_prefixes_message(client, fake_agent):
    r = client.post("/chat", json={"message": "penalties?", "framework": "IT Act 2000", "session_id": "s1"})
    assert r.status_code == 200
    assert fake_agent.calls[0]["message"] == "[IT Act 2000] penalties?"
    assert fake_agent.calls[0]["session_id"] == "s1"
    assert r.json()["session_id"] == "s1"

def test_chat_plain_prose_answer(client, fake_agent):
    fake_agent.envelope = {"success": True, "response": {"result": "The consent rules are strict."}}
    out = client.post("/chat", json={"message": "q"}).json()
    assert out["answer"]["answer"] == "The consent rules are strict."
    assert out["answer"]["sources"] == []
    assert out["frameworks"] == ["General"]

def test_chat_falls_back_to_envelope_message(client, fake_agent):
    fake_agent.envelope = {"success": True, "response": {"result": {"sources": []}, "message": "See DPDPA s.6"}}
    out = client.post("/chat", json={"message": "q"}).json()
    assert out["answer"]["answer"] == "See DPDPA s.6"

def test_chat_envelope_message_beats_bare_text(client, fake_agent):
    fake_agent.envelope = {"success": True, "response": {"result": {"text": "T"}, "message": "M"}}
    out = client.post("/chat", json={"message": "q"}).json()
    assert out["answer"]["answer"] == "M"

def test_chat_bare_text_when_no_message(client, fake_agent):
    fake_agent.envelope = {"success": True, "response": {"result": {"text": "T"}}}
    out = client.post("/chat", json={"message": "q"}).json()
    assert out["answer"]["answer"] == "T"

def test_chat_placeholder_when_nothing_usable(client, fake_agent):
    fake_agent.envelope = {"success": True, "response": {"result": None}}
    out = client.post("/chat", json={"message": "q"}).json()
    assert out["answer"]["answer"] == "Unable to parse response"

def test_chat_agent_reports_failure(client, fake_agent):
    fake_agent.envelope = {"success": False, "error": "agent quota exceeded"}
    out = client.post("/chat", json={"message": "q"}).json()
    assert out["ok"] is False
    assert out["error"] == "agent quota exceeded"
    assert out["answer"] is None

def test_chat_network_error(client, fake_agent):
    fake_agent.error = "connection refused"
    r = client.post("/chat", json={"message": "q"})
    assert r.status_code == 502
    assert "Network error" in r.json()["detail"]

def test_chat_rejects_empty_and_unknown_filter(client):
    assert client.post("/chat", json={"message": "   "}).status_code == 400
    assert client.post("/chat", json={"message": "q", "framework": "GDPR"}).status_code == 400

def test_chat_single_flight(client, fake_agent):
    with chat_gate.hold():
        r = client.post("/chat", json={"message": "q"})
    assert r.status_code == 409
    assert fake_agent.calls == []
    # gate released afterwards
    assert client.post("/chat", json={"message": "q"}).status_code == 200

import json

from app import settings
from app.deps import updates_gate


def test_check_updates_from_json_text(client, fake_agent):
    body = {
        "updates": [
            {"title": "DPDPA Draft Rules", "date": "2025-01-03", "impact_level": "Critical",
             "framework": "DPDPA", "affected_provisions": ["Section 6"]},
            {"summary": "no title or date"},
        ],
        "summary": "Two updates found.",
        "last_checked": "2025-01-04T10:00:00Z",
    }
    fake_agent.envelope = {"success": True, "response": {"result": json.dumps(body)}}
    r = client.post("/updates/check")
    assert r.status_code == 200, r.text
    out = r.json()
    assert out["ok"] is True
    assert len(out["updates"]) == 2
    assert out["updates"][1]["title"] is None
    assert out["summary"] == "Two updates found."
    assert out["last_checked"] == "2025-01-04T10:00:00Z"
    assert fake_agent.calls[0]["agent_id"] == settings.MEITY_AGENT_ID

def test_check_updates_bare_array(client, fake_agent):
    fake_agent.envelope = {"success": True, "response": {"result": [{"title": "A"}, {"title": "B"}]}}
    out = client.post("/updates/check").json()
    assert [u["title"] for u in out["updates"]] == ["A", "B"]
    assert out["last_checked"].startswith("2024-06-01T12:00:00")

def test_check_updates_prose_gives_empty_feed(client, fake_agent):
    fake_agent.envelope = {"success": True, "response": {"result": "No new updates this week."}}
    out = client.post("/updates/check").json()
    assert out["ok"] is True
    assert out["updates"] == []

def test_check_updates_failure(client, fake_agent):
    fake_agent.envelope = {"success": False}
    out = client.post("/updates/check").json()
    assert out["ok"] is False
    assert out["error"] == "Failed to check for updates"

def test_check_updates_single_flight(client):
    with updates_gate.hold():
        assert client.post("/updates/check").status_code == 409

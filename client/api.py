import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Content-Type":"application/json"})

# agent calls can take a couple of minutes
AGENT_TIMEOUT = 180

def healthz():   r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def schedules(): r=S.get(f"{API}/schedules",timeout=30); r.raise_for_status(); return r.json()
def pause(sid):  r=S.post(f"{API}/schedules/{sid}/pause",timeout=30); r.raise_for_status(); return r.json()
def resume(sid): r=S.post(f"{API}/schedules/{sid}/resume",timeout=30); r.raise_for_status(); return r.json()

def chat(message: str, framework: str = "All", session_id: str | None = None):
    body = {"message": message, "framework": framework, "session_id": session_id}
    r = S.post(f"{API}/chat", json=body, timeout=AGENT_TIMEOUT)
    r.raise_for_status()
    return r.json()

def check_updates():
    r = S.post(f"{API}/updates/check", timeout=AGENT_TIMEOUT); r.raise_for_status(); return r.json()

def schedule_logs(sid: str, limit: int = 10):
    r = S.get(f"{API}/schedules/{sid}/logs", params={"limit": int(limit)}, timeout=30)
    r.raise_for_status()
    return r.json()

def upload(corpus: str, filename: str, data: bytes, content_type: str | None = None):
    # multipart: don't send the session's JSON content-type
    files = {"file": (filename, data, content_type or "application/octet-stream")}
    r = requests.post(f"{API}/knowledge/{corpus}/upload", files=files, timeout=120)
    r.raise_for_status()
    return r.json()

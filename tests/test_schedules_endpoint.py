def test_list_schedules(client):
    r = client.get("/schedules")
    assert r.status_code == 200
    data = r.json()
    assert data["success"] is True
    assert data["schedules"][0]["cron_human"] == "Every day at 9:00 AM"

def test_schedule_logs_limit(client):
    r = client.get("/schedules/sched-1/logs", params={"limit": 3})
    assert r.status_code == 200
    assert len(r.json()["executions"]) == 3

def test_schedule_logs_limit_bounds(client):
    assert client.get("/schedules/sched-1/logs", params={"limit": 0}).status_code == 422

def test_pause_and_resume(client):
    r = client.post("/schedules/sched-1/pause")
    assert r.status_code == 200
    assert r.json()["schedule"]["is_active"] is False
    r = client.post("/schedules/sched-1/resume")
    assert r.json()["schedule"]["is_active"] is True

def test_scheduler_down(client, fake_scheduler):
    fake_scheduler.down = True
    r = client.get("/schedules")
    assert r.status_code == 502
    assert "Scheduler unavailable" in r.json()["detail"]

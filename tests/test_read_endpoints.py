def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["service"] == "spacedash"

def test_telemetry_newest_first_default_limit(client, seed_sample):
    r = client.get("/api/telemetry")
    assert r.status_code == 200
    items = r.json()["items"]
    assert len(items) == 20
    assert items[0]["source_file"] == "telemetry_024.csv"
    assert set(items[0]) == {"id", "recorded_at", "voltage", "temp", "source_file"}

def test_telemetry_limit_param(client, seed_sample):
    r = client.get("/api/telemetry", params={"limit": 3})
    assert r.status_code == 200
    assert [it["source_file"] for it in r.json()["items"]] == [
        "telemetry_024.csv", "telemetry_023.csv", "telemetry_022.csv",
    ]

def test_telemetry_limit_out_of_range(client):
    r = client.get("/api/telemetry", params={"limit": 0})
    assert r.status_code == 422

def test_iss_history_decodes_payload(client, seed_sample):
    r = client.get("/api/iss/history")
    assert r.status_code == 200
    items = r.json()["items"]
    assert len(items) == 4
    assert items[0]["payload"] == {"error": "upstream timeout"}
    assert items[-1]["payload"]["latitude"] == 10.0

def test_iss_last(client, seed_sample):
    r = client.get("/api/iss/last")
    assert r.status_code == 200
    assert r.json()["payload"] == {"error": "upstream timeout"}

def test_iss_last_empty_is_404(client, empty_db):
    r = client.get("/api/iss/last")
    assert r.status_code == 404

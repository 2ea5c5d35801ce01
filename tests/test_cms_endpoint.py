def test_active_block(client, seed_sample):
    r = client.get("/api/cms/welcome_message")
    assert r.status_code == 200
    assert r.json() == {"slug": "welcome_message", "content": "<p>Hello, space fans</p>"}

def test_inactive_block_is_not_served(client, seed_sample):
    r = client.get("/api/cms/footer_info")
    assert r.status_code == 404

def test_unknown_block(client, seed_sample):
    assert client.get("/api/cms/nope").status_code == 404

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["status"] == "ok"


def test_api_index(client):
    r = client.get("/api")
    assert r.status_code == 200
    assert "/products" in r.json["endpoints"]["catalog"]


def test_request_id_is_echoed_in_errors(client):
    r = client.get("/api/nowhere", headers={"X-Request-ID": "abc-123"})
    assert r.status_code == 404
    assert r.json["error"]["request_id"] == "abc-123"


def test_unknown_route_is_json_error(client):
    r = client.get("/nowhere")
    assert r.status_code == 404
    assert r.json["error"]["code"] == "http_error"

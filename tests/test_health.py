def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["time"]


def test_unknown_route(client):
    assert client.get("/api/nothing-here").status_code == 404

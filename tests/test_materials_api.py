MATERIAL = {
    "name": "Steel Sheet",
    "category": "Metal",
    "supplier": "Cebu Steel",
    "quantity": 40,
    "status": "Available",
}


def _create(client, headers, **overrides):
    response = client.post("/api/materials", json={**MATERIAL, **overrides}, headers=headers)
    assert response.status_code == 201
    return response.json()


def test_material_crud(client, auth_headers):
    created = _create(client, auth_headers)
    assert created["status"] == "Available"

    updated = client.put(
        f"/api/materials/{created['id']}",
        json={"status": "Reserved", "quantity": 2},
        headers=auth_headers,
    ).json()
    # Material status is whatever the caller sets
    assert updated["status"] == "Reserved"
    assert updated["quantity"] == 2

    assert client.delete(f"/api/materials/{created['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/materials/{created['id']}", headers=auth_headers).status_code == 404


def test_material_filters(client, auth_headers):
    bolt = _create(client, auth_headers, name="Bolt", category="Hardware", supplier="Acme")
    _create(client, auth_headers, name="Primer", category="Paint", supplier="Boysen")

    def names(**params):
        response = client.get("/api/materials", params=params, headers=auth_headers)
        return sorted(m["name"] for m in response.json())

    assert names(category="hardware") == ["Bolt"]
    assert names(supplier="BOYSEN") == ["Primer"]
    assert names(search="acm") == ["Bolt"]
    assert names(search=str(bolt["id"])) == ["Bolt"]


def test_paginated_materials(client, auth_headers):
    for index in range(7):
        _create(client, auth_headers, name=f"Item {index}")

    response = client.get(
        "/api/materials/paginated",
        params={"page": 2, "limit": 3},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 7
    assert body["page"] == 2
    assert body["limit"] == 3
    assert body["totalPages"] == 3
    assert len(body["materials"]) == 3


def test_paginated_limit_bounds(client, auth_headers):
    too_big = client.get("/api/materials/paginated", params={"limit": 101}, headers=auth_headers)
    assert too_big.status_code == 422

    bad_page = client.get("/api/materials/paginated", params={"page": 0}, headers=auth_headers)
    assert bad_page.status_code == 422

    default = client.get("/api/materials/paginated", headers=auth_headers).json()
    assert default["limit"] == 10
    assert default["totalPages"] == 0

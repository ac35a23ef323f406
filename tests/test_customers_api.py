from surplus_sales.repositories.sales import SaleRepository


CUSTOMER = {
    "name": "Maria Santos",
    "email": "maria@example.com",
    "phone": "+639171234567",
    "address": "Cebu City",
}


def test_customer_crud(client, auth_headers):
    created = client.post("/api/customers", json=CUSTOMER, headers=auth_headers)
    assert created.status_code == 201
    body = created.json()
    assert body["email"] == CUSTOMER["email"]
    assert "dateRegistered" in body

    customer_id = body["id"]
    updated = client.put(
        f"/api/customers/{customer_id}",
        json={"address": "Mandaue"},
        headers=auth_headers,
    ).json()
    assert updated["address"] == "Mandaue"
    assert updated["name"] == CUSTOMER["name"]

    listed = client.get("/api/customers", headers=auth_headers).json()
    assert [c["id"] for c in listed] == [customer_id]

    assert client.delete(f"/api/customers/{customer_id}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/customers/{customer_id}", headers=auth_headers).status_code == 404


def test_duplicate_email_conflicts(client, auth_headers):
    client.post("/api/customers", json=CUSTOMER, headers=auth_headers)

    response = client.post(
        "/api/customers",
        json={**CUSTOMER, "name": "Another Maria"},
        headers=auth_headers,
    )

    assert response.status_code == 409


def test_invalid_email_is_rejected(client, auth_headers):
    response = client.post(
        "/api/customers",
        json={**CUSTOMER, "email": "not-an-email"},
        headers=auth_headers,
    )

    assert response.status_code == 422


def test_customer_sales(client, auth_headers, db, make_cab):
    customer = client.post("/api/customers", json=CUSTOMER, headers=auth_headers).json()
    cab = make_cab()
    SaleRepository(db).sell_cab(cab_id=cab.id, customer_id=customer["id"], quantity=1, sold_by="u-1")

    sales = client.get(f"/api/customers/{customer['id']}/sales", headers=auth_headers)
    assert sales.status_code == 200
    assert [s["customerId"] for s in sales.json()] == [customer["id"]]

    none = client.get("/api/customers/unknown/sales", headers=auth_headers)
    assert none.status_code == 200
    assert none.json() == []

from datetime import date, timedelta

import pytest

from surplus_sales.repositories.sales import AccessoryForSale, SaleRepository


@pytest.fixture
def sale(db, make_cab, make_accessory):
    cab = make_cab(quantity=5)
    rack = make_accessory(quantity=5)
    return SaleRepository(db).sell_cab(
        cab_id=cab.id,
        customer_id="cust-1",
        quantity=1,
        sold_by="seller-1",
        accessories=[AccessoryForSale(id=rack.id, quantity=2)],
    )


def test_list_and_filter_sales(client, auth_headers, sale):
    everything = client.get("/api/sales", headers=auth_headers).json()
    assert [s["id"] for s in everything] == [sale.sale.id]

    by_customer = client.get("/api/sales", params={"customer_id": "cust-2"}, headers=auth_headers)
    assert by_customer.json() == []

    by_seller = client.get("/api/sales", params={"sold_by": "seller-1"}, headers=auth_headers)
    assert len(by_seller.json()) == 1

    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    future = client.get("/api/sales", params={"date_from": tomorrow}, headers=auth_headers)
    assert future.json() == []

    today = date.today().isoformat()
    window = client.get(
        "/api/sales",
        params={"date_from": today, "date_to": today},
        headers=auth_headers,
    )
    assert len(window.json()) == 1


def test_bad_date_filter(client, auth_headers):
    response = client.get("/api/sales", params={"date_from": "yesterday"}, headers=auth_headers)
    assert response.status_code == 422


def test_sale_items(client, auth_headers, sale):
    response = client.get(f"/api/sales/{sale.sale.id}/items", headers=auth_headers)

    assert response.status_code == 200
    items = response.json()
    assert sorted(item["itemType"] for item in items) == ["accessory", "cab"]
    assert sum(item["subtotal"] for item in items) == float(sale.total_price)


def test_items_of_unknown_sale(client, auth_headers):
    response = client.get("/api/sales/missing/items", headers=auth_headers)
    assert response.status_code == 404


def test_update_sale_header(client, auth_headers, sale):
    response = client.put(
        f"/api/sales/{sale.sale.id}",
        json={"customerId": "cust-9", "totalPrice": 1},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["customerId"] == "cust-9"
    assert body["totalPrice"] == float(sale.total_price)


def test_delete_sale(client, auth_headers, sale):
    assert client.delete(f"/api/sales/{sale.sale.id}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/sales/{sale.sale.id}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/sales/{sale.sale.id}", headers=auth_headers).status_code == 404

import pytest

from surplus_sales.core.filters import (
    build_filter_query,
    contains,
    equals,
    exact,
    gte,
    lte,
    search,
)
from surplus_sales.models.cabs import MultiCab
from surplus_sales.models.materials import Material


CAB_FIELDS = {
    "make": exact("make"),
    "status": exact("status"),
    "unit_color": exact("unit_color"),
    "search": search("name", "make"),
}


def test_no_filters_gives_empty_clause():
    query = build_filter_query({}, CAB_FIELDS)

    assert query.where == ""
    assert query.args == []


def test_absent_and_blank_filters_are_skipped():
    query = build_filter_query(
        {"make": None, "status": "", "unit_color": "   "},
        CAB_FIELDS,
    )

    assert query.conditions == []
    assert query.args == []


def test_exact_filters_keep_insertion_order():
    query = build_filter_query(
        {"status": "Available", "make": "Toyota"},
        CAB_FIELDS,
    )

    assert query.where == (
        "LOWER(status) = LOWER(:p0) AND LOWER(make) = LOWER(:p1)"
    )
    assert query.args == ["Available", "Toyota"]
    assert query.params == {"p0": "Available", "p1": "Toyota"}


def test_search_spans_columns_with_one_argument():
    query = build_filter_query({"make": "Suzuki", "search": "van"}, CAB_FIELDS)

    assert query.conditions[1] == (
        "(LOWER(name) LIKE LOWER(:p1) ESCAPE '!'"
        " OR LOWER(make) LIKE LOWER(:p1) ESCAPE '!')"
    )
    assert query.args == ["Suzuki", "%van%"]


def test_numeric_search_matches_id_column():
    fields = {"search": search("name", "category", id_column="id")}

    query = build_filter_query({"search": "42"}, fields)

    assert query.where == "id = :p0"
    assert query.args == [42]


def test_single_column_contains():
    query = build_filter_query({"user": "ali"}, {"user": contains("user_id")})

    assert query.where == "LOWER(user_id) LIKE LOWER(:p0) ESCAPE '!'"
    assert query.args == ["%ali%"]


def test_range_and_equality_rules():
    fields = {
        "customer_id": equals("customer_id"),
        "date_from": gte("sale_date"),
        "date_to": lte("sale_date"),
    }

    query = build_filter_query(
        {"customer_id": "c-1", "date_from": "2024-01-01", "date_to": "2024-01-31"},
        fields,
    )

    assert query.where == (
        "customer_id = :p0 AND sale_date >= :p1 AND sale_date <= :p2"
    )
    assert query.args == ["c-1", "2024-01-01", "2024-01-31"]


def test_unknown_filter_is_rejected():
    with pytest.raises(ValueError):
        build_filter_query({"colour": "red"}, CAB_FIELDS)


def test_apply_narrows_orm_query(db):
    db.add_all(
        [
            MultiCab(name="Scrum", make="Suzuki", quantity=1, price=10, status="Low Stock", unit_color="Red"),
            MultiCab(name="Carry", make="SUZUKI", quantity=8, price=10, status="Available", unit_color="Blue"),
            MultiCab(name="Hijet", make="Daihatsu", quantity=8, price=10, status="Available", unit_color="Red"),
        ]
    )
    db.commit()

    query = build_filter_query({"make": "suzuki"}, CAB_FIELDS)
    names = sorted(cab.name for cab in query.apply(db.query(MultiCab)).all())
    assert names == ["Carry", "Scrum"]

    query = build_filter_query({"search": "JET"}, CAB_FIELDS)
    assert [cab.name for cab in query.apply(db.query(MultiCab)).all()] == ["Hijet"]


def test_apply_numeric_search_on_materials(db):
    first = Material(name="Bolt", category="Hardware", supplier="Acme", quantity=5, status="In Stock")
    second = Material(name="Paint", category="Finish", supplier="Acme", quantity=5, status="In Stock")
    db.add_all([first, second])
    db.commit()

    fields = {"search": search("name", "category", "supplier", id_column="id")}
    query = build_filter_query({"search": str(second.id)}, fields)

    assert [m.name for m in query.apply(db.query(Material)).all()] == ["Paint"]


@pytest.mark.parametrize("term", ["²", "١٢", "1234567890123456789012"])
def test_non_id_digits_fall_back_to_substring_search(term):
    fields = {"search": search("name", id_column="id")}

    query = build_filter_query({"search": term}, fields)

    assert query.where == "LOWER(name) LIKE LOWER(:p0) ESCAPE '!'"
    assert query.args == [f"%{term}%"]


def test_like_wildcards_are_escaped():
    query = build_filter_query({"user": "50%_off!"}, {"user": contains("user_id")})

    assert query.args == ["%50!%!_off!!%"]


def test_underscore_search_is_literal(db):
    db.add_all(
        [
            MultiCab(name="Scrum_Van", make="Suzuki", quantity=1, price=10, status="Low Stock", unit_color="Red"),
            MultiCab(name="Carry", make="Suzuki", quantity=1, price=10, status="Low Stock", unit_color="Red"),
            MultiCab(name="Every 100%", make="Suzuki", quantity=1, price=10, status="Low Stock", unit_color="Red"),
        ]
    )
    db.commit()

    def names(term):
        query = build_filter_query({"search": term}, CAB_FIELDS)
        return [cab.name for cab in query.apply(db.query(MultiCab)).all()]

    assert names("_") == ["Scrum_Van"]
    assert names("%") == ["Every 100%"]


def test_superscript_search_on_materials_endpoint(client, auth_headers):
    client.post(
        "/api/materials",
        json={"name": "Pipe ²", "category": "Plumbing", "supplier": "Acme", "status": "Available"},
        headers=auth_headers,
    )

    response = client.get("/api/materials", params={"search": "²"}, headers=auth_headers)

    assert response.status_code == 200
    assert [m["name"] for m in response.json()] == ["Pipe ²"]

from decimal import Decimal


def test_create_product_resets_server_fields(client, admin_headers):
    response = client.post("/products", json={
        "name": "Phone",
        "price": "199.99",
        "image": "/uploads/phone.png",
        "stock": 3,
        "rating": "4.9",
        "reviewCount": 120,
        "isActive": False,
    }, headers=admin_headers)
    assert response.status_code == 200
    product = response.json()
    assert product["rating"] == "0.0"
    assert product["reviewCount"] == 0
    assert product["isActive"] is True
    assert Decimal(product["price"]) == Decimal("199.99")


def test_create_product_requires_admin(client, user_headers):
    response = client.post("/products", json={"name": "x"}, headers=user_headers)
    assert response.status_code == 403
    assert response.json() == {"message": "Admin access required"}


def test_create_product_requires_token(client):
    response = client.post("/products", json={"name": "Phone", "price": "1", "image": "a.png"})
    assert response.status_code == 401


def test_create_product_rejects_negative_price(client, admin_headers):
    response = client.post("/products", json={
        "name": "Phone", "price": "-1", "image": "/uploads/phone.png"
    }, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["message"].startswith("price:")


def test_create_product_requires_image(client, admin_headers):
    response = client.post("/products", json={"name": "Phone", "price": "5"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["message"].startswith("image:")


def test_get_product(client, create_product):
    product = create_product()
    response = client.get(f"/products/{product['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Widget"


def test_get_missing_product(client):
    response = client.get("/products/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


def test_price_range_filter(client, create_product):
    create_product(name="Cheap", price="50.00")
    create_product(name="Low", price="100.00")
    create_product(name="Mid", price="150.00")
    create_product(name="High", price="200.00")
    create_product(name="Premium", price="250.00")

    response = client.get("/products", params={"minPrice": 100, "maxPrice": 200})
    assert response.status_code == 200
    names = sorted(p["name"] for p in response.json())
    assert names == ["High", "Low", "Mid"]
    for product in response.json():
        assert Decimal("100") <= Decimal(product["price"]) <= Decimal("200")

    assert len(client.get("/products").json()) == 5


def test_search_matches_name_or_description_case_insensitively(client, create_product):
    create_product(name="Running Shoes", description="Lightweight")
    create_product(name="Sandals", description="Great for RUNNING on the beach")
    create_product(name="Hat", description="Keeps the sun off")

    response = client.get("/products", params={"search": "running"})
    names = sorted(p["name"] for p in response.json())
    assert names == ["Running Shoes", "Sandals"]


def test_filters_combine_with_and(client, admin_headers, create_product):
    category = client.post("/categories", json={"name": "Shoes"}, headers=admin_headers).json()
    create_product(name="Trail Shoe", price="80.00", categoryId=category["id"])
    create_product(name="Road Shoe", price="120.00", categoryId=category["id"])
    create_product(name="Trail Map", price="15.00")

    response = client.get("/products", params={
        "categoryId": category["id"], "search": "trail", "maxPrice": 100
    })
    assert [p["name"] for p in response.json()] == ["Trail Shoe"]


def test_update_product_partial(client, admin_headers, create_product):
    product = create_product()
    response = client.put(f"/products/{product['id']}", json={"price": "12.50"}, headers=admin_headers)
    assert response.status_code == 200
    updated = response.json()
    assert Decimal(updated["price"]) == Decimal("12.50")
    assert updated["name"] == "Widget"
    assert updated["stock"] == 5


def test_update_missing_product(client, admin_headers):
    response = client.put("/products/nope", json={"price": "1"}, headers=admin_headers)
    assert response.status_code == 404


def test_delete_product_is_soft(client, admin_headers, create_product, db_session):
    from storefront.models.product import Product

    product = create_product()
    response = client.delete(f"/products/{product['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Product deleted successfully"}

    assert client.get("/products").json() == []
    assert client.get(f"/products/{product['id']}").status_code == 404
    assert client.delete(f"/products/{product['id']}", headers=admin_headers).status_code == 404

    row = db_session.query(Product).filter(Product.id == product["id"]).one()
    assert row.is_active is False


def test_deactivated_product_can_be_reactivated(client, admin_headers, create_product):
    product = create_product()
    client.delete(f"/products/{product['id']}", headers=admin_headers)
    response = client.put(f"/products/{product['id']}", json={"isActive": True}, headers=admin_headers)
    assert response.status_code == 200
    assert client.get(f"/products/{product['id']}").status_code == 200


def test_delete_requires_admin(client, user_headers, create_product):
    product = create_product()
    response = client.delete(f"/products/{product['id']}", headers=user_headers)
    assert response.status_code == 403


def test_update_product_rejects_null_for_required_columns(client, admin_headers, create_product):
    product = create_product()
    for field in ("name", "price", "image", "stock", "isActive"):
        response = client.put(f"/products/{product['id']}", json={field: None}, headers=admin_headers)
        assert response.status_code == 400, (field, response.text)
        assert response.json() == {"message": f"{field} cannot be null"}

    unchanged = client.get(f"/products/{product['id']}").json()
    assert unchanged["name"] == "Widget"
    assert unchanged["stock"] == 5


def test_update_product_allows_clearing_optional_columns(client, admin_headers, create_product):
    product = create_product()
    response = client.put(
        f"/products/{product['id']}",
        json={"description": None, "categoryId": None},
        headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["description"] is None

"""HTTP tests for categories, products and seller-category links."""


class TestCategoryApi:
    def test_seller_creates_category(self, client, seller):
        response = client.post("/api/category", json={"name": "Books"}, headers=seller["headers"])
        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Books"
        assert body["parent_category_id"] is None

        mine = client.get("/api/category/seller", headers=seller["headers"]).json()
        assert [c["id"] for c in mine] == [body["id"]]

    def test_buyer_cannot_create_category(self, client, buyer):
        response = client.post("/api/category", json={"name": "Books"}, headers=buyer["headers"])
        assert response.status_code == 403

    def test_anonymous_cannot_create_category(self, client):
        assert client.post("/api/category", json={"name": "Books"}).status_code == 401

    def test_listing_is_public(self, client, category):
        response = client.get("/api/category")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Electronics"]

    def test_get_missing_category(self, client):
        assert client.get("/api/category/missing").status_code == 404

    def test_subcategories(self, client, seller, category):
        client.post(
            "/api/category",
            json={"name": "Phones", "parent_category_id": category},
            headers=seller["headers"],
        )
        children = client.get(f"/api/category/parent/{category}").json()
        assert [c["name"] for c in children] == ["Phones"]

    def test_update_with_mismatched_id(self, client, seller, category):
        response = client.put(
            f"/api/category/{category}",
            json={"id": "another-id", "name": "Gadgets"},
            headers=seller["headers"],
        )
        assert response.status_code == 400

    def test_update_by_linked_seller(self, client, seller, category):
        response = client.put(
            f"/api/category/{category}",
            json={"id": category, "name": "Gadgets"},
            headers=seller["headers"],
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Gadgets"

    def test_update_by_unlinked_seller(self, client, other_seller, category):
        response = client.put(f"/api/category/{category}", json={"name": "Gadgets"}, headers=other_seller["headers"])
        assert response.status_code == 403

    def test_delete_category_with_products(self, client, seller, category, product):
        response = client.delete(f"/api/category/{category}", headers=seller["headers"])
        assert response.status_code == 409

    def test_delete_empty_category(self, client, seller, category):
        assert client.delete(f"/api/category/{category}", headers=seller["headers"]).status_code == 204
        assert client.get(f"/api/category/{category}").status_code == 404


class TestProductApi:
    def _payload(self, category_id, **overrides):
        payload = {"name": "Desk lamp", "price": 19.5, "category_id": category_id}
        payload.update(overrides)
        return payload

    def test_seller_creates_product(self, client, seller, category):
        response = client.post("/api/product", json=self._payload(category), headers=seller["headers"])
        assert response.status_code == 201
        body = response.json()
        assert body["seller_id"] == seller["id"]
        assert body["seller_username"] == "sam"
        assert body["category_name"] == "Electronics"

    def test_buyer_cannot_create_product(self, client, buyer, category):
        response = client.post("/api/product", json=self._payload(category), headers=buyer["headers"])
        assert response.status_code == 403

    def test_negative_price_is_rejected(self, client, seller, category):
        response = client.post("/api/product", json=self._payload(category, price=-1), headers=seller["headers"])
        assert response.status_code == 400

    def test_unknown_category(self, client, seller):
        response = client.post("/api/product", json=self._payload("missing"), headers=seller["headers"])
        assert response.status_code == 404

    def test_available_filter(self, client, seller, category, product):
        client.post(
            "/api/product",
            json=self._payload(category, is_available=False),
            headers=seller["headers"],
        )
        everything = client.get("/api/product", params={"category_id": category}).json()
        available = client.get("/api/product", params={"category_id": category, "available": "true"}).json()
        assert len(everything) == 2
        assert [p["id"] for p in available] == [product]

    def test_my_products(self, client, seller, other_seller, product):
        assert [p["id"] for p in client.get("/api/product/mine", headers=seller["headers"]).json()] == [product]
        assert client.get("/api/product/mine", headers=other_seller["headers"]).json() == []

    def test_update_by_other_seller(self, client, other_seller, category, product):
        response = client.put(
            f"/api/product/{product}",
            json=self._payload(category),
            headers=other_seller["headers"],
        )
        assert response.status_code == 403

    def test_update_with_mismatched_id(self, client, seller, category, product):
        response = client.put(
            f"/api/product/{product}",
            json=self._payload(category, id="another-id"),
            headers=seller["headers"],
        )
        assert response.status_code == 400

    def test_delete_by_owner(self, client, seller, product):
        assert client.delete(f"/api/product/{product}", headers=seller["headers"]).status_code == 204
        assert client.get(f"/api/product/{product}").status_code == 404

    def test_delete_missing_product(self, client, seller):
        assert client.delete("/api/product/missing", headers=seller["headers"]).status_code == 403


class TestUserCategoryApi:
    def test_link_self(self, client, other_seller, category):
        response = client.post(
            "/api/usercategory",
            json={"user_id": other_seller["id"], "category_id": category},
            headers=other_seller["headers"],
        )
        assert response.status_code == 201

        mine = client.get("/api/usercategory/my", headers=other_seller["headers"]).json()
        assert mine == [{"user_id": other_seller["id"], "category_id": category}]

    def test_cannot_link_someone_else(self, client, seller, other_seller, category):
        response = client.post(
            "/api/usercategory",
            json={"user_id": other_seller["id"], "category_id": category},
            headers=seller["headers"],
        )
        assert response.status_code == 403

    def test_duplicate_link(self, client, seller, category):
        response = client.post(
            "/api/usercategory",
            json={"user_id": seller["id"], "category_id": category},
            headers=seller["headers"],
        )
        assert response.status_code == 400

    def test_get_link(self, client, seller, category):
        response = client.get(f"/api/usercategory/{seller['id']}/{category}", headers=seller["headers"])
        assert response.status_code == 200
        assert response.json()["category_id"] == category

    def test_get_missing_link(self, client, other_seller, category):
        response = client.get(f"/api/usercategory/{other_seller['id']}/{category}", headers=other_seller["headers"])
        assert response.status_code == 404

    def test_update_changing_the_pair(self, client, seller, other_seller, category):
        response = client.put(
            f"/api/usercategory/{seller['id']}/{category}",
            json={"user_id": other_seller["id"], "category_id": category},
            headers=seller["headers"],
        )
        assert response.status_code == 400

    def test_unlink(self, client, seller, category):
        response = client.delete(f"/api/usercategory/{seller['id']}/{category}", headers=seller["headers"])
        assert response.status_code == 204
        assert client.get("/api/usercategory", headers=seller["headers"]).json() == []

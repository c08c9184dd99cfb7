"""
API tests for the /dishes routes.
"""

import pytest


class TestListDishes:
    """GET /dishes"""

    def test_empty(self, client):
        response = client.get("/dishes")

        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_insertion_order(self, client, create_dish):
        first = create_dish(name="First")
        second = create_dish(name="Second")

        data = client.get("/dishes").json()["data"]

        assert [d["id"] for d in data] == [first["id"], second["id"]]


class TestCreateDish:
    """POST /dishes"""

    def test_create_taco(self, client, dish_data):
        response = client.post("/dishes", json={"data": dish_data})

        assert response.status_code == 201
        body = response.json()["data"]
        assert body["id"]
        assert body["price"] == 5
        assert body["name"] == "Taco"
        assert body["image_url"] == "http://x"

    def test_created_dish_is_listed(self, client, create_dish):
        dish = create_dish()

        assert client.get("/dishes").json()["data"] == [dish]

    def test_ids_are_unique(self, create_dish):
        ids = [create_dish()["id"] for _ in range(10)]

        assert len(set(ids)) == 10

    def test_body_id_is_ignored(self, create_dish):
        dish = create_dish(id="chosen-by-client")

        assert dish["id"] != "chosen-by-client"

    @pytest.mark.parametrize("field, message", [
        ("name", "Dish must include a name"),
        ("description", "Dish must include a description"),
        ("image_url", "Dish must include an image_url"),
    ])
    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_text_field(self, client, dish_data, field, message, value):
        if value is None:
            del dish_data[field]
        else:
            dish_data[field] = value

        response = client.post("/dishes", json={"data": dish_data})

        assert response.status_code == 400
        assert response.json() == {"error": message}

    @pytest.mark.parametrize("price", [-1, 0, "5", 2.5, True, None, [5]])
    def test_invalid_price(self, client, dish_data, price):
        dish_data["price"] = price

        response = client.post("/dishes", json={"data": dish_data})

        assert response.status_code == 400
        assert "price" in response.json()["error"]

    def test_missing_price(self, client, dish_data):
        del dish_data["price"]

        response = client.post("/dishes", json={"data": dish_data})

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Dish must have a price that is an integer greater than 0"
        )

    def test_integral_float_price_is_stored_as_int(self, client, dish_data):
        dish_data["price"] = 5.0

        response = client.post("/dishes", json={"data": dish_data})

        assert response.status_code == 201
        assert response.json()["data"]["price"] == 5

    def test_failed_create_stores_nothing(self, client, dish_data):
        dish_data["price"] = -1
        client.post("/dishes", json={"data": dish_data})

        assert client.get("/dishes").json()["data"] == []

    def test_fields_checked_in_order(self, client):
        response = client.post("/dishes", json={"data": {"price": -1}})

        assert response.json()["error"] == "Dish must include a name"


class TestReadDish:
    """GET /dishes/{dish_id}"""

    def test_read(self, client, create_dish):
        dish = create_dish()

        response = client.get(f"/dishes/{dish['id']}")

        assert response.status_code == 200
        assert response.json() == {"data": dish}

    def test_unknown_id(self, client):
        response = client.get("/dishes/unknown-id")

        assert response.status_code == 404
        assert response.json() == {"error": "Dish id not found: unknown-id"}


class TestUpdateDish:
    """PUT /dishes/{dish_id}"""

    def test_update(self, client, create_dish):
        dish = create_dish()
        changes = {
            "name": "Burrito",
            "description": "big",
            "price": 9,
            "image_url": "http://y",
        }

        response = client.put(f"/dishes/{dish['id']}", json={"data": changes})

        assert response.status_code == 200
        assert response.json()["data"] == {"id": dish["id"], **changes}
        assert client.get(f"/dishes/{dish['id']}").json()["data"]["name"] == "Burrito"

    def test_matching_body_id(self, client, create_dish, dish_data):
        dish = create_dish()

        response = client.put(
            f"/dishes/{dish['id']}", json={"data": {**dish_data, "id": dish["id"]}}
        )

        assert response.status_code == 200

    @pytest.mark.parametrize("body_id", ["", None])
    def test_empty_body_id_is_ignored(self, client, create_dish, dish_data, body_id):
        dish = create_dish()

        response = client.put(
            f"/dishes/{dish['id']}", json={"data": {**dish_data, "id": body_id}}
        )

        assert response.status_code == 200
        assert response.json()["data"]["id"] == dish["id"]

    def test_mismatched_body_id(self, client, create_dish, dish_data):
        dish = create_dish()

        response = client.put(
            f"/dishes/{dish['id']}", json={"data": {**dish_data, "id": "other"}}
        )

        assert response.status_code == 400
        assert response.json()["error"] == (
            f"Dish id does not match route id. Dish: other, Route: {dish['id']}"
        )

    def test_invalid_fields_leave_record_untouched(self, client, create_dish, dish_data):
        dish = create_dish()

        response = client.put(
            f"/dishes/{dish['id']}", json={"data": {**dish_data, "name": "New", "price": 0}}
        )

        assert response.status_code == 400
        assert "price" in response.json()["error"]
        assert client.get(f"/dishes/{dish['id']}").json()["data"] == dish

    def test_unknown_id(self, client, dish_data):
        response = client.put("/dishes/unknown-id", json={"data": dish_data})

        assert response.status_code == 404
        assert "unknown-id" in response.json()["error"]

    def test_unknown_id_reported_before_validation(self, client):
        response = client.put("/dishes/unknown-id", json={"data": {}})

        assert response.status_code == 404


class TestDishMethodNotAllowed:
    """Unwired verbs on dish paths."""

    @pytest.mark.parametrize("method", ["PATCH", "DELETE", "PUT"])
    def test_collection(self, client, method):
        response = client.request(method, "/dishes")

        assert response.status_code == 405
        assert response.json() == {"error": f"{method} not allowed for /dishes"}

    @pytest.mark.parametrize("method", ["PATCH", "DELETE", "POST"])
    def test_item(self, client, create_dish, method):
        dish = create_dish()

        response = client.request(method, f"/dishes/{dish['id']}")

        assert response.status_code == 405
        assert client.get(f"/dishes/{dish['id']}").status_code == 200

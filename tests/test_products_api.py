import unittest
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4

from api_case import ApiTestCase

from pos_backend.core.database import RecordNotFoundError, StoreError
from pos_backend.models.Product import Product


def random_product(user_id) -> Product:
    return Product(
        id=uuid4(),
        user_id=user_id,
        name="espresso",
        price=Decimal("2.50"),
        description="double shot",
        created_at=datetime(2022, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
    )


class ProductsTestCase(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.user_id = uuid4()
        self.product = random_product(self.user_id)


class TestCreateProduct(ProductsTestCase):

    def body(self, username="alice"):
        return {
            "user_id": str(self.user_id),
            "username": username,
            "name": "espresso",
            "price": 2.5,
            "description": "double shot",
        }

    @patch("pos_backend.products.router.create_product")
    def test_ok(self, mock_create):
        mock_create.return_value = self.product

        resp = self.client.post("/users/alice/products", json=self.body(), headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["id"], str(self.product.id))
        self.assertEqual(body["user_id"], str(self.user_id))
        self.assertEqual(Decimal(body["price"]), Decimal("2.50"))

        mock_create.assert_called_once_with(
            self.session, self.user_id, "espresso", Decimal("2.5"), "double shot"
        )

    @patch("pos_backend.products.router.create_product")
    def test_token_for_another_user(self, mock_create):
        resp = self.client.post("/users/alice/products", json=self.body(), headers=self.auth_headers("bob"))
        self.assertEqual(resp.status_code, 401)
        mock_create.assert_not_called()

    @patch("pos_backend.products.router.create_product")
    def test_body_names_another_user(self, mock_create):
        resp = self.client.post("/users/alice/products", json=self.body("bob"), headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 401)
        mock_create.assert_not_called()

    @patch("pos_backend.products.router.create_product")
    def test_body_names_another_account(self, mock_create):
        body = self.body()
        body["user_id"] = str(uuid4())
        resp = self.client.post("/users/alice/products", json=body, headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "unauthorized user"})
        mock_create.assert_not_called()

    @patch("pos_backend.products.router.create_product")
    def test_token_without_account(self, mock_create):
        resp = self.client.post("/users/alice/products", json=self.body(), headers=self.auth_headers("alice"))
        self.assertEqual(resp.status_code, 401)
        mock_create.assert_not_called()

    @patch("pos_backend.products.router.create_product")
    def test_no_authorization(self, mock_create):
        resp = self.client.post("/users/alice/products", json=self.body())
        self.assertEqual(resp.status_code, 401)
        mock_create.assert_not_called()

    @patch("pos_backend.products.router.create_product")
    def test_negative_price(self, mock_create):
        body = self.body()
        body["price"] = -1
        resp = self.client.post("/users/alice/products", json=body, headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 400)
        mock_create.assert_not_called()

    @patch("pos_backend.products.router.create_product")
    def test_internal_error(self, mock_create):
        mock_create.side_effect = StoreError("connection refused")

        resp = self.client.post("/users/alice/products", json=self.body(), headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 500)


class TestListProducts(ProductsTestCase):

    @patch("pos_backend.products.router.get_all_products")
    def test_ok(self, mock_list):
        mock_list.return_value = [self.product, random_product(self.user_id)]

        resp = self.client.get("/users/alice/products", headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()), 2)
        mock_list.assert_called_once_with(self.session, "alice", name=None)

    @patch("pos_backend.products.router.get_all_products")
    def test_filter_by_name(self, mock_list):
        mock_list.return_value = [self.product]

        resp = self.client.get("/users/alice/products?name=espresso", headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 200)
        mock_list.assert_called_once_with(self.session, "alice", name="espresso")

    @patch("pos_backend.products.router.get_all_products")
    def test_other_user(self, mock_list):
        resp = self.client.get("/users/alice/products", headers=self.auth_headers("bob"))
        self.assertEqual(resp.status_code, 401)
        mock_list.assert_not_called()


class TestUpdateProduct(ProductsTestCase):

    def body(self):
        return {"user_id": str(self.user_id), "name": "latte", "price": 3}

    @patch("pos_backend.products.router.update_product")
    def test_ok(self, mock_update):
        self.product.name = "latte"
        mock_update.return_value = self.product

        url = f"/users/alice/products/{self.product.id}"
        resp = self.client.patch(url, json=self.body(), headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["name"], "latte")
        mock_update.assert_called_once_with(
            self.session, self.user_id, self.product.id, "latte", Decimal("3"), None
        )

    @patch("pos_backend.products.router.update_product")
    def test_not_found(self, mock_update):
        mock_update.side_effect = RecordNotFoundError("no rows in result set")

        url = f"/users/alice/products/{self.product.id}"
        resp = self.client.patch(url, json=self.body(), headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 404)

    @patch("pos_backend.products.router.update_product")
    def test_other_user(self, mock_update):
        url = f"/users/alice/products/{self.product.id}"
        resp = self.client.patch(url, json=self.body(), headers=self.auth_headers("bob"))
        self.assertEqual(resp.status_code, 401)
        mock_update.assert_not_called()

    @patch("pos_backend.products.router.update_product")
    def test_body_names_another_account(self, mock_update):
        body = self.body()
        body["user_id"] = str(uuid4())

        url = f"/users/alice/products/{self.product.id}"
        resp = self.client.patch(url, json=body, headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 401)
        mock_update.assert_not_called()

    @patch("pos_backend.products.router.update_product")
    def test_invalid_product_id(self, mock_update):
        resp = self.client.patch("/users/alice/products/not-a-uuid", json=self.body(), headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 400)
        mock_update.assert_not_called()


class TestDeleteProduct(ProductsTestCase):

    @patch("pos_backend.products.router.delete_product")
    def test_ok(self, mock_delete):
        url = f"/users/alice/products/{self.product.id}"
        resp = self.client.request("DELETE", url, json={"user_id": str(self.user_id)}, headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"respond": "delete successfully"})
        mock_delete.assert_called_once_with(self.session, self.user_id, self.product.id)

    @patch("pos_backend.products.router.delete_product")
    def test_other_user(self, mock_delete):
        url = f"/users/alice/products/{self.product.id}"
        resp = self.client.request("DELETE", url, json={"user_id": str(self.user_id)}, headers=self.auth_headers("bob"))
        self.assertEqual(resp.status_code, 401)
        mock_delete.assert_not_called()

    @patch("pos_backend.products.router.delete_product")
    def test_body_names_another_account(self, mock_delete):
        url = f"/users/alice/products/{self.product.id}"
        resp = self.client.request("DELETE", url, json={"user_id": str(uuid4())}, headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 401)
        mock_delete.assert_not_called()

    @patch("pos_backend.products.router.delete_product")
    def test_not_found(self, mock_delete):
        mock_delete.side_effect = RecordNotFoundError("no rows in result set")

        url = f"/users/alice/products/{self.product.id}"
        resp = self.client.request("DELETE", url, json={"user_id": str(self.user_id)}, headers=self.auth_headers("alice", user_id=self.user_id))
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()

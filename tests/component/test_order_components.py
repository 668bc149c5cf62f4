"""
Component tests for checkout and order tracking

Covers the order placement flow (cart snapshot -> order + items,
stock decrement, cart clearing), order queries with ownership rules,
and the admin-driven status lifecycle.
"""
from decimal import Decimal
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.data.models.order_item import OrderItemModel
from app.services.notification_service import NotificationService


@pytest.fixture
def filled_cart(test_client: TestClient, customer, products, auth):
    """lamp x1 + mug x2 at 40.00 each -> 120.00"""
    test_client.post(
        "/api/cart",
        json={"product_id": products["lamp"].id, "quantity": 1},
        headers=auth(customer),
    )
    test_client.post(
        "/api/cart",
        json={"product_id": products["mug"].id, "quantity": 2},
        headers=auth(customer),
    )


class TestPlaceOrder:

    def test_order_total_and_items_match_cart(self, test_client: TestClient, customer, filled_cart, auth, db):
        response = test_client.post("/api/orders", headers=auth(customer))

        assert response.status_code == 201
        order = response.json()
        assert order["user_id"] == customer.id
        assert order["status"] == "PROCESSING"
        assert Decimal(order["total"]) == Decimal("120.00")
        assert len(order["items"]) == 2

        line_sum = sum(Decimal(i["price"]) * i["quantity"] for i in order["items"])
        assert line_sum == Decimal(order["total"])

        stored = db.query(OrderItemModel).filter(OrderItemModel.order_id == order["id"]).count()
        assert stored == 2

    def test_stock_is_decremented(self, test_client: TestClient, customer, products, filled_cart, auth, db):
        test_client.post("/api/orders", headers=auth(customer))

        db.refresh(products["lamp"])
        db.refresh(products["mug"])
        assert products["lamp"].stock == 9
        assert products["mug"].stock == 3

    def test_stock_decrement_is_floored_at_zero(self, test_client: TestClient, customer, admin, products, auth, db):
        test_client.post(
            "/api/cart",
            json={"product_id": products["speaker"].id, "quantity": 3},
            headers=auth(customer),
        )
        # admin lowers stock after the item was added
        test_client.put(
            f"/api/products/{products['speaker'].id}",
            json={"stock": 1},
            headers=auth(admin),
        )

        response = test_client.post("/api/orders", headers=auth(customer))

        assert response.status_code == 201
        db.refresh(products["speaker"])
        assert products["speaker"].stock == 0

    def test_cart_is_empty_after_order(self, test_client: TestClient, customer, filled_cart, auth):
        test_client.post("/api/orders", headers=auth(customer))

        cart = test_client.get("/api/cart", headers=auth(customer)).json()
        assert cart["items"] == []
        assert Decimal(cart["total"]) == Decimal("0")

    def test_empty_cart_cannot_be_ordered(self, test_client: TestClient, customer, auth):
        response = test_client.post("/api/orders", headers=auth(customer))

        assert response.status_code == 400
        assert response.json()["detail"] == "Cart is empty"

    def test_second_checkout_with_emptied_cart_fails(self, test_client: TestClient, customer, filled_cart, auth):
        assert test_client.post("/api/orders", headers=auth(customer)).status_code == 201
        assert test_client.post("/api/orders", headers=auth(customer)).status_code == 400

    def test_item_price_is_frozen_at_order_time(self, test_client: TestClient, customer, admin, products, filled_cart, auth):
        order = test_client.post("/api/orders", headers=auth(customer)).json()

        test_client.put(
            f"/api/products/{products['lamp'].id}",
            json={"price": "99.00"},
            headers=auth(admin),
        )

        fetched = test_client.get(f"/api/orders/{order['id']}", headers=auth(customer)).json()
        lamp_line = next(i for i in fetched["items"] if i["product_id"] == products["lamp"].id)
        assert Decimal(lamp_line["price"]) == Decimal("40.00")
        assert Decimal(fetched["total"]) == Decimal("120.00")

    def test_notification_is_enqueued(self, test_client: TestClient, customer, filled_cart, auth):
        with patch.object(NotificationService, "send_order_notification") as mock_delay:
            order = test_client.post("/api/orders", headers=auth(customer)).json()

        mock_delay.assert_called_once_with(customer.id, order["id"])


class TestOrderQueries:

    def test_customer_sees_only_own_orders(
        self, test_client: TestClient, customer, other_customer, products, filled_cart, auth
    ):
        test_client.post("/api/orders", headers=auth(customer))
        test_client.post(
            "/api/cart",
            json={"product_id": products["speaker"].id, "quantity": 1},
            headers=auth(other_customer),
        )
        test_client.post("/api/orders", headers=auth(other_customer))

        mine = test_client.get("/api/orders", headers=auth(customer)).json()
        assert len(mine) == 1
        assert mine[0]["user_id"] == customer.id

    def test_admin_sees_all_orders(
        self, test_client: TestClient, customer, other_customer, admin, products, filled_cart, auth
    ):
        test_client.post("/api/orders", headers=auth(customer))
        test_client.post(
            "/api/cart",
            json={"product_id": products["speaker"].id, "quantity": 1},
            headers=auth(other_customer),
        )
        test_client.post("/api/orders", headers=auth(other_customer))

        orders = test_client.get("/api/orders", headers=auth(admin)).json()
        assert {o["user_id"] for o in orders} == {customer.id, other_customer.id}

    def test_get_foreign_order_is_forbidden(
        self, test_client: TestClient, customer, other_customer, filled_cart, auth
    ):
        order = test_client.post("/api/orders", headers=auth(customer)).json()

        response = test_client.get(f"/api/orders/{order['id']}", headers=auth(other_customer))

        assert response.status_code == 403

    def test_get_missing_order_returns_404(self, test_client: TestClient, customer, auth):
        response = test_client.get("/api/orders/999", headers=auth(customer))

        assert response.status_code == 404


class TestOrderStatus:

    def test_admin_moves_order_through_lifecycle(
        self, test_client: TestClient, customer, admin, filled_cart, auth
    ):
        order = test_client.post("/api/orders", headers=auth(customer)).json()

        for status in ("SHIPPED", "DELIVERED"):
            response = test_client.patch(
                f"/api/orders/{order['id']}/status",
                json={"status": status},
                headers=auth(admin),
            )
            assert response.status_code == 200
            assert response.json()["status"] == status

    def test_status_change_is_unconditional(
        self, test_client: TestClient, customer, admin, filled_cart, auth
    ):
        order = test_client.post("/api/orders", headers=auth(customer)).json()
        test_client.patch(
            f"/api/orders/{order['id']}/status", json={"status": "DELIVERED"}, headers=auth(admin)
        )

        response = test_client.patch(
            f"/api/orders/{order['id']}/status", json={"status": "PROCESSING"}, headers=auth(admin)
        )

        assert response.status_code == 200
        assert response.json()["status"] == "PROCESSING"

    def test_put_is_accepted_for_status(self, test_client: TestClient, customer, admin, filled_cart, auth):
        order = test_client.post("/api/orders", headers=auth(customer)).json()

        response = test_client.put(
            f"/api/orders/{order['id']}/status", json={"status": "CANCELLED"}, headers=auth(admin)
        )

        assert response.status_code == 200
        assert response.json()["status"] == "CANCELLED"

    def test_unknown_status_is_rejected(self, test_client: TestClient, customer, admin, filled_cart, auth):
        order = test_client.post("/api/orders", headers=auth(customer)).json()

        response = test_client.patch(
            f"/api/orders/{order['id']}/status", json={"status": "LOST"}, headers=auth(admin)
        )

        assert response.status_code == 400

    def test_customer_cannot_change_status(self, test_client: TestClient, customer, filled_cart, auth):
        order = test_client.post("/api/orders", headers=auth(customer)).json()

        response = test_client.patch(
            f"/api/orders/{order['id']}/status", json={"status": "SHIPPED"}, headers=auth(customer)
        )

        assert response.status_code == 403

    def test_status_of_missing_order_returns_404(self, test_client: TestClient, admin, auth):
        response = test_client.patch(
            "/api/orders/555/status", json={"status": "SHIPPED"}, headers=auth(admin)
        )

        assert response.status_code == 404

import json
from http import HTTPStatus

import httpx

from schemas import ActionSuccess, CartItemRequest
from tests.base import BaseTestCase
from tests.factories import CartFactory, CartItemFactory
from usecases import CartUsecase


def cart_response(cart, status_code: int = HTTPStatus.OK) -> httpx.Response:
    return httpx.Response(status_code, json=cart.model_dump(mode="json"))


class TestGetCart(BaseTestCase):
    url = "/api/cart"

    def test_ok(self) -> None:
        cart = CartFactory.build(
            items=[
                CartItemFactory.build(quantity=2, unit_price=10.25),
                CartItemFactory.build(quantity=1, unit_price=4.0),
            ]
        )
        self.api_mock.get(self.url).mock(return_value=cart_response(cart))

        result = CartUsecase(client=self.client).get_cart()

        assert result == ActionSuccess(data=cart)
        assert result.data.subtotal == 24.5
        assert result.data.item_count == 3

    def test_empty(self) -> None:
        self.api_mock.get(self.url).mock(
            return_value=httpx.Response(HTTPStatus.OK, json={"items": []})
        )

        result = CartUsecase(client=self.client).get_cart()

        assert result.data.items == []
        assert result.data.subtotal == 0


class TestAddItem(BaseTestCase):
    url = "/api/cart/items"

    def test_ok(self) -> None:
        cart = CartFactory.build()
        route = self.api_mock.post(self.url).mock(
            return_value=cart_response(cart, HTTPStatus.CREATED)
        )

        result = CartUsecase(client=self.client).add_item(
            CartItemRequest(menu_item_id=5, protein="paneer", quantity=2)
        )

        assert result == ActionSuccess(data=cart)
        assert json.loads(route.calls.last.request.content) == {
            "menu_item_id": 5,
            "protein": "paneer",
            "quantity": 2,
        }


class TestUpdateItem(BaseTestCase):
    def test_ok(self) -> None:
        cart = CartFactory.build()
        route = self.api_mock.patch("/api/cart/items/3").mock(
            return_value=cart_response(cart)
        )

        result = CartUsecase(client=self.client).update_item(item_id=3, quantity=4)

        assert result.success is True
        assert json.loads(route.calls.last.request.content) == {"quantity": 4}


class TestRemoveItem(BaseTestCase):
    def test_ok(self) -> None:
        cart = CartFactory.build(items=[CartItemFactory.build()])
        route = self.api_mock.delete("/api/cart/items/3").mock(
            return_value=cart_response(cart)
        )
        self.api_mock.get("/api/cart").mock(return_value=cart_response(cart))

        result = CartUsecase(client=self.client).remove_item(item_id=3)

        assert result == ActionSuccess(data=cart)
        assert route.call_count == 1

    def test_no_content(self) -> None:
        cart = CartFactory.build(items=[])
        self.api_mock.delete("/api/cart/items/3").mock(
            return_value=httpx.Response(HTTPStatus.NO_CONTENT)
        )
        cart_route = self.api_mock.get("/api/cart").mock(
            return_value=cart_response(cart)
        )

        result = CartUsecase(client=self.client).remove_item(item_id=3)

        assert result == ActionSuccess(data=cart)
        assert cart_route.call_count == 1

    def test_not_found(self) -> None:
        self.api_mock.delete("/api/cart/items/3").mock(
            return_value=httpx.Response(
                HTTPStatus.NOT_FOUND, json={"detail": "Cart item not found"}
            )
        )
        cart_route = self.api_mock.get("/api/cart")

        result = CartUsecase(client=self.client).remove_item(item_id=3)

        assert result.success is False
        assert result.error == "Cart item not found"
        assert cart_route.call_count == 0


class TestClearCart(BaseTestCase):
    def test_ok(self) -> None:
        self.api_mock.delete("/api/cart").mock(
            return_value=httpx.Response(HTTPStatus.NO_CONTENT)
        )

        result = CartUsecase(client=self.client).clear_cart()

        assert result == ActionSuccess(data=None)

    def test_reauthentication_failed(self) -> None:
        self.mock_token(status_code=HTTPStatus.FORBIDDEN)
        self.api_mock.delete("/api/cart").mock(
            return_value=httpx.Response(HTTPStatus.UNAUTHORIZED)
        )

        result = CartUsecase(client=self.client).clear_cart()

        assert result.success is False
        assert result.error == "Authentication failed"

from schemas import (
    ActionResult,
    Cart,
    CartItemRequest,
    CartItemUpdateRequest,
)
from usecases.base import BaseUsecase, run_action, run_command


class CartUsecase(BaseUsecase):
    def get_cart(self) -> ActionResult[Cart]:
        return run_action(request=lambda: self._client.get("/api/cart"), schema=Cart)

    def add_item(self, data: CartItemRequest) -> ActionResult[Cart]:
        """Add an item to the cart.

        Args:
            data: The item to add.

        Returns:
            The updated cart.

        """
        return run_action(
            request=lambda: self._client.post(
                "/api/cart/items", json=data.model_dump(mode="json")
            ),
            schema=Cart,
        )

    def update_item(self, item_id: int, quantity: int) -> ActionResult[Cart]:
        """Change the quantity of a cart item.

        Args:
            item_id: The cart item id.
            quantity: The new quantity.

        Returns:
            The updated cart.

        """
        payload = CartItemUpdateRequest(quantity=quantity).model_dump(mode="json")
        return run_action(
            request=lambda: self._client.patch(
                f"/api/cart/items/{item_id}", json=payload
            ),
            schema=Cart,
        )

    def remove_item(self, item_id: int) -> ActionResult[Cart]:
        """Remove an item from the cart.

        The delete response body is ignored; the cart is fetched again so an
        empty answer such as 204 still yields the updated cart.

        Args:
            item_id: The cart item id.

        Returns:
            The updated cart.

        """
        result = run_command(
            request=lambda: self._client.delete(f"/api/cart/items/{item_id}")
        )
        if not result.success:
            return result
        return self.get_cart()

    def clear_cart(self) -> ActionResult[None]:
        return run_command(request=lambda: self._client.delete("/api/cart"))

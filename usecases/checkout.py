from schemas import ActionResult, CheckoutRequest, Order
from usecases.base import BaseUsecase, run_action


class CheckoutUsecase(BaseUsecase):
    def checkout(self, data: CheckoutRequest) -> ActionResult[Order]:
        """Place an order for the current cart.

        Args:
            data: Customer and fulfilment details.

        Returns:
            The created order.

        """
        return run_action(
            request=lambda: self._client.post(
                "/api/checkout", json=data.model_dump(mode="json")
            ),
            schema=Order,
        )

    def get_order(self, order_id: int) -> ActionResult[Order]:
        return run_action(
            request=lambda: self._client.get(f"/api/orders/{order_id}"), schema=Order
        )

from datetime import datetime

import factory

from enums import OrderStatus, OrderType
from schemas import Cart, CartItem, Order
from tests.factories.base import fake


class CartItemFactory(factory.Factory):
    class Meta:
        model = CartItem

    id = factory.Sequence(lambda n: n + 1)
    menu_item_id = factory.Sequence(lambda n: n + 100)
    name = factory.LazyFunction(lambda: fake.word())
    protein = "chicken"
    quantity = 1
    unit_price = 12.5


class CartFactory(factory.Factory):
    class Meta:
        model = Cart

    items = factory.List([factory.SubFactory(CartItemFactory) for _ in range(2)])


class OrderFactory(factory.Factory):
    class Meta:
        model = Order

    id = factory.Sequence(lambda n: n + 1)
    status = OrderStatus.PENDING
    order_type = OrderType.PICKUP
    items = factory.List([factory.SubFactory(CartItemFactory)])
    total = factory.LazyAttribute(lambda o: sum(item.line_total for item in o.items))
    created_at = factory.LazyFunction(datetime.now)

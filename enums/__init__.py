from enums.error import ErrorCode
from enums.order import OrderStatus, OrderType
from enums.rating import StarFill

__all__ = ["ErrorCode", "OrderStatus", "OrderType", "StarFill"]

from enum import StrEnum, auto


class OrderType(StrEnum):
    PICKUP = auto()
    DELIVERY = auto()


class OrderStatus(StrEnum):
    PENDING = auto()
    CONFIRMED = auto()
    PREPARING = auto()
    READY = auto()
    COMPLETED = auto()
    CANCELLED = auto()

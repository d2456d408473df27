from usecases.base import run_action, run_command
from usecases.cart import CartUsecase
from usecases.checkout import CheckoutUsecase
from usecases.menu import MenuUsecase

__all__ = [
    "CartUsecase",
    "CheckoutUsecase",
    "MenuUsecase",
    "run_action",
    "run_command",
]

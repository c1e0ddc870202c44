"""
API routers for the car marketplace.
"""

from .home import router as home_router
from .cars import router as cars_router
from .inquiries import router as inquiries_router
from .sell import router as sell_router

__all__ = ["home_router", "cars_router", "inquiries_router", "sell_router"]

"""
Router package for the workout diary.

This package contains all API routers organized by domain:
- health: Health check endpoint
- account: Registration, login/logout, session and profile
- entries: Daily workout entries and week summary
- transfer: Export, import and reset of the whole document
"""

from api.routers.account import router as account_router
from api.routers.entries import router as entries_router
from api.routers.health import router as health_router
from api.routers.transfer import router as transfer_router

__all__ = [
    "account_router",
    "entries_router",
    "health_router",
    "transfer_router",
]

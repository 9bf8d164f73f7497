"""
HTTP Routers
One router per resource; ``app.main`` mounts them all.
"""

from app.routers import auth, carts, menu, payments, reviews, stats, users

all_routers = [
    auth.router,
    users.router,
    menu.router,
    reviews.router,
    carts.router,
    payments.router,
    stats.router,
]

__all__ = ["all_routers"]

from fastapi import APIRouter

from routers import restaurant, root

ROUTERS: list[APIRouter] = [root.router, restaurant.router]

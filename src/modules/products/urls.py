"""Product URL configuration, one router per API version."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductPageViewSet, ProductViewSet

v1_router = SimpleRouter(trailing_slash=False)
v1_router.register("products", ProductViewSet, basename="product-v1")

v2_router = SimpleRouter(trailing_slash=False)
v2_router.register("products", ProductPageViewSet, basename="product-v2")

"""Product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductsDefaultView

urlpatterns = [
    path("products", ProductsDefaultView.as_view(), name="products"),
]

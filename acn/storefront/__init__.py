"""Storefront front-end support: static files, SPA fallback, header menu."""

from .router import router as storefront_router  # noqa: F401

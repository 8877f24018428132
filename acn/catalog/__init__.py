"""
Catalog package for the pet product storefront.

This package exposes the REST API the storefront pages use to browse
the product catalog: listing with category and text filters, sorting
and pagination, single product lookup, brand listing and price range
queries. The catalog itself is a read-only snapshot loaded from
``acn/data/products.json`` when the package is first imported.
"""

from .router import router as catalog_router  # noqa: F401

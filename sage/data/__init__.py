"""
Sage static data.

Product catalogs and the hardcoded research papers. Everything here is
defined at import time and read-only.
"""

from sage.data.catalog import (
    CATALOGS,
    HEMP_PRODUCTS,
    PREMO_PRODUCTS,
    get_catalog,
)

from sage.data.papers import ALL_PAPERS, BASE_PAPERS

__all__ = [
    "CATALOGS",
    "HEMP_PRODUCTS",
    "PREMO_PRODUCTS",
    "get_catalog",
    "ALL_PAPERS",
    "BASE_PAPERS",
]

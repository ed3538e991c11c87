"""Loaders that deliver parsed documents to the controller."""

from .loader import LoadError, load_document, normalize_page_url
from .site import SitePage, build_site_models_url, fetch_site_pages

__all__ = [
    "LoadError",
    "SitePage",
    "build_site_models_url",
    "fetch_site_pages",
    "load_document",
    "normalize_page_url",
]

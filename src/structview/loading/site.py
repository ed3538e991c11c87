"""
Site page discovery.

A published site dumps its models when asked with ``dumpSiteModels=true``;
the page list inside points at one JSON document per page, each of which
can be opened in the viewer.
"""

import json
import logging
from typing import Any, List, Optional
from urllib import parse

from pydantic import BaseModel

from ..config import ViewerSettings
from .loader import LoadError, fetch_url

logger = logging.getLogger(__name__)

DUMP_PARAM = "dumpSiteModels"
PAGES_BASE_URL = "https://pages.parastorage.com/sites/"


class SitePage(BaseModel):
    """One page entry of a site's page list."""
    title: str
    page_id: str = ""
    json_url: str = ""


def build_site_models_url(site_url: str) -> str:
    """Drop any fragment and make sure ``dumpSiteModels=true`` is set."""
    base = site_url.strip()
    try:
        parts = parse.urlsplit(base)
    except ValueError:
        parts = None
    if parts is None or not parts.scheme:
        separator = "&" if "?" in base else "?"
        return f"{base}{separator}{DUMP_PARAM}=true"

    query = parse.parse_qsl(parts.query, keep_blank_values=True)
    if not any(key == DUMP_PARAM and value for key, value in query):
        query = [(k, v) for k, v in query if k != DUMP_PARAM]
        query.append((DUMP_PARAM, "true"))
    return parse.urlunsplit((parts.scheme, parts.netloc, parts.path, parse.urlencode(query), ""))


def pages_from_site_models(site_models: Any) -> List[SitePage]:
    """Extract ``rendererModel.pageList.pages``; anything malformed yields no pages."""
    try:
        raw_pages = site_models["rendererModel"]["pageList"]["pages"]
    except (KeyError, TypeError):
        return []
    if not isinstance(raw_pages, list):
        return []

    pages = []
    for raw in raw_pages:
        if not isinstance(raw, dict):
            continue
        file_name = raw.get("pageJsonFileName") or ""
        pages.append(
            SitePage(
                title=str(raw.get("title") or "(untitled)"),
                page_id=str(raw.get("pageId") or ""),
                json_url=f"{PAGES_BASE_URL}{file_name}" if file_name else "",
            )
        )
    return pages


def fetch_site_pages(site_url: str, settings: Optional[ViewerSettings] = None) -> List[SitePage]:
    """
    Fetch a site's models and list its pages.

    Raises:
        LoadError: If the site cannot be fetched or does not answer with JSON.
    """
    if not site_url.strip():
        raise LoadError(site_url, "Enter a valid site URL")
    url = build_site_models_url(site_url)
    body = fetch_url(url, settings)
    try:
        site_models = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LoadError(url, "Site did not return JSON models") from e
    pages = pages_from_site_models(site_models)
    logger.info(f"Found {len(pages)} pages at {site_url}")
    return pages

"""
Document Loader.

Delivers a fully parsed document to the controller, from either a local JSON
file or an ``http(s)`` URL. Every failure surfaces as a ``LoadError`` whose
message is fit for a status line.
"""

import json
import logging
import zlib
from pathlib import Path
from typing import Any, Dict, Optional
from urllib import error, parse, request

from ..config import DEFAULT_HEADERS, ViewerSettings

logger = logging.getLogger(__name__)

PAGES_HOST_SUFFIX = "pages.parastorage.com"
COMPRESSED_SUFFIX = ".json.z"
PAGE_FORMAT_VERSION = "3"


class LoadError(Exception):
    """
    Raised when a document cannot be read or decoded.

    Attributes:
        source: The path or URL that failed.
        message: Human-readable reason.
    """

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


def is_url(source: str) -> bool:
    return parse.urlsplit(source).scheme in ("http", "https")


def normalize_page_url(url: str) -> str:
    """
    Point page JSON URLs on the pages CDN at the compressed v3 variant.

    Any other URL, or anything that does not parse, is returned unchanged.
    """
    try:
        parts = parse.urlsplit(url)
    except ValueError:
        return url
    if not (parts.hostname or "").endswith(PAGES_HOST_SUFFIX) or not parts.path.startswith("/sites/"):
        return url

    path = parts.path
    if path.endswith(".json"):
        path = path[: -len(".json")] + COMPRESSED_SUFFIX
    elif not path.endswith(COMPRESSED_SUFFIX):
        path = path + COMPRESSED_SUFFIX

    query = dict(parse.parse_qsl(parts.query, keep_blank_values=True))
    query["v"] = PAGE_FORMAT_VERSION
    return parse.urlunsplit((parts.scheme, parts.netloc, path, parse.urlencode(query), parts.fragment))


def build_headers(url: str, settings: ViewerSettings) -> Dict[str, str]:
    """Browser-like headers, with Origin/Referer pointing at the target itself."""
    parts = parse.urlsplit(url)
    origin = f"{parts.scheme}://{parts.netloc}"
    return {
        **DEFAULT_HEADERS,
        "User-Agent": settings.user_agent,
        "Origin": origin,
        "Referer": f"{origin}/",
    }


def _inflate(body: bytes, wbits: int, limit: int) -> bytes:
    # At most limit + 1 bytes come out, enough to tell an oversized body
    return zlib.decompressobj(wbits).decompress(body, limit + 1)


def _decode_body(body: bytes, encoding: Optional[str], limit: int) -> bytes:
    encoding = (encoding or "").lower()
    if encoding == "gzip":
        return _inflate(body, 16 + zlib.MAX_WBITS, limit)
    if encoding == "deflate":
        try:
            return _inflate(body, zlib.MAX_WBITS, limit)
        except zlib.error:
            return _inflate(body, -zlib.MAX_WBITS, limit)
    return body


def _parse_json(raw: bytes, source: str) -> Any:
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LoadError(source, f"Invalid JSON ({e})") from e


def fetch_url(url: str, settings: Optional[ViewerSettings] = None) -> bytes:
    """GET ``url`` and return the decoded body bytes."""
    settings = settings or ViewerSettings()
    req = request.Request(url, headers=build_headers(url, settings))
    logger.info(f"Fetching {url}")
    try:
        with request.urlopen(req, timeout=settings.fetch_timeout) as resp:
            body = resp.read(settings.max_document_bytes + 1)
            content_encoding = resp.headers.get("Content-Encoding")
    except error.HTTPError as e:
        logger.warning(f"Upstream error {e.code} for {url}")
        raise LoadError(url, f"Upstream error {e.code}") from e
    except (error.URLError, OSError) as e:
        reason = getattr(e, "reason", e)
        raise LoadError(url, f"Failed to fetch ({reason})") from e

    limit = settings.max_document_bytes
    if len(body) > limit:
        raise LoadError(url, f"Document exceeds {limit} bytes")
    try:
        decoded = _decode_body(body, content_encoding, limit)
    except zlib.error as e:
        raise LoadError(url, f"Undecodable {content_encoding} body") from e
    if len(decoded) > limit:
        raise LoadError(url, f"Decoded document exceeds {limit} bytes")
    return decoded


def read_file(path: Path, settings: Optional[ViewerSettings] = None) -> bytes:
    settings = settings or ViewerSettings()
    if not path.exists():
        raise LoadError(str(path), "File not found")
    if path.is_dir():
        raise LoadError(str(path), "Is a directory")
    if path.stat().st_size > settings.max_document_bytes:
        raise LoadError(str(path), f"Document exceeds {settings.max_document_bytes} bytes")
    try:
        return path.read_bytes()
    except OSError as e:
        raise LoadError(str(path), "Failed to read file") from e


def load_document(source: str, settings: Optional[ViewerSettings] = None) -> Any:
    """
    Load and parse a document from a file path or URL.

    Page URLs on the pages CDN are normalized first.

    Raises:
        LoadError: On any I/O, HTTP or JSON failure.
    """
    if is_url(source):
        url = normalize_page_url(source)
        if url != source:
            logger.debug(f"Normalized page URL {source} -> {url}")
        return _parse_json(fetch_url(url, settings), url)
    return _parse_json(read_file(Path(source), settings), source)

"""Download rustdoc JSON from docs.rs or any server hosting it."""

import io
import json
import logging

import httpx
import zstandard

from crates_llms_txt.errors import FetchError
from crates_llms_txt.item_graph import ItemGraph
from crates_llms_txt.load_rustdoc_json import (
    DEFAULT_CRATE_VERSION,
    load_rustdoc_json,
)

logger = logging.getLogger(__name__)

DOCS_RS_CRATE_URL = "https://docs.rs/crate"
DEFAULT_TIMEOUT = 30.0
ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"


def crate_json_url(
    crate_name: str,
    version: str | None = None,
    *,
    crate_api_url: str = DOCS_RS_CRATE_URL,
) -> str:
    """Return the docs.rs JSON endpoint of a crate version."""
    version = version or DEFAULT_CRATE_VERSION
    return f"{crate_api_url.rstrip('/')}/{crate_name}/{version}/json"


def fetch_docs(
    crate_name: str,
    version: str | None = None,
    *,
    crate_api_url: str = DOCS_RS_CRATE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> ItemGraph:
    """Fetch the item graph of a published crate version.

    The requested version is echoed in the result unless it is missing, in
    which case the version recorded in the JSON is used.
    """
    url = crate_json_url(crate_name, version, crate_api_url=crate_api_url)
    doc = fetch_json(url, timeout=timeout)
    return load_rustdoc_json(doc, crate_name=crate_name, crate_version=version)


def fetch_docs_by_url(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> ItemGraph:
    """Fetch an item graph from a direct JSON URL.

    The crate is named after its root module.
    """
    return load_rustdoc_json(fetch_json(url, timeout=timeout))


def fetch_json(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> object:
    """Download a JSON document, decompressing zstd payloads."""
    logger.info("Fetching %s", url)
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(url)
            response.raise_for_status()
    except httpx.HTTPError as e:
        msg = f"Failed to fetch {url}: {e}"
        raise FetchError(msg) from e

    body = decompress_if_needed(response.content)
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"Response from {url} is not valid JSON: {e}"
        raise FetchError(msg) from e


def decompress_if_needed(body: bytes) -> bytes:
    """Return the raw JSON bytes of a response body.

    docs.rs serves zstd-compressed JSON whether or not it declares the
    encoding. Bodies already decoded by the HTTP client are passed through.
    """
    if not body.startswith(ZSTD_MAGIC):
        return body
    try:
        dctx = zstandard.ZstdDecompressor()
        with dctx.stream_reader(io.BytesIO(body), read_across_frames=True) as reader:
            return reader.read()
    except zstandard.ZstdError as e:
        msg = f"Cannot decompress zstd payload: {e}"
        raise FetchError(msg) from e

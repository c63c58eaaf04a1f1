"""
Loading GeoJSON documents from files, bytes and URLs.

These helpers only acquire the text; decoding is done by geojson_codec.loads.
I/O and HTTP errors are raised to the caller.
"""

import logging
from pathlib import Path

import requests

from geojson_codec.config import CodecConfig
from geojson_codec.geojson import GeoJSON, loads

logger = logging.getLogger(__name__)


def read_source(source: str | Path | bytes) -> bytes:
    """
    Read raw document bytes.

    Args:
        source: File path, or the document itself as bytes.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    if isinstance(source, bytes):
        return source

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {source}")
    return path.read_bytes()


def fetch(url: str, config: CodecConfig | None = None) -> bytes:
    """
    Download a document over HTTP.

    Args:
        url: URL of the GeoJSON document.
        config: Codec configuration (for the request timeout).

    Raises:
        requests.HTTPError: If the server answers with an error status.
    """
    config = config or CodecConfig()
    logger.info("Fetching GeoJSON from %s", url)
    response = requests.get(url, timeout=config.fetch_timeout)
    response.raise_for_status()
    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return response.content


def load(source: str | Path | bytes) -> GeoJSON:
    """Read and decode a GeoJSON file. Decoding problems are attached to the result."""
    return loads(read_source(source))


def load_url(url: str, config: CodecConfig | None = None) -> GeoJSON:
    """Fetch and decode a GeoJSON document. Decoding problems are attached to the result."""
    return loads(fetch(url, config))

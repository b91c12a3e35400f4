import logging
import os
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

import requests
import streamlit as st
import yaml

from constants import (
    DATA_REVISION_ENV,
    DATA_SOURCE_ENV,
    DEFAULT_DATA_SOURCE,
    DEV_REVISION,
    DISTRIBUTION_NAME,
    FETCH_TIMEOUT,
)

logger = logging.getLogger(__name__)


class DatasetLoadError(RuntimeError):
    """The adventure dataset could not be read or parsed."""


def is_remote(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def default_revision() -> str:
    """Revision used as cache buster when none is configured: the installed version."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return DEV_REVISION


def with_cache_buster(url: str, revision: Optional[str]) -> str:
    """
    Append v=<revision> to the URL so stale CDN copies are skipped.

    Existing query parameters are kept; an existing `v` is replaced.
    """
    if not revision:
        return url
    parts = urlparse(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != "v"]
    query.append(("v", str(revision)))
    return urlunparse(parts._replace(query=urlencode(query)))


def read_dataset_text(source: str, revision: Optional[str] = None, timeout=FETCH_TIMEOUT) -> str:
    """
    Read the raw YAML text from a local path or an http(s) URL.

    Args:
        source (str): file path or URL
        revision (str): build revision used as cache buster for URLs
        timeout: requests timeout (connect, read)

    Returns:
        str: YAML document text

    Raises:
        DatasetLoadError: file missing, network failure or non-2xx response
    """
    if is_remote(source):
        url = with_cache_buster(source, revision)
        try:
            r = requests.get(url, timeout=timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise DatasetLoadError(f"Failed to fetch YAML from {url}: {e}") from e
        r.encoding = r.encoding or "utf-8"
        return r.text

    try:
        with open(source, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise DatasetLoadError(f"Failed to read YAML from {source}: {e}") from e


def parse_dataset(text: str) -> Dict[str, Any]:
    """Parse the YAML document; an empty document is an empty dataset."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DatasetLoadError(f"Failed to parse YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DatasetLoadError(f"Dataset root must be a mapping, got {type(data).__name__}")
    return data


def load_dataset(source: Optional[str] = None, revision: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the adventure dataset.

    Source and revision default to $ADVENTURE_DATA_SOURCE / $ADVENTURE_DATA_REVISION,
    falling back to the bundled data/adventure.yml and the installed version.
    """
    source = source or os.environ.get(DATA_SOURCE_ENV) or DEFAULT_DATA_SOURCE
    revision = revision or os.environ.get(DATA_REVISION_ENV) or default_revision()
    logger.info("Loading adventure data from %s", source)
    data = parse_dataset(read_dataset_text(source, revision))
    logger.info("Loaded %d ranks", len(data.get("ranks") or []))
    return data


def load_adventures(source: Optional[str] = None, revision: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the adventure dataset, cached by Streamlit.
    """
    @st.cache_data
    def _load(source, revision):
        return load_dataset(source, revision)
    return _load(source, revision)

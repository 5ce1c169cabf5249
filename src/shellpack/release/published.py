#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Local and published extension versions.

The published lookup is best effort: every failure becomes an ``Unknown``
result so packaging can continue without network access.
"""

from __future__ import annotations

import html
import json
from pathlib import Path
import re
from typing import Any, TypeAlias

from attrs import frozen
import httpx
from provide.foundation import logger

from shellpack.config.defaults import DEFAULT_HTTP_TIMEOUT, EGO_INFO_URL, HTTP_USER_AGENT
from shellpack.exceptions import ManifestVersionError

VERSIONS_ATTRIBUTE_RE = re.compile(r'data-versions="([^"]+)"')
EXTENSION_ID_RE = re.compile(r"extensions\.gnome\.org/extension/(\d+)/")


@frozen
class Found:
    version: int


@frozen
class Unknown:
    reason: str


PublishedVersion: TypeAlias = Found | Unknown


def read_manifest_version(package_json: Path) -> int:
    """Return the major version declared in ``package.json``."""
    try:
        manifest = json.loads(package_json.read_text(encoding="utf-8"))
        version = str(manifest["version"])
        return int(version.split(".")[0])
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise ManifestVersionError(f"Cannot read version from {package_json}: {e}") from e


def extract_extension_id(url: str) -> str | None:
    match = EXTENSION_ID_RE.search(url)
    return match.group(1) if match else None


def parse_versions_attribute(page: str) -> int | None:
    """Read the published version from an EGO extension page.

    The page embeds an HTML-escaped ``data-versions`` mapping of shell
    version to upload records; every shell version carries the same
    extension version, so the first record is used.

    Returns:
        The version, or None if the page has no ``data-versions`` attribute

    Raises:
        ValueError: If the attribute is present but malformed
    """
    match = VERSIONS_ATTRIBUTE_RE.search(page)
    if not match:
        return None

    versions: dict[str, Any] = json.loads(html.unescape(match.group(1)))
    try:
        uploads = next(iter(versions.values()))
        record = next(iter(uploads.values()))
        return int(record["version"])
    except (StopIteration, AttributeError, KeyError, TypeError) as e:
        raise ValueError(f"Unexpected data-versions layout: {e}") from e


def parse_extension_info(payload: str) -> int:
    """Read the version from an ``extension-info`` API response."""
    data = json.loads(payload)
    try:
        return int(data["version"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError("Invalid version in API response") from e


def _get(client: httpx.Client, url: str, **params: str) -> str:
    response = client.get(url, params=params or None)
    response.raise_for_status()
    return response.text


def fetch_published_version(
    ego_url: str,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> PublishedVersion:
    """Look up the version currently published on extensions.gnome.org.

    Reads the extension page first and falls back to the ``extension-info``
    API when the page carries no version data.

    Args:
        ego_url: Extension page URL
        client: HTTP client to use (a short-lived one is created if None)
        timeout: Request timeout in seconds for the created client

    Returns:
        Found with the version, or Unknown with the reason it could not be read
    """
    owns_client = client is None
    if client is None:
        client = httpx.Client(
            follow_redirects=True,
            timeout=timeout,
            headers={"User-Agent": HTTP_USER_AGENT, "Accept": "text/html,application/json"},
        )

    try:
        version = parse_versions_attribute(_get(client, ego_url))
        if version is None:
            logger.warning("Could not find version data on extension page, falling back to API", url=ego_url)
            extension_id = extract_extension_id(ego_url)
            if extension_id is None:
                return _unknown(f"Could not extract extension ID from {ego_url}")
            version = parse_extension_info(_get(client, EGO_INFO_URL, pk=extension_id))
    except httpx.HTTPError as e:
        return _unknown(f"Error fetching published version: {e}")
    except ValueError as e:
        return _unknown(f"Error parsing version data: {e}")
    finally:
        if owns_client:
            client.close()

    logger.info("Found published version", version=version)
    return Found(version)


def _unknown(reason: str) -> Unknown:
    logger.warning("Continuing without published version", reason=reason)
    return Unknown(reason)


# 🌶️📦🔚

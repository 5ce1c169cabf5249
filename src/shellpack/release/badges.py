#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""README version badges comparing local and published versions."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
import re

from attrs import frozen
from provide.foundation import logger
from provide.foundation.file import atomic_write_text

from shellpack.config.defaults import BADGE_END, BADGE_START
from shellpack.release.published import Found, PublishedVersion

BADGE_BLOCK_RE = re.compile(re.escape(BADGE_START) + r".*?" + re.escape(BADGE_END), re.DOTALL)
STATUS_LINE_RE = re.compile(r"(\*\*Status\*\*: \*\*Live\*\* on GNOME Extensions \(ID: \d+\)\.\s*)")


class BadgeAction(Enum):
    UPDATED = "updated"
    INSERTED = "inserted"
    NO_ANCHOR = "no_anchor"


@frozen
class BadgeUpdate:
    action: BadgeAction
    synced: bool
    summary: str


def is_synced(local: int, published: PublishedVersion) -> bool:
    return isinstance(published, Found) and published.version == local


def describe_status(local: int, published: PublishedVersion) -> str:
    if isinstance(published, Found):
        if published.version == local:
            return f"Synced v{published.version}"
        return f"Pending (GitHub v{local}, GNOME v{published.version})"
    return f"Pending (GitHub v{local}, GNOME N/A)"


def render_badges(local: int, published: PublishedVersion, ego_url: str) -> str:
    """Render the marker-delimited badge block."""
    synced = is_synced(local, published)
    label = "Synced" if synced else "Pending"
    color = "brightgreen" if synced else "yellow"

    status = f"[![Status: {label}](https://img.shields.io/badge/Status-{label}-{color})]({ego_url})"
    github = f"![GitHub](https://img.shields.io/badge/GitHub-v{local}-blue)"
    if isinstance(published, Found):
        gnome = f"![GNOME](https://img.shields.io/badge/GNOME-v{published.version}-green)"
    else:
        gnome = "![GNOME](https://img.shields.io/badge/GNOME-N%2FA-gray)"
    return f"{BADGE_START}\n{status} {github} {gnome}\n{BADGE_END}"


def apply_badges(text: str, block: str) -> tuple[str, BadgeAction]:
    """Place ``block`` in README ``text``.

    An existing marker block is replaced; otherwise the block goes right
    after the EGO status line. Without either anchor the text is unchanged.
    """
    if BADGE_BLOCK_RE.search(text):
        return BADGE_BLOCK_RE.sub(lambda _: block, text, count=1), BadgeAction.UPDATED
    if STATUS_LINE_RE.search(text):
        return STATUS_LINE_RE.sub(lambda m: f"{m.group(1)}\n{block}\n", text, count=1), BadgeAction.INSERTED
    return text, BadgeAction.NO_ANCHOR


def update_readme_badges(readme: Path, local: int, published: PublishedVersion, ego_url: str) -> BadgeUpdate:
    """Rewrite the version badges in ``readme``."""
    text = readme.read_text(encoding="utf-8")
    updated, action = apply_badges(text, render_badges(local, published, ego_url))
    summary = describe_status(local, published)

    if action is BadgeAction.NO_ANCHOR:
        logger.warning("No badge block or status line found in README", readme=str(readme))
    else:
        atomic_write_text(readme, updated)
        logger.info("Updated README version badges", readme=str(readme), action=action.value, status=summary)

    return BadgeUpdate(action=action, synced=is_synced(local, published), summary=summary)


# 🌶️📦🔚

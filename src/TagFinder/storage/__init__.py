"""Storage layer: corpus loading and lookup tables.

Provides factory functions that build the read-only data from configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from TagFinder.core.models import Corpus
from TagFinder.storage.corpus import (
    CgRow,
    load_cg_list,
    load_corpus,
    load_entry,
    load_title_map,
    scan_corpus,
)
from TagFinder.storage.tags import TagDictionary
from TagFinder.utils.log import log

if TYPE_CHECKING:
    from TagFinder.config import AppConfig


def create_corpus(config: AppConfig, rows: list[CgRow] | None = None) -> Corpus:
    """Create the corpus from configuration.

    Uses the CG list when configured, otherwise walks the tag directory.

    Args:
        config: Application configuration.
        rows: Already loaded CG list rows, to avoid reading the CSV twice.

    Returns:
        Loaded corpus.
    """
    corpus_cfg = config.corpus
    tag_dir = Path(corpus_cfg.tag_dir)
    if corpus_cfg.cg_list:
        if rows is None:
            rows = load_cg_list(Path(corpus_cfg.cg_list))
        return load_corpus(rows, tag_dir, progress_every=corpus_cfg.progress_every)

    log.info("No CG list configured, scanning %s", tag_dir)
    image_dir = Path(corpus_cfg.image_dir) if corpus_cfg.image_dir else None
    return scan_corpus(tag_dir, image_dir, progress_every=corpus_cfg.progress_every)


def create_tag_dictionary(config: AppConfig) -> TagDictionary | None:
    """Create the tag dictionary, or None when no tag file is configured."""
    if not config.corpus.tag_file:
        return None
    return TagDictionary.from_csv(Path(config.corpus.tag_file))


def create_title_map(config: AppConfig, rows: list[CgRow] | None = None) -> dict[str, str]:
    """Create the work-id to title map, empty when no CG list is configured."""
    if not config.corpus.cg_list:
        return {}
    if rows is None:
        rows = load_cg_list(Path(config.corpus.cg_list))
    titles = load_title_map(rows)
    log.info("Loaded %d CG titles", len(titles))
    return titles


__all__ = [
    "CgRow",
    "TagDictionary",
    "create_corpus",
    "create_tag_dictionary",
    "create_title_map",
    "load_cg_list",
    "load_corpus",
    "load_entry",
    "load_title_map",
    "scan_corpus",
]

"""Corpus domain configuration: where image tags and lookup tables live."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TagFinder.config.common import (
    expect_int,
    expect_path,
    get_optional_value,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class CorpusConfig:
    """Corpus locations.

    Attributes:
        tag_dir: Root directory of per-image tag files.
        cg_list: CSV listing corpus images; empty means "walk ``tag_dir``".
        image_dir: Root directory of image files; empty disables existence checks.
        tag_file: CSV of known tags and translations; empty disables lookups.
        progress_every: Log a progress line every N loaded images (0 = never).
    """

    tag_dir: str
    cg_list: str
    image_dir: str
    tag_file: str
    progress_every: int


def load_corpus_config(raw: Mapping[str, Any]) -> CorpusConfig:
    """Load corpus domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "corpus", required=True)
    return CorpusConfig(
        tag_dir=expect_path(get_required_value(section, "tag_dir", "corpus.tag_dir"), "corpus.tag_dir"),
        cg_list=expect_path(get_optional_value(section, "cg_list", ""), "corpus.cg_list"),
        image_dir=expect_path(get_optional_value(section, "image_dir", ""), "corpus.image_dir"),
        tag_file=expect_path(get_optional_value(section, "tag_file", ""), "corpus.tag_file"),
        progress_every=expect_int(
            get_optional_value(section, "progress_every", 50000),
            "corpus.progress_every",
        ),
    )


def check_corpus_config(config: CorpusConfig) -> None:
    """Validate corpus domain constraints.

    Raises:
        ValueError: If values violate corpus constraints.
    """
    if not config.tag_dir:
        raise ValueError("corpus.tag_dir must not be empty")
    if config.progress_every < 0:
        raise ValueError("corpus.progress_every must be 0 or positive")

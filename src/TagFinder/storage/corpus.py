"""Corpus loading.

The corpus is built once at startup and never mutated afterwards. Two
loaders exist:

- `load_corpus` follows an image list (the CG list CSV) and keeps one entry
  per row, aligned by index, even when the row has no tag file.
- `scan_corpus` walks the tag directory instead and only keeps images whose
  file exists under the image directory.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from TagFinder.core.models import Corpus, CorpusEntry
from TagFinder.storage.profiles import PROFILE_SUFFIXES, find_profile_file, read_profile
from TagFinder.utils.log import log, log_progress

IMAGE_SUFFIX = ".webp"
_TITLE_COLUMN = 1
_WORK_COLUMN = 4
_IMAGE_COLUMN = 5


@dataclass(frozen=True, slots=True)
class CgRow:
    """One row of the CG list.

    Attributes:
        title: Title of the work the image belongs to.
        work_id: Work identifier, also the sub-directory name.
        image_no: Image number inside the work.
    """

    title: str
    work_id: str
    image_no: str

    @property
    def stem(self) -> str:
        """Relative path of the image without suffix."""
        return f"{self.work_id}/image_{self.image_no}"

    @property
    def image_id(self) -> str:
        return self.stem + IMAGE_SUFFIX


def load_cg_list(path: Path) -> list[CgRow]:
    """Read the CG list CSV.

    Rows with fewer than six columns are skipped with a warning.

    Raises:
        OSError: If the file cannot be read.
    """
    rows: list[CgRow] = []
    with path.open(encoding="utf-8", newline="") as fh:
        for lineno, record in enumerate(csv.reader(fh), start=1):
            if not record:
                continue
            if len(record) <= _IMAGE_COLUMN:
                log.warning("Skipping short CG list row %s:%d", path, lineno)
                continue
            rows.append(
                CgRow(
                    title=record[_TITLE_COLUMN].strip(),
                    work_id=record[_WORK_COLUMN].strip(),
                    image_no=record[_IMAGE_COLUMN].strip(),
                )
            )
    log.info("Loaded CG list with %d entries from %s", len(rows), path)
    return rows


def load_corpus(rows: Sequence[CgRow], tag_dir: Path, *, progress_every: int = 0) -> Corpus:
    """Build a corpus from CG list rows.

    Args:
        rows: CG list rows, in corpus order.
        tag_dir: Root directory of tag files.
        progress_every: Progress logging interval; 0 disables it.

    Returns:
        Corpus with one entry per row; rows without a tag file get no profile.
    """
    entries: list[CorpusEntry] = []
    for idx, row in enumerate(rows):
        log_progress(idx, len(rows), "Tag", every=progress_every)
        tag_path = find_profile_file(tag_dir / row.stem)
        profile = read_profile(tag_path) if tag_path is not None else None
        entries.append(CorpusEntry(image_id=row.image_id, profile=profile))

    corpus = Corpus(entries=tuple(entries))
    log.info("Loaded tags for %d of %d images", corpus.profiled, len(corpus))
    return corpus


def _iter_tag_files(tag_dir: Path) -> Iterable[Path]:
    for path in sorted(tag_dir.rglob("*")):
        if path.is_file() and path.suffix.lower() in PROFILE_SUFFIXES:
            yield path


def scan_corpus(tag_dir: Path, image_dir: Path | None = None, *, progress_every: int = 0) -> Corpus:
    """Build a corpus by walking the tag directory.

    Args:
        tag_dir: Root directory of tag files.
        image_dir: Image root; when given, tag files without a matching image are ignored.
        progress_every: Progress logging interval; 0 disables it.

    Returns:
        Corpus ordered by tag file path.
    """
    entries: list[CorpusEntry] = []
    seen: set[str] = set()
    count = 0
    for path in _iter_tag_files(tag_dir):
        count += 1
        log_progress(count, 0, "Tag file", every=progress_every)
        relative = path.relative_to(tag_dir).with_suffix(IMAGE_SUFFIX)
        image_id = relative.as_posix()
        if image_id in seen:
            continue
        if image_dir is not None and not (image_dir / relative).is_file():
            log.debug("Skipping %s: image file not found", image_id)
            continue
        seen.add(image_id)
        entries.append(CorpusEntry(image_id=image_id, profile=read_profile(path)))

    corpus = Corpus(entries=tuple(entries))
    log.info("Scanned %d tag files under %s, %d images kept", count, tag_dir, len(corpus))
    return corpus


def load_title_map(rows: Iterable[CgRow]) -> dict[str, str]:
    """Map each work id to the first non-empty title listed for it."""
    titles: dict[str, str] = {}
    for row in rows:
        if row.work_id and row.title and row.work_id not in titles:
            titles[row.work_id] = row.title
    return titles


def load_entry(image_id: str, tag_dir: Path) -> CorpusEntry | None:
    """Load a single corpus entry straight from its tag file.

    Args:
        image_id: Image identifier, e.g. ``"1234/image_5.webp"``.
        tag_dir: Root directory of tag files.

    Returns:
        The entry, or None when the identifier has no tag file or points
        outside ``tag_dir``.
    """
    relative = Path(image_id)
    if relative.is_absolute() or ".." in relative.parts:
        return None
    tag_path = find_profile_file(tag_dir / relative.with_suffix(""))
    if tag_path is None:
        return None
    return CorpusEntry(image_id=image_id, profile=read_profile(tag_path))

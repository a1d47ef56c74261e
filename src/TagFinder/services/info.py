"""Image detail lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from TagFinder.core.models import Category, Corpus
from TagFinder.storage.tags import TagDictionary


@dataclass(frozen=True, slots=True)
class TagDetail:
    tag: str
    score: float
    category: int
    translation: str | None = None

    @property
    def category_name(self) -> str:
        try:
            return Category(self.category).name.lower()
        except ValueError:
            return str(self.category)


@dataclass(frozen=True, slots=True)
class ImageInfo:
    """Tags of one image together with the title of its work.

    Attributes:
        image_id: Image identifier.
        title: Work title, if known.
        tags: Tags in file order; empty when the image has no tag profile.
    """

    image_id: str
    title: str | None
    tags: Sequence[TagDetail]


def work_id_of(image_id: str) -> str:
    """Return the work id, i.e. the first path component of an image id."""
    return image_id.split("/", 1)[0]


def describe_image(
    image_id: str,
    corpus: Corpus,
    *,
    dictionary: TagDictionary | None = None,
    titles: Mapping[str, str] | None = None,
) -> ImageInfo:
    """Collect displayable details for an image.

    Args:
        image_id: Identifier as returned by a search.
        corpus: Loaded corpus.
        dictionary: Optional tag dictionary used for translations.
        titles: Optional work-id to title map.

    Returns:
        Image details.

    Raises:
        LookupError: If the identifier is not in the corpus.
    """
    entry = corpus.get(image_id)
    if entry is None:
        raise LookupError(f"Image not found: {image_id}")

    details: list[TagDetail] = []
    if entry.profile is not None:
        for category, tag, score in entry.profile.items():
            translation = dictionary.translate(tag) if dictionary is not None else None
            details.append(TagDetail(tag=tag, score=score, category=category, translation=translation))

    title = (titles or {}).get(work_id_of(image_id))
    return ImageInfo(image_id=image_id, title=title, tags=tuple(details))

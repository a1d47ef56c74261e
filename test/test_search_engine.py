"""Tests for the corpus scan."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TagFinder.core.models import Category, Corpus, CorpusEntry, TagProfile
from TagFinder.engine.search import search
from TagFinder.query.parser import parse_query


def _entry(image_id: str, tags: dict[str, float] | None) -> CorpusEntry:
    profile = TagProfile({Category.GENERAL: tags}) if tags is not None else None
    return CorpusEntry(image_id=image_id, profile=profile)


class TestSearch(unittest.TestCase):
    def setUp(self) -> None:
        self.corpus = Corpus(
            entries=(
                _entry("w1/image_1.webp", {"cat": 0.9}),
                _entry("w1/image_2.webp", {"dog": 0.8}),
                _entry("w2/image_1.webp", {"cat": 0.6, "hat": 0.7}),
                _entry("w2/image_2.webp", None),
                _entry("w3/image_1.webp", {"cat": 0.99}),
            )
        )

    def test_cap_truncates_list_but_not_count(self) -> None:
        result = search(self.corpus, parse_query("cat"), 2)

        self.assertEqual(result.images, ("w1/image_1.webp", "w2/image_1.webp"))
        self.assertEqual(result.count, 3)
        self.assertTrue(result.truncated)

    def test_results_keep_corpus_order(self) -> None:
        result = search(self.corpus, parse_query("cat"), 10)

        self.assertEqual(result.images, ("w1/image_1.webp", "w2/image_1.webp", "w3/image_1.webp"))
        self.assertFalse(result.truncated)

    def test_absent_profiles_never_match(self) -> None:
        for raw in ("-cat", "-nothing", "[-cat, -dog]"):
            with self.subTest(raw=raw):
                result = search(self.corpus, parse_query(raw), 10)
                self.assertNotIn("w2/image_2.webp", result.images)

    def test_negation_and_threshold(self) -> None:
        result = search(self.corpus, parse_query("cat:0.8, -hat"), 10)
        self.assertEqual(result.images, ("w1/image_1.webp", "w3/image_1.webp"))

    def test_group_query(self) -> None:
        result = search(self.corpus, parse_query("[dog, hat]"), 10)
        self.assertEqual(result.images, ("w1/image_2.webp", "w2/image_1.webp"))
        self.assertEqual(result.count, 2)

    def test_zero_cap_still_counts(self) -> None:
        result = search(self.corpus, parse_query("cat"), 0)
        self.assertEqual(result.images, ())
        self.assertEqual(result.count, 3)

    def test_empty_corpus(self) -> None:
        result = search(Corpus(), parse_query("cat"), 10)
        self.assertEqual((result.images, result.count), ((), 0))

    def test_corpus_lookup(self) -> None:
        self.assertIsNotNone(self.corpus.get("w2/image_1.webp"))
        self.assertIsNone(self.corpus.get("nope.webp"))
        self.assertEqual(self.corpus.profiled, 4)


if __name__ == "__main__":
    unittest.main()

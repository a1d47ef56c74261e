"""Tests for corpus loading from CG list and tag directories."""

from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TagFinder.core.models import Category
from TagFinder.storage.corpus import load_cg_list, load_corpus, load_entry, load_title_map, scan_corpus
from TagFinder.storage.profiles import parse_profile_json, parse_profile_text


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestProfileParsing(unittest.TestCase):
    def test_text_format_with_optional_category(self) -> None:
        profile = parse_profile_text("smile 0.91\nhatsune_miku 0.97 4\n\nSleeve_Cuffs 0.5\n")

        self.assertEqual(profile.score("smile"), 0.91)
        self.assertEqual(dict(profile.categories[Category.CHARACTER]), {"hatsune_miku": 0.97})
        self.assertTrue(profile.found("sleeve_cuffs", 0.5))

    def test_text_format_skips_malformed_lines(self) -> None:
        profile = parse_profile_text("good 0.5\nbad\nworse x\ntoo many parts here\n")
        self.assertEqual(len(profile), 1)
        self.assertTrue(profile.found("good"))

    def test_json_format_accepts_ids_and_names(self) -> None:
        profile = parse_profile_json('{"0": {"Cat Ears": 0.8}, "rating": {"general": 0.9}, "x": {"a": 1}}')

        assert profile is not None
        self.assertTrue(profile.found("cat_ears", 0.8))
        self.assertEqual(dict(profile.categories[Category.RATING]), {"general": 0.9})
        self.assertEqual(len(profile), 2)

    def test_json_format_rejects_non_objects(self) -> None:
        self.assertIsNone(parse_profile_json("[1, 2]"))
        self.assertIsNone(parse_profile_json("{not json"))


class TestLoadCorpus(unittest.TestCase):
    def setUp(self) -> None:
        self.root = Path(tempfile.mkdtemp())
        self.tag_dir = self.root / "tag"
        self.cg_list = _write(
            self.root / "cglist.csv",
            "\n".join(
                [
                    "0,First Work,a,b,w1,1",
                    "1,First Work,a,b,w1,2",
                    "2,,a,b,w2,1",
                    "short,row",
                    "3,Second Work,a,b,w2,2",
                ]
            )
            + "\n",
        )
        _write(self.tag_dir / "w1" / "image_1.txt", "cat 0.9\n")
        _write(self.tag_dir / "w2" / "image_1.json", '{"general": {"dog": 0.7}}')
        _write(self.tag_dir / "w2" / "image_2.txt", "cat 0.4\n")

    def test_rows_are_aligned_with_entries(self) -> None:
        rows = load_cg_list(self.cg_list)
        corpus = load_corpus(rows, self.tag_dir)

        self.assertEqual(len(rows), 4)
        self.assertEqual(
            [entry.image_id for entry in corpus],
            ["w1/image_1.webp", "w1/image_2.webp", "w2/image_1.webp", "w2/image_2.webp"],
        )
        self.assertIsNone(corpus.entries[1].profile)
        self.assertTrue(corpus.entries[2].profile.found("dog"))
        self.assertEqual(corpus.profiled, 3)

    def test_title_map_keeps_first_non_empty_title(self) -> None:
        titles = load_title_map(load_cg_list(self.cg_list))
        self.assertEqual(titles, {"w1": "First Work", "w2": "Second Work"})

    def test_load_entry(self) -> None:
        entry = load_entry("w2/image_1.webp", self.tag_dir)
        assert entry is not None
        self.assertTrue(entry.profile.found("dog"))
        self.assertIsNone(load_entry("w1/image_2.webp", self.tag_dir))
        self.assertIsNone(load_entry("../tag/w1/image_1.webp", self.tag_dir))


class TestScanCorpus(unittest.TestCase):
    def test_scan_requires_image_files_when_image_dir_given(self) -> None:
        root = Path(tempfile.mkdtemp())
        tag_dir = root / "tag"
        image_dir = root / "webp"
        _write(tag_dir / "b" / "image_1.txt", "cat 0.9\n")
        _write(tag_dir / "a" / "image_1.txt", "dog 0.9\n")
        _write(tag_dir / "a" / "notes.md", "ignored\n")
        _write(image_dir / "a" / "image_1.webp", "")

        everything = scan_corpus(tag_dir)
        with_images = scan_corpus(tag_dir, image_dir)

        self.assertEqual([e.image_id for e in everything], ["a/image_1.webp", "b/image_1.webp"])
        self.assertEqual([e.image_id for e in with_images], ["a/image_1.webp"])


if __name__ == "__main__":
    unittest.main()

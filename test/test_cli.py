"""End-to-end tests for the TagFinder CLI on a small on-disk corpus."""

from __future__ import annotations

import json
import sys
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TagFinder.cli import cli
from TagFinder.utils.log import log


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self.root = Path(tempfile.mkdtemp())
        tag_dir = self.root / "tag"
        _write(self.root / "cglist.csv", "0,Work One,a,b,w1,1\n1,Work One,a,b,w1,2\n2,Work Two,a,b,w2,1\n")
        _write(tag_dir / "w1" / "image_1.txt", "cat_ears 0.9\nsmile 0.8\n")
        _write(tag_dir / "w1" / "image_2.txt", "dog_ears 0.6\n")
        _write(tag_dir / "w2" / "image_1.txt", "cat_ears 0.3\nhatsune_miku 0.97 4\n")
        _write(self.root / "tags.csv", "cat_ears,猫耳\ndog_ears,犬耳\nsmile,笑顔\nhatsune_miku,初音ミク\n")
        self.config_path = self.root / "config.yml"
        _write(
            self.config_path,
            "\n".join(
                [
                    "corpus:",
                    f"  tag_dir: {tag_dir.as_posix()}",
                    f"  cg_list: {(self.root / 'cglist.csv').as_posix()}",
                    f"  tag_file: {(self.root / 'tags.csv').as_posix()}",
                    "  progress_every: 0",
                    "search:",
                    "  max_results: 10",
                    "  page_size: 20",
                    "output:",
                    f"  base_dir: {(self.root / 'output').as_posix()}",
                    "  formats: [json]",
                    "queries:",
                    "  - NAME: ears",
                    "    TAGS: '[cat ears, dog ears]'",
                ]
            )
            + "\n",
        )
        self.runner = CliRunner()

    def tearDown(self) -> None:
        log.handlers.clear()
        log.propagate = True

    def _invoke(self, *args: str):
        return self.runner.invoke(cli, ["--config", str(self.config_path), *args])

    def _json_output(self) -> list[dict]:
        files = sorted((self.root / "output" / "json").glob("search_*.json"))
        self.assertEqual(len(files), 1)
        return json.loads(files[0].read_text(encoding="utf-8"))

    def test_search_with_query_argument(self) -> None:
        result = self._invoke("search", "cat_ears:0.5")

        self.assertEqual(result.exit_code, 0, result.output)
        data = self._json_output()
        self.assertEqual(data[0]["images"], ["w1/image_1.webp"])
        self.assertEqual(data[0]["count"], 1)

    def test_search_uses_configured_queries(self) -> None:
        result = self._invoke("search")

        self.assertEqual(result.exit_code, 0, result.output)
        data = self._json_output()
        self.assertEqual(data[0]["query"]["name"], "ears")
        self.assertEqual(data[0]["images"], ["w1/image_1.webp", "w1/image_2.webp", "w2/image_1.webp"])

    def test_search_max_results_override(self) -> None:
        result = self._invoke("search", "--max-results", "1", "--", "-smile")

        self.assertEqual(result.exit_code, 0, result.output)
        data = self._json_output()
        self.assertEqual(data[0]["images"], ["w1/image_2.webp"])
        self.assertEqual(data[0]["count"], 2)

    def test_search_rejects_empty_query(self) -> None:
        result = self._invoke("search", " , ")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Tags cannot be empty", result.output)

    def test_validate_reports_unknown_tags(self) -> None:
        ok = self._invoke("validate", "cat ears, -smile")
        bad = self._invoke("validate", "cat ears, [wolf_ears, smile]")

        self.assertEqual(ok.exit_code, 0, ok.output)
        self.assertEqual(bad.exit_code, 1)
        self.assertIn("Invalid tags: wolf_ears", bad.output)

    def test_info_unknown_image(self) -> None:
        result = self._invoke("info", "w9/image_1.webp")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("not found", result.output)

    def test_info_and_tags_commands_succeed(self) -> None:
        self.assertEqual(self._invoke("info", "w2/image_1.webp").exit_code, 0)
        self.assertEqual(self._invoke("tags", "ears").exit_code, 0)

    def test_missing_tag_file_aborts_every_command(self) -> None:
        text = self.config_path.read_text(encoding="utf-8")
        missing = (self.root / "missing.csv").as_posix()
        _write(self.config_path, text.replace((self.root / "tags.csv").as_posix(), missing))

        for args in (("tags", "ears"), ("validate", "cat_ears"), ("info", "w2/image_1.webp")):
            with self.subTest(command=args[0]):
                result = self._invoke(*args)
                self.assertEqual(result.exit_code, 1)
                self.assertIsInstance(result.exception, SystemExit)
                self.assertIn("Aborted", result.output)


if __name__ == "__main__":
    unittest.main()

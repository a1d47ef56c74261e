"""Tests for the tag query parser."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TagFinder.core.query import GroupTerm, TagTerm
from TagFinder.query.parser import parse_query, parse_tokens, scan_tokens, split_tokens


class TestTokenizers(unittest.TestCase):
    def test_split_tokens_trims_and_drops_empty(self) -> None:
        self.assertEqual(split_tokens(" a , ,b,, "), ["a", "b"])

    def test_split_tokens_breaks_groups(self) -> None:
        self.assertEqual(split_tokens("[c, d]"), ["[c", "d]"])

    def test_scan_tokens_keeps_groups_whole(self) -> None:
        self.assertEqual(scan_tokens("a, [c, d] ,-e"), ["a", "[c, d]", "-e"])

    def test_scan_tokens_drops_unterminated_group(self) -> None:
        self.assertEqual(scan_tokens("a, [b, c"), ["a"])

    def test_scan_tokens_keeps_internal_spaces(self) -> None:
        self.assertEqual(scan_tokens(" sleeve cuffs ,x"), ["sleeve cuffs", "x"])


class TestParseQuery(unittest.TestCase):
    def test_simple_and_group_terms_in_order(self) -> None:
        query = parse_query("a,b,[c,d],-e")

        self.assertEqual(
            query.terms,
            (
                TagTerm("a"),
                TagTerm("b"),
                GroupTerm((TagTerm("c"), TagTerm("d"))),
                TagTerm("e", negated=True),
            ),
        )
        self.assertEqual(query.raw, "a,b,[c,d],-e")

    def test_group_members_follow_term_grammar(self) -> None:
        query = parse_query("[Cat Ears:0.5, -hat]")

        self.assertEqual(
            query.terms,
            (GroupTerm((TagTerm("cat_ears", 0.5), TagTerm("hat", negated=True))),),
        )

    def test_single_member_group(self) -> None:
        query = parse_query("[x]")
        self.assertEqual(query.terms, (GroupTerm((TagTerm("x"),)),))

    def test_empty_group_has_no_members(self) -> None:
        query = parse_query("a, []")
        self.assertEqual(query.terms, (TagTerm("a"), GroupTerm(())))

    def test_unterminated_group_contributes_no_term(self) -> None:
        query = parse_query("a, [b, c")
        self.assertEqual(query.terms, (TagTerm("a"),))

    def test_closing_bracket_outside_group_is_literal(self) -> None:
        query = parse_query("a]")
        self.assertEqual(query.terms, (TagTerm("a]"),))

    def test_empty_query(self) -> None:
        self.assertEqual(parse_query("  ,  ").terms, ())

    def test_name_is_kept(self) -> None:
        self.assertEqual(parse_query("a", name="q").name, "q")

    def test_tag_names_include_group_members(self) -> None:
        query = parse_query("a, [b, -c:0.5], d")
        self.assertEqual(query.tag_names(), ["a", "b", "c", "d"])


class TestParseTokens(unittest.TestCase):
    def test_repairs_naively_split_group(self) -> None:
        repaired = parse_tokens(split_tokens("[c,d]"))
        self.assertEqual(repaired, parse_query("[c,d]").terms)
        self.assertEqual(repaired, (GroupTerm((TagTerm("c"), TagTerm("d"))),))

    def test_naive_and_scanned_streams_agree(self) -> None:
        raw = "1girl, [cat ears, dog ears:0.4, -tail], -hat:0.75, smile"
        self.assertEqual(parse_tokens(split_tokens(raw)), parse_tokens(scan_tokens(raw)))

    def test_pending_group_is_dropped(self) -> None:
        self.assertEqual(parse_tokens(["a", "[b", "c"]), (TagTerm("a"),))


if __name__ == "__main__":
    unittest.main()

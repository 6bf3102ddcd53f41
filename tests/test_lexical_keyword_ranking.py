from __future__ import annotations

import unittest

from lexical import LexicalConfig, analyze_text, categorize, extract_keywords, tokenize


class TestKeywordRanking(unittest.TestCase):
    def test_descending_frequency(self) -> None:
        self.assertEqual(
            extract_keywords("apple apple banana banana banana cherry"),
            ["banana", "apple", "cherry"],
        )

    def test_ties_keep_first_seen_order(self) -> None:
        self.assertEqual(
            extract_keywords("zebra mango zebra mango kiwi4 kiwi4 quartz"),
            ["zebra", "mango", "kiwi4", "quartz"],
        )

    def test_short_tokens_stop_words_and_punctuation_dropped(self) -> None:
        text = "The API page: DOCUMENT version -- Budget, budget! report's data."
        # "api" (3 chars), "the", "page", "document", "version" are dropped; "report's" -> "report", "s"
        self.assertEqual(tokenize(text), ["budget", "budget", "report", "data"])
        self.assertEqual(extract_keywords(text), ["budget", "report", "data"])

    def test_max_keywords_cap(self) -> None:
        text = " ".join(f"word{i:02d}" for i in range(25))
        kws = extract_keywords(text)
        self.assertEqual(len(kws), 10)
        self.assertEqual(kws[0], "word00")
        self.assertEqual(extract_keywords(text, max_keywords=3), ["word00", "word01", "word02"])

    def test_empty_text(self) -> None:
        self.assertEqual(extract_keywords(""), [])
        self.assertEqual(analyze_text("   ").category, "general")

    def test_config_is_validated(self) -> None:
        with self.assertRaises(ValueError):
            analyze_text("anything here", config=LexicalConfig(max_keywords=0))


class TestCategorize(unittest.TestCase):
    def test_disjoint_keywords_default_to_general(self) -> None:
        self.assertEqual(categorize(["banana", "apple", "cherry"]), "general")
        self.assertEqual(categorize([]), "general")

    def test_highest_score_wins(self) -> None:
        self.assertEqual(categorize(["meeting", "agenda", "code"]), "administrative")
        self.assertEqual(categorize(["software", "data", "revenue"]), "technical")

    def test_ties_go_to_table_order(self) -> None:
        self.assertEqual(categorize(["revenue", "contract"]), "business")
        self.assertEqual(categorize(["story", "research"]), "academic")

    def test_case_insensitive(self) -> None:
        self.assertEqual(categorize(["Contract", "CLAUSE"]), "legal")

    def test_analyze_text_end_to_end(self) -> None:
        ks = analyze_text("Research study: the research methodology and results of the study. Research!")
        self.assertEqual(ks.keywords[0], "research")
        self.assertEqual(ks.category, "academic")
        self.assertEqual(ks.to_dict()["category"], "academic")


if __name__ == "__main__":
    unittest.main()

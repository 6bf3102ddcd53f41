from __future__ import annotations

import unittest

from contracts.errors import ValidationError
from contracts.reading import CardPosition, Reading, validate_reading_dict
from tarot_pipeline import load_reading_json


def _payload() -> dict:
    return {
        "title": "Spec",
        "keywords": ["alpha"],
        "category": "technical",
        "aura": "Tab Haunter",
        "certification": "Blissfully Bloated",
        "cards": [
            {"position": "present", "name": "The Open Tab", "meaning": "Living in a browser tab."},
            {"position": "past", "name": "The Midnight Oil", "meaning": "Late nights."},
            {"position": "future", "name": "The Rebirth", "meaning": "Repurposed."},
        ],
    }


class TestReadingContract(unittest.TestCase):
    def test_valid_payload(self) -> None:
        self.assertEqual(validate_reading_dict(_payload()), [])
        r = Reading.from_dict(_payload())
        self.assertEqual(r.card_at(CardPosition.PAST).name, "The Midnight Oil")
        # Order is carried verbatim; layout looks cards up by position.
        self.assertEqual(r.to_dict(), _payload())

    def test_optional_fields_get_defaults(self) -> None:
        p = _payload()
        del p["title"]
        del p["keywords"]
        p["category"] = ""
        r = Reading.from_dict(p)
        self.assertEqual(r.title, "Untitled Document")
        self.assertEqual(r.keywords, [])
        self.assertEqual(r.category, "general")

    def test_all_problems_reported_together(self) -> None:
        p = _payload()
        p["aura"] = "   "
        p["keywords"] = "alpha"
        p["cards"][0]["position"] = "someday"
        problems = validate_reading_dict(p)
        self.assertIn("aura must be a non-empty string", problems)
        self.assertIn("keywords must be a list of strings", problems)
        self.assertIn("cards[0].position must be one of past/present/future", problems)
        self.assertIn("missing card for position 'present'", problems)

    def test_non_object_rejected(self) -> None:
        self.assertEqual(validate_reading_dict(["cards"]), ["reading must be an object"])
        with self.assertRaises(ValidationError):
            Reading.from_dict(None)

    def test_bad_json_is_a_validation_error(self) -> None:
        with self.assertRaises(ValidationError):
            load_reading_json("{not json")


if __name__ == "__main__":
    unittest.main()

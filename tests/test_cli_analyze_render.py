from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from pdf_fixtures import make_text_pdf, page_texts
from reading import describe_aura
from tarot_pipeline.cli import main


class TestCli(unittest.TestCase):
    def test_analyze_then_render(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            pdf_path = root / "in.pdf"
            pdf_path.write_bytes(
                make_text_pdf(
                    [["Meeting agenda and action items for the status review."], ["SECOND PAGE"]],
                    title="Weekly Sync",
                )
            )
            reading_path = root / "reading.json"
            out_path = root / "out" / "tarot_reading.pdf"

            stdout = io.StringIO()
            with redirect_stdout(stdout):
                self.assertEqual(main(["analyze", "--pdf", str(pdf_path), "--out", str(reading_path)]), 0)
            payload = json.loads(reading_path.read_text(encoding="utf-8"))
            self.assertNotIn("aura_description", payload)
            summary = stdout.getvalue()
            self.assertIn(f"aura={payload['aura']}", summary)
            self.assertIn(f"aura_description={describe_aura(payload['aura'])}", summary)
            self.assertEqual(payload["title"], "Weekly Sync")
            self.assertEqual(payload["category"], "administrative")

            rc = main(
                ["render", "--pdf", str(pdf_path), "--reading", str(reading_path), "--out", str(out_path)]
            )
            self.assertEqual(rc, 0)
            texts = page_texts(out_path.read_bytes())
            self.assertEqual(len(texts), 3)
            self.assertIn("Weekly Sync", texts[0])

            preview_dir = root / "previews"
            self.assertEqual(main(["preview", "--pdf", str(out_path), "--out-dir", str(preview_dir)]), 0)
            self.assertEqual(sorted(p.name for p in preview_dir.iterdir()), ["page_001.jpg", "page_002.jpg", "page_003.jpg"])

    def test_pipeline_errors_exit_2(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            pdf_path = root / "in.pdf"
            pdf_path.write_bytes(make_text_pdf([["Some perfectly readable body text here."]]))
            reading_path = root / "reading.json"
            reading_path.write_text('{"cards": []}', encoding="utf-8")

            with self.assertLogs("tarot_pipeline.cli", level="ERROR") as cm:
                rc = main(
                    ["render", "--pdf", str(pdf_path), "--reading", str(reading_path), "--out", str(root / "o.pdf")]
                )
            self.assertEqual(rc, 2)
            error = cm.records[0].error
            self.assertEqual(error["code"], "VALIDATION_BAD_READING")
            self.assertIn("cards must contain exactly 3 entries, got 0", error["detail"]["problems"])
            self.assertFalse((root / "o.pdf").exists())

            garbage = root / "garbage.pdf"
            garbage.write_bytes(b"not a pdf")
            self.assertEqual(main(["analyze", "--pdf", str(garbage)]), 2)


if __name__ == "__main__":
    unittest.main()

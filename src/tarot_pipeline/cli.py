from __future__ import annotations

import argparse
import logging
from pathlib import Path

from contracts.errors import TarotPipelineError
from cover_page import PreviewConfig
from merge_pdf import DEFAULT_OUTPUT_FILENAME
from reading import describe_aura

from .artifacts import load_reading_json, serialize_reading, write_reading_json
from .module import analyze_pdf_bytes, preview_pdf_bytes, render_pdf_bytes

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pdf-tarot",
        description="Analyze a PDF into a tarot reading, then prepend the reading as a cover page.",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    sub = p.add_subparsers(dest="command", required=True)

    a = sub.add_parser("analyze", help="Phase 1: PDF -> reading JSON.")
    a.add_argument("--pdf", required=True, type=Path, help="Input PDF file.")
    a.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output reading JSON file (default: stdout). With a file, a one-line summary is printed.",
    )

    r = sub.add_parser("render", help="Phase 2: PDF + reading JSON -> PDF with cover page.")
    r.add_argument("--pdf", required=True, type=Path, help="Original PDF file.")
    r.add_argument("--reading", required=True, type=Path, help="Reading JSON produced by `analyze`.")
    r.add_argument(
        "--out",
        type=Path,
        default=Path(DEFAULT_OUTPUT_FILENAME),
        help=f"Output PDF file (default: {DEFAULT_OUTPUT_FILENAME}).",
    )

    v = sub.add_parser("preview", help="Write JPEG thumbnails of the leading pages.")
    v.add_argument("--pdf", required=True, type=Path, help="PDF file to preview.")
    v.add_argument("--out-dir", required=True, type=Path, help="Directory for page_###.jpg files.")
    v.add_argument("--max-pages", type=int, default=5, help="Number of leading pages (default: 5).")
    return p


def _run(args: argparse.Namespace) -> None:
    pdf_bytes = args.pdf.read_bytes()

    if args.command == "analyze":
        reading = analyze_pdf_bytes(pdf_bytes)
        if args.out is None:
            print(serialize_reading(reading), end="")
        else:
            write_reading_json(reading=reading, out_file=args.out)
            print(
                f"title={reading.title} category={reading.category} aura={reading.aura} "
                f"aura_description={describe_aura(reading.aura) or '<unknown>'}"
            )
        return

    if args.command == "render":
        reading = load_reading_json(args.reading.read_text(encoding="utf-8"))
        merged = render_pdf_bytes(pdf_bytes, reading)
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_bytes(merged)
        return

    args.out_dir.mkdir(parents=True, exist_ok=True)
    for preview in preview_pdf_bytes(pdf_bytes, config=PreviewConfig(max_pages=args.max_pages)):
        (args.out_dir / f"page_{preview.page_num:03d}.jpg").write_bytes(preview.image_bytes)


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        _run(args)
    except TarotPipelineError as e:
        logger.error("%s: %s", e.code, e.message, extra={"error": e.to_dict()})
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

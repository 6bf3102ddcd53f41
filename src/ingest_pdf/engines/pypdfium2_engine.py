from __future__ import annotations

import logging

from contracts.errors import UnreadableDocument

from .base import EngineTextSample, PdfTextEngine

logger = logging.getLogger(__name__)


class Pypdfium2TextEngine(PdfTextEngine):
    def backend_id(self) -> str:
        return "pypdfium2"

    def backend_version(self) -> str | None:
        try:
            import pypdfium2 as pdfium  # type: ignore

            return getattr(pdfium, "__version__", None)
        except ImportError:
            return None

    def _require_pdfium(self):
        try:
            import pypdfium2 as pdfium  # type: ignore

            return pdfium
        except ImportError as e:
            raise RuntimeError(
                "Missing dependency: pypdfium2 is required for text ingest."
            ) from e

    def sample_text(self, *, pdf_bytes: bytes, max_pages: int) -> EngineTextSample:
        pdfium = self._require_pdfium()

        try:
            doc = pdfium.PdfDocument(pdf_bytes)
        except pdfium.PdfiumError as e:
            raise UnreadableDocument(
                "Could not parse PDF. The document may be corrupt or encrypted.",
                code="INGEST_PARSE_FAILED",
                detail={"error": repr(e)},
            ) from e

        try:
            page_count = len(doc)
            metadata_title = doc.get_metadata_dict().get("Title") or None

            page_texts: list[str] = []
            for index in range(min(page_count, max_pages)):
                page = doc[index]
                textpage = page.get_textpage()
                # pdfium reports line breaks as CRLF
                page_texts.append(textpage.get_text_range().replace("\r\n", "\n").replace("\r", "\n"))
                textpage.close()
                page.close()
        except pdfium.PdfiumError as e:
            raise UnreadableDocument(
                "Could not extract text from PDF.",
                code="INGEST_PARSE_FAILED",
                detail={"error": repr(e)},
            ) from e
        finally:
            doc.close()

        logger.debug("ingest_sampled_pages", extra={"page_count": page_count, "sampled": len(page_texts)})
        return EngineTextSample(page_texts=page_texts, page_count=page_count, metadata_title=metadata_title)

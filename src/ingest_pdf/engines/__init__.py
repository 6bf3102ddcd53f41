from .base import EngineTextSample, PdfTextEngine
from .pypdfium2_engine import Pypdfium2TextEngine

__all__ = ["EngineTextSample", "PdfTextEngine", "Pypdfium2TextEngine"]

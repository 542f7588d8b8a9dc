from .marker_parser import MARKERS, classify, classify_lines
from .slide_loader import SlideNotFoundError, SlideReadError, load_slide

__all__ = [
    "MARKERS",
    "classify",
    "classify_lines",
    "SlideNotFoundError",
    "SlideReadError",
    "load_slide",
]

from .slide_schema import ContentType, ContentItem, SlideContent
from .deck_config import ConfigParseError, ColorConfig, SlideDescriptor, DeckConfig

__all__ = [
    "ContentType",
    "ContentItem",
    "SlideContent",
    "ConfigParseError",
    "ColorConfig",
    "SlideDescriptor",
    "DeckConfig",
]

"""Presentation state and clamped slide navigation."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.schemas.deck_config import DeckConfig, SlideDescriptor
from src.schemas.slide_schema import SlideContent


class PresentationState(BaseModel):
    """Which slide is showing, and its loaded content.

    Navigation never mutates a state; ``advance`` and ``retreat`` return a
    new one, so a failed load can simply keep the previous state.
    """

    slides: list[SlideDescriptor] = Field(min_length=1)
    current_index: int = 0
    content: Optional[SlideContent] = None

    @model_validator(mode="after")
    def _check_index(self) -> "PresentationState":
        if not 0 <= self.current_index < len(self.slides):
            raise ValueError(
                f"current_index {self.current_index} out of range for {len(self.slides)} slides"
            )
        return self

    @classmethod
    def from_config(cls, config: DeckConfig) -> "PresentationState":
        return cls(slides=list(config.slides))

    @property
    def total(self) -> int:
        return len(self.slides)

    @property
    def current_slide(self) -> SlideDescriptor:
        return self.slides[self.current_index]

    def with_content(self, content: SlideContent) -> "PresentationState":
        """Return a copy of this state holding freshly loaded content."""
        return self.model_copy(update={"content": content})


def advance(state: PresentationState) -> PresentationState:
    """Move to the next slide, staying put on the last one.

    The returned state has no content; the caller reloads the target slide.
    """
    index = min(state.current_index + 1, state.total - 1)
    return state.model_copy(update={"current_index": index, "content": None})


def retreat(state: PresentationState) -> PresentationState:
    """Move to the previous slide, staying put on the first one."""
    index = max(state.current_index - 1, 0)
    return state.model_copy(update={"current_index": index, "content": None})

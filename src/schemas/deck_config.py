"""Pydantic models for the deck configuration file.

The configuration names the slides in presentation order. Each slide carries
its own color mapping from content type to a terminal color name:

    slides:
      - file: slides/01.txt
        color: {title: red, subheader: blue, asciiart: green, body: white}

Color names are checked against the ANSI table when the file is loaded, so a
typo fails at startup instead of in the middle of a talk.
"""

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.schemas.slide_schema import ContentType
from src.utils.file_utils import load_config_data
from src.viewer.ansi import is_known_color


class ConfigParseError(ValueError):
    """The deck configuration is missing, malformed or invalid."""


class ColorConfig(BaseModel):
    """Terminal color name per content type."""

    model_config = ConfigDict(frozen=True)

    title: str
    subheader: str
    asciiart: str
    body: str

    @field_validator("title", "subheader", "asciiart", "body")
    @classmethod
    def _check_color_name(cls, value: str) -> str:
        if not is_known_color(value):
            raise ValueError(f"Unknown terminal color '{value}'")
        return value

    def for_type(self, content_type: ContentType | str) -> str:
        """Color for a content type; unknown types use the body color."""
        try:
            content_type = ContentType(content_type)
        except ValueError:
            return self.body
        return getattr(self, content_type.value)


class SlideDescriptor(BaseModel):
    """One slide of the deck: the file to read and how to color it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_path: Path = Field(alias="file")
    color_config: ColorConfig = Field(alias="color")


class DeckConfig(BaseModel):
    """Ordered list of slides making up a presentation."""

    slides: list[SlideDescriptor] = Field(min_length=1)

    @classmethod
    def load(cls, path: str | Path) -> "DeckConfig":
        """Load and validate a JSON or YAML deck configuration.

        Relative slide paths are resolved against the configuration file's
        directory. Any failure is raised as ConfigParseError.
        """
        path = Path(path)
        try:
            data = load_config_data(path)
        except FileNotFoundError as e:
            raise ConfigParseError(str(e)) from e
        except OSError as e:
            raise ConfigParseError(f"Could not read configuration {path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigParseError(f"Invalid configuration in {path}: {e}") from e

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(f"Invalid configuration in {path}: {e}") from e

        base_dir = path.resolve().parent
        return config.model_copy(
            update={"slides": [_resolve_slide(s, base_dir) for s in config.slides]}
        )


def _resolve_slide(slide: SlideDescriptor, base_dir: Path) -> SlideDescriptor:
    if slide.file_path.is_absolute():
        return slide
    return slide.model_copy(update={"file_path": base_dir / slide.file_path})

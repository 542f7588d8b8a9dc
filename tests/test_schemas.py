"""Tests for Pydantic schema models and deck configuration loading."""

import json

import pytest

from src.schemas.deck_config import ColorConfig, ConfigParseError, DeckConfig, SlideDescriptor
from src.schemas.slide_schema import ContentItem, ContentType, SlideContent


class TestSlideSchema:
    def test_content_type_enum(self):
        assert ContentType.TITLE == "title"
        assert ContentType.ASCIIART == "asciiart"
        assert len(ContentType) == 4

    def test_content_item_defaults(self):
        item = ContentItem(type="body")
        assert item.type == ContentType.BODY
        assert item.text == ""

    def test_slide_content_starts_empty(self, tmp_path):
        content = SlideContent(path=tmp_path / "a.txt")
        assert content.items == []


class TestColorConfig:
    def test_for_type(self, colors):
        cfg = ColorConfig(**colors)
        assert cfg.for_type(ContentType.TITLE) == "red"
        assert cfg.for_type(ContentType.ASCIIART) == "green"
        assert cfg.for_type("subheader") == "blue"

    def test_unknown_type_uses_body(self, colors):
        cfg = ColorConfig(**colors)
        assert cfg.for_type("footer") == "white"

    def test_missing_tag_rejected(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            ColorConfig(title="red", subheader="blue", asciiart="green")

    def test_unknown_color_rejected(self, colors):
        from pydantic import ValidationError

        colors["title"] = "chartreuse"
        with pytest.raises(ValidationError, match="Unknown terminal color"):
            ColorConfig(**colors)

    def test_chalk_style_names_accepted(self, colors):
        colors.update(title="redBright", body="bg_blue", subheader="bold")
        cfg = ColorConfig(**colors)
        assert cfg.title == "redBright"


class TestSlideDescriptor:
    def test_aliases(self, colors):
        slide = SlideDescriptor.model_validate({"file": "a.txt", "color": colors})
        assert slide.file_path.name == "a.txt"
        assert slide.color_config.title == "red"

    def test_field_names(self, colors):
        slide = SlideDescriptor(file_path="a.txt", color_config=ColorConfig(**colors))
        assert slide.file_path.name == "a.txt"


class TestDeckConfig:
    def test_load_json(self, make_deck):
        path = make_deck("A[title]", "B[title]", "C[title]")
        config = DeckConfig.load(path)
        assert len(config.slides) == 3
        assert [s.file_path.name for s in config.slides] == ["slide1.txt", "slide2.txt", "slide3.txt"]

    def test_relative_paths_resolve_against_config_dir(self, make_deck):
        path = make_deck("A[title]")
        config = DeckConfig.load(path)
        slide_path = config.slides[0].file_path
        assert slide_path.is_absolute()
        assert slide_path == path.resolve().parent / "slide1.txt"

    def test_absolute_paths_kept(self, tmp_path, colors):
        target = tmp_path / "elsewhere.txt"
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"slides": [{"file": str(target), "color": colors}]}))
        assert DeckConfig.load(path).slides[0].file_path == target

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "deck.yaml"
        path.write_text(
            "slides:\n"
            "  - file: one.txt\n"
            "    color: {title: red, subheader: blue, asciiart: green, body: white}\n"
        )
        config = DeckConfig.load(path)
        assert config.slides[0].color_config.asciiart == "green"

    def test_legacy_js_suffix_is_json(self, make_deck):
        path = make_deck("A[title]", name="config.js")
        assert len(DeckConfig.load(path).slides) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigParseError, match="not found"):
            DeckConfig.load(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{slides: [")
        with pytest.raises(ConfigParseError, match="Invalid configuration"):
            DeckConfig.load(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("slides: [unclosed\n")
        with pytest.raises(ConfigParseError):
            DeckConfig.load(path)

    def test_zero_slides_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"slides": []}))
        with pytest.raises(ConfigParseError):
            DeckConfig.load(path)

    def test_missing_color_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"slides": [{"file": "a.txt"}]}))
        with pytest.raises(ConfigParseError):
            DeckConfig.load(path)

    def test_bad_color_name_rejected(self, tmp_path, colors):
        colors["body"] = "not-a-color"
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"slides": [{"file": "a.txt", "color": colors}]}))
        with pytest.raises(ConfigParseError, match="Unknown terminal color"):
            DeckConfig.load(path)

    def test_error_is_value_error(self):
        assert issubclass(ConfigParseError, ValueError)

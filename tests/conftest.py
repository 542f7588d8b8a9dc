"""Shared fixtures for deck tests."""

import json

import pytest

COLORS = {"title": "red", "subheader": "blue", "asciiart": "green", "body": "white"}


@pytest.fixture
def colors():
    return dict(COLORS)


@pytest.fixture
def make_deck(tmp_path):
    """Write slide files plus a JSON config into tmp_path; return the config path."""

    def _make_deck(*slides: str, name: str = "config.json"):
        entries = []
        for i, text in enumerate(slides, start=1):
            slide_file = tmp_path / f"slide{i}.txt"
            slide_file.write_text(text, encoding="utf-8")
            entries.append({"file": slide_file.name, "color": dict(COLORS)})
        config_path = tmp_path / name
        config_path.write_text(json.dumps({"slides": entries}), encoding="utf-8")
        return config_path

    return _make_deck

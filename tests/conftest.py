"""pytest configuration and fixtures for hexshift tests."""

import pytest

from hexshift.shared.logger import set_quiet

SCHEME_XML = """<?xml version="1.0" encoding="UTF-8"?>
<scheme name="Retro Block" version="142" parent_scheme="Darcula">
  <!-- hand tuned -->
  <metaInfo>
    <property name="created">2024-01-01T00:00:00</property>
  </metaInfo>
  <colors>
    <option name="CARET_ROW_COLOR" value="171616" />
    <option name="GUTTER_BACKGROUND" value="121111" />
    <option name="ADDED_LINES_COLOR" value="abc" />
    <option name="CONSOLE_FONT_NAME" value="zzzzzz" />
  </colors>
  <attributes>
    <option name="DEFAULT_KEYWORD">
      <value>
        <option name="FOREGROUND" value="A9915B" />
        <option name="FONT_TYPE" value="1" />
        <option name="EFFECT_TYPE" value="abc" />
      </value>
    </option>
    <option name="TEXT" baseAttributes="DEFAULT_TEXT" />
  </attributes>
</scheme>
"""

THEME_JSON = """{
  "name": "Retro Block",
  "dark": true,
  "author": "someone",
  "editorScheme": "/themes/retro-block.xml",
  "colors": {
    "bg": "#121111",
    "accent": "#A9915B"
  },
  "ui": {
    "*": {
      "background": "bg",
      "foreground": "#A6A6A6"
    },
    "Button": {
      "arc": 3,
      "startBorderColor": "#5c798a"
    }
  },
  "icons": {
    "ColorPalette": {
      "Actions.Grey": "#625B51"
    }
  },
  "swatches": ["#FF2828", "plain"]
}
"""


@pytest.fixture(autouse=True)
def _loud_logger():
    set_quiet(False)
    yield
    set_quiet(False)


@pytest.fixture
def themes_dir(tmp_path):
    """A directory holding retro-block.xml and retro-block.theme.json."""
    (tmp_path / "retro-block.xml").write_text(SCHEME_XML, encoding="utf-8")
    (tmp_path / "retro-block.theme.json").write_text(THEME_JSON, encoding="utf-8")
    return tmp_path

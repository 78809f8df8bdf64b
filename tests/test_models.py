from pathlib import Path

import pytest
from pydantic import ValidationError

from htmlformat.models import FormatOptions, load_options


def test_default_indent_is_two_spaces() -> None:
    assert FormatOptions().indent == "  "


@pytest.mark.parametrize("indent", ["", "\t", "    ", " \t"])
def test_blank_indents_are_accepted(indent: str) -> None:
    assert FormatOptions(indent=indent).indent == indent


@pytest.mark.parametrize("indent", ["--", "\n", " x "])
def test_other_indents_are_rejected(indent: str) -> None:
    with pytest.raises(ValidationError):
        FormatOptions(indent=indent)


def test_unknown_options_are_rejected() -> None:
    with pytest.raises(ValidationError):
        FormatOptions.model_validate({"indent": "  ", "width": 80})


def test_load_options_from_yaml(tmp_path: Path) -> None:
    config = tmp_path / "htmlformat.yaml"
    config.write_text('indent: "\\t"\n', encoding="utf-8")
    assert load_options(config).indent == "\t"


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    config = tmp_path / "htmlformat.yaml"
    config.write_text("", encoding="utf-8")
    assert load_options(config) == FormatOptions()


@pytest.mark.parametrize(
    "content, message",
    [
        ("- indent\n", "must contain a mapping"),
        ("indent: 'ab'\n", "Invalid options"),
        ("indent: [\n", "Invalid YAML"),
    ],
)
def test_bad_config_exits(tmp_path: Path, content: str, message: str) -> None:
    config = tmp_path / "htmlformat.yaml"
    config.write_text(content, encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        load_options(config)
    assert message in str(exc.value)


def test_missing_config_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        load_options(tmp_path / "missing.yaml")
    assert "Config file not found" in str(exc.value)

import json
import os

import pytest

from classgen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


def test_csharp_defaults():
    config = load_config("csharp")

    assert config.indent == "\t"
    assert config.line_ending == os.linesep
    assert config.auto_generation_comment == "// Auto-generated code"


def test_custom_overrides_and_unknown_keys_go_to_custom():
    config = ConfigManager().get_config(
        "csharp", custom_config={"line_ending": "\n", "file_header": "x"}
    )

    assert config.line_ending == "\n"
    assert config.custom == {"file_header": "x"}


def test_config_file_round_trip(tmp_path):
    manager = ConfigManager()
    path = tmp_path / "classgen.json"
    manager.save_config(GeneratorConfig(indent="    ", custom={"team": "core"}), path)

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["indent"] == "    "
    assert saved["team"] == "core"

    loaded = manager.get_config("csharp", config_file=path)
    assert loaded.indent == "    "
    assert loaded.custom == {"team": "core"}


def test_custom_config_wins_over_file(tmp_path):
    path = tmp_path / "classgen.json"
    path.write_text(json.dumps({"indent": "  "}), encoding="utf-8")

    config = load_config("csharp", custom_config={"indent": "\t"}, config_file=path)

    assert config.indent == "\t"


@pytest.mark.parametrize(
    "name, content, message",
    [
        ("missing.json", None, "not found"),
        ("config.yaml", "indent: x", "must be JSON"),
        ("broken.json", "{not json", "Invalid JSON"),
        ("list.json", "[1, 2]", "JSON object"),
    ],
)
def test_bad_config_files(tmp_path, name, content, message):
    path = tmp_path / name
    if content is not None:
        path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config("csharp", config_file=path)


def test_validate_config():
    manager = ConfigManager()

    assert manager.validate_config(GeneratorConfig(line_ending="\n")) == []
    warnings = manager.validate_config(
        GeneratorConfig(indent="x", line_ending="|", auto_generation_comment="auto")
    )
    assert len(warnings) == 3


def test_list_languages():
    assert ConfigManager().list_languages() == ["csharp"]

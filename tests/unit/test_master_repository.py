import json
import os

import jsonschema
import pytest

from src.master_repository import MasterData, list_languages, load_master_files


def test_load_builds_both_views(master_dir):
    master = load_master_files(master_dir)

    assert master.languages == ["en", "ko"]
    assert master.modules == ["common", "user_profile"]
    assert master.data["common"]["en"] == {
        "greeting": "Hi {{platform}}",
        "farewell": "Bye",
        "quote": 'Say "cheese"',
    }
    assert master.data["common"]["ko"] == {"farewell": "안녕히 가세요", "only_ko": "한국어"}
    assert "ko" not in master.data["user_profile"]
    assert master.raw_files["common"]["en"][0] == {"type": "comment", "value": "Greetings"}


def test_raw_entries_match_value_keys(master_dir):
    master = load_master_files(master_dir)

    for module, per_language in master.raw_files.items():
        for lang, items in per_language.items():
            entry_keys = [item["key"] for item in items if item["type"] == "entry"]
            assert sorted(entry_keys) == sorted(master.data[module][lang])


def test_non_directories_and_other_extensions_are_ignored(master_dir):
    with open(os.path.join(master_dir, "README.md"), "w", encoding="utf-8") as f:
        f.write("notes")
    with open(os.path.join(master_dir, "en", "common.json"), "w", encoding="utf-8") as f:
        f.write("{}")

    master = load_master_files(master_dir)

    assert master.languages == ["en", "ko"]
    assert master.modules == ["common", "user_profile"]


def test_languages_are_sorted(tmp_path):
    for lang in ["zh", "de", "ja"]:
        os.makedirs(tmp_path / lang)
    assert list_languages(str(tmp_path)) == ["de", "ja", "zh"]


def test_empty_language_directory_is_kept(tmp_path, write_master):
    os.makedirs(tmp_path / "fr")
    write_master(str(tmp_path), "en", "common", '{"a": "A"}')

    master = load_master_files(str(tmp_path))

    assert master.languages == ["en", "fr"]
    assert master.data == {"common": {"en": {"a": "A"}}}


def test_malformed_file_aborts_load(tmp_path, write_master):
    write_master(str(tmp_path), "en", "common", '{"a": "A"}')
    write_master(str(tmp_path), "ko", "common", '{"a": "A" "b": "B"}')

    with pytest.raises(json.JSONDecodeError):
        load_master_files(str(tmp_path))


def test_non_string_value_aborts_load(tmp_path, write_master):
    write_master(str(tmp_path), "en", "common", '{"a": ["A"]}')

    with pytest.raises(jsonschema.ValidationError):
        load_master_files(str(tmp_path))


def test_missing_master_dir_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_master_files(str(tmp_path / "missing"))


def test_master_data_is_frozen():
    master = MasterData(languages=["en"])
    with pytest.raises(AttributeError):
        master.languages = ["ko"]

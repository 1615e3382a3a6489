import json
import os
from dataclasses import dataclass, field
from typing import Dict, List

import jsonschema

from src.jsonc_parser import parse_master_file
from src.logging_config import get_logger

MASTER_FILE_EXTENSION = '.jsonc'

logger = get_logger()


@dataclass(frozen=True)
class MasterData:
    """In-memory view of the master translation tree."""
    languages: List[str]
    # data[module][language] = {key: value}
    data: Dict[str, Dict[str, Dict[str, str]]] = field(default_factory=dict)
    # raw_files[module][language] = ordered comment/entry items
    raw_files: Dict[str, Dict[str, List[Dict]]] = field(default_factory=dict)

    @property
    def modules(self) -> List[str]:
        return list(self.data)


def list_languages(master_dir: str) -> List[str]:
    """Return the language codes, i.e. the subdirectories of `master_dir`, sorted."""
    return sorted(
        entry for entry in os.listdir(master_dir)
        if os.path.isdir(os.path.join(master_dir, entry))
    )


def list_module_files(language_dir: str) -> List[str]:
    """Return the sorted master file names inside a language directory."""
    return sorted(
        name for name in os.listdir(language_dir)
        if name.endswith(MASTER_FILE_EXTENSION)
    )


def load_master_files(master_dir: str) -> MasterData:
    """
    Read every `<language>/<module>.jsonc` file under `master_dir`.

    Args:
        master_dir: Root of the master tree.

    Returns:
        MasterData holding the key/value view and the ordered-item view of each file.

    Raises:
        OSError: If `master_dir` or a file cannot be read.
        json.JSONDecodeError: If a master file is malformed.
        jsonschema.ValidationError: If a master file is not a flat string map.
    """
    languages = list_languages(master_dir)
    data: Dict[str, Dict[str, Dict[str, str]]] = {}
    raw_files: Dict[str, Dict[str, List[Dict]]] = {}

    for lang in languages:
        lang_dir = os.path.join(master_dir, lang)
        for file_name in list_module_files(lang_dir):
            module = file_name[:-len(MASTER_FILE_EXTENSION)]
            file_path = os.path.join(lang_dir, file_name)

            try:
                parsed_items, translations = parse_master_file(file_path)
            except json.JSONDecodeError as e:
                logger.error("Malformed master file '%s': %s", file_path, e)
                raise
            except jsonschema.ValidationError as e:
                logger.error("Master file '%s' is not a flat string map: %s", file_path, e.message)
                raise

            data.setdefault(module, {})[lang] = translations
            raw_files.setdefault(module, {})[lang] = parsed_items
            logger.debug("Parsed '%s': %d keys, %d items", file_path, len(translations), len(parsed_items))

    return MasterData(languages=languages, data=data, raw_files=raw_files)

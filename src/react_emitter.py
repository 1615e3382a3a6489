import json
import os
from typing import Dict, List

from src.logging_config import get_logger
from src.text_utils import Platform, replace_platform

logger = get_logger()


def generate_react(
    data: Dict[str, Dict[str, Dict[str, str]]],
    languages: List[str],
    output_dir: str,
    platform_names: Dict[str, str]
) -> List[str]:
    """
    Write a flat `<output_dir>/react/<language>/<module>.json` per language/module pair.

    Returns:
        List[str]: Paths of the written files.
    """
    written = []
    for lang in languages:
        react_dir = os.path.join(output_dir, 'react', lang)
        os.makedirs(react_dir, exist_ok=True)

        for module, translations in data.items():
            if lang not in translations:
                continue

            replaced = {
                key: replace_platform(value, Platform.REACT, platform_names)
                for key, value in translations[lang].items()
            }
            file_name = f'{module}.json'
            file_path = os.path.join(react_dir, file_name)
            with open(file_path, 'w', encoding='utf-8') as file:
                json.dump(replaced, file, indent=2, ensure_ascii=False)
            logger.info("React (%s): %s", lang, file_name)
            written.append(file_path)
    return written

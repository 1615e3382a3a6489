import json
import os
import re
from typing import Dict, List

from src.logging_config import get_logger
from src.text_utils import Platform, replace_platform, to_pascal_case

XCSTRINGS_EXTENSION = '.xcstrings'
XCSTRINGS_VERSION = '1.0'

# Xcode writes `"key" : value`; json.dumps with indent puts one key per line.
_KEY_COLON = re.compile(r'^(\s*"(?:[^"\\]|\\.)*"): ', re.MULTILINE)

logger = get_logger()


def collect_keys(translations: Dict[str, Dict[str, str]], languages: List[str]) -> List[str]:
    """Union of keys over all languages of a module, in first-seen order."""
    keys: Dict[str, None] = {}
    for lang in languages:
        for key in translations.get(lang, {}):
            keys.setdefault(key, None)
    return list(keys)


def build_xcstrings(
    translations: Dict[str, Dict[str, str]],
    languages: List[str],
    source_language: str,
    platform_names: Dict[str, str]
) -> Dict:
    """
    Build the string catalog document for one module.

    A language without a key simply has no localization for it.
    """
    strings = {}
    for key in collect_keys(translations, languages):
        localizations = {}
        for lang in languages:
            lang_translations = translations.get(lang)
            if lang_translations is None or key not in lang_translations:
                continue
            localizations[lang] = {
                'stringUnit': {
                    'state': 'translated',
                    'value': replace_platform(lang_translations[key], Platform.IOS, platform_names),
                }
            }
        strings[key] = {
            'extractionState': 'manual',
            'localizations': localizations,
        }

    return {
        'sourceLanguage': source_language,
        'strings': strings,
        'version': XCSTRINGS_VERSION,
    }


def format_xcstrings(document: Dict) -> str:
    """Serialize a catalog the way Xcode pretty-prints it."""
    json_str = json.dumps(document, indent=2, ensure_ascii=False)
    return _KEY_COLON.sub(r'\1 : ', json_str)


def generate_ios(
    data: Dict[str, Dict[str, Dict[str, str]]],
    languages: List[str],
    output_dir: str,
    source_language: str,
    platform_names: Dict[str, str]
) -> List[str]:
    """
    Write one `<ModuleName>.xcstrings` catalog per module into `<output_dir>/ios`.

    Returns:
        List[str]: Paths of the written files.
    """
    ios_dir = os.path.join(output_dir, 'ios')
    os.makedirs(ios_dir, exist_ok=True)

    written = []
    for module, translations in data.items():
        document = build_xcstrings(translations, languages, source_language, platform_names)
        file_name = to_pascal_case(module) + XCSTRINGS_EXTENSION
        file_path = os.path.join(ios_dir, file_name)
        with open(file_path, 'w', encoding='utf-8') as file:
            file.write(format_xcstrings(document))
        logger.info("iOS: %s", file_name)
        written.append(file_path)
    return written

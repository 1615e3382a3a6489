import os
from typing import Dict, List

from src.logging_config import get_logger
from src.text_utils import Platform, escape_xml, replace_platform

XML_HEADER = '<?xml version="1.0" encoding="utf-8"?>\n<resources>\n'
XML_FOOTER = '</resources>\n'
INDENT = '    '

logger = get_logger()


def values_dir_name(language: str, source_language: str) -> str:
    """`values` for the source language, `values-<code>` for every other one."""
    if language == source_language:
        return 'values'
    return f'values-{language}'


def build_strings_xml(items: List[Dict], platform_names: Dict[str, str]) -> str:
    """
    Render ordered comment/entry items as an Android `<resources>` document.

    Args:
        items: Items from the structured parser, in source order.
        platform_names: Display name per platform value.

    Returns:
        str: The XML document.
    """
    parts = [XML_HEADER]
    for item in items:
        if item['type'] == 'comment':
            parts.append(f"\n{INDENT}<!-- {item['value']} -->\n")
        elif item['type'] == 'entry':
            value = escape_xml(replace_platform(item['value'], Platform.ANDROID, platform_names))
            parts.append(f'{INDENT}<string name="{item["key"]}">{value}</string>\n')
    parts.append(XML_FOOTER)
    return ''.join(parts)


def generate_android(
    raw_files: Dict[str, Dict[str, List[Dict]]],
    languages: List[str],
    output_dir: str,
    source_language: str,
    platform_names: Dict[str, str]
) -> List[str]:
    """
    Write `strings_<module>.xml` for each language/module pair found in `raw_files`.

    Returns:
        List[str]: Paths of the written files.
    """
    written = []
    for lang in languages:
        android_dir = os.path.join(output_dir, 'android', values_dir_name(lang, source_language))
        os.makedirs(android_dir, exist_ok=True)

        for module, per_language in raw_files.items():
            if lang not in per_language:
                continue

            file_name = f'strings_{module}.xml'
            file_path = os.path.join(android_dir, file_name)
            with open(file_path, 'w', encoding='utf-8') as file:
                file.write(build_strings_xml(per_language[lang], platform_names))
            logger.info("Android (%s): %s", lang, file_name)
            written.append(file_path)
    return written

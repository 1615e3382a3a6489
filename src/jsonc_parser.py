import json
import re
from typing import Dict, List, Tuple

import jsonschema

# Master files are a single flat object of string keys to string values.
MASTER_FILE_SCHEMA = {
    "type": "object",
    "patternProperties": {
        "^.*$": {"type": "string"}
    },
    "additionalProperties": False
}

_FULL_LINE_COMMENT = re.compile(r'^\s*//.*$', re.MULTILINE)
_BLOCK_COMMENT = re.compile(r'/\*[\s\S]*?\*/')
_COMMA_TRAILING_COMMENT = re.compile(r',(\s*)//.*$', re.MULTILINE)
# ASCII-only class: non-ASCII letters before `//` stay part of the value.
_INLINE_COMMENT = re.compile(r'(["\d\w])(\s*)//.*$', re.MULTILINE | re.ASCII)
_TRAILING_COMMA = re.compile(r',(\s*[}\]])')

_ENTRY_LINE = re.compile(r'^"([^"]+)"\s*:\s*"(.*)"')


def strip_jsonc(content: str) -> str:
    """
    Remove comments and a trailing comma from JSONC text.

    Comment markers inside string values are not recognised as such:
    a value with `//` after a quote, digit or word character is cut there.
    """
    content = _FULL_LINE_COMMENT.sub('', content)
    content = _BLOCK_COMMENT.sub('', content)
    content = _COMMA_TRAILING_COMMENT.sub(r',\1', content)
    content = _INLINE_COMMENT.sub(r'\1\2', content)
    return _TRAILING_COMMA.sub(r'\1', content)


def parse_jsonc(content: str) -> Dict[str, str]:
    """
    Parse JSONC text into a flat key/value mapping.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON once comments are removed.
    """
    return json.loads(strip_jsonc(content))


def parse_jsonc_with_comments(content: str) -> List[Dict]:
    """
    Scan JSONC text line by line, keeping comments and entries in source order.

    Only single-line `"key": "value"` entries and `//` comments produce items;
    every other line (braces, blanks, block comments, multi-line values) is skipped.

    Args:
        content (str): The raw file content.

    Returns:
        List[Dict]: Items of the form {'type': 'comment', 'value': ...}
        or {'type': 'entry', 'key': ..., 'value': ...}.
    """
    items = []
    for line in content.split('\n'):
        trimmed = line.strip()

        if trimmed.startswith('//'):
            comment = trimmed[2:].strip()
            if comment:
                items.append({'type': 'comment', 'value': comment})
            continue

        match = _ENTRY_LINE.match(trimmed)
        if match:
            items.append({
                'type': 'entry',
                'key': match.group(1),
                'value': match.group(2).replace('\\"', '"'),
            })
    return items


def parse_master_file(file_path: str) -> Tuple[List[Dict], Dict[str, str]]:
    """
    Read a master .jsonc file once and build both of its views.

    Args:
        file_path (str): The path to the .jsonc file.

    Returns:
        Tuple[List[Dict], Dict[str, str]]: The ordered items and the key/value mapping.

    Raises:
        json.JSONDecodeError: If the document is malformed.
        jsonschema.ValidationError: If the document is not a flat map of strings.
    """
    with open(file_path, 'r', encoding='utf-8') as file:
        content = file.read()

    translations = parse_jsonc(content)
    jsonschema.validate(instance=translations, schema=MASTER_FILE_SCHEMA)
    return parse_jsonc_with_comments(content), translations

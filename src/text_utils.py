"""String transforms shared by the platform emitters."""
from enum import Enum
from typing import Dict

PLATFORM_PLACEHOLDER = '{{platform}}'


class Platform(str, Enum):
    IOS = 'ios'
    ANDROID = 'android'
    REACT = 'react'


DEFAULT_PLATFORM_NAMES: Dict[str, str] = {
    Platform.IOS.value: 'iOS',
    Platform.ANDROID.value: 'Android',
    Platform.REACT.value: 'React',
}


def replace_platform(text: str, platform: Platform, platform_names: Dict[str, str]) -> str:
    """
    Replace every platform placeholder in `text` with the platform's display name.

    Args:
        text: The translated string.
        platform: The platform being generated.
        platform_names: Display name per platform value.

    Returns:
        The substituted string; unchanged when it holds no placeholder.
    """
    return text.replace(PLATFORM_PLACEHOLDER, platform_names[Platform(platform).value])


def escape_xml(text: str) -> str:
    """
    Escape a value for an Android string resource.

    `&`, `<`, `>` and `"` become XML entities; `'` becomes `\\'`,
    which is how Android string resources escape apostrophes.
    """
    return (text
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
            .replace("'", "\\'"))


def to_pascal_case(name: str) -> str:
    """Turn `snake_case` module names into `SnakeCase`."""
    return ''.join(word[:1].upper() + word[1:] for word in name.split('_'))

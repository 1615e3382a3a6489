import os
import textwrap

import pytest

from src.app_config import AppConfig

PLATFORM_NAMES = {"ios": "iOS", "android": "Android", "react": "React"}

EN_COMMON = textwrap.dedent("""\
    {
      // Greetings
      "greeting": "Hi {{platform}}",
      "farewell": "Bye", // shown on logout
      /* block comment
         spanning lines */
      "quote": "Say \\"cheese\\"",
    }
""")

KO_COMMON = textwrap.dedent("""\
    {
      "farewell": "안녕히 가세요",
      "only_ko": "한국어",
    }
""")

EN_USER_PROFILE = textwrap.dedent("""\
    {
      "title": "Profile & Settings"
    }
""")


def write_master_file(master_dir, language, module, content):
    """Write `<master_dir>/<language>/<module>.jsonc`."""
    lang_dir = os.path.join(master_dir, language)
    os.makedirs(lang_dir, exist_ok=True)
    file_path = os.path.join(lang_dir, f"{module}.jsonc")
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(content)
    return file_path


@pytest.fixture
def master_dir(tmp_path):
    """A master tree with `en` (common, user_profile) and `ko` (common only)."""
    root = tmp_path / "master"
    write_master_file(str(root), "en", "common", EN_COMMON)
    write_master_file(str(root), "en", "user_profile", EN_USER_PROFILE)
    write_master_file(str(root), "ko", "common", KO_COMMON)
    return str(root)


@pytest.fixture
def app_config(tmp_path, master_dir):
    """Configuration pointing at the temporary master and output trees."""
    return AppConfig(
        project_root=str(tmp_path),
        master_dir=master_dir,
        output_dir=str(tmp_path / "translations"),
        source_language="en",
        platform_names=dict(PLATFORM_NAMES)
    )


@pytest.fixture
def write_master():
    """Expose `write_master_file` to tests that build their own trees."""
    return write_master_file

import os
import shutil
import sys
from typing import List

from tqdm import tqdm

from src.android_emitter import generate_android
from src.app_config import AppConfig, load_app_config
from src.ios_emitter import generate_ios
from src.logging_config import get_logger
from src.master_repository import load_master_files
from src.react_emitter import generate_react

logger = get_logger()


def clean_output_dir(output_dir: str) -> None:
    """Delete the previous output tree so every run starts from scratch."""
    if os.path.exists(output_dir):
        shutil.rmtree(output_dir)
        logger.info("Removed existing output directory '%s'.", output_dir)


def main(config: AppConfig) -> List[str]:
    """
    Compile the master translation tree into the iOS, Android and React bundles.

    Returns:
        List[str]: Paths of every written file.
    """
    logger.info("Generating localization bundles...")

    clean_output_dir(config.output_dir)

    # Everything is parsed before the first file is written.
    master = load_master_files(config.master_dir)

    logger.info("Modules: %s", ', '.join(master.modules))
    logger.info("Languages: %s", ', '.join(master.languages))

    stages = [
        ('iOS', lambda: generate_ios(
            master.data, master.languages, config.output_dir,
            config.source_language, config.platform_names)),
        ('Android', lambda: generate_android(
            master.raw_files, master.languages, config.output_dir,
            config.source_language, config.platform_names)),
        ('React', lambda: generate_react(
            master.data, master.languages, config.output_dir, config.platform_names)),
    ]

    written: List[str] = []
    for name, stage in tqdm(stages, desc="Platforms", unit="platform"):
        logger.debug("Running %s stage.", name)
        written.extend(stage())

    logger.info("Done. Wrote %d file(s) to '%s'.", len(written), config.output_dir)
    return written


def run() -> None:
    """Console entry point."""
    config = load_app_config()
    try:
        main(config)
    except Exception as main_exc:
        logger.error("Bundle generation failed: %s", main_exc)
        sys.exit(1)


if __name__ == "__main__":
    run()

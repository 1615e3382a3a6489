"""Application configuration module for the bundle generator."""
import logging
import os
import sys
from dataclasses import dataclass
from typing import Dict, Any

import yaml
from dotenv import load_dotenv

from src.logging_config import setup_logger
from src.text_utils import DEFAULT_PLATFORM_NAMES

DEFAULT_SOURCE_LANGUAGE = 'en'
DEFAULT_MASTER_DIR = 'master'
DEFAULT_OUTPUT_DIR = 'translations'
DEFAULT_LOG_FILE_PATH = 'logs/i18n_generation.log'


@dataclass
class AppConfig:
    """Application configuration dataclass."""
    project_root: str
    master_dir: str
    output_dir: str
    source_language: str
    platform_names: Dict[str, str]


def _compute_project_root() -> str:
    """Compute the project root directory."""
    script_real_path = os.path.realpath(__file__)
    script_dir = os.path.dirname(script_real_path)
    return os.path.abspath(os.path.join(script_dir, os.pardir))


def _load_dotenv_files(project_root: str) -> None:
    """Load .env files from project root or docker directory."""
    dotenv_path_project_root = os.path.join(project_root, '.env')
    dotenv_path_docker_dir = os.path.join(project_root, 'docker', '.env')

    if os.path.exists(dotenv_path_project_root):
        load_dotenv(dotenv_path_project_root)
    elif os.path.exists(dotenv_path_docker_dir):
        load_dotenv(dotenv_path_docker_dir)


def _load_yaml_config(project_root: str) -> Dict[str, Any]:
    """Load the YAML configuration file, falling back to an empty config on any problem."""
    default_config_path = os.path.join(project_root, 'config.yaml')
    config_file = os.environ.get('I18N_CONFIG_FILE', default_config_path)

    if not os.path.isabs(config_file):
        config_file = os.path.abspath(config_file)

    config = {}
    try:
        if not os.path.exists(config_file):
            print(f"Warning: Configuration file '{config_file}' not found. Using default configuration.",
                  file=sys.stderr)
            return config

        if not os.access(config_file, os.R_OK):
            print(f"Error: Configuration file '{config_file}' exists but is not readable. Check file permissions.",
                  file=sys.stderr)
            return config

        with open(config_file, 'r', encoding='utf-8') as config_file_stream:
            loaded_config = yaml.safe_load(config_file_stream)
            if loaded_config is None:
                print(f"Warning: Configuration file '{config_file}' is empty. Using default configuration.",
                      file=sys.stderr)
            elif isinstance(loaded_config, dict):
                config = loaded_config
            else:
                print(f"Error: Configuration file '{config_file}' must contain a YAML dictionary. Using defaults.",
                      file=sys.stderr)

    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML in configuration file '{config_file}': {e}", file=sys.stderr)
        print("Using default configuration.", file=sys.stderr)
    except OSError as e:
        print(f"Error: Could not read configuration file '{config_file}': {e}", file=sys.stderr)
        print("Using default configuration.", file=sys.stderr)

    return config


def _setup_logger_from_config(config: Dict[str, Any]) -> logging.Logger:
    """Set up logger based on configuration."""
    log_config = config.get('logging') or {}
    log_level_str = log_config.get('log_level', 'INFO').upper()
    log_file_path = log_config.get('log_file_path', DEFAULT_LOG_FILE_PATH)
    log_to_console = log_config.get('log_to_console', True)
    return setup_logger(log_level_str, log_file_path, log_to_console)


def _resolve_dir(project_root: str, path: str) -> str:
    """Resolve a configured directory against the project root."""
    if os.path.isabs(path):
        return path
    return os.path.abspath(os.path.join(project_root, path))


def _build_platform_names(configured: Dict[str, str]) -> Dict[str, str]:
    """Merge configured platform display names over the defaults."""
    platform_names = dict(DEFAULT_PLATFORM_NAMES)
    for platform, name in (configured or {}).items():
        if platform in platform_names and name:
            platform_names[platform] = str(name)
    return platform_names


def load_app_config() -> AppConfig:
    """
    Load application configuration from YAML file and environment variables.

    Returns:
        AppConfig: The loaded application configuration.
    """
    project_root = _compute_project_root()

    _load_dotenv_files(project_root)

    config = _load_yaml_config(project_root)

    logger = _setup_logger_from_config(config)

    master_dir = os.environ.get('I18N_MASTER_DIR', config.get('master_dir', DEFAULT_MASTER_DIR))
    output_dir = os.environ.get('I18N_OUTPUT_DIR', config.get('output_dir', DEFAULT_OUTPUT_DIR))
    source_language = os.environ.get(
        'I18N_SOURCE_LANGUAGE', config.get('source_language', DEFAULT_SOURCE_LANGUAGE)
    )

    app_config = AppConfig(
        project_root=project_root,
        master_dir=_resolve_dir(project_root, master_dir),
        output_dir=_resolve_dir(project_root, output_dir),
        source_language=source_language,
        platform_names=_build_platform_names(config.get('platform_names', {}))
    )
    logger.debug("Master directory: %s", app_config.master_dir)
    logger.debug("Output directory: %s", app_config.output_dir)
    return app_config

# fedora-postinstall/fedora_postinstall/config_loader.py

import copy
import json
from pathlib import Path
from typing import Dict, Any, Union

from rich.markup import escape

from fedora_postinstall import console_output as con
from fedora_postinstall.config import CONFIG_FILE_NAME, DEFAULT_CONFIG
from fedora_postinstall.logger_utils import app_logger

def load_configuration(config_file: Union[str, Path] = CONFIG_FILE_NAME) -> Dict[str, Any]:
    """
    Returns the built-in package lists, overridden by any known keys found in
    the optional JSON file. A missing file is not an error; an unreadable one
    is reported and ignored.
    """
    app_config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = Path(config_file)
    if not config_path.is_file():
        app_logger.info(f"No configuration file at '{config_path}', using built-in defaults.")
        return app_config

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            overrides = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, IOError) as e:
        con.print_error(f"Error loading configuration file '{escape(str(config_file))}': {escape(str(e))}. Using built-in defaults.")
        app_logger.error(f"Failed to load '{config_path}': {e}", exc_info=True)
        return app_config

    if not isinstance(overrides, dict):
        con.print_error(f"Configuration file '{escape(str(config_file))}' must contain a JSON object. Using built-in defaults.")
        return app_config

    for key, value in overrides.items():
        if key not in app_config:
            app_logger.warning(f"Ignoring unknown configuration key '{key}' in '{config_path}'.")
            continue
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            con.print_warning(f"Configuration key '{escape(key)}' must be a list of strings, keeping the default.")
            continue
        app_config[key] = value
        app_logger.info(f"Configuration key '{key}' overridden from '{config_path}'.")

    return app_config

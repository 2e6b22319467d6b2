"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "microdot-labels"
APP_AUTHOR = "microdot"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_OUTPUT_FORMAT = "MICRODOT_LABELS_FORMAT"

OUTPUT_FORMATS = ("table", "json", "yaml", "csv")
DEFAULT_FORMAT = "table"

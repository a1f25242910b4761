"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "lagoon-cli"
APP_AUTHOR = "Lagoon"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_API_URL = "LAGOON_API_URL"
ENV_API_TOKEN = "LAGOON_API_TOKEN"
ENV_PROFILE = "LAGOON_PROFILE"

# API defaults
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
GRAPHQL_PATH = "/graphql"

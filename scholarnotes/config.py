"""
ScholarNotes Configuration Module
Centralized configuration for the application.

Defaults live here as module constants. A few API and throttling values can
be overridden per user through CONFIG_DIR/settings.yaml, and credentials are
read from the environment (optionally from a .env file).
"""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()

# Debug Mode Configuration
DEBUG_MODE = os.environ.get('DEBUG', 'false').lower() == 'true'

# Application Paths
APP_NAME = "ScholarNotes"
APPDATA_DIR = Path(os.environ.get('APPDATA', os.path.expanduser('~/.config'))) / APP_NAME
LOGS_DIR = APPDATA_DIR / "logs"
CONFIG_DIR = APPDATA_DIR / "config"
USER_SETTINGS_FILE = CONFIG_DIR / "settings.yaml"

# Upload Limits
MAX_FILE_SIZE_MB = 50
ACCEPTED_MIME_TYPE = "application/pdf"

# Progress Accounting
# Text extraction owns the first 20% of the bar, the reduction stages the rest
EXTRACTION_PROGRESS_SHARE = 20

# Hierarchical Reduction
# Every aggregation level combines at most FAN_IN summaries from the level below.
# Not user-configurable: group counts downstream depend on it.
FAN_IN = 3
SUMMARY_SEPARATOR = "\n\n"

# Completion Request Parameters
SUMMARY_TEMPERATURE = 0.5
SUMMARY_MAX_TOKENS = 500

# Self-throttle between consecutive summarization calls (seconds)
CALL_INTERVAL_SECONDS = 1.0

# AI Service Configuration (OpenAI-compatible chat completions API)
OPENAI_API_BASE = os.environ.get('OPENAI_API_BASE', "https://api.openai.com/v1")
OPENAI_MODEL_NAME = os.environ.get('OPENAI_MODEL', "gpt-3.5-turbo")
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
API_TIMEOUT_SECONDS = 120

# User-facing error messages
RATE_LIMIT_MESSAGE = "We're experiencing high demand. Please try again in a few minutes."
GENERIC_ERROR_MESSAGE = "An error occurred while processing the PDF. Please try again."

# Logging Configuration
LOG_FILE = LOGS_DIR / "processing.log"
DEBUG_LOG_FILE = LOGS_DIR / "debug_flow.txt"
LOG_FORMAT = "[%(levelname)s %(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# --- User Settings Overrides ---
USER_SETTINGS = {}
OVERRIDABLE_SETTINGS = ('api_base', 'model', 'timeout_seconds', 'call_interval_seconds')
NUMERIC_SETTINGS = ('timeout_seconds', 'call_interval_seconds')


def load_user_settings(settings_file: Path = USER_SETTINGS_FILE) -> dict:
    """
    Load per-user overrides from a YAML file.

    Unknown keys are dropped, and so are values of the wrong type or range.
    A missing file means "no overrides"; an unreadable or malformed file is
    reported and ignored.

    Args:
        settings_file: Path to the YAML settings file.

    Returns:
        Dict containing only the recognised override keys.
    """
    global USER_SETTINGS
    try:
        with open(settings_file, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        USER_SETTINGS = {}
        return USER_SETTINGS
    except (OSError, yaml.YAMLError) as e:
        from scholarnotes.logging_config import warning
        warning(f"[Config] Ignoring unreadable settings file {settings_file}: {e}")
        USER_SETTINGS = {}
        return USER_SETTINGS

    if not isinstance(data, dict):
        from scholarnotes.logging_config import warning
        warning(f"[Config] Ignoring settings file {settings_file}: expected a mapping")
        data = {}

    USER_SETTINGS = {}
    for key, value in data.items():
        if key not in OVERRIDABLE_SETTINGS:
            continue
        if not _valid_override(key, value):
            from scholarnotes.logging_config import warning
            warning(f"[Config] Ignoring invalid {key!r} in {settings_file}: {value!r}")
            continue
        USER_SETTINGS[key] = value
    return USER_SETTINGS


def _valid_override(key: str, value) -> bool:
    """Check one override value against the type and range its setting allows."""
    if key in NUMERIC_SETTINGS:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return value > 0 if key == 'timeout_seconds' else value >= 0
    return isinstance(value, str) and bool(value.strip())


def get_setting(key: str, default):
    """
    Return a user override for `key`, or `default` when none is set.

    Args:
        key: One of OVERRIDABLE_SETTINGS.
        default: Module-level default to fall back on.
    """
    return USER_SETTINGS.get(key, default)


def get_api_key() -> str | None:
    """Read the API key from the environment at call time."""
    return os.environ.get(OPENAI_API_KEY_ENV) or None


# Load overrides on module import
load_user_settings()

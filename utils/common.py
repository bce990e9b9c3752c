"""
Countries & Continents Common Utilities

Shared utility functions used across the application including:
- Session state management per page section
- Application settings stored in the per-user config directory
- Session log archival
- Logging wrapper for Streamlit callbacks
"""

import os
import json
import shutil
import functools
import traceback
from datetime import datetime

import streamlit as st
from appdirs import user_config_dir

from utils.config import (
    APP_NAME,
    LOG_FILE_PATH,
    PREVIOUS_SESSIONS_DIR,
    DEFAULT_FLAG_TIMEOUT_SECONDS,
    DEFAULT_FLAG_WIDTH,
    log,
)


# ═══════════════════════════════════════════════════════════════════════════════
# SESSION STATE
# ═══════════════════════════════════════════════════════════════════════════════

def init_session_state(section):
    """
    Initialize session state for a specific section if it doesn't exist.
    """
    if section not in st.session_state:
        st.session_state[section] = {}


def get_session_var(section, var_name, default=None):
    """
    Get a variable from session state for a specific section.
    """
    init_session_state(section)
    return st.session_state[section].get(var_name, default)


def set_session_var(section, var_name, value):
    """
    Set a variable in session state for a specific section.
    """
    init_session_state(section)
    st.session_state[section][var_name] = value


def update_session_vars(section, updates):
    """
    Update multiple variables in session state for a specific section.
    """
    init_session_state(section)
    st.session_state[section].update(updates)


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION SETTINGS (<user config dir>/settings.json)
# ═══════════════════════════════════════════════════════════════════════════════

APP_SETTINGS_FILE = os.path.join(user_config_dir(APP_NAME), "settings.json")
DEFAULT_APP_SETTINGS = {
    "flags": {
        "timeout_seconds": DEFAULT_FLAG_TIMEOUT_SECONDS
    },
    "display": {
        "flag_width": DEFAULT_FLAG_WIDTH
    }
}


def _default_settings():
    return json.loads(json.dumps(DEFAULT_APP_SETTINGS))


def load_app_settings(settings_file=None):
    """
    Load application-level settings.
    Creates the file with defaults if missing or invalid.

    Args:
        settings_file (str): Override of APP_SETTINGS_FILE, used by tests

    Returns:
        dict: The settings
    """
    settings_file = settings_file or APP_SETTINGS_FILE

    if not os.path.exists(settings_file):
        save_app_settings(DEFAULT_APP_SETTINGS, settings_file)
        return _default_settings()

    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings.json must contain an object")
        return data
    except (json.JSONDecodeError, ValueError):
        log(f"Invalid settings file {settings_file}, restoring defaults")
        save_app_settings(DEFAULT_APP_SETTINGS, settings_file)
        return _default_settings()


def save_app_settings(settings_dict, settings_file=None):
    """
    Persist application-level settings.
    """
    settings_file = settings_file or APP_SETTINGS_FILE
    os.makedirs(os.path.dirname(settings_file), exist_ok=True)
    with open(settings_file, "w", encoding="utf-8") as f:
        json.dump(settings_dict, f, indent=2)


def get_flag_timeout(settings):
    """Flag download timeout in seconds, falling back to the default for unusable values."""
    value = settings.get("flags", {}).get("timeout_seconds", DEFAULT_FLAG_TIMEOUT_SECONDS)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DEFAULT_FLAG_TIMEOUT_SECONDS
    return value


def get_flag_width(settings):
    """Displayed flag width in pixels, falling back to the default for unusable values."""
    value = settings.get("display", {}).get("flag_width", DEFAULT_FLAG_WIDTH)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_FLAG_WIDTH
    return value


# ═══════════════════════════════════════════════════════════════════════════════
# SESSION LOG
# ═══════════════════════════════════════════════════════════════════════════════

def start_session_log(log_fpath=LOG_FILE_PATH, previous_sessions_dir=PREVIOUS_SESSIONS_DIR):
    """
    Archive the previous session log and start a fresh one.

    Called once on app startup. An existing non-empty log is moved to
    previous_sessions/log_<timestamp>.txt before the new log is created.

    Returns:
        str or None: Path of the archived log, if one was archived
    """
    archived_log_path = None
    os.makedirs(previous_sessions_dir, exist_ok=True)

    if os.path.exists(log_fpath) and os.path.getsize(log_fpath) > 0:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        archived_log_path = os.path.join(previous_sessions_dir, f"log_{timestamp}.txt")
        shutil.move(log_fpath, archived_log_path)

    with open(log_fpath, "w", encoding="utf-8") as file:
        session_start = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        file.write(f"Countries & Continents App Log - Session Started: {session_start}\n")
        file.write("=" * 60 + "\n")
        file.write("This log contains all output from the current session.\n")
        file.write("Previous sessions are archived in: assets/logs/previous_sessions/\n")
        file.write("=" * 60 + "\n\n")

    return archived_log_path


def read_session_log(log_fpath=LOG_FILE_PATH, max_lines=1000):
    """Last max_lines lines of the session log, "" if there is no log yet."""
    if not os.path.exists(log_fpath):
        return ""
    with open(log_fpath, "r", encoding="utf-8", errors="replace") as file:
        lines = file.readlines()[-max_lines:]
    return "".join(lines)


# ═══════════════════════════════════════════════════════════════════════════════
# CALLBACK ERROR LOGGING WRAPPER
# ═══════════════════════════════════════════════════════════════════════════════

def logged_callback(func):
    """
    Decorator to wrap Streamlit callbacks with error logging.

    This ensures that any exceptions in callbacks are logged to the file
    before Streamlit catches and displays them in the UI.

    Usage:
        @logged_callback
        def on_button_click():
            # Your callback code here
            pass
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            log(f"ERROR in callback {func.__name__}: {type(e).__name__}: {e}")
            log(traceback.format_exc())
            # Re-raise so Streamlit still shows the error in UI
            raise

    return wrapper

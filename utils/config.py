"""
Countries & Continents Global Configuration

This module defines global constants and utility functions used across the entire project.
It establishes the application directory and the file locations that all other
modules depend on.

Key Features:
- Cross-platform compatibility (Windows, Linux, macOS)
- Centralized path management for the dataset, logs and settings
- Default values for application settings
- Unified logging function

Important: This file is imported by main.py before session_state exists, so it cannot
depend on Streamlit session state.
"""

import os
import platform

# ═══════════════════════════════════════════════════════════════════════════════
# PLATFORM DETECTION
# ═══════════════════════════════════════════════════════════════════════════════

def get_os_name():
    """
    Detect the operating system and return a standardized name.

    Returns:
        str: 'windows', 'linux', or 'darwin'
    """
    system = platform.system()
    if system == "Windows":
        return "windows"
    elif system == "Linux":
        return "linux"
    elif system == "Darwin":  # macOS
        return "darwin"
    else:
        # Fallback for unknown platforms
        return "linux"

# Global OS identifier, shown on the settings page
OS_NAME = get_os_name()

# ═══════════════════════════════════════════════════════════════════════════════
# CORE DIRECTORY STRUCTURE
# ═══════════════════════════════════════════════════════════════════════════════

# Application directory - the folder that holds main.py
# Path calculation: utils/config.py -> utils -> app root
APP_ROOT = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))

# Name used for the per-user config directory (appdirs)
APP_NAME = "CountriesAndContinents"

# ═══════════════════════════════════════════════════════════════════════════════
# DATASET LOCATION
# ═══════════════════════════════════════════════════════════════════════════════

# The dataset is looked up next to the app first
DATA_FILE_NAME = "countries_by_continent.json"

# Then this many directories above the app directory (project-root copy during development)
DATA_FILE_FALLBACK_LEVELS = 4

# Unit appended to numeric areas
AREA_UNIT = "km²"

# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════════════════

LOG_DIR = os.path.join(APP_ROOT, "assets", "logs")
LOG_FILE_PATH = os.path.join(LOG_DIR, "log.txt")
PREVIOUS_SESSIONS_DIR = os.path.join(LOG_DIR, "previous_sessions")

# ═══════════════════════════════════════════════════════════════════════════════
# UTILITY FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

def log(msg):
    """
    Unified logging function that writes to both file and console.

    Args:
        msg (str): Message to log

    Behavior:
        - Appends message to assets/logs/log.txt
        - Prints message to console (stdout)
        - Automatically adds newline character

    Note: The main.py file handles archival of previous sessions. When the log
    file cannot be written (e.g. a read-only app directory) the message is
    only printed.
    """
    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        with open(LOG_FILE_PATH, 'a', encoding="utf-8") as f:
            f.write(f"{msg}\n")
    except OSError as e:
        print(f"Could not write to log file {LOG_FILE_PATH}: {e}")
    print(msg)

# ═══════════════════════════════════════════════════════════════════════════════
# DEFAULT SETTINGS CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════════

# Seconds to wait for a flag image before giving up
DEFAULT_FLAG_TIMEOUT_SECONDS = 10

# Width in pixels of the displayed flag
DEFAULT_FLAG_WIDTH = 250

"""
Countries & Continents Streamlit Application - Main Entry Point

Browse a static reference dataset of continents and countries: pick a continent,
pick a country and see its capital, population, area, currency and flag.

The application uses a startup/rerun pattern to keep I/O to a minimum:
- On startup (empty session_state): archive the previous log, load settings and
  read countries_by_continent.json once
- On reruns: use the cached, read-only dataset from session_state

Run with:
streamlit run main.py
"""

# Standard library imports
import os
import sys

# Third-party imports
import streamlit as st

# Local imports - global config must be imported before anything else
from utils.config import APP_ROOT, log

# ═══════════════════════════════════════════════════════════════════════════════
# GLOBAL CONFIGURATION & SETUP (runs on every request)
# ═══════════════════════════════════════════════════════════════════════════════

# Force unbuffered output for real-time logging
sys.stdout.reconfigure(line_buffering=True)

# Streamlit theme is loaded from .streamlit/config.toml

st.set_page_config(
    initial_sidebar_state="auto",
    page_icon="🌍",
    page_title="Continents & Countries",
    layout="wide",
)

# Inject custom CSS (gradient background, detail rows, flag frame)
with open(os.path.join(APP_ROOT, "assets", "css", "styles.css"), "r", encoding="utf-8") as f:
    css_content = f.read()
st.markdown(f"<style>{css_content}</style>", unsafe_allow_html=True)

# ═══════════════════════════════════════════════════════════════════════════════
# STARTUP INITIALIZATION (runs only when session_state is empty)
# ═══════════════════════════════════════════════════════════════════════════════

# Detect app startup: empty session_state means this is a fresh session
if st.session_state == {}:

    from components import BlockingLoader
    from utils.common import start_session_log, load_app_settings, set_session_var, APP_SETTINGS_FILE
    from utils.country_data import load_country_atlas

    loader = BlockingLoader()
    loader.open("Loading Continents & Countries...")

    # ─────────────────────────────────────────────────────────────────────────
    # Archive previous session log and create fresh log
    # ─────────────────────────────────────────────────────────────────────────

    try:
        start_session_log()
        log("Logging system initialized")
    except PermissionError:
        print("Permission denied when accessing the log file. Could not setup logging.")
    except OSError as e:
        print(f"Error setting up logging: {e}")

    # ─────────────────────────────────────────────────────────────────────────
    # Load application settings
    # ─────────────────────────────────────────────────────────────────────────

    loader.update_text("Loading settings...")
    st.session_state["shared"] = {}
    set_session_var("shared", "APP_SETTINGS_FILE", APP_SETTINGS_FILE)
    set_session_var("shared", "app_settings", load_app_settings())

    # ─────────────────────────────────────────────────────────────────────────
    # Load the dataset once; it stays read-only for the whole session
    # ─────────────────────────────────────────────────────────────────────────

    loader.update_text("Loading country data...")
    st.session_state["atlas"] = load_country_atlas()

    loader.close()

# ═══════════════════════════════════════════════════════════════════════════════
# MAIN APPLICATION (runs on startup and every rerun)
# ═══════════════════════════════════════════════════════════════════════════════

from components import print_widget_label

atlas = st.session_state["atlas"]

browser_page = st.Page(
    os.path.join("pages", "country_browser.py"), title="Countries", icon=":material/public:", default=True)
settings_page = st.Page(
    os.path.join("pages", "settings.py"), title="Settings", icon=":material/settings:")
pg = st.navigation([browser_page, settings_page])

# Run the selected page
pg.run()

# ─────────────────────────────────────────────────────────────────────────
# Sidebar: dataset summary
# ─────────────────────────────────────────────────────────────────────────

print_widget_label("Dataset", icon="dataset", sidebar=True)
if atlas.source_path:
    st.sidebar.caption(f"{len(atlas)} continents · {atlas.country_count} countries")
    st.sidebar.caption(os.path.basename(atlas.source_path))
else:
    st.sidebar.caption("No data file found")

"""
Countries & Continents Application Settings

Configuration interface for global application settings including:
- Flag download timeout and display size
- Information about the loaded dataset
- Session log export
"""

import sys
import platform

import streamlit as st

from utils.config import OS_NAME, DATA_FILE_NAME
from utils.common import (
    load_app_settings,
    save_app_settings,
    set_session_var,
    get_flag_timeout,
    get_flag_width,
    read_session_log,
    APP_SETTINGS_FILE,
)
from utils.country_data import data_file_candidates
from components import code_span, warning_box

atlas = st.session_state["atlas"]


# FLAGS
app_settings = load_app_settings()

st.subheader(":material/flag: Flags", divider="grey")
st.caption(
    "Flags are downloaded when you select a country. "
    "If the flag server does not answer within the timeout, the details are shown without a flag."
)

with st.form("flag_settings_form"):
    timeout_value = st.slider(
        "Download timeout (seconds)",
        min_value=1,
        max_value=60,
        value=int(get_flag_timeout(app_settings)),
        step=1,
    )
    width_value = st.slider(
        "Flag width (pixels)",
        min_value=100,
        max_value=600,
        value=get_flag_width(app_settings),
        step=10,
    )

    submitted = st.form_submit_button("Save settings", type="primary", width="stretch")

    if submitted:
        app_settings.setdefault("flags", {})["timeout_seconds"] = int(timeout_value)
        app_settings.setdefault("display", {})["flag_width"] = int(width_value)
        save_app_settings(app_settings)
        set_session_var("shared", "app_settings", app_settings)
        st.rerun()


# DATASET
st.subheader(":material/dataset: Dataset", divider="grey")
if atlas.source_path:
    st.markdown(f"Loaded from {code_span(atlas.source_path)}", unsafe_allow_html=True)
    st.write(f"{len(atlas)} continents, {atlas.country_count} countries")
else:
    warning_box(
        "Looked in:<br>" + "<br>".join(code_span(path) for path in data_file_candidates()),
        title=f"No {DATA_FILE_NAME} found",
    )
st.caption("The dataset is read once when the app starts. Restart the app to pick up changes.")


# LOGS
st.subheader(":material/description: Logs", divider="grey")
st.write("Export the application log to review errors and warnings, for example failed flag downloads.")
st.download_button(
    label=":material/save: Export logs",
    data=read_session_log(),
    file_name="countries_log.txt",
    mime="text/plain",
)


# OTHER STUFF
st.subheader(":material/more_horiz: Other stuff", divider="grey")
st.write("settings_file:", APP_SETTINGS_FILE)
st.write("platform:", f"{OS_NAME} ({platform.platform()}), Python {sys.version.split()[0]}")
with st.expander("st.session_state", expanded=False):
    st.write({key: repr(value) for key, value in st.session_state.items()})

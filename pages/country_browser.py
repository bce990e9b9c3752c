"""
Country browser page.

Left: continent selector and the list of its countries.
Right: details and flag of the selected country, plus an overview table.
"""

import streamlit as st

from utils.config import DATA_FILE_NAME
from utils.common import (
    get_session_var,
    set_session_var,
    update_session_vars,
    logged_callback,
    get_flag_timeout,
    get_flag_width,
)
from utils.flags import fetch_flag_image
from utils.selection import country_names, find_country, country_details, continent_dataframe
from components import print_widget_label, info_box, code_span, detail_row, flag_frame, section_header

SECTION = "country_browser"

atlas = st.session_state["atlas"]
app_settings = get_session_var("shared", "app_settings", {})


@logged_callback
def on_continent_change():
    """A new continent clears the selected country and its flag."""
    update_session_vars(SECTION, {
        "continent": st.session_state.get("continent_selection"),
        "country": None,
        "flag_image": None,
    })


@logged_callback
def on_country_change(widget_key):
    """Look up the selected country and download its flag (once per selection)."""
    continent = get_session_var(SECTION, "continent")
    country = find_country(atlas, continent, st.session_state.get(widget_key))
    if country is None:
        return

    # Never keep the previous country's flag on screen
    update_session_vars(SECTION, {"country": country, "flag_image": None})
    if country.flag_url:
        image = fetch_flag_image(country.flag_url, timeout=get_flag_timeout(app_settings))
        set_session_var(SECTION, "flag_image", image)


section_header("🌍 WORLD CONTINENTS & COUNTRIES", large=True)

if len(atlas) == 0:
    info_box(
        f"No continents to show. Place {code_span(DATA_FILE_NAME)} next to the app and restart it.",
        title="No data found",
    )

continents = atlas.continent_names
selected_continent = get_session_var(SECTION, "continent")
if selected_continent not in continents:
    # First visit: the first continent is selected, like a fresh start
    selected_continent = continents[0] if continents else None
    update_session_vars(SECTION, {"continent": selected_continent, "country": None, "flag_image": None})

selected_country = get_session_var(SECTION, "country")
flag_image = get_session_var(SECTION, "flag_image")

list_col, info_col = st.columns([1, 2], gap="large")

# ─────────────────────────────────────────────────────────────────────────
# Continent selector and country list
# ─────────────────────────────────────────────────────────────────────────

with list_col:
    with st.container(border=True):
        print_widget_label("Select Continent", icon="map")
        st.selectbox(
            "Continent",
            options=continents,
            index=continents.index(selected_continent) if selected_continent is not None else None,
            key="continent_selection",
            label_visibility="collapsed",
            on_change=on_continent_change,
            disabled=not continents,
        )

        print_widget_label("Countries", icon="location_on")
        names = country_names(atlas, selected_continent)
        # One widget per continent, so switching continents starts with nothing selected
        country_widget_key = f"country_selection_{selected_continent}"
        with st.container(height=420):
            if names:
                st.radio(
                    "Countries",
                    options=names,
                    index=names.index(selected_country.name) if selected_country is not None else None,
                    key=country_widget_key,
                    label_visibility="collapsed",
                    on_change=on_country_change,
                    args=(country_widget_key,),
                )
            else:
                st.caption("No countries")

# ─────────────────────────────────────────────────────────────────────────
# Country information
# ─────────────────────────────────────────────────────────────────────────

with info_col:
    with st.container(border=True):
        section_header("COUNTRY INFORMATION")

        flag_frame(flag_image, width=get_flag_width(app_settings))

        for label, icon, value in country_details(selected_country):
            detail_row(label, icon, value)

    if names:
        with st.expander(f"All countries in {selected_continent}", expanded=False):
            st.dataframe(continent_dataframe(atlas, selected_continent), hide_index=True, width="stretch")

"""
Selection helpers for the country browser.

Pure lookups into the loaded CountryAtlas, kept out of the page script so they
can be tested without a running Streamlit session.
"""

import pandas as pd

# (label, icon, Country attribute) in display order
DETAIL_FIELDS = [
    ("Country", "🏳️", "name"),
    ("Capital", "🏛️", "capital"),
    ("Population", "👥", "population"),
    ("Area", "📏", "area"),
    ("Currency", "💰", "currency"),
]


def country_names(atlas, continent):
    """Names of all countries of a continent in stored order (duplicates kept)."""
    if continent is None:
        return []
    return [country.name for country in atlas.countries(continent)]


def find_country(atlas, continent, name):
    """
    Look up a country by its display name.

    Args:
        atlas (CountryAtlas): Loaded dataset
        continent (str): Currently selected continent
        name (str): Selected country name

    Returns:
        Country or None: The first record with that name, None if there is none
    """
    if continent is None or name is None:
        return None
    for country in atlas.countries(continent):
        if country.name == name:
            return country
    return None


def blank_details():
    """Detail rows for 'nothing selected': every value empty."""
    return [(label, icon, "") for label, icon, _ in DETAIL_FIELDS]


def country_details(country):
    """Detail rows (label, icon, value) for a country, values shown verbatim."""
    if country is None:
        return blank_details()
    return [(label, icon, getattr(country, attribute)) for label, icon, attribute in DETAIL_FIELDS]


def continent_dataframe(atlas, continent):
    """
    Overview table of all countries of a continent.

    Returns:
        pd.DataFrame: One row per country in stored order with the columns of
        DETAIL_FIELDS; empty (with those columns) for unknown continents
    """
    columns = [label for label, _, _ in DETAIL_FIELDS]
    rows = [
        [getattr(country, attribute) for _, _, attribute in DETAIL_FIELDS]
        for country in atlas.countries(continent)
    ] if continent is not None else []
    return pd.DataFrame(rows, columns=columns)

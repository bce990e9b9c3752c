"""
Country Data Loading

Functions for loading the continent/country reference dataset including:
- Locating countries_by_continent.json next to the app (or a project-root copy)
- Lenient normalization of country entries into uniform Country records
- Number formatting for population and area values

Every boundary degrades to an empty result instead of raising: a missing file,
an unreadable file or malformed JSON all produce an empty CountryAtlas, and a
wrong-typed field only empties that one field.
"""

import os
import json
import math
from enum import Enum
from dataclasses import dataclass
from collections.abc import Mapping
from types import MappingProxyType

from utils.config import APP_ROOT, DATA_FILE_NAME, DATA_FILE_FALLBACK_LEVELS, AREA_UNIT, log


# ═══════════════════════════════════════════════════════════════════════════════
# DATA MODEL
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Country:
    """Normalized country record. Every field is display text, never None."""

    name: str
    capital: str = ""
    population: str = ""
    area: str = ""
    currency: str = ""
    flag_url: str = ""


class CountryAtlas(Mapping):
    """
    Read-only mapping of continent name -> tuple of Country records.

    Continents and countries keep the order in which they appear in the source
    document. Built once per session and never mutated afterwards.

    Args:
        continents: Mapping of continent name to an iterable of Country records
        source_path: Path of the JSON file the data was read from, if any
    """

    def __init__(self, continents=None, source_path=None):
        frozen = {name: tuple(countries) for name, countries in (continents or {}).items()}
        self._continents = MappingProxyType(frozen)
        self.source_path = source_path

    @classmethod
    def empty(cls, source_path=None):
        return cls({}, source_path=source_path)

    def __getitem__(self, continent):
        return self._continents[continent]

    def __iter__(self):
        return iter(self._continents)

    def __len__(self):
        return len(self._continents)

    def __repr__(self):
        return f"CountryAtlas({len(self)} continents, {self.country_count} countries)"

    @property
    def continent_names(self):
        return list(self._continents)

    @property
    def country_count(self):
        return sum(len(countries) for countries in self._continents.values())

    def countries(self, continent):
        """Countries of a continent in stored order, or an empty tuple for unknown continents."""
        return self._continents.get(continent, ())


# ═══════════════════════════════════════════════════════════════════════════════
# NUMBER FORMATTING
# ═══════════════════════════════════════════════════════════════════════════════

class QuantityKind(Enum):
    """Shapes a population/area value can take in the source document."""

    ABSENT = "absent"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    OTHER = "other"


def classify_quantity(value):
    """
    Decide how a raw population/area value should be rendered.

    Args:
        value: Raw JSON value (None when the key is missing or null)

    Returns:
        QuantityKind: ABSENT for None, INTEGER / FLOAT for finite numbers,
        TEXT for strings and OTHER for anything else (booleans, lists,
        objects, NaN and infinities)
    """
    if value is None:
        return QuantityKind.ABSENT
    # bool is an int subclass, but true/false are not quantities
    if isinstance(value, bool):
        return QuantityKind.OTHER
    if isinstance(value, int):
        return QuantityKind.INTEGER
    if isinstance(value, float):
        return QuantityKind.FLOAT if math.isfinite(value) else QuantityKind.OTHER
    if isinstance(value, str):
        return QuantityKind.TEXT
    return QuantityKind.OTHER


def _json_text(value):
    """Generic textual rendering of a JSON value (true, [1, 2], NaN, ...)."""
    return json.dumps(value, ensure_ascii=False)


def format_population(value):
    """
    Format a population value for display.

    Args:
        value: Raw JSON value of the "population" key

    Returns:
        str: Integers grouped with thousands separators ("67,000,000"),
        floats truncated toward zero first, strings verbatim, anything else
        as JSON text, "" when absent
    """
    kind = classify_quantity(value)
    if kind is QuantityKind.ABSENT:
        return ""
    if kind is QuantityKind.INTEGER:
        return f"{value:,}"
    if kind is QuantityKind.FLOAT:
        return f"{int(value):,}"
    if kind is QuantityKind.TEXT:
        return value
    return _json_text(value)


def format_area(value):
    """
    Format an area value for display.

    Args:
        value: Raw JSON value of the "area_km2" key

    Returns:
        str: Numbers rounded to whole units, grouped with thousands separators
        and suffixed with the area unit ("551,695 km²"), strings verbatim,
        anything else as JSON text, "" when absent
    """
    kind = classify_quantity(value)
    if kind is QuantityKind.ABSENT:
        return ""
    if kind is QuantityKind.INTEGER:
        return f"{value:,} {AREA_UNIT}"
    if kind is QuantityKind.FLOAT:
        return f"{round(value):,} {AREA_UNIT}"
    if kind is QuantityKind.TEXT:
        return value
    return _json_text(value)


# ═══════════════════════════════════════════════════════════════════════════════
# ENTRY NORMALIZATION
# ═══════════════════════════════════════════════════════════════════════════════

# Accepted spellings of the flag URL key, first one found wins
FLAG_URL_KEYS = ("flagUrl", "FlagUrl")


def _text_field(entry, key):
    value = entry.get(key)
    return value if isinstance(value, str) else ""


def _flag_url(entry):
    for key in FLAG_URL_KEYS:
        value = entry.get(key)
        if isinstance(value, str):
            return value
    return ""


def country_from_object(entry):
    """
    Build a Country from a structured country object.

    Each field is read independently; a missing or wrong-typed field becomes ""
    and never affects the other fields.

    Args:
        entry (dict): Country object from the source document

    Returns:
        Country: The normalized record (name may be "")
    """
    return Country(
        name=_text_field(entry, "name"),
        capital=_text_field(entry, "capital"),
        population=format_population(entry.get("population")),
        area=format_area(entry.get("area_km2")),
        currency=_text_field(entry, "currency"),
        flag_url=_flag_url(entry),
    )


def normalize_country_entry(entry):
    """
    Normalize one element of a continent's country array.

    Args:
        entry: A country object, a bare country name or any other JSON value

    Returns:
        Country or None: None when the element should be skipped (empty or
        whitespace-only names, null, nested arrays)
    """
    if isinstance(entry, dict):
        return country_from_object(entry)

    if isinstance(entry, str):
        if not entry.strip():
            return None
        return Country(name=entry)

    if entry is None or isinstance(entry, list):
        return None

    # Remaining scalars (numbers, booleans) are bare names in their JSON spelling
    return Country(name=_json_text(entry))


def parse_continent_document(text):
    """
    Parse the dataset JSON into an ordered continent -> countries dictionary.

    Args:
        text (str): Raw document text

    Returns:
        dict: {continent name: [Country, ...]}, empty when the text is not
        valid JSON or its top-level value is not an object
    """
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as e:
        log(f"Could not parse country data: {e}")
        return {}

    if not isinstance(document, dict):
        log(f"Country data must be a JSON object, got {type(document).__name__}. No data loaded.")
        return {}

    continents = {}
    for continent_name, entries in document.items():
        if not isinstance(entries, list):
            log(f"Skipping '{continent_name}': expected a list of countries, got {type(entries).__name__}")
            continue

        countries = []
        skipped = 0
        for entry in entries:
            country = normalize_country_entry(entry)
            if country is None:
                skipped += 1
                continue
            countries.append(country)

        if skipped:
            log(f"Skipped {skipped} empty entries in '{continent_name}'")
        continents[continent_name] = countries

    return continents


# ═══════════════════════════════════════════════════════════════════════════════
# SOURCE RESOLUTION
# ═══════════════════════════════════════════════════════════════════════════════

def data_file_candidates(app_dir=None):
    """
    Paths probed for the dataset, in order.

    Args:
        app_dir (str): Application directory (defaults to APP_ROOT)

    Returns:
        list: [file next to the app, file DATA_FILE_FALLBACK_LEVELS levels up]
    """
    app_dir = app_dir or APP_ROOT
    primary = os.path.join(app_dir, DATA_FILE_NAME)
    ascent = [os.pardir] * DATA_FILE_FALLBACK_LEVELS
    fallback = os.path.abspath(os.path.join(app_dir, *ascent, DATA_FILE_NAME))
    return [primary, fallback]


def resolve_data_path(app_dir=None):
    """Return the first existing dataset file, or None when there is none."""
    for candidate in data_file_candidates(app_dir):
        if os.path.isfile(candidate):
            return candidate
    return None


def read_source_text(path):
    """
    Read the dataset file.

    Returns:
        str or None: File contents, or None when the file cannot be read
    """
    try:
        # utf-8-sig also accepts files saved with a byte order mark
        with open(path, "r", encoding="utf-8-sig") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        log(f"Could not read country data from {path}: {e}")
        return None


def load_country_atlas(app_dir=None):
    """
    Locate, read and normalize the dataset.

    Called once at session startup. Never raises for data problems: when no
    usable file exists the returned atlas is empty and the app shows no data.

    Args:
        app_dir (str): Application directory (defaults to APP_ROOT)

    Returns:
        CountryAtlas: The loaded dataset
    """
    path = resolve_data_path(app_dir)
    if path is None:
        log(f"No {DATA_FILE_NAME} found (looked in: {', '.join(data_file_candidates(app_dir))})")
        return CountryAtlas.empty()

    text = read_source_text(path)
    if text is None:
        return CountryAtlas.empty(source_path=path)

    atlas = CountryAtlas(parse_continent_document(text), source_path=path)
    log(f"Loaded {atlas.country_count} countries in {len(atlas)} continents from {path}")
    return atlas

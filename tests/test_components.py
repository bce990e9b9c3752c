"""
Tests for the country browser page and its UI components.

The page script runs headless through Streamlit's AppTest with a prepared
dataset in session state; flag downloads are mocked.
"""

import os
import unittest
from unittest.mock import patch

from PIL import Image
from streamlit.testing.v1 import AppTest

from utils.config import APP_ROOT
from utils.country_data import Country, CountryAtlas

BROWSER_PAGE = os.path.join(APP_ROOT, "pages", "country_browser.py")


def sample_atlas():
    return CountryAtlas({
        "Europe": [
            Country(name="France", capital="Paris", population="67,000,000",
                    area="551,695 km²", currency="Euro", flag_url="http://x/fr.png"),
            Country(name="Malta", capital="Valletta"),
        ],
        "Asia": [Country(name="Japan")],
    }, source_path="countries_by_continent.json")


class TestCountryBrowserPage(unittest.TestCase):

    def setUp(self):
        self.at = AppTest.from_file(BROWSER_PAGE, default_timeout=30)
        self.at.session_state["atlas"] = sample_atlas()
        self.at.session_state["shared"] = {"app_settings": {"flags": {"timeout_seconds": 4}}}

    def markdown_text(self):
        return " ".join(element.value for element in self.at.markdown)

    def test_first_continent_is_selected_without_a_country(self):
        self.at.run()

        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.selectbox[0].options, ["Europe", "Asia"])
        self.assertEqual(self.at.selectbox[0].value, "Europe")
        self.assertEqual(self.at.radio[0].options, ["France", "Malta"])
        self.assertIsNone(self.at.radio[0].value)
        self.assertIsNone(self.at.session_state["country_browser"]["country"])
        self.assertIn("WORLD CONTINENTS & COUNTRIES", self.markdown_text())
        self.assertIn("COUNTRY INFORMATION", self.markdown_text())

    @patch("utils.flags.fetch_flag_image")
    def test_selecting_a_country_shows_details_and_fetches_flag(self, mock_fetch):
        mock_fetch.return_value = None
        self.at.run()

        self.at.radio(key="country_selection_Europe").set_value("France").run()

        self.assertFalse(self.at.exception)
        state = self.at.session_state["country_browser"]
        self.assertEqual(state["country"].capital, "Paris")
        mock_fetch.assert_called_once_with("http://x/fr.png", timeout=4)
        self.assertIn("Paris", self.markdown_text())
        self.assertIn("551,695 km²", self.markdown_text())

    @patch("utils.flags.fetch_flag_image")
    def test_country_without_flag_url_is_not_fetched(self, mock_fetch):
        self.at.run()

        self.at.radio(key="country_selection_Europe").set_value("Malta").run()

        mock_fetch.assert_not_called()
        self.assertIsNone(self.at.session_state["country_browser"]["flag_image"])
        self.assertIn("Valletta", self.markdown_text())

    @patch("utils.flags.fetch_flag_image")
    def test_changing_continent_clears_details(self, mock_fetch):
        mock_fetch.return_value = None
        self.at.run()
        self.at.radio(key="country_selection_Europe").set_value("France").run()

        self.at.selectbox[0].select("Asia").run()

        self.assertFalse(self.at.exception)
        state = self.at.session_state["country_browser"]
        self.assertEqual(state["continent"], "Asia")
        self.assertIsNone(state["country"])
        self.assertEqual(self.at.radio[0].options, ["Japan"])
        self.assertIsNone(self.at.radio[0].value)
        self.assertNotIn("Paris", self.markdown_text())

    @patch("utils.flags.fetch_flag_image")
    def test_previous_flag_is_cleared_for_country_without_flag(self, mock_fetch):
        mock_fetch.return_value = Image.new("RGB", (6, 4), (0, 85, 164))
        self.at.run()
        self.at.radio(key="country_selection_Europe").set_value("France").run()
        self.assertIsNotNone(self.at.session_state["country_browser"]["flag_image"])

        self.at.radio(key="country_selection_Europe").set_value("Malta").run()

        self.assertFalse(self.at.exception)
        state = self.at.session_state["country_browser"]
        self.assertEqual(state["country"].name, "Malta")
        self.assertIsNone(state["flag_image"])
        mock_fetch.assert_called_once_with("http://x/fr.png", timeout=4)

    @patch("utils.flags.fetch_flag_image")
    def test_duplicate_names_resolve_to_first_record(self, mock_fetch):
        mock_fetch.return_value = None
        self.at.session_state["atlas"] = CountryAtlas({
            "Europe": [
                Country(name="Malta", capital="Valletta"),
                Country(name="Malta", capital="Mdina"),
            ],
        })
        self.at.run()
        self.assertEqual(self.at.radio[0].options, ["Malta", "Malta"])

        self.at.radio(key="country_selection_Europe").set_value("Malta").run()

        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.session_state["country_browser"]["country"].capital, "Valletta")
        self.assertIn("Valletta", self.markdown_text())
        self.assertNotIn("Mdina", self.markdown_text())

    def test_empty_dataset_shows_no_continents(self):
        self.at.session_state["atlas"] = CountryAtlas.empty()
        self.at.run()

        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.selectbox[0].options, [])
        self.assertEqual(len(self.at.radio), 0)


if __name__ == '__main__':
    unittest.main()

"""
Tests for flag image downloading and decoding.
"""

import io
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch, MagicMock

import requests
from PIL import Image

from utils.flags import fetch_flag_image, decode_flag_image


def png_bytes(size=(6, 4), color=(0, 85, 164)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


class TestFetchFlagImage(unittest.TestCase):

    def setUp(self):
        patcher = patch("utils.flags.log")
        self.mock_log = patcher.start()
        self.addCleanup(patcher.stop)

    @patch("utils.flags.requests.get")
    def test_successful_download(self, mock_get):
        mock_get.return_value = MagicMock(content=png_bytes(), status_code=200)

        image = fetch_flag_image("https://flags.example/fr.png", timeout=3)

        self.assertIsNotNone(image)
        self.assertEqual(image.size, (6, 4))
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], "https://flags.example/fr.png")
        self.assertEqual(kwargs["timeout"], 3)

    @patch("utils.flags.requests.get")
    def test_empty_url_is_not_fetched(self, mock_get):
        self.assertIsNone(fetch_flag_image(""))
        self.assertIsNone(fetch_flag_image("   "))
        mock_get.assert_not_called()

    @patch("utils.flags.requests.get")
    def test_http_error_gives_no_image(self, mock_get):
        response = MagicMock(content=b"not found")
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Client Error")
        mock_get.return_value = response

        self.assertIsNone(fetch_flag_image("https://flags.example/missing.png"))
        self.mock_log.assert_called()

    @patch("utils.flags.requests.get")
    def test_connection_error_gives_no_image(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("unreachable")
        self.assertIsNone(fetch_flag_image("https://flags.example/fr.png"))

    @patch("utils.flags.requests.get")
    def test_timeout_gives_no_image(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()
        self.assertIsNone(fetch_flag_image("https://flags.example/fr.png", timeout=1))

    @patch("utils.flags.requests.get")
    def test_non_image_content_gives_no_image(self, mock_get):
        mock_get.return_value = MagicMock(content=b"<html>not an image</html>")
        self.assertIsNone(fetch_flag_image("https://flags.example/fr.png"))

    def test_header_only_png_does_not_decode(self):
        self.assertIsNone(decode_flag_image(png_bytes()[:33]))


class TestFetchWithUnwritableLog(unittest.TestCase):
    """A failed download stays silent even when the log file cannot be written."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        blocker = os.path.join(self.temp_dir, "blocker")
        with open(blocker, "w", encoding="utf-8") as f:
            f.write("")
        log_dir = os.path.join(blocker, "logs")
        for name, value in (("LOG_DIR", log_dir), ("LOG_FILE_PATH", os.path.join(log_dir, "log.txt"))):
            patcher = patch(f"utils.config.{name}", value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    @patch("utils.flags.requests.get")
    def test_connection_error_gives_no_image(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("unreachable")
        self.assertIsNone(fetch_flag_image("https://flags.example/fr.png"))


if __name__ == '__main__':
    unittest.main()

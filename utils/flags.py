"""
Flag Image Download

Downloads and decodes the flag image of the selected country. Any failure
(network error, timeout, HTTP error status, undecodable bytes) results in no
image; the details of the country are shown regardless.
"""

from io import BytesIO

import requests
from PIL import Image

from utils.config import DEFAULT_FLAG_TIMEOUT_SECONDS, log

# Some flag hosts (e.g. Wikimedia) reject requests without a browser-like user agent
REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:66.0) Gecko/20100101 Firefox/66.0",
    "Accept": "image/*",
}


def decode_flag_image(content):
    """
    Decode raw image bytes.

    Args:
        content (bytes): Downloaded image data

    Returns:
        PIL.Image.Image or None: The decoded image, None if the bytes are not an image
    """
    try:
        image = Image.open(BytesIO(content))
        # Image.open is lazy, force decoding so broken data fails here
        image.load()
        return image
    except Exception as e:
        log(f"Could not decode flag image: {e}")
        return None


def fetch_flag_image(url, timeout=DEFAULT_FLAG_TIMEOUT_SECONDS):
    """
    Download a flag image synchronously.

    Args:
        url (str): Flag image URL; empty URLs are not fetched
        timeout (float): Seconds to wait for the server

    Returns:
        PIL.Image.Image or None: The flag, or None when there is no URL or
        the download/decoding failed
    """
    if not url or not url.strip():
        return None

    try:
        response = requests.get(url, timeout=timeout, headers=REQUEST_HEADERS)
        response.raise_for_status()
    except requests.exceptions.Timeout:
        log(f"Flag download timed out after {timeout}s: {url}")
        return None
    except requests.exceptions.RequestException as e:
        log(f"Could not download flag from {url}: {e}")
        return None

    return decode_flag_image(response.content)

"""
Web page content loader.

Downloads a page and reduces its <body> to plain text suitable as source
material for script generation.

Usage:
    from podcastr.ingestion import fetch_page_text

    text = await fetch_page_text("https://example.com/article")
"""

import asyncio
import logging
import re

import requests
from bs4 import BeautifulSoup

from podcastr.logger import log_with_timer


logger = logging.getLogger("ingestion")

REQUEST_TIMEOUT = 30
HEADERS = {"User-Agent": "Mozilla/5.0 (compatible; podcastr/0.1)"}

# Tags whose text never belongs to the readable content
NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]

WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """
    Collapse every whitespace run (including line breaks) into one space.

    Args:
        text: Raw text extracted from HTML

    Returns:
        Cleaned text, stripped at both ends
    """
    if not text or not text.strip():
        return ""
    return WHITESPACE_RE.sub(" ", text).strip()


def extract_body_text(html: str) -> str:
    """
    Extract the readable text of the <body> element.

    Args:
        html: Raw HTML document

    Returns:
        Cleaned body text, or an empty string if the document has no body
    """
    soup = BeautifulSoup(html, "html.parser")
    body = soup.find("body")
    if body is None:
        logger.error("The body tag could not be found in the provided HTML.")
        return ""

    for tag in body.find_all(NON_CONTENT_TAGS):
        tag.decompose()

    return clean_text(body.get_text(separator=" "))


@log_with_timer("ingestion")
def fetch_page_text_sync(url: str) -> str:
    """
    Download a web page and return its cleaned body text.

    Network and HTTP errors are logged and turned into an empty result.

    Args:
        url: Address of the page

    Returns:
        Cleaned body text, or an empty string on failure
    """
    logger.info(f"Fetching content from {url}...")
    try:
        response = requests.get(url, headers=HEADERS, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"An error occurred while fetching HTML content: {e}")
        return ""

    text = extract_body_text(response.text)
    logger.info(f"Extracted {len(text)} characters from {url}")
    return text


async def fetch_page_text(url: str) -> str:
    """Async wrapper running the blocking download in a worker thread."""
    return await asyncio.to_thread(fetch_page_text_sync, url)

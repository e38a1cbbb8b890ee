"""
Ingestion package for podcastr.

Loads the source material of an episode from a web page:
    - Downloads the HTML (requests)
    - Extracts and cleans the <body> text (BeautifulSoup)

Modules:
    website: Page download and text cleaning
"""

from .website import clean_text, extract_body_text, fetch_page_text, fetch_page_text_sync

__all__ = ["clean_text", "extract_body_text", "fetch_page_text", "fetch_page_text_sync"]

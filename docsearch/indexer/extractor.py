"""
Text extraction for markup documents.
Pulls the character data out of HTML/XHTML sources so it can be tokenized.
"""
import logging

from bs4 import BeautifulSoup

from docsearch.common.config import EXTRACTION_PARSER, EXTRACTION_SKIP_TAGS
from docsearch.common.exceptions import ExtractionError, SourceIOError

logger = logging.getLogger("indexer")


def extract_text(markup):
    """Extract the plain text of a markup document.

    Text nodes are joined with single spaces so that words from adjacent
    elements never run together. Raises ExtractionError if the markup
    cannot be parsed.
    """
    if not markup:
        return ''

    try:
        soup = BeautifulSoup(markup, EXTRACTION_PARSER)

        # Remove script and style elements
        for element in soup(EXTRACTION_SKIP_TAGS):
            element.decompose()

        return soup.get_text(separator=' ')
    except Exception as e:
        raise ExtractionError(f"Could not extract text: {e}") from e


def read_document(file_path):
    """Read a markup file from disk and return its plain text."""
    try:
        with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
            markup = f.read()
    except OSError as e:
        raise SourceIOError(f"Could not read document {file_path}: {e}") from e

    logger.debug(f"Read {len(markup)} characters from {file_path}")
    return extract_text(markup)

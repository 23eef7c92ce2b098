"""
Index builder for the document search engine.
Turns document text into term-frequency tables and assembles the corpus index.
"""
import logging
from collections import Counter
from functools import partial

from docsearch.common.exceptions import ExtractionError, SourceIOError
from docsearch.common.utils import iter_source_directories, list_documents
from docsearch.indexer.corpus_index import CorpusIndex
from docsearch.indexer.extractor import read_document
from docsearch.indexer.lexer import tokenize
from docsearch.indexer.persistence import save_index

logger = logging.getLogger("indexer")


def index_document(text):
    """Count every term of ``text``. Returns a dict of term -> count."""
    tf = Counter()
    for term in tokenize(text):
        tf[term] += 1
    return dict(tf)


class IndexBuilder:
    """Single writer that assembles a CorpusIndex one document at a time.

    If the same identity is added twice, the later table replaces the
    earlier one (last write wins). Documents whose text cannot be read or
    extracted are logged and left out of the index.
    """

    def __init__(self):
        self._tables = {}
        self.total_tokens = 0
        self.failed = []

    def __len__(self):
        return len(self._tables)

    def add_document(self, identity, text_source):
        """Index one document.

        Args:
            identity: Unique key of the document (its path)
            text_source: Zero-argument callable returning the document's text

        Returns:
            True if the document was indexed, False if it was skipped
        """
        try:
            text = text_source()
        except (SourceIOError, ExtractionError) as e:
            logger.error(f"Skipping {identity}: {e}")
            self.failed.append(identity)
            return False

        tf = index_document(text)
        token_count = sum(tf.values())

        if identity in self._tables:
            logger.warning(f"Document {identity} indexed twice, replacing earlier entry")
            self.total_tokens -= sum(self._tables[identity].values())

        self._tables[identity] = tf
        self.total_tokens += token_count
        logger.info(f"{identity} => {token_count} tokens ({len(tf)} distinct terms)")
        return True

    def add_file(self, file_path):
        """Index a markup file, using its path as the identity."""
        return self.add_document(file_path, partial(read_document, file_path))

    def build(self):
        """Return the assembled, read-only corpus index."""
        return CorpusIndex(self._tables)


def build_index(root, sub_dirs, index_path=None):
    """Index every file directly inside each ``root/sub_dir`` directory.

    The index is written to ``index_path`` when one is given. Returns the
    built CorpusIndex.
    """
    builder = IndexBuilder()

    for directory_path in iter_source_directories(root, sub_dirs):
        try:
            file_paths = list_documents(directory_path)
        except OSError as e:
            logger.error(f"Could not list directory {directory_path}: {e}")
            continue

        for file_path in file_paths:
            builder.add_file(file_path)

        logger.info(f"Indexed {directory_path}: {len(builder)} files, {builder.total_tokens} tokens so far")

    logger.info(f"Total files parsed: {len(builder)}, Total tokens found: {builder.total_tokens}")
    if builder.failed:
        logger.warning(f"{len(builder.failed)} documents could not be indexed")

    index = builder.build()
    if index_path:
        save_index(index, index_path)
    return index

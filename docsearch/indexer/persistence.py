"""
JSON persistence for the corpus index.

The file holds one object mapping each document identity to an object of
term -> occurrence count, e.g. ``{"docs/gl4/glClear.xhtml": {"GLCLEAR": 3}}``.
"""
import json
import logging

from docsearch.common.exceptions import SerializationError, SourceIOError
from docsearch.indexer.corpus_index import CorpusIndex

logger = logging.getLogger("indexer")


def dumps_index(index):
    """Serialize a corpus index to a JSON string."""
    return json.dumps(index.to_dict(), ensure_ascii=False)


def _validate(data):
    if not isinstance(data, dict):
        raise SerializationError(f"Index must be a JSON object, got {type(data).__name__}")

    for identity, table in data.items():
        if not isinstance(table, dict):
            raise SerializationError(f"Entry for {identity!r} is not a term table")
        for term, count in table.items():
            # bool is a subclass of int but never a valid count
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise SerializationError(
                    f"Invalid count {count!r} for term {term!r} in {identity!r}"
                )


def loads_index(text):
    """Deserialize a corpus index from a JSON string."""
    try:
        data = json.loads(text)
    except ValueError as e:
        raise SerializationError(f"Index is not valid JSON: {e}") from e

    _validate(data)
    return CorpusIndex(data)


def save_index(index, index_path):
    """Write a corpus index to ``index_path``, replacing any previous file."""
    try:
        with open(index_path, 'w', encoding='utf-8') as f:
            f.write(dumps_index(index))
    except OSError as e:
        raise SourceIOError(f"Could not write index to {index_path}: {e}") from e

    logger.info(f"Saved index to {index_path}")


def load_index(index_path):
    """Read the corpus index stored at ``index_path``."""
    try:
        with open(index_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise SerializationError(f"Index at {index_path} is not UTF-8: {e}") from e
    except OSError as e:
        raise SourceIOError(f"Could not read index from {index_path}: {e}") from e

    index = loads_index(text)
    logger.info(f"Loaded index with {len(index)} documents from {index_path}")
    return index

"""
Utility functions for the document search engine.
"""
import logging
import os

from docsearch.common.config import LOG_FILE, LOG_FORMAT


def setup_logging(component, log_file=LOG_FILE, level=logging.INFO):
    """Configure root logging for a command-line component."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT.format(component=component),
        handlers=handlers
    )


def document_identity(*parts):
    """Build the identity key of a document from its path components."""
    return os.path.join(*parts)


def list_documents(directory_path):
    """Return the identities of the regular files directly inside a directory.

    Names are sorted so that repeated builds enumerate documents in the
    same order. Raises OSError if the directory cannot be listed.
    """
    identities = []
    for name in sorted(os.listdir(directory_path)):
        path = document_identity(directory_path, name)
        if os.path.isfile(path):
            identities.append(path)
    return identities


def iter_source_directories(root, sub_dirs):
    """Yield the full path of every sub-location to enumerate under a root."""
    for sub_dir in sub_dirs:
        yield document_identity(root, sub_dir)

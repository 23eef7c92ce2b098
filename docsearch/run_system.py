"""
Main script to build, serve and query the document search index.
"""
import argparse
import logging
import sys

from docsearch.common.config import (
    ALLOWED_ORIGIN,
    DOCS_DIRS,
    DOCS_ROOT,
    INDEX_PATH,
    LOG_FILE,
    MAX_RESULTS,
    SERVER_HOST,
    SERVER_PORT,
    STATIC_DIR,
)
from docsearch.common.exceptions import DocSearchError, TransportError
from docsearch.common.utils import setup_logging
from docsearch.indexer.index_builder import build_index
from docsearch.indexer.persistence import load_index
from docsearch.search.ranker import rank
from docsearch.search.search import SearchServer, format_results_for_cli

logger = logging.getLogger("docsearch")


def run_build(args):
    """Build the index from the document directories and save it."""
    setup_logging('Indexer', args.log_file)
    try:
        build_index(args.root, args.dirs, args.index)
    except DocSearchError as e:
        logger.critical(f"Index build failed: {e}")
        return 1
    return 0


def run_serve(args):
    """Load the index once and serve search requests."""
    setup_logging('Server', args.log_file)
    try:
        index = load_index(args.index)
    except DocSearchError as e:
        logger.critical(f"Could not load index {args.index}: {e}", exc_info=True)
        return 1

    server = SearchServer(index, static_dir=args.static_dir, allowed_origin=args.origin)
    try:
        server.run(args.host, args.port)
    except TransportError as e:
        logger.critical(str(e))
        return 1
    return 0


def run_search(args):
    """Rank the index against a query and print the top results."""
    setup_logging('Search', args.log_file, level=logging.WARNING)
    try:
        index = load_index(args.index)
    except DocSearchError as e:
        logger.critical(f"Could not load index {args.index}: {e}")
        return 1

    results = rank(args.query, index, limit=args.max_results)
    print(format_results_for_cli(results, args.query))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description='TF-IDF document search')
    parser.add_argument('--log-file', default=LOG_FILE, help='File to append log output to')
    subparsers = parser.add_subparsers(dest='command', required=True)

    build = subparsers.add_parser('build', help='Build the index from document directories')
    build.add_argument('--root', default=DOCS_ROOT, help='Root directory of the documents')
    build.add_argument('--dirs', nargs='+', default=DOCS_DIRS, help='Sub-directories of the root to index')
    build.add_argument('--index', default=INDEX_PATH, help='Path of the index file to write')
    build.set_defaults(func=run_build)

    serve = subparsers.add_parser('serve', help='Serve the search page and API')
    serve.add_argument('--host', default=SERVER_HOST, help='Address to bind')
    serve.add_argument('--port', type=int, default=SERVER_PORT, help='Port to bind')
    serve.add_argument('--index', default=INDEX_PATH, help='Path of the index file to load')
    serve.add_argument('--static-dir', default=STATIC_DIR, help='Directory holding index.html and 404.html')
    serve.add_argument('--origin', default=ALLOWED_ORIGIN, help='Origin allowed by the CORS header')
    serve.set_defaults(func=run_serve)

    search = subparsers.add_parser('search', help='Search the index from the command line')
    search.add_argument('query', help='Search query')
    search.add_argument('--index', default=INDEX_PATH, help='Path of the index file to load')
    search.add_argument('--max-results', type=int, default=MAX_RESULTS, help='Maximum number of results to print')
    search.set_defaults(func=run_search)

    return parser


def main(argv=None):
    """Main function to run the search engine."""
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

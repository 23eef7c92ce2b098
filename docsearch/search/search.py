"""
Search interface for the document search engine.
Serves the landing page and the ranking API over HTTP, and formats
results for the command line.
"""
import logging
import os

from flask import Flask, jsonify, request, send_from_directory
from werkzeug.serving import make_server

from docsearch.common.config import (
    ALLOWED_ORIGIN,
    LANDING_PAGE,
    NOT_FOUND_PAGE,
    STATIC_DIR,
)
from docsearch.common.exceptions import TransportError
from docsearch.search.ranker import rank

logger = logging.getLogger("search")

# (method, path, handler) - handlers are SearchServer method names
ROUTES = [
    ('GET', '/', 'landing_page'),
    ('GET', '/index.html', 'landing_page'),
    ('POST', '/api/search', 'search_api'),
]


class SearchServer:
    """HTTP front end over a read-only corpus index."""

    def __init__(self, index, static_dir=STATIC_DIR, allowed_origin=ALLOWED_ORIGIN):
        self.index = index
        self.static_dir = os.path.abspath(static_dir)
        self.allowed_origin = allowed_origin

        # Initialize Flask app
        self.app = Flask(__name__, static_folder=None)

        # Register routes
        self.register_routes()

    def register_routes(self):
        """Register the routing table and the shared response hooks."""
        for method, path, handler in ROUTES:
            self.app.add_url_rule(
                path,
                endpoint=f"{handler}:{path}",
                view_func=getattr(self, handler),
                methods=[method],
                provide_automatic_options=False
            )

        # Unknown paths and known paths with the wrong method both get the 404 page
        self.app.register_error_handler(404, self.not_found)
        self.app.register_error_handler(405, self.not_found)

        routed = {(method, path) for method, path, _ in ROUTES}

        @self.app.before_request
        def log_request():
            logger.info(f"Received request => Method: {request.method}, URL: {request.path}")
            # Werkzeug adds HEAD to GET rules; only pairs in ROUTES are served
            if (request.method, request.path) not in routed:
                return self.not_found()

        @self.app.after_request
        def add_cors_header(response):
            response.headers['Access-Control-Allow-Origin'] = self.allowed_origin
            return response

    def _serve_page(self, page, status_code):
        response = send_from_directory(self.static_dir, page, mimetype='text/html')
        response.status_code = status_code
        return response

    def landing_page(self):
        """Serve the static search page."""
        return self._serve_page(LANDING_PAGE, 200)

    def not_found(self, error=None):
        """Serve the static not-found page."""
        return self._serve_page(NOT_FOUND_PAGE, 404)

    def search_api(self):
        """Rank the index against the raw request body."""
        query = request.get_data().decode('utf-8', errors='replace')
        ranked = rank(query, self.index)
        logger.info(f"Query {query!r} ranked {len(ranked)} documents")

        return jsonify({
            'results': [identity for identity, _ in ranked],
            'count': len(ranked)
        })

    def run(self, host, port):
        """Serve requests one at a time until interrupted."""
        # make_server reports bind failures by exiting, so both are caught here
        try:
            server = make_server(host, port, self.app, threaded=False)
        except (OSError, SystemExit) as e:
            raise TransportError(f"Could not start server on {host}:{port}: {e}") from e

        logger.info(f"Started server at http://{host}:{server.server_port}")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Server stopped")
        finally:
            server.server_close()


def format_results_for_cli(results, query):
    """Format ranked (identity, score) pairs for command-line display."""
    if not results:
        return f"No results found for '{query}'"

    output = [f"Search results for '{query}':"]
    output.append("-" * 80)

    for i, (identity, score) in enumerate(results, 1):
        output.append(f"{i}. {identity} (Score: {score:.4f})")

    output.append("-" * 80)
    return "\n".join(output)

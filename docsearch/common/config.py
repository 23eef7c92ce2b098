"""
Configuration settings for the document search engine.
"""
import os

# Index file settings
INDEX_PATH = 'index.json'

# Document sources (build phase)
DOCS_ROOT = os.path.join('data', 'docs.gl-mainline')
DOCS_DIRS = ['es1', 'es2', 'es3', 'el3', 'gl2', 'gl3', 'gl4', 'sl4']

# Extraction settings
EXTRACTION_PARSER = 'html.parser'
EXTRACTION_SKIP_TAGS = ['script', 'style']  # elements whose text never reaches the index

# Server settings
SERVER_HOST = '127.0.0.1'
SERVER_PORT = 5000
ALLOWED_ORIGIN = 'http://127.0.0.1:5000'
STATIC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'search', 'static')
LANDING_PAGE = 'index.html'
NOT_FOUND_PAGE = '404.html'

# Search settings
MAX_RESULTS = 10  # results printed by the command-line search

# Logging settings
LOG_FILE = 'docsearch.log'
LOG_FORMAT = '%(asctime)s [%(levelname)s] [{component}] %(message)s'

"""
Query ranking: scores every document of the corpus index against a query.
"""
import logging
from typing import List, Optional, Tuple

from docsearch.indexer.corpus_index import CorpusIndex
from docsearch.indexer.lexer import tokenize
from docsearch.search.scorer import idf, tf

logger = logging.getLogger("search")


def rank(query: str, index: CorpusIndex, limit: Optional[int] = None) -> List[Tuple[str, float]]:
    """Rank the documents of ``index`` by relevance to ``query``.

    The query score of a document is the sum of TF x IDF over every query
    term, repeated terms included. Returns (identity, score) pairs by
    descending score; equal scores are ordered by identity so the result
    does not depend on the index's iteration order.
    """
    terms = list(tokenize(query))
    idfs = {term: idf(term, index) for term in set(terms)}

    ranked = []
    for identity, table in index.items():
        total = sum(table.values())
        relevance = sum(tf(term, table, total) * idfs[term] for term in terms)
        ranked.append((identity, relevance))

    ranked.sort(key=lambda item: (-item[1], item[0]))
    logger.debug(f"Ranked {len(ranked)} documents for {len(terms)} query terms")

    if limit is not None:
        return ranked[:limit]
    return ranked

"""
TF-IDF scoring over a corpus index.
"""
import math


def tf(term, table, total=None):
    """Term frequency of ``term`` in one document's table.

    TF(t, d) = count(t, d) / sum of all counts in d, and 0 for an empty
    table. ``total`` may be passed when the caller already knows the sum.
    """
    if total is None:
        total = sum(table.values())
    if total == 0:
        return 0.0
    return table.get(term, 0) / total


def idf(term, index):
    """Inverse document frequency of ``term`` across the corpus.

    IDF(t) = log10(N / max(1, DF(t))). A term missing from every document
    falls back to DF = 1; an empty index scores 0.
    """
    document_count = len(index)
    if document_count == 0:
        return 0.0
    return math.log10(document_count / max(1, index.document_frequency(term)))


def score(term, table, index):
    """TF-IDF contribution of a single term to one document."""
    return tf(term, table) * idf(term, index)

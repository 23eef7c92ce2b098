"""
Read-only corpus index mapping document identities to term-frequency tables.
"""
from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional


class CorpusIndex(Mapping):
    """Immutable mapping of document identity -> {term: count}.

    The tables are copied on construction and handed out as read-only
    views, so an index loaded at startup can be shared by every request
    without locking.
    """

    def __init__(self, documents: Optional[Mapping] = None):
        self._documents: Dict[str, MappingProxyType] = {}
        for identity, table in (documents or {}).items():
            self._documents[identity] = MappingProxyType(dict(table))
        self._document_frequencies: Optional[Counter] = None

    def __getitem__(self, identity: str) -> Mapping:
        return self._documents[identity]

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __repr__(self):
        return f"CorpusIndex({len(self)} documents)"

    def document_frequency(self, term: str) -> int:
        """Number of documents whose table contains ``term``."""
        if self._document_frequencies is None:
            frequencies = Counter()
            for table in self._documents.values():
                frequencies.update(table.keys())
            self._document_frequencies = frequencies
        return self._document_frequencies[term]

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Plain nested-dict copy of the index, for serialization."""
        return {identity: dict(table) for identity, table in self._documents.items()}

"""
Tokenizer for the document search engine.
Splits raw text into normalized terms: upper-cased words, numbers and single symbols.
"""


class Lexer:
    """Iterator over the terms of a piece of text.

    Each call to ``next`` skips leading whitespace and then emits one term:

    * a run starting with a letter takes every following letter or digit
      and is upper-cased,
    * a run starting with a digit takes every following digit verbatim,
    * any other character is a term on its own.

    A lexer is consumed once; build a new one (or call ``tokenize``) to
    iterate the same text again.
    """

    def __init__(self, content):
        self.content = content
        self.position = 0

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def _trim_left(self):
        while self.position < len(self.content) and self.content[self.position].isspace():
            self.position += 1

    def _chop(self, length):
        token = self.content[self.position:self.position + length]
        self.position += length
        return token

    def _chop_while(self, predicate):
        end = self.position
        while end < len(self.content) and predicate(self.content[end]):
            end += 1
        return self._chop(end - self.position)

    def next_token(self):
        """Return the next term, or None once the text is exhausted."""
        self._trim_left()
        if self.position >= len(self.content):
            return None

        first = self.content[self.position]
        if first.isalpha():
            return self._chop_while(str.isalnum).upper()
        if first.isnumeric():
            return self._chop_while(str.isnumeric)
        return self._chop(1)


def tokenize(text):
    """Return a fresh lazy iterator over the terms of ``text``."""
    return Lexer(text)

import re
from typing import Iterator, Optional, Set

# Anything other than a-z / A-Z separates words
DELIMITER_RE = re.compile(r"[^a-zA-Z]+")


def tokenize(text: str) -> Iterator[str]:
    """Yields lowercase words; a word is a run of ASCII letters."""
    for token in DELIMITER_RE.split(text):
        if token:
            yield token.lower()


class WordSetLoader:
    """
    Reads a text file into a set of lowercase words (for fast lookup).
    Repeated words collapse into one entry.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, filename: str) -> Set[str]:
        # FileNotFoundError is left to the caller
        with open(filename, "r", encoding=self.encoding, errors="replace") as f:
            words = set()
            for line in f:
                words.update(tokenize(line))
        return words

    def from_text(self, text: Optional[str]) -> Set[str]:
        return set(tokenize(text or ""))


def load_words(filename: str, encoding: str = "utf-8") -> Set[str]:
    """
    Loads words from a file and returns them as a set.
    """
    return WordSetLoader(encoding).load(filename)

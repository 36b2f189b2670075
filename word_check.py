import argparse
import os
import sys
from typing import Iterable, Iterator, List, Optional, Set

from dotenv import load_dotenv

from load_words import WordSetLoader

load_dotenv()

DEFAULT_DICTIONARY = os.getenv("DICTIONARY_FILE", "dictionary.txt")
DEFAULT_DOCUMENT = os.getenv("DOCUMENT_FILE", "alice_in_wonderland.txt")
WORDS_ENCODING = os.getenv("WORDS_ENCODING", "utf-8")


def missing_words(document: Set[str], dictionary: Set[str]) -> Iterator[str]:
    """Words of `document` that the dictionary does not contain, in set order."""
    for word in document:
        if word not in dictionary:
            yield word


def format_report(words: Iterable[str]) -> str:
    return ", ".join(words)


def check_words_presence(dictionary_file: str = DEFAULT_DICTIONARY,
                         document_file: str = DEFAULT_DOCUMENT,
                         sort: bool = False,
                         encoding: str = WORDS_ENCODING) -> List[str]:
    """
    Loads the dictionary and the document into sets and returns
    the document words missing from the dictionary.
    Raises FileNotFoundError if either file is absent.
    """
    loader = WordSetLoader(encoding)
    dictionary = loader.load(dictionary_file)
    document = loader.load(document_file)
    print(f"[WORDS] {dictionary_file}: {len(dictionary)} words, "
          f"{document_file}: {len(document)} words", file=sys.stderr)

    missing = list(missing_words(document, dictionary))
    if sort:
        missing.sort()
    return missing


def print_report(missing: List[str], document_file: str) -> None:
    if missing:
        print(f"Words from {document_file} that are NOT in the dictionary:")
        print(format_report(missing))
    else:
        print(f"All words from {document_file} are in the dictionary.")
    print("Program finished.")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Report document words that are missing from a dictionary.")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help=f"Dictionary word list (default: {DEFAULT_DICTIONARY})")
    ap.add_argument("--document", default=DEFAULT_DOCUMENT,
                    help=f"Document to check (default: {DEFAULT_DOCUMENT})")
    ap.add_argument("--sort", action="store_true",
                    help="Print missing words in alphabetical order")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        missing = check_words_presence(args.dictionary, args.document, sort=args.sort)
    except FileNotFoundError as e:
        print(f"Error: file not found: {e.filename}", file=sys.stderr)
        return 1

    print_report(missing, args.document)
    return 0


if __name__ == "__main__":
    sys.exit(main())

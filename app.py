# app.py
from flask import Flask, jsonify, request
from dotenv import load_dotenv
from typing import Optional, Set
import os
import click

from load_words import WordSetLoader
from word_check import check_words_presence, missing_words, print_report

# ── ENV / config ──────────────────────────────────────────────────────────────
load_dotenv()

app = Flask(__name__)
app.config["DICTIONARY_FILE"] = os.getenv("DICTIONARY_FILE", "dictionary.txt")
app.config["DOCUMENT_FILE"] = os.getenv("DOCUMENT_FILE", "alice_in_wonderland.txt")
app.config["WORDS_ENCODING"] = os.getenv("WORDS_ENCODING", "utf-8")

_dictionary: Optional[Set[str]] = None


def get_dictionary() -> Set[str]:
    """Dictionary set, read from disk once per process."""
    global _dictionary
    if _dictionary is None:
        loader = WordSetLoader(app.config["WORDS_ENCODING"])
        _dictionary = loader.load(app.config["DICTIONARY_FILE"])
        print(f"[API] Loaded {len(_dictionary)} dictionary words from {app.config['DICTIONARY_FILE']}")
    return _dictionary


def reset_dictionary() -> None:
    """Drops the per-process dictionary cache so the next request reads the file again."""
    global _dictionary
    _dictionary = None


def dictionary_missing_response(e: FileNotFoundError):
    print(f"[API] Dictionary not found: {e.filename}")
    return jsonify({"error": f"Dictionary file not found: {e.filename}"}), 500


# ── Routes ────────────────────────────────────────────────────────────────────
@app.route("/api/wordlist")
def wordlist_api():
    try:
        words = get_dictionary()
    except FileNotFoundError as e:
        return dictionary_missing_response(e)
    return jsonify(sorted(words))


@app.route("/api/missing", methods=["POST"])
def missing_api():
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        text = payload.get("text")
    else:
        text = request.form.get("text")

    if not isinstance(text, str) or not text.strip():
        return jsonify({"error": "Field 'text' is required."}), 400

    try:
        dictionary = get_dictionary()
    except FileNotFoundError as e:
        return dictionary_missing_response(e)

    document = WordSetLoader(app.config["WORDS_ENCODING"]).from_text(text)
    missing = sorted(missing_words(document, dictionary))
    return jsonify({"missing": missing, "count": len(missing)})


# ── CLI ───────────────────────────────────────────────────────────────────────
@app.cli.command("check-words")
@click.option("--sort", is_flag=True, help="Print missing words in alphabetical order.")
def check_words(sort):
    """Check the configured document against the configured dictionary."""
    document_file = app.config["DOCUMENT_FILE"]
    try:
        missing = check_words_presence(app.config["DICTIONARY_FILE"], document_file,
                                       sort=sort, encoding=app.config["WORDS_ENCODING"])
    except FileNotFoundError as e:
        raise click.ClickException(f"file not found: {e.filename}")
    print_report(missing, document_file)


if __name__ == "__main__":
    app.run(debug=True)

# spellgate/train.py
"""
Build a symspellpy frequency dictionary from a JSON words file.

Example:
    python -m spellgate.train \
        --words words_dictionary.json \
        --output dictionaries/en_words.txt \
        --sample "helo wrld"
"""
from __future__ import annotations
import argparse, json
from pathlib import Path

from .symspell import DEFAULT_LANGUAGE, SymSpellCorrector


# -------------------------------------------------------------------
# Conversion
# -------------------------------------------------------------------
def write_frequency_file(words_json: str | Path, output: str | Path, count: int = 1) -> int:
    """Write one ``term count`` line per JSON key; returns the number of terms."""
    with open(words_json, encoding="utf-8") as fh:
        words = json.load(fh)
    if not isinstance(words, dict):
        raise ValueError(f"{words_json}: expected a JSON object of words")

    terms = sorted({w.strip() for w in words if w.strip() and " " not in w.strip()})
    out = Path(output)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as fh:
        for term in terms:
            fh.write(f"{term} {count}\n")
    return len(terms)


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------
def parse_args(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--words", required=True, help="JSON object whose keys are words")
    ap.add_argument("--output", required=True, help="frequency file to write")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE)
    ap.add_argument("--sample", default=None, help="text to correct with the new dictionary")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    n = write_frequency_file(args.words, args.output)
    print(f"Wrote {n} terms to {args.output}")

    if args.sample:
        speller = SymSpellCorrector()
        speller.load_dictionary(args.output, args.language)
        print(f"{args.sample!r} -> {speller.correct(args.sample, args.language)!r}")


if __name__ == "__main__":
    main()

# spellgate/symspell.py
"""
Fuzzy spell-check gateway backed by symspellpy.

All matching (symmetric-delete lookup, candidate ranking) is symspellpy's;
this module only keeps one dictionary per language and swaps each word
for its top suggestion, carrying the original casing over.
"""
from __future__ import annotations
import json, logging, re, time
from importlib import resources
from pathlib import Path
from typing import Dict, Iterable, List

from symspellpy import SymSpell, Verbosity
from symspellpy.helpers import case_transfer_similar

from .errors import UpstreamError

# ------------------------------------------------------------------
# Constants
# ------------------------------------------------------------------
MAX_EDIT_DISTANCE = 2
PREFIX_LENGTH     = 7
DEFAULT_LANGUAGE  = "en"
BUNDLED_DICTIONARY = "frequency_dictionary_en_82_765.txt"

# letters with inner apostrophes ("don't"); digits and punctuation pass through
WORD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")

log = logging.getLogger(__name__)


def bundled_dictionary_path() -> Path:
    """English frequency dictionary shipped inside the symspellpy wheel."""
    return Path(str(resources.files("symspellpy") / BUNDLED_DICTIONARY))


class SymSpellCorrector:
    def __init__(self, max_edit_distance: int = MAX_EDIT_DISTANCE,
                 prefix_length: int = PREFIX_LENGTH):
        self.max_edit_distance = max_edit_distance
        self.prefix_length     = prefix_length
        self._dictionaries: Dict[str, SymSpell] = {}

    # --------------------------------------------------
    # Warm-up
    # --------------------------------------------------
    @property
    def languages(self) -> List[str]:
        return sorted(self._dictionaries)

    def _dictionary(self, language: str) -> SymSpell:
        if language not in self._dictionaries:
            self._dictionaries[language] = SymSpell(
                max_dictionary_edit_distance=self.max_edit_distance,
                prefix_length=self.prefix_length,
            )
        return self._dictionaries[language]

    def load_dictionary(self, path: str | Path, language: str = DEFAULT_LANGUAGE) -> int:
        """Load a ``term count`` frequency file; returns the number of words."""
        if not Path(path).is_file():
            raise FileNotFoundError(f"dictionary not found: {path}")
        sym = self._dictionary(language)
        start = time.perf_counter()
        sym.load_dictionary(str(path), term_index=0, count_index=1)
        log.info("Loaded %s dictionary from %s (%d words, %.0f ms)",
                 language, path, len(sym.words), (time.perf_counter() - start) * 1_000)
        return len(sym.words)

    def train(self, terms: Iterable[str], language: str = DEFAULT_LANGUAGE) -> int:
        """Register plain terms (count 1 each); returns the dictionary size."""
        sym = self._dictionary(language)
        for term in terms:
            term = term.strip()
            if term:
                sym.create_dictionary_entry(term, 1)
        return len(sym.words)

    def train_from_json(self, path: str | Path, language: str = DEFAULT_LANGUAGE) -> int:
        """Train from the keys of a JSON object, e.g. ``{"apple": 1, ...}``."""
        with open(path, encoding="utf-8") as fh:
            words = json.load(fh)
        if not isinstance(words, dict):
            raise ValueError(f"{path}: expected a JSON object of words")
        size = self.train(words.keys(), language)
        log.info("Trained %s dictionary from %s (%d words)", language, path, size)
        return size

    # --------------------------------------------------
    # Correction
    # --------------------------------------------------
    def correct(self, text: str, language: str = DEFAULT_LANGUAGE) -> str:
        """Correct each word in place; casing, punctuation and spacing are kept."""
        sym = self._dictionaries.get(language)
        if sym is None:
            raise UpstreamError(f"no spelling dictionary loaded for '{language}'")
        return WORD_RE.sub(lambda m: self._correct_word(sym, m.group()), text)

    def _correct_word(self, sym: SymSpell, word: str) -> str:
        lower = word.lower()
        suggestions = sym.lookup(lower, Verbosity.TOP, max_edit_distance=self.max_edit_distance)
        if not suggestions or suggestions[0].term == lower:
            return word
        return case_transfer_similar(word, suggestions[0].term)

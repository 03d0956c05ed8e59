import json

import pytest

from spellgate.errors import UpstreamError
from spellgate.symspell import SymSpellCorrector
from spellgate.train import main, write_frequency_file


@pytest.fixture
def words_json(tmp_path):
    path = tmp_path / "words_dictionary.json"
    path.write_text(json.dumps({"hello": 1, "world": 1, "spelling": 1, " ": 1}), encoding="utf-8")
    return path


def test_correct_uses_top_suggestion_per_word(speller):
    assert speller.correct("helo wrld", "en") == "hello world"


def test_correct_known_words_unchanged(speller):
    assert speller.correct("hello world", "en") == "hello world"


def test_correct_keeps_casing_punctuation_and_spacing(speller):
    assert speller.correct("Helo,  wrld!\n", "en") == "Hello,  world!\n"


def test_correct_leaves_known_and_unknown_words_untouched(speller):
    text = "Hello World, 42 Zzyzzxqvbn don't"
    assert speller.correct(text, "en") == text


def test_correct_blank_text_returned_as_is(speller):
    assert speller.correct("", "en") == ""
    assert speller.correct("   ", "en") == "   "


def test_unknown_language_raises(speller):
    with pytest.raises(UpstreamError, match="'fr'"):
        speller.correct("bonjour", "fr")


def test_train_ignores_blank_terms():
    s = SymSpellCorrector()
    assert s.train(["alpha", "", "  ", "beta"], "en") == 2
    assert s.languages == ["en"]


def test_dictionaries_are_per_language():
    s = SymSpellCorrector()
    s.train(["hello"], "en")
    s.train(["hallo"], "de")
    assert s.languages == ["de", "en"]
    assert s.correct("helo", "en") == "hello"
    assert s.correct("halo", "de") == "hallo"


def test_train_from_json_uses_keys(words_json):
    s = SymSpellCorrector()
    assert s.train_from_json(words_json) == 3
    assert s.correct("speling") == "spelling"


def test_train_from_json_rejects_non_object(tmp_path):
    path = tmp_path / "words.json"
    path.write_text('["hello"]', encoding="utf-8")
    with pytest.raises(ValueError):
        SymSpellCorrector().train_from_json(path)


def test_load_dictionary_missing_file(tmp_path):
    s = SymSpellCorrector()
    with pytest.raises(FileNotFoundError):
        s.load_dictionary(tmp_path / "missing.txt")
    assert s.languages == []


def test_write_frequency_file_then_load(words_json, tmp_path):
    out = tmp_path / "out" / "en.txt"
    assert write_frequency_file(words_json, out) == 3
    assert out.read_text(encoding="utf-8").splitlines() == ["hello 1", "spelling 1", "world 1"]

    s = SymSpellCorrector()
    assert s.load_dictionary(out) == 3
    assert s.correct("wrld") == "world"


def test_train_cli_prints_sample(words_json, tmp_path, capsys):
    out = tmp_path / "en.txt"
    main(["--words", str(words_json), "--output", str(out), "--sample", "helo"])
    printed = capsys.readouterr().out
    assert "Wrote 3 terms" in printed
    assert "'helo' -> 'hello'" in printed

import pytest

from linkage_print import Disjunct, MalformedSubscriptError, ParseOptions, resolve_words
from linkage_print.words import is_idiom_word, is_suffix

from conftest import CAT_WORDS, make_sentence


def test_one_display_word_per_position():
    sentence = make_sentence(["LEFT-WALL", "a.d", None, "lot.I12", "=.zzz", "RIGHT-WALL"])
    words = resolve_words(sentence, ParseOptions())
    assert len(words) == sentence.length


def test_walls_are_replaced_by_their_display_names():
    sentence = make_sentence(["xxx", "cat.n", "yyy"])
    assert resolve_words(sentence, ParseOptions()) == ["LEFT-WALL", "cat.n", "RIGHT-WALL"]


def test_walls_kept_when_dictionary_has_none():
    sentence = make_sentence(["xxx", "cat.n", "yyy"], walls=False)
    assert resolve_words(sentence, ParseOptions()) == ["xxx", "cat.n", "yyy"]


def test_island_words_are_bracketed():
    sentence = make_sentence(
        ["LEFT-WALL", "the", None, None, "RIGHT-WALL"],
        unsplit=["LEFT-WALL", "the", "cat", None, "RIGHT-WALL"],
    )
    assert resolve_words(sentence, ParseOptions()) == [
        "LEFT-WALL", "the", "[cat]", "", "RIGHT-WALL",
    ]


def test_idiom_subscript_is_stripped():
    sentence = make_sentence(["LEFT-WALL", "a.I12", "lot.I11", "RIGHT-WALL"])
    assert resolve_words(sentence, ParseOptions())[1:3] == ["a", "lot"]


def test_idiom_without_subscript_is_rejected():
    sentence = make_sentence(["LEFT-WALL", Disjunct("alot", is_idiom=True), "RIGHT-WALL"])
    with pytest.raises(MalformedSubscriptError):
        resolve_words(sentence, ParseOptions())


def test_empty_word_is_blanked():
    sentence = make_sentence(["LEFT-WALL", "hey", "=.zzz", "RIGHT-WALL"])
    assert resolve_words(sentence, ParseOptions())[2] == ""


def test_suffix_merges_into_stem_slot(suffix_sentence):
    words = resolve_words(suffix_sentence, ParseOptions(display_suffixes=False))
    assert words == ["LEFT-WALL", "runed", "", "RIGHT-WALL"]


def test_displaying_suffixes_restores_stem_and_suffix(suffix_sentence):
    merged = resolve_words(suffix_sentence, ParseOptions(display_suffixes=False))
    plain = resolve_words(suffix_sentence, ParseOptions(display_suffixes=True))
    assert merged[1] == "runed"
    assert plain[1:3] == ["run.v", "=.ed"]


def test_suffix_keeps_its_subscript_body():
    sentence = make_sentence(["LEFT-WALL", "чита.v", "=ла.vnndpp", "RIGHT-WALL"])
    words = resolve_words(sentence, ParseOptions(display_suffixes=False))
    assert words[1:3] == ["читала.vnndpp", ""]


def test_suffix_after_island_is_left_alone():
    sentence = make_sentence(
        ["LEFT-WALL", None, "=.ed", "RIGHT-WALL"],
        unsplit=["LEFT-WALL", "runed", None, "RIGHT-WALL"],
    )
    words = resolve_words(sentence, ParseOptions(display_suffixes=False))
    assert words[1:3] == ["[runed]", "=.ed"]


def test_alternatives_used_without_word_subscripts():
    sentence = make_sentence(CAT_WORDS)
    sentence.words[2].alternatives = ("cat.n", "cat.v")
    words = resolve_words(sentence, ParseOptions(display_word_subscripts=False))
    assert words[2] == "cat.n"


def test_suffix_classification():
    assert is_suffix("=.ed")
    assert is_suffix("=ла.vnndpp")
    assert not is_suffix("=")
    assert not is_suffix("=.eq")
    assert not is_suffix("=.v")
    assert not is_suffix("=[!]")
    assert not is_suffix("run.v")


def test_idiom_classification():
    assert is_idiom_word("lot.I12")
    assert not is_idiom_word("lot.n")
    assert not is_idiom_word("lot")
    assert not is_idiom_word("lot.I1x")

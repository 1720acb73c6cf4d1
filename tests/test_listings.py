from linkage_print import (
    Disjunct,
    Link,
    Linkage,
    ParseOptions,
    Sense,
    print_disjunct_counts,
    print_disjuncts,
    print_expression_sizes,
    print_links_and_domains,
    print_senses,
)

from conftest import CAT_WORDS, make_linkage, make_sentence


class FakeScorer:
    def disjunct_score(self, linkage, word_index):
        return 0.5

    def word_senses(self, linkage, word_index):
        if word_index == 2:
            yield Sense(2, "cat.n", "Ds- Ss+", "cat%1:05:00::", 0.25)


def _link_line(left, llabel, label, rlabel, right):
    return (
        left.ljust(15)
        + llabel.ljust(5)
        + "   <---"
        + label.ljust(5, "-")
        + "->  "
        + rlabel.ljust(5)
        + "     "
        + right
        + "\n"
    )


def test_links_listed_with_domains():
    links = [
        Link(1, 2, "Ds", "D", "Ds", domains=("m",)),
        Link(0, 3, "Wd", "Wd", "Wd", domains=("m", "s")),
    ]
    text = print_links_and_domains(make_linkage(CAT_WORDS, links))
    assert text == (
        " (m)" + "    " + "   " + _link_line("the", "D", "Ds", "Ds", "cat")
        + " (m) (s)" + "   " + _link_line("LEFT-WALL", "Wd", "Wd", "Wd", "ran")
        + "\n"
    )


def test_links_listed_in_original_order_without_excluded():
    links = [Link(2, 3, "Ss", "Ss", "Ss"), Link(None, 3, "Xp"), Link(1, 2, "Ds", "D", "Ds")]
    text = print_links_and_domains(make_linkage(CAT_WORDS, links))
    lines = [line for line in text.splitlines() if line]
    assert len(lines) == 2
    assert "cat" in lines[0].split("<---")[0]
    assert "the" in lines[1].split("<---")[0]


def test_long_fields_are_truncated():
    linkage = make_linkage(
        ["LEFT-WALL", "extraordinarily", "long", "RIGHT-WALL"],
        [Link(1, 2, "ABCDEFG", "ABCDEFG", "ABCDEFG")],
    )
    line = print_links_and_domains(linkage).splitlines()[0]
    assert line == "   " + "extraordinarily" + "ABCDE" + "   <---" + "ABCDE" + "->  " + "ABCDE" + "     long"


def test_violation_is_reported():
    linkage = make_linkage(CAT_WORDS, [Link(1, 2, "Ds", "D", "Ds")])
    linkage.violation = "Unbounded s domain78"
    text = print_links_and_domains(linkage)
    assert text.endswith("\nP.P. violations:\n        Unbounded s domain78\n\n")


def test_disjuncts_skip_walls_and_islands():
    sentence = make_sentence(
        [
            "LEFT-WALL",
            Disjunct("the", cost=0.0, connectors="D+"),
            None,
            Disjunct("ran.v", cost=1.0, connectors="Ss- Xp+"),
            "RIGHT-WALL",
        ],
        unsplit=["LEFT-WALL", "the", "cat", "ran", "RIGHT-WALL"],
    )
    linkage = Linkage(sentence=sentence, links=[], options=ParseOptions())
    assert print_disjuncts(linkage) == (
        " " * 18 + "the" + "    " + "  0.0" + "  D+\n"
        + " " * 16 + "ran.v" + "    " + "  1.0" + "  Ss- Xp+\n"
    )


def test_disjuncts_with_corpus_scores():
    sentence = make_sentence(["LEFT-WALL", Disjunct("the", connectors="D+"), "RIGHT-WALL"])
    linkage = Linkage(sentence=sentence, links=[])
    assert print_disjuncts(linkage, FakeScorer()) == (
        " " * 18 + "the" + "    " + "  0.0" + "  0.500" + " D+\n"
    )


def test_senses_need_a_corpus_scorer(cat_linkage):
    assert print_senses(cat_linkage) == "Corpus statistics is not enabled in this version\n"


def test_senses_listed_per_word(cat_linkage):
    assert print_senses(cat_linkage, FakeScorer()) == (
        "2 cat.n dj=Ds- Ss+ sense=cat%1:05:00:: score=0.250000\n"
    )


def test_disjunct_counts_and_expression_sizes():
    sentence = make_sentence(["LEFT-WALL", "cat", "RIGHT-WALL"])
    sentence.words[1].disjunct_count = 4
    sentence.words[1].expression_size = 9
    assert print_disjunct_counts(sentence) == "LEFT-WALL(0) cat(4) RIGHT-WALL(0) \n\n"
    assert print_expression_sizes(sentence) == "LEFT-WALL[0] cat[9] RIGHT-WALL[0] \n\n"

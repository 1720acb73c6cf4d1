from linkage_print.glyphs import display_width, left_append, split_clusters, upper_prefix


def test_combining_marks_stay_with_their_base():
    assert split_clusters("e\u0301tude") == ["e\u0301", "t", "u", "d", "e"]
    assert display_width("e\u0301tude") == 5


def test_width_counts_characters_not_bytes():
    assert display_width("ñandú") == 5
    assert display_width("кошка") == 5
    assert display_width("") == 0


def test_left_append_pads_with_the_tail_of_the_pad():
    assert left_append("Ds", "-----") == "Ds---"
    assert left_append("the", " " * 6) == "the   "


def test_left_append_truncates_long_text():
    assert left_append("CONSTRUCTION", "-----") == "CONST"


def test_upper_prefix():
    assert upper_prefix("Ds") == "D"
    assert upper_prefix("MVp") == "MV"
    assert upper_prefix("xD") == ""

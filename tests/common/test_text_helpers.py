from rolodex.common.strings.text import blank, cell_text, contains_ci, csv_to_list


def test_csv_to_list_accepts_strings_lists_and_none():
    assert csv_to_list("GET, POST ,,") == ["GET", "POST"]
    assert csv_to_list([" a ", "", "b"]) == ["a", "b"]
    assert csv_to_list(None) == []


def test_cell_text_trims_and_blanks_to_none():
    assert cell_text("  USA ") == "USA"
    assert cell_text("   ") is None
    assert cell_text(None) is None
    assert cell_text(42) == "42"


def test_contains_ci():
    assert contains_ci("Marguerite", "GUE")
    assert not contains_ci("Marguerite", "xyz")
    # a missing value never matches
    assert not contains_ci(None, "a")


def test_blank():
    assert blank(None)
    assert blank("  ")
    assert not blank(" x ")

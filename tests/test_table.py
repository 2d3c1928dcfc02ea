import pytest

from routegroup import render_table


def test_left_aligned_table():
    table = render_table(
        [["VERB", "URI", "ACTION", "NAME"], ["posts", "GET", "/posts/featured", "featured"]]
    )
    assert table.splitlines() == [
        "| VERB  | URI | ACTION          | NAME     |",
        "| :---- | :-- | :-------------- | :------- |",
        "| posts | GET | /posts/featured | featured |",
    ]


def test_per_column_alignment():
    table = render_table([["a", "b", "c"], ["x", "yy", "zzzz"]], align=["l", "r", "c"])
    assert table.splitlines() == [
        "| a   |   b |  c   |",
        "| :-- | --: | :--: |",
        "| x   |  yy | zzzz |",
    ]


def test_header_only():
    assert render_table([["VERB", "URI"]]) == "| VERB | URI |\n| :--- | :-- |"


def test_short_rows_are_padded():
    lines = render_table([["a", "b"], ["x"]]).splitlines()
    assert lines[2] == "| x   |     |"


def test_no_rows():
    assert render_table([]) == ""


def test_invalid_alignment():
    with pytest.raises(ValueError):
        render_table([["a"]], align="x")

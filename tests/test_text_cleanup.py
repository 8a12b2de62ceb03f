from resume_intake.utils.text_cleanup import normalize_text


def test_folds_line_endings_and_blank_runs():
    text = "Name:\u00a0Jane  Doe\r\n\r\n\r\n\r\n   Skills:\tGo  \r"

    assert normalize_text(text) == "Name: Jane Doe\n\nSkills: Go"


def test_replaces_typographic_characters():
    assert normalize_text("O\u2019Neil \u2013 \u201cLead\u201d\u2026\u200b") == "O'Neil - \"Lead\"..."


def test_whitespace_only():
    assert normalize_text(" \n\t\r\n ") == ""

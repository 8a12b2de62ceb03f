from io import BytesIO

import docx
import pytest

from resume_intake.services.text_extractor import (
    UnsupportedFileError,
    detect_file_type,
    extract_text,
)


def _docx_bytes():
    document = docx.Document()
    document.add_paragraph("Name: Jane Doe")
    document.add_paragraph("")
    document.add_paragraph("Skills: Go")
    table = document.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "Email: jane@example.com"
    table.cell(0, 1).text = "Phone: 555-0100"
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def test_plain_text_strips_bom():
    data = "\ufeffName: Jane Doe\nSkills: Go".encode("utf-8")

    assert extract_text(data, "resume.txt", "text/plain") == "Name: Jane Doe\nSkills: Go"


def test_plain_text_with_bad_bytes_does_not_fail():
    text = extract_text(b"Name: Jane \xff Doe", "resume.txt")

    assert text.startswith("Name: Jane ")


def test_docx_paragraphs_and_tables():
    text = extract_text(_docx_bytes(), "Resume.DOCX")

    assert text.splitlines() == [
        "Name: Jane Doe",
        "Skills: Go",
        "Email: jane@example.com",
        "Phone: 555-0100",
    ]


def test_unsupported_extension():
    with pytest.raises(UnsupportedFileError, match=r"\.png"):
        extract_text(b"\x89PNG", "photo.png", "image/png")


@pytest.mark.parametrize(
    "file_name, mime_type, expected",
    [
        ("cv.pdf", None, "pdf"),
        ("cv.Docx", "application/octet-stream", "docx"),
        ("resume", "application/pdf", "pdf"),
        ("resume", "text/plain; charset=utf-8", "txt"),
    ],
)
def test_detect_file_type(file_name, mime_type, expected):
    assert detect_file_type(file_name, mime_type) == expected


def test_detect_file_type_without_hints():
    with pytest.raises(UnsupportedFileError):
        detect_file_type("resume", None)


def test_doc_is_not_supported():
    with pytest.raises(UnsupportedFileError):
        detect_file_type("old.doc", "application/msword")

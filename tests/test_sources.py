import io

import pytest

from srctracker.core.errors import DocumentError, SelectionError
from srctracker.sources import FileDocument, Selection, StreamDocument, open_document


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "example.py"
    path.write_text("def f():\n    return 1\n\nprint(f())\n", encoding="utf-8")
    return path


def test_whole_document_when_selection_empty(document):
    doc = FileDocument(document)
    assert doc.character_count() == len(document.read_text(encoding="utf-8"))


def test_line_selection_includes_line_endings(document):
    doc = FileDocument(document)
    assert doc.selected_text(Selection(1, 2)) == "def f():\n    return 1\n"
    assert doc.character_count(Selection(2, 2)) == len("    return 1\n")


def test_selection_past_end_is_clamped(document):
    doc = FileDocument(document)
    assert doc.selected_text(Selection(4, 99)) == "print(f())\n"
    assert doc.character_count(Selection(50, 60)) == 0


@pytest.mark.parametrize(
    "text, expected",
    [("3-7", Selection(3, 7)), ("3:7", Selection(3, 7)), ("5", Selection(5, 5)), (" 2 - 4 ", Selection(2, 4))],
)
def test_selection_parse(text, expected):
    assert Selection.parse(text) == expected


@pytest.mark.parametrize("text", ["", "a-b", "0-3", "7-3", "1-2-3"])
def test_selection_parse_rejects(text):
    with pytest.raises(SelectionError):
        Selection.parse(text)


def test_missing_file_raises_document_error(tmp_path):
    with pytest.raises(DocumentError):
        FileDocument(tmp_path / "nope.py").character_count()


def test_directory_is_not_a_document(tmp_path):
    with pytest.raises(DocumentError):
        FileDocument(tmp_path).read_text()


def test_stream_document_reads_once():
    doc = StreamDocument(io.StringIO("abc\ndef\n"))
    assert doc.character_count() == 8
    assert doc.character_count(Selection(2, 2)) == 4


def test_open_document():
    assert open_document(None) is None
    assert open_document("") is None
    assert isinstance(open_document("-"), StreamDocument)
    assert isinstance(open_document("some/file.py"), FileDocument)


def test_crlf_terminators_are_counted(tmp_path):
    path = tmp_path / "windows.py"
    path.write_bytes(b"a = 1\r\nb = 2\r\n")

    doc = FileDocument(path)
    assert doc.character_count() == 14
    assert doc.selected_text(Selection(2, 2)) == "b = 2\r\n"


def test_cr_only_terminators_split_lines(tmp_path):
    path = tmp_path / "classic.py"
    path.write_bytes(b"one\rtwo\rthree")

    doc = FileDocument(path)
    assert doc.character_count() == 13
    assert doc.selected_text(Selection(3, 3)) == "three"


def test_form_feed_does_not_start_a_new_line(tmp_path):
    path = tmp_path / "paged.c"
    path.write_bytes(b"int a;\x0c\nint b;\nint c;\n")

    doc = FileDocument(path)
    assert doc.selected_text(Selection(2, 2)) == "int b;\n"
    assert doc.selected_text(Selection(1, 1)) == "int a;\x0c\n"


def test_stream_document_keeps_crlf_from_raw_bytes():
    stream = io.TextIOWrapper(io.BytesIO(b"x = 1\r\ny = 2\r\n"), encoding="utf-8")
    assert StreamDocument(stream).character_count() == 14

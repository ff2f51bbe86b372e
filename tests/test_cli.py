import io

from linedit.cli import run
from linedit.editor import Editor


def _run(script, editor=None):
    editor = editor or Editor()
    out = io.StringIO()
    code = run(editor, io.StringIO(script), out)
    return editor, out.getvalue(), code


def test_insert_and_display():
    editor, output, code = _run("1\n0\nhello world\n6\n0\n")
    assert code == 0
    assert list(editor.buffer) == ["hello world"]
    assert "1: hello world\n" in output
    assert output.endswith("Exiting editor. Goodbye!\n")


def test_delete_update_undo_redo():
    script = "1\n0\na\n1\n1\nb\n3\n0\nA\n2\n1\n4\n4\n5\n0\n"
    editor, _, _ = _run(script)
    assert list(editor.buffer) == ["A", "b"]


def test_undo_with_nothing_reports():
    _, output, _ = _run("4\n5\n0\n")
    assert "Nothing to undo!\n" in output
    assert "Nothing to redo!\n" in output


def test_invalid_choice_reports():
    _, output, _ = _run("42\nabc\n0\n")
    assert output.count("Invalid choice! Try again.\n") == 2


def test_empty_insert_warns():
    editor, output, _ = _run("1\n0\n\n0\n")
    assert "Warning: Empty insert command.\n" in output
    assert list(editor.buffer) == []


def test_insert_at_invalid_index_reports():
    editor, output, _ = _run("1\n5\ntext\n0\n")
    assert "Invalid index\n" in output
    assert list(editor.buffer) == []


def test_display_empty_buffer():
    _, output, _ = _run("6\n0\n")
    assert "Buffer is empty.\n" in output


def test_save_and_load(tmp_path):
    path = tmp_path / "out.txt"
    editor, output, _ = _run(f"1\n0\nfirst\n1\n1\nsecond\n7\n{path}\n0\n")
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"
    assert "File saved successfully.\n" in output

    loaded, output, _ = _run(f"8\n\n  {path}\n0\n")
    assert list(loaded.buffer) == ["first", "second"]
    assert "File loaded successfully.\n" in output


def test_load_missing_file_reports(tmp_path):
    editor, output, _ = _run(f"8\n{tmp_path / 'missing.txt'}\n0\n")
    assert "Failed to open file for reading.\n" in output
    assert list(editor.buffer) == []


def test_end_of_input_stops_loop():
    editor, output, code = _run("1\n0\nline\n")
    assert code == 0
    assert list(editor.buffer) == ["line"]
    assert "Goodbye" not in output
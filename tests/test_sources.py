"""Tests for Python comment extraction."""

from todolint.models.base import CommentKind
from todolint.sources import (
    collect_comments,
    extract_comments,
    iter_source_files,
    read_comments,
)

SOURCE = '''#!/usr/bin/env python
# TODO: split this module
x = 1  # fixme
s = "# TODO not a comment"
'''


class TestExtractComments:
    """Tests for extract_comments."""

    def test_extracts_comments(self):
        comments = extract_comments(SOURCE, source="mod.py")

        assert [c.kind for c in comments] == [CommentKind.SHEBANG, CommentKind.LINE, CommentKind.LINE]
        assert comments[1].text == " TODO: split this module"
        assert (comments[1].line, comments[1].column) == (2, 0)
        assert (comments[2].line, comments[2].column) == (3, 7)
        assert all(c.source == "mod.py" for c in comments)

    def test_strings_are_not_comments(self):
        assert extract_comments('s = "# TODO"\n') == []

    def test_shebang_only_on_first_line(self):
        comments = extract_comments("x = 1\n#!not a shebang\n")

        assert comments[0].kind == CommentKind.LINE

    def test_tokenize_error_does_not_raise(self):
        comments = extract_comments("# TODO: first\nx = (\n")

        assert isinstance(comments, list)

    def test_empty_source(self):
        assert extract_comments("") == []


class TestSourceFiles:
    """Tests for walking source trees."""

    def test_iter_source_files(self, tmp_path):
        (tmp_path / "a.py").write_text("# a\n")
        (tmp_path / "b.txt").write_text("# b\n")
        (tmp_path / "__pycache__").mkdir()
        (tmp_path / "__pycache__" / "c.py").write_text("# c\n")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "d.py").write_text("# d\n")

        files = list(iter_source_files([str(tmp_path)]))

        assert files == [str(tmp_path / "a.py"), str(tmp_path / "sub" / "d.py")]

    def test_explicit_file_and_missing_path(self, tmp_path):
        path = tmp_path / "script"
        path.write_text("# TODO\n")

        files = list(iter_source_files([str(path), str(tmp_path / "missing")]))

        assert files == [str(path)]

    def test_read_comments(self, tmp_path):
        path = tmp_path / "mod.py"
        path.write_text(SOURCE, encoding="utf-8")

        comments = read_comments(str(path))

        assert len(comments) == 3
        assert comments[0].source == str(path)

    def test_collect_comments(self, tmp_path):
        (tmp_path / "a.py").write_text("# TODO: a\n")
        (tmp_path / "b.py").write_text("x = 1  # b\n")

        comments = collect_comments([str(tmp_path)])

        assert [c.text for c in comments] == [" TODO: a", " b"]

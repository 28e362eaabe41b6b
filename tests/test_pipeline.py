"""Tests for the LintPipeline orchestrator."""

import json

import pytest
from todolint.config import get_settings
from todolint.errors import ConfigurationError
from todolint.models.base import Comment, CommentKind, MatchLocation
from todolint.pipeline import Diagnostic, LintPipeline, LintReport


class TestLintPipeline:
    """Tests for LintPipeline class."""

    @pytest.fixture
    def pipeline(self):
        """Create a pipeline without tracker discovery."""
        return LintPipeline(terms=["todo"], location="start", discover_url=False)

    def test_defaults_from_settings(self):
        """Test that unset options come from Settings."""
        pipeline = LintPipeline()

        assert pipeline.rule.terms == ["todo", "fixme", "xxx"]
        assert pipeline.rule.location == MatchLocation.START
        assert pipeline.tracker_url is None
        assert pipeline.rule.is_loaded is True

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("TODOLINT_TERMS", '["hack"]')
        monkeypatch.setenv("TODOLINT_LOCATION", "anywhere")
        monkeypatch.setenv("TODOLINT_URL", "https://x.test/issues")
        get_settings.cache_clear()

        pipeline = LintPipeline()

        assert pipeline.rule.terms == ["hack"]
        assert pipeline.rule.location == MatchLocation.ANYWHERE
        assert pipeline.tracker_url == "https://x.test/issues"

    def test_invalid_settings_raise_configuration_error(self, monkeypatch):
        monkeypatch.setenv("TODOLINT_LOCATION", "middle")
        get_settings.cache_clear()

        with pytest.raises(ConfigurationError, match="TODOLINT_"):
            LintPipeline()

    def test_invalid_options_fail_fast(self):
        """Test that configuration errors surface at construction."""
        with pytest.raises(ConfigurationError):
            LintPipeline(location="middle")
        with pytest.raises(ConfigurationError):
            LintPipeline(terms=["todo", 1])  # type: ignore[list-item]

    def test_analyze(self, pipeline):
        report = pipeline.analyze([
            Comment(kind=CommentKind.LINE, text=" TODO: refactor this", line=3, column=4, source="a.js"),
            Comment(kind=CommentKind.BLOCK, text=" plain block "),
        ])

        assert isinstance(report, LintReport)
        assert report.flagged is True
        assert report.comments_checked == 2
        assert len(report.diagnostics) == 1
        diagnostic = report.diagnostics[0]
        assert diagnostic.message == "Undocumented TODO: refactor this"
        assert (diagnostic.source, diagnostic.line, diagnostic.column) == ("a.js", 3, 4)
        assert str(diagnostic) == "a.js:3:4: Undocumented TODO: refactor this"
        assert report.processing_time_ms >= 0

    def test_shebang_filtered(self, pipeline):
        """Test that shebang pseudo-tokens never reach the rule."""
        report = pipeline.analyze([Comment(kind=CommentKind.SHEBANG, text="todo")])

        assert report.flagged is False
        assert report.comments_checked == 0

    def test_analyze_text_clean(self, pipeline):
        report = pipeline.analyze_text(" nothing to see")

        assert report.flagged is False
        assert report.summary.startswith("No undocumented")

    def test_explicit_url(self):
        pipeline = LintPipeline(terms=["todo"], url="https://example.com/issues/4", discover_url=False)

        assert pipeline.analyze_text(" TODO: see https://example.com/issues/4").flagged is False
        assert pipeline.analyze_text(" TODO: see the wiki").flagged is True

    def test_discovers_tracker_url(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"bugs": "https://x.test/issues"}))

        pipeline = LintPipeline(discover_url=True, start_dir=str(tmp_path))

        assert pipeline.tracker_url == "https://x.test/issues"
        assert pipeline.analyze_text(" TODO https://x.test/issues/7").flagged is False

    def test_explicit_url_beats_discovery(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"bugs": "https://x.test/issues"}))

        pipeline = LintPipeline(url="https://y.test", discover_url=True, start_dir=str(tmp_path))

        assert pipeline.tracker_url == "https://y.test"

    def test_analyze_source(self, pipeline):
        report = pipeline.analyze_source("#!todo\n# TODO: x\ny = 2  # todo later\n", source="m.py")

        assert report.comments_checked == 2
        assert [str(d) for d in report.diagnostics] == [
            "m.py:2:0: Undocumented TODO: x",
            "m.py:3:7: Undocumented TODO: later",
        ]

    def test_analyze_paths(self, pipeline, tmp_path):
        (tmp_path / "a.py").write_text("# TODO: a\n# fine\n")

        report = pipeline.analyze_paths([str(tmp_path)])

        assert report.comments_checked == 2
        assert len(report.diagnostics) == 1


class TestLintReport:
    """Tests for LintReport and Diagnostic serialization."""

    def test_to_dict(self):
        report = LintReport(
            diagnostics=[Diagnostic(message="Undocumented TODO: a", term="todo", line=1)],
            comments_checked=4,
            processing_time_ms=1.23456,
        )
        d = report.to_dict()

        assert d["flagged"] is True
        assert d["comments_checked"] == 4
        assert d["processing_time_ms"] == 1.23
        assert d["diagnostics"][0]["message"] == "Undocumented TODO: a"
        assert d["summary"] == "Found 1 undocumented warning comments in 4 comments."

    def test_diagnostic_str_without_location(self):
        assert str(Diagnostic(message="m", term="todo")) == "<input>: m"

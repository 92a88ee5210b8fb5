"""Tests for conventional commit header and footer grammar."""

from __future__ import annotations

from relver.core.grammar import (
    is_footer,
    parse_footers,
    parse_header,
    separate_body_and_footers,
)


class TestParseHeader:
    """Tests for parse_header()."""

    def test_simple(self):
        """Parse a header without scope."""
        header = parse_header("feat: add new feature")

        assert header is not None
        assert header.commit_type == "feat"
        assert header.scope is None
        assert header.description == "add new feature"
        assert not header.is_breaking

    def test_with_scope(self):
        """Parse a header with scope."""
        header = parse_header("fix(api): handle null response")

        assert header is not None
        assert header.commit_type == "fix"
        assert header.scope == "api"
        assert header.description == "handle null response"

    def test_breaking_marker(self):
        """The ! marker sets the breaking flag."""
        header = parse_header("feat!: redesign API")

        assert header is not None
        assert header.is_breaking
        assert header.scope is None

    def test_breaking_marker_with_scope(self):
        """The ! marker after a scope sets the breaking flag."""
        header = parse_header("feat(core)!: change config format")

        assert header is not None
        assert header.is_breaking
        assert header.scope == "core"

    def test_empty_scope_is_none(self):
        """Empty parentheses yield no scope."""
        header = parse_header("chore(): tidy")

        assert header is not None
        assert header.scope is None

    def test_scope_with_nested_parentheses(self):
        """A scope may itself contain parentheses."""
        header = parse_header("feat(a(b)): add thing")

        assert header is not None
        assert header.scope == "a(b)"
        assert header.description == "add thing"

    def test_scope_extends_to_last_closing_parenthesis(self):
        """The scope runs to the last ')' that is followed by ': '."""
        header = parse_header("feat(a): b (c): d")

        assert header is not None
        assert header.scope == "a): b (c"
        assert header.description == "d"

    def test_non_conventional(self):
        """Free-form text is not a header."""
        assert parse_header("Updated the readme file") is None

    def test_missing_space_after_colon(self):
        """The colon must be followed by whitespace."""
        assert parse_header("feat:no space") is None

    def test_empty_description(self):
        """A header needs a non-blank description."""
        assert parse_header("feat: ") is None
        assert parse_header("feat:    ") is None

    def test_empty_type(self):
        """A header needs a non-empty type."""
        assert parse_header(": description only") is None
        assert parse_header("(scope): description") is None

    def test_non_ascii_type(self):
        """Types are ASCII word characters only."""
        assert parse_header("fëat: x") is None


class TestSeparateBodyAndFooters:
    """Tests for separate_body_and_footers()."""

    def test_body_only(self):
        """Without footer-shaped lines everything is body."""
        body, footers = separate_body_and_footers(["", "some body text"])

        assert body == ["", "some body text"]
        assert footers == []

    def test_body_and_footers(self):
        """A blank line before a footer line separates the blocks."""
        lines = ["", "body line", "", "Reviewed-by: Someone", "Refs: #12"]
        body, footers = separate_body_and_footers(lines)

        assert body == ["", "body line"]
        assert footers == ["Reviewed-by: Someone", "Refs: #12"]

    def test_non_separator_blank_lines_stay_in_body(self):
        """Blank lines between paragraphs remain in the body."""
        lines = ["", "first paragraph", "", "second paragraph", "", "Refs: #1"]
        body, footers = separate_body_and_footers(lines)

        assert body == ["", "first paragraph", "", "second paragraph"]
        assert footers == ["Refs: #1"]

    def test_lookahead_skips_multiple_blank_lines(self):
        """Look-ahead passes over consecutive blank lines."""
        lines = ["body", "", "", "Refs: #1"]
        body, footers = separate_body_and_footers(lines)

        assert body == ["body"]
        assert footers == ["", "Refs: #1"]

    def test_footer_without_blank_line_is_body(self):
        """A footer-shaped line with no preceding blank line is body."""
        body, footers = separate_body_and_footers(["Refs: #1"])

        assert body == ["Refs: #1"]
        assert footers == []

    def test_breaking_change_footer_starts_block(self):
        """BREAKING CHANGE starts a footer block."""
        body, footers = separate_body_and_footers(["", "BREAKING CHANGE: gone"])

        assert body == []
        assert footers == ["BREAKING CHANGE: gone"]


class TestParseFooters:
    """Tests for parse_footers()."""

    def test_key_values(self):
        """Footers keep their key order."""
        footers, is_breaking = parse_footers(["Reviewed-by: Someone", "Refs: #12"])

        assert footers == {"Reviewed-by": "Someone", "Refs": "#12"}
        assert list(footers) == ["Reviewed-by", "Refs"]
        assert not is_breaking

    def test_breaking_change(self):
        """BREAKING CHANGE footer sets the breaking flag."""
        footers, is_breaking = parse_footers(["BREAKING CHANGE: old API removed"])

        assert footers == {"BREAKING CHANGE": "old API removed"}
        assert is_breaking

    def test_multiline_continuation(self):
        """Non-footer lines extend the previous footer value."""
        footers, _ = parse_footers(
            ["BREAKING CHANGE: first line", "second line", "third line", "Refs: #1"]
        )

        assert footers["BREAKING CHANGE"] == "first line\nsecond line\nthird line"
        assert footers["Refs"] == "#1"

    def test_continuation_without_key_is_dropped(self):
        """A continuation line before any key is dropped."""
        footers, _ = parse_footers(["orphan line", "Refs: #1"])

        assert footers == {"Refs": "#1"}

    def test_blank_lines_are_not_appended(self):
        """Blank lines never extend a footer value."""
        footers, _ = parse_footers(["Refs: #1", "", "   "])

        assert footers == {"Refs": "#1"}

    def test_last_write_wins(self):
        """A repeated key keeps its last value."""
        footers, _ = parse_footers(["Refs: #1", "Other: x", "Refs: #2"])

        assert footers == {"Refs": "#2", "Other": "x"}

    def test_hyphenated_breaking_key_is_plain_footer(self):
        """BREAKING-CHANGE is an ordinary footer key."""
        footers, is_breaking = parse_footers(["BREAKING-CHANGE: something"])

        assert footers == {"BREAKING-CHANGE": "something"}
        assert not is_breaking


class TestIsFooter:
    """Tests for is_footer()."""

    def test_footer_shapes(self):
        """Letter-and-hyphen keys and BREAKING CHANGE are footers."""
        assert is_footer("Reviewed-by: Someone")
        assert is_footer("BREAKING CHANGE: yes")
        assert is_footer("PiperOrigin-RevId: 12345")

    def test_non_footer_shapes(self):
        """Other key shapes are not footers."""
        assert not is_footer("git-commit-hash:abc")
        assert not is_footer("Not a footer: has spaces in key")
        assert not is_footer("snake_case: value")
        assert not is_footer("")

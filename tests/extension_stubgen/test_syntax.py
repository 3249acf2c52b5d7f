"""Tests for tree-sitter based stub syntax checking."""

import pytest

from extension_stubgen.errors import StubSyntaxError
from extension_stubgen.syntax import StubSyntaxChecker, SyntaxIssue

VALID_STUB = """<?php
namespace App {
class Greeter {
    public function hello (string $name='x') {}
}
}
"""

INVALID_STUB = """<?php
function broken( {}
"""


class TestStubSyntaxChecker:
    """Tests for StubSyntaxChecker."""

    def test_valid_stub_has_no_issues(self) -> None:
        """A well-formed stub parses cleanly."""
        assert StubSyntaxChecker().find_issues(VALID_STUB) == []

    def test_header_only_stub_is_valid(self) -> None:
        """The header emitted for an empty extension is valid PHP."""
        header = "<?php\n/**\n * Generated stub file for code completion purposes\n */\n\n"

        assert StubSyntaxChecker().find_issues(header) == []

    def test_reports_broken_stub(self) -> None:
        """Errors are reported with 1-based positions."""
        issues = StubSyntaxChecker().find_issues(INVALID_STUB)

        assert issues
        assert all(issue.line >= 1 and issue.column >= 1 for issue in issues)
        assert any(issue.line == 2 for issue in issues)

    def test_ensure_valid_passes_valid_stub(self) -> None:
        """ensure_valid returns quietly for valid stubs."""
        StubSyntaxChecker().ensure_valid(VALID_STUB)

    def test_ensure_valid_raises(self) -> None:
        """ensure_valid raises StubSyntaxError listing the issues."""
        with pytest.raises(StubSyntaxError, match="syntax issue"):
            StubSyntaxChecker().ensure_valid(INVALID_STUB)

    def test_checker_is_reusable(self) -> None:
        """One checker parses several sources independently."""
        checker = StubSyntaxChecker()

        assert checker.find_issues(INVALID_STUB)
        assert checker.find_issues(VALID_STUB) == []


class TestSyntaxIssue:
    """Tests for SyntaxIssue."""

    def test_str(self) -> None:
        """Issues print as line:column: message."""
        assert str(SyntaxIssue(3, 7, "unexpected syntax")) == "3:7: unexpected syntax"

"""Syntax checking of generated stubs using tree-sitter."""

from dataclasses import dataclass

import tree_sitter_php
from tree_sitter import Language, Node, Parser

from extension_stubgen.errors import StubSyntaxError

_PHP_LANGUAGE = Language(tree_sitter_php.language_php())
_DEFAULT_ENCODING = "utf-8"

# Line index offset (tree-sitter uses 0-based, we want 1-based)
_LINE_INDEX_OFFSET = 1


@dataclass(frozen=True)
class SyntaxIssue:
    """A syntax problem located in a stub."""

    line: int
    column: int
    message: str

    def __str__(self) -> str:
        """Return ``line:column: message``."""
        return f"{self.line}:{self.column}: {self.message}"


class StubSyntaxChecker:
    """Parses PHP stubs and reports syntax errors."""

    def __init__(self) -> None:
        """Initialise a parser for PHP files (with the ``<?php`` tag)."""
        self.parser = Parser()
        self.parser.language = _PHP_LANGUAGE

    def find_issues(self, source: str) -> list[SyntaxIssue]:
        """Parse a stub and collect every error or missing node.

        Args:
            source: PHP source of the stub

        Returns:
            Issues in document order, empty if the stub parses cleanly

        """
        tree = self.parser.parse(source.encode(_DEFAULT_ENCODING))
        if not tree.root_node.has_error:
            return []

        issues: list[SyntaxIssue] = []
        _collect_issues(tree.root_node, issues)
        return issues

    def ensure_valid(self, source: str) -> None:
        """Raise if the stub has any syntax issue.

        Raises:
            StubSyntaxError: Listing the issues found

        """
        issues = self.find_issues(source)
        if issues:
            details = "; ".join(str(issue) for issue in issues)
            raise StubSyntaxError(
                f"Stub has {len(issues)} syntax issue(s): {details}", issues
            )


def _collect_issues(node: Node, issues: list[SyntaxIssue]) -> None:
    """Recursively collect ERROR and missing nodes.

    Args:
        node: Current node to examine
        issues: List to append issues to

    """
    if node.type == "ERROR":
        issues.append(_issue(node, "unexpected syntax"))
    elif node.is_missing:
        issues.append(_issue(node, f"missing '{node.type}'"))

    for child in node.children:
        _collect_issues(child, issues)


def _issue(node: Node, message: str) -> SyntaxIssue:
    return SyntaxIssue(
        line=node.start_point[0] + _LINE_INDEX_OFFSET,
        column=node.start_point[1] + _LINE_INDEX_OFFSET,
        message=message,
    )

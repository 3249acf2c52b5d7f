"""Output formatting for extension-stubgen CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from extension_stubgen.metadata.models import ModuleMetadata, split_qualified_name
from extension_stubgen.rendering.diagnostics import Diagnostic
from extension_stubgen.syntax import SyntaxIssue

logger = logging.getLogger(__name__)
# stdout is reserved for the generated stub
console = Console(stderr=True)

_GLOBAL_SCOPE = "(global)"


class OutputFormatter:
    """Handles formatting CLI output for different commands."""

    SEVERITY_STYLES = {
        "warning": "[yellow]Warning[/yellow]",
        "error": "[red]Error[/red]",
    }

    def format_diagnostics(self, diagnostics: list[Diagnostic]) -> None:
        """Print a table of the diagnostics raised while rendering.

        Args:
            diagnostics: Diagnostics in the order they were raised

        """
        if not diagnostics:
            console.print("[green]✅ No diagnostics[/green]")
            return

        table = Table(title="Diagnostics")
        table.add_column("Severity", style="bold")
        table.add_column("Construct", style="cyan")
        table.add_column("Message")
        for diagnostic in diagnostics:
            table.add_row(
                self.SEVERITY_STYLES[diagnostic.severity],
                diagnostic.construct,
                diagnostic.message,
            )
        console.print(table)

    def format_symbol_tree(self, module: ModuleMetadata) -> None:
        """Print the extension's symbols grouped by namespace.

        Args:
            module: Metadata of the extension

        """
        title = f"[bold blue]{module.name}[/bold blue]"
        if module.version:
            title += f" [dim]{module.version}[/dim]"
        tree = Tree(title)

        branches: dict[str, Tree] = {}

        def branch(name: str) -> Tree:
            namespace, _ = split_qualified_name(name)
            key = namespace or _GLOBAL_SCOPE
            if key not in branches:
                branches[key] = tree.add(f"[bold]{key}[/bold]")
            return branches[key]

        for constant in module.constants:
            branch(constant.name).add(
                f"[magenta]const[/magenta] {split_qualified_name(constant.name)[1]}"
            )
        for function in module.functions:
            branch(function.name).add(
                f"[green]function[/green] {split_qualified_name(function.name)[1]}()"
            )
        for cls in module.classes:
            branch(cls.name).add(
                f"[cyan]{cls.kind}[/cyan] {split_qualified_name(cls.name)[1]}"
            )

        console.print(tree)
        console.print(
            f"{len(module.constants)} constants, {len(module.functions)} functions, "
            f"{len(module.classes)} classes"
        )

    def format_syntax_issues(self, path: str, issues: list[SyntaxIssue]) -> None:
        """Print the syntax issues found in a stub file."""
        if not issues:
            console.print(f"[green]✅ {path}: no syntax issues[/green]")
            return

        table = Table(title=f"Syntax issues in {path}")
        table.add_column("Line", justify="right")
        table.add_column("Column", justify="right")
        table.add_column("Issue", style="red")
        for issue in issues:
            table.add_row(str(issue.line), str(issue.column), issue.message)
        console.print(table)

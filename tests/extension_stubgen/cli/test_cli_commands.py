"""CLI tests for the extension-stubgen commands."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

SAMPLE_DUMP = """
extensions:
  - name: greeter
    version: "1.0.0"
    constants:
      GREETER_LOUD: true
    functions:
      - name: App\\greet
        parameters:
          - {name: who, type: string, optional: true}
        return_type: string
    classes:
      - name: App\\Greeter
        methods:
          - name: hello
            parameters:
              - {name: name, type: string, optional: true, default: x}
"""


def _flat(text: str) -> str:
    """Undo the line wrapping rich applies to console output."""
    return " ".join(text.split())


def _run(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(  # noqa: S603
        [sys.executable, "-m", "extension_stubgen", *args],
        capture_output=True,
        text=True,
        timeout=60,
        check=False,
        env=env,
    )


@pytest.fixture
def dump_file(tmp_path: Path) -> Path:
    """Write a metadata dump holding the greeter extension."""
    path = tmp_path / "greeter.yaml"
    path.write_text(SAMPLE_DUMP, encoding="utf-8")
    return path


@pytest.fixture
def no_php_env(tmp_path: Path) -> dict[str, str]:
    """Environment pointing the live oracle at a PHP binary that does not exist."""
    env = os.environ.copy()
    env["STUBGEN_PHP_BINARY"] = str(tmp_path / "no-such-php")
    return env


# =============================================================================
# generate
# =============================================================================


class TestGenerateCommand:
    """Tests for 'extension-stubgen generate'."""

    def test_generate_to_stdout(self, dump_file: Path) -> None:
        """The stub is printed on stdout, diagnostics on stderr."""
        result = _run("generate", "greeter", "--dump", str(dump_file))

        assert result.returncode == 0, result.stderr
        assert result.stdout.startswith("<?php\n")
        assert "namespace App {" in result.stdout
        assert "public function hello (string $name='x') {}" in result.stdout
        assert "function greet(string $who='<?>'): string {}" in result.stdout
        assert "const GREETER_LOUD=true;" in result.stdout
        assert "Diagnostics" in result.stderr

    def test_generate_to_file(self, dump_file: Path, tmp_path: Path) -> None:
        """--output writes the stub to a file, creating parent directories."""
        output = tmp_path / "stubs" / "greeter.php"

        result = _run(
            "generate", "greeter", "--dump", str(dump_file), "-o", str(output)
        )

        assert result.returncode == 0, result.stderr
        assert result.stdout == ""
        stub = output.read_text(encoding="utf-8")
        assert "class Greeter {" in stub

    def test_generate_with_check_syntax(self, dump_file: Path) -> None:
        """--check-syntax accepts the generated stub."""
        result = _run("generate", "greeter", "--dump", str(dump_file), "--check-syntax")

        assert result.returncode == 0, result.stderr

    def test_generate_with_config(self, dump_file: Path, tmp_path: Path) -> None:
        """--config changes the layout of the stub."""
        config = tmp_path / "stubgen.yaml"
        config.write_text("indent: '  '\nfile_notice: IDE helper\n", encoding="utf-8")

        result = _run("generate", "greeter", "--dump", str(dump_file), "-c", str(config))

        assert result.returncode == 0, result.stderr
        assert " * IDE helper\n" in result.stdout
        assert "\n  public function hello" in result.stdout

    def test_generate_with_invalid_config(self, dump_file: Path, tmp_path: Path) -> None:
        """An invalid configuration fails the command."""
        config = tmp_path / "stubgen.yaml"
        config.write_text("indent: tabs\n", encoding="utf-8")

        result = _run("generate", "greeter", "--dump", str(dump_file), "-c", str(config))

        assert result.returncode == 1
        assert "Stub generation failed" in _flat(result.stderr)

    def test_unknown_extension_still_emits_header(self, dump_file: Path) -> None:
        """A missing extension yields a header-only stub without --strict."""
        result = _run("generate", "memcached", "--dump", str(dump_file))

        assert result.returncode == 0, result.stderr
        assert result.stdout == (
            "<?php\n/**\n * Generated stub file for code completion purposes\n */\n\n"
        )

    def test_unknown_extension_fails_when_strict(self, dump_file: Path) -> None:
        """--strict turns a missing extension into a failure."""
        result = _run("generate", "memcached", "--dump", str(dump_file), "--strict")

        assert result.returncode == 1
        assert "incomplete" in _flat(result.stderr)

    def test_missing_php_degrades(self, no_php_env: dict[str, str]) -> None:
        """Live reflection without PHP yields a header-only stub."""
        result = _run("generate", "json", env=no_php_env)

        assert result.returncode == 0, result.stderr
        assert result.stdout.startswith("<?php\n")
        assert "function" not in result.stdout


# =============================================================================
# ls-symbols
# =============================================================================


class TestListSymbolsCommand:
    """Tests for 'extension-stubgen ls-symbols'."""

    def test_lists_symbols_by_namespace(self, dump_file: Path) -> None:
        """Symbols are grouped under their namespace."""
        result = _run("ls-symbols", "greeter", "--dump", str(dump_file))

        assert result.returncode == 0, result.stderr
        assert "(global)" in result.stderr
        assert "GREETER_LOUD" in result.stderr
        assert "Greeter" in result.stderr
        assert "1 constants, 1 functions, 1 classes" in _flat(result.stderr)

    def test_unknown_extension_fails(self, dump_file: Path) -> None:
        """Listing a missing extension is an error."""
        result = _run("ls-symbols", "memcached", "--dump", str(dump_file))

        assert result.returncode == 1
        assert "Symbol listing failed" in _flat(result.stderr)


# =============================================================================
# check-syntax
# =============================================================================


class TestCheckSyntaxCommand:
    """Tests for 'extension-stubgen check-syntax'."""

    def test_valid_stub(self, tmp_path: Path) -> None:
        """A valid stub passes."""
        stub = tmp_path / "ok.php"
        stub.write_text("<?php\nfunction ok() {}\n", encoding="utf-8")

        result = _run("check-syntax", str(stub))

        assert result.returncode == 0, result.stderr
        assert "no syntax issues" in _flat(result.stderr)

    def test_invalid_stub(self, tmp_path: Path) -> None:
        """A broken stub exits with code 1 and lists the issues."""
        stub = tmp_path / "broken.php"
        stub.write_text("<?php\nfunction broken( {}\n", encoding="utf-8")

        result = _run("check-syntax", str(stub))

        assert result.returncode == 1
        assert "syntax issue(s)" in result.stderr

    def test_missing_file(self, tmp_path: Path) -> None:
        """Typer rejects paths that do not exist."""
        result = _run("check-syntax", str(tmp_path / "missing.php"))

        assert result.returncode == 2

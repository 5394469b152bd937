from __future__ import annotations

import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Final, Literal

import typer

from a11ylint.diagnostics import RULE_CATALOG, Diagnostic, has_errors, sort_diagnostics
from a11ylint.engine import RuleEngine, bundled_profiles
from a11ylint.errors import ConfigurationError
from a11ylint.markup import MarkupElement, parse_html_elements, scan_jsx_elements

app = typer.Typer(help="Static accessibility checks for HTML and JSX markup")

logger = logging.getLogger(__name__)

_PACKAGE_LOGGER: Final[str] = "a11ylint"
_LOG_HANDLER_NAME: Final[str] = "a11ylint-cli"
_HTML_SUFFIXES: Final[frozenset[str]] = frozenset((".html", ".htm", ".xhtml"))
_CHECK_OUTPUT_SCHEMA_VERSION: Final[int] = 1
_EXIT_CLEAN: Final[int] = 0
_EXIT_FINDINGS: Final[int] = 1
_EXIT_USAGE: Final[int] = 2


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == _LOG_HANDLER_NAME:
            package_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.command()
def check(
    paths: list[Path] = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="HTML or JSX source files",
    ),
    profile: str = typer.Option(
        "recommended",
        "--profile",
        help="Bundled rule profile: recommended|strict",
        show_default=True,
    ),
    format: Literal["text", "json"] = typer.Option(
        "text",
        "--format",
        help="Check output format: text|json",
        show_default=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug records to stderr"),
) -> None:
    """Check markup files for accessibility defects."""
    _configure_logging(verbose)
    try:
        engine = RuleEngine.from_profile(profile)
    except ConfigurationError as exc:
        typer.echo(f"configuration error: {exc}", err=True)
        raise typer.Exit(code=_EXIT_USAGE) from exc

    results: list[tuple[str, Diagnostic]] = []
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            typer.echo(f"unable to read {path}: {exc}", err=True)
            raise typer.Exit(code=_EXIT_USAGE) from exc
        elements = _parse_elements(path, text)
        diagnostics = sort_diagnostics(engine.run(elements))
        logger.debug("checked %s: %d elements, %d diagnostics", path, len(elements), len(diagnostics))
        results.extend((str(path), diagnostic) for diagnostic in diagnostics)

    exit_code = _derive_check_exit_code([diagnostic for _, diagnostic in results])
    _emit_check_output(
        profile=profile,
        results=results,
        output_format=format,
        exit_code=exit_code,
    )
    raise typer.Exit(code=exit_code)


@app.command()
def rules() -> None:
    """List the built-in rules and the profiles enabling them."""
    profiles = bundled_profiles()
    for name, entry in RULE_CATALOG.items():
        enabled_in = ",".join(
            profile_name
            for profile_name, profile in profiles.items()
            if name in profile.rules and profile.rules[name].enabled
        )
        typer.echo(
            f"RULE name={name}"
            f" severity={entry.default_severity}"
            f" profiles={enabled_in or '-'}"
            f" summary={entry.summary}"
        )


def _parse_elements(path: Path, text: str) -> tuple[MarkupElement, ...]:
    if path.suffix.lower() in _HTML_SUFFIXES:
        return parse_html_elements(text)
    return scan_jsx_elements(text)


def _derive_check_exit_code(diagnostics: Sequence[Diagnostic]) -> int:
    if has_errors(diagnostics):
        return _EXIT_FINDINGS
    return _EXIT_CLEAN


def _emit_check_output(
    *,
    profile: str,
    results: Sequence[tuple[str, Diagnostic]],
    output_format: Literal["text", "json"],
    exit_code: int,
) -> None:
    if output_format == "json":
        typer.echo(_build_check_json_output(profile=profile, results=results, exit_code=exit_code))
        return
    for path, diagnostic in results:
        typer.echo(_format_text_line(path, diagnostic))


def _format_text_line(path: str, diagnostic: Diagnostic) -> str:
    location = "-" if diagnostic.line is None else f"{diagnostic.line}:{diagnostic.column}"
    return (
        "DIAG"
        f" path={path}"
        f" location={location}"
        f" severity={diagnostic.severity}"
        f" rule={diagnostic.rule}"
        f" message={diagnostic.message}"
    )


def _build_check_json_output(
    *, profile: str, results: Sequence[tuple[str, Diagnostic]], exit_code: int
) -> str:
    payload: dict[str, object] = {
        "schema_version": _CHECK_OUTPUT_SCHEMA_VERSION,
        "profile": profile,
        "status": "fail" if exit_code != _EXIT_CLEAN else "pass",
        "exit_code": exit_code,
        "diagnostics": [
            {"path": path, **diagnostic.model_dump(mode="json", exclude_none=True)}
            for path, diagnostic in results
        ],
    }
    return json.dumps(payload, ensure_ascii=True, separators=(",", ":"))


def main() -> None:
    app()

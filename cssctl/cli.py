"""Typer CLI entrypoint."""

from __future__ import annotations

from pathlib import Path

import typer

from cssctl.core.errors import CssctlError, PropertyValueError
from cssctl.core.service import StyleSheetService

app = typer.Typer(help="Query and edit CSS rules by selector with vendor-aware property names")


def _build_service(profile: str | None = None, sheets: list[Path] | None = None) -> StyleSheetService:
    service = StyleSheetService(profile)
    for warning in getattr(service, "load_warnings", ()):
        typer.echo(f"Warning: {warning}", err=True)
    if sheets:
        service.load(sheets)
    return service


def _parse_assignments(assignments: list[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for item in assignments:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise PropertyValueError(f"Expected PROPERTY=VALUE, got '{item}'")
        values[name.strip()] = value.strip()
    return values


@app.command("profiles")
def list_profiles() -> None:
    """List available engine profiles."""
    try:
        service = _build_service()
        profiles = service.list_profiles()
        if not profiles:
            typer.echo("No profiles loaded")
            raise typer.Exit(code=1)

        for profile in profiles:
            typer.echo(f"{profile.id}: {profile.name} ({len(profile.properties)} properties)")
    except CssctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("name")
def style_name(
    properties: list[str] = typer.Argument(..., help="Hyphenated CSS property names"),
    profile: str | None = typer.Option(None, "--profile", "-p", help="Engine profile ID"),
) -> None:
    """Show the style name each property resolves to for an engine profile."""
    try:
        service = _build_service(profile)
        for name, resolved in service.style_names(properties).items():
            typer.echo(f"{name} -> {resolved}")
    except CssctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("rules")
def list_rules(
    selector: str,
    sheet: list[Path] = typer.Option(..., "--sheet", "-s", help="Stylesheet file, later sheets take precedence"),
    profile: str | None = typer.Option(None, "--profile", "-p", help="Engine profile ID"),
) -> None:
    """List rules matching SELECTOR, most recently loaded sheet first."""
    try:
        service = _build_service(profile, sheet)
        matches = service.rules(selector)
        if not matches:
            typer.echo(f"No rules match '{selector}'")
            return

        for match in matches:
            typer.echo(f"{match.sheet}: {match.css_text}")
    except CssctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("get")
def get_properties(
    selector: str,
    properties: list[str] = typer.Argument(..., help="CSS property names"),
    sheet: list[Path] = typer.Option(..., "--sheet", "-s", help="Stylesheet file, later sheets take precedence"),
    profile: str | None = typer.Option(None, "--profile", "-p", help="Engine profile ID"),
) -> None:
    """Print the effective value of each property for rules matching SELECTOR."""
    try:
        service = _build_service(profile, sheet)
        report = service.get(selector, properties)
        if report.rule_count == 0:
            typer.echo(f"No rules match '{selector}'", err=True)
            raise typer.Exit(code=1)

        for name, value in report.values.items():
            typer.echo(f"{name}: {value if value is not None else '<unset>'}")
    except CssctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("set")
def set_properties(
    selector: str,
    assignments: list[str] = typer.Argument(..., help="PROPERTY=VALUE pairs"),
    sheet: list[Path] = typer.Option(..., "--sheet", "-s", help="Stylesheet file, later sheets take precedence"),
    profile: str | None = typer.Option(None, "--profile", "-p", help="Engine profile ID"),
) -> None:
    """Set properties on rules matching SELECTOR and print the modified sheets.

    Files are never rewritten; redirect the output to keep the result.
    """
    try:
        values = _parse_assignments(assignments)
        service = _build_service(profile, sheet)
        result = service.set(selector, values)
        if result.rule_count == 0:
            typer.echo(f"No rules match '{selector}'", err=True)
            raise typer.Exit(code=1)

        for label, css_text in result.sheets.items():
            typer.echo(f"/* {label} */")
            typer.echo(css_text)
    except CssctlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


def run() -> None:
    app()


if __name__ == "__main__":
    run()

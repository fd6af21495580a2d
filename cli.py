from __future__ import annotations

import asyncio
from pathlib import Path
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config import SETTINGS
from parser.catalog import LocaleCatalog
from translator.autofill import AutoFillLanguageRequest, AutoFillService
from translator.base import BaseTranslator
from translator.errors import TranslationError
from translator.factory import build_translator
from utils.locale_codes import AUTO, from_provider_code, is_auto, to_provider_code
from utils.logging_config import configure_logging

app = typer.Typer(add_completion=False, help="Machine translation for locale catalogs via LibreTranslate")
console = Console()


def _run_async(coro):
    return asyncio.run(coro)


def _translator(ctx: typer.Context) -> BaseTranslator:
    options = ctx.obj or {}
    try:
        return build_translator(url=options.get("url"), api_key=options.get("api_key"))
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _fail(exc: TranslationError) -> typer.Exit:
    console.print(f"[red]Translation error:[/red] {escape(str(exc))}")
    return typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    url: str | None = typer.Option(None, "--url", help="LibreTranslate base URL"),
    api_key: str | None = typer.Option(None, "--api-key", help="LibreTranslate API key"),
) -> None:
    configure_logging(SETTINGS.log_file)
    ctx.obj = {"url": url, "api_key": api_key}


@app.command(help="Translate a single text")
def translate(
    ctx: typer.Context,
    text: str = typer.Argument(...),
    source: str = typer.Option("auto", "--source", "-s", help="Source locale code or 'auto'"),
    target: str = typer.Option(..., "--target", "-t", help="Target locale code, e.g. zh_TW"),
) -> None:
    provider_source = AUTO if is_auto(source) else to_provider_code(source)

    async def runner():
        async with _translator(ctx) as translator:
            return await translator.translate(text, provider_source, to_provider_code(target))

    try:
        result = _run_async(runner())
    except TranslationError as exc:
        raise _fail(exc) from exc

    console.print(result.translated_text, markup=False)
    if result.detected_source_lang:
        console.print(f"Detected source language: {from_provider_code(result.detected_source_lang)}", style="dim")


@app.command(help="List the languages supported by the provider")
def languages(ctx: typer.Context) -> None:
    async def runner():
        async with _translator(ctx) as translator:
            return await translator.get_supported_languages()

    try:
        items = _run_async(runner())
    except TranslationError as exc:
        raise _fail(exc) from exc

    table = Table(title="Supported languages")
    table.add_column("Provider code")
    table.add_column("Host code")
    table.add_column("Name")
    for item in items:
        table.add_row(item.code, from_provider_code(item.code), escape(item.name))
    console.print(table)


@app.command(help="Check whether the translation provider is reachable")
def health(ctx: typer.Context) -> None:
    async def runner():
        async with _translator(ctx) as translator:
            return await translator.is_available()

    if _run_async(runner()):
        console.print("[green]available[/green]")
        return
    console.print("[red]unavailable[/red]")
    raise typer.Exit(code=1)


@app.command(help="Machine-translate the keys missing from a target catalog")
def autofill(
    ctx: typer.Context,
    source_file: Path = typer.Argument(..., exists=True, readable=True),
    target_file: Path = typer.Argument(...),
    target_lang: str = typer.Option(..., "--target-lang", "-t"),
    source_lang: str | None = typer.Option(None, "--source-lang", "-s", help="Defaults to LOCALEFILL_SOURCE"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write here instead of TARGET_FILE"),
    backup: bool = typer.Option(True, help="Create a .bak file next to an existing target"),
) -> None:
    try:
        source = LocaleCatalog.from_file(source_file)
        target = LocaleCatalog.from_file(target_file) if target_file.exists() else LocaleCatalog.empty(target_file)
    except ValueError as exc:
        console.print(f"[red]Invalid catalog:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    if not target_file.exists():
        target.nested = source.nested

    async def runner():
        request = AutoFillLanguageRequest(target_lang=target_lang, source_lang=source_lang)
        async with _translator(ctx) as translator:
            service = AutoFillService(translator, default_source_lang=SETTINGS.default_source_lang)
            with console.status("Translating"):
                return await service.fill(request, source.entries, target.entries)

    try:
        outcome = _run_async(runner())
    except TranslationError as exc:
        raise _fail(exc) from exc

    for key, error in outcome.failures.items():
        console.log(f"Failed to translate {key}: {error}", markup=False)

    if outcome.filled:
        if backup and output is None and target_file.exists():
            target.backup_original()
        target.apply_translations(outcome.filled)
        try:
            output_path = target.write(output or target_file)
        except ValueError as exc:
            console.print(f"[red]Invalid catalog:[/red] {escape(str(exc))}")
            raise typer.Exit(code=1) from exc
        console.print(f"Saved translated catalog to {output_path}")

    response = outcome.response
    console.print(response.message)
    console.print_json(data=response.to_dict())
    if response.failed_count:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

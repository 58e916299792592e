#!/usr/bin/env python3
# src/webroots/cli.py


from __future__ import annotations

import sys
from pathlib import Path

import typer

from .config import build_translator, load_settings
from .enums import SCAN_ORDER
from .errors import WebrootsError
from .normalizer import normalize_url
from .translator import UrlPathTranslator

app = typer.Typer(
    name="webroots",
    help="Translate between store URLs (web, media, static) and local filesystem paths.",
    add_completion=False,
)

CONFIG_OPTION = typer.Option(..., "--config", "-c", exists=True, dir_okay=False, help="YAML translator config")


def _verbosity_callback(value: int):
    return max(0, min(value, 3))


def _translator(config: Path, verbose: int) -> UrlPathTranslator:
    try:
        return build_translator(load_settings(config), verbose=verbose)
    except WebrootsError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e


@app.command()
def normalize(url: str = typer.Argument(..., help="URL to normalize")) -> None:
    """Print the URL in the form used for base URL matching."""
    print(normalize_url(url))


@app.command("is-local")
def is_local(
    url: str = typer.Argument(..., help="URL to classify"),
    config: Path = CONFIG_OPTION,
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, callback=_verbosity_callback),
) -> None:
    """Print 'local' or 'external'; exit code 1 for external URLs."""
    translator = _translator(config, verbose)
    if translator.is_local(url):
        print("local")
        return
    print("external")
    raise typer.Exit(1)


@app.command("to-path")
def to_path(
    url: str = typer.Argument(..., help="URL to resolve"),
    config: Path = CONFIG_OPTION,
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, callback=_verbosity_callback),
) -> None:
    """Print the local filename behind a store URL."""
    translator = _translator(config, verbose)
    try:
        print(translator.resolve_filename_from_url(url))
    except WebrootsError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e


@app.command("to-url")
def to_url(
    filename: str = typer.Argument(..., help="Local filename to resolve"),
    config: Path = CONFIG_OPTION,
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, callback=_verbosity_callback),
) -> None:
    """Print the current store URL for a local filename."""
    translator = _translator(config, verbose)
    try:
        print(translator.resolve_url_from_path(filename))
    except WebrootsError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e


@app.command()
def stores(config: Path = CONFIG_OPTION) -> None:
    """List configured stores and their base URLs."""
    try:
        settings = load_settings(config)
    except WebrootsError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e

    provider = settings.path_provider()
    print(f"Pub root: {provider.root_path()}")
    print("-" * 80)
    print(f"{'Store':<15} {'Kind':<8} {'Base URL'}")
    print("-" * 80)
    for store in settings.store_registry().list_stores():
        for kind in SCAN_ORDER:
            print(f"{store.code:<15} {kind.value:<8} {store.base_url(kind)}")
    print("-" * 80)


@app.command()
def diagnose() -> None:
    print("webroots Environment Check\n")

    deps = {
        "yaml": "PyYAML",
        "pydantic": "Pydantic",
        "typer": "Typer",
    }

    print("Dependencies")
    print("-" * 50)
    print(f"{'Package':<30} {'Status':<10} {'Version'}")
    print("-" * 50)

    for module, name in deps.items():
        try:
            m = __import__(module)
            version = getattr(m, "__version__", "unknown")
            print(f"{name:<30} {'[OK]':<10} {version}")
        except ImportError:
            print(f"{name:<30} {'[MISSING]':<10} {'not installed'}")
    print(f"\nPython: {sys.version}")


if __name__ == "__main__":
    app()

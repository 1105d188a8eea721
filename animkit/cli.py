"""CLI interface."""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from animkit.animation.binder import PreviewBinder
from animkit.animation.element import StyledElement
from animkit.animation.preview import render_preview_html
from animkit.animation.schema import AnimationConfig, ConfigLoadError, config_from_payload
from animkit.renderers.router import render_export
from animkit.utils.config import settings

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output.")):
    """Preview and export animation configs."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_config(source: str) -> AnimationConfig:
    if source == "-":
        raw = sys.stdin.read()
    else:
        path = Path(source)
        if not path.exists():
            raise typer.BadParameter(f"Missing file: {source}")
        raw = path.read_text(encoding="utf-8")
    try:
        return config_from_payload(raw)
    except ConfigLoadError as exc:
        raise typer.BadParameter(str(exc))


def _emit(text: str, out: Optional[Path]) -> None:
    if out is None:
        typer.echo(text, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote {out}")


@app.command()
def export(
    config: str = typer.Argument(..., help="Path to a config JSON file, or - for stdin."),
    backend: str = typer.Option(settings.default_backend, "--backend", "-b", help="react, css or hoc."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write to a file instead of stdout."),
):
    """Generate React or CSS source for a config."""
    result = render_export(_load_config(config), backend)
    if not result.ok:
        typer.echo(result.error, err=True)
        raise typer.Exit(code=1)
    _emit(result.text, out)


@app.command()
def preview(
    config: str = typer.Argument(..., help="Path to a config JSON file, or - for stdin."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the HTML page to a file."),
):
    """Render a standalone HTML page that plays the animation."""
    _emit(render_preview_html(_load_config(config)), out)


@app.command()
def tokens(config: str = typer.Argument(..., help="Path to a config JSON file, or - for stdin.")):
    """Show the class token and custom properties the preview binder applies."""
    element = StyledElement()
    with PreviewBinder() as binder:
        binder.bind(_load_config(config), element)
        payload = {
            "state": binder.state.value,
            "class_token": binder.class_token,
            "properties": element.style,
        }
    typer.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    app()

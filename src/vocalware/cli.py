from __future__ import annotations

from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.table import Table

from vocalware.client import VocalwareClient
from vocalware.config import VocalwareSettings
from vocalware.core.logging import configure_logging
from vocalware.errors import ConfigurationError, ServiceError
from vocalware.voice import default_catalog

app = typer.Typer(no_args_is_help=True)
console = Console()


def _client_from_settings(settings: VocalwareSettings) -> VocalwareClient:
    return VocalwareClient(
        settings.client_config(default_catalog()),
        timeout_seconds=settings.timeout_seconds,
    )


def _overrides(lang: Optional[str], voice: Optional[str], ext: Optional[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if voice:
        out["voice"] = default_catalog().find(lang=lang or "en", name=voice)
        if out["voice"] is None:
            raise typer.BadParameter("unknown voice %r for language %r" % (voice, lang or "en"))
    if ext:
        out["ext"] = ext.lower()
    return out


@app.command()
def say(
    text: str = typer.Argument(..., help="Text to speak"),
    out: str = typer.Option(None, "--out", "-o", help="Output file (default: speech.<ext>)"),
    lang: str = typer.Option(None, "--lang", help="Language of --voice (default: en)"),
    voice: str = typer.Option(None, "--voice", help="Override VOCALWARE_VOICE_NAME"),
    ext: str = typer.Option(None, "--ext", help="mp3 or swf"),
) -> None:
    """Generate speech and write it to a file."""
    settings = VocalwareSettings()
    configure_logging(settings.log_level)
    overrides = _overrides(lang, voice, ext)

    try:
        with _client_from_settings(settings) as client:
            audio = client.generate(text, **overrides)
    except (ConfigurationError, ServiceError) as e:
        console.print("[bold red]error:[/bold red] %s" % e, markup=True, highlight=False)
        raise typer.Exit(code=1)

    path = audio.save(out or "speech.%s" % audio.suggested_ext)
    console.print("wrote %s (%d bytes, %s)" % (path, len(audio.data), audio.content_type))


@app.command()
def url(
    text: str = typer.Argument(..., help="Text to speak"),
    lang: str = typer.Option(None, "--lang", help="Language of --voice (default: en)"),
    voice: str = typer.Option(None, "--voice", help="Override VOCALWARE_VOICE_NAME"),
    ext: str = typer.Option(None, "--ext", help="mp3 or swf"),
) -> None:
    """Print the signed request URL without sending it."""
    settings = VocalwareSettings()
    overrides = _overrides(lang, voice, ext)
    try:
        client = _client_from_settings(settings)
        try:
            typer.echo(client.build_url(text, **overrides))
        finally:
            client.close()
    except ConfigurationError as e:
        console.print("[bold red]error:[/bold red] %s" % e, markup=True, highlight=False)
        raise typer.Exit(code=1)


@app.command()
def voices(
    lang: str = typer.Option(None, "--lang", help="Only list voices for this language"),
) -> None:
    """List known voices."""
    table = Table(title="Vocalware voices")
    for col in ("lang", "name", "accent", "EID", "LID", "VID"):
        table.add_column(col)
    for v in default_catalog().all(lang):
        table.add_row(v.lang, v.name, v.accent, str(v.engine_id), str(v.lang_id), str(v.voice_id))
    console.print(table)


if __name__ == "__main__":
    app()

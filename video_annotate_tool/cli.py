"""
CLI for the video annotate tool.

Each verb sends one video to the Video Intelligence service and prints the
returned annotations. The verbs are thin wrappers over AnnotateCommand so the
same behaviour is available outside the CLI.
"""

import typer
from rich.markup import escape
from typing import Optional

from .cli_commands import AnnotateCommand
from .cli_commands.annotate import validate_uri
from .config import Config, console, load_settings, log_invalid_settings, setup_logging
from .formatters import FORMATTERS
from .output import dumps, save_to_json
from .video_processor import LabelMode

import structlog

logger = structlog.get_logger(__name__)

# Create the main CLI app
app = typer.Typer(
    name="video-annotate",
    help="Annotate videos with the Google Cloud Video Intelligence API",
    no_args_is_help=True,
)

URI_HELP = "The uri of the video to examine. Can be path to a local file or a Cloud storage uri like gs://bucket/object."
STORAGE_URI_HELP = "The uri of the video to examine. Must be a Cloud storage uri like gs://bucket/object."


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Annotate videos with the Google Cloud Video Intelligence API."""
    settings = load_settings()
    level = "DEBUG" if verbose else settings.get_setting('logging.level', 'INFO')
    setup_logging(level=level, log_file=log_file or settings.get_setting('logging.file'))
    log_invalid_settings(settings)
    ctx.obj = settings


def _settings(ctx: typer.Context) -> Config:
    if isinstance(ctx.obj, Config):
        return ctx.obj
    return load_settings()


def _positive_timeout(value: Optional[float]) -> Optional[float]:
    if value is not None and not 0 < value < float("inf"):
        raise typer.BadParameter("must be a positive number of seconds")
    return value


def _check_uri(action: str, uri: str, param_hint: str = "'URI'") -> str:
    error = validate_uri(action, uri)
    if error:
        raise typer.BadParameter(error, param_hint=param_hint)
    return uri


def _run(
    ctx: typer.Context,
    action: str,
    uri: str,
    json_output: bool,
    output: Optional[str],
    timeout: Optional[float],
    **options,
) -> None:
    """Run an annotate action and print its results."""
    settings = _settings(ctx)
    if timeout is None:
        timeout = settings.get_setting('request.timeout')

    cmd = AnnotateCommand(timeout=timeout)
    result = cmd.execute(action=action, uri=uri, **options)

    if not result.get('success'):
        console.print(f"[red]❌ {escape(str(result.get('error')))}[/red]")
        raise typer.Exit(1)

    results = result['data']['results']
    for error in result['data'].get('errors', []):
        console.print(f"[yellow]⚠️  {escape(error)}[/yellow]")

    if output:
        save_to_json(results, output, logger)
        console.print(f"[green]Results saved to {escape(output)}[/green]")

    if json_output:
        print(dumps(results))
        return

    for line in FORMATTERS[action](results):
        typer.echo(line)


# ============================================================================
# ANNOTATION COMMANDS
# ============================================================================

@app.command("labels")
def labels(
    ctx: typer.Context,
    uri: str = typer.Argument(..., help=URI_HELP),
    mode: Optional[LabelMode] = typer.Option(None, "--mode", help="Label detection mode"),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Also save results as JSON to this file"),
    timeout: Optional[float] = typer.Option(None, "--timeout", callback=_positive_timeout, help="Seconds to wait for the analysis to finish"),
):
    """Print a list of labels found in the video."""
    _check_uri("labels", uri)
    _run(ctx, "labels", uri, json_output, output, timeout, mode=mode)


@app.command("shots")
def shots(
    ctx: typer.Context,
    uri: str = typer.Argument(..., help=STORAGE_URI_HELP),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Also save results as JSON to this file"),
    timeout: Optional[float] = typer.Option(None, "--timeout", callback=_positive_timeout, help="Seconds to wait for the analysis to finish"),
):
    """Print a list shot changes."""
    _check_uri("shots", uri)
    _run(ctx, "shots", uri, json_output, output, timeout)


@app.command("explicit-content")
def explicit_content(
    ctx: typer.Context,
    uri: str = typer.Argument(..., help=STORAGE_URI_HELP),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Also save results as JSON to this file"),
    timeout: Optional[float] = typer.Option(None, "--timeout", callback=_positive_timeout, help="Seconds to wait for the analysis to finish"),
):
    """Analyze the content of the video."""
    _check_uri("explicit_content", uri)
    _run(ctx, "explicit_content", uri, json_output, output, timeout)


@app.command("transcribe")
def transcribe(
    ctx: typer.Context,
    uri: str = typer.Argument(..., help=STORAGE_URI_HELP),
    language_code: Optional[str] = typer.Option(None, "--language-code", "-l", help="Language of the speech (default en-US)"),
    punctuation: bool = typer.Option(True, "--punctuation/--no-punctuation", help="Add automatic punctuation"),
    max_alternatives: Optional[int] = typer.Option(None, "--max-alternatives", min=1, help="Maximum alternatives per transcription"),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Also save results as JSON to this file"),
    timeout: Optional[float] = typer.Option(None, "--timeout", callback=_positive_timeout, help="Seconds to wait for the analysis to finish"),
):
    """Print the audio track as text."""
    _check_uri("transcribe", uri)
    if language_code is None:
        language_code = _settings(ctx).get_setting('transcription.language_code')

    console.print("Processing video for speech transcription.")
    _run(
        ctx, "transcribe", uri, json_output, output, timeout,
        language_code=language_code,
        enable_automatic_punctuation=punctuation,
        max_alternatives=max_alternatives,
    )


if __name__ == "__main__":
    app()

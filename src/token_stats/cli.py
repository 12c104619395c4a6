from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml

from .config import TokenStatsConfig, load_config
from .pipeline import analyze_text
from .reporting import format_report, report_to_json
from .tokenization import build_rules, tokenize

logger = logging.getLogger(__name__)

app = typer.Typer(help="Token statistics CLI.", no_args_is_help=True)

OUTPUT_FORMATS = {"text", "json"}


@app.command()
def analyze(
    input_path: Path = typer.Argument(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_path: Path | None = typer.Argument(
        None, help="Where to write the report (defaults to the configured path)."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    output_format: str = typer.Option(
        "text", "--format", "-f", help="Report layout: 'text' or 'json'."
    ),
    parallel: bool | None = typer.Option(
        None,
        "--parallel/--sequential",
        help="Override config parallel flag.",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Do not echo the report to stdout."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
) -> None:
    """Count paragraphs, sentences, tokens and types, then write the report."""
    _configure_logging(verbose)
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unsupported format '{output_format}'.", param_hint="--format"
        )
    cfg = load_config(config)
    if parallel is not None:
        cfg.parallel = parallel

    text = _read_text(input_path, cfg)
    report = analyze_text(text, cfg)
    if output_format == "json":
        output = report_to_json(report)
    else:
        output = format_report(report)

    if not quiet:
        typer.echo(output)

    destination = output_path or Path(cfg.default_output_path)
    try:
        destination.write_text(output, encoding=cfg.encoding)
    except OSError as exc:
        logger.error("Failed to write report to %s: %s", destination, exc)
        typer.echo(f"Failed to write report to {destination}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def tokens(
    input_path: Path = typer.Argument(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print the token stream, one token per line."""
    cfg = load_config(config)
    text = _read_text(input_path, cfg)
    for token in tokenize(text, build_rules(cfg.slash_exceptions)):
        typer.echo(token)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TokenStatsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _read_text(path: Path, config: TokenStatsConfig) -> str:
    """Read a text file so that every line, including the last, ends with a newline."""
    try:
        contents = path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}") from exc
    # read_text already folds \r\n and \r into \n.
    if contents and not contents.endswith("\n"):
        contents += "\n"
    return contents


if __name__ == "__main__":
    main()

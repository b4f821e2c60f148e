"""Typer-based command line interface for the text utilities.

Every command takes the text to process as an argument and prints the result
on stdout, either as plain text or, with ``--json``, as a JSON object.  Ranges
are given as ``START END`` and printed as ``start end``.

Exit codes
----------
0 success
2 usage error (reported by typer)
4 configuration error (bad config file, unknown language)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .features import get_shape, hash_str_to_i32
from .language import Language
from .preprocess import normalize, remove_diacritics
from .utils.errors import NluUtilsError, UnknownLanguageError
from .utils.logging import configure_logging, get_logger
from .utils.textspan import convert_range_to_byte, convert_range_to_char, substring

logger = get_logger(__name__)

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="nlu-utils",
    help="Text normalization helpers. Use 'nlu-utils normalize TEXT' to normalize text.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _config(ctx: typer.Context) -> ConfigModel:
    cfg = ctx.obj
    if not isinstance(cfg, ConfigModel):
        raise RuntimeError("command invoked without a loaded configuration")
    return cfg


def _apply_overrides(cfg: ConfigModel, *, output_format: str | None) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if output_format is not None:
        if output_format not in ("text", "json"):
            raise typer.BadParameter("must be text or json", param_hint="--format")
        new_cfg.output.format = output_format  # type: ignore[assignment]
    return new_cfg


def _emit(ctx: typer.Context, as_json: bool, payload: dict[str, Any], plain: str) -> None:
    """Print ``payload`` as JSON or ``plain`` depending on flags and config."""

    use_json = as_json or _config(ctx).output.format == "json"
    if use_json:
        typer.echo(json.dumps(payload, ensure_ascii=False))
    else:
        typer.echo(plain)


JSON_OPTION = typer.Option(  # noqa: B008
    False, "--json", help="Emit a JSON object instead of plain text"
)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    log_level: Optional[str] = typer.Option(  # noqa: B008
        None, "--log-level", help="Override the configured log level"
    ),
    output_format: Optional[str] = typer.Option(  # noqa: B008
        None, "--format", help="Output format [text|json], overrides the config"
    ),
) -> None:
    """Entry point for the nlu-utils command group."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, NluUtilsError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    try:
        configure_logging(log_level or cfg.logging.level)
    except ValueError as exc:
        _safe_exit(4, str(exc))
    logger.debug("loaded config language=%s", cfg.language)
    ctx.obj = _apply_overrides(cfg, output_format=output_format)


@app.command("normalize")
def normalize_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to normalize"),  # noqa: B008
    as_json: bool = JSON_OPTION,
) -> None:
    """Trim, strip diacritics and lowercase TEXT."""

    result = normalize(text)
    _emit(ctx, as_json, {"input": text, "normalized": result}, result)


@app.command("strip-diacritics")
def strip_diacritics_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to process"),  # noqa: B008
    as_json: bool = JSON_OPTION,
) -> None:
    """Remove accents and other combining marks from TEXT."""

    result = remove_diacritics(text)
    _emit(ctx, as_json, {"input": text, "result": result}, result)


@app.command("shape")
def shape_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to classify"),  # noqa: B008
    as_json: bool = JSON_OPTION,
) -> None:
    """Print the casing shape of TEXT (xxx, XXX, Xxx or xX)."""

    shape = get_shape(text)
    _emit(ctx, as_json, {"input": text, "shape": shape}, shape)


@app.command("hash")
def hash_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to hash"),  # noqa: B008
    as_json: bool = JSON_OPTION,
) -> None:
    """Print the stable signed 32-bit hash of TEXT."""

    value = hash_str_to_i32(text)
    _emit(ctx, as_json, {"input": text, "hash": value}, str(value))


@app.command("to-char")
def to_char_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text the offsets refer to"),  # noqa: B008
    start: int = typer.Argument(..., min=0, help="Start byte offset"),  # noqa: B008
    end: int = typer.Argument(..., min=0, help="End byte offset"),  # noqa: B008
    as_json: bool = JSON_OPTION,
) -> None:
    """Convert the byte range START END of TEXT to a char range."""

    char_start, char_end = convert_range_to_char(text, (start, end))
    _emit(
        ctx,
        as_json,
        {"byte_range": [start, end], "char_range": [char_start, char_end]},
        f"{char_start} {char_end}",
    )


@app.command("to-byte")
def to_byte_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text the offsets refer to"),  # noqa: B008
    start: int = typer.Argument(..., min=0, help="Start char index"),  # noqa: B008
    end: int = typer.Argument(..., min=0, help="End char index"),  # noqa: B008
    as_json: bool = JSON_OPTION,
) -> None:
    """Convert the char range START END of TEXT to a byte range."""

    byte_start, byte_end = convert_range_to_byte(text, (start, end))
    _emit(
        ctx,
        as_json,
        {"char_range": [start, end], "byte_range": [byte_start, byte_end]},
        f"{byte_start} {byte_end}",
    )


@app.command("substring")
def substring_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to slice"),  # noqa: B008
    start: int = typer.Argument(..., min=0, help="Start char index"),  # noqa: B008
    end: int = typer.Argument(..., min=0, help="End char index"),  # noqa: B008
    as_json: bool = JSON_OPTION,
) -> None:
    """Print the characters of TEXT in the char range START END."""

    result = substring(text, (start, end))
    _emit(ctx, as_json, {"char_range": [start, end], "substring": result}, result)


@app.command("language")
def language_cmd(
    ctx: typer.Context,
    lang: Optional[str] = typer.Option(  # noqa: B008
        None, "--lang", help="Language tag (default from config)"
    ),
    as_json: bool = JSON_OPTION,
) -> None:
    """Show the punctuation table and word separator of a language."""

    try:
        language = Language.parse(lang) if lang is not None else _config(ctx).language_tag
    except UnknownLanguageError as exc:
        _safe_exit(4, str(exc))
    payload = {
        "language": str(language),
        "punctuation": language.punctuation,
        "separator": language.default_separator,
    }
    plain = "\n".join(
        [
            f"language: {language}",
            f"punctuation: {language.punctuation}",
            f"separator: {language.default_separator!r}",
        ]
    )
    _emit(ctx, as_json, payload, plain)


__all__ = ["app"]

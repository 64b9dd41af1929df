from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable, Iterable, Mapping
from itertools import chain
from pathlib import Path
from typing import Any

import typer

from string_splitter.adapters import emit_jsonl, io_text
from string_splitter.chunking import chunk as chunk_text
from string_splitter.config import SplitterSpec, load_spec
from string_splitter.env_utils import debug_logging
from string_splitter.errors import ConfigError

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _format_timings(timings: Mapping[str, float]) -> str:
    """Return ``timings`` as newline-delimited ``name: seconds`` strings."""
    return "\n".join(f"{n}: {t:.2f}s" for n, t in timings.items())


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise typer.Exit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except Exception as exc:
        _exit_with_error(exc)


def _configure_logging(verbose: bool) -> None:
    if verbose or debug_logging():
        logging.basicConfig(
            level=logging.DEBUG if debug_logging() else logging.INFO,
            format="[%(levelname)s] %(name)s: %(message)s",
        )


def _unescape(marker: str) -> str:
    """Decode backslash escapes such as ``\\n`` or ``\\t`` typed on the command line."""
    return marker.encode("latin-1", "backslashreplace").decode("unicode_escape")


def _parse_pair(value: str) -> tuple[str, str]:
    """Return ``(opening, closing)`` from an ``"OPEN CLOSE"`` option value."""
    tokens = value.split()
    if len(tokens) != 2:
        raise ConfigError(f"--pair expects 'OPEN CLOSE', got {value!r}")
    opening, closing = tokens
    return _unescape(opening), _unescape(closing)


def _cli_overrides(
    splitters: Iterable[str] | None,
    delimiters: Iterable[str] | None,
    pairs: Iterable[str] | None,
    remove_splitters: bool | None,
    trim: bool | None,
    legacy_boundary: bool | None,
    chunk_size: int | None,
    encoding: str | None,
) -> dict[str, Any]:
    marker_delimiters: list[Any] = [_unescape(d) for d in delimiters or ()]
    marker_delimiters += [_parse_pair(p) for p in pairs or ()]
    return {
        k: v
        for k, v in {
            "splitters": [_unescape(s) for s in splitters] if splitters else None,
            "delimiters": marker_delimiters or None,
            "remove_splitters": remove_splitters,
            "trim_parts": trim,
            "legacy_boundary": legacy_boundary,
            "chunk_size": chunk_size,
            "encoding": encoding,
        }.items()
        if v is not None
    }


def _split_parts(input_path: Path, spec: SplitterSpec) -> list[str]:
    config = spec.to_config()
    if spec.chunk_size:
        batches = io_text.split_file_chunks(input_path, config, spec.chunk_size, spec.encoding)
        return list(chain.from_iterable(batches))
    return io_text.split_file(input_path, config, spec.encoding)


def _emit(parts: Iterable[str], out: Path | None) -> None:
    if out:
        emit_jsonl.write(parts, out)
    else:
        emit_jsonl.dump(parts, sys.stdout)


def _run_split(
    input_path: Path,
    out: Path | None,
    splitters: list[str] | None,
    delimiters: list[str] | None,
    pairs: list[str] | None,
    remove_splitters: bool | None,
    trim: bool | None,
    legacy_boundary: bool | None,
    chunk_size: int | None,
    encoding: str | None,
    spec: str,
    verbose: bool,
) -> None:
    _configure_logging(verbose)
    s = load_spec(
        Path(spec),
        overrides=_cli_overrides(
            splitters,
            delimiters,
            pairs,
            remove_splitters,
            trim,
            legacy_boundary,
            chunk_size,
            encoding,
        ),
    )
    t0 = time.time()
    parts = _split_parts(input_path, s)
    timings = {"split": time.time() - t0}
    _emit(parts, out)
    if verbose:
        print(_format_timings(timings), file=sys.stderr)
        print(f"parts: {len(parts)}", file=sys.stderr)


def _run_chunk(input_path: Path, size: int, encoding: str, out: Path | None) -> None:
    _emit(chunk_text(io_text.read_text(input_path, encoding), size), out)


@app.command()
def split(
    input_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    splitter: list[str] | None = typer.Option(None, "--splitter", "-s"),
    delimiter: list[str] | None = typer.Option(None, "--delimiter", "-d"),
    pair: list[str] | None = typer.Option(None, "--pair"),
    remove_splitters: bool | None = typer.Option(None, "--remove-splitters/--keep-splitters"),
    trim: bool | None = typer.Option(None, "--trim/--no-trim"),
    legacy_boundary: bool | None = typer.Option(None, "--legacy-boundary/--fixed-boundary"),
    chunk_size: int | None = typer.Option(
        None, "--chunk-size", help="Stream the input in pieces of this many characters."
    ),
    encoding: str | None = typer.Option(None, "--encoding"),
    spec: str = typer.Option("splitter.yaml", "--spec"),
    out: Path | None = typer.Option(None, "--out"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Split INPUT_PATH at the configured splitters and emit JSONL rows."""
    _safe(
        lambda: _run_split(
            input_path,
            out,
            splitter,
            delimiter,
            pair,
            remove_splitters,
            trim,
            legacy_boundary,
            chunk_size,
            encoding,
            spec,
            verbose,
        )
    )


@app.command()
def chunk(
    input_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    size: int = typer.Option(..., "--size"),
    encoding: str = typer.Option("utf-8", "--encoding"),
    out: Path | None = typer.Option(None, "--out"),
) -> None:
    """Cut INPUT_PATH into fixed-size pieces and emit them as JSONL rows."""
    _safe(lambda: _run_chunk(input_path, size, encoding, out))


if __name__ == "__main__":
    app()

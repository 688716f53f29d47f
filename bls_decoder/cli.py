"""Command-line interface for the save file decoder.

WHY: Users need a quick way to inspect a save from the terminal: read its
description, check the brick count, or export everything to JSON for other
tools. The CLI wires the decoder to the pluggable formatters behind a
single command.

HOW: Uses argparse to accept an input file, output format selection, an
optional output directory, and a log level. Opens the file, constructs a
SaveReader, drives it to exhaustion, and hands the resulting DecodedSave to
each selected formatter. Output goes to stdout, or to files when
--output-dir is given. Status messages go to stderr.

RULES:
- Positional argument: input save file path
- Files without a .bls extension are decoded anyway, with a warning
- --formats: comma-separated formatter keys (default: BLS_DEFAULT_FORMATS)
- Bricks are only kept in memory when a selected formatter needs them
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-summary-2.txt)
- A failure in the brick stream still produces output for the bricks read
  so far, then exits with status 1
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bls_decoder.config import (
    DEFAULT_FORMATS,
    LOG_FORMAT,
    LOG_LEVEL,
    SAVE_FILE_SUFFIXES,
    parse_format_keys,
)
from bls_decoder.core.errors import DecodeError
from bls_decoder.core.reader import SaveReader
from bls_decoder.formatters import FORMATTERS
from bls_decoder.formatters.base import DecodedSave, FormatterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def decode_save(path: Path, keep_records: bool = False) -> DecodedSave:
    """Decode a save file and drive its brick stream to the end.

    WHY: Formatters need final values (the declared count is only settled
    once every brick has been pulled) and the number of bricks read.

    HOW: Opens the file in binary mode, constructs a SaveReader, counts (and
    optionally keeps) every brick. A DecodeError raised mid-stream is
    recorded on the result instead of propagating.

    RULES:
    - Header failures propagate as DecodeError
    - Mid-stream failures are stored in DecodedSave.error
    - declared_count is read after the stream is exhausted

    Args:
        path: Path to the save file.
        keep_records: Keep the decoded bricks in DecodedSave.records.

    Returns:
        The DecodedSave snapshot.
    """
    with path.open("rb") as source:
        reader = SaveReader(source)
        save = DecodedSave(
            source_filename=path.name,
            description=reader.description,
            palette=reader.palette,
            declared_count=None,
        )
        try:
            for record in reader:
                save.record_count += 1
                if keep_records:
                    save.records.append(record)
        except DecodeError as exc:
            logger.error("Decoding stopped after %d bricks: %s", save.record_count, exc)
            save.error = str(exc)
        save.declared_count = reader.declared_count
    return save


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. House-summary.txt)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. House-summary-2.txt, House-2.json)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # e.g. "-summary.txt" → ("-summary", ".txt"), ".json" → ("", ".json")
    dot_idx = suffix.rfind(".")
    if dot_idx >= 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Write one formatter output to a conflict-free path as UTF-8."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _run(args: argparse.Namespace) -> int:
    """Execute the decode-and-format pipeline, returning the exit code."""
    input_path = Path(args.input_file).resolve()

    if not input_path.is_file():
        print("Error: File not found: {}".format(input_path), file=sys.stderr)
        return 1

    if input_path.suffix.lower() not in SAVE_FILE_SUFFIXES:
        logger.warning("%s does not have a .bls extension; decoding anyway", input_path.name)

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            print("Error: Output directory does not exist: {}".format(output_dir), file=sys.stderr)
            return 1

    try:
        format_keys = parse_format_keys(args.formats or DEFAULT_FORMATS, FORMATTERS.keys())
        formatters = [FORMATTERS[key]() for key in format_keys]
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    try:
        save = decode_save(
            input_path,
            keep_records=any(f.needs_records for f in formatters),
        )
    except DecodeError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1
    except OSError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    saved_files: List[Path] = []
    for formatter in formatters:
        for output in formatter.format(save):
            if output_dir is None:
                sys.stdout.write(output.content)
            else:
                saved_path = _save_output(output, input_path.stem, output_dir)
                saved_files.append(saved_path)
                _status("Saved {}: {}".format(formatter.name, saved_path.name))

    if saved_files:
        _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))

    if save.error:
        print("Error: {}".format(save.error), file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect the parser without decoding anything.
    """
    parser = argparse.ArgumentParser(
        prog="bls_decoder",
        description="Decode a Blockland save file and report its contents.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the .bls save file.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), DEFAULT_FORMATS
             ),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Write each output to a file in this directory instead of stdout.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Always exits through sys.exit with the pipeline's status code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    sys.exit(_run(args))


if __name__ == "__main__":
    main()

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import click

from dupcheck.config import Settings, load_settings
from dupcheck.errors import FileCreateError, FileOpenError
from dupcheck.shingles import ShingleSet
from dupcheck.similarity import SimilarityReport, compare
from dupcheck.text import normalize

logger = logging.getLogger(__name__)


@dataclass
class Document:
    path: str
    raw_length: int
    truncated: bool
    text: bytes = b""


def read_document(path: str, max_file_size: int) -> Document:
    """
    Read at most max_file_size bytes of path. Anything past the cap is
    dropped and reported on the returned Document, not raised.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read(max_file_size + 1)
    except OSError as e:
        raise FileOpenError(path, e.strerror or str(e)) from e
    truncated = len(raw) > max_file_size
    if truncated:
        raw = raw[:max_file_size]
        logger.debug("%s truncated to %d bytes", path, max_file_size)
    return Document(path=path, raw_length=len(raw), truncated=truncated, text=raw)


def format_score(score: float, precision: int = 2) -> str:
    return f"{score:.{precision}f}"


def write_score(path: str, score: float, precision: int = 2) -> None:
    try:
        with open(path, "w") as f:
            f.write(format_score(score, precision) + "\n")
    except OSError as e:
        raise FileCreateError(path, e.strerror or str(e)) from e


def run_pipeline(original_path: str,
                 plagiarized_path: str,
                 output_path: str,
                 settings: Optional[Settings] = None,
                 echo: Optional[Callable[[str], None]] = click.echo) -> SimilarityReport:
    """
    Score how much of plagiarized_path duplicates original_path and write the
    score to output_path. Progress goes to echo (pass None to silence it).
    """
    settings = settings or load_settings()
    say = echo or (lambda msg: None)

    say("Processing files...")
    say(f"Original file: {original_path}")
    say(f"Plagiarized file: {plagiarized_path}")
    say(f"Output file: {output_path}")

    original = read_document(original_path, settings.max_file_size)
    say(f"Original read, length: {original.raw_length} bytes")
    plagiarized = read_document(plagiarized_path, settings.max_file_size)
    say(f"Plagiarized read, length: {plagiarized.raw_length} bytes")

    say("Normalizing text...")
    original.text = normalize(original.text)
    plagiarized.text = normalize(plagiarized.text)

    say("Generating n-gram features...")
    n = settings.ngram_size
    original_set = ShingleSet.build(original.text, n, table_size_hint=settings.table_size_hint)
    plagiarized_set = ShingleSet.build(plagiarized.text, n, table_size_hint=settings.table_size_hint)

    say("Computing similarity...")
    report = compare(original_set, plagiarized_set)
    logger.debug("intersection=%d union=%d score=%f", report.intersection, report.union, report.score)

    write_score(output_path, report.score, settings.precision)

    say(f"Done. Duplication rate: {report.score * 100:.2f}%")
    say(f"Result saved to: {output_path}")
    return report

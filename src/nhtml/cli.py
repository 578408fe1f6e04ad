"""Command-line front end: transpile ``.nhtml`` files to ``.html``.

File paths are transpiled directly; directories are searched recursively for
files with the source extension. Each input is transpiled independently, so
one failing file does not stop the rest.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from nhtml import __version__, transpile
from nhtml.errors import TranspileError
from nhtml.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

DEFAULT_EXTENSION = ".nhtml"


@dataclass(frozen=True, slots=True)
class Job:
    """One source file and where its HTML goes (None means stdout)."""

    source: Path
    target: Path | None


def _normalize_extension(ext: str) -> str:
    return ext if ext.startswith(".") else f".{ext}"


def collect_sources(path: Path, extension: str) -> list[Path]:
    """Return ``path`` itself, or every matching file below a directory, sorted."""
    if path.is_dir():
        return sorted(p for p in path.rglob(f"*{extension}") if p.is_file())
    return [path]


def plan_jobs(
    paths: list[Path],
    *,
    extension: str,
    out_dir: Path | None,
    to_stdout: bool,
) -> list[Job]:
    """Pair every source file with its output location."""
    jobs: list[Job] = []
    for path in paths:
        root = path if path.is_dir() else path.parent
        for source in collect_sources(path, extension):
            if to_stdout:
                target = None
            elif out_dir is not None:
                target = (out_dir / source.relative_to(root)).with_suffix(".html")
            else:
                target = source.with_suffix(".html")
            jobs.append(Job(source=source, target=target))
    return jobs


def run_job(job: Job) -> bool:
    """Transpile one file. Returns False if the source was rejected or unreadable."""
    if job.target is not None and job.target.resolve() == job.source.resolve():
        logger.error("%s: output would overwrite the source file", job.source)
        return False

    try:
        source_text = job.source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        logger.error("%s: %s", job.source, err)
        return False

    try:
        html = transpile(source_text, source_file=str(job.source))
    except TranspileError as err:
        logger.error("%s", err)
        return False

    if job.target is None:
        sys.stdout.write(html)
        return True

    try:
        job.target.parent.mkdir(parents=True, exist_ok=True)
        job.target.write_text(html, encoding="utf-8")
    except OSError as err:
        logger.error("%s: %s", job.target, err)
        return False
    logger.info("%s -> %s", job.source, job.target)
    return True


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="nhtml",
        description="Transpile nhtml markup into formatted HTML",
    )
    ap.add_argument("paths", nargs="+", type=Path, help="Source files or directories")
    ap.add_argument(
        "-o",
        "--out-dir",
        type=Path,
        default=None,
        help="Write output under this directory instead of next to each source",
    )
    ap.add_argument(
        "--ext",
        default=DEFAULT_EXTENSION,
        help=f"Source extension searched for in directories (default: {DEFAULT_EXTENSION})",
    )
    ap.add_argument("--stdout", action="store_true", help="Print HTML instead of writing files")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    ap.add_argument("-q", "--quiet", action="count", default=0, help="Less logging (repeatable)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose - args.quiet)

    missing = [p for p in args.paths if not p.exists()]
    if missing:
        for p in missing:
            logger.error("no such file or directory: %s", p)
        return EXIT_USAGE

    jobs = plan_jobs(
        args.paths,
        extension=_normalize_extension(args.ext),
        out_dir=args.out_dir,
        to_stdout=args.stdout,
    )
    if not jobs:
        logger.warning("no %s files found", _normalize_extension(args.ext))
        return EXIT_OK

    failed = sum(not run_job(job) for job in jobs)
    if failed:
        logger.error("%d of %d file(s) failed", failed, len(jobs))
        return EXIT_FAILED
    logger.debug("transpiled %d file(s)", len(jobs))
    return EXIT_OK

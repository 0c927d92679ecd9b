"""Batch export: one independent job per source file on a thread pool.

A failing file is recorded in the report and never cancels the others.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from iconstyle.engine.composer import generate_icon
from iconstyle.errors import IconEngineError
from iconstyle.models.style import StyleConfig, StylePreset

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".svg"


@dataclass
class FileResult:
    source: Path
    output: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    source_dir: Path
    output_dir: Path
    results: list[FileResult] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return len(self.results) - self.succeeded


def output_name(source_path: Path, preset: StylePreset) -> str:
    """``<stem>-<preset>.svg``, e.g. ``home-neumorphism.svg``."""
    return f"{source_path.stem or 'icon'}-{preset.file_suffix}{SOURCE_SUFFIX}"


def find_source_files(source_dir: Path) -> list[Path]:
    """SVG files directly inside ``source_dir`` (no recursion), sorted by name."""
    return sorted(
        p for p in source_dir.iterdir() if p.is_file() and p.suffix == SOURCE_SUFFIX
    )


def export_file(source_path: Path, output_dir: Path, preset: StylePreset, styles: StyleConfig) -> Path:
    """Restyle one file into ``output_dir`` and return the written path."""
    svg_text = source_path.read_text(encoding="utf-8")
    generated = generate_icon(svg_text, preset, styles)

    output_path = output_dir / output_name(source_path, preset)
    output_path.write_text(generated, encoding="utf-8")
    logger.info("Successfully generated %s", output_path)
    return output_path


def _run_job(source_path: Path, output_dir: Path, preset: StylePreset, styles: StyleConfig) -> FileResult:
    try:
        output = export_file(source_path, output_dir, preset, styles)
    except (IconEngineError, OSError, UnicodeDecodeError) as e:
        logger.error("Failed to process file %s: %s", source_path, e)
        return FileResult(source=source_path, error=str(e))
    return FileResult(source=source_path, output=output)


def export_directory(
    source_dir: Path,
    output_dir: Path,
    preset: StylePreset,
    styles: StyleConfig | None = None,
    max_workers: int | None = None,
) -> BatchReport:
    """Restyle every SVG in ``source_dir`` into ``output_dir``.

    Raises:
        NotADirectoryError: if ``source_dir`` is not a directory.
        OSError: if ``output_dir`` cannot be created.
    """
    source_dir = Path(source_dir)
    output_dir = Path(output_dir)
    styles = styles or StyleConfig()

    if not source_dir.is_dir():
        raise NotADirectoryError(f"Source path is not a valid directory: {source_dir}")
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Starting mass export from '%s' to '%s'", source_dir, output_dir)
    sources = find_source_files(source_dir)
    logger.info("Found %d SVG files to process.", len(sources))

    report = BatchReport(source_dir=source_dir, output_dir=output_dir)
    if not sources:
        return report

    with ThreadPoolExecutor(max_workers=max_workers or None) as pool:
        # map() keeps results in source order
        report.results = list(
            pool.map(lambda p: _run_job(p, output_dir, preset, styles), sources)
        )

    logger.info("Batch done: %d/%d succeeded", report.succeeded, len(report.results))
    return report

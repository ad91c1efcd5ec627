"""Site build: compile every Cobalt source under a site root.

A site root holds ``cobalt.toml``. Sources are discovered under
``site.source_path`` (the root itself when unset) and each one is compiled
to an ``.html`` file next to it. Stylesheet links are resolved against the
site root.

By default the build stops at the first failing file. With
``keep_going=True`` a failing file is logged and skipped; no output is ever
written for a file that failed.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from cobalt import compile_source
from cobalt.config import SiteConfig, find_config, load_config
from cobalt.errors import CobaltError
from cobalt.utils.logger import get_logger

logger = get_logger(__name__)

SOURCE_SUFFIX = ".cb"
OUTPUT_SUFFIX = ".html"


@dataclass(slots=True)
class BuildReport:
    """Outcome of a site build.

    Attributes:
        written: Output files written, in build order
        failed: Source files that failed, with their error

    """

    written: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, CobaltError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def discover_sources(source_dir: str | Path, suffix: str = SOURCE_SUFFIX) -> list[Path]:
    """Find source files under ``source_dir`` recursively, sorted by path."""
    return sorted(p for p in Path(source_dir).rglob(f"*{suffix}") if p.is_file())


def output_path_for(source: str | Path) -> Path:
    """Output file for a source: same location, ``.html`` suffix."""
    return Path(source).with_suffix(OUTPUT_SUFFIX)


def compile_file(
    source: str | Path,
    config: SiteConfig,
    *,
    stylesheet_root: str | Path = ".",
) -> Path:
    """Compile one source file and write the HTML next to it.

    Returns:
        Path of the written HTML file

    Raises:
        CobaltError: If the source cannot be read or decoded as UTF-8, or
            fails to compile; nothing is written in that case
    """
    source = Path(source)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CobaltError(f"Could not read input file {source}") from e

    html = compile_source(
        text,
        config,
        stylesheet_root=stylesheet_root,
        source_file=str(source),
    )

    output = output_path_for(source)
    try:
        output.write_text(html, encoding="utf-8")
    except OSError as e:
        raise CobaltError(f"Could not write to file {output}") from e

    logger.info("Compiled %s -> %s", source, output)
    return output


def compile_files(
    sources: Iterable[Path],
    config: SiteConfig,
    *,
    stylesheet_root: str | Path = ".",
    keep_going: bool = False,
) -> BuildReport:
    """Compile each source, stopping at the first error unless ``keep_going``.

    Raises:
        CobaltError: The first compile error, when ``keep_going`` is False
    """
    report = BuildReport()
    for source in sources:
        try:
            report.written.append(
                compile_file(source, config, stylesheet_root=stylesheet_root)
            )
        except CobaltError as e:
            if not keep_going:
                raise
            logger.error("Skipping %s: %s", source, e)
            report.failed.append((source, e))
    return report


def build_site(root: str | Path = ".", *, keep_going: bool = False) -> BuildReport:
    """Build the site rooted at ``root``.

    Raises:
        ConfigError: If ``cobalt.toml`` is missing or invalid
        CobaltError: The first compile error, when ``keep_going`` is False
    """
    root = Path(root)
    config = load_config(find_config(root))
    source_dir = root / config.site.source_path if config.site.source_path else root
    sources = discover_sources(source_dir)
    logger.info("Building %s: %d source files in %s", config.site.name, len(sources), source_dir)
    return compile_files(sources, config, stylesheet_root=root, keep_going=keep_going)

"""Site configuration for Cobalt.

Mirrors the ``cobalt.toml`` file at the root of a site::

    [site]
    name = "Acme"
    title = "page | site"      # optional, defaults to "page"
    source_path = "pages"      # optional, defaults to the site root

    [style]
    default = "style.css"
    external = ["https://example.com/fonts.css"]   # optional

Configuration objects are frozen dataclasses: build one, then hand it to any
number of emitters.

Thread Safety:
All configuration objects are immutable and safe to share across threads.

"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import StrEnum
from pathlib import Path
from typing import Any

from cobalt.errors import ConfigError

CONFIG_FILENAME = "cobalt.toml"


class TitleProtocol(StrEnum):
    """How the ``<title>`` is composed from the site and page names."""

    PAGE = "page"
    SITE = "site"
    PAGE_SITE = "page | site"
    SITE_PAGE = "site | page"

    @classmethod
    def resolve(cls, value: str | None) -> TitleProtocol:
        """Map a configured value to a protocol; None means ``page``.

        Raises:
            ConfigError: If value is not one of the four protocols
        """
        if value is None:
            return cls.PAGE
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(f"Invalid configuration sequence: {value}") from None

    def format(self, site: str, page: str) -> str:
        """Compose the title text."""
        match self:
            case TitleProtocol.PAGE:
                return page
            case TitleProtocol.SITE:
                return site
            case TitleProtocol.PAGE_SITE:
                return f"{page} | {site}"
            case TitleProtocol.SITE_PAGE:
                return f"{site} | {page}"


def _filter_fields(cls: type, data: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only keys that are fields of the dataclass ``cls``."""
    valid_fields = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in valid_fields}


def _require(table: str, data: Mapping[str, Any], key: str) -> None:
    if key not in data:
        raise ConfigError(f"Missing required key '{key}' in [{table}] configuration")


def _check_str(table: str, data: Mapping[str, Any], key: str, *, required: bool = False) -> None:
    """Reject a value that is not a string; None is allowed for optional keys."""
    value = data.get(key)
    if (required or value is not None) and not isinstance(value, str):
        raise ConfigError(
            f"Invalid value for '{key}' in [{table}] configuration: "
            f"expected a string, got {type(value).__name__}"
        )


def _str_tuple(table: str, key: str, value: Any) -> tuple[str, ...]:
    """Convert a list of strings to a tuple; a bare string is an error."""
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ConfigError(
            f"Invalid value for '{key}' in [{table}] configuration: "
            "expected a list of strings"
        )
    return tuple(value)


@dataclass(frozen=True, slots=True)
class Site:
    """The ``[site]`` table.

    Attributes:
        name: Website name, used by the ``site`` title protocols
        title: Title protocol literal; None means ``page``. Validated when a
            page is emitted.
        source_path: Directory holding source files, relative to the site root

    """

    name: str
    title: str | None = None
    source_path: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Site:
        """Create from a mapping; unknown keys are ignored.

        Raises:
            ConfigError: If ``name`` is missing or a value is not a string
        """
        _require("site", data, "name")
        _check_str("site", data, "name", required=True)
        _check_str("site", data, "title")
        _check_str("site", data, "source_path")
        return cls(**_filter_fields(cls, data))


@dataclass(frozen=True, slots=True)
class Style:
    """The ``[style]`` table.

    Attributes:
        default: Primary stylesheet, relative to the stylesheet root
        external: Further stylesheet URLs, linked in order

    """

    default: str
    external: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Style:
        """Create from a mapping; unknown keys are ignored.

        Raises:
            ConfigError: If ``default`` is missing or not a string, or
                ``external`` is not a list of strings
        """
        _require("style", data, "default")
        _check_str("style", data, "default", required=True)
        filtered = _filter_fields(cls, data)
        if "external" in filtered:
            filtered["external"] = _str_tuple("style", "external", filtered["external"])
        return cls(**filtered)


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Complete site configuration.

    Example:
        >>> config = SiteConfig.from_dict({
        ...     "site": {"name": "Acme", "title": "site | page"},
        ...     "style": {"default": "style.css"},
        ... })
        >>> config.title_protocol
        <TitleProtocol.SITE_PAGE: 'site | page'>

    """

    site: Site
    style: Style

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SiteConfig:
        """Create from a parsed ``cobalt.toml`` mapping.

        Raises:
            ConfigError: If the ``[site]`` or ``[style]`` table or one of
                their required keys is missing
        """
        for table in ("site", "style"):
            if not isinstance(data.get(table), Mapping):
                raise ConfigError(f"Missing [{table}] table in configuration")
        return cls(site=Site.from_dict(data["site"]), style=Style.from_dict(data["style"]))

    @property
    def title_protocol(self) -> TitleProtocol:
        """Resolved title protocol.

        Raises:
            ConfigError: If the configured title is not a known protocol
        """
        return TitleProtocol.resolve(self.site.title)


def find_config(root: str | Path) -> Path:
    """Locate ``cobalt.toml`` in ``root``.

    Raises:
        ConfigError: If there is no configuration file
    """
    path = Path(root) / CONFIG_FILENAME
    if not path.is_file():
        raise ConfigError(f"Could not find configuration file '{CONFIG_FILENAME}'")
    return path


def load_config(path: str | Path) -> SiteConfig:
    """Read and validate a ``cobalt.toml`` file.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML, or
            the configuration is incomplete
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Could not open file {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}") from e
    return SiteConfig.from_dict(data)


__all__ = [
    "CONFIG_FILENAME",
    "Site",
    "SiteConfig",
    "Style",
    "TitleProtocol",
    "find_config",
    "load_config",
]

"""
Framework signatures - maps Go import paths to frameworks.

The built-in table covers the five supported frameworks. Extra
signatures can be layered on top from a YAML file:

    signatures:
      - import: github.com/labstack/echo
        framework: Echo
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union
import logging

import yaml

from .analyzers.base import ConfigurationError
from .models import FrameworkKind

logger = logging.getLogger(__name__)

# Decides the framework only when no concrete framework is imported.
FALLBACK_FRAMEWORK = FrameworkKind.NET_HTTP


@dataclass(frozen=True)
class SignatureEntry:
    """An import path that identifies a framework"""
    import_path: str
    framework: FrameworkKind


DEFAULT_SIGNATURES: Tuple[SignatureEntry, ...] = (
    SignatureEntry("github.com/gin-gonic/gin", FrameworkKind.GIN),
    SignatureEntry("github.com/labstack/echo/v4", FrameworkKind.ECHO),
    SignatureEntry("github.com/gorilla/mux", FrameworkKind.GORILLA_MUX),
    SignatureEntry("net/http", FrameworkKind.NET_HTTP),
    SignatureEntry("github.com/gofiber/fiber/v2", FrameworkKind.FIBER),
)


class SignatureRegistry:
    """Immutable lookup table from import path to framework"""

    def __init__(self, entries: Iterable[SignatureEntry] = DEFAULT_SIGNATURES,
                 fallback: FrameworkKind = FALLBACK_FRAMEWORK):
        table: Dict[str, FrameworkKind] = {}
        for entry in entries:
            if entry.framework is FrameworkKind.UNKNOWN:
                raise ConfigurationError(
                    f"Signature {entry.import_path!r} cannot map to {FrameworkKind.UNKNOWN.value}"
                )
            table[entry.import_path] = entry.framework
        self._table = table
        self._fallback = fallback

    @property
    def fallback(self) -> FrameworkKind:
        return self._fallback

    @property
    def entries(self) -> Tuple[SignatureEntry, ...]:
        return tuple(SignatureEntry(path, kind) for path, kind in self._table.items())

    def lookup(self, import_path: str) -> Optional[FrameworkKind]:
        """Framework identified by an import path, if any."""
        return self._table.get(import_path)

    def is_fallback(self, kind: FrameworkKind) -> bool:
        return kind is self._fallback

    def frameworks(self) -> FrozenSet[FrameworkKind]:
        return frozenset(self._table.values())

    def with_entries(self, entries: Iterable[SignatureEntry]) -> "SignatureRegistry":
        """Return a new registry with ``entries`` layered over this one."""
        return SignatureRegistry(list(self.entries) + list(entries), fallback=self._fallback)

    def __contains__(self, import_path: object) -> bool:
        return import_path in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"SignatureRegistry({len(self._table)} signatures, fallback={self._fallback.value!r})"


def load_signatures(filepath: Union[str, Path]) -> List[SignatureEntry]:
    """
    Load extra signatures from a YAML file.

    Malformed entries are logged and skipped.

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping
    """
    filepath = Path(filepath)
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot load signatures from {filepath}: {e}",
                                 file_path=str(filepath)) from e

    if not data:
        return []
    if not isinstance(data, dict):
        raise ConfigurationError(f"Signatures file {filepath} must contain a mapping",
                                 file_path=str(filepath))

    entries = []
    for raw in data.get('signatures') or []:
        try:
            entries.append(_parse_entry(raw))
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Skipping signature {raw!r} in {filepath.name}: {e}")

    logger.info(f"Loaded {len(entries)} signatures from {filepath.name}")
    return entries


def _parse_entry(raw: Dict) -> SignatureEntry:
    import_path = str(raw['import']).strip().strip('"')
    if not import_path:
        raise ValueError("empty import path")
    framework = FrameworkKind.parse(str(raw['framework']))
    if framework is FrameworkKind.UNKNOWN:
        raise ValueError(f"framework cannot be {FrameworkKind.UNKNOWN.value}")
    return SignatureEntry(import_path=import_path, framework=framework)


def build_registry(signatures_file: Optional[Union[str, Path]] = None) -> SignatureRegistry:
    """Default registry, extended from ``signatures_file`` when given."""
    registry = SignatureRegistry()
    if signatures_file:
        registry = registry.with_entries(load_signatures(signatures_file))
    return registry

"""
Data models for routescan.

This module defines all core data structures used throughout the engine:

- FrameworkKind: Enum of recognized web frameworks
- Endpoint: A single discovered route registration
- DetectionResult: Outcome of framework detection for one file
- AnalysisOutcome: Framework plus endpoints for one file
- FileResult/ScanResult: Batch scan output

Per-file models are created and discarded within one analysis call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any, Iterator


class FrameworkKind(Enum):
    GIN = "Gin"
    ECHO = "Echo"
    GORILLA_MUX = "GorillaMux"
    NET_HTTP = "net/http"
    FIBER = "Fiber"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str) -> "FrameworkKind":
        """Resolve a kind from its value or member name, ignoring case."""
        needle = value.strip().lower()
        for kind in cls:
            if needle in (kind.value.lower(), kind.name.lower()):
                return kind
        raise ValueError(f"Unknown framework: {value}")


@dataclass(frozen=True)
class Endpoint:
    """A route registration found in source"""
    method: str
    pattern: str
    handler: str
    line: int = field(default=0, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'method': self.method,
            'pattern': self.pattern,
            'handler': self.handler,
            'line': self.line,
        }


@dataclass(frozen=True)
class DetectionResult:
    """Framework resolved for a single file"""
    framework: FrameworkKind
    import_path: str
    fallback_present: bool = False


@dataclass(frozen=True)
class AnalysisOutcome:
    """Framework and endpoints discovered in one source file"""
    framework: FrameworkKind
    endpoints: List[Endpoint] = field(default_factory=list)

    def __iter__(self) -> Iterator[Endpoint]:
        return iter(self.endpoints)

    def __len__(self) -> int:
        return len(self.endpoints)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'framework': self.framework.value,
            'endpoints': [e.to_dict() for e in self.endpoints],
        }


@dataclass
class FileResult:
    """Result of analyzing one file during a batch scan"""
    file_path: str
    outcome: Optional[AnalysisOutcome] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'file_path': self.file_path}
        if self.outcome is not None:
            data.update(self.outcome.to_dict())
        else:
            data['error'] = self.error
        return data


@dataclass
class ScanResult:
    """Result of scanning a directory tree for endpoints"""
    target_path: str
    files: List[FileResult] = field(default_factory=list)
    scan_duration_seconds: float = 0.0
    errors: List[str] = field(default_factory=list)

    @property
    def files_scanned(self) -> int:
        return len(self.files)

    @property
    def endpoints(self) -> List[Endpoint]:
        """All endpoints, file by file in path order."""
        return [e for f in self.files if f.outcome is not None for e in f.outcome.endpoints]

    @property
    def summary(self) -> Dict[str, int]:
        """Count analyzed files by framework"""
        counts = {k.value: 0 for k in FrameworkKind if k is not FrameworkKind.UNKNOWN}
        for file_result in self.files:
            if file_result.outcome is not None:
                counts[file_result.outcome.framework.value] += 1
        return counts

    def successful(self) -> List[FileResult]:
        return [f for f in self.files if f.ok]

    def failed(self) -> List[FileResult]:
        return [f for f in self.files if not f.ok]

    def get_files_by_framework(self, framework: FrameworkKind) -> List[FileResult]:
        """Filter analyzed files by detected framework"""
        return [f for f in self.files if f.outcome is not None and f.outcome.framework == framework]

    def sort_files(self) -> None:
        self.files.sort(key=lambda f: f.file_path)

    def __iter__(self) -> Iterator[FileResult]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def to_dict(self) -> Dict[str, Any]:
        """Convert scan result to dictionary."""
        return {
            'target_path': self.target_path,
            'files': [f.to_dict() for f in self.files],
            'files_scanned': self.files_scanned,
            'total_endpoints': len(self.endpoints),
            'scan_duration_seconds': self.scan_duration_seconds,
            'errors': self.errors,
            'summary': self.summary,
        }

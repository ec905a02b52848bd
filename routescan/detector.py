"""
Framework detection - decides which web framework a Go file uses.

Imports are examined in source order. The first import that identifies
a concrete framework wins and ends the search; later framework imports
are ignored. The fallback signature (net/http) only decides the result
when no concrete framework is imported anywhere in the file.
"""

from typing import Optional
import logging

from .analyzers.base import UnsupportedFrameworkError
from .analyzers.languages.go import SyntaxTree
from .models import DetectionResult, FrameworkKind
from .signatures import SignatureRegistry

logger = logging.getLogger(__name__)


class FrameworkDetector:
    """Resolves exactly one framework per syntax tree"""

    name = "framework_detector"

    def __init__(self, signatures: Optional[SignatureRegistry] = None):
        self.signatures = signatures or SignatureRegistry()

    def detect(self, tree: SyntaxTree) -> DetectionResult:
        """
        Detect the framework a parsed file depends on.

        Args:
            tree: Parsed Go source

        Returns:
            DetectionResult; ``fallback_present`` records whether the
            fallback signature was seen before detection stopped

        Raises:
            UnsupportedFrameworkError: If no signature matches any import
        """
        fallback_import = None

        for import_path in tree.import_paths():
            kind = self.signatures.lookup(import_path)
            if kind is None:
                continue

            if self.signatures.is_fallback(kind):
                if fallback_import is None:
                    fallback_import = import_path
                continue

            logger.debug(f"Detected {kind.value} via {import_path} in {tree.file_path or '<source>'}")
            return DetectionResult(
                framework=kind,
                import_path=import_path,
                fallback_present=fallback_import is not None,
            )

        if fallback_import is not None:
            logger.debug(f"Falling back to {self.signatures.fallback.value} in {tree.file_path or '<source>'}")
            return DetectionResult(
                framework=self.signatures.fallback,
                import_path=fallback_import,
                fallback_present=True,
            )

        raise UnsupportedFrameworkError(
            "no known framework detected",
            analyzer_name=self.name,
            file_path=tree.file_path,
        )


def detect_framework(tree: SyntaxTree, signatures: Optional[SignatureRegistry] = None) -> FrameworkKind:
    """Convenience wrapper returning only the detected framework."""
    return FrameworkDetector(signatures).detect(tree).framework

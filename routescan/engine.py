"""
Endpoint analysis engine - parse, detect, extract.

One call analyzes one Go source file:

    source text -> GoParser -> SyntaxTree -> FrameworkDetector
                -> adapter for the detected framework -> endpoints

Either a complete AnalysisOutcome is returned or an AnalyzerError is
raised; partial results are never produced. The engine keeps no state
between calls, so one instance may serve many threads.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from .analyzers import frameworks  # noqa: F401  (registers built-in adapters)
from .analyzers.base import UnsupportedFrameworkError
from .analyzers.languages.go import GoParser, SyntaxTree
from .analyzers.registry import AnalyzerRegistry
from .detector import FrameworkDetector
from .models import AnalysisOutcome
from .signatures import SignatureRegistry

logger = logging.getLogger(__name__)


class EndpointAnalyzer:
    """Discovers HTTP endpoint registrations in Go source files"""

    name = "endpoint_analyzer"

    def __init__(self, signatures: Optional[SignatureRegistry] = None,
                 parser: Optional[GoParser] = None):
        self.signatures = signatures or SignatureRegistry()
        self.parser = parser or GoParser()
        self.detector = FrameworkDetector(self.signatures)

    def analyze(self, source: Union[str, bytes], file_path: str = "") -> AnalysisOutcome:
        """
        Analyze Go source text.

        Args:
            source: Full text of one Go file
            file_path: Optional path used in error messages and logs

        Returns:
            Detected framework and its endpoints in document order

        Raises:
            ParseError: If the source does not parse
            UnsupportedFrameworkError: If no known framework is imported
        """
        tree = self.parser.parse(source, file_path=file_path)
        return self.analyze_tree(tree)

    def analyze_tree(self, tree: SyntaxTree) -> AnalysisOutcome:
        """Analyze an already parsed file."""
        detection = self.detector.detect(tree)

        adapter = AnalyzerRegistry.get_adapter(detection.framework)
        if adapter is None:
            raise UnsupportedFrameworkError(
                f"no adapter registered for {detection.framework.value}",
                analyzer_name=self.name,
                file_path=tree.file_path,
            )

        endpoints = adapter.extract(tree)
        logger.debug(
            f"{adapter.name} found {len(endpoints)} endpoints in {tree.file_path or '<source>'}"
        )
        return AnalysisOutcome(framework=detection.framework, endpoints=endpoints)

    def analyze_file(self, file_path: Union[str, Path]) -> AnalysisOutcome:
        """
        Read and analyze a Go file.

        Raises:
            OSError: If the file cannot be read
            ParseError, UnsupportedFrameworkError: As for ``analyze``
        """
        file_path = Path(file_path)
        return self.analyze(read_source(file_path), file_path=str(file_path))


def read_source(filepath: Path) -> str:
    """Read file content, trying UTF-8 first"""
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        logger.debug(f"{filepath} is not UTF-8, reading as latin-1")
        with open(filepath, 'r', encoding='latin-1') as f:
            return f.read()


def analyze(source: Union[str, bytes], signatures: Optional[SignatureRegistry] = None) -> AnalysisOutcome:
    """Analyze Go source text with a fresh engine."""
    return EndpointAnalyzer(signatures=signatures).analyze(source)


def analyze_file(file_path: Union[str, Path],
                 signatures: Optional[SignatureRegistry] = None) -> AnalysisOutcome:
    """Analyze a Go file with a fresh engine."""
    return EndpointAnalyzer(signatures=signatures).analyze_file(file_path)

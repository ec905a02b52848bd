"""
routescan - static HTTP endpoint discovery for Go services.

Reads Go source text, decides which web framework the file is written
against, and lists the routes it registers. Nothing is compiled, loaded
or executed.

Supported Frameworks:
    Gin, Echo, Gorilla Mux, net/http (ServeMux), Fiber

Quick Start:
    >>> from routescan import analyze
    >>> outcome = analyze(open("main.go").read())
    >>> for endpoint in outcome.endpoints:
    ...     print(endpoint.method, endpoint.pattern, endpoint.handler)

Whole services:
    >>> from routescan import create_scanner
    >>> result = create_scanner().scan("/path/to/service")
"""

__version__ = "0.1.0"

from .models import (
    FrameworkKind,
    Endpoint,
    DetectionResult,
    AnalysisOutcome,
    FileResult,
    ScanResult,
)
from .analyzers.base import (
    AnalyzerError,
    ParseError,
    UnsupportedFrameworkError,
    ConfigurationError,
)
from .signatures import SignatureEntry, SignatureRegistry, DEFAULT_SIGNATURES, load_signatures
from .detector import FrameworkDetector, detect_framework
from .engine import EndpointAnalyzer, analyze, analyze_file
from .scanner import RouteScanner, create_scanner

__all__ = [
    # Models
    'FrameworkKind',
    'Endpoint',
    'DetectionResult',
    'AnalysisOutcome',
    'FileResult',
    'ScanResult',
    # Errors
    'AnalyzerError',
    'ParseError',
    'UnsupportedFrameworkError',
    'ConfigurationError',
    # Signatures
    'SignatureEntry',
    'SignatureRegistry',
    'DEFAULT_SIGNATURES',
    'load_signatures',
    # Engine
    'FrameworkDetector',
    'detect_framework',
    'EndpointAnalyzer',
    'analyze',
    'analyze_file',
    # Batch
    'RouteScanner',
    'create_scanner',
]

"""
routescan Analyzers Package

Components:
- base: Error taxonomy and the FrameworkAdapter base class
- registry: Adapter registration and lookup by framework
- languages: tree-sitter front ends (Go)
- frameworks: One endpoint adapter per supported web framework
"""

from .base import (
    AnalyzerError,
    ParseError,
    UnsupportedFrameworkError,
    ConfigurationError,
    FrameworkAdapter,
)
from .registry import AnalyzerRegistry

__all__ = [
    # Errors
    'AnalyzerError',
    'ParseError',
    'UnsupportedFrameworkError',
    'ConfigurationError',
    # Base classes
    'FrameworkAdapter',
    # Registry
    'AnalyzerRegistry',
]

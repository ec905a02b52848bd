"""
Base classes for routescan analyzers.

This module defines the error taxonomy and the abstract base class every
framework adapter inherits from:

- AnalyzerError and its subclasses: failures of a single file's analysis
- FrameworkAdapter: endpoint extraction over a parsed Go syntax tree

All adapters share one extraction algorithm and differ only in which
member names count as route registrations and how the HTTP method is
derived from that name.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING
import logging

from ..models import Endpoint, FrameworkKind

if TYPE_CHECKING:
    from tree_sitter import Node
    from .languages.go import SyntaxTree

logger = logging.getLogger(__name__)


# ============================================================================
# Custom Exceptions
# ============================================================================

class AnalyzerError(Exception):
    """Base exception for analyzer errors."""
    def __init__(self, message: str, analyzer_name: str = "", file_path: str = ""):
        self.message = message
        self.analyzer_name = analyzer_name
        self.file_path = file_path
        super().__init__(f"[{analyzer_name}] {message}" if analyzer_name else message)


class ParseError(AnalyzerError):
    """Source text could not be parsed into a syntax tree."""
    pass


class UnsupportedFrameworkError(AnalyzerError):
    """No recognized framework import was found."""
    pass


class ConfigurationError(AnalyzerError):
    """Error in analyzer configuration."""
    pass


# ============================================================================
# Abstract Base Classes
# ============================================================================

class FrameworkAdapter(ABC):
    """
    Abstract base class for per-framework endpoint extraction.

    A call is reported as an endpoint when all of the following hold:

    1. It is invoked as a member of some receiver (``r.GET(...)``) and
       ``method_for`` accepts the member name.
    2. It has at least two arguments.
    3. The first argument is a non-empty string literal (the pattern).
    4. The second argument is an identifier or a two-part
       ``receiver.member`` reference (the handler).

    Calls failing any check are skipped without error. Endpoints are
    returned in document order and are never deduplicated.

    Subclasses must implement:
        - name: Unique identifier for the adapter
        - framework: The FrameworkKind this adapter serves
        - method_for(): Map a member name to its HTTP method
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this adapter."""
        pass

    @property
    @abstractmethod
    def framework(self) -> FrameworkKind:
        """Framework whose registration idiom this adapter understands."""
        pass

    @abstractmethod
    def method_for(self, member: str) -> Optional[str]:
        """
        Derive the HTTP method for a registration member.

        Args:
            member: Name of the invoked member (e.g., 'GET', 'HandleFunc')

        Returns:
            Method string, or None if the member does not register routes
        """
        pass

    def extract(self, tree: "SyntaxTree") -> List[Endpoint]:
        """
        Extract endpoints from a parsed file.

        Args:
            tree: Parsed Go source

        Returns:
            Endpoints in the order their registration calls appear
        """
        endpoints = []
        for call in tree.call_expressions():
            endpoint = self._endpoint_from_call(tree, call)
            if endpoint is not None:
                endpoints.append(endpoint)
        return endpoints

    def _endpoint_from_call(self, tree: "SyntaxTree", call: "Node") -> Optional[Endpoint]:
        function = call.child_by_field_name('function')
        if function is None or function.type != 'selector_expression':
            return None

        member = function.child_by_field_name('field')
        if member is None:
            return None

        method = self.method_for(tree.text(member))
        if method is None:
            return None

        arguments = tree.arguments(call)
        if len(arguments) < 2:
            return None

        pattern = tree.string_literal_value(arguments[0])
        if not pattern:
            return None

        handler = self._handler_reference(tree, arguments[1])
        if handler is None:
            return None

        return Endpoint(
            method=method,
            pattern=pattern,
            handler=handler,
            line=call.start_point[0] + 1,
        )

    def _handler_reference(self, tree: "SyntaxTree", node: "Node") -> Optional[str]:
        """Handler text for `name` or `receiver.member`, None for any other shape."""
        if node.type == 'identifier':
            return tree.text(node)

        if node.type == 'selector_expression':
            operand = node.child_by_field_name('operand')
            member = node.child_by_field_name('field')
            if operand is not None and member is not None and operand.type == 'identifier':
                return f"{tree.text(operand)}.{tree.text(member)}"

        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(framework={self.framework.value!r})"

"""
Go syntax tree provider for routescan.

Parses Go source text with tree-sitter-go and exposes the handful of
queries the detector and the framework adapters need:

- import paths in document order
- call expressions in depth-first document order
- argument lists and string literal contents

Each parse builds its own tree-sitter Parser, so concurrent analyses
never share parser state. The compiled grammar is shared and read-only.
"""

import logging
from typing import Callable, Iterator, List, Optional, Tuple, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from ..base import ParseError

logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

STRING_LITERAL_TYPES = frozenset({'interpreted_string_literal', 'raw_string_literal'})

TOP_LEVEL_DECLARATIONS = frozenset({
    'import_declaration', 'function_declaration', 'method_declaration',
    'type_declaration', 'const_declaration', 'var_declaration',
})

NodePredicate = Callable[[Node], bool]


def node_type_is(*node_types: str) -> NodePredicate:
    """Predicate matching nodes of any of the given types."""
    wanted = frozenset(node_types)
    return lambda node: node.type in wanted


def walk(root: Node, predicate: NodePredicate) -> Iterator[Node]:
    """
    Yield nodes matching ``predicate`` depth-first, in document order.

    Iterative; consumers may stop iterating early.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if predicate(node):
            yield node
        stack.extend(reversed(node.children))


class SyntaxTree:
    """A parsed Go file. Read-only; owned by a single analysis."""

    def __init__(self, tree: Tree, source: bytes, file_path: str = ""):
        self._tree = tree
        self.source = source
        self.file_path = file_path

    @property
    def root(self) -> Node:
        return self._tree.root_node

    def text(self, node: Node) -> str:
        """Get the source text of a node."""
        return self.source[node.start_byte:node.end_byte].decode('utf-8', errors='replace')

    def walk(self, predicate: NodePredicate) -> Iterator[Node]:
        return walk(self.root, predicate)

    def import_paths(self) -> Iterator[str]:
        """Yield imported package paths (unquoted) in document order."""
        for spec in self.walk(node_type_is('import_spec')):
            path_node = spec.child_by_field_name('path')
            if path_node is None:
                continue
            path = self.string_literal_value(path_node)
            if path is not None:
                yield path

    def call_expressions(self) -> Iterator[Node]:
        return self.walk(node_type_is('call_expression'))

    def arguments(self, call: Node) -> List[Node]:
        """Argument expressions of a call, comments excluded."""
        args = call.child_by_field_name('arguments')
        if args is None:
            return []
        return [child for child in args.named_children if child.type != 'comment']

    def string_literal_value(self, node: Node) -> Optional[str]:
        """
        Contents of a string literal with its delimiters removed.

        Escape sequences are kept verbatim. Returns None when the node
        is not a string literal.
        """
        if node.type not in STRING_LITERAL_TYPES:
            return None
        text = self.text(node)
        if len(text) >= 2 and text[0] == text[-1] and text[0] in '"`':
            return text[1:-1]
        return text


class GoParser:
    """Builds SyntaxTree objects from Go source text."""

    name = "go_parser"
    language_name = "go"

    def parse(self, source: Union[str, bytes], file_path: str = "") -> SyntaxTree:
        """
        Parse Go source.

        Args:
            source: Source text (str is encoded as UTF-8)
            file_path: Optional path used in error messages

        Returns:
            Parsed syntax tree

        Raises:
            ParseError: If the source contains any syntax error
        """
        if isinstance(source, str):
            source = source.encode('utf-8')

        tree = Parser(GO_LANGUAGE).parse(source)

        problem = self._first_error(tree.root_node) or self._misplaced_top_level(tree.root_node)
        if problem is not None:
            node, kind = problem
            line, column = node.start_point
            raise ParseError(
                f"syntax error at line {line + 1}, column {column + 1}: {kind}",
                analyzer_name=self.name,
                file_path=file_path,
            )

        logger.debug(f"Parsed {file_path or '<source>'} ({len(source)} bytes)")
        return SyntaxTree(tree, source, file_path)

    def _first_error(self, root: Node) -> Optional[Tuple[Node, str]]:
        if not root.has_error:
            return None
        node = next(walk(root, lambda n: n.type == 'ERROR' or n.is_missing), root)
        return node, f"missing {node.type}" if node.is_missing else "unexpected input"

    def _misplaced_top_level(self, root: Node) -> Optional[Tuple[Node, str]]:
        """
        The grammar tolerates a missing package clause and statements
        outside any function; the Go compiler accepts neither.
        """
        declarations = [child for child in root.named_children if child.type != 'comment']
        if not declarations or declarations[0].type != 'package_clause':
            node = declarations[0] if declarations else root
            return node, "expected package clause"

        for node in declarations[1:]:
            if node.type not in TOP_LEVEL_DECLARATIONS:
                return node, f"unexpected {node.type} outside function body"
        return None

"""
Language front ends.

Each module parses one source language with tree-sitter and exposes
the queries the detector and adapters run over the tree.
"""

from .go import GoParser, SyntaxTree, walk, node_type_is

__all__ = ['GoParser', 'SyntaxTree', 'walk', 'node_type_is']

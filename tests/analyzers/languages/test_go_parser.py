"""Tests for the Go syntax tree provider."""

import pytest
from routescan.analyzers.base import ParseError
from routescan.analyzers.languages.go import GoParser, SyntaxTree, node_type_is, walk


class TestGoParser:
    def test_parses_valid_source(self, go_parser):
        tree = go_parser.parse('package main\n\nfunc main() {}\n')
        assert isinstance(tree, SyntaxTree)
        assert tree.root.type == 'source_file'

    def test_accepts_bytes(self, go_parser):
        tree = go_parser.parse(b'package main\n')
        assert tree.source == b'package main\n'

    def test_syntax_error_raises_parse_error(self, go_parser):
        with pytest.raises(ParseError) as exc_info:
            go_parser.parse('package main\n\nfunc main( {\n', file_path="broken.go")

        assert "syntax error at line" in exc_info.value.message
        assert exc_info.value.file_path == "broken.go"
        assert exc_info.value.analyzer_name == "go_parser"

    def test_unterminated_string_is_syntax_error(self, go_parser):
        code = 'package main\n\nimport "net/http\n\nfunc main() {}\n'
        with pytest.raises(ParseError):
            go_parser.parse(code)

    def test_missing_package_clause(self, go_parser):
        code = 'import "net/http"\n\nfunc main() {}\n'
        with pytest.raises(ParseError) as exc_info:
            go_parser.parse(code)
        assert "expected package clause" in exc_info.value.message

    @pytest.mark.parametrize("code", ["", "// just a comment\n"])
    def test_source_without_declarations(self, go_parser, code):
        with pytest.raises(ParseError):
            go_parser.parse(code)

    def test_leading_comments_allowed(self, go_parser):
        tree = go_parser.parse('// Package main serves the API.\npackage main\n')
        assert tree.root.type == 'source_file'

    def test_statement_outside_function(self, go_parser):
        code = 'package main\n\nimport "net/http"\n\nhttp.HandleFunc("/x", h)\n'
        with pytest.raises(ParseError) as exc_info:
            go_parser.parse(code)
        assert "line 5" in exc_info.value.message

    def test_second_package_clause(self, go_parser):
        with pytest.raises(ParseError):
            go_parser.parse('package main\n\npackage other\n')

    def test_top_level_declarations_accepted(self, go_parser):
        code = '''package main

import "fmt"

const port = 8080

var greeting = "hi"

type server struct{}

func (s *server) run() {}

func main() { fmt.Println(greeting, port) }
'''
        assert isinstance(go_parser.parse(code), SyntaxTree)


class TestImportPaths:
    def test_single_import(self, parse):
        tree = parse('package main\n\nimport "net/http"\n')
        assert list(tree.import_paths()) == ["net/http"]

    def test_grouped_imports_in_document_order(self, parse):
        tree = parse('''package main

import (
	"fmt"
	g "github.com/gin-gonic/gin"
	_ "net/http/pprof"
	. "strings"
)
''')
        assert list(tree.import_paths()) == [
            "fmt", "github.com/gin-gonic/gin", "net/http/pprof", "strings",
        ]

    def test_multiple_import_declarations(self, parse):
        tree = parse('package main\n\nimport "b"\nimport "a"\n')
        assert list(tree.import_paths()) == ["b", "a"]

    def test_raw_string_import(self, parse):
        tree = parse('package main\n\nimport `net/http`\n')
        assert list(tree.import_paths()) == ["net/http"]


class TestWalk:
    def test_calls_in_document_order(self, parse):
        tree = parse('''package main

func main() {
	first()
	outer(inner())
	last()
}
''')
        names = [
            tree.text(call.child_by_field_name('function'))
            for call in tree.call_expressions()
        ]
        assert names == ["first", "outer", "inner", "last"]

    def test_walk_stops_when_consumer_stops(self, parse):
        tree = parse('package main\n\nfunc main() { a(); b(); c() }\n')
        calls = walk(tree.root, node_type_is('call_expression'))
        first = next(calls)
        assert tree.text(first) == "a()"

    def test_node_type_is_matches_any_listed_type(self, parse):
        tree = parse('package main\n\nvar s = "x"\nvar r = `y`\n')
        literals = list(tree.walk(node_type_is('interpreted_string_literal', 'raw_string_literal')))
        assert len(literals) == 2


class TestLiterals:
    def test_interpreted_string_contents(self, parse):
        tree = parse('package main\n\nfunc main() { f("/users/:id") }\n')
        call = next(tree.call_expressions())
        assert tree.string_literal_value(tree.arguments(call)[0]) == "/users/:id"

    def test_raw_string_contents(self, parse):
        tree = parse('package main\n\nfunc main() { f(`/raw`) }\n')
        call = next(tree.call_expressions())
        assert tree.string_literal_value(tree.arguments(call)[0]) == "/raw"

    def test_escapes_kept_verbatim(self, parse):
        tree = parse('package main\n\nfunc main() { f("/a\\tb") }\n')
        call = next(tree.call_expressions())
        assert tree.string_literal_value(tree.arguments(call)[0]) == "/a\\tb"

    def test_non_literal_returns_none(self, parse):
        tree = parse('package main\n\nfunc main() { f(path) }\n')
        call = next(tree.call_expressions())
        assert tree.string_literal_value(tree.arguments(call)[0]) is None

    def test_arguments_skip_comments(self, parse):
        tree = parse('package main\n\nfunc main() { f("/x", /* handler */ h) }\n')
        call = next(tree.call_expressions())
        assert [tree.text(a) for a in tree.arguments(call)] == ['"/x"', "h"]

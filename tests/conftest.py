"""Shared test fixtures for the routescan test suite."""

import pytest
from pathlib import Path

from routescan.analyzers.languages.go import GoParser
from routescan.engine import EndpointAnalyzer
from routescan.models import (
    AnalysisOutcome, Endpoint, FileResult, FrameworkKind, ScanResult,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def go_parser():
    return GoParser()


@pytest.fixture
def parse(go_parser):
    """Parse Go source into a SyntaxTree."""
    def _parse(code: str):
        return go_parser.parse(code)
    return _parse


@pytest.fixture
def engine():
    return EndpointAnalyzer()


@pytest.fixture
def gin_source():
    return (FIXTURES_DIR / "gin_service.go").read_text()


@pytest.fixture
def nethttp_source():
    return (FIXTURES_DIR / "nethttp_service.go").read_text()


@pytest.fixture
def service_tree(tmp_path):
    """A small service tree with one file per framework plus broken files."""
    for name in ("gin_service.go", "echo_service.go", "fiber_service.go",
                 "gorilla_service.go", "nethttp_service.go"):
        (tmp_path / name).write_text((FIXTURES_DIR / name).read_text())

    (tmp_path / "broken.go").write_text("package main\n\nfunc main( {\n")
    (tmp_path / "util.go").write_text('package main\n\nimport "fmt"\n\nfunc hello() { fmt.Println("hi") }\n')
    (tmp_path / "README.md").write_text("# service\n")
    return tmp_path


@pytest.fixture
def sample_scan_result():
    """A scan result with two analyzed files and one failure."""
    return ScanResult(
        target_path="/srv/shop",
        files=[
            FileResult(
                file_path="/srv/shop/main.go",
                outcome=AnalysisOutcome(
                    framework=FrameworkKind.GIN,
                    endpoints=[
                        Endpoint("POST", "/login", "handleLogin", line=12),
                        Endpoint("GET", "/products", "handlers.ListProducts", line=13),
                    ],
                ),
            ),
            FileResult(
                file_path="/srv/shop/health.go",
                outcome=AnalysisOutcome(framework=FrameworkKind.NET_HTTP, endpoints=[]),
            ),
            FileResult(
                file_path="/srv/shop/broken.go",
                error="syntax error at line 3, column 11: unexpected input",
            ),
        ],
        scan_duration_seconds=0.25,
        errors=["/srv/shop/broken.go: syntax error at line 3, column 11: unexpected input"],
    )

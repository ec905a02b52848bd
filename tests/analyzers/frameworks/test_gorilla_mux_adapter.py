"""Tests for the Gorilla Mux adapter."""

import pytest
from routescan.analyzers.frameworks.gorilla_mux import GorillaMuxAdapter
from routescan.models import Endpoint, FrameworkKind


@pytest.fixture
def adapter():
    return GorillaMuxAdapter()


class TestGorillaMuxAdapterProperties:
    def test_name(self, adapter):
        assert adapter.name == "gorilla_mux_adapter"

    def test_framework(self, adapter):
        assert adapter.framework == FrameworkKind.GORILLA_MUX

    def test_only_handlefunc_registers(self, adapter):
        assert adapter.method_for("HandleFunc") == "CUSTOM"
        assert adapter.method_for("Handle") is None
        assert adapter.method_for("Methods") is None


class TestGorillaMuxExtraction:
    def test_fixture_service(self, adapter, parse, fixtures_dir):
        tree = parse((fixtures_dir / "gorilla_service.go").read_text())
        assert adapter.extract(tree) == [
            Endpoint("CUSTOM", "/articles", "listArticles"),
            Endpoint("CUSTOM", "/articles/{id}", "api.GetArticle"),
        ]

    def test_subrouter_registration(self, adapter, parse):
        code = '''package main

import "github.com/gorilla/mux"

func main() {
	r := mux.NewRouter()
	s := r.PathPrefix("/api").Subrouter()
	s.HandleFunc("/items", items)
}
'''
        assert adapter.extract(parse(code)) == [Endpoint("CUSTOM", "/items", "items")]

"""Tests for the net/http adapter."""

import pytest
from routescan.analyzers.frameworks.nethttp import NetHTTPAdapter
from routescan.models import Endpoint, FrameworkKind


@pytest.fixture
def adapter():
    return NetHTTPAdapter()


class TestNetHTTPAdapterProperties:
    def test_name(self, adapter):
        assert adapter.name == "nethttp_adapter"

    def test_framework(self, adapter):
        assert adapter.framework == FrameworkKind.NET_HTTP

    def test_member_methods(self, adapter):
        assert adapter.method_for("HandleFunc") == "ALL"
        assert adapter.method_for("Handle") == "CUSTOM"
        assert adapter.method_for("handlefunc") is None
        assert adapter.method_for("ListenAndServe") is None


class TestNetHTTPExtraction:
    def test_mux_registrations(self, adapter, parse, nethttp_source):
        assert adapter.extract(parse(nethttp_source)) == [
            Endpoint("CUSTOM", "/static/", "fileHandler"),
            Endpoint("ALL", "/health", "healthCheck"),
        ]

    def test_package_level_registration(self, adapter, parse):
        code = '''package main

import "net/http"

func main() {
	http.HandleFunc("/", index)
	http.ListenAndServe(":8080", nil)
}
'''
        assert adapter.extract(parse(code)) == [Endpoint("ALL", "/", "index")]

    def test_handler_built_by_call_skipped(self, adapter, parse):
        code = '''package main

import "net/http"

func main() {
	http.Handle("/files/", http.StripPrefix("/files/", http.FileServer(http.Dir("."))))
}
'''
        assert adapter.extract(parse(code)) == []

"""Tests for the combined HTTP + MCP server and the CLI entry point."""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import main
from config import settings


class TestCombinedServer:
    """Test the app that mounts MCP next to the REST routes."""

    def test_mounts(self):
        from server import final_app

        mount_paths = [getattr(route, "path", None) for route in final_app.routes]
        assert "/llm" in mount_paths

    def test_rest_routes_still_served(self):
        from server import final_app

        response = TestClient(final_app).get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestMain:
    """Test CLI argument handling."""

    @pytest.fixture(autouse=True)
    def restore_settings(self):
        host, port, mcp = settings.api_host, settings.api_port, settings.mcp_enabled
        yield
        settings.api_host, settings.api_port, settings.mcp_enabled = host, port, mcp

    def test_default_mode(self):
        args = main.build_parser().parse_args([])

        assert args.mode == "http"
        assert args.port == settings.api_port

    def test_http_mode(self):
        with patch("main.run_http_server") as run_http, patch("main.configure_logging"):
            main.main(["--port", "9100"])

        run_http.assert_called_once()
        assert settings.api_port == 9100

    def test_both_mode(self):
        with patch("main.run_combined_server") as run_combined, patch("main.configure_logging"):
            main.main(["--mode", "both"])

        run_combined.assert_called_once()

    def test_both_mode_with_mcp_disabled(self):
        settings.mcp_enabled = False

        with patch("main.run_http_server") as run_http, \
                patch("main.run_combined_server") as run_combined, \
                patch("main.configure_logging"):
            main.main(["--mode", "both"])

        run_http.assert_called_once()
        run_combined.assert_not_called()

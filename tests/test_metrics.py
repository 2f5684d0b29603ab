"""Unit tests for notes.metrics — Prometheus exposition."""

from __future__ import annotations

from unittest.mock import patch

from notes.config import Settings
from notes.metrics import start_metrics_server


class TestStartMetricsServer:
    def test_disabled_with_port_zero(self):
        with patch("notes.metrics.start_http_server") as mock_start:
            assert start_metrics_server(0) is False
        mock_start.assert_not_called()

    def test_starts_on_port(self):
        with patch("notes.metrics.start_http_server") as mock_start:
            assert start_metrics_server(9108) is True
        mock_start.assert_called_once_with(9108)

    def test_port_in_use_is_not_fatal(self):
        """A taken port logs a warning instead of crashing the app."""
        with patch(
            "notes.metrics.start_http_server",
            side_effect=OSError("Address already in use"),
        ):
            assert start_metrics_server(9108) is False

    def test_port_setting(self):
        assert Settings(metrics_port=0).metrics_port == 0
        assert Settings(_env_file=None).metrics_port == 9108

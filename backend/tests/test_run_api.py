"""Tests for run_api.py."""

from unittest.mock import patch

import run_api
from shared.config import Settings


class TestMain:
    @patch("run_api.configure_logging")
    @patch("run_api.uvicorn.run")
    def test_defaults_come_from_settings(self, mock_run, mock_logging):
        settings = Settings(_env_file=None, host="127.0.0.1", port=9100, log_level="WARNING")

        run_api.main([], settings=settings)

        mock_logging.assert_called_once_with("WARNING")
        mock_run.assert_called_once_with(
            "api:app",
            host="127.0.0.1",
            port=9100,
            reload=False,
            log_level="warning",
        )

    @patch("run_api.configure_logging")
    @patch("run_api.uvicorn.run")
    def test_command_line_overrides(self, mock_run, mock_logging):
        run_api.main(
            ["--host", "0.0.0.0", "--port", "8081", "--reload", "--log-level", "debug"],
            settings=Settings(_env_file=None),
        )

        mock_logging.assert_called_once_with("debug")
        kwargs = mock_run.call_args.kwargs
        assert kwargs["port"] == 8081
        assert kwargs["reload"] is True
        assert kwargs["log_level"] == "debug"

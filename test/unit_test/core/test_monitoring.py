"""
Unit tests for the Logfire monitoring module.

This test suite covers:
- Conditional initialization (disabled, missing token, enabled)
- Feature flag handling for instrumentation
- Content, request and error logging helpers
"""

from unittest.mock import MagicMock, patch

from fastapi import FastAPI

MODULE = "unthink.core.monitoring"


class TestInitializeLogfire:
    @patch(f"{MODULE}.LOGFIRE_ENABLED", False)
    @patch(f"{MODULE}.logfire")
    def test_disabled_does_nothing(self, mock_logfire):
        from unthink.core.monitoring import initialize_logfire

        initialize_logfire()

        mock_logfire.configure.assert_not_called()

    @patch(f"{MODULE}.LOGFIRE_ENABLED", True)
    @patch(f"{MODULE}.LOGFIRE_TOKEN", "")
    @patch(f"{MODULE}.logger")
    @patch(f"{MODULE}.logfire")
    def test_enabled_without_token_warns(self, mock_logfire, mock_logger):
        from unthink.core.monitoring import initialize_logfire

        initialize_logfire()

        mock_logfire.configure.assert_not_called()
        mock_logger.warning.assert_called_once()

    @patch(f"{MODULE}.LOGFIRE_ENABLED", True)
    @patch(f"{MODULE}.LOGFIRE_TOKEN", "test-token")
    @patch(f"{MODULE}.LOGFIRE_SERVICE_NAME", "test-service")
    @patch(f"{MODULE}.LOGFIRE_ENVIRONMENT", "test")
    @patch(f"{MODULE}.LOGFIRE_TRACE_SQLALCHEMY", True)
    @patch(f"{MODULE}.LOGFIRE_TRACE_HTTPX", False)
    @patch(f"{MODULE}.LOGFIRE_TRACE_FASTAPI", True)
    @patch(f"{MODULE}._configured", False)
    @patch(f"{MODULE}.logfire")
    def test_enabled_configures_and_instruments(self, mock_logfire):
        from unthink.core.monitoring import initialize_logfire

        app = FastAPI()
        initialize_logfire(app)

        mock_logfire.configure.assert_called_once()
        kwargs = mock_logfire.configure.call_args.kwargs
        assert kwargs["token"] == "test-token"
        assert kwargs["service_name"] == "test-service"
        assert kwargs["environment"] == "test"
        mock_logfire.instrument_sqlalchemy.assert_called_once()
        mock_logfire.instrument_httpx.assert_not_called()
        mock_logfire.instrument_fastapi.assert_called_once_with(app=app)

    @patch(f"{MODULE}.LOGFIRE_ENABLED", True)
    @patch(f"{MODULE}.LOGFIRE_TOKEN", "test-token")
    @patch(f"{MODULE}._configured", False)
    @patch(f"{MODULE}.logger")
    @patch(f"{MODULE}.logfire")
    def test_configure_failure_is_logged(self, mock_logfire, mock_logger):
        from unthink.core.monitoring import initialize_logfire

        mock_logfire.configure.side_effect = RuntimeError("boom")

        initialize_logfire()

        mock_logger.error.assert_called_once()


class TestLoggingHelpers:
    @patch(f"{MODULE}._configured", False)
    @patch(f"{MODULE}.logfire")
    def test_helpers_skip_logfire_when_not_configured(self, mock_logfire):
        from unthink.core.monitoring import log_api_request, log_content_created, log_error

        log_api_request("GET", "/health", 200, 1.5)
        log_content_created("essay", "essay-1", "user-1")
        log_error("ValueError", "bad")

        mock_logfire.info.assert_not_called()
        mock_logfire.error.assert_not_called()

    @patch(f"{MODULE}._configured", False)
    @patch(f"{MODULE}.logger")
    def test_content_created_always_logs_locally(self, mock_logger):
        from unthink.core.monitoring import log_content_created

        log_content_created("hot_take", "ht-1", "user-1")

        mock_logger.info.assert_called_once_with("hot_take created: id=ht-1 user=user-1")

    @patch(f"{MODULE}._configured", True)
    @patch(f"{MODULE}.logfire", new_callable=MagicMock)
    def test_helpers_forward_to_logfire_when_configured(self, mock_logfire):
        from unthink.core.monitoring import log_api_request, log_content_created, log_error

        log_api_request("POST", "/api/v1/essays", 201, 12.0)
        log_content_created("essay", "essay-1", "user-1")
        log_error("ExternalServiceError", "storage down", {"path": "/api/v1/media/images"})

        assert mock_logfire.info.call_count == 2
        mock_logfire.info.assert_any_call(
            "API request completed", method="POST", path="/api/v1/essays", status_code=201, duration_ms=12.0
        )
        mock_logfire.error.assert_called_once_with(
            "ExternalServiceError: storage down", path="/api/v1/media/images"
        )

"""Tests for logging module."""
import logging

import sitecore_webapi
from sitecore_webapi.core.logging import get_logger


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_with_module_name(self):
        """Test package module names are kept."""
        logger = get_logger('sitecore_webapi.core.api')

        assert logger.name == 'sitecore_webapi.core.api'

    def test_get_logger_with_other_name(self):
        """Test other names are nested under the package."""
        logger = get_logger('test_module')

        assert logger.name == 'sitecore_webapi.test_module'

    def test_get_logger_without_name(self):
        """Test getting logger without name."""
        logger = get_logger()

        assert logger.name == 'sitecore_webapi'

    def test_get_logger_propagates(self):
        """Test loggers propagate to the root logger."""
        assert get_logger('x').propagate is True

    def test_get_logger_returns_logger_instance(self):
        """Test returns logging.Logger instance."""
        assert isinstance(get_logger('test'), logging.Logger)


class TestSetupLogging:
    """Test suite for setup_logging."""

    def test_sets_level(self):
        """Test package loggers get the requested level."""
        try:
            sitecore_webapi.setup_logging(logging.DEBUG)

            assert logging.getLogger('sitecore_webapi').level == logging.DEBUG
            assert logging.getLogger('sitecore_webapi.core.api').level == logging.DEBUG
        finally:
            sitecore_webapi.setup_logging(logging.WARNING)


class TestFailureLogging:
    """Captured failures are logged at WARNING."""

    def test_transport_failure_logged(self, mock_session, caplog):
        """Test a refused connection is logged without raising."""
        import requests
        mock_session.send.side_effect = requests.ConnectionError('refused')
        context = sitecore_webapi.SitecoreDataContext('cms.example.com', session=mock_session)

        with caplog.at_level(logging.WARNING, logger='sitecore_webapi'):
            context.get_response(sitecore_webapi.ItemQuery(item_path='/sitecore/content'))

        assert any('transport_error' in record.getMessage() for record in caplog.records)

    def test_password_not_logged(self, mock_session, make_response, caplog):
        """Test credentials never reach the log output."""
        mock_session.send.return_value = make_response(200, '{"statusCode": 200}')
        credentials = sitecore_webapi.SitecoreCredentials('sitecore\\admin', 'hunter2')
        context = sitecore_webapi.AuthenticatedSitecoreDataContext(
            'cms.example.com', credentials, session=mock_session
        )

        with caplog.at_level(logging.DEBUG, logger='sitecore_webapi'):
            context.get_response(sitecore_webapi.ItemQuery(item_path='/sitecore/content'))

        assert 'hunter2' not in caplog.text

"""Tests for downloading gallery pages."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests

from butterfly_gallery.exceptions import PageFetchError
from butterfly_gallery.services.pages import fetch_page

URL = "https://www.butterflyexplorers.com/p/butterflies-of-florida.html"


class TestFetchPage:
    """Test page download and error wrapping."""

    @patch("butterfly_gallery.services.pages.session.get")
    def test_returns_html(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.text = "<html></html>"
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response

        assert fetch_page(URL) == "<html></html>"
        mock_get.assert_called_once_with(URL)

    @patch("butterfly_gallery.services.pages.session.get")
    def test_http_error_wrapped(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        mock_get.return_value = mock_response

        with pytest.raises(PageFetchError) as exc_info:
            fetch_page(URL)
        assert exc_info.value.source_url == URL
        assert "404" in str(exc_info.value)

    @patch("butterfly_gallery.services.pages.session.get")
    def test_connection_error_wrapped(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("connection reset")

        with pytest.raises(PageFetchError, match="Could not fetch"):
            fetch_page(URL)

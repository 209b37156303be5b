"""Unit tests for HttpTransport."""

import pytest
import requests
from unittest.mock import Mock, patch

import fakerest.transport as transport_module
from fakerest.output import OutputManager, Verbosity, set_output
from fakerest.transport import HttpTransport, Response, TransportError, get_transport

URL = "https://jsonplaceholder.typicode.com/users"


def fake_response(status=200, content=b"[]"):
    return Mock(status_code=status, content=content)


class TestHttpTransport:
    """Test cases for HttpTransport class."""

    @patch("fakerest.transport.requests.request")
    def test_get_sets_accept_only(self, mock_request):
        """Test GET sends Accept and no body or Content-Type."""
        mock_request.return_value = fake_response(200, b'[{"id":1}]')

        result = HttpTransport().request("GET", URL)

        assert result == Response(200, '[{"id":1}]')
        args, kwargs = mock_request.call_args
        assert args == ("GET", URL)
        assert kwargs["headers"] == {"Accept": "application/json"}
        assert kwargs["data"] is None
        assert kwargs["timeout"] is None

    @patch("fakerest.transport.requests.request")
    def test_body_sent_verbatim_as_utf8(self, mock_request):
        """Test a body is sent as UTF-8 bytes with the JSON content type."""
        mock_request.return_value = fake_response(201, b"{}")
        body = '{"id":11,"name":"Zoë","email":"z@example.com"}'

        HttpTransport().request("POST", URL, body)

        kwargs = mock_request.call_args.kwargs
        assert kwargs["data"] == body.encode("utf-8")
        assert kwargs["headers"]["Content-Type"] == "application/json; charset=utf-8"
        assert kwargs["headers"]["Accept"] == "application/json"

    @patch("fakerest.transport.requests.request")
    def test_non_2xx_is_returned(self, mock_request):
        """Test error statuses come back as responses, not exceptions."""
        mock_request.return_value = fake_response(404, b"{}")

        result = HttpTransport().request("GET", URL + "/999")

        assert result.status == 404
        assert result.body == "{}"
        assert not result.ok

    @patch("fakerest.transport.requests.request")
    def test_empty_body(self, mock_request):
        """Test an empty response body is returned as empty text."""
        mock_request.return_value = fake_response(200, b"")

        result = HttpTransport().request("DELETE", URL + "/11")

        assert result == Response(200, "")
        assert result.ok

    @patch("fakerest.transport.requests.request")
    def test_method_is_normalised(self, mock_request):
        """Test lowercase methods are accepted."""
        mock_request.return_value = fake_response()
        HttpTransport().request("put", URL, "{}")
        assert mock_request.call_args.args[0] == "PUT"

    def test_unsupported_method(self):
        """Test methods outside GET/POST/PUT/DELETE are rejected."""
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            HttpTransport().request("PATCH", URL)

    @patch("fakerest.transport.requests.request")
    def test_connection_error(self, mock_request):
        """Test I/O failures become TransportError with the cause chained."""
        cause = requests.ConnectionError("connection refused")
        mock_request.side_effect = cause

        with pytest.raises(TransportError, match="GET .* failed") as exc_info:
            HttpTransport().request("GET", URL)
        assert exc_info.value.__cause__ is cause

    def test_malformed_url(self):
        """Test a URL without a scheme is a transport error."""
        with pytest.raises(TransportError):
            HttpTransport().request("GET", "not a url")

    @patch("fakerest.transport.requests.request")
    def test_invalid_utf8(self, mock_request):
        """Test undecodable bodies are reported as TransportError."""
        mock_request.return_value = fake_response(200, b"\xff\xfe")
        with pytest.raises(TransportError, match="not valid UTF-8"):
            HttpTransport().request("GET", URL)

    @patch("fakerest.transport.requests.request")
    def test_timeout_passed_through(self, mock_request):
        """Test the configured timeout reaches requests."""
        mock_request.return_value = fake_response()
        HttpTransport(timeout=2.5).request("GET", URL)
        assert mock_request.call_args.kwargs["timeout"] == 2.5

    @patch("fakerest.transport.requests.request")
    def test_verbose_output(self, mock_request, capsys):
        """Test requests are echoed in verbose mode."""
        set_output(OutputManager(verbosity=Verbosity.VERBOSE))
        mock_request.return_value = fake_response(200, b"[]")

        HttpTransport().request("GET", URL)

        out = capsys.readouterr().out
        assert f"GET {URL}" in out
        assert "-> 200" in out


class TestGetTransport:
    """Test cases for the default transport."""

    def test_reads_timeout_from_env(self, monkeypatch):
        """Test FAKEREST_TIMEOUT configures the default instance."""
        monkeypatch.setattr(transport_module, "_default_transport", None)
        monkeypatch.setenv("FAKEREST_TIMEOUT", "7")
        assert get_transport().timeout == 7.0

    def test_is_cached(self, monkeypatch):
        """Test the same instance is returned on every call."""
        monkeypatch.setattr(transport_module, "_default_transport", None)
        assert get_transport() is get_transport()

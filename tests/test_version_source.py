import http.client
import io
import json
from unittest.mock import patch
from urllib.error import URLError

import pytest

from prochub.branding import AppBranding
from prochub.core.models import FetchError, ParseError, UNKNOWN_VERSION, VersionInfo
from prochub.core.version_source import (
    HttpVersionSource, normalize_version_info, read_local_version,
)


class TestNormalizeVersionInfo:

    def test_json_text_matches_structured_payload(self):
        text = '{"version":"2.0.0","url":"https://x"}'
        structured = {'version': "2.0.0", 'url': "https://x"}

        assert normalize_version_info(text) == normalize_version_info(structured)
        assert normalize_version_info(text) == VersionInfo("2.0.0", "https://x")

    def test_bytes_payload_is_decoded(self):
        assert normalize_version_info(b'{"version": "1.0"}') == VersionInfo("1.0")

    def test_version_info_passes_through(self):
        info = VersionInfo("3.1", "https://example.com")
        assert normalize_version_info(info) == info

    @pytest.mark.parametrize("payload", [
        {},
        {'version': ""},
        {'version': None, 'url': "https://x"},
        '{"url": "https://x"}',
    ])
    def test_missing_or_empty_version_becomes_unknown(self, payload):
        assert normalize_version_info(payload).version == UNKNOWN_VERSION

    def test_null_url_becomes_empty(self):
        assert normalize_version_info({'version': "1", 'url': None}).url == ""

    @pytest.mark.parametrize("payload", [
        "{not json",
        "",
        "[1, 2]",
        '"1.2.0"',
        '{"version": 2}',
        {'version': "1", 'url': 5},
        42,
        None,
    ])
    def test_bad_payloads_raise_parse_error(self, payload):
        with pytest.raises(ParseError):
            normalize_version_info(payload)


class _Response(io.BytesIO):
    status = 200


class TestHttpVersionSource:

    def test_returns_body_text_and_sends_user_agent(self):
        body = json.dumps({'version': "0.2.0"}).encode('utf-8')
        with patch('prochub.core.version_source.urlopen',
                   return_value=_Response(body)) as mock_open:
            text = HttpVersionSource("https://example.com/v", timeout=3).fetch_remote_version_info()

        assert json.loads(text) == {'version': "0.2.0"}
        req = mock_open.call_args[0][0]
        assert req.full_url == "https://example.com/v"
        assert req.get_header('User-agent').startswith(f"Open/{AppBranding.APP_NAME}/")
        assert mock_open.call_args[1]['timeout'] == 3

    def test_transport_error_is_fetch_error(self):
        with patch('prochub.core.version_source.urlopen',
                   side_effect=URLError("no route")):
            with pytest.raises(FetchError):
                HttpVersionSource("https://example.com/v").fetch_remote_version_info()

    def test_non_200_is_fetch_error(self):
        resp = _Response(b"{}")
        resp.status = 204
        with patch('prochub.core.version_source.urlopen', return_value=resp):
            with pytest.raises(FetchError):
                HttpVersionSource("https://example.com/v").fetch_remote_version_info()

    def test_missing_url_is_fetch_error(self):
        with pytest.raises(FetchError):
            HttpVersionSource("").fetch_remote_version_info()

    def test_url_without_scheme_is_fetch_error(self):
        with pytest.raises(FetchError):
            HttpVersionSource("open.modstart.com/v").fetch_remote_version_info()

    def test_malformed_http_response_is_fetch_error(self):
        with patch('prochub.core.version_source.urlopen',
                   side_effect=http.client.RemoteDisconnected("closed")):
            with pytest.raises(FetchError):
                HttpVersionSource("https://example.com/v").fetch_remote_version_info()

    def test_invalid_utf8_body_is_fetch_error(self):
        with patch('prochub.core.version_source.urlopen',
                   return_value=_Response(b'{"version": "\xff\xfe"}')):
            with pytest.raises(FetchError):
                HttpVersionSource("https://example.com/v").fetch_remote_version_info()


class TestReadLocalVersion:

    def test_falls_back_to_branding_version(self, tmp_path):
        assert read_local_version(str(tmp_path / "missing.json")) == AppBranding.VERSION

    def test_reads_version_file(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_text('{"version": " 1.4.2 "}', encoding='utf-8')
        assert read_local_version(str(path)) == "1.4.2"

    def test_empty_version_is_unknown(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_text('{"version": ""}', encoding='utf-8')
        assert read_local_version(str(path)) == UNKNOWN_VERSION

    def test_corrupt_file_is_fetch_error(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_text('{oops', encoding='utf-8')
        with pytest.raises(FetchError):
            read_local_version(str(path))

    def test_non_utf8_file_is_fetch_error(self, tmp_path):
        path = tmp_path / "version.json"
        path.write_bytes(b'{"version": "\xff\xfe"}')
        with pytest.raises(FetchError):
            read_local_version(str(path))

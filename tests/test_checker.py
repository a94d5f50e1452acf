"""Tests for the AssetCheck orchestrator."""

import json
import logging

import pytest
from requests.structures import CaseInsensitiveDict

from assetcheck import asset_file
from assetcheck.checker import EXIT_FAILURE, EXIT_OK, AssetCheck
from assetcheck.config import HANDLE_ALL_URLS, LOG_DEBUG, LOG_INFO, LOG_SILENT
from assetcheck.errors import SchemaValidationError


@pytest.fixture(autouse=True)
def capture_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="assetcheck")
    return caplog


def _errors(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.levelno >= logging.ERROR]


class TestRunLocal:
    """Tests for checking a local manifest."""

    def test_android_only_app_links(self, write_manifest, android_entry, caplog):
        """Android-only handle_all_urls reports App Links for the current website."""
        path = write_manifest([android_entry])
        checker = AssetCheck(str(path), LOG_DEBUG)
        assert checker.run() == EXIT_OK
        assert "# ✓ App Links" in caplog.messages
        assert "## Current website" in caplog.messages
        assert "## To apps:\n- com.example.app" in caplog.messages
        assert checker.has_errors is False

    def test_android_only_with_tracked_hostname(self, write_manifest, android_entry, caplog):
        path = write_manifest([android_entry])
        checker = AssetCheck(str(path), LOG_DEBUG, hostname="www.example.com")
        assert checker.run() == EXIT_OK
        assert "## Websites linked:\n- www.example.com" in caplog.messages

    def test_smart_lock(self, write_manifest, smart_lock_manifest, caplog):
        path = write_manifest(smart_lock_manifest)
        assert AssetCheck(str(path), LOG_DEBUG).run() == EXIT_OK
        assert "# ✓ Smart Lock" in caplog.messages
        assert "## Websites linked:\n- https://www.example.com" in caplog.messages
        assert "# ✓ App Links" not in caplog.messages

    def test_no_relations(self, write_manifest, web_entry, caplog):
        """Nothing to report is still a successful run."""
        path = write_manifest([web_entry])
        assert AssetCheck(str(path)).run() == EXIT_OK
        assert "# No relations to display" in caplog.messages

    def test_info_level_hides_details(self, write_manifest, android_entry, caplog):
        path = write_manifest([android_entry])
        AssetCheck(str(path), LOG_INFO).run()
        assert "# ✓ App Links" in caplog.messages
        assert not any(m.startswith("## ") for m in caplog.messages)

    def test_schema_errors(self, write_manifest, web_entry, android_entry, caplog):
        """Each violation is logged as path: message, then the run fails."""
        del web_entry["target"]
        android_entry["target"]["namespace"] = "ios_app"
        path = write_manifest([web_entry, android_entry])
        checker = AssetCheck(str(path))
        assert checker.run() == EXIT_FAILURE
        errors = _errors(caplog)
        assert errors[0] == "instance[0]: 'target' is a required property"
        assert errors[1].startswith("instance[1].target: ")
        assert errors[-1] == "Errors with file contents: Errors validating schema"
        assert checker.has_errors is True

    def test_byte_order_mark(self, write_manifest, android_entry, caplog):
        path = write_manifest(b"\xef\xbb\xbf" + json.dumps([android_entry]).encode())
        assert AssetCheck(str(path)).run() == EXIT_FAILURE
        assert _errors(caplog) == [
            "Errors with file contents: "
            "File must be UTF-8 encoded _without_ a byte order mark (BOM)"
        ]

    def test_no_data(self, write_manifest, caplog):
        path = write_manifest([])
        assert AssetCheck(str(path)).run() == EXIT_FAILURE
        assert _errors(caplog) == ["Errors with file contents: No data in file."]

    def test_missing_file(self, tmp_path, caplog):
        checker = AssetCheck(str(tmp_path / "nope.json"))
        assert checker.run() == EXIT_FAILURE
        errors = _errors(caplog)
        assert errors[0] == "Unable to get contents of file"
        assert len(errors) == 2

    def test_silent(self, write_manifest, caplog):
        path = write_manifest("not json")
        checker = AssetCheck(str(path), LOG_SILENT)
        assert checker.run() == EXIT_FAILURE
        assert caplog.records == []
        assert checker.has_errors is True


class TestRunRemote:
    """Tests for checking a hosted manifest."""

    @pytest.fixture
    def serve(self, monkeypatch):
        def install(status_code=200, headers=None, body=b"[]"):
            class _Response:
                pass

            response = _Response()
            response.status_code = status_code
            response.headers = CaseInsensitiveDict(
                headers if headers is not None else {"Content-Type": "application/json"}
            )
            response.content = body
            monkeypatch.setattr(asset_file.requests, "get", lambda url, **kwargs: response)

        return install

    def test_remote_success(self, serve, android_entry, caplog):
        serve(body=json.dumps([android_entry]).encode())
        checker = AssetCheck("http://www.example.com", LOG_DEBUG, "checker/1.0")
        assert checker.run() == EXIT_OK
        assert "User agent: checker/1.0" in caplog.messages
        assert "URL: https://www.example.com/.well-known/assetlinks.json" in caplog.messages
        assert "# ✓ App Links" in caplog.messages

    def test_remote_bad_status(self, serve, caplog):
        serve(status_code=302, headers={"Location": "https://example.com/"})
        assert AssetCheck("https://www.example.com").run() == EXIT_FAILURE
        assert _errors(caplog) == ["Bad response code: 302 [ https://example.com/ ]"]

    def test_remote_parse_error(self, serve, caplog):
        serve(body=b"{oops")
        assert AssetCheck("https://www.example.com").run() == EXIT_FAILURE
        assert _errors(caplog)[0].startswith("Unable to parse json")


class TestDisplayAssociations:
    """Tests for entry-level failures during reporting."""

    def test_entry_skipped_sibling_reported(self, android_entry, caplog):
        """A web target without site is skipped; its sibling is still reported."""
        broken = {"relation": [HANDLE_ALL_URLS], "target": {"namespace": "web"}}
        checker = AssetCheck("assetlinks.json", LOG_DEBUG)
        findings = checker.display_associations([broken, android_entry])
        assert "[entry] Missing site from target" in _errors(caplog)
        assert [f.apps for f in findings] == [("com.example.app",)]
        assert "# ✓ App Links" in caplog.messages

    def test_non_string_site_does_not_abort(self, smart_lock_manifest, caplog):
        """A bad site is logged and skipped; the report still completes."""
        smart_lock_manifest[0]["target"]["site"] = 42
        checker = AssetCheck("assetlinks.json", LOG_DEBUG)
        findings = checker.display_associations(smart_lock_manifest)
        assert findings == []
        assert any(m.startswith("[entry] Invalid site in target") for m in _errors(caplog))
        assert "# No relations to display" in caplog.messages


class TestHandleParseJson:
    def test_oneof_causes_logged_at_debug(self, web_entry, caplog):
        web_entry["target"]["extra"] = True
        checker = AssetCheck("assetlinks.json", LOG_DEBUG)
        with pytest.raises(SchemaValidationError):
            checker.handle_parse_json(json.dumps([web_entry]).encode())
        debug = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert any("extra" in m for m in debug)

"""Tests for engine availability probes (no real subprocesses are started)."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import subprocess
from importlib import metadata

from file_converter.conversion import engines
from file_converter.conversion.engines import check_marker, check_pymupdf4llm, install_pymupdf4llm


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


# ===========================================================================
# check_marker tests
# ===========================================================================


class TestCheckMarker:

    def test_available_on_zero_exit(self, monkeypatch):
        monkeypatch.setattr(engines.subprocess, "run", lambda *a, **kw: _completed(0))
        status = check_marker()
        assert status.available
        assert status.version == "available"

    def test_available_when_usage_printed_with_nonzero_exit(self, monkeypatch):
        monkeypatch.setattr(engines.subprocess, "run", lambda *a, **kw: _completed(2, stdout="usage: marker_single [-h] ..."))
        assert check_marker().available

    def test_unavailable_on_failure_without_usage(self, monkeypatch):
        monkeypatch.setattr(engines.subprocess, "run", lambda *a, **kw: _completed(1, stderr="boom"))
        status = check_marker()
        assert not status.available
        assert status.error == "boom"

    def test_unavailable_when_binary_missing(self, monkeypatch):
        def missing(*_args, **_kwargs):
            raise FileNotFoundError("No such file or directory: 'marker_single'")

        monkeypatch.setattr(engines.subprocess, "run", missing)
        status = check_marker()
        assert not status.available
        assert "marker_single" in status.error

    def test_unavailable_on_timeout(self, monkeypatch):
        def hang(*_args, **_kwargs):
            raise subprocess.TimeoutExpired(cmd="marker_single", timeout=60)

        monkeypatch.setattr(engines.subprocess, "run", hang)
        assert not check_marker().available

    def test_probe_uses_help_flag_and_timeout(self, monkeypatch):
        calls = []

        def record(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return _completed(0)

        monkeypatch.setattr(engines.subprocess, "run", record)
        check_marker()
        cmd, kwargs = calls[0]
        assert cmd == [engines.MARKER_COMMAND, "--help"]
        assert kwargs["timeout"] == engines.CHECK_TIMEOUT


# ===========================================================================
# check_pymupdf4llm tests
# ===========================================================================


class TestCheckPymupdf4llm:

    def test_missing_module(self, monkeypatch):
        monkeypatch.setattr(engines.importlib.util, "find_spec", lambda name: None)
        status = check_pymupdf4llm()
        assert not status.available
        assert status.error == "pymupdf4llm not found"

    def test_reports_installed_version(self, monkeypatch):
        monkeypatch.setattr(engines.importlib.util, "find_spec", lambda name: object())
        monkeypatch.setattr(engines.metadata, "version", lambda name: "0.0.17")
        status = check_pymupdf4llm()
        assert status.available
        assert status.version == "0.0.17"

    def test_unknown_version_still_available(self, monkeypatch):
        def no_metadata(name):
            raise metadata.PackageNotFoundError(name)

        monkeypatch.setattr(engines.importlib.util, "find_spec", lambda name: object())
        monkeypatch.setattr(engines.metadata, "version", no_metadata)
        status = check_pymupdf4llm()
        assert status.available
        assert status.version == "unknown"


# ===========================================================================
# install_pymupdf4llm tests
# ===========================================================================


class TestInstallPymupdf4llm:

    def test_pip_failure(self, monkeypatch):
        monkeypatch.setattr(engines.subprocess, "run", lambda *a, **kw: _completed(1, stderr="network down"))
        status = install_pymupdf4llm()
        assert not status.available
        assert status.error == "network down"

    def test_success_rechecks_availability(self, monkeypatch):
        calls = []

        def record(cmd, **_kwargs):
            calls.append(cmd)
            return _completed(0)

        monkeypatch.setattr(engines.subprocess, "run", record)
        monkeypatch.setattr(engines.importlib.util, "find_spec", lambda name: object())
        monkeypatch.setattr(engines.metadata, "version", lambda name: "0.0.17")
        status = install_pymupdf4llm()
        assert status.available
        assert calls[0][1:] == ["-m", "pip", "install", "pymupdf4llm"]

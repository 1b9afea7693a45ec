"""Tests for the ``age-greeter doctor`` command (cli/doctor.py).

Coverage:
* Individual check functions return correct tuples.
* ``run_doctor`` returns SUCCESS unless a check is FAIL.
* Plain (no Rich) rendering.
* CLI routing dispatches to ``run_doctor``.
"""

from __future__ import annotations

import io
import sys
from unittest.mock import MagicMock, patch

import pytest

from age_greeter.cli import exit_codes


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from age_greeter.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestRichCheck:
    def test_installed(self) -> None:
        from age_greeter.cli.doctor import _rich_check

        label, _value, status = _rich_check()
        assert label == "rich"
        assert "OK" in status

    @patch.dict("sys.modules", {"rich": None})
    def test_missing_is_warning(self) -> None:
        from age_greeter.cli.doctor import _rich_check

        _label, value, status = _rich_check()
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestStdoutEncodingCheck:
    @pytest.mark.parametrize("encoding", ["utf-8", "UTF-8", "utf8", "utf_16"])
    def test_utf_family(self, encoding: str) -> None:
        from age_greeter.cli.doctor import _is_utf_encoding

        assert _is_utf_encoding(encoding)

    @pytest.mark.parametrize("encoding", ["ascii", "cp1252", "no-such-codec"])
    def test_non_utf(self, encoding: str) -> None:
        from age_greeter.cli.doctor import _is_utf_encoding

        assert not _is_utf_encoding(encoding)

    def test_ascii_stdout_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from age_greeter.cli.doctor import _stdout_encoding_check

        monkeypatch.setattr(
            sys, "stdout", io.TextIOWrapper(io.BytesIO(), encoding="ascii"),
        )
        label, value, status = _stdout_encoding_check()
        assert label == "stdout"
        assert value == "ascii"
        assert "WARN" in status


class TestStdinCheck:
    def test_redirected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from age_greeter.cli.doctor import _stdin_check

        monkeypatch.setattr(sys, "stdin", io.StringIO(""))
        assert _stdin_check() == ("stdin", "redirected", "[green]OK[/green]")

    def test_closed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from age_greeter.cli.doctor import _stdin_check

        stream = io.StringIO("")
        stream.close()
        monkeypatch.setattr(sys, "stdin", stream)
        _label, value, status = _stdin_check()
        assert value == "unavailable"
        assert "WARN" in status


class TestAgeGreeterVersionCheck:
    def test_returns_current_version(self) -> None:
        from age_greeter.cli.doctor import _agegreeter_version_check
        from age_greeter.version import __version__

        label, value, status = _agegreeter_version_check()
        assert label == "age-greeter"
        assert value == __version__
        assert "OK" in status


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    def test_all_pass_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        from age_greeter.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS
        assert "All checks passed." in capsys.readouterr().err

    @patch(
        "age_greeter.cli.doctor._python_version_check",
        return_value=("Python", "3.8.0", "[red]FAIL (>=3.10 required)[/red]"),
    )
    def test_failure_returns_general_error(
        self, _mock_py: MagicMock, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from age_greeter.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.GENERAL_ERROR
        assert "Some checks failed." in capsys.readouterr().err

    @patch(
        "age_greeter.cli.doctor._stdout_encoding_check",
        return_value=("stdout", "ascii", "[yellow]WARN[/yellow]"),
    )
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_with_encoding_warning(
        self, _mock_enc: MagicMock, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from age_greeter.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "age-greeter doctor" in err
        assert "WARN" in err
        assert "PYTHONIOENCODING=utf-8" in err
        assert "[bold" not in err
        assert "[yellow]" not in err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("age_greeter.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches(self, mock_run: MagicMock) -> None:
        from age_greeter.cli.app import main

        assert main(["doctor"]) == exit_codes.SUCCESS
        mock_run.assert_called_once()

    @patch("age_greeter.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, _mock_run: MagicMock) -> None:
        from age_greeter.cli.app import main

        assert main(["doctor"]) == exit_codes.GENERAL_ERROR

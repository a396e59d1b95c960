"""
Unit tests for clipboard integration in the passforge command.
"""

import json
import subprocess
import sys
import textwrap
from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest
from click.testing import CliRunner

from passforge.__main__ import cli, copy_to_clipboard

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestClipboardIntegration:
    """Test clipboard functionality with --copy."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @patch('passforge.__main__.threading.Thread')
    @patch('pyperclip.copy')
    def test_clipboard_copy_success(self, mock_copy, mock_thread, runner):
        """Test the last generated password is copied."""
        result = runner.invoke(cli, ["--copy", "--count", "2"])

        assert result.exit_code == 0
        last = result.output.splitlines()[1].split(": ", 1)[1]
        mock_copy.assert_called_once_with(last)
        assert "copied to clipboard" in result.output

    @patch('passforge.__main__.threading.Thread')
    @patch('pyperclip.copy')
    def test_clipboard_auto_clear(self, mock_copy, mock_thread):
        """Test a non-daemon thread is started to clear the clipboard."""
        mock_thread_instance = MagicMock()
        mock_thread.return_value = mock_thread_instance

        copy_to_clipboard("s3cret-Pass")

        mock_thread.assert_called_once()
        assert mock_thread.call_args.kwargs["daemon"] is False
        mock_thread_instance.start.assert_called_once()

    @patch('passforge.__main__.time.sleep')
    @patch('pyperclip.paste', return_value="s3cret-Pass")
    @patch('pyperclip.copy')
    def test_clear_only_our_password(self, mock_copy, mock_paste, mock_sleep):
        """Test the clear thread wipes the clipboard if it still holds the password."""
        with patch('passforge.__main__.threading.Thread') as mock_thread:
            copy_to_clipboard("s3cret-Pass")
            clear = mock_thread.call_args.kwargs["target"]

        clear()

        mock_sleep.assert_called_once_with(60)
        assert mock_copy.call_args_list[-1].args == ("",)

    def test_clipboard_cleared_before_exit(self, tmp_path):
        """Test the command clears the clipboard before the process exits."""
        record = tmp_path / "clipboard.json"
        script = textwrap.dedent(
            """
            import atexit, json, sys
            import pyperclip
            import passforge.__main__ as cli_module

            record_path = sys.argv[1]
            calls = []
            state = {"value": ""}

            def fake_copy(text):
                calls.append(text)
                state["value"] = text

            pyperclip.copy = fake_copy
            pyperclip.paste = lambda: state["value"]
            cli_module.CLIPBOARD_CLEAR_SECONDS = 0.3

            # atexit handlers run after non-daemon threads are joined
            atexit.register(lambda: open(record_path, "w").write(json.dumps(calls)))
            sys.argv = ["passforge", "--copy"]
            cli_module.main()
            """
        )

        result = subprocess.run(
            [sys.executable, "-c", script, str(record)],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            timeout=30,
        )

        assert result.returncode == 0, result.stderr
        calls = json.loads(record.read_text())
        assert len(calls) == 2
        assert calls[0] in result.stdout
        assert calls[1] == ""
        assert "Clipboard will be cleared in 0.3 seconds." in result.stdout

    def test_clipboard_import_error_handling(self, runner):
        """Test graceful handling when pyperclip is not available."""
        with patch.dict(sys.modules, {"pyperclip": None}):
            result = runner.invoke(cli, ["--copy"])

        assert result.exit_code == 0
        assert "Generated password: " in result.output
        assert "pyperclip not installed" in result.output

    @patch('pyperclip.copy', side_effect=Exception("no clipboard"))
    def test_clipboard_copy_failure(self, mock_copy, runner):
        """Test clipboard errors are reported, not raised."""
        result = runner.invoke(cli, ["--copy"])

        assert result.exit_code == 0
        assert "Could not copy to clipboard: no clipboard" in result.output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

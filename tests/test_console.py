"""Tests for console.py module."""

from unittest.mock import patch

import pytest
from rich.text import Text

from kube_secrets import console


class TestConsoleOutput:
    """Tests for status message functions."""

    def test_info_message(self):
        """Test info message format."""
        with patch.object(console.err_console, "print") as mock_print:
            console.info("Test message")
            mock_print.assert_called_once()
            call_arg = mock_print.call_args[0][0]
            assert "ℹ" in call_arg
            assert "Test message" in call_arg

    def test_warning_message(self):
        """Test warning message format."""
        with patch.object(console.err_console, "print") as mock_print:
            console.warning("Be careful")
            call_arg = mock_print.call_args[0][0]
            assert "⚠" in call_arg
            assert "Be careful" in call_arg

    def test_error_message(self):
        """Test error message format."""
        with patch.object(console.err_console, "print") as mock_print:
            console.error("Something failed")
            call_arg = mock_print.call_args[0][0]
            assert "✗" in call_arg
            assert "Something failed" in call_arg

    def test_action_message(self):
        """Test action message format."""
        with patch.object(console.err_console, "print") as mock_print:
            console.action("Doing something")
            call_arg = mock_print.call_args[0][0]
            assert "→" in call_arg
            assert "Doing something" in call_arg

    def test_status_goes_to_stderr(self):
        """Test status messages do not use the listing console."""
        with patch.object(console.console, "print") as mock_print:
            console.error("Something failed")
            mock_print.assert_not_called()

    def test_highlight_returns_markup(self):
        """Test highlight returns Rich markup."""
        assert console.highlight("important") == "[highlight]important[/highlight]"


class TestConsoleLine:
    """Tests for listing output."""

    def test_line_disables_markup_wrapping_and_highlighting(self):
        """Test listing lines are printed verbatim."""
        with patch.object(console.console, "print") as mock_print:
            console.line("  value: 12345")
            mock_print.assert_called_once_with(
                "  value: 12345", markup=False, soft_wrap=True, highlight=False, emoji=False
            )

    def test_line_prints_styled_text(self, capsys):
        """Test style spans are not printed as text."""
        console.line(Text.assemble(("api-token", "secret.name"), ":"))

        assert capsys.readouterr().out == "api-token:\n"

    @pytest.mark.parametrize(
        "text",
        [
            "  value: :smile:",
            "  value: C:\\path\\",
            "  value: [bold]x[/bold]",
            "Namespace 'team[/x]' does not exist. Maybe you're looking at the wrong cluster?",
        ],
    )
    def test_line_keeps_text(self, capsys, text):
        """Test emoji codes, backslashes and brackets are printed as given."""
        console.line(text)

        assert capsys.readouterr().out == f"{text}\n"

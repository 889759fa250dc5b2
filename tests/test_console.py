"""Tests for the CLI console and entry point."""

from unittest import mock

from rich.console import Console

from cephconf.cli import cli
from cephconf.cli.__main__ import main
from cephconf.cli.console import CephConfConsole, console


def make_console() -> CephConfConsole:
    return CephConfConsole(record=True, width=200, force_terminal=False)


class TestCephConfConsole:
    """Tests for CephConfConsole."""

    def test_is_rich_console(self):
        """Test that the console extends Rich's Console."""
        assert isinstance(console, Console)

    def test_cli_uses_shared_console(self):
        """Test that the commands report through the shared console."""
        assert cli.console is console

    def test_messages_keep_brackets(self):
        """Test that bracketed text in messages is not taken as markup."""
        out = make_console()

        out.info("[client.admin] info")
        out.warning("[client.admin] warning")
        out.success("[client.admin] success")
        out.error("[Errno 2] missing")
        out.path("/etc/ceph/[x]")

        text = out.export_text()
        assert "[client.admin] info" in text
        assert "[client.admin] warning" in text
        assert "[client.admin] success" in text
        assert "Error: [Errno 2] missing" in text
        assert "/etc/ceph/[x]" in text


class TestMain:
    """Tests for the module entry point."""

    def test_unexpected_error_returns_one(self):
        """Test that an unexpected failure is reported and exits 1."""
        with mock.patch("cephconf.cli.__main__.app", side_effect=RuntimeError("boom")):
            with mock.patch("cephconf.cli.__main__.console") as mock_console:
                assert main() == 1

        mock_console.error.assert_called_once_with("boom")

    def test_success_returns_zero(self):
        """Test that a clean run exits 0."""
        with mock.patch("cephconf.cli.__main__.app"):
            assert main() == 0

"""Tests for the sendmail dispatcher."""

import sys

import pytest

from mailsim.errors import DispatcherUnavailableError
from mailsim.services.dispatch.sendmail import SendmailDispatcher


def python_command(code: str) -> list[str]:
    """Command line running code with the current interpreter."""
    return [sys.executable, "-c", code]


class TestSendmailDispatcher:
    """Test running the mail-transfer command."""

    @pytest.fixture
    def message_file(self, tmp_path):
        """Stored message to dispatch."""
        path = tmp_path / "2025-01-13_10-30-00.eml"
        path.write_text("To: alice@example.com\nSubject: Hi\n\nhello\n\n", encoding="utf-8")
        return path

    def test_default_command(self):
        """Test default command is sendmail -t."""
        dispatcher = SendmailDispatcher()
        assert dispatcher.command == ["sendmail", "-t"]
        assert dispatcher.name == "sendmail"

    def test_description_is_full_command(self):
        """Test description shows the whole command line, quoted."""
        dispatcher = SendmailDispatcher(["/usr/sbin/sendmail", "-t", "-f", "ops team"])
        assert dispatcher.name == "sendmail"
        assert dispatcher.description == "/usr/sbin/sendmail -t -f 'ops team'"

    def test_zero_exit_is_success(self, message_file):
        """Test exit status 0 reports success."""
        dispatcher = SendmailDispatcher(python_command("import sys; sys.stdin.read()"))
        assert dispatcher.dispatch(message_file) is True

    def test_file_is_bound_to_stdin(self, message_file):
        """Test the command receives the message on standard input."""
        code = "import sys; data = sys.stdin.read(); sys.exit(0 if 'To: alice@example.com' in data else 7)"
        assert SendmailDispatcher(python_command(code)).dispatch(message_file) is True

    def test_nonzero_exit_is_failure(self, message_file):
        """Test nonzero exit status reports failure."""
        dispatcher = SendmailDispatcher(python_command("import sys; sys.exit(75)"))
        assert dispatcher.dispatch(message_file) is False

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals only")
    def test_killed_by_signal_is_failure(self, message_file):
        """Test abnormal termination reports failure."""
        code = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
        assert SendmailDispatcher(python_command(code)).dispatch(message_file) is False

    def test_file_left_unchanged(self, message_file):
        """Test dispatch does not modify or remove the file."""
        before = message_file.read_bytes()
        SendmailDispatcher(python_command("import sys; sys.exit(1)")).dispatch(message_file)
        assert message_file.read_bytes() == before

    def test_missing_command_raises_error(self, message_file):
        """Test a command that cannot be started raises DispatcherUnavailableError."""
        dispatcher = SendmailDispatcher(["mailsim-no-such-mta-binary"])
        with pytest.raises(DispatcherUnavailableError):
            dispatcher.dispatch(message_file)

    def test_missing_file_raises_error(self, tmp_path):
        """Test a missing message file raises DispatcherUnavailableError."""
        dispatcher = SendmailDispatcher(python_command("pass"))
        with pytest.raises(DispatcherUnavailableError):
            dispatcher.dispatch(tmp_path / "missing.eml")

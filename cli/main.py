"""Main CLI entry point for mailsim."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from mailsim.config.config_loader import ConfigLoader
from mailsim.config.settings import AppConfig
from mailsim.errors import MailSimError
from mailsim.models.email_message import SendResult, SendStatus
from mailsim.services.sender import EmailSender
from mailsim.storage.message_store import MessageStore
from mailsim.utils.input_utils import read_body
from mailsim.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def prompt_line(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    """Print prompt and read one line without its newline."""
    stdout.write(prompt)
    stdout.flush()
    return stdin.readline().rstrip("\r\n")


def report_result(result: SendResult, stdout: TextIO, stderr: TextIO) -> None:
    """Print the outcome of a send attempt for the operator."""
    if result.status == SendStatus.SENT:
        print(f"Email sent successfully to: {result.message.recipient}", file=stdout)
        print(f"Message ID: {result.message.message_id}", file=stdout)
    elif result.status == SendStatus.SKIPPED:
        print("Dispatch is disabled, email was not delivered.", file=stdout)
        print(f"Email saved to: {result.file_path.resolve()}", file=stdout)
        print(f"Message ID: {result.message.message_id}", file=stdout)
    elif result.file_path is not None:
        print(f"Failed to send email: {result.error_details}", file=stderr)
        print(f"Email saved to: {result.file_path.resolve()}", file=stderr)
    else:
        print(f"Failed to send email: {result.error_details}", file=stderr)


def cmd_send(
    args,
    config: AppConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Send email command."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    sender = EmailSender.from_config(config)

    recipient = prompt_line("To: ", stdin, stdout)
    subject = prompt_line("Subject: ", stdin, stdout)
    print("Body (end with a dot on a new line):", file=stdout)
    body = read_body(iter(stdin.readline, ""))

    result = sender.send_email(recipient, subject, body, sender=args.sender)
    report_result(result, stdout, stderr)

    return 0 if result.ok else 1


def cmd_list(args, config: AppConfig, stdout: Optional[TextIO] = None) -> int:
    """List stored emails command."""
    stdout = stdout or sys.stdout
    store = MessageStore(config.storage.get_storage_path(), config.storage.file_extension)

    print("=== Stored Emails ===", file=stdout)
    for path in store.list_messages():
        modified = datetime.fromtimestamp(path.stat().st_mtime)
        print(f"- {path.name} ({modified:%Y-%m-%d %H:%M:%S})", file=stdout)

    return 0


def cmd_view(args, config: AppConfig, stdout: Optional[TextIO] = None) -> int:
    """View a stored email command."""
    stdout = stdout or sys.stdout
    store = MessageStore(config.storage.get_storage_path(), config.storage.file_extension)
    content = store.read_message(args.filename)

    print(f"=== Email: {args.filename} ===", file=stdout)
    stdout.write(content)
    print("======================", file=stdout)

    return 0


def load_config(args) -> AppConfig:
    """Load configuration and apply command-line overrides."""
    config = ConfigLoader(args.config).load_app_config()

    updates = {}
    if args.storage_dir is not None:
        updates["storage"] = config.storage.model_copy(update={"storage_path": str(args.storage_dir)})
    if args.no_dispatch:
        updates["dispatch"] = config.dispatch.model_copy(update={"enable_dispatch": False})
    if args.verbose:
        updates["log_level"] = "DEBUG"

    return config.model_copy(update=updates) if updates else config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mailsim", description="mailsim - local email sender simulator")
    parser.add_argument("--config", type=Path, help="Custom config file path")
    parser.add_argument("--storage-dir", type=Path, help="Directory for stored emails")
    parser.add_argument("--no-dispatch", action="store_true", help="Only save emails, do not run the mail-transfer command")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Send command (default)
    send_parser = subparsers.add_parser("send", help="Compose and send an email")
    send_parser.add_argument("--from", dest="sender", help="Sender address (default from config)")

    subparsers.add_parser("list", help="List stored emails")

    view_parser = subparsers.add_parser("view", help="Print a stored email")
    view_parser.add_argument("filename", help="Email file name inside the storage directory")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default command: send
    if args.command is None:
        args.command = "send"
        args.sender = None

    try:
        config = load_config(args)
    except MailSimError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)

    try:
        if args.command == "list":
            return cmd_list(args, config)
        if args.command == "view":
            return cmd_view(args, config)
        return cmd_send(args, config)
    except (MailSimError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

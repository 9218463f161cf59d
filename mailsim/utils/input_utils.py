"""Reading message fields from a text stream."""

from typing import Iterable

BODY_TERMINATOR = "."


def read_body(lines: Iterable[str]) -> str:
    """
    Collect body lines up to a line containing only a period.

    Args:
        lines: Input lines, with or without trailing newlines

    Returns:
        Body text with every line ended by a newline. The terminator is not
        included. End of input also ends the body.

    Examples:
        >>> read_body(["hello", ".", "ignored"])
        'hello\\n'
        >>> read_body(["a\\n", "b\\n"])
        'a\\nb\\n'
    """
    body = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line == BODY_TERMINATOR:
            break
        body.append(line + "\n")
    return "".join(body)

"""Utility functions"""

from .input_utils import BODY_TERMINATOR, read_body
from .logging_utils import setup_logging

__all__ = ["BODY_TERMINATOR", "read_body", "setup_logging"]

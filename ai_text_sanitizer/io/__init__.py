"""Input/output helpers for reading and writing sanitizer text."""

from .text_files import read_text, write_text

__all__ = ["read_text", "write_text"]

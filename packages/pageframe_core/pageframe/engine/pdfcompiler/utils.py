"""Utility functions for PDF generation."""

from typing import Tuple


def format_pdf_number(value: float) -> str:
    """Format number for PDF (limit decimal places).

    Args:
        value: Numeric value

    Returns:
        Formatted string
    """
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_color(color: Tuple[float, float, float]) -> str:
    return " ".join(format_pdf_number(channel) for channel in color)


def encode_text_literal(text: str) -> str:
    """Encode text as a WinAnsi PDF literal string body (without parentheses).

    Characters outside cp1252 become ``?``. Delimiters are backslash-escaped
    and every non-printable or non-ASCII byte is written as an octal escape,
    so the result is plain ASCII.
    """
    parts = []
    for byte in text.encode("cp1252", errors="replace"):
        char = chr(byte)
        if char in "\\()":
            parts.append("\\" + char)
        elif 0x20 <= byte < 0x7F:
            parts.append(char)
        else:
            parts.append(f"\\{byte:03o}")
    return "".join(parts)


def escape_js_string(text: str) -> str:
    """Escape backslashes and single quotes for a single-quoted JavaScript literal."""
    return text.replace("\\", "\\\\").replace("'", "\\'")

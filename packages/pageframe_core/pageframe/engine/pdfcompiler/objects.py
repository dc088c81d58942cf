"""PDF content stream builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..geometry import PathSegment
from .utils import encode_text_literal, format_color, format_pdf_number

Color = Tuple[float, float, float]


@dataclass
class PdfStream:
    """Represents a PDF content stream (instructions for drawing)."""

    commands: List[str] = field(default_factory=list)

    def save_state(self) -> None:
        self.commands.append("q")

    def restore_state(self) -> None:
        self.commands.append("Q")

    def set_graphics_state(self, alias: str) -> None:
        """Apply a named /ExtGState (e.g. "/GS1")."""
        self.commands.append(f"{alias} gs")

    def set_fill_color(self, color: Color) -> None:
        self.commands.append(f"{format_color(color)} rg")

    def set_stroke_color(self, color: Color) -> None:
        self.commands.append(f"{format_color(color)} RG")

    def add_rect(self, x: float, y: float, width: float, height: float, fill_color: Optional[Color] = None) -> None:
        """Add rectangle drawing command.

        Args:
            x: X position
            y: Y position
            width: Rectangle width
            height: Rectangle height
            fill_color: Optional RGB tuple (0-1 scale); stroked when omitted
        """
        self.save_state()
        if fill_color:
            self.set_fill_color(fill_color)
        self.commands.append(
            f"{format_pdf_number(x)} {format_pdf_number(y)} "
            f"{format_pdf_number(width)} {format_pdf_number(height)} re"
        )
        self.commands.append("f" if fill_color else "S")
        self.restore_state()

    def add_path(self, segments: Iterable[PathSegment], fill_color: Color) -> None:
        """Fill a path made of move/line/curve segments."""
        self.save_state()
        self.set_fill_color(fill_color)
        for segment in segments:
            operands = " ".join(format_pdf_number(value) for value in segment.points)
            self.commands.append(f"{operands} {segment.op}" if operands else segment.op)
        self.commands.append("f")
        self.restore_state()

    def add_line(self, x1: float, y1: float, x2: float, y2: float, width: float = 1.0) -> None:
        """Add line drawing command.

        Args:
            x1: Start X
            y1: Start Y
            x2: End X
            y2: End Y
            width: Line width
        """
        self.commands.append(f"{format_pdf_number(width)} w")
        self.commands.append(f"{format_pdf_number(x1)} {format_pdf_number(y1)} m")
        self.commands.append(f"{format_pdf_number(x2)} {format_pdf_number(y2)} l")
        self.commands.append("S")

    def add_text(self, font_alias: str, font_size: float, x: float, y: float, text: str,
                 color: Optional[Color] = None) -> None:
        """Add text drawing command.

        Args:
            font_alias: Font alias (e.g., "/F1")
            font_size: Font size in points
            x: X position of the baseline start
            y: Y position of the baseline
            text: Text content (WinAnsi encoded)
            color: Optional RGB tuple (0-1 scale) for text color
        """
        self.save_state()
        if color:
            self.set_fill_color(color)
        self.commands.append("BT")
        self.commands.append(f"{font_alias} {format_pdf_number(font_size)} Tf")
        self.commands.append(f"{format_pdf_number(x)} {format_pdf_number(y)} Td")
        self.commands.append(f"({encode_text_literal(text)}) Tj")
        self.commands.append("ET")
        self.restore_state()

    def add_xobject(self, alias: str, x: float, y: float, scale_x: float = 1.0, scale_y: float = 1.0) -> None:
        """Draw a form XObject whose user space origin lands at (x, y) after scaling."""
        self.save_state()
        self.commands.append(
            f"{format_pdf_number(scale_x)} 0 0 {format_pdf_number(scale_y)} "
            f"{format_pdf_number(x)} {format_pdf_number(y)} cm"
        )
        self.commands.append(f"{alias} Do")
        self.restore_state()

    def get_content(self) -> str:
        """Get stream content as string."""
        return "\n".join(self.commands)

    def get_bytes(self) -> bytes:
        return (self.get_content() + "\n").encode("ascii")

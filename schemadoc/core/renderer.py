"""Row renderers for the two report formats."""

from abc import ABC, abstractmethod

from schemadoc.exceptions import InvalidFormatError

COLUMN_HEADERS = ["Column", "Type", "Length", "Precision", "Nullable", "Default", "Extra"]


class RowRenderer(ABC):
    """Formats report rows for one output format."""

    @abstractmethod
    def header(self) -> list[str]:
        """Lines introducing the column table (header row and separator)."""

    @abstractmethod
    def row(self, cells: list[str]) -> str:
        """Format one row of cells."""


class MarkdownRowRenderer(RowRenderer):
    """Pipe-delimited Markdown table rows."""

    def header(self) -> list[str]:
        return [
            self.row(COLUMN_HEADERS),
            "|--------|------|--------|-----------|----------|---------|-------|",
        ]

    def row(self, cells: list[str]) -> str:
        return "| " + " | ".join(str(cell) for cell in cells) + " |"


class ConsoleRowRenderer(RowRenderer):
    """
    Fixed-width, left-justified console rows.

    Rows with fewer cells than the column layout are padded with empty
    cells so every section stays aligned.
    """

    WIDTHS = (20, 20, 15, 10, 10, 10, 20)

    def header(self) -> list[str]:
        return [
            self.row(COLUMN_HEADERS),
            self.row(["-" * len(label) for label in COLUMN_HEADERS]),
        ]

    def row(self, cells: list[str]) -> str:
        padded = list(cells) + [""] * (len(self.WIDTHS) - len(cells))
        return " ".join(
            str(cell).ljust(width) for cell, width in zip(padded, self.WIDTHS)
        )


RENDERERS: dict[str, type[RowRenderer]] = {
    "md": MarkdownRowRenderer,
    "console": ConsoleRowRenderer,
}


def get_renderer(format: str) -> RowRenderer:
    """
    Get the renderer for an output format.

    Raises:
        InvalidFormatError: If the format is not recognized
    """
    if format not in RENDERERS:
        raise InvalidFormatError(format)
    return RENDERERS[format]()

"""Custom exceptions with helpful error messages."""


class SchemaDocError(Exception):
    """Base exception for schemadoc errors."""

    pass


class InvalidFormatError(SchemaDocError):
    """Requested output format is not supported."""

    def __init__(self, format: str):
        self.format = format
        super().__init__(
            f"Invalid format '{format}'. "
            f'Please use "md" for Markdown or "console" for human-readable console output.'
        )


class DatabaseNotFoundError(SchemaDocError):
    """No configured connection points at the requested database."""

    def __init__(self, database: str, available: list[str] | None = None):
        self.database = database
        self.available = list(available or [])
        configured = ", ".join(self.available) if self.available else "(none)"
        super().__init__(
            f'The specified database "{database}" does not exist.\n\n'
            f"Suggestions:\n"
            f"1. Check database name spelling\n"
            f"2. Configured databases: {configured}\n"
            f"3. Add a connection for it to schemadoc.toml"
        )

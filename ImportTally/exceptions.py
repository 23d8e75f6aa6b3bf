class ImportTallyError(Exception):
    def __init__(self, message):
        super().__init__(message)


class ParseError(ImportTallyError):
    """Source text is not valid syntax for its file kind."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class SourceReadError(ImportTallyError):
    """A single source file could not be read or decoded."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")

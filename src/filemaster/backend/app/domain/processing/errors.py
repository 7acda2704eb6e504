class ProcessingError(Exception):
    """Base class for everything the processing pipeline reports to callers."""


class InputValidationError(ProcessingError):
    """The request can be fixed by the client; retrying as-is will fail again."""


class InvalidTool(InputValidationError):
    def __init__(self, tool: str | None):
        self.tool = tool
        super().__init__(
            f"Invalid tool: {tool}. Valid tools are: compress, merge, convert, enhance, preview"
        )


class CardinalityError(InputValidationError):
    pass


class TypeMismatch(InputValidationError):
    pass


class MissingParameter(InputValidationError):
    def __init__(self, parameter: str, message: str | None = None):
        self.parameter = parameter
        super().__init__(message or f"Parameter '{parameter}' is required")


class UnsupportedFormat(InputValidationError):
    def __init__(self, fmt: str):
        self.format = fmt
        super().__init__("Unsupported format. Use: jpg, jpeg, png, webp, mp3, wav")


class InvalidParameter(InputValidationError):
    def __init__(self, parameter: str, message: str | None = None):
        self.parameter = parameter
        super().__init__(message or f"Parameter '{parameter}' is malformed")


class ProcessingFailure(ProcessingError):
    """Codec or I/O failure while executing a tool. Details are logged, never returned."""

    def __init__(self, message: str = "File processing failed"):
        super().__init__(message)


class ProcessedFileNotFound(ProcessingError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__("File not found")

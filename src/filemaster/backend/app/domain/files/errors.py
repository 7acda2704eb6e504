class FailedToSaveFile(Exception):
    pass


class FileTooLarge(Exception):
    def __init__(self, filename: str, max_bytes: int):
        self.filename = filename
        self.max_bytes = max_bytes
        super().__init__(f"'{filename}' exceeds the maximum upload size of {max_bytes // (1024 * 1024)}MB")

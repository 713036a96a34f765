import click


class DupcheckError(click.ClickException):
    """Fatal driver error; click prints the message and exits with status 1."""

    exit_code = 1


class ArgumentCountError(DupcheckError):
    def __init__(self, got: int, expected: int = 3):
        self.got = got
        super().__init__(
            f"expected {expected} arguments, got {got}. "
            "Usage: dupcheck <original_file> <plagiarized_file> <output_file>"
        )


class FileOpenError(DupcheckError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        msg = f"cannot open input file: {path}"
        super().__init__(f"{msg} ({reason})" if reason else msg)


class FileCreateError(DupcheckError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        msg = f"cannot create output file: {path}"
        super().__init__(f"{msg} ({reason})" if reason else msg)

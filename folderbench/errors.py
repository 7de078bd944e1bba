class BenchmarkError(Exception):
    pass


class ParseError(BenchmarkError, ValueError):
    pass


class InvalidParameter(BenchmarkError, ValueError):

    def __init__(self, name, value, minimum, maximum=None):
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if maximum is None:
            allowed = f">= {minimum}"
        else:
            allowed = f"{minimum} - {maximum}"
        super().__init__(f"Invalid {name} {value} ({allowed})")


class FolderCreateError(BenchmarkError):
    pass


class FileCreateError(BenchmarkError):
    pass


class WriteError(BenchmarkError):
    pass

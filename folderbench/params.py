from dataclasses import dataclass

from folderbench import constants as c
from folderbench.errors import InvalidParameter, ParseError
from folderbench.sizes import parse_size, parse_size_int


@dataclass(frozen=True)
class RunParameters:
    iterations: int
    file_size: int
    write_size: int
    file_count: int


def _parse_count(name: str, value) -> int:
    if isinstance(value, bool):
        raise ParseError(f"Invalid {name} {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise ParseError(f"Invalid {name} {value!r}")


def _check_range(name: str, value: int, minimum: int, maximum: int) -> int:
    if value < minimum or value > maximum:
        raise InvalidParameter(name, value, minimum, maximum)
    return value


def validate(iterations=c.DEFAULT_ITERATIONS,
             filesize=c.DEFAULT_FILESIZE,
             writesize=c.DEFAULT_WRITESIZE,
             filecount=c.DEFAULT_FILECOUNT) -> RunParameters:
    """Parse and bounds-check the raw run parameters.

    Checks run in a fixed order (file size, write size, file count,
    iterations) and the first failure is raised. Nothing here touches a
    file store.
    """
    try:
        file_size = parse_size(filesize)
    except ParseError as e:
        raise ParseError(f"Invalid file size {filesize!r}") from e
    _check_range("file size", file_size, c.MIN_FILESIZE, c.MAX_FILESIZE)

    try:
        write_size = parse_size_int(writesize)
    except ParseError as e:
        raise ParseError(f"Invalid write size {writesize!r}") from e
    _check_range("write size", write_size, c.MIN_WRITESIZE, c.MAX_WRITESIZE)

    file_count = _parse_count("filecount", filecount)
    _check_range("filecount", file_count, c.MIN_FILECOUNT, c.MAX_FILECOUNT)

    iterations = _parse_count("iterations", iterations)
    if iterations < 1:
        raise InvalidParameter("iterations", iterations, 1)

    return RunParameters(iterations=iterations, file_size=file_size,
                         write_size=write_size, file_count=file_count)

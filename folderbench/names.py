from random import Random

from folderbench.constants import TEST_FILE_EXT, TEST_FILE_NAME

PREFIXES = tuple(
    [chr(ch) * 3 for ch in range(ord("a"), ord("z") + 1)]
    + [chr(ch) * 3 for ch in range(ord("A"), ord("Z") + 1)]
)


def prefix_for(index: int) -> str:
    return PREFIXES[index % len(PREFIXES)]


def pattern_byte(index: int) -> int:
    """Fill byte for the file at index: the first character of its prefix."""
    return ord(prefix_for(index)[0])


def next_name(folder: str, index: int, rng: Random) -> str:
    """Build a fresh file name for index inside folder.

    The 64-bit random suffix makes names unique in practice; collisions
    are not retried.
    """
    suffix = format(rng.getrandbits(64), "x")
    name = f"{prefix_for(index)}{TEST_FILE_NAME}{index}_{suffix}{TEST_FILE_EXT}"
    return f"{folder.rstrip('/')}/{name}" if folder else name

from folderbench.errors import WriteError


def fill_buffer(buffer: bytearray, value: int) -> None:
    buffer[:] = bytes((value,)) * len(buffer)


def write_to_size(stream, buffer, target_size: int) -> int:
    """Write the whole buffer repeatedly until target_size is reached.

    The last write is never truncated, so the result is a multiple of the
    buffer length and may exceed target_size by less than one buffer.
    """
    if not buffer:
        raise ValueError("write buffer is empty")
    written = 0
    try:
        while written < target_size:
            stream.write(buffer)
            written += len(buffer)
        stream.flush()
    except OSError as e:
        raise WriteError(f"Write failed after {written} bytes: {e}") from e
    return written

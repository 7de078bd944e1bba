import pytest

from folderbench.store.base import RemoteFileStore, WritableStream


class SpyStream(WritableStream):

    def __init__(self, store, path):
        self.store = store
        self.path = path
        self.closed = False

    def write(self, data):
        if self.store.fail_write:
            raise OSError("write failed")
        self.store.calls.append(("write", self.path, len(data)))
        self.store.files[self.path] += bytes(data)

    def flush(self):
        self.store.calls.append(("flush", self.path))

    def close(self):
        self.closed = True
        self.store.calls.append(("close", self.path))
        if self.store.fail_close:
            raise OSError("close failed")


class SpyStore(RemoteFileStore):
    """In-memory store that records every call."""

    def __init__(self):
        self.calls = []
        self.folders = set()
        self.files = {}
        self.streams = []
        self.fail_folder = False
        self.fail_write = False
        self.fail_open = False
        self.fail_close = False
        self.hide_files = False

    def create_folder(self, path):
        self.calls.append(("create_folder", path))
        if self.fail_folder:
            raise PermissionError("access denied")
        if path in self.folders:
            raise FileExistsError(path)
        self.folders.add(path)

    def create_file(self, path):
        self.calls.append(("create_file", path))
        self.files[path] = b""

    def exists(self, path):
        self.calls.append(("exists", path))
        if path in self.folders:
            return True
        return path in self.files and not self.hide_files

    def open_for_write(self, path):
        self.calls.append(("open", path))
        if self.fail_open:
            raise PermissionError("denied")
        stream = SpyStream(self, path)
        self.streams.append(stream)
        return stream

    def delete(self, path):
        self.calls.append(("delete", path))
        if path in self.files:
            del self.files[path]
        elif path in self.folders:
            self.folders.remove(path)
        else:
            raise FileNotFoundError(path)

    def count(self, op):
        return sum(1 for call in self.calls if call[0] == op)


@pytest.fixture
def spy_store():
    return SpyStore()

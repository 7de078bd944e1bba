from abc import ABC, abstractmethod


class StoreError(OSError):

    def __init__(self, *args, response=None):
        super().__init__(*args)
        self.response = response


class WritableStream(ABC):
    """Write side of a store file; closing it releases the handle."""

    @abstractmethod
    def write(self, data) -> None:
        pass

    def flush(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class RemoteFileStore(ABC):
    """Folder and file operations the benchmark needs from a file server.

    Paths are POSIX-style and relative to the store root. Failures are
    raised as OSError subclasses.
    """

    @abstractmethod
    def create_folder(self, path: str) -> None:
        pass

    @abstractmethod
    def create_file(self, path: str) -> None:
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def open_for_write(self, path: str) -> WritableStream:
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        pass

    def close(self) -> None:
        pass

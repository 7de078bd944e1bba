import logging
import os
from pathlib import Path

from folderbench.store.base import RemoteFileStore, WritableStream

logger = logging.getLogger(__name__)


class LocalFileStream(WritableStream):

    def __init__(self, path: Path):
        self._fh = open(path, "wb")

    def write(self, data) -> None:
        self._fh.write(data)

    def flush(self) -> None:
        self._fh.flush()

    def close(self) -> None:
        self._fh.close()


class LocalFileStore(RemoteFileStore):
    """File store on a local directory, typically a mounted network share."""

    def __init__(self, root):
        self.root = Path(os.path.expanduser(str(root)))
        if not self.root.is_dir():
            raise NotADirectoryError(f"Store root is not a directory: {self.root}")
        logger.debug("local store root=%s", self.root)

    def _path(self, path: str) -> Path:
        return self.root / path.strip("/")

    def create_folder(self, path: str) -> None:
        self._path(path).mkdir()

    def create_file(self, path: str) -> None:
        self._path(path).touch(exist_ok=False)

    def exists(self, path: str) -> bool:
        return self._path(path).exists()

    def open_for_write(self, path: str) -> LocalFileStream:
        return LocalFileStream(self._path(path))

    def delete(self, path: str) -> None:
        p = self._path(path)
        if p.is_dir():
            p.rmdir()
        else:
            p.unlink()

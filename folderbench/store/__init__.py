from folderbench.store.base import RemoteFileStore, StoreError, WritableStream
from folderbench.store.http import HttpFileStore
from folderbench.store.local import LocalFileStore


def open_store(target: str, **kwargs) -> RemoteFileStore:
    """Pick a store for target: http(s) URLs go over WebDAV, the rest is a local path."""
    if target.startswith(("http://", "https://")):
        return HttpFileStore(target, **kwargs)
    return LocalFileStore(target)


__all__ = ["RemoteFileStore", "StoreError", "WritableStream",
           "HttpFileStore", "LocalFileStore", "open_store"]

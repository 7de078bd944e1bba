import logging
import tempfile
import time
from typing import BinaryIO, Optional, Tuple, Union
from urllib.parse import quote

import requests

from folderbench.constants import HTTP_SPOOL_MAX, HTTP_TIMEOUT_S
from folderbench.store.base import RemoteFileStore, StoreError, WritableStream
from folderbench.utils import log_event, ms_since

logger = logging.getLogger(__name__)


def _log(operation: str, key: str, phase: str, status: str, msg: str = ""):
    log_event(logger, operation, key, phase, status, msg)


class HttpFileStream(WritableStream):
    """Spools written data and uploads it with one PUT on close.

    Up to spool_max bytes stay in memory; larger files roll over to a
    temporary file, so memory use is bounded whatever the target size.
    """

    def __init__(self, store: "HttpFileStore", path: str, spool_max: int = HTTP_SPOOL_MAX):
        self.store = store
        self.path = path
        self.spool_max = spool_max
        self._spool = tempfile.SpooledTemporaryFile(max_size=spool_max)

    @property
    def closed(self) -> bool:
        return self._spool is None

    def write(self, data) -> None:
        if self._spool is None:
            raise ValueError(f"write to closed stream: {self.path}")
        self._spool.write(data)

    def close(self) -> None:
        if self._spool is None:
            return
        spool, self._spool = self._spool, None
        try:
            size = spool.tell()
            spool.seek(0)
            # small bodies go as bytes; requests would roll the spool to disk to size it
            body = spool.read() if size <= self.spool_max else spool
            self.store._upload(self.path, body)
        finally:
            spool.close()

    def discard(self) -> None:
        if self._spool is not None:
            self._spool.close()
            self._spool = None

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.discard()
        else:
            self.close()
        return False


class HttpFileStore(RemoteFileStore):
    """File store on a WebDAV server (MKCOL, PUT, HEAD, DELETE)."""

    def __init__(self, base_url: str, auth: Optional[Tuple[str, str]] = None,
                 session: requests.Session = None, timeout: float = HTTP_TIMEOUT_S,
                 spool_max: int = HTTP_SPOOL_MAX):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        if auth is not None:
            self.session.auth = auth
        self.timeout = timeout
        self.spool_max = spool_max
        _log("INIT", "-", "END", "SUCCESS", f"base_url={self.base_url};timeout={timeout}")

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{quote(path.strip('/'), safe='/')}"

    def _request(self, method: str, path: str, expected, **kwargs) -> requests.Response:
        url = self._url(path)
        t0 = time.perf_counter_ns()
        _log(method, path, "START", "RUN", f"url={url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            _log(method, path, "END", "ERROR", f"msg={e};time_ms={ms_since(t0):.3f}")
            raise
        status = response.status_code
        if status in expected:
            _log(method, path, "END", "SUCCESS", f"status={status};time_ms={ms_since(t0):.3f}")
        else:
            _log(method, path, "END", "FAIL", f"status={status};time_ms={ms_since(t0):.3f}")
        return response

    @staticmethod
    def _raise_for(response: requests.Response, method: str, path: str):
        raise StoreError(
            f"{method} {path}: server returned HTTP error code {response.status_code}. "
            f"{response.text[:256]}",
            response=response,
        )

    def create_folder(self, path: str) -> None:
        response = self._request("MKCOL", path, (201,))
        if response.status_code == 405:
            raise FileExistsError(f"Folder already exists: {path}")
        if response.status_code != 201:
            self._raise_for(response, "MKCOL", path)

    def create_file(self, path: str) -> None:
        response = self._request("PUT", path, (200, 201, 204), data=b"")
        if response.status_code not in (200, 201, 204):
            self._raise_for(response, "PUT", path)

    def exists(self, path: str) -> bool:
        response = self._request("HEAD", path, (200, 204, 404))
        if response.status_code == 404:
            return False
        if not 200 <= response.status_code < 300:
            self._raise_for(response, "HEAD", path)
        return True

    def open_for_write(self, path: str) -> HttpFileStream:
        return HttpFileStream(self, path, spool_max=self.spool_max)

    def _upload(self, path: str, body: Union[bytes, BinaryIO]) -> None:
        response = self._request("PUT", path, (200, 201, 204), data=body,
                                 headers={"Content-Type": "application/octet-stream"})
        if response.status_code not in (200, 201, 204):
            self._raise_for(response, "PUT", path)

    def delete(self, path: str) -> None:
        response = self._request("DELETE", path, (200, 204))
        if response.status_code == 404:
            raise FileNotFoundError(f"No such file or folder: {path}")
        if response.status_code not in (200, 204):
            self._raise_for(response, "DELETE", path)

    def close(self) -> None:
        self.session.close()

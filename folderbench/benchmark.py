import enum
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from folderbench.constants import DEFAULT_TEST_NAME
from folderbench.errors import FileCreateError, FolderCreateError, WriteError
from folderbench.names import next_name, pattern_byte
from folderbench.params import RunParameters
from folderbench.report import Reporter
from folderbench.sizes import as_scaled_string
from folderbench.store.base import RemoteFileStore
from folderbench.utils import log_event, ms_since
from folderbench.writer import fill_buffer, write_to_size

logger = logging.getLogger(__name__)


def _log(operation: str, key: str, phase: str, status: str, msg: str = ""):
    log_event(logger, operation, key, phase, status, msg)


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class State(enum.Enum):
    IDLE = "idle"
    FOLDER_CREATED = "folder_created"
    CREATING_FILE = "creating_file"
    FILE_WRITTEN = "file_written"
    ITERATION_COMPLETE = "iteration_complete"


@dataclass
class TimingResult:
    start_ms: int
    end_ms: int

    @property
    def elapsed_ms(self) -> int:
        return self.end_ms - self.start_ms


@dataclass
class IterationResult:
    iteration: int
    folder: str
    timing: TimingResult
    report: str
    files: List[str] = field(default_factory=list)


# ---------- Helpers ----------
def format_duration(elapsed_ms: int) -> str:
    """Render milliseconds as HH:MM:SS.mmm; hours keep counting past 99."""
    secs, ms = divmod(elapsed_ms, 1000)
    mins, secs = divmod(secs, 60)
    hrs, mins = divmod(mins, 60)
    return f"{hrs:02d}:{mins:02d}:{secs:02d}.{ms:03d}"


def format_report(file_count: int, file_size: int, elapsed_ms: int) -> str:
    return (f"Created {file_count} files (size {as_scaled_string(file_size)}) "
            f"in {format_duration(elapsed_ms)} ({elapsed_ms}ms)")


def folder_name(test_name: str, iteration: int) -> str:
    return f"{test_name}_{iteration}"


# ---------- Core ----------
class FilesPerFolderBenchmark(object):
    """Create file_count files in one folder per iteration and time it.

    Runs strictly on the calling thread. The first store failure aborts the
    run; files and folders created so far stay in the delete registry so
    cleanup() can remove them.
    """

    def __init__(self,
                 store: RemoteFileStore,
                 params: RunParameters,
                 rng: Optional[random.Random] = None,
                 reporter: Optional[Reporter] = None,
                 test_name: str = DEFAULT_TEST_NAME,
                 clock: Callable[[], int] = _wall_clock_ms):
        self.store = store
        self.params = params
        self.rng = rng if rng is not None else random.Random()
        self.reporter = reporter if reporter is not None else Reporter()
        self.test_name = test_name
        self.clock = clock
        self.state = State.IDLE
        self.created_files: List[str] = []
        self.created_folders: List[str] = []
        self._buffer = bytearray(params.write_size)

    def _create_folder(self, folder: str) -> None:
        t0 = time.perf_counter_ns()
        _log("CREATE_FOLDER", folder, "START", "RUN")
        try:
            self.store.create_folder(folder)
        except FileExistsError:
            logger.warning("Folder %s already exists, reusing it", folder)
        except OSError as e:
            _log("CREATE_FOLDER", folder, "END", "ERROR", f"msg={e};time_ms={ms_since(t0):.3f}")
            raise FolderCreateError(f"Failed to create folder {folder}: {e}") from e
        else:
            self.created_folders.append(folder)
        try:
            exists = self.store.exists(folder)
        except OSError as e:
            raise FolderCreateError(f"Failed to check folder {folder}: {e}") from e
        if not exists:
            raise FolderCreateError(f"Folder {folder} does not exist after create")
        _log("CREATE_FOLDER", folder, "END", "SUCCESS", f"time_ms={ms_since(t0):.3f}")

    def _create_file(self, name: str) -> None:
        try:
            self.store.create_file(name)
            exists = self.store.exists(name)
        except OSError as e:
            raise FileCreateError(f"Failed to create file {name}: {e}") from e
        if not exists:
            raise FileCreateError(f"File {name} does not exist after create")

    def _write_file(self, name: str) -> int:
        # open and close can fail too; the HTTP store uploads on close
        try:
            with self.store.open_for_write(name) as stream:
                return write_to_size(stream, self._buffer, self.params.file_size)
        except OSError as e:
            raise WriteError(f"Failed to write file {name}: {e}") from e

    def run_iteration(self, iteration: int) -> IterationResult:
        params = self.params
        self.state = State.IDLE
        folder = folder_name(self.test_name, iteration)
        self._create_folder(folder)
        self.state = State.FOLDER_CREATED

        files: List[str] = []
        start_ms = self.clock()
        for index in range(1, params.file_count + 1):
            self.state = State.CREATING_FILE
            name = next_name(folder, index, self.rng)
            self.created_files.append(name)
            files.append(name)
            fill_buffer(self._buffer, pattern_byte(index))
            self._create_file(name)
            written = self._write_file(name)
            _log("WRITE_FILE", name, "END", "SUCCESS", f"bytes={written}")
            self.state = State.FILE_WRITTEN
        end_ms = self.clock()

        timing = TimingResult(start_ms=start_ms, end_ms=end_ms)
        msg = format_report(params.file_count, params.file_size, timing.elapsed_ms)
        logger.info(msg)
        self.reporter.log(msg)
        self.state = State.ITERATION_COMPLETE
        return IterationResult(iteration=iteration, folder=folder, timing=timing,
                               report=msg, files=files)

    def run(self) -> List[IterationResult]:
        p = self.params
        logger.info(f"=== {p.iterations} iteration(s): {p.file_count} files of "
                    f"{p.file_size} B, write size {p.write_size} B ===")
        return [self.run_iteration(i) for i in range(p.iterations)]

    def cleanup(self) -> int:
        """Delete registered files, then folders. Returns the number removed."""
        removed = 0
        for path in self.created_files + list(reversed(self.created_folders)):
            try:
                self.store.delete(path)
                removed += 1
            except OSError as e:
                logger.warning("Failed to delete %s: %s", path, e)
        _log("CLEANUP", self.test_name, "END", "SUCCESS", f"removed={removed}")
        self.created_files.clear()
        self.created_folders.clear()
        return removed

"""Files-per-folder throughput benchmark for remote file servers."""

__version__ = "0.1.0"

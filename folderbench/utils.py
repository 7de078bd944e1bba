import logging
import time


def log_event(logger: logging.Logger, operation: str, key: str, phase: str,
              status: str, msg: str = "") -> None:
    # Format: SERVICE, OPERATION, OBJECTKEY, START/END, Status, MSG
    logger.debug(f"CLIENT,{operation},{key},{phase},{status},{msg}")


def ms_since(ns_start: int) -> float:
    return (time.perf_counter_ns() - ns_start) / 1e6

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from threading import Lock

from PIL import Image

from magicgram.utilities.env import Configuration
from magicgram.utilities.logging import get_logger

logger = get_logger(__name__)

EXPORT_THREAD_PREFIX = "magicgram-png"
PNG_FORMAT = "PNG"


@dataclass
class _ExecutorState:
    lock: Lock
    executor: ThreadPoolExecutor | None = None


_SHARED_EXECUTOR = _ExecutorState(lock=Lock())


def _shared_executor() -> ThreadPoolExecutor:
    if _SHARED_EXECUTOR.executor is None:
        with _SHARED_EXECUTOR.lock:
            if _SHARED_EXECUTOR.executor is None:
                _SHARED_EXECUTOR.executor = ThreadPoolExecutor(
                    max_workers=Configuration.png_export_max_workers(),
                    thread_name_prefix=EXPORT_THREAD_PREFIX,
                )
    return _SHARED_EXECUTOR.executor


def _write_png(image: Image.Image, destination: Path) -> Path:
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("wb") as handle:
        image.save(handle, format=PNG_FORMAT)
    return destination


def _report(future: Future[Path]) -> None:
    error = future.exception()
    if error is not None:
        logger.error("Failed to save text PNG", exc_info=error)
        return
    logger.info("Saved text PNG to %s", future.result())


class PngExporter:
    """Write PNG snapshots on a background thread.

    ``export`` returns immediately. The returned future is the only way to
    observe completion; failures are logged and never re-raised to the caller
    of ``export``.
    """

    def __init__(self, executor: ThreadPoolExecutor | None = None) -> None:
        self._executor = executor

    def export(
        self, image: Image.Image, destination: str | PathLike[str]
    ) -> Future[Path]:
        executor = self._executor or _shared_executor()
        future = executor.submit(_write_png, image, Path(destination))
        future.add_done_callback(_report)
        return future

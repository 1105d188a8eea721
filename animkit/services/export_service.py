"""Export coordinator: active backend, generated text and clipboard copy."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Set

from animkit.animation.schema import DEFAULT_ANIMATION_CONFIG, AnimationConfig
from animkit.renderers.router import ExportResult, UnknownBackendError, normalize_backend, render_export
from animkit.services.clipboard import Clipboard, default_clipboard
from animkit.utils.config import settings

logger = logging.getLogger(__name__)

COPY_FAILED_MESSAGE = "Failed to copy code to clipboard"


class ExportCoordinator:
    """Keeps `generated_text` equal to the active backend's output for the current config.

    Copying is fire-and-forget: `copy()` schedules a task on the running loop.
    Only the most recent copy may touch `copy_success`, and no copy result
    ever changes the config or the generated text.
    """

    def __init__(
        self,
        config: AnimationConfig = DEFAULT_ANIMATION_CONFIG,
        backend: Optional[str] = None,
        clipboard: Optional[Clipboard] = None,
        copy_feedback_seconds: Optional[float] = None,
    ):
        self._config = config
        self._backend = normalize_backend(backend or settings.default_backend)
        self._clipboard = clipboard if clipboard is not None else default_clipboard()
        self._feedback_seconds = (
            settings.copy_feedback_seconds if copy_feedback_seconds is None else copy_feedback_seconds
        )
        self._result: ExportResult = render_export(self._config, self._backend)
        self._notice: Optional[str] = None
        self.copy_success = False
        self._copy_seq = 0
        self._reset_handle: Optional[asyncio.TimerHandle] = None
        self._tasks: Set["asyncio.Task[bool]"] = set()

    @property
    def config(self) -> AnimationConfig:
        return self._config

    @property
    def active_backend(self) -> str:
        return self._backend

    @property
    def result(self) -> ExportResult:
        return self._result

    @property
    def generated_text(self) -> str:
        return self._result.text

    @property
    def error(self) -> Optional[str]:
        """User-visible error: a dismissible notice first, then the generation error."""
        return self._notice or self._result.error

    def set_config(self, config: AnimationConfig) -> None:
        self._config = config
        self._regenerate()

    def set_backend(self, backend: str) -> bool:
        try:
            name = normalize_backend(backend)
        except UnknownBackendError as exc:
            logger.warning(str(exc))
            self._notice = str(exc)
            return False
        self._backend = name
        self._regenerate()
        return True

    def dismiss_error(self) -> None:
        self._notice = None

    def _regenerate(self) -> None:
        self._result = render_export(self._config, self._backend)

    def copy(self) -> "asyncio.Task[bool]":
        """Schedule a clipboard write of the current text and return the task."""
        loop = asyncio.get_running_loop()
        self._copy_seq += 1
        task = loop.create_task(self._copy(self._result, self._copy_seq))
        # The loop only keeps weak references to tasks.
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _copy(self, result: ExportResult, seq: int) -> bool:
        if not result.ok:
            # Already visible through `error` while this result is current.
            logger.warning(f"Nothing to copy: {result.error}")
            return False
        try:
            await self._clipboard.write_text(result.text)
        except Exception:
            logger.error("Failed to copy code", exc_info=True)
            if seq == self._copy_seq:
                self.copy_success = False
                self._notice = COPY_FAILED_MESSAGE
            return False

        if seq != self._copy_seq:
            logger.debug(f"Ignoring completion of superseded copy #{seq}")
            return True
        self.copy_success = True
        self._schedule_reset()
        return True

    def _schedule_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self._feedback_seconds, self._clear_copy_success)

    def _clear_copy_success(self) -> None:
        self.copy_success = False
        self._reset_handle = None

"""Clipboard collaborators used by the export coordinator."""
from __future__ import annotations

import asyncio
import logging
import shlex
import subprocess
from typing import List, Optional, Protocol, Sequence, Union

from animkit.utils.config import settings

logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """Raised when text could not be written to the clipboard."""


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None:
        ...


class InMemoryClipboard:
    """Keeps copied text in process; the default when no command is configured."""

    def __init__(self) -> None:
        self.contents: Optional[str] = None
        self.history: List[str] = []

    async def write_text(self, text: str) -> None:
        self.contents = text
        self.history.append(text)


class CommandClipboard:
    """Pipes text into a system clipboard command such as `pbcopy`."""

    def __init__(self, command: Union[str, Sequence[str]]):
        self.command = shlex.split(command) if isinstance(command, str) else list(command)
        if not self.command:
            raise ValueError("Clipboard command is empty")

    def _run(self, text: str) -> None:
        try:
            subprocess.run(self.command, input=text, text=True, capture_output=True, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(f"{self.command[0]} failed: {exc}") from exc

    async def write_text(self, text: str) -> None:
        await asyncio.to_thread(self._run, text)


def default_clipboard() -> Clipboard:
    if settings.clipboard_command:
        logger.info(f"Using clipboard command: {settings.clipboard_command}")
        return CommandClipboard(settings.clipboard_command)
    return InMemoryClipboard()

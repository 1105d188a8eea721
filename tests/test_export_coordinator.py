"""Tests for the export coordinator and clipboard collaborators."""
import asyncio
import subprocess
from unittest.mock import patch

import pytest

from animkit.animation.schema import DEFAULT_ANIMATION_CONFIG, AnimationConfig
from animkit.renderers import generate_css, generate_react
from animkit.services.clipboard import ClipboardError, CommandClipboard, InMemoryClipboard
from animkit.services.export_service import COPY_FAILED_MESSAGE, ExportCoordinator


def _config(**overrides) -> AnimationConfig:
    data = {"type": "fade", "duration": 1, "delay": 0, "easing": "ease"}
    data.update(overrides)
    return AnimationConfig(**data)


class FailingClipboard:
    async def write_text(self, text):
        raise ClipboardError("denied")


class SlowClipboard:
    """Completes writes in reverse order of arrival."""

    def __init__(self):
        self.release = {}
        self.written = []

    async def write_text(self, text):
        event = asyncio.Event()
        self.release[text] = event
        await event.wait()
        self.written.append(text)


@pytest.fixture
def clipboard():
    return InMemoryClipboard()


class TestGeneration:
    def test_defaults(self, clipboard):
        coordinator = ExportCoordinator(clipboard=clipboard)
        assert coordinator.config == DEFAULT_ANIMATION_CONFIG
        assert coordinator.active_backend == "react"
        assert coordinator.generated_text == generate_react(DEFAULT_ANIMATION_CONFIG)
        assert coordinator.error is None

    def test_switching_backend_regenerates_without_touching_config(self, clipboard):
        config = _config(type="rotate", degrees=180)
        coordinator = ExportCoordinator(config, backend="react", clipboard=clipboard)
        assert coordinator.set_backend("css") is True
        assert coordinator.active_backend == "css"
        assert coordinator.generated_text == generate_css(config)
        assert coordinator.config is config

    def test_config_change_regenerates(self, clipboard):
        coordinator = ExportCoordinator(_config(), backend="css", clipboard=clipboard)
        new_config = _config(type="bounce", duration=0.6, distance=40)
        coordinator.set_config(new_config)
        assert coordinator.generated_text == generate_css(new_config)

    def test_unknown_backend_keeps_previous_one(self, clipboard):
        coordinator = ExportCoordinator(_config(), backend="css", clipboard=clipboard)
        before = coordinator.generated_text
        assert coordinator.set_backend("svelte") is False
        assert coordinator.active_backend == "css"
        assert coordinator.generated_text == before
        assert coordinator.error == "Unknown export type: svelte"
        coordinator.dismiss_error()
        assert coordinator.error is None

    def test_unsupported_type_surfaces_error_instead_of_text(self, clipboard):
        coordinator = ExportCoordinator(_config(), clipboard=clipboard)
        broken = AnimationConfig.model_construct(type="spin", duration=1, delay=0, easing="ease")
        coordinator.set_config(broken)
        assert coordinator.generated_text == ""
        assert coordinator.error == "Unsupported animation type: spin"
        coordinator.set_config(_config())
        assert coordinator.error is None
        assert "fade" in coordinator.generated_text


class TestCopy:
    def test_copy_success_flag_clears_itself(self, clipboard):
        coordinator = ExportCoordinator(_config(), clipboard=clipboard, copy_feedback_seconds=0.05)

        async def scenario():
            ok = await coordinator.copy()
            flagged = coordinator.copy_success
            await asyncio.sleep(0.1)
            return ok, flagged

        ok, flagged = asyncio.run(scenario())
        assert ok is True
        assert flagged is True
        assert coordinator.copy_success is False
        assert clipboard.contents == coordinator.generated_text

    def test_copy_failure_is_reported_not_raised(self):
        coordinator = ExportCoordinator(_config(), clipboard=FailingClipboard())
        text_before = coordinator.generated_text

        ok = asyncio.run(self._copy(coordinator))
        assert ok is False
        assert coordinator.copy_success is False
        assert coordinator.error == COPY_FAILED_MESSAGE
        assert coordinator.generated_text == text_before
        coordinator.dismiss_error()
        assert coordinator.error is None

    def test_copy_with_unsupported_type_reports_error(self, clipboard):
        broken = AnimationConfig.model_construct(type="spin", duration=1, delay=0, easing="ease")
        coordinator = ExportCoordinator(broken, clipboard=clipboard)
        assert asyncio.run(self._copy(coordinator)) is False
        assert clipboard.contents is None
        assert coordinator.error == "Unsupported animation type: spin"

    def test_failed_copy_of_replaced_config_leaves_no_error(self, clipboard):
        broken = AnimationConfig.model_construct(type="spin", duration=1, delay=0, easing="ease")
        coordinator = ExportCoordinator(broken, clipboard=clipboard)

        async def scenario():
            task = coordinator.copy()
            coordinator.set_config(_config())
            return await task

        assert asyncio.run(scenario()) is False
        assert coordinator.result.ok
        assert coordinator.error is None
        assert clipboard.contents is None

    def test_pending_copies_are_referenced_until_done(self, clipboard):
        coordinator = ExportCoordinator(_config(), clipboard=clipboard)

        async def scenario():
            task = coordinator.copy()
            pending = task in coordinator._tasks
            await task
            return pending

        assert asyncio.run(scenario()) is True
        assert coordinator._tasks == set()

    def test_stale_copy_does_not_revert_newer_state(self):
        slow = SlowClipboard()
        first = _config(type="fade")
        second = _config(type="scale")
        coordinator = ExportCoordinator(first, backend="css", clipboard=slow, copy_feedback_seconds=5)

        async def scenario():
            old_task = coordinator.copy()
            await asyncio.sleep(0)
            coordinator.set_config(second)
            new_task = coordinator.copy()
            await asyncio.sleep(0)
            slow.release[generate_css(second)].set()
            await new_task
            flagged_after_new = coordinator.copy_success
            slow.release[generate_css(first)].set()
            await old_task
            return flagged_after_new

        assert asyncio.run(scenario()) is True
        assert coordinator.copy_success is True
        assert coordinator.config == second
        assert coordinator.generated_text == generate_css(second)
        assert slow.written == [generate_css(second), generate_css(first)]

    @staticmethod
    async def _copy(coordinator):
        return await coordinator.copy()


class TestCommandClipboard:
    def test_pipes_text_to_command(self):
        clipboard = CommandClipboard("xclip -selection clipboard")
        with patch("animkit.services.clipboard.subprocess.run") as run:
            asyncio.run(clipboard.write_text("hello"))
        run.assert_called_once_with(
            ["xclip", "-selection", "clipboard"], input="hello", text=True, capture_output=True, check=True
        )

    def test_command_failure_becomes_clipboard_error(self):
        clipboard = CommandClipboard(["pbcopy"])
        with patch(
            "animkit.services.clipboard.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, ["pbcopy"]),
        ):
            with pytest.raises(ClipboardError):
                asyncio.run(clipboard.write_text("hello"))

    def test_empty_command_rejected(self):
        with pytest.raises(ValueError):
            CommandClipboard("")

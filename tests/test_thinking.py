"""Unit tests for the thinking indicator."""
import asyncio

import pytest

from agichat.session.thinking import (
    BASE_LABEL,
    MAX_LABEL_LENGTH,
    ThinkingIndicator,
    next_label,
)


async def wait_for_ticks(labels: list[str], count: int) -> None:
    while len(labels) < count:
        await asyncio.sleep(0.001)


class TestNextLabel:
    """Tests for the label animation cycle."""

    def test_appends_dot(self):
        assert next_label("Thinking") == "Thinking."
        assert next_label("Thinking.") == "Thinking.."

    def test_wraps_after_max_length(self):
        """Labels grow to 11 characters, then wrap to the base label."""
        label = BASE_LABEL
        seen = []
        for _ in range(5):
            label = next_label(label)
            seen.append(label)

        assert seen == [
            "Thinking.",
            "Thinking..",
            "Thinking...",
            "Thinking",
            "Thinking.",
        ]
        assert max(len(s) for s in seen) == MAX_LABEL_LENGTH + 1


class TestThinkingIndicator:
    """Tests for the cancellable animation task."""

    @pytest.mark.asyncio
    async def test_ticks_while_active(self):
        labels: list[str] = []
        indicator = ThinkingIndicator(on_tick=labels.append, interval=0.001)

        async with indicator:
            assert indicator.running is True
            await asyncio.wait_for(wait_for_ticks(labels, 3), timeout=5)

        assert indicator.running is False
        assert indicator.label == BASE_LABEL
        assert labels[0] == "Thinking."
        assert all(label.startswith(BASE_LABEL) for label in labels)

    @pytest.mark.asyncio
    async def test_no_ticks_after_exit(self):
        labels: list[str] = []
        indicator = ThinkingIndicator(on_tick=labels.append, interval=0.001)

        async with indicator:
            await asyncio.sleep(0.01)
        count = len(labels)
        await asyncio.sleep(0.02)

        assert len(labels) == count

    @pytest.mark.asyncio
    async def test_cancelled_when_body_raises(self):
        indicator = ThinkingIndicator(interval=0.001)

        with pytest.raises(ValueError):
            async with indicator:
                raise ValueError("boom")

        assert indicator.running is False

    @pytest.mark.asyncio
    async def test_close_cancels_task(self):
        indicator = ThinkingIndicator(interval=0.001)
        indicator.start()
        assert indicator.running is True

        indicator.close()
        await asyncio.sleep(0)

        assert indicator.running is False
        assert indicator.label == BASE_LABEL

    @pytest.mark.asyncio
    async def test_stop_without_start(self):
        indicator = ThinkingIndicator()
        await indicator.stop()
        assert indicator.running is False

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_stop_animation(self):
        labels: list[str] = []

        def broken(label: str) -> None:
            raise RuntimeError("listener bug")

        indicator = ThinkingIndicator(on_tick=broken, interval=0.001)
        indicator.add_listener(labels.append)

        async with indicator:
            await asyncio.wait_for(wait_for_ticks(labels, 2), timeout=5)

        assert len(labels) >= 2
        assert indicator.running is False

    @pytest.mark.asyncio
    async def test_remove_listener(self):
        labels: list[str] = []
        indicator = ThinkingIndicator(on_tick=labels.append, interval=0.001)
        indicator.remove_listener(labels.append)

        async with indicator:
            await asyncio.sleep(0.01)

        assert labels == []

    def test_start_requires_running_loop(self):
        indicator = ThinkingIndicator()
        with pytest.raises(RuntimeError):
            indicator.start()

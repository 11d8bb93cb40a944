"""Sorting algorithms that report each step through an event queue."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence

from sortviz.model import SortAlgorithm, SortEvent, SortMessage

DEFAULT_DELAY = 0.3

Sorter = Callable[
    [Sequence[int], "asyncio.Queue[SortEvent]", "asyncio.Queue[SortMessage]", float],
    Awaitable["list[int] | None"],
]


async def _wait_for_resume(control: asyncio.Queue[SortMessage]) -> bool:
    """Block until CONTINUE or STOP arrives; True means stop."""
    while True:
        message = await control.get()
        if message is SortMessage.CONTINUE:
            return False
        if message is SortMessage.STOP:
            return True


async def _should_stop(
    control: asyncio.Queue[SortMessage],
    events: asyncio.Queue[SortEvent],
    on_pause: SortEvent | None = None,
) -> bool:
    """Handle a pending control message, if any; True means stop."""
    try:
        message = control.get_nowait()
    except asyncio.QueueEmpty:
        return False
    if message is SortMessage.STOP:
        return True
    if message is SortMessage.PAUSE:
        if on_pause is not None:
            await events.put(on_pause)
        return await _wait_for_resume(control)
    return False


async def _step(events: asyncio.Queue[SortEvent], event: SortEvent, delay: float) -> None:
    await events.put(event)
    await events.put(SortEvent.step_increment())
    await asyncio.sleep(delay)


async def bubble_sort(
    array: Sequence[int],
    events: asyncio.Queue[SortEvent],
    control: asyncio.Queue[SortMessage],
    delay: float = DEFAULT_DELAY,
) -> list[int] | None:
    """Bubble sort a copy of array; return it sorted, or None if stopped."""
    values = list(array)
    length = len(values)
    for i in range(length):
        for j in range(length - i - 1):
            comparing = SortEvent.comparing(j, j + 1)
            if await _should_stop(control, events, comparing):
                return None
            await _step(events, comparing, delay)
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                await events.put(SortEvent.swapping(j, j + 1))
    await events.put(SortEvent.done())
    return values


async def selection_sort(
    array: Sequence[int],
    events: asyncio.Queue[SortEvent],
    control: asyncio.Queue[SortMessage],
    delay: float = DEFAULT_DELAY,
) -> list[int] | None:
    """Selection sort a copy of array; return it sorted, or None if stopped."""
    values = list(array)
    length = len(values)
    for i in range(length):
        min_idx = i
        for j in range(i + 1, length):
            comparing = SortEvent.comparing(min_idx, j)
            if await _should_stop(control, events, comparing):
                return None
            await _step(events, comparing, delay)
            if values[j] < values[min_idx]:
                min_idx = j
        if min_idx != i:
            values[i], values[min_idx] = values[min_idx], values[i]
            await events.put(SortEvent.swapping(i, min_idx))
            await asyncio.sleep(delay)
    await events.put(SortEvent.done())
    return values


async def insertion_sort(
    array: Sequence[int],
    events: asyncio.Queue[SortEvent],
    control: asyncio.Queue[SortMessage],
    delay: float = DEFAULT_DELAY,
) -> list[int] | None:
    """Insertion sort a copy of array; return it sorted, or None if stopped."""
    values = list(array)
    for i in range(1, len(values)):
        key = values[i]
        j = i
        await _step(events, SortEvent.highlighting(i), delay)

        while j > 0:
            if await _should_stop(control, events):
                return None
            await _step(events, SortEvent.comparing(j - 1, j), delay)
            if values[j - 1] <= key:
                break
            values[j] = values[j - 1]
            await events.put(SortEvent.swapping(j - 1, j))
            await asyncio.sleep(delay)
            j -= 1

        if values[j] != key:
            values[j] = key
            await events.put(SortEvent.highlighting(j))
            await asyncio.sleep(delay)
    await events.put(SortEvent.done())
    return values


_SORTERS: dict[SortAlgorithm, Sorter] = {
    SortAlgorithm.BUBBLE: bubble_sort,
    SortAlgorithm.SELECTION: selection_sort,
    SortAlgorithm.INSERTION: insertion_sort,
}


def sorter_for(algorithm: SortAlgorithm) -> Sorter:
    """The sorting coroutine function implementing algorithm."""
    return _SORTERS[algorithm]
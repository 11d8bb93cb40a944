"""The interactive sorting visualiser: key handling and the main loop."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

from sortviz.model import (
    AppState,
    SortAlgorithm,
    SortEvent,
    SortEventKind,
    SortingState,
    SortMessage,
)
from sortviz.sort import DEFAULT_DELAY, sorter_for
from sortviz.ui import draw

if TYPE_CHECKING:
    from blessed import Terminal

TICK = 0.05
EVENT_QUEUE_SIZE = 100
CONTROL_QUEUE_SIZE = 10


class App:
    """Holds the display state and drives a sorter running as a task."""

    def __init__(self, state: AppState | None = None, delay: float = DEFAULT_DELAY):
        self.state = state if state is not None else AppState()
        self.delay = delay
        self.should_quit = False
        self.events: asyncio.Queue[SortEvent] = asyncio.Queue(maxsize=EVENT_QUEUE_SIZE)
        self.control: asyncio.Queue[SortMessage] | None = None
        self.task: asyncio.Task | None = None

    def _send(self, message: SortMessage) -> bool:
        """Offer message to the running sorter; False if there is none."""
        if self.control is None:
            return False
        with contextlib.suppress(asyncio.QueueFull):
            self.control.put_nowait(message)
        return True

    def _stop_sorter(self) -> None:
        if self._send(SortMessage.STOP):
            self.control = None

    def handle_sort_event(self, event: SortEvent) -> None:
        """Apply one progress event to the display state."""
        state = self.state
        kind = event.kind
        if kind is SortEventKind.COMPARING:
            state.highlighted = (event.first, event.second)
        elif kind is SortEventKind.SWAPPING:
            i, j = event.first, event.second
            state.array[i], state.array[j] = state.array[j], state.array[i]
            state.highlighted = (i, j)
        elif kind is SortEventKind.HIGHLIGHTING:
            state.highlighted = (event.first, None)
        elif kind is SortEventKind.DONE:
            state.state = SortingState.DONE
            state.highlighted = (None, None)
            self.control = None
        elif kind is SortEventKind.STEP_INCREMENT:
            state.step_count += 1

    def drain_events(self) -> int:
        """Apply every event waiting in the queue; return how many there were."""
        handled = 0
        while True:
            try:
                event = self.events.get_nowait()
            except asyncio.QueueEmpty:
                return handled
            self.handle_sort_event(event)
            handled += 1

    def handle_key(self, key: str) -> None:
        """React to one key press."""
        if key in ("q", "\x1b") or getattr(key, "name", None) == "KEY_ESCAPE":
            self.should_quit = True
        elif key == " ":
            self._toggle()
        elif key == "r":
            self._stop_sorter()
            self.state.randomize_array()
        elif key == "a":
            if self.state.state in (SortingState.READY, SortingState.DONE):
                self._stop_sorter()
                self.state.next_algorithm()

    def _toggle(self) -> None:
        current = self.state.state
        if current is SortingState.READY:
            self.start_sorting(self.state.algorithm, list(self.state.array))
        elif current is SortingState.SORTING:
            if self._send(SortMessage.PAUSE):
                self.state.state = SortingState.PAUSED
        elif current is SortingState.PAUSED:
            if self._send(SortMessage.CONTINUE):
                self.state.state = SortingState.SORTING

    def start_sorting(self, algorithm: SortAlgorithm, array: Sequence[int]) -> asyncio.Task:
        """Launch a sorter for array as a task on the running event loop."""
        control: asyncio.Queue[SortMessage] = asyncio.Queue(maxsize=CONTROL_QUEUE_SIZE)
        self.control = control
        self.state.state = SortingState.SORTING
        sorter = sorter_for(algorithm)
        self.task = asyncio.create_task(
            sorter(list(array), self.events, control, self.delay)
        )
        return self.task

    async def run(self, term: Terminal) -> None:
        """Draw frames and handle keys until the user quits."""
        with term.fullscreen(), term.cbreak():
            while True:
                self.drain_events()
                sys.stdout.write(draw(term, self.state))
                sys.stdout.flush()
                key = await asyncio.to_thread(term.inkey, timeout=TICK)
                if key:
                    self.handle_key(key)
                if self.should_quit:
                    self._send(SortMessage.STOP)
                    break


def main(argv: Sequence[str] | None = None) -> int:
    """Start the visualiser in the current terminal."""
    from blessed import Terminal

    parser = argparse.ArgumentParser(
        prog="sortviz",
        description="Watch sorting algorithms work, step by step, in the terminal.",
    )
    parser.parse_args(argv)
    asyncio.run(App().run(Terminal()))
    return 0
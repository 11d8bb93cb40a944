"""State shared between the sorting tasks and the terminal front end."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto

ARRAY_LENGTH = 10
VALUE_POOL = 20


class SortAlgorithm(Enum):
    """The sorting algorithms that can be visualised."""

    BUBBLE = "Bubble Sort"
    SELECTION = "Selection Sort"
    INSERTION = "Insertion Sort"

    def title(self) -> str:
        """Human-readable name of the algorithm."""
        return self.value

    def next(self) -> SortAlgorithm:
        """The algorithm that follows this one, wrapping around."""
        members = list(SortAlgorithm)
        return members[(members.index(self) + 1) % len(members)]


class SortingState(Enum):
    """Lifecycle of a sorting run."""

    READY = auto()
    SORTING = auto()
    PAUSED = auto()
    DONE = auto()


class SortMessage(Enum):
    """Control messages sent to a running sorter."""

    CONTINUE = auto()
    PAUSE = auto()
    STOP = auto()


class SortEventKind(Enum):
    """Kinds of progress events a sorter reports."""

    COMPARING = auto()
    SWAPPING = auto()
    HIGHLIGHTING = auto()
    DONE = auto()
    STEP_INCREMENT = auto()


@dataclass(frozen=True)
class SortEvent:
    """A progress event, optionally referring to one or two array positions."""

    kind: SortEventKind
    first: int | None = None
    second: int | None = None

    @classmethod
    def comparing(cls, i: int, j: int) -> SortEvent:
        return cls(SortEventKind.COMPARING, i, j)

    @classmethod
    def swapping(cls, i: int, j: int) -> SortEvent:
        return cls(SortEventKind.SWAPPING, i, j)

    @classmethod
    def highlighting(cls, i: int) -> SortEvent:
        return cls(SortEventKind.HIGHLIGHTING, i)

    @classmethod
    def done(cls) -> SortEvent:
        return cls(SortEventKind.DONE)

    @classmethod
    def step_increment(cls) -> SortEvent:
        return cls(SortEventKind.STEP_INCREMENT)


@dataclass
class AppState:
    """Everything the display needs to draw one frame."""

    array: list[int] | None = None
    algorithm: SortAlgorithm = SortAlgorithm.BUBBLE
    state: SortingState = SortingState.READY
    highlighted: tuple[int | None, int | None] = (None, None)
    step_count: int = 0
    rng: random.Random = field(
        default_factory=random.Random, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.array is None:
            self.array = self.generate_random_array(self.rng)

    @staticmethod
    def generate_random_array(rng: random.Random | None = None) -> list[int]:
        """Ten distinct values drawn at random from 1 to 20."""
        source = rng if rng is not None else random
        return source.sample(range(1, VALUE_POOL + 1), ARRAY_LENGTH)

    def randomize_array(self) -> None:
        """Replace the array with fresh values and reset progress."""
        self.array = self.generate_random_array(self.rng)
        self.state = SortingState.READY
        self.step_count = 0
        self.highlighted = (None, None)

    def next_algorithm(self) -> None:
        """Switch to the next algorithm and reset progress."""
        self.algorithm = self.algorithm.next()
        self.state = SortingState.READY
        self.step_count = 0
import random

import pytest

from sortviz.model import (
    AppState,
    SortAlgorithm,
    SortEvent,
    SortEventKind,
    SortingState,
)


@pytest.mark.parametrize(
    "algorithm, title",
    [
        (SortAlgorithm.BUBBLE, "Bubble Sort"),
        (SortAlgorithm.SELECTION, "Selection Sort"),
        (SortAlgorithm.INSERTION, "Insertion Sort"),
    ],
)
def test_titles(algorithm, title):
    assert algorithm.title() == title


def test_next_cycles_through_all():
    assert SortAlgorithm.BUBBLE.next() is SortAlgorithm.SELECTION
    assert SortAlgorithm.SELECTION.next() is SortAlgorithm.INSERTION
    assert SortAlgorithm.INSERTION.next() is SortAlgorithm.BUBBLE


def test_event_constructors():
    assert SortEvent.comparing(2, 5) == SortEvent(SortEventKind.COMPARING, 2, 5)
    assert SortEvent.swapping(1, 3).kind is SortEventKind.SWAPPING
    assert SortEvent.swapping(1, 3).second == 3
    highlight = SortEvent.highlighting(4)
    assert (highlight.first, highlight.second) == (4, None)
    assert SortEvent.done().kind is SortEventKind.DONE
    assert SortEvent.step_increment().first is None


def test_generate_random_array_properties():
    values = AppState.generate_random_array(random.Random(7))
    assert len(values) == 10
    assert len(set(values)) == len(values)
    assert all(1 <= v <= 20 for v in values)


def test_generate_random_array_reproducible_with_seed():
    first = AppState.generate_random_array(random.Random(42))
    second = AppState.generate_random_array(random.Random(42))
    assert first == second


def test_default_state():
    state = AppState(rng=random.Random(1))
    assert len(state.array) == 10
    assert state.algorithm is SortAlgorithm.BUBBLE
    assert state.state is SortingState.READY
    assert state.highlighted == (None, None)
    assert state.step_count == 0


def test_explicit_array_kept():
    state = AppState(array=[3, 1, 2])
    assert state.array == [3, 1, 2]


def test_randomize_array_resets_progress():
    state = AppState(
        array=[1, 2, 3],
        state=SortingState.DONE,
        highlighted=(0, 1),
        step_count=12,
        rng=random.Random(3),
    )
    state.randomize_array()
    assert len(state.array) == 10
    assert state.state is SortingState.READY
    assert state.step_count == 0
    assert state.highlighted == (None, None)


def test_next_algorithm_resets_state_but_keeps_highlight():
    state = AppState(
        array=[1, 2],
        state=SortingState.DONE,
        highlighted=(0, None),
        step_count=5,
    )
    state.next_algorithm()
    assert state.algorithm is SortAlgorithm.SELECTION
    assert state.state is SortingState.READY
    assert state.step_count == 0
    assert state.highlighted == (0, None)
    assert state.array == [1, 2]
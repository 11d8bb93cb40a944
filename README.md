# sortviz

sortviz is a terminal program that animates sorting algorithms. It draws ten distinct numbers between 1 and 20 at random and shows each one as a vertical bar. The chosen algorithm then runs one step at a time. Bars being compared or moved turn red, and when the array is sorted every bar turns green.

It has three algorithms, chosen in this order:

- Bubble Sort
- Selection Sort
- Insertion Sort

## Installation

```
pip install .
```

## Usage

```
sortviz
```

`sortviz --help` prints a short description; the command takes no other options.

The screen has three parts:

- a title line that names the algorithm and counts the steps taken so far,
- the bars, each labelled with its value when the bars are wide enough,
- a panel listing the controls.

### Keys

| Key         | Action                                                        |
|-------------|---------------------------------------------------------------|
| Space       | Start sorting, pause a running sort, or resume a paused sort  |
| `r`         | Stop any running sort and draw a new array                    |
| `a`         | Switch to the next algorithm (only while ready or finished)   |
| `q` / Esc   | Quit                                                          |

Each step of the animation takes 300 ms.

## Using it from Python

The sorting routines are asynchronous functions in `sortviz.sort`:

- `bubble_sort`
- `selection_sort`
- `insertion_sort`

Each one takes four arguments:

- the array to sort (it is copied, not changed),
- an `asyncio.Queue` to publish `SortEvent`s on,
- an `asyncio.Queue` to receive `SortMessage`s (`PAUSE`, `CONTINUE`, `STOP`) from,
- the delay between steps, in seconds (0.3 by default).

Each returns the sorted list, or `None` if it was stopped. `sorter_for(algorithm)` returns the routine for a given `SortAlgorithm`.

`sortviz.model` holds the shared types: `SortAlgorithm`, `SortingState`, `SortMessage`, `SortEvent` and `AppState`.

The screen layout can be computed without a terminal, in `sortviz.ui`:

- `split_screen` divides the screen into its three areas as `Rect`s.
- `bar_layout` gives the position, size, colour and label area of each bar as `Bar`s.
- `title_text` and `controls_text` give the two lines of text.

`draw` renders a whole frame through a `blessed` terminal as a string.

`sortviz.app.App` ties these together: it applies sorter events to its `AppState`, reacts to keys, and runs the main loop.

## Running the tests

```
pip install .[test]
pytest
```
# onemax_search

This package runs two simple search methods on the OneMax problem. OneMax
asks for a bit string with as many ones as possible. The package also has
two small helpers for looking at the results.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

### Exhaustive search

    onemax-exhaustive BIT RUNS ITER RATE

This command walks through the bit strings of length `BIT` in counting
order. It starts from all zeros and keeps the best string seen so far.

- Every 1000 evaluations it prints `nfes: <n> | elapsed: <s>s` and then
  the current best string.
- Each run ends when the strings run out. It also ends after 30 minutes,
  and then it prints `Reached 30 minutes, terminated!!!`.
- At the end of each run it prints the best string.
- `ITER` and `RATE` are echoed on the first line but the search does not
  use them.

### Hill climbing

    onemax-hill-climb BIT RUNS ITER RATE

Each run starts from a random bit string. On each of `ITER` iterations it
flips one random bit. It keeps the neighbour when its fitness is at least
as good as the current one.

- The fitness history of run `n` is written to `output/Run_<n>.txt`.
  Each line holds one `iteration best_value` pair, starting at iteration 0.
  The `output` directory is created if it does not exist.
- For each iteration it prints the run number, the best value and the
  current solution.
- `RATE` is echoed but not used.

### Averaging runs

    onemax-average [--folder output] [--runs 30] [--max-iterations 1000] [--output result.txt]

This reads `Run_1.txt` up to `Run_<runs>.txt` from the folder and averages
the fitness at each iteration from 0 to `max-iterations`. It writes one
`iteration average` line per iteration, with six decimals.

- A missing file is reported on standard error and skipped.
- Each sum is still divided by the full number of runs, even when files
  are missing.
- If the output file cannot be created, the command exits with status 1.

### Cooling schedule

    onemax-temperature [--directory .] [--temperature 100] [--cool-down 90] [--iterations 100]

This writes a geometric cooling schedule to a file named
`T_<temperature>CD_<cool-down>.txt`, for example `T_100CD_90.txt`. In the
name, both parameters are truncated to whole numbers.

- The schedule starts at `temperature`.
- The temperature is multiplied by `cool-down / 100` after each step.
- The file holds one value per line, for `iterations` steps.

## Library use

```python
import io
import random

from onemax_search.onemax import one_max
from onemax_search.exhaustive import next_bitstring, search
from onemax_search.hill_climbing import hill_climb
from onemax_search.average import average_runs, write_averages
from onemax_search.temperature import cooling_schedule, write_schedule

one_max([1, 0, 1, 1], 4)                # 3
next_bitstring([0, 1, 1])               # [1, 0, 0]
next_bitstring([1, 1, 1])               # None
best, evaluations = search(4, out=io.StringIO())

result = hill_climb(16, 200, random.Random(1), None)
result.best_value, result.solution, result.evaluations, result.history

cooling_schedule(100, 90, 5)            # [100, 90.0, 81.0, ...]
```

`hill_climb` returns a `ClimbResult` with these fields:

- `solution`: the final solution.
- `best_value`: the best value found.
- `evaluations`: the number of evaluations made.
- `history`: the best value after each iteration, with `history[0]` the
  starting value.
- `trajectory`: the solution after each iteration.

If a text stream is passed as `out`, `hill_climb` also writes the
`iteration best_value` lines to it.

`exhaustive.run` and `hill_climbing.run` repeat their search the given
number of times, just as the commands do.
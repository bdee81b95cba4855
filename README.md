# sortbench

`sortbench` measures how long classic sorting algorithms take on arrays of
integers and floats. Arrays are generated in several shapes (random, partly
sorted, sorted, reverse sorted) or loaded from a file, and every sorted array
is checked against Python's own sort; a wrong result prints
`Array is NOT sorted correctly.`

## Algorithms

The `sortbench.sorts` module sorts mutable sequences in place and returns
`None`, like `list.sort`:

- `insert_sort` – insertion sort
- `heap_sort` – heap sort (with the helpers `max_heapify` and `build_max_heap`)
- `quick_sort_left`, `quick_sort_middle`, `quick_sort_right`,
  `quick_sort_random` – quicksort with the pivot taken from the left end, the
  middle, the right end or a random position; `quick_sort(values, pivot)` takes
  a `PivotType`
- `shell_sort_shell`, `shell_sort_knuth` – Shell sort with Shell's halving gaps
  or Knuth's `3h + 1` gaps

```python
from sortbench.sorts import heap_sort

data = [5, 3, 9, 1]
heap_sort(data)
print(data)  # [1, 3, 5, 9]
```

## Running a benchmark

Install the package and run it with the path of a configuration file:

```
sortbench config.txt
```

Without an argument it reads `./config.txt`. If the file cannot be opened it
prints `Cannot open config file` and exits with status 1.

The configuration is printed first, then the results. For every configured
combination of algorithm, array size and array shape, 100 arrays are
generated, sorted and timed, and the mean time in milliseconds is reported.
Integer arrays hold values from the full 32-bit signed range; float arrays hold
values in `[-10000, 10000)`. The random generator is reseeded for each
algorithm, so all algorithms see the same inputs within one run.

The same runs are available from Python: `sortbench.benchmark.full_test(config,
var_type, seed=None, out=None)` returns `(sort type, array type, size, mean ms)`
tuples, and `full_test_file(config, out=None)` returns `(sort type, sorted
array)` pairs. `sortbench.cli.run_config(config, out=None)` runs everything a
`Config` describes.

## Configuration file

The file is split into sections. A line that is exactly one of the headers
below starts that section; the lines after it are values for it. Empty lines
are ignored, and any other line starting with `.` or `#` (a comment, for
instance) ends the current section, so values after it are ignored until the
next header.

| Section           | Values                                                        |
|-------------------|---------------------------------------------------------------|
| `.ARR_INT`        | array shapes for integer runs                                 |
| `.ARR_SIZE_INT`   | array sizes (1 to 2147483647) for integer runs                |
| `.SORT_INT`       | algorithms for integer runs                                   |
| `.ARR_FLOAT`      | array shapes for float runs                                   |
| `.ARR_SIZE_FLOAT` | array sizes (1 to 2147483647) for float runs                  |
| `.SORT_FLOAT`     | algorithms for float runs                                     |
| `.FILE_IN`        | path of an array file to sort                                 |
| `.FILE_TYPE`      | `INT` or `FLOAT`, the element type of the array file          |
| `.SORT_FILE`      | algorithms to run on the array file                           |
| `.FILE_OUT`       | path of a CSV file the benchmark results are appended to      |
| `.CONSOLE_OUT`    | `FALSE` turns off the results printed to the console          |

Array shapes: `ARR_RAND`, `ARR_RAND_33`, `ARR_RAND_66` (first 33% / 66%
sorted), `ARR_SORT`, `ARR_SORT_DESC`.

Algorithms: `INSERT_SORT`, `HEAP_SORT`, `QUICK_SORT_LEFT`,
`QUICK_SORT_MIDDLE`, `QUICK_SORT_RIGHT`, `QUICK_SORT_RANDOM`,
`SHELL_SORT_SHELL`, `SHELL_SORT_KNUTH`.

Unknown values are skipped. Integer runs happen only when shapes, sizes and
algorithms are all given for integers; the same holds for floats. Example:

```
.ARR_INT
ARR_RAND
ARR_SORT
.ARR_SIZE_INT
1000
5000
.SORT_INT
HEAP_SORT
QUICK_SORT_MIDDLE
.FILE_OUT
results.csv
```

In Python, `sortbench.config.read_config(path)` and `parse_config(lines)` return
a `Config` dataclass, and `format_config(config)` renders the report printed
before a run.

Each result line in the output file has the form

```
Heap Sort,gen Random,1000,1.234567e-01,INT
```

## Array files

An array file starts with the number of elements, followed by at least that
many whitespace-separated values; extra values are ignored. With `.FILE_IN`
and `.FILE_TYPE` set, the file is sorted with every algorithm listed under
`.SORT_FILE`, and the first 20 elements before and after sorting are shown.
These runs are not timed and write nothing to the output file. A missing or
malformed array file is reported as `cannot read input file: ...` and the
program carries on.
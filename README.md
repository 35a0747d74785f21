# rustlings

Helpers for a course of small programming exercises: coloured terminal
messages, generation of a `rust-project.json` file so that rust-analyzer
understands the exercise files, and a set of worked solutions written as
ordinary Python functions and classes.

Requires Python 3.11 or later. There are no runtime dependencies.

## Terminal messages: `rustlings.ui`

- `warn(message)` prints a red warning line, prefixed with `⚠️` (or `!`).
- `success(message)` prints a green success line, prefixed with `✅` (or `✓`).
- `bold(text)` and `blue(text)` return the text wrapped in ANSI styling.
- `no_emoji()` is true when the `NO_EMOJI` environment variable is set; the
  messages then use the plain characters instead of emoji.

Styling is applied only when standard output is a terminal, or when
`CLICOLOR_FORCE` is set to something other than `0`; `CLICOLOR=0` turns it off.

## rust-analyzer project file: `rustlings.project`

`RustAnalyzerProject` holds a `sysroot_src` and a list of `Crate` entries
(each with `root_module`, `edition` `"2021"`, no `deps`, and `cfg` `["test"]`).

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()        # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json(".")   # one crate per .rs file under ./exercises
project.write_to_disk()          # writes ./rust-project.json
```

`add_path(path)` adds a single crate when the text after the first dot in the
path is `rs`. `to_json()` returns the compact JSON text that `write_to_disk`
writes. `get_sysroot_src` needs `rustc` on the `PATH` unless `RUST_SRC_PATH`
is set.

## Worked solutions: `rustlings.solutions`

- `traits` – `append_bar` for strings and lists, `Licensed` with
  `SomeSoftware`/`OtherSoftware` and `compare_license_types`, and
  `some_func` over objects with both `SomeTrait` and `OtherTrait`.
- `smart_pointers` – a cons list (`Cons`, `Nil`), a copy-on-write `Cow` with
  `abs_all`, `offset_sums` computed in threads, and a generic `Wrapper`.
- `error_handling` – `parse_int` for fixed-width integers (raising
  `ParseIntError`), `generate_nametag_text`, `total_cost`,
  `PositiveNonzeroInteger.new` (raising `NegativeError` or `ZeroError`) and
  `parse_pos_nonzero` (raising `ParsePosNonzeroError`).
- `iterators` – `capitalize_first` and friends, `divide` with
  `NotDivisibleError` and `DivideByZeroError`, `result_with_list`,
  `list_of_results`, `factorial`, and counting `Progress` values in maps.
- `quizzes` – `calculate_price_of_apples`, `transformer` with the
  `Uppercase`, `Trim` and `Append` commands, and a generic `ReportCard`.
- `hashmaps` – `fruit_basket`, `fill_fruit_basket` over `Fruit`, and
  `build_scores_table` returning `Team` records.
- `structs` – `Order` and `create_order_template`, `Package` with
  `is_international` and `get_fees`, and a message-driven `State`.
- `basics` – small functions on conditions, strings, optional values and
  lists (`bigger`, `foo_if_fizz`, `sale_price`, `trim_me`, `maybe_icecream`,
  `vec_map`, and others).

## What this package does not do

It installs no command. It does not compile, run, test or lint exercise
files, does not track which exercises are finished, has no watch mode, and
does not print hints or reset exercises. There are no worked solutions for
the type conversion exercises.

## Running the tests

    pip install -e ".[test]"
    pytest
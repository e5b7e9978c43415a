# rustdrill

A Python library for working with a directory of small programming
exercises. Each exercise is a `.rs` source file that fails to compile, fails
its tests or fails a lint check until the learner fixes it. `rustdrill`
reads the exercise list, compiles and runs exercises with `rustc` (or
`cargo clippy`), tells whether an exercise still carries its
"not done" marker, and can describe the exercises for a language server.
It also ships worked solutions to the course lessons as plain Python
modules.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH` to compile exercises, and `cargo` with Clippy for
  exercises in `clippy` mode

## Installation

```
pip install rustdrill
```

## The exercise list

Exercises are described in TOML, in the recommended order:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "Just remove the marker comment and move on."
```

`mode` is one of `compile`, `test` or `clippy` (the `Mode` enum in
`rustdrill.exercise`). Every field is required; a missing one raises
`ValueError`.

```python
from rustdrill.exercise import load_exercise_file, load_exercises

exercises = load_exercise_file()          # reads ./info.toml
exercises = load_exercises(toml_text)     # or parse a string
```

## Checking an exercise

```python
from rustdrill.exercise import CheckFailed, CompileError

exercise = exercises[0]
try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except CompileError as error:
    print(error.output.stderr)
except CheckFailed as error:
    print(error.output.stdout, error.output.stderr)
```

- `Exercise.compile()` builds the file with `rustc --edition 2021` into a
  temporary binary named `./temp_<pid>_<thread>` (`--test` is added in
  `test` mode). In `clippy` mode it writes
  `./exercises/clippy/Cargo.toml`, builds the binary, runs `cargo clean`
  and then `cargo clippy -- -D warnings -D clippy::float_cmp`. On failure
  the binary is removed and `CompileError` is raised.
- `CompiledExercise.run()` runs the binary (with `--show-output` in `test`
  mode) and returns an `ExerciseOutput` with `stdout` and `stderr`; a
  non-zero exit raises `CheckFailed`. Closing the `CompiledExercise`, or
  leaving its `with` block, removes the binary.

## Progress

An exercise counts as pending while a line of the form `// I AM NOT DONE`
(leading whitespace and `///` allowed) is present.

```python
context = exercise.state()
if context is None:
    print("done")
else:
    for line in context:
        print(line.number, line.line, "<--" if line.important else "")

exercise.looks_done()   # True when state() is None
```

`state()` returns the marker line and up to two lines on either side as
`ContextLine` objects, numbered from 1.

## Language server description

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()      # RUST_SRC_PATH, or `rustc --print sysroot`
project.exercises_to_json()    # one crate per .rs file under ./exercises
project.write_to_disk()        # ./rust-project.json
```

Each `Crate` uses edition `2021`, has no dependencies and enables the
`test` cfg. `to_json()` returns the compact JSON text.

## Terminal messages

`rustdrill.ui.warn(message)` and `rustdrill.ui.success(message)` print a
red or green line with a leading symbol and return its plain text. When the
`NO_EMOJI` environment variable is set, plain `!` and `✓` are used instead
of emoji (see `no_emoji()`).

## Lesson solutions

`rustdrill.lessons` holds worked answers, one module per topic:

| module        | contents |
|---------------|----------|
| `quizzes`     | `calculate_price_of_apples`, `transformer` with `Uppercase`/`Trim`/`Append`, `ReportCard` |
| `control`     | `bigger`, `foo_if_fizz`, `animal_habitat`, `is_even`, `sale_price`, `maybe_icecream` |
| `text`        | `current_favorite_color`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `errors`      | `generate_nametag_text`, `total_cost`, `purchase` |
| `validation`  | `PositiveNonzeroInteger`, `CreationError`, `ParsePosNonzeroError`, `parse_pos_nonzero` |
| `collections` | `Fruit`, `Team`, `default_basket`, `fill_basket`, `build_scores_table`, `array_and_vec`, `vec_loop`, `vec_map` |
| `iteration`   | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide` and its errors, `result_with_list`, `list_of_results`, `factorial`, `Progress` and the `count_*` functions |
| `structs`     | `Order`, `Package`, `State` with `Move`/`Echo`/`ChangeColor`/`Quit`, `Wrapper`, `Cons` lists, `Rectangle` |
| `traits`      | `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types`, `SomeStruct`, `OtherStruct`, `some_func` |

Errors are raised as exceptions, for example `divide(81, 0)` raises
`DivideByZeroError` and `total_cost("beep boop")` raises `ValueError` with
the message `invalid digit found in string`.

## What this package does not do

`rustdrill` is a library only. It installs no command-line program: there
is no watch mode that re-checks files on save, no command to verify all
exercises in order, run a single exercise, reset one, print a hint or list
progress. Those workflows can be built on `Exercise`, `load_exercise_file`
and `RustAnalyzerProject`. It has no solutions module for type-conversion
lessons.
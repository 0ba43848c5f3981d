# kata

A library for working with small programming exercises: it reads the list of
exercises from an `info.toml` file, compiles and runs them with `rustc`, and
tells whether each one is still pending. It also holds reference solutions to
the lessons as ordinary Python functions and classes.

## Installing

```
pip install .
```

Compiling exercises needs `rustc` on your `PATH`; exercises in clippy mode
also need `cargo`.

## Exercises

`kata.exercise.load_exercises(path="info.toml")` reads the `[[exercises]]`
entries of a TOML file, each with `name`, `path`, `mode` and `hint`, and
returns a list of `Exercise` objects. A missing field raises `ValueError`.

`Mode` is one of `compile`, `test` or `clippy`.

An exercise is pending while its source still has a line such as
`// I AM NOT DONE`:

- `Exercise.state()` returns a `State`. `State.is_done()` is true when the
  marker is gone; otherwise `State.context` holds `ContextLine` objects
  (`line`, `number`, `important`) for the marker line and up to two lines on
  each side of it.
- `Exercise.looks_done()` is a shortcut for `state().is_done()`.

`Exercise.compile()` builds the exercise into a temporary binary in the
current directory (named after the process and thread, see
`temp_file_path()`) and returns a `CompiledExercise`; on failure it raises
`CompilationError`, whose `output` carries the compiler's `stdout` and
`stderr`. In clippy mode it writes `exercises/clippy/Cargo.toml` and runs
`cargo clippy` with warnings denied.

`CompiledExercise.run()` runs the binary (with `--show-output` for test
exercises) and returns an `ExerciseOutput`, or raises `ExecutionError` when
it exits unsuccessfully. Use it as a context manager, or call `close()`, to
remove the binary afterwards.

```python
from kata.exercise import CompilationError, ExecutionError, load_exercises

exercises = load_exercises("info.toml")
pending = next(e for e in exercises if not e.looks_done())
try:
    with pending.compile() as compiled:
        print(compiled.run().stdout)
except CompilationError as exc:
    print(exc.output.stderr)
except ExecutionError as exc:
    print(exc.output.stdout)
```

## Editor support

`kata.project.RustAnalyzerProject` builds a `rust-project.json` for
rust-analyzer:

```python
from kata.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()        # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json()      # one crate per .rs file below ./exercises
project.write_to_disk()          # writes ./rust-project.json
```

## Status lines

`kata.ui.warn(message)` and `kata.ui.success(message)` print a red or green
line with a symbol in front. Set the `NO_EMOJI` environment variable to get
plain `!` and `✓` instead of emoji.

## Lessons

`kata.lessons` holds reference solutions, one module per topic:
`basics`, `quizzes`, `strings`, `structs`, `enums`, `options`,
`collections_basket`, `errors`, `conversions`, `colors`, `iterators`,
`traits`, `smart_pointers` and `threads`. For example:

```python
from kata.lessons.quizzes import calculate_price_of_apples
from kata.lessons.conversions import Person

calculate_price_of_apples(41)    # 41
Person.parse("Mark,20")          # Person(name='Mark', age=20)
```

## What this package does not do

There is no command-line program. The package offers no `watch` mode that
re-checks exercises when files change, no command to verify all exercises
in order, run a single one by name, print hints, list exercises with their
progress, or reset an exercise with git. Those steps are left to your own
code built on `kata.exercise` and `kata.project`.

## Running the tests

```
pip install .[test]
pytest
```
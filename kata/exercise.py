"""Exercises: loading, compiling, running and progress detection."""

from __future__ import annotations

import contextlib
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_RUSTC_COLOR_ARGS = ("--color", "always")
_I_AM_DONE = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
_CONTEXT = 2
_CLIPPY_CARGO_TOML_PATH = Path("exercises/clippy/Cargo.toml")


def temp_file_path() -> Path:
    """Return a temporary binary name unique to this process and thread."""
    return Path(f"temp_{os.getpid()}_{threading.get_ident()}")


def _clean() -> None:
    with contextlib.suppress(OSError):
        temp_file_path().unlink()


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise; no context means it is done."""

    context: tuple[ContextLine, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", tuple(self.context))

    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class CompilationError(Exception):
    """The exercise did not compile."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


class ExecutionError(Exception):
    """The compiled exercise exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class CompiledExercise:
    """A successfully compiled exercise; removes its binary when closed."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            _clean()
            self._closed = True

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def compile(self) -> CompiledExercise:
        """Compile the exercise, raising CompilationError on failure."""
        temp = str(temp_file_path())
        match self.mode:
            case Mode.COMPILE:
                result = _execute(["rustc", str(self.path), "-o", temp, *_RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _execute(
                    ["rustc", "--test", str(self.path), "-o", temp, *_RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                result = self._clippy(temp)
        if result.returncode == 0:
            return CompiledExercise(self)
        _clean()
        raise CompilationError(_output(result))

    def _clippy(self, temp: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            _CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if "NO_EMOJI" in os.environ
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from exc
        # Build a binary too so clippy exercises can be run afterwards.
        _execute(["rustc", str(self.path), "-o", temp, *_RUSTC_COLOR_ARGS])
        manifest = str(_CLIPPY_CARGO_TOML_PATH)
        _execute(["cargo", "clean", "--manifest-path", manifest, *_RUSTC_COLOR_ARGS])
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                manifest,
                *_RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def _run(self) -> ExerciseOutput:
        args = [os.path.abspath(temp_file_path())]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args)
        output = _output(result)
        if result.returncode != 0:
            raise ExecutionError(output)
        return output

    def state(self) -> State:
        """Inspect the source for the pending marker."""
        source = self.path.read_bytes().decode("utf-8")
        if not _I_AM_DONE.search(source):
            return State()
        lines = _lines(source)
        matched = next((i for i, line in enumerate(lines) if _I_AM_DONE.search(line)), None)
        if matched is None:
            raise ValueError(f"pending marker in {self.path} spans several lines")
        low = max(0, matched - _CONTEXT)
        high = matched + _CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed."""
        return self.state().is_done()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from a TOML file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as exc:
        raise ValueError(f"missing field {exc} in {path}") from exc
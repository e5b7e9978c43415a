"""Exercises: loading, compiling, running and progress detection."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rustdrill.ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = r"(?m)^\s*///?\s*I\s+AM\s+NOT\s+DONE"
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"

_DONE_MARKER = re.compile(I_AM_DONE_REGEX)


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    thread_id = "".join(c for c in str(threading.get_ident()) if c.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
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
class ExerciseOutput:
    """Captured output of a finished command."""

    stdout: str
    stderr: str


class CheckFailed(Exception):
    """A compile or run step exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


class CompileError(CheckFailed):
    """The exercise failed to compile."""


def _capture(args: list[str]) -> tuple[bool, ExerciseOutput]:
    result = subprocess.run(args, capture_output=True)
    output = ExerciseOutput(
        stdout=result.stdout.decode("utf-8", errors="replace"),
        stderr=result.stderr.decode("utf-8", errors="replace"),
    )
    return result.returncode == 0, output


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise CheckFailed when it exits unsuccessfully."""
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

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

    def _rustc(self, *leading: str) -> list[str]:
        return [
            "rustc",
            *leading,
            str(self.path),
            "-o",
            temp_file(),
            *RUSTC_COLOR_ARGS,
            *RUSTC_EDITION_ARGS,
        ]

    def _write_clippy_manifest(self) -> None:
        manifest = (
            f'[package]\nname = "{self.name}"\nversion = "0.0.1"\nedition = "2021"\n'
            f'[[bin]]\nname = "{self.name}"\npath = "{self.name}.rs"'
        )
        message = (
            "Failed to write Clippy Cargo.toml file."
            if no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest, encoding="utf-8")
        except OSError as error:
            raise RuntimeError(message) from error

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompileError on failure."""
        if self.mode is Mode.COMPILE:
            ok, output = _capture(self._rustc())
        elif self.mode is Mode.TEST:
            ok, output = _capture(self._rustc("--test"))
        else:
            self._write_clippy_manifest()
            # Build a binary too so clippy exercises can be run afterwards.
            _capture(self._rustc())
            _capture(
                ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS]
            )
            ok, output = _capture(
                [
                    "cargo",
                    "clippy",
                    "--manifest-path",
                    CLIPPY_CARGO_TOML_PATH,
                    *RUSTC_COLOR_ARGS,
                    "--",
                    "-D",
                    "warnings",
                    "-D",
                    "clippy::float_cmp",
                ]
            )
        if ok:
            return CompiledExercise(self)
        clean()
        raise CompileError(output)

    def _run(self) -> ExerciseOutput:
        arg = "--show-output" if self.mode is Mode.TEST else ""
        ok, output = _capture([temp_file(), arg])
        if not ok:
            raise CheckFailed(output)
        return output

    def state(self) -> list[ContextLine] | None:
        """Return None when done, else the lines around the pending marker."""
        source = self.path.read_text(encoding="utf-8")
        if not _DONE_MARKER.search(source):
            return None
        lines = _split_lines(source)
        index = next(
            (i for i, line in enumerate(lines) if _DONE_MARKER.search(line)), None
        )
        if index is None:
            raise RuntimeError("This should not happen at all")
        low, high = max(index - CONTEXT, 0), index + CONTEXT
        return [
            ContextLine(line=line, number=i + 1, important=i == index)
            for i, line in enumerate(lines)
            if low <= i <= high
        ]

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return self.state() is None

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(text: str) -> list[Exercise]:
    """Parse the TOML exercise list."""
    data = tomllib.loads(text)
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
    except KeyError as error:
        raise ValueError(f"missing field {error.args[0]!r} in exercise list") from error


def load_exercise_file(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read and parse an exercise list file."""
    return load_exercises(Path(path).read_text(encoding="utf-8"))
"""Build, and optionally run, SublerCLI commands that tag a media file.

SublerCLI never modifies the source file. It writes a tagged copy to a
destination, which defaults to the source's path with a number suffix,
e.g. `Movie.0.mp4` next to `Movie.mp4`.
"""

import dataclasses
import os
import subprocess
from pathlib import Path
from typing import NamedTuple, Self

from . import escape_path
from .atoms import Atoms, AtomTag
from .mediakind import MediaKind

DEFAULT_EXECUTABLE = "/usr/local/bin/SublerCli"
EXECUTABLE_ENVVAR = "SUBLER_PATH"

# Give up looking for an unused destination after this many numbered candidates.
MAX_SUFFIX = 9999


class SublerError(Exception):
    """Base class for errors building or running a SublerCLI command."""


class SourceNotFoundError(SublerError):
    """The source file to tag does not exist."""

    def __init__(self, source: Path):
        """Initialize."""
        super().__init__(f"Source file does not exist: {source}")
        self.source = source


class DestinationNotFoundError(SublerError):
    """No unused destination path could be found."""

    def __init__(self, path: Path):
        """Initialize."""
        super().__init__(f"Destination not found for: {path}")
        self.path = path


class ExternalProcessError(SublerError):
    """SublerCLI exited with a non-zero status.

    Carries the process' exit status and captured output as is.
    """

    def __init__(self, proc: subprocess.CompletedProcess[str]):
        """Initialize."""
        super().__init__(
            f"Command {proc.args!r} returned non-zero exit status {proc.returncode}."
        )
        self.cmd = proc.args
        self.returncode = proc.returncode
        self.stdout = proc.stdout
        self.stderr = proc.stderr


class SublerCommand(NamedTuple):
    """An executable, its arguments, and the output file they write."""

    command: str
    args: list[str]
    dest: Path

    def __str__(self) -> str:
        """Join the executable and its arguments into a single shell command line."""
        return " ".join([self.command, *self.args])


@dataclasses.dataclass
class _Options:
    """Settings of a single tagging command."""

    source: Path
    atoms: Atoms
    dest: Path | None = None
    chapters_preview: bool = True
    optimize: bool = True
    organize_groups: bool = True
    bit_chunk_64: bool = True
    media_kind: MediaKind | None = MediaKind.MOVIE
    executable: str | None = None


class Subler:
    """Tag the file at `source` with the given atoms, writing the result to a new file.

    By default, the media kind is set to `MediaKind.MOVIE`, and chapter
    previews, optimization, track group organization, and 64-bit chunks are
    enabled. Setters return the instance, for chaining, e.g.
    `Subler(source, atoms).dest(dest).optimize(False).run()`.
    """

    def __init__(self, source: str | os.PathLike[str], atoms: Atoms):
        """Initialize."""
        self.options = _Options(source=Path(source), atoms=atoms)

    def chapters_preview(self, value: bool) -> Self:
        """Set whether to create chapter preview images."""
        self.options.chapters_preview = value
        return self

    def optimize(self, value: bool) -> Self:
        """Set whether to optimize the output file."""
        self.options.optimize = value
        return self

    def organize_groups(self, value: bool) -> Self:
        """Set whether to enable tracks and create alternate groups, the iTunes friendly way."""
        self.options.organize_groups = value
        return self

    def bit_chunk_64(self, value: bool) -> Self:
        """Set whether to write a 64-bit file. Only applies when the destination is not an existing file."""
        self.options.bit_chunk_64 = value
        return self

    def media_kind(self, kind: MediaKind | None) -> Self:
        """Set the media kind of the file. None writes no media kind."""
        self.options.media_kind = kind
        return self

    def dest(self, dest: str | os.PathLike[str] | None) -> Self:
        """Set the path of the output file. An empty path or None unsets it."""
        self.options.dest = Path(dest) if dest else None
        return self

    def executable_path(self, path: str | None) -> Self:
        """Set the path to the SublerCLI executable, overriding the environment."""
        self.options.executable = path
        return self

    def executable(self) -> str:
        """Path to the SublerCLI executable.

        Assumes a Homebrew installation by default, overridable with the
        `SUBLER_PATH` environment variable.
        """
        return (
            self.options.executable
            or os.environ.get(EXECUTABLE_ENVVAR)
            or DEFAULT_EXECUTABLE
        )

    def build_command(self) -> SublerCommand:
        """Create the SublerCLI command.

        Raises `SourceNotFoundError` if the source file does not exist. The
        given atoms are left untouched. The media kind is added to a copy.
        """
        source = self.options.source
        if not source.is_file():
            raise SourceNotFoundError(source)

        atoms = self.options.atoms.copy()
        if self.options.media_kind:
            atoms.add(AtomTag.MEDIA_KIND, self.options.media_kind.value)

        dest = self.determine_dest()
        if dest is None:
            raise DestinationNotFoundError(self.options.dest or source)

        args = [
            "-source",
            escape_path(str(source)),
            "-dest",
            escape_path(str(dest)),
            *atoms.render(),
        ]

        if self.options.chapters_preview:
            args.append("-chapterspreview")
        if self.options.optimize:
            args.append("-optimize")
        if self.options.organize_groups:
            args.append("-organizegroups")
        if self.options.bit_chunk_64:
            args.append("-64bitchunk")

        return SublerCommand(self.executable(), args, dest)

    def command_line(self) -> str:
        """The SublerCLI command as a single shell command line."""
        return str(self.build_command())

    def determine_dest(self) -> Path | None:
        """Find the path to write the output file to.

        Uses the set destination, unless a file already exists there, in which
        case the next available numbered path is used. Without a set
        destination, the next available numbered path of the source is used.

        The existence check is not atomic. Another process may create the file
        before SublerCLI does.
        """
        dest = self.options.dest
        if dest is None:
            return next_available_path(self.options.source)
        elif dest.exists():
            return next_available_path(dest)

        return dest

    def spawn(self, command: SublerCommand | None = None) -> subprocess.Popen[str]:
        """Start tagging as a shell child process, returning a handle to it without waiting.

        Runs the given command, built beforehand, or builds one. The caller is
        responsible for consuming its output and exit status.
        """
        return subprocess.Popen(
            str(command or self.build_command()),
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
        )

    def run(
        self, command: SublerCommand | None = None, *, check: bool = False
    ) -> subprocess.CompletedProcess[str]:
        """Tag the source file, writing the output file, and wait for completion.

        Runs the given command, built beforehand, or builds one. Returns SublerCLI's exit status and captured output. If `check`, raises
        `ExternalProcessError` on a non-zero exit status.
        """
        proc = subprocess.run(
            str(command or self.build_command()),
            shell=True,
            capture_output=True,
            text=True,
        )
        if check and proc.returncode:
            raise ExternalProcessError(proc)

        return proc


def next_available_path(path: Path) -> Path | None:
    """Find the first path that does not exist, numbering the given path's name before its extension.

    For example, `name.mp4` yields `name.0.mp4`, or `name.1.mp4` if that exists,
    and so on. Returns None if no number up to `MAX_SUFFIX` is available, or if
    the path has no name to number, like `/`.
    """
    if not path.name:
        return None

    for i in range(MAX_SUFFIX + 1):
        candidate = path.with_name(f"{path.stem}.{i}{path.suffix}")
        if not candidate.exists():
            return candidate

    return None

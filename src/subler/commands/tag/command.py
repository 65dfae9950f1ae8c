"""Tag command."""

from pathlib import Path

import click

from subler.utils.atoms import Atoms
from subler.utils.mediakind import MediaKind
from subler.utils.subler import (
    EXECUTABLE_ENVVAR,
    ExternalProcessError,
    Subler,
    SublerError,
)


@click.command("tag")
@click.argument(
    "file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--dest",
    "-d",
    default=None,
    help=(
        "Path of the tagged output file. Numbered before its extension if it"
        " already exists. Defaults to FILE's path, numbered, e.g. `Movie.0.mp4`."
    ),
    type=click.Path(dir_okay=False),
)
@click.option(
    "--atom",
    "-a",
    "atoms",
    help='Metadata tag and value to write, e.g. `-a "Release Date" 2024`. Repeatable.',
    metavar="TAG VALUE",
    multiple=True,
    nargs=2,
    type=str,
)
@click.option("--artist", default=None, help="Shorthand for `--atom Artist ARTIST`.")
@click.option("--album", default=None, help="Shorthand for `--atom Album ALBUM`.")
@click.option("--title", default=None, help="Shorthand for `--atom Name TITLE`.")
@click.option(
    "--artwork",
    default=None,
    help="Path to a cover art image. Shorthand for `--atom Artwork ARTWORK`.",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--media-kind",
    default=MediaKind.MOVIE.value,
    help="Media kind of the file.",
    show_default=True,
    type=click.Choice([kind.value for kind in MediaKind], case_sensitive=False),
)
@click.option(
    "--no-media-kind",
    default=False,
    help="Whether to skip writing a media kind.",
    is_flag=True,
)
@click.option(
    "--chapters-preview/--no-chapters-preview",
    default=True,
    help="Whether to create chapter preview images.",
    show_default=True,
)
@click.option(
    "--optimize/--no-optimize",
    default=True,
    help="Whether to optimize the output file.",
    show_default=True,
)
@click.option(
    "--organize-groups/--no-organize-groups",
    default=True,
    help="Whether to enable tracks and create alternate groups, the iTunes friendly way.",
    show_default=True,
)
@click.option(
    "--64bit-chunk/--no-64bit-chunk",
    "bit_chunk_64",
    default=True,
    help="Whether to write a 64-bit file.",
    show_default=True,
)
@click.option(
    "--subler-path",
    envvar=EXECUTABLE_ENVVAR,
    default=None,
    help=(
        "Path to the SublerCLI executable. Read from the environment variable"
        f" {EXECUTABLE_ENVVAR}. Defaults to a Homebrew installation."
    ),
)
@click.option(
    "--dry-run",
    default=False,
    help="Print the SublerCLI command instead of running it.",
    is_flag=True,
)
def main(
    file: Path,
    dest: str | None,
    atoms: tuple[tuple[str, str], ...],
    artist: str | None,
    album: str | None,
    title: str | None,
    artwork: Path | None,
    media_kind: str,
    no_media_kind: bool,
    chapters_preview: bool,
    optimize: bool,
    organize_groups: bool,
    bit_chunk_64: bool,
    subler_path: str | None,
    dry_run: bool,
) -> None:
    """Tag FILE with metadata, writing a new file.

    Leaves FILE untouched.
    """
    metadata = Atoms()
    if artist:
        metadata.artist(artist)
    if album:
        metadata.album(album)
    if title:
        metadata.title(title)
    if artwork:
        metadata.artwork(str(artwork))
    for tag, value in atoms:
        metadata.add(tag, value)

    subler = (
        Subler(file, metadata)
        .chapters_preview(chapters_preview)
        .optimize(optimize)
        .organize_groups(organize_groups)
        .bit_chunk_64(bit_chunk_64)
        .media_kind(None if no_media_kind else MediaKind.from_label(media_kind))
        .executable_path(subler_path)
        .dest(dest)
    )

    try:
        command = subler.build_command()
        if dry_run:
            click.echo(str(command))
            return

        proc = subler.run(command, check=True)
    except ExternalProcessError as ex:
        if ex.stdout:
            click.echo(ex.stdout, nl=False)
        if ex.stderr:
            click.echo(ex.stderr, err=True, nl=False)
        click.echo(f"Error: SublerCLI exited with status {ex.returncode}", err=True)
        raise click.exceptions.Exit(2) from ex
    except SublerError as ex:
        click.echo(f"Error: {ex}", err=True)
        raise click.exceptions.Exit(2) from ex

    if proc.stdout:
        click.echo(proc.stdout, nl=False)
    click.echo(f"Wrote {command.dest}")

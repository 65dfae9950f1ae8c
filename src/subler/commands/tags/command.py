"""Tags command."""

import click
import rich.box
import rich.console
import rich.table

from subler.utils.atoms import AtomTag
from subler.utils.mediakind import MediaKind

# Test-only property. Set to a large number to avoid text wrapping in the console.
_CONSOLE_WIDTH: int | None = None


@click.command("tags")
@click.option(
    "--media-kinds",
    default=False,
    help="Whether to list the media kinds instead of the metadata tags.",
    is_flag=True,
)
def main(media_kinds: bool) -> None:
    """List the metadata tags SublerCLI recognizes.

    Any tag is passed through to SublerCLI, recognized or not. Prints the tag
    label to use with `tag --atom`, and its name in this package's API.
    """
    table = rich.table.Table(box=rich.box.MINIMAL)
    table.add_column("Label", header_style="bold blue")
    table.add_column("Name", header_style="bold blue", style="dim")

    # Include aliases, like `title` for `name`.
    members = (MediaKind if media_kinds else AtomTag).__members__
    for name, member in members.items():
        table.add_row(member.value, name.lower())

    console = rich.console.Console(width=_CONSOLE_WIDTH)
    console.print(table)

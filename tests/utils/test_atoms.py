"""Metadata atom tests."""

import pytest

from subler.utils.atoms import Atom, Atoms, AtomTag, metadata_tags


def test_render_empty() -> None:
    """Test no atoms add no arguments at all."""
    assert Atoms().render() == []


def test_render_atom() -> None:
    """Test the tag and value are single-quoted."""
    atoms = Atoms().add("Cast", "John Doe")

    assert atoms.atoms[0].render() == "{'Cast':'John Doe'}"


def test_render_atom_apostrophe() -> None:
    """Test apostrophes in the value are escaped, not dropped."""
    atoms = Atoms().add("Cast", "John's Doe")

    assert atoms.atoms[0].render() == "{'Cast':'John\\'s Doe'}"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("first line\nsecond line", "{'Comments':'first line second line'}"),
        ("first line\r\n\r\nsecond line", "{'Comments':'first line second line'}"),
        ("ends in a newline\n", "{'Comments':'ends in a newline '}"),
        ("pipes | stay", "{'Comments':'pipes | stay'}"),
    ],
)
def test_render_atom_newlines(value: str, expected: str) -> None:
    """Test each run of line breaks collapses to a single space."""
    assert Atom("Comments", value).render() == expected


def test_render_artwork_unquoted() -> None:
    """Test artwork is a path, which SublerCLI expects unquoted."""
    atom = Atom(AtomTag.ARTWORK, "/path/to/Cover's Art.jpg")

    assert atom.render() == "{'Artwork':/path/to/Cover\\'s Art.jpg}"


def test_render_all_atoms() -> None:
    """Test all atoms, including repeated tags, render in order into a single argument."""
    atoms = Atoms().add("Genre", "Pop").add("Artist", "Bluu").add("Genre", "Rock")

    assert atoms.render() == [
        "-metadata",
        "{'Genre':'Pop'}{'Artist':'Bluu'}{'Genre':'Rock'}",
    ]


def test_add_chains() -> None:
    """Test adding returns the same collection."""
    atoms = Atoms()

    assert atoms.add("Cast", "John Doe") is atoms
    assert atoms.add_atom(Atom("Cast", "Jane Doe")) is atoms
    assert atoms.add_atoms(Atoms().add("Cast", "Jim Doe")) is atoms
    assert [atom.value for atom in atoms] == ["John Doe", "Jane Doe", "Jim Doe"]
    assert len(atoms) == 3


def test_add_unrecognized_tag() -> None:
    """Test tags outside the recognized set still pass through."""
    atoms = Atoms().add("Some Future Tag", "some value")

    assert atoms.render() == ["-metadata", "{'Some Future Tag':'some value'}"]


def test_add_atoms_preserves_order() -> None:
    """Test bulk adding keeps both collections' order."""
    first = Atoms().artist("Bluu").album("Album Title Here")
    second = Atoms().track_number("1/12").title("Song Title Here")

    first.add_atoms(second)

    assert first.atoms == (
        Atom("Artist", "Bluu"),
        Atom("Album", "Album Title Here"),
        Atom("Track #", "1/12"),
        Atom("Name", "Song Title Here"),
    )
    assert len(second) == 2


def test_copy_is_independent() -> None:
    """Test adding to a copy leaves the original untouched."""
    atoms = Atoms().artist("Bluu")
    copied = atoms.copy().genre("Pop")

    assert atoms.atoms == (Atom("Artist", "Bluu"),)
    assert copied.atoms == (Atom("Artist", "Bluu"), Atom("Genre", "Pop"))


@pytest.mark.parametrize(("name", "tag"), list(AtomTag.__members__.items()))
def test_helper_per_tag(name: str, tag: AtomTag) -> None:
    """Test every recognized tag has a chainable helper adding that tag."""
    atoms = Atoms()

    assert getattr(atoms, name.lower())("some value") is atoms
    assert atoms.atoms == (Atom(tag.value, "some value"),)


def test_title_is_name() -> None:
    """Test `title` is an alias of `name`."""
    assert Atoms().title("Foo Bar Title").render() == [
        "-metadata",
        "{'Name':'Foo Bar Title'}",
    ]


def test_metadata_tags() -> None:
    """Test all recognized tag labels are listed once."""
    tags = Atoms().metadata_tags()

    assert isinstance(tags, list)
    assert "Artist" in tags
    assert "Media Kind" in tags
    assert tags.count("Name") == 1
    assert tags == metadata_tags()

"""SublerCLI metadata atoms, and their rendering to the `-metadata` argument.

An atom is a single tag and value pair, like `Artist` and `Bluu`. SublerCLI
accepts every atom of a file in a single argument, each wrapped in braces, e.g.
`{'Artist':'Bluu'}{'Name':'Song of Myself'}`.
"""

import enum
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Self

METADATA_FLAG = "-metadata"

_NEWLINES_RE = re.compile(r"[\r\n]+")


class AtomTag(enum.StrEnum):
    """All metadata tags SublerCLI recognizes. Each value is its SublerCLI label.

    `TITLE` is an alias of `NAME`.
    """

    ARTIST = "Artist"
    ALBUM_ARTIST = "Album Artist"
    ALBUM = "Album"
    GROUPING = "Grouping"
    COMPOSER = "Composer"
    COMMENTS = "Comments"
    GENRE = "Genre"
    RELEASE_DATE = "Release Date"
    TRACK_NUMBER = "Track #"
    DISK_NUMBER = "Disk #"
    TEMPO = "Tempo"
    TV_SHOW = "TV Show"
    TV_EPISODE_NUMBER = "TV Episode #"
    TV_NETWORK = "TV Network"
    TV_EPISODE_ID = "TV Episode ID"
    TV_SEASON = "TV Season"
    DESCRIPTION = "Description"
    LONG_DESCRIPTION = "Long Description"
    SERIES_DESCRIPTION = "Series Description"
    HD_VIDEO = "HD Video"
    RATING_ANNOTATION = "Rating Annotation"
    STUDIO = "Studio"
    CAST = "Cast"
    DIRECTOR = "Director"
    GAPLESS = "Gapless"
    CODIRECTOR = "Codirector"
    PRODUCERS = "Producers"
    SCREENWRITERS = "Screenwriters"
    LYRICS = "Lyrics"
    COPYRIGHT = "Copyright"
    ENCODING_TOOL = "Encoding Tool"
    ENCODED_BY = "Encoded By"
    KEYWORDS = "Keywords"
    CATEGORY = "Category"
    CONTENT_ID = "contentID"
    ARTIST_ID = "artistID"
    PLAYLIST_ID = "playlistID"
    GENRE_ID = "genreID"
    COMPOSER_ID = "composerID"
    XID = "XID"
    ITUNES_ACCOUNT = "iTunes Account"
    ITUNES_ACCOUNT_TYPE = "iTunes Account Type"
    ITUNES_COUNTRY = "iTunes Country"
    TRACK_SUB_TITLE = "Track Sub-Title"
    SONG_DESCRIPTION = "Song Description"
    ART_DIRECTOR = "Art Director"
    ARRANGER = "Arranger"
    LYRICIST = "Lyricist"
    ACKNOWLEDGEMENT = "Acknowledgement"
    CONDUCTOR = "Conductor"
    LINEAR_NOTES = "Linear Notes"
    RECORD_COMPANY = "Record Company"
    ORIGINAL_ARTIST = "Original Artist"
    PHONOGRAM_RIGHTS = "Phonogram Rights"
    PRODUCER = "Producer"
    PERFORMER = "Performer"
    PUBLISHER = "Publisher"
    SOUND_ENGINEER = "Sound Engineer"
    SOLOIST = "Soloist"
    CREDITS = "Credits"
    THANKS = "Thanks"
    ONLINE_EXTRAS = "Online Extras"
    EXECUTIVE_PRODUCER = "Executive Producer"
    SORT_NAME = "Sort Name"
    SORT_ARTIST = "Sort Artist"
    SORT_ALBUM_ARTIST = "Sort Album Artist"
    SORT_ALBUM = "Sort Album"
    SORT_COMPOSER = "Sort Composer"
    SORT_TV_SHOW = "Sort TV Show"
    ARTWORK = "Artwork"
    NAME = "Name"
    TITLE = "Name"
    RATING = "Rating"
    MEDIA_KIND = "Media Kind"


def metadata_tags() -> list[str]:
    """All recognized metadata tag labels, e.g. for validating user input.

    Labels are not enforced. `Atoms.add` accepts any tag.
    """
    return [tag.value for tag in AtomTag]


@dataclass(frozen=True)
class Atom:
    """A single metadata tag and value to write to a file."""

    tag: str
    value: str

    def render(self) -> str:
        """Format the atom for SublerCLI.

        Collapses line breaks to a space and escapes single quotes. The value
        is single-quoted, unless it is artwork, which is a path to an image
        file.
        """
        value = _NEWLINES_RE.sub(" ", self.value).replace("'", "\\'")
        if self.tag != AtomTag.ARTWORK:
            value = f"'{value}'"

        return f"{{'{self.tag}':{value}}}"


class Atoms:
    """An ordered collection of atoms to write to a file.

    Append-only. Every method adding atoms returns the collection, for chaining,
    e.g. `Atoms().artist("Bluu").album("My Album Title")`. Atoms of the same
    tag are all kept, in the order they were added.
    """

    def __init__(self, atoms: Iterable[Atom] = ()) -> None:
        """Initialize."""
        self._atoms = list(atoms)

    def __iter__(self) -> Iterator[Atom]:
        """Iterate over the atoms, in the order they were added."""
        return iter(self._atoms)

    def __len__(self) -> int:
        """Count the atoms."""
        return len(self._atoms)

    def __repr__(self) -> str:
        """Represent the collection with its atoms."""
        return f"{type(self).__name__}({self._atoms!r})"

    @property
    def atoms(self) -> tuple[Atom, ...]:
        """A snapshot of the atoms added so far."""
        return tuple(self._atoms)

    def add(self, tag: str, value: str) -> Self:
        """Add an atom with the given tag and value."""
        self._atoms.append(Atom(str(tag), value))
        return self

    def add_atom(self, atom: Atom) -> Self:
        """Add an existing atom."""
        self._atoms.append(atom)
        return self

    def add_atoms(self, atoms: Iterable[Atom]) -> Self:
        """Add all atoms of another collection, preserving their order."""
        self._atoms.extend(atoms)
        return self

    def copy(self) -> "Atoms":
        """Return a new collection with the same atoms."""
        return Atoms(self._atoms)

    def metadata_tags(self) -> list[str]:
        """All recognized metadata tag labels. See `metadata_tags()`."""
        return metadata_tags()

    def render(self) -> list[str]:
        """SublerCLI arguments to write all atoms.

        Empty if there are no atoms, so no `-metadata` flag is passed at all.
        """
        if not self._atoms:
            return []

        return [METADATA_FLAG, "".join(atom.render() for atom in self._atoms)]

    def artist(self, value: str) -> Self:
        """Add an atom tagged "Artist"."""
        return self.add(AtomTag.ARTIST, value)

    def album_artist(self, value: str) -> Self:
        """Add an atom tagged "Album Artist"."""
        return self.add(AtomTag.ALBUM_ARTIST, value)

    def album(self, value: str) -> Self:
        """Add an atom tagged "Album"."""
        return self.add(AtomTag.ALBUM, value)

    def grouping(self, value: str) -> Self:
        """Add an atom tagged "Grouping"."""
        return self.add(AtomTag.GROUPING, value)

    def composer(self, value: str) -> Self:
        """Add an atom tagged "Composer"."""
        return self.add(AtomTag.COMPOSER, value)

    def comments(self, value: str) -> Self:
        """Add an atom tagged "Comments"."""
        return self.add(AtomTag.COMMENTS, value)

    def genre(self, value: str) -> Self:
        """Add an atom tagged "Genre"."""
        return self.add(AtomTag.GENRE, value)

    def release_date(self, value: str) -> Self:
        """Add an atom tagged "Release Date"."""
        return self.add(AtomTag.RELEASE_DATE, value)

    def track_number(self, value: str) -> Self:
        """Add an atom tagged "Track #"."""
        return self.add(AtomTag.TRACK_NUMBER, value)

    def disk_number(self, value: str) -> Self:
        """Add an atom tagged "Disk #"."""
        return self.add(AtomTag.DISK_NUMBER, value)

    def tempo(self, value: str) -> Self:
        """Add an atom tagged "Tempo"."""
        return self.add(AtomTag.TEMPO, value)

    def tv_show(self, value: str) -> Self:
        """Add an atom tagged "TV Show"."""
        return self.add(AtomTag.TV_SHOW, value)

    def tv_episode_number(self, value: str) -> Self:
        """Add an atom tagged "TV Episode #"."""
        return self.add(AtomTag.TV_EPISODE_NUMBER, value)

    def tv_network(self, value: str) -> Self:
        """Add an atom tagged "TV Network"."""
        return self.add(AtomTag.TV_NETWORK, value)

    def tv_episode_id(self, value: str) -> Self:
        """Add an atom tagged "TV Episode ID"."""
        return self.add(AtomTag.TV_EPISODE_ID, value)

    def tv_season(self, value: str) -> Self:
        """Add an atom tagged "TV Season"."""
        return self.add(AtomTag.TV_SEASON, value)

    def description(self, value: str) -> Self:
        """Add an atom tagged "Description"."""
        return self.add(AtomTag.DESCRIPTION, value)

    def long_description(self, value: str) -> Self:
        """Add an atom tagged "Long Description"."""
        return self.add(AtomTag.LONG_DESCRIPTION, value)

    def series_description(self, value: str) -> Self:
        """Add an atom tagged "Series Description"."""
        return self.add(AtomTag.SERIES_DESCRIPTION, value)

    def hd_video(self, value: str) -> Self:
        """Add an atom tagged "HD Video"."""
        return self.add(AtomTag.HD_VIDEO, value)

    def rating_annotation(self, value: str) -> Self:
        """Add an atom tagged "Rating Annotation"."""
        return self.add(AtomTag.RATING_ANNOTATION, value)

    def studio(self, value: str) -> Self:
        """Add an atom tagged "Studio"."""
        return self.add(AtomTag.STUDIO, value)

    def cast(self, value: str) -> Self:
        """Add an atom tagged "Cast"."""
        return self.add(AtomTag.CAST, value)

    def director(self, value: str) -> Self:
        """Add an atom tagged "Director"."""
        return self.add(AtomTag.DIRECTOR, value)

    def gapless(self, value: str) -> Self:
        """Add an atom tagged "Gapless"."""
        return self.add(AtomTag.GAPLESS, value)

    def codirector(self, value: str) -> Self:
        """Add an atom tagged "Codirector"."""
        return self.add(AtomTag.CODIRECTOR, value)

    def producers(self, value: str) -> Self:
        """Add an atom tagged "Producers"."""
        return self.add(AtomTag.PRODUCERS, value)

    def screenwriters(self, value: str) -> Self:
        """Add an atom tagged "Screenwriters"."""
        return self.add(AtomTag.SCREENWRITERS, value)

    def lyrics(self, value: str) -> Self:
        """Add an atom tagged "Lyrics"."""
        return self.add(AtomTag.LYRICS, value)

    def copyright(self, value: str) -> Self:
        """Add an atom tagged "Copyright"."""
        return self.add(AtomTag.COPYRIGHT, value)

    def encoding_tool(self, value: str) -> Self:
        """Add an atom tagged "Encoding Tool"."""
        return self.add(AtomTag.ENCODING_TOOL, value)

    def encoded_by(self, value: str) -> Self:
        """Add an atom tagged "Encoded By"."""
        return self.add(AtomTag.ENCODED_BY, value)

    def keywords(self, value: str) -> Self:
        """Add an atom tagged "Keywords"."""
        return self.add(AtomTag.KEYWORDS, value)

    def category(self, value: str) -> Self:
        """Add an atom tagged "Category"."""
        return self.add(AtomTag.CATEGORY, value)

    def content_id(self, value: str) -> Self:
        """Add an atom tagged "contentID"."""
        return self.add(AtomTag.CONTENT_ID, value)

    def artist_id(self, value: str) -> Self:
        """Add an atom tagged "artistID"."""
        return self.add(AtomTag.ARTIST_ID, value)

    def playlist_id(self, value: str) -> Self:
        """Add an atom tagged "playlistID"."""
        return self.add(AtomTag.PLAYLIST_ID, value)

    def genre_id(self, value: str) -> Self:
        """Add an atom tagged "genreID"."""
        return self.add(AtomTag.GENRE_ID, value)

    def composer_id(self, value: str) -> Self:
        """Add an atom tagged "composerID"."""
        return self.add(AtomTag.COMPOSER_ID, value)

    def xid(self, value: str) -> Self:
        """Add an atom tagged "XID"."""
        return self.add(AtomTag.XID, value)

    def itunes_account(self, value: str) -> Self:
        """Add an atom tagged "iTunes Account"."""
        return self.add(AtomTag.ITUNES_ACCOUNT, value)

    def itunes_account_type(self, value: str) -> Self:
        """Add an atom tagged "iTunes Account Type"."""
        return self.add(AtomTag.ITUNES_ACCOUNT_TYPE, value)

    def itunes_country(self, value: str) -> Self:
        """Add an atom tagged "iTunes Country"."""
        return self.add(AtomTag.ITUNES_COUNTRY, value)

    def track_sub_title(self, value: str) -> Self:
        """Add an atom tagged "Track Sub-Title"."""
        return self.add(AtomTag.TRACK_SUB_TITLE, value)

    def song_description(self, value: str) -> Self:
        """Add an atom tagged "Song Description"."""
        return self.add(AtomTag.SONG_DESCRIPTION, value)

    def art_director(self, value: str) -> Self:
        """Add an atom tagged "Art Director"."""
        return self.add(AtomTag.ART_DIRECTOR, value)

    def arranger(self, value: str) -> Self:
        """Add an atom tagged "Arranger"."""
        return self.add(AtomTag.ARRANGER, value)

    def lyricist(self, value: str) -> Self:
        """Add an atom tagged "Lyricist"."""
        return self.add(AtomTag.LYRICIST, value)

    def acknowledgement(self, value: str) -> Self:
        """Add an atom tagged "Acknowledgement"."""
        return self.add(AtomTag.ACKNOWLEDGEMENT, value)

    def conductor(self, value: str) -> Self:
        """Add an atom tagged "Conductor"."""
        return self.add(AtomTag.CONDUCTOR, value)

    def linear_notes(self, value: str) -> Self:
        """Add an atom tagged "Linear Notes"."""
        return self.add(AtomTag.LINEAR_NOTES, value)

    def record_company(self, value: str) -> Self:
        """Add an atom tagged "Record Company"."""
        return self.add(AtomTag.RECORD_COMPANY, value)

    def original_artist(self, value: str) -> Self:
        """Add an atom tagged "Original Artist"."""
        return self.add(AtomTag.ORIGINAL_ARTIST, value)

    def phonogram_rights(self, value: str) -> Self:
        """Add an atom tagged "Phonogram Rights"."""
        return self.add(AtomTag.PHONOGRAM_RIGHTS, value)

    def producer(self, value: str) -> Self:
        """Add an atom tagged "Producer"."""
        return self.add(AtomTag.PRODUCER, value)

    def performer(self, value: str) -> Self:
        """Add an atom tagged "Performer"."""
        return self.add(AtomTag.PERFORMER, value)

    def publisher(self, value: str) -> Self:
        """Add an atom tagged "Publisher"."""
        return self.add(AtomTag.PUBLISHER, value)

    def sound_engineer(self, value: str) -> Self:
        """Add an atom tagged "Sound Engineer"."""
        return self.add(AtomTag.SOUND_ENGINEER, value)

    def soloist(self, value: str) -> Self:
        """Add an atom tagged "Soloist"."""
        return self.add(AtomTag.SOLOIST, value)

    def credits(self, value: str) -> Self:
        """Add an atom tagged "Credits"."""
        return self.add(AtomTag.CREDITS, value)

    def thanks(self, value: str) -> Self:
        """Add an atom tagged "Thanks"."""
        return self.add(AtomTag.THANKS, value)

    def online_extras(self, value: str) -> Self:
        """Add an atom tagged "Online Extras"."""
        return self.add(AtomTag.ONLINE_EXTRAS, value)

    def executive_producer(self, value: str) -> Self:
        """Add an atom tagged "Executive Producer"."""
        return self.add(AtomTag.EXECUTIVE_PRODUCER, value)

    def sort_name(self, value: str) -> Self:
        """Add an atom tagged "Sort Name"."""
        return self.add(AtomTag.SORT_NAME, value)

    def sort_artist(self, value: str) -> Self:
        """Add an atom tagged "Sort Artist"."""
        return self.add(AtomTag.SORT_ARTIST, value)

    def sort_album_artist(self, value: str) -> Self:
        """Add an atom tagged "Sort Album Artist"."""
        return self.add(AtomTag.SORT_ALBUM_ARTIST, value)

    def sort_album(self, value: str) -> Self:
        """Add an atom tagged "Sort Album"."""
        return self.add(AtomTag.SORT_ALBUM, value)

    def sort_composer(self, value: str) -> Self:
        """Add an atom tagged "Sort Composer"."""
        return self.add(AtomTag.SORT_COMPOSER, value)

    def sort_tv_show(self, value: str) -> Self:
        """Add an atom tagged "Sort TV Show"."""
        return self.add(AtomTag.SORT_TV_SHOW, value)

    def artwork(self, value: str) -> Self:
        """Add an atom tagged "Artwork"."""
        return self.add(AtomTag.ARTWORK, value)

    def name(self, value: str) -> Self:
        """Add an atom tagged "Name"."""
        return self.add(AtomTag.NAME, value)

    def title(self, value: str) -> Self:
        """Add an atom tagged "Name". Alias of `name`."""
        return self.add(AtomTag.TITLE, value)

    def rating(self, value: str) -> Self:
        """Add an atom tagged "Rating"."""
        return self.add(AtomTag.RATING, value)

    def media_kind(self, value: str) -> Self:
        """Add an atom tagged "Media Kind"."""
        return self.add(AtomTag.MEDIA_KIND, value)

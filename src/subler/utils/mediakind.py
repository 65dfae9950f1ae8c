"""Enum of the media kinds SublerCLI can write to a file."""

import enum


class MediaKind(enum.StrEnum):
    """Type of media of an input file. Each value is its SublerCLI label."""

    MOVIE = "Movie"
    MUSIC = "Music"
    AUDIOBOOK = "Audiobook"
    MUSIC_VIDEO = "Music Video"
    TV_SHOW = "TV Show"
    BOOKLET = "Booklet"
    RINGTONE = "Ringtone"

    @classmethod
    def from_label(cls, label: str) -> "MediaKind":
        """Look up a media kind by its SublerCLI label or its identifier, case insensitively.

        For example, "TV Show", "tv show", and "TV_SHOW" all return
        `MediaKind.TV_SHOW`.
        """
        needle = label.strip().casefold()
        for kind in cls:
            if needle in (kind.value.casefold(), kind.name.casefold()):
                return kind
        raise ValueError(f"Unknown media kind: {label!r}")

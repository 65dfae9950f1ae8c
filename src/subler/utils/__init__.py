"""Misc. utilities."""

import re

# Characters the shell would otherwise split on or interpret in a path argument.
_SHELL_UNSAFE_RE = re.compile(r"[\s&']")


def escape_path(path: str) -> str:
    r"""Backslash-escape each whitespace character, `&`, and `'` in the given path, in place.

    The path is not quoted as a whole. For example, `dest & path` becomes
    `dest\ \&\ path`.
    """
    return _SHELL_UNSAFE_RE.sub(lambda match: f"\\{match.group(0)}", path)

"""Filesystem-safe filename sanitization."""

import re

# Characters replaced by a safe substitute
_SUBSTITUTIONS = {
    '/': '-',
    '\\': '-',
    ':': '-',
    '|': '-',
    '"': "'",
}

# Characters dropped entirely
_REMOVED = '*?<>'

_TRANSLATION = str.maketrans({
    **_SUBSTITUTIONS,
    **{char: None for char in _REMOVED},
})

_WHITESPACE = re.compile(r'\s+')


def sanitize_filename(name: str) -> str:
    """
    Make a string safe to use as a file or directory name.

    Replaces / \\ : | with a hyphen and double quotes with an
    apostrophe, drops * ? < >, collapses whitespace and trims
    leading/trailing spaces and dots. Applying it twice gives the
    same result as applying it once.

    Args:
        name: Raw name.

    Returns:
        Sanitized name, possibly empty.

    Examples:
        >>> sanitize_filename('AC/DC: "Live"?')
        "AC-DC- 'Live'"
        >>> sanitize_filename('  ..hidden.. ')
        'hidden'
    """
    if not name:
        return ""

    result = name.translate(_TRANSLATION)
    result = _WHITESPACE.sub(' ', result)
    return result.strip(' .')

"""Input normalization applied once before any strategy runs."""

# Only the leading date part is rewritten; later separators belong to the time.
_SEPARATOR_SPAN = 8
_SEPARATORS = str.maketrans({".": "-", "/": "-"})

# Applied in order; " UTC" must go before " UT".
_ZONE_REWRITES = (
    (" UTC", " GMT"),
    (" UT", " GMT"),
)


def normalize(text):
    """Return *text* with date separators and UTC aliases standardized.

    ``.`` and ``/`` become ``-`` within the first eight characters only, so
    ``1970/12/31`` and ``1970.12.31`` both read ``1970-12-31`` while
    ``12:00:00.123`` keeps its fraction. ``" UTC"`` and ``" UT"`` become
    ``" GMT"`` anywhere in the string.
    """
    text = text[:_SEPARATOR_SPAN].translate(_SEPARATORS) + text[_SEPARATOR_SPAN:]
    for old, new in _ZONE_REWRITES:
        text = text.replace(old, new)
    return text

"""Central registry of recognized timezone abbreviations.

All abbreviation definitions live here. Other modules import from this file
to ensure consistency when adding, removing, or renaming entries.

Each entry contains:
    description : str  -- Human-readable zone name for documentation/display.
    offset      : int  -- Fixed UTC offset in minutes.

The defaults are the zone names recognized by RFC 2822 section 4.3.
Configuration may extend or shrink the table (see ``build_table``).
"""

import re

TIMEZONES = {
    "GMT": {"description": "Greenwich Mean Time", "offset": 0},
    "EST": {"description": "Eastern Standard Time (North America)", "offset": -5 * 60},
    "EDT": {"description": "Eastern Daylight Time (North America)", "offset": -4 * 60},
    "CST": {"description": "Central Standard Time (North America)", "offset": -6 * 60},
    "CDT": {"description": "Central Daylight Time (North America)", "offset": -5 * 60},
    "MST": {"description": "Mountain Standard Time (North America)", "offset": -7 * 60},
    "MDT": {"description": "Mountain Daylight Time (North America)", "offset": -6 * 60},
    "PST": {"description": "Pacific Standard Time (North America)", "offset": -8 * 60},
    "PDT": {"description": "Pacific Daylight Time (North America)", "offset": -7 * 60},
}

# Names folded onto a canonical entry before lookup.
ALIASES = {
    "UT": "GMT",
    "UTC": "GMT",
    "Z": "GMT",
}

DEFAULT_OFFSETS = {name: info["offset"] for name, info in TIMEZONES.items()}

_RE_OFFSET = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def parse_offset(text):
    """Convert ``+HH:MM`` / ``-HHMM`` text into signed minutes.

    Raises
    ------
    ValueError
        If *text* is not a well-formed offset or exceeds 23:59.
    """
    match = _RE_OFFSET.match(text.strip())
    if not match:
        raise ValueError(f"Invalid UTC offset: '{text}'. Expected +HH:MM or -HHMM.")
    sign, hours, minutes = match.groups()
    if int(hours) > 23 or int(minutes) > 59:
        raise ValueError(f"UTC offset out of range: '{text}'")
    total = int(hours) * 60 + int(minutes)
    return -total if sign == "-" else total


def build_table(overrides=None):
    """Merge configured *overrides* over the default offset table.

    Parameters
    ----------
    overrides : dict[str, str | int | None] | None
        Abbreviation to offset. Strings are parsed with ``parse_offset``,
        integers are taken as minutes, ``None`` removes the abbreviation.
        Alias names (UT, UTC, Z) are rejected; they always follow GMT.

    Returns
    -------
    dict[str, int]
        Upper-cased abbreviation to offset in minutes.
    """
    table = dict(DEFAULT_OFFSETS)
    for name, value in (overrides or {}).items():
        key = name.strip().upper()
        if not key.isalpha():
            raise ValueError(f"Timezone abbreviation must be alphabetic: '{name}'")
        if key in ALIASES:
            raise ValueError(f"'{name}' is an alias of {ALIASES[key]}; configure {ALIASES[key]} instead")
        if value is None:
            table.pop(key, None)
        elif isinstance(value, bool):
            raise ValueError(f"Invalid offset for '{name}': {value!r}")
        elif isinstance(value, int):
            if abs(value) >= 24 * 60:
                raise ValueError(f"UTC offset out of range for '{name}': {value}")
            table[key] = value
        else:
            table[key] = parse_offset(str(value))
    return table

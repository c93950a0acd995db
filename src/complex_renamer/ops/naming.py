"""Naming policy -- pure functions computing destination filenames."""

import calendar
from datetime import datetime, timedelta


def season_episode_name(index: int, season: int = 1, extension: str = ".mkv") -> str:
    """TV episode name, e.g. S01E07.mkv. Fields widen past two digits."""
    return f"S{season:02d}E{index:02d}{extension}"


def indexed_name(prefix: str, index: int, extension: str = ".jpg") -> str:
    """Prefixed sequence name, e.g. IMG_0042.jpg. Field widens past four digits."""
    return f"{prefix}{index:04d}{extension}"


def ordered_name(
    index: int,
    season: int,
    prefix: str,
    tv_mode: bool,
    extension: str = ".mkv",
) -> str:
    """Name for the file at position ``index`` of an ordered batch.

    The extension is used verbatim (leading dot and case preserved).
    """
    if tv_mode:
        return season_episode_name(index, season, extension)
    return indexed_name(prefix, index, extension)


def substituted_name(
    original: str,
    prefix: str,
    replacement: str = "",
    suffix: str = "",
) -> str:
    """Swap a leading ``prefix`` for ``replacement`` and drop ``suffix``.

    The prefix check gates the substitution; the first occurrence of
    ``prefix`` is replaced. The first occurrence of ``suffix`` anywhere in
    the name is removed. Both may apply. A result equal to ``original``
    means there is nothing to rename.
    """
    new_name = original
    if original.startswith(prefix):
        new_name = new_name.replace(prefix, replacement, 1)
    if suffix in original:
        new_name = new_name.replace(suffix, "", 1)
    return new_name


def one_year_before(moment: datetime) -> datetime:
    """The same wall-clock time one calendar year earlier.

    Feb 29 has no counterpart in a common year and rolls over to Mar 1.
    """
    year = moment.year - 1
    if moment.month == 2 and moment.day == 29 and not calendar.isleap(year):
        return moment.replace(year=year, day=28) + timedelta(days=1)
    return moment.replace(year=year)

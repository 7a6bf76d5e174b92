import logging

from . import config


def sample(entries, draw, fallback=None):
    """
    Picks a character by inverse-CDF lookup over `entries` in their stored order.

    Returns the first entry whose cumulative probability exceeds `draw`. If
    rounding leaves `draw` at or above the last cumulative value, the fallback
    character is returned instead (config.FALLBACK_CHAR unless given).
    """
    for entry in entries:
        if draw < entry.cumulative_probability:
            return entry.character

    if fallback is None:
        fallback = config.FALLBACK_CHAR
    logging.debug(f"Draw {draw} fell past the last cumulative probability; using fallback {fallback!r}")
    return fallback

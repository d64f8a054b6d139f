# SPDX-License-Identifier: MIT
"""Calendar-driven payload length schedule.

Identifiers grow by one character for every ``interval_years`` elapsed since
``epoch_year``. The schedule is a pure step function of the current year.
"""

from __future__ import annotations

from datetime import datetime


def scheduled_length(
    now: datetime, epoch_year: int, base_length: int, interval_years: int
) -> int:
    """Return the payload length to use at ``now``.

    Args:
        now: Current time; only the calendar year is used.
        epoch_year: Year at which identifiers carry ``base_length`` characters.
        base_length: Minimum payload length.
        interval_years: Years between one-character increments.

    Returns:
        ``base_length`` plus one for every complete interval since the epoch.

    Raises:
        ValueError: If ``interval_years`` is not positive.
    """
    if interval_years < 1:
        raise ValueError("interval_years must be positive")
    # Clocks set before the epoch keep the base length.
    elapsed = max(0, now.year - epoch_year)
    return base_length + elapsed // interval_years


__all__ = ["scheduled_length"]

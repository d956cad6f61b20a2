"""Numeric constants for tempo conversion.

Note ratios are in **beats**, where 1.0 = one quarter note, so the ratio of a
division is how many quarter notes it spans::

    import delaytimes.constants as const

    # A dotted eighth at 120 BPM, in milliseconds
    500.0 * const.EIGHTH * const.DOTTED_MULTIPLIER     # 375.0
"""

MS_PER_MINUTE = 60_000.0
SECONDS_PER_MINUTE = 60.0

WHOLE = 4.0
HALF = 2.0
QUARTER = 1.0
EIGHTH = 0.5
SIXTEENTH = 0.25
THIRTY_SECOND = 0.125
SIXTY_FOURTH = 1 / 16
HUNDRED_TWENTY_EIGHTH = 1 / 32

NORMAL_MULTIPLIER = 1.0
DOTTED_MULTIPLIER = 1.5
TRIPLET_MULTIPLIER = 2 / 3

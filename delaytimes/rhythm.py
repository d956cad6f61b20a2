import enum

import delaytimes.constants


class RhythmicModifier (enum.Enum):

	"""
	Rhythmic variant applied to every division of a table.

	A dotted note lasts half again as long as the plain note. Three triplet
	notes fill the time of two plain ones.
	"""

	NORMAL = "normal"
	DOTTED = "dotted"
	TRIPLET = "triplet"


_MULTIPLIERS = {
	RhythmicModifier.NORMAL: delaytimes.constants.NORMAL_MULTIPLIER,
	RhythmicModifier.DOTTED: delaytimes.constants.DOTTED_MULTIPLIER,
	RhythmicModifier.TRIPLET: delaytimes.constants.TRIPLET_MULTIPLIER,
}


def multiplier (modifier: RhythmicModifier) -> float:

	"""
	Return the scale factor for a rhythmic modifier.
	"""

	return _MULTIPLIERS[modifier]

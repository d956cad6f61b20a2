import dataclasses
import enum
import typing

import delaytimes.constants
import delaytimes.tempo


class NoteDivision (enum.Enum):

	"""
	The eight note divisions in a table, with their length in quarter notes.
	"""

	WHOLE = ("whole", delaytimes.constants.WHOLE)
	HALF = ("half", delaytimes.constants.HALF)
	QUARTER = ("quarter", delaytimes.constants.QUARTER)
	EIGHTH = ("eighth", delaytimes.constants.EIGHTH)
	SIXTEENTH = ("sixteenth", delaytimes.constants.SIXTEENTH)
	THIRTY_SECOND = ("thirty_second", delaytimes.constants.THIRTY_SECOND)
	SIXTY_FOURTH = ("sixty_fourth", delaytimes.constants.SIXTY_FOURTH)
	HUNDRED_TWENTY_EIGHTH = ("hundred_twenty_eighth", delaytimes.constants.HUNDRED_TWENTY_EIGHTH)

	def __init__ (self, field_name: str, ratio: float) -> None:
		self.field_name = field_name
		self.ratio = ratio


@dataclasses.dataclass(frozen=True)
class DelayTimeTable:

	"""
	Delay times (or LFO rates) for each note division at one tempo.

	Values are milliseconds or Hertz depending on how the table was built;
	the unit is not stored. In milliseconds each division is half the one
	above it, in Hertz it is double.

	Example:
		```python
		table = delaytimes.for_tempo(120).as_time().dotted()
		table.eighth  # 375.0
		```
	"""

	whole: float
	half: float
	quarter: float
	eighth: float
	sixteenth: float
	thirty_second: float
	sixty_fourth: float
	hundred_twenty_eighth: float

	def get (self, division: NoteDivision) -> float:

		"""
		Look up a value by division.
		"""

		return typing.cast(float, getattr(self, division.field_name))

	def as_dict (self) -> typing.Dict[str, float]:

		"""
		Return the values keyed by field name, longest division first.
		"""

		return dataclasses.asdict(self)


def _scale (value: float, ratio: float, unit: delaytimes.tempo.Unit) -> float:

	# A longer note lasts longer but cycles slower.
	if unit is delaytimes.tempo.Unit.TIME:
		return value * ratio

	if unit is delaytimes.tempo.Unit.FREQUENCY:
		return value / ratio

	raise TypeError(f"Unknown unit: {unit!r}")


def generate_table (base: float, multiplier: float, unit: delaytimes.tempo.Unit) -> DelayTimeTable:

	"""
	Expand a quarter-note base value into a full table.

	Parameters:
		base: Quarter note duration (ms) or rate (Hz), see ``delaytimes.tempo.base_value``.
		multiplier: Rhythmic scale factor, applied before the division ratio.
		unit: Domain of ``base``. Time values are multiplied by each division's
			ratio, frequency values are divided by it.
	"""

	scaled = base * multiplier

	values = {
		division.field_name: _scale(scaled, division.ratio, unit)
		for division in NoteDivision
	}

	return DelayTimeTable(**values)

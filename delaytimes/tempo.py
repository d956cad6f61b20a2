import enum
import logging
import math
import numbers

import mido

import delaytimes.constants


logger = logging.getLogger(__name__)


class InvalidTempo (ValueError):

	"""
	Raised when a tempo is not a positive, finite number of beats per minute.
	"""

	pass


class Unit (enum.Enum):

	"""
	Output domain for a delay time table.
	"""

	TIME = "ms"
	FREQUENCY = "Hz"

	@property
	def symbol (self) -> str:
		return self.value


def _table_is_finite (bpm: float) -> bool:

	# Longest duration and fastest rate any table can hold.
	longest_ms = delaytimes.constants.MS_PER_MINUTE / bpm * delaytimes.constants.WHOLE * delaytimes.constants.DOTTED_MULTIPLIER
	fastest_hz = bpm / delaytimes.constants.SECONDS_PER_MINUTE * delaytimes.constants.DOTTED_MULTIPLIER / delaytimes.constants.HUNDRED_TWENTY_EIGHTH

	return math.isfinite(longest_ms) and math.isfinite(fastest_hz)


def validate_tempo (bpm: float) -> float:

	"""
	Check that a tempo is usable and return it as a float.

	Booleans and non-numeric values are rejected along with zero, negative,
	NaN and infinite tempos. Tempos so extreme that a table value would
	overflow are rejected too.
	"""

	if isinstance(bpm, bool) or not isinstance(bpm, numbers.Real):
		raise InvalidTempo(f"Tempo must be a number, got {bpm!r}")

	try:
		value = float(bpm)
	except OverflowError as exc:
		raise InvalidTempo(f"Tempo is too large, got {bpm!r}") from exc

	if not math.isfinite(value):
		raise InvalidTempo(f"Tempo must be finite, got {bpm!r}")

	if value <= 0:
		raise InvalidTempo(f"Tempo must be positive, got {bpm!r}")

	if not _table_is_finite(value):
		raise InvalidTempo(f"Tempo is out of range, got {bpm!r}")

	return value


def base_value (bpm: float, unit: Unit) -> float:

	"""
	Return the duration (ms) or rate (Hz) of one quarter note at ``bpm``.

	The tempo is assumed to have been through ``validate_tempo`` already.
	"""

	if unit is Unit.TIME:
		return delaytimes.constants.MS_PER_MINUTE / bpm

	if unit is Unit.FREQUENCY:
		return bpm / delaytimes.constants.SECONDS_PER_MINUTE

	raise TypeError(f"Unknown unit: {unit!r}")


def bpm_from_midi_tempo (microseconds_per_beat: int) -> float:

	"""
	Convert a MIDI ``set_tempo`` value (microseconds per quarter note) to BPM.

	Example:
		```python
		msg = mido.MetaMessage("set_tempo", tempo=500000)
		bpm_from_midi_tempo(msg.tempo)  # 120.0
		```
	"""

	if isinstance(microseconds_per_beat, bool) or not isinstance(microseconds_per_beat, numbers.Real):
		raise InvalidTempo(f"MIDI tempo must be a number, got {microseconds_per_beat!r}")

	try:
		tempo = float(microseconds_per_beat)
	except OverflowError as exc:
		raise InvalidTempo(f"MIDI tempo is too large, got {microseconds_per_beat!r}") from exc

	if not math.isfinite(tempo) or tempo <= 0:
		raise InvalidTempo(f"MIDI tempo must be positive and finite, got {microseconds_per_beat!r}")

	bpm = mido.tempo2bpm(microseconds_per_beat)
	logger.debug(f"MIDI tempo {microseconds_per_beat} us/beat -> {bpm} BPM")

	return validate_tempo(bpm)

import dataclasses
import logging

import delaytimes.rhythm
import delaytimes.table
import delaytimes.tempo


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class UnitStage:

	"""
	A tempo bound to an output unit, ready to produce tables.

	Each call returns a fresh table and leaves the stage untouched, so one
	stage can produce normal, dotted and triplet tables side by side.
	"""

	bpm: float
	unit: delaytimes.tempo.Unit

	def with_modifier (self, modifier: delaytimes.rhythm.RhythmicModifier) -> delaytimes.table.DelayTimeTable:

		"""
		Build the table for a given rhythmic modifier.
		"""

		base = delaytimes.tempo.base_value(self.bpm, self.unit)
		factor = delaytimes.rhythm.multiplier(modifier)

		logger.debug(f"{self.bpm} BPM, {modifier.value} ({self.unit.symbol}): base {base}, multiplier {factor}")

		return delaytimes.table.generate_table(base, factor, self.unit)

	def normal (self) -> delaytimes.table.DelayTimeTable:
		return self.with_modifier(delaytimes.rhythm.RhythmicModifier.NORMAL)

	def dotted (self) -> delaytimes.table.DelayTimeTable:
		return self.with_modifier(delaytimes.rhythm.RhythmicModifier.DOTTED)

	def triplet (self) -> delaytimes.table.DelayTimeTable:
		return self.with_modifier(delaytimes.rhythm.RhythmicModifier.TRIPLET)


@dataclasses.dataclass(frozen=True)
class TempoStage:

	"""
	A validated tempo awaiting a unit. Create with ``for_tempo()``.
	"""

	bpm: float

	def as_unit (self, unit: delaytimes.tempo.Unit) -> UnitStage:
		return UnitStage(bpm=self.bpm, unit=unit)

	def as_time (self) -> UnitStage:

		"""
		Produce tables in milliseconds.
		"""

		return self.as_unit(delaytimes.tempo.Unit.TIME)

	def as_frequency (self) -> UnitStage:

		"""
		Produce tables in Hertz.
		"""

		return self.as_unit(delaytimes.tempo.Unit.FREQUENCY)


def for_tempo (bpm: float) -> TempoStage:

	"""
	Start a delay time calculation at the given tempo.

	The tempo is validated here and nowhere else.

	Parameters:
		bpm: Beats per minute. Must be positive and finite.

	Raises:
		delaytimes.tempo.InvalidTempo: If ``bpm`` is zero, negative, NaN,
			infinite or not a number.

	Example:
		```python
		stage = for_tempo(120).as_time()
		stage.normal().quarter   # 500.0
		stage.triplet().quarter  # 333.33...
		```
	"""

	value = delaytimes.tempo.validate_tempo(bpm)
	logger.debug(f"Tempo set to {value} BPM")

	return TempoStage(bpm=value)


def for_midi_tempo (microseconds_per_beat: int) -> TempoStage:

	"""
	Start a calculation from a MIDI ``set_tempo`` value.
	"""

	return for_tempo(delaytimes.tempo.bpm_from_midi_tempo(microseconds_per_beat))


def in_ms (bpm: float) -> UnitStage:

	"""
	Shorthand for ``for_tempo(bpm).as_time()``.
	"""

	return for_tempo(bpm).as_time()


def in_hz (bpm: float) -> UnitStage:

	"""
	Shorthand for ``for_tempo(bpm).as_frequency()``.
	"""

	return for_tempo(bpm).as_frequency()


def delay_times (
	bpm: float,
	unit: delaytimes.tempo.Unit = delaytimes.tempo.Unit.TIME,
	modifier: delaytimes.rhythm.RhythmicModifier = delaytimes.rhythm.RhythmicModifier.NORMAL,
) -> delaytimes.table.DelayTimeTable:

	"""
	Compute a table in a single call.

	Example:
		```python
		delay_times(120, modifier=RhythmicModifier.DOTTED).quarter  # 750.0
		delay_times(120, unit=Unit.FREQUENCY).whole                 # 0.5
		```
	"""

	return for_tempo(bpm).as_unit(unit).with_modifier(modifier)

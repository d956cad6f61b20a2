"""
Delaytimes - tempo-synced delay times and LFO rates for Python.

Delay pedals, echo plugins and LFOs sound best when they lock to the song.
Delaytimes turns a tempo in beats per minute into the eight standard note
divisions, from a whole note down to a 128th, either as durations in
milliseconds or as rates in Hertz, with optional dotted or triplet feel.

The API is staged so that each choice is made exactly once:

- ``for_tempo(bpm)`` validates the tempo.
- ``.as_time()`` or ``.as_frequency()`` picks the unit.
- ``.normal()``, ``.dotted()`` or ``.triplet()`` returns a ``DelayTimeTable``.

Every stage is immutable and reusable, so one tempo can feed any number of
tables::

    import delaytimes

    ms = delaytimes.for_tempo(120).as_time()
    ms.normal().quarter       # 500.0
    ms.dotted().eighth        # 375.0

    hz = delaytimes.for_tempo(120).as_frequency()
    hz.normal().sixteenth     # 8.0

Package-level exports: ``for_tempo``, ``for_midi_tempo``, ``in_ms``,
``in_hz``, ``delay_times``, ``DelayTimeTable``, ``NoteDivision``, ``Unit``,
``RhythmicModifier``, ``InvalidTempo``.
"""

import delaytimes.builder
import delaytimes.rhythm
import delaytimes.table
import delaytimes.tempo


for_tempo = delaytimes.builder.for_tempo
for_midi_tempo = delaytimes.builder.for_midi_tempo
in_ms = delaytimes.builder.in_ms
in_hz = delaytimes.builder.in_hz
delay_times = delaytimes.builder.delay_times

DelayTimeTable = delaytimes.table.DelayTimeTable
NoteDivision = delaytimes.table.NoteDivision
Unit = delaytimes.tempo.Unit
RhythmicModifier = delaytimes.rhythm.RhythmicModifier
InvalidTempo = delaytimes.tempo.InvalidTempo

from __future__ import annotations

import unittest

from signal_drawer.notes import AXIS_OCTAVES, OCTAVE_4, OCTAVE_9, OCTAVE_MINUS_1, QUARTER_TONE, EqualTemperament


class EqualTemperamentTests(unittest.TestCase):
    def test_a4_is_reference_pitch(self) -> None:
        a4 = EqualTemperament(440.0).note("A", 4)
        self.assertAlmostEqual(a4.exact_frequency, 440.0)
        self.assertEqual(a4.midi_number, 69)
        self.assertEqual(a4.name, "A4")
        self.assertFalse(a4.is_altered)

    def test_reference_pitch_retunes_every_note(self) -> None:
        c4 = EqualTemperament(432.0).note("C", 4)
        self.assertAlmostEqual(c4.exact_frequency, 432.0 * 2.0 ** (-9 / 12))

    def test_sharps_are_altered(self) -> None:
        note = EqualTemperament().note_named("C#3")
        self.assertTrue(note.is_altered)
        self.assertEqual(note.midi_number, 49)
        self.assertEqual(str(note), "C#3")

    def test_note_bounds_are_quarter_tones(self) -> None:
        a4 = EqualTemperament().note("A", 4)
        self.assertAlmostEqual(a4.lower_frequency, 440.0 / QUARTER_TONE)
        self.assertAlmostEqual(a4.upper_frequency, 440.0 * QUARTER_TONE)
        a_sharp = EqualTemperament().note("A#", 4)
        self.assertAlmostEqual(a4.upper_frequency, a_sharp.lower_frequency)

    def test_octave_holds_twelve_notes_from_c(self) -> None:
        octave = EqualTemperament().octave(OCTAVE_4)
        self.assertEqual(octave.name, "Octave4")
        self.assertEqual([n.pitch_class for n in octave.notes][:3], ["C", "C#", "D"])
        self.assertEqual(len(octave.notes), 12)
        self.assertAlmostEqual(octave.base_frequency, octave.note("C").exact_frequency)
        self.assertAlmostEqual(octave.upper_frequency, 2.0 * octave.lower_frequency)

    def test_octave_nine_stops_at_highest_midi_note(self) -> None:
        octave = EqualTemperament().octave(OCTAVE_9)
        self.assertEqual(octave.notes[-1].name, "G9")
        self.assertEqual(octave.notes[-1].midi_number, 127)

    def test_lowest_octave_and_name_parsing(self) -> None:
        temperament = EqualTemperament()
        self.assertEqual(temperament.octave(OCTAVE_MINUS_1).notes[0].midi_number, 0)
        self.assertEqual(temperament.note_named("C-1").midi_number, 0)
        with self.assertRaises(ValueError):
            temperament.note_named("H2")
        with self.assertRaises(ValueError):
            temperament.octave(10)
        with self.assertRaises(KeyError):
            temperament.octave(OCTAVE_9).note("B")

    def test_axis_octaves_run_low_to_high(self) -> None:
        self.assertEqual(list(AXIS_OCTAVES), list(range(0, 10)))


if __name__ == "__main__":
    unittest.main()

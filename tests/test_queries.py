import unittest

from scalebook.config.config import ScalebookConfig, SpellingConfig, StepsConfig
from scalebook.theory.queries import (
    contains_chord,
    extended,
    formula,
    harmonize,
    modes,
    pitch_classes,
    reduced,
    scale_chords,
    to_steps,
)
from scalebook.theory.scale import get_scale
from scalebook.theory.scale_types import scale_type_names


class RelatedScalesTests(unittest.TestCase):
    def test_extended_major(self) -> None:
        self.assertEqual(
            extended("major"),
            ["bebop", "bebop dominant", "bebop major", "ichikosucho", "chromatic"],
        )

    def test_reduced_major(self) -> None:
        self.assertEqual(reduced("major"), ["major pentatonic", "ionian pentatonic", "ritusen"])

    def test_key_does_not_matter(self) -> None:
        self.assertEqual(extended("F# major"), extended("major"))
        self.assertEqual(reduced("Bb major"), reduced("major"))
        self.assertEqual(extended(get_scale("D major")), extended("major"))

    def test_never_contains_itself(self) -> None:
        for name in scale_type_names():
            self.assertNotIn(name, extended(name))
            self.assertNotIn(name, reduced(name))

    def test_same_set_under_another_name_is_excluded(self) -> None:
        self.assertNotIn("bebop dominant", extended("bebop"))
        self.assertNotIn("bebop", reduced("bebop dominant"))

    def test_chromatic_extends_nothing(self) -> None:
        self.assertEqual(extended("chromatic"), [])

    def test_unknown_scale(self) -> None:
        self.assertEqual(extended("nonexistent-type"), [])
        self.assertEqual(reduced("nonexistent-type"), [])


class ModesTests(unittest.TestCase):
    def test_rooted_major(self) -> None:
        self.assertEqual(
            modes("C major"),
            [
                ("C", "major"),
                ("D", "dorian"),
                ("E", "phrygian"),
                ("F", "lydian"),
                ("G", "mixolydian"),
                ("A", "minor"),
                ("B", "locrian"),
            ],
        )

    def test_rooted_in_other_key(self) -> None:
        result = modes("D major")
        self.assertEqual(result[0], ("D", "major"))
        self.assertEqual(result[2], ("F#", "phrygian"))
        self.assertEqual(result[-1], ("C#", "locrian"))

    def test_unrooted_uses_intervals(self) -> None:
        self.assertEqual(
            modes("major pentatonic"),
            [
                ("1P", "major pentatonic"),
                ("2M", "egyptian"),
                ("3M", "malkos raga"),
                ("5P", "ritusen"),
                ("6M", "minor pentatonic"),
            ],
        )

    def test_unnamed_rotations_are_dropped(self) -> None:
        result = modes("minor blues")
        self.assertEqual(result[0], ("1P", "minor blues"))
        self.assertLess(len(result), 6)

    def test_symmetric_scale(self) -> None:
        result = modes("whole tone")
        self.assertEqual(len(result), 6)
        self.assertEqual({name for _, name in result}, {"whole tone"})

    def test_collision_names_first_registered(self) -> None:
        self.assertEqual(modes("bebop dominant")[0], ("1P", "bebop"))

    def test_empty(self) -> None:
        self.assertEqual(modes("nonexistent-type"), [])


class StepsTests(unittest.TestCase):
    def test_major(self) -> None:
        self.assertEqual(to_steps("major"), ["W", "W", "H", "W", "W", "W", "H"])

    def test_without_octave_closure(self) -> None:
        steps = to_steps("major", close_octave=False)
        self.assertEqual(steps, ["W", "W", "H", "W", "W", "W"])
        self.assertEqual(len(steps), len(get_scale("major").intervals) - 1)

    def test_augmented_steps(self) -> None:
        self.assertEqual(to_steps("harmonic minor"), ["W", "H", "W", "W", "H", "W.", "H"])
        self.assertEqual(to_steps("major pentatonic"), ["W", "W", "W.", "W", "W."])

    def test_key_does_not_matter(self) -> None:
        self.assertEqual(to_steps("Eb major"), to_steps("major"))

    def test_custom_symbols(self) -> None:
        cfg = ScalebookConfig(steps=StepsConfig(half="h", whole="w", augmented="a", close_octave=False))
        self.assertEqual(to_steps("harmonic minor", config=cfg), ["w", "h", "w", "w", "h", "a"])

    def test_empty(self) -> None:
        self.assertEqual(to_steps("nonexistent-type"), [])

    def test_formula(self) -> None:
        self.assertEqual(formula("C major"), [0, 2, 4, 5, 7, 9, 11])
        self.assertEqual(formula("whole tone"), [0, 2, 4, 6, 8, 10])
        self.assertEqual(formula("nonexistent-type"), [])


class ChordQueriesTests(unittest.TestCase):
    def test_scale_chords(self) -> None:
        self.assertEqual(scale_chords("pentatonic"), ["M", "6", "6/9", "Madd9", "Msus2", "5"])
        self.assertEqual(scale_chords("nonexistent-type"), [])

    def test_contains_chord(self) -> None:
        self.assertTrue(contains_chord("C major", "G7"))
        self.assertTrue(contains_chord("C major", "D m7"))
        self.assertFalse(contains_chord("C major", "D7"))
        self.assertFalse(contains_chord("C major", "C nope"))
        self.assertFalse(contains_chord("nonexistent-type", "C"))

    def test_harmonize(self) -> None:
        self.assertEqual(
            harmonize("C major", ["maj7", "m7", "7", "m7b5"]),
            ["Cmaj7", "Dm7", "Em7", "Fmaj7", "G7", "Am7", "Bm7b5"],
        )

    def test_harmonize_marks_gaps(self) -> None:
        self.assertEqual(harmonize("C major", ["maj7"]), ["Cmaj7", "", "", "Fmaj7", "", "", ""])

    def test_harmonize_needs_a_tonic(self) -> None:
        self.assertEqual(harmonize("major", ["maj7"]), [])


class PitchClassesTests(unittest.TestCase):
    def test_dedupes(self) -> None:
        self.assertEqual(pitch_classes(["C4", "c3", "C5", "C4", "c4"]), ["C"])

    def test_sorted_by_pitch(self) -> None:
        self.assertEqual(pitch_classes(["D4", "c#5", "A5", "F#6"]), ["D", "F#", "A", "C#"])

    def test_invalid_dropped(self) -> None:
        self.assertEqual(pitch_classes(["H4", "E4", "nope"]), ["E"])

    def test_names_without_octave(self) -> None:
        self.assertEqual(pitch_classes(["D", "F#", "A"]), ["D", "F#", "A"])
        self.assertEqual(pitch_classes(["A", "C4"]), ["C", "A"])

    def test_default_octave_from_config(self) -> None:
        cfg = ScalebookConfig(spelling=SpellingConfig(default_octave=3))
        self.assertEqual(pitch_classes(["A", "C4"], config=cfg), ["A", "C"])


if __name__ == "__main__":
    unittest.main()

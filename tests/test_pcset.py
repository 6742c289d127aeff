import unittest

from scalebook.theory.pcset import (
    EMPTY_PCSET,
    is_subset_of,
    is_superset_of,
    modes_of,
    pcset_from_chroma,
    pcset_from_setnum,
    rotate,
    signature_of,
    transpose_pcset,
)
from scalebook.theory.scale_types import list_scale_types

MAJOR = "101011010101"


class SignatureTests(unittest.TestCase):
    def test_three_views_agree(self) -> None:
        s = pcset_from_chroma(MAJOR)
        self.assertEqual(s.setnum, 2773)
        self.assertEqual(pcset_from_setnum(2773), s)
        self.assertEqual(s.normalized, MAJOR)
        self.assertEqual(s.length, 7)

    def test_signature_from_names_and_widths(self) -> None:
        by_name = signature_of(["1P", "3M", "5P"])
        by_width = signature_of([0, 4, 7])
        self.assertEqual(by_name.chroma, "100010010000")
        self.assertEqual(by_name, by_width)

    def test_root_always_included(self) -> None:
        self.assertEqual(signature_of(["3M"]).chroma, "100010000000")
        self.assertEqual(signature_of([]).chroma, "100000000000")

    def test_compound_intervals_fold_into_octave(self) -> None:
        self.assertEqual(signature_of(["1P", "9M"]), signature_of(["1P", "2M"]))

    def test_invalid_interval_raises(self) -> None:
        with self.assertRaises(ValueError):
            signature_of(["1P", "3P"])

    def test_invalid_chroma_raises(self) -> None:
        with self.assertRaises(ValueError):
            pcset_from_chroma("10101")
        with self.assertRaises(ValueError):
            pcset_from_setnum(4096)

    def test_normalized_starts_on_lowest_active(self) -> None:
        s = pcset_from_chroma("011010110101")
        self.assertEqual(s.normalized, "110101101010")
        self.assertEqual(EMPTY_PCSET.normalized, "000000000000")
        self.assertTrue(EMPTY_PCSET.empty)


class RotationTests(unittest.TestCase):
    def test_rotate_zero_is_identity(self) -> None:
        for st in list_scale_types():
            self.assertEqual(rotate(st.signature, 0), st.signature)
            self.assertEqual(rotate(st.signature, 12), st.signature)

    def test_rotate_composes(self) -> None:
        samples = [pcset_from_chroma(MAJOR), signature_of([0, 1, 6]), pcset_from_chroma("011000000001")]
        for s in samples:
            for a in range(-13, 14):
                for b in range(-13, 14):
                    self.assertEqual(rotate(rotate(s, a), b), rotate(s, (a + b) % 12))

    def test_rotate_left(self) -> None:
        # dorian is major rotated to start on its second degree
        self.assertEqual(rotate(pcset_from_chroma(MAJOR), 2).chroma, "101101010110")

    def test_transpose_to_tonic(self) -> None:
        d_major = transpose_pcset(pcset_from_chroma(MAJOR), 2)
        self.assertEqual(d_major.chroma, "011010110101")
        self.assertEqual(transpose_pcset(d_major, -2).chroma, MAJOR)


class SubsetTests(unittest.TestCase):
    def test_reflexive(self) -> None:
        for st in list_scale_types():
            self.assertTrue(is_subset_of(st.signature, st.signature))
            self.assertTrue(is_superset_of(st.signature, st.signature))

    def test_triad_in_major(self) -> None:
        triad = signature_of([0, 4, 7])
        major = pcset_from_chroma(MAJOR)
        self.assertTrue(is_subset_of(triad, major))
        self.assertFalse(is_subset_of(major, triad))
        self.assertTrue(is_superset_of(major, triad))

    def test_empty_is_subset_of_everything(self) -> None:
        self.assertTrue(is_subset_of(EMPTY_PCSET, pcset_from_chroma(MAJOR)))


class ModesTests(unittest.TestCase):
    def test_one_mode_per_note(self) -> None:
        major = pcset_from_chroma(MAJOR)
        modes = modes_of(major)
        self.assertEqual(len(modes), 7)
        self.assertEqual(modes[0], major)
        self.assertEqual(modes[1].chroma, "101101010110")
        for m in modes:
            self.assertEqual(m.chroma[0], "1")

    def test_symmetric_set_keeps_duplicates(self) -> None:
        whole_tone = signature_of([0, 2, 4, 6, 8, 10])
        modes = modes_of(whole_tone)
        self.assertEqual(len(modes), 6)
        self.assertEqual(set(m.chroma for m in modes), {whole_tone.chroma})

    def test_empty_has_no_modes(self) -> None:
        self.assertEqual(modes_of(EMPTY_PCSET), [])


if __name__ == "__main__":
    unittest.main()

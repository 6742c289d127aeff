import unittest

from scalebook.tables import CHORD_COLUMNS, SCALE_COLUMNS, chord_types_frame, scale_types_frame
from scalebook.theory.chords import list_chord_types
from scalebook.theory.scale_types import list_scale_types


class ScaleTableTests(unittest.TestCase):
    def test_shape_and_order(self) -> None:
        df = scale_types_frame()
        self.assertEqual(list(df.columns), SCALE_COLUMNS)
        self.assertEqual(len(df), len(list_scale_types()))
        self.assertEqual(df.iloc[0]["name"], "major pentatonic")

    def test_major_row(self) -> None:
        df = scale_types_frame()
        row = df[df["name"] == "major"].iloc[0]
        self.assertEqual(row["setnum"], 2773)
        self.assertEqual(row["chroma"], "101011010101")
        self.assertEqual(row["formula"], "0-2-4-5-7-9-11")
        self.assertEqual(row["aliases"], "ionian")
        self.assertEqual(row["size"], 7)

    def test_dtypes(self) -> None:
        df = scale_types_frame()
        self.assertEqual(str(df["setnum"].dtype), "UInt16")
        self.assertEqual(str(df["size"].dtype), "UInt8")
        self.assertEqual(str(df["name"].dtype), "string")


class ChordTableTests(unittest.TestCase):
    def test_symbols(self) -> None:
        df = chord_types_frame()
        self.assertEqual(list(df.columns), CHORD_COLUMNS)
        self.assertEqual(len(df), len(list_chord_types()))
        row = df[df["name"] == "major seventh"].iloc[0]
        self.assertEqual(row["symbol"], "maj7")
        self.assertEqual(row["size"], 4)


if __name__ == "__main__":
    unittest.main()

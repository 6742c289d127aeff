"""Static scale and chord templates.

Each entry is (interval formula, canonical name, *aliases). Order matters:
on fingerprint collisions the first entry wins.
"""

SCALE_TEMPLATES = [
    # common
    ("1P 2M 3M 5P 6M", "major pentatonic", "pentatonic"),
    ("1P 2M 3M 4P 5P 6M 7M", "major", "ionian"),
    ("1P 2M 3m 4P 5P 6m 7m", "minor", "aeolian"),
    ("1P 2M 3m 3M 5P 6M", "major blues"),
    ("1P 3m 4P 5d 5P 7m", "minor blues", "blues"),
    ("1P 2M 3m 4P 5P 6M 7M", "melodic minor"),
    ("1P 2M 3m 4P 5P 6m 7M", "harmonic minor"),
    ("1P 2M 3M 4P 5P 6M 7m 7M", "bebop"),
    ("1P 2M 3M 4P 5P 6M 7m 7M", "bebop dominant"),
    ("1P 2M 3m 4P 5d 6m 6M 7M", "diminished", "whole-half diminished"),
    # modes
    ("1P 2M 3m 4P 5P 6M 7m", "dorian"),
    ("1P 2M 3M 4A 5P 6M 7M", "lydian"),
    ("1P 2M 3M 4P 5P 6M 7m", "mixolydian", "dominant"),
    ("1P 2m 3m 4P 5P 6m 7m", "phrygian"),
    ("1P 2m 3m 4P 5d 6m 7m", "locrian"),
    # 5-note
    ("1P 3M 4P 5P 7M", "ionian pentatonic"),
    ("1P 3M 4P 5P 7m", "mixolydian pentatonic", "indian"),
    ("1P 2M 4P 5P 6M", "ritusen"),
    ("1P 2M 4P 5P 7m", "egyptian"),
    ("1P 3M 4P 5d 7m", "neopolitan major pentatonic"),
    ("1P 3m 4P 5P 6m", "vietnamese 1"),
    ("1P 2m 3m 5P 6m", "pelog"),
    ("1P 2m 4P 5P 6m", "kumoijoshi"),
    ("1P 2M 3m 5P 6m", "hirajoshi"),
    ("1P 2m 4P 5d 7m", "iwato"),
    ("1P 2m 4P 5P 7m", "in-sen"),
    ("1P 3M 4A 5P 7M", "lydian pentatonic", "chinese"),
    ("1P 3m 4P 6m 7m", "malkos raga"),
    ("1P 3m 4P 5d 7m", "locrian pentatonic", "minor seven flat five pentatonic"),
    ("1P 3m 4P 5P 7m", "minor pentatonic", "vietnamese 2"),
    ("1P 3m 4P 5P 6M", "minor six pentatonic"),
    ("1P 2M 3m 5P 6M", "flat three pentatonic", "kumoi"),
    ("1P 2M 3M 5P 6m", "flat six pentatonic"),
    ("1P 2m 3M 5P 6M", "scriabin"),
    ("1P 3M 5d 6m 7m", "whole tone pentatonic"),
    ("1P 3M 4A 5A 7M", "lydian #5P pentatonic"),
    ("1P 3M 4A 5P 7m", "lydian dominant pentatonic"),
    ("1P 3m 4P 5P 7M", "minor #7M pentatonic"),
    ("1P 3m 4d 5d 7m", "super locrian pentatonic"),
    # 6-note
    ("1P 2M 3m 4P 5P 7M", "minor hexatonic"),
    ("1P 2A 3M 5P 5A 7M", "augmented"),
    ("1P 2M 4P 5P 6M 7m", "piongio"),
    ("1P 2m 3M 4A 6M 7m", "prometheus neopolitan"),
    ("1P 2M 3M 4A 6M 7m", "prometheus"),
    ("1P 2m 3M 5d 6m 7m", "mystery #1"),
    ("1P 2m 3M 4P 5A 6M", "six tone symmetric"),
    ("1P 2M 3M 4A 5A 6A", "whole tone", "messiaen's mode #1"),
    ("1P 2m 4P 4A 5P 7M", "messiaen's mode #5"),
    # 7-note
    ("1P 2M 3M 4P 5d 6m 7m", "locrian major", "arabian"),
    ("1P 2m 3M 4A 5P 6m 7M", "double harmonic lydian"),
    ("1P 2m 2A 3M 4A 6m 7m", "altered", "super locrian", "diminished whole tone", "pomeroy"),
    ("1P 2M 3m 4P 5d 6m 7m", "locrian #2", "half-diminished", "aeolian b5"),
    ("1P 2M 3M 4P 5P 6m 7m", "mixolydian b6", "melodic minor fifth mode", "hindu"),
    ("1P 2M 3M 4A 5P 6M 7m", "lydian dominant", "lydian b7", "overtone"),
    ("1P 2M 3M 4A 5A 6M 7M", "lydian augmented"),
    ("1P 2m 3m 4P 5P 6M 7m", "dorian b2", "phrygian #6", "melodic minor second mode"),
    ("1P 2m 3m 4d 5d 6m 7d", "ultralocrian", "superlocrian bb7", "superlocrian diminished"),
    ("1P 2m 3m 4P 5d 6M 7m", "locrian 6", "locrian natural 6", "locrian sharp 6"),
    ("1P 2A 3M 4P 5P 5A 7M", "augmented heptatonic"),
    ("1P 2M 3m 4A 5P 6M 7m", "dorian #4", "ukrainian dorian", "romanian minor", "altered dorian"),
    ("1P 2M 3m 4A 5P 6M 7M", "lydian diminished"),
    ("1P 2M 3M 4A 5A 7m 7M", "leading whole tone"),
    ("1P 2M 3M 4A 5P 6m 7m", "lydian minor"),
    ("1P 2m 3M 4P 5P 6m 7m", "phrygian dominant", "spanish", "phrygian major"),
    ("1P 2m 3m 4P 5P 6m 7M", "balinese"),
    ("1P 2m 3m 4P 5P 6M 7M", "neopolitan major"),
    ("1P 2M 3M 4P 5P 6m 7M", "harmonic major"),
    ("1P 2m 3M 4P 5P 6m 7M", "double harmonic major", "gypsy"),
    ("1P 2M 3m 4A 5P 6m 7M", "hungarian minor"),
    ("1P 2A 3M 4A 5P 6M 7m", "hungarian major"),
    ("1P 2m 3M 4P 5d 6M 7m", "oriental"),
    ("1P 2m 3m 3M 4A 5P 7m", "flamenco"),
    ("1P 2m 3m 4A 5P 6m 7M", "todi raga"),
    ("1P 2m 3M 4P 5d 6m 7M", "persian"),
    ("1P 2m 3M 5d 6m 7m 7M", "enigmatic"),
    ("1P 2M 3M 4P 5A 6M 7M", "major augmented", "major #5", "ionian augmented", "ionian #5"),
    ("1P 2A 3M 4A 5P 6M 7M", "lydian #9"),
    # 8-note
    ("1P 2m 2M 4P 4A 5P 6m 7M", "messiaen's mode #4"),
    ("1P 2m 3M 4P 4A 5P 6m 7M", "purvi raga"),
    ("1P 2m 3m 3M 4P 5P 6m 7m", "spanish heptatonic"),
    ("1P 2M 3m 3M 4P 5P 6M 7m", "bebop minor"),
    ("1P 2M 3M 4P 5P 5A 6M 7M", "bebop major"),
    ("1P 2m 3m 4P 5d 5P 6m 7m", "bebop locrian"),
    ("1P 2M 3m 4P 5P 6m 7m 7M", "minor bebop"),
    ("1P 2M 3M 4P 5d 5P 6M 7M", "ichikosucho"),
    ("1P 2M 3m 4P 5P 6m 6M 7M", "minor six diminished"),
    ("1P 2m 3m 3M 4A 5P 6M 7m", "half-whole diminished", "dominant diminished", "messiaen's mode #2"),
    ("1P 3m 3M 4P 5P 6M 7m 7M", "kafi raga"),
    ("1P 2M 3M 4P 4A 5A 6A 7M", "messiaen's mode #6"),
    # 9-note
    ("1P 2M 3m 3M 4P 5d 5P 6M 7m", "composite blues"),
    ("1P 2M 3m 3M 4A 5P 6m 7m 7M", "messiaen's mode #3"),
    # 10-note
    ("1P 2m 2M 3m 4P 4A 5P 6m 6M 7M", "messiaen's mode #7"),
    # 12-note
    ("1P 2m 2M 3m 3M 4P 5d 5P 6m 6M 7m 7M", "chromatic"),
]

# Chord names may be empty; such chords are known by their first alias.
CHORD_TEMPLATES = [
    # major
    ("1P 3M 5P", "major", "M", "^"),
    ("1P 3M 5P 7M", "major seventh", "maj7", "Δ", "ma7", "M7", "Maj7", "^7"),
    ("1P 3M 5P 7M 9M", "major ninth", "maj9", "Δ9", "^9"),
    ("1P 3M 5P 7M 9M 13M", "major thirteenth", "maj13", "Maj13", "^13"),
    ("1P 3M 5P 6M", "sixth", "6", "add6", "add13", "M6"),
    ("1P 3M 5P 6M 9M", "sixth/ninth", "6/9", "69", "M69"),
    ("1P 3M 5P 9M", "", "Madd9", "2", "add9", "add2"),
    ("1P 3M 5P 7M 11A", "major seventh sharp eleventh", "maj#4", "Δ#4", "Δ#11", "M7#11", "^7#11", "maj7#11"),
    ("1P 2M 5P", "suspended second", "Msus2", "sus2"),
    ("1P 4P 5P", "suspended fourth", "Msus4", "sus4", "sus"),
    ("1P 5P", "fifth", "5"),
    ("1P 3M 5A", "augmented", "aug", "+", "+5", "^#5"),
    ("1P 3M 5A 7M", "augmented seventh", "maj7#5", "maj7+5", "+maj7", "^7#5"),
    ("1P 3M 5d", "", "Mb5"),
    # minor
    ("1P 3m 5P", "minor", "m", "min", "-"),
    ("1P 3m 5P 7m", "minor seventh", "m7", "min7", "mi7", "-7"),
    ("1P 3m 5P 7M", "minor/major seventh", "m/ma7", "m/maj7", "mM7", "mMaj7", "m/M7", "-Δ7", "mΔ", "-^7"),
    ("1P 3m 5P 6M", "minor sixth", "m6", "-6"),
    ("1P 3m 5P 7m 9M", "minor ninth", "m9", "-9"),
    ("1P 3m 5P 7m 9M 11P", "minor eleventh", "m11", "-11"),
    ("1P 3m 5P 7m 9M 13M", "minor thirteenth", "m13", "-13"),
    ("1P 3m 5P 9M", "", "madd9", "madd2"),
    ("1P 3m 5A", "minor augmented", "m#5", "-#5", "m+"),
    # diminished
    ("1P 3m 5d", "diminished", "dim", "°", "o"),
    ("1P 3m 5d 7d", "diminished seventh", "dim7", "°7", "o7"),
    ("1P 3m 5d 7m", "half-diminished", "m7b5", "ø", "-7b5", "h7", "h"),
    # dominant
    ("1P 3M 5P 7m", "dominant seventh", "7", "dom"),
    ("1P 3M 5P 7m 9M", "dominant ninth", "9"),
    ("1P 3M 5P 7m 9M 13M", "dominant thirteenth", "13"),
    ("1P 3M 5P 7m 11A", "lydian dominant seventh", "7#11", "7#4"),
    ("1P 3M 5P 7m 9m", "dominant flat ninth", "7b9"),
    ("1P 3M 5P 7m 9A", "dominant sharp ninth", "7#9"),
    ("1P 3M 7m 9m", "altered", "alt7"),
    ("1P 3M 5A 7m", "", "7#5", "+7", "7+", "7aug", "aug7"),
    ("1P 4P 5P 7m", "suspended fourth seventh", "7sus4", "7sus"),
    ("1P 5P 7m 9M 11P", "eleventh", "11"),
    ("1P 4P 5P 7m 9m", "", "b9sus", "phryg", "7b9sus", "7b9sus4"),
    ("1P 2M 4P 5P", "", "sus24", "sus4add9"),
    ("1P 4P 7m 10m", "", "4", "quartal"),
]

"""Pure single-sequence transforms.

Every function accepts any string and never raises. Whitespace handling
differs per function: reverse_complement, translate, get_sequence_length and
get_sequence_composition drop all whitespace first, the case and T/U
substitutions leave it untouched, and remove_newlines only drops CR/LF.
"""
import re
from collections import Counter

from ...constants.constants import *
from .sequence_tables import (
    CODON_TABLE,
    COMPLEMENT_TRANSLATION,
    DNA_ALPHABET,
    RNA_ALPHABET,
)

WHITESPACE_PATTERN = re.compile(r"\s")
NEWLINE_PATTERN = re.compile(r"[\r\n]")


def strip_whitespace(sequence: str) -> str:
    return WHITESPACE_PATTERN.sub("", sequence)


def clean_sequence(sequence: str) -> str:
    return strip_whitespace(sequence).upper()


def reverse_complement(sequence: str) -> str:
    return strip_whitespace(sequence).translate(COMPLEMENT_TRANSLATION)[::-1]


def transcribe(sequence: str) -> str:
    return sequence.replace("T", "U").replace("t", "u")


def reverse_transcribe(sequence: str) -> str:
    return sequence.replace("U", "T").replace("u", "t")


def translate(sequence: str) -> str:
    """Translate from the first base, stopping after the first stop codon.

    Unknown codons become ``X``; a trailing partial codon is dropped.
    """
    clean_seq = clean_sequence(sequence)
    protein = []

    for i in range(0, len(clean_seq) - CODON_LENGTH + 1, CODON_LENGTH):
        amino_acid = CODON_TABLE.get(clean_seq[i : i + CODON_LENGTH], UNKNOWN_AMINO_ACID)
        protein.append(amino_acid)
        if amino_acid == STOP_SYMBOL:
            break

    return "".join(protein)


def translate_rna(sequence: str) -> str:
    return translate(reverse_transcribe(sequence))


def to_uppercase(sequence: str) -> str:
    return sequence.upper()


def to_lowercase(sequence: str) -> str:
    return sequence.lower()


def remove_newlines(sequence: str) -> str:
    return NEWLINE_PATTERN.sub("", sequence)


def get_sequence_length(sequence: str) -> int:
    return len(strip_whitespace(sequence))


def get_sequence_composition(sequence: str) -> dict[str, int]:
    return dict(Counter(clean_sequence(sequence)))


def is_valid_dna(sequence: str) -> bool:
    return set(clean_sequence(sequence)) <= DNA_ALPHABET


def is_valid_rna(sequence: str) -> bool:
    return set(clean_sequence(sequence)) <= RNA_ALPHABET

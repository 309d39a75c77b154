from types import MappingProxyType

from Bio.Data import CodonTable

from ...constants.constants import *

DNA_ALPHABET = frozenset("ACGT")
RNA_ALPHABET = frozenset("ACGU")


def _build_codon_table() -> MappingProxyType:
    # NCBI translation table 1 (standard code), 61 sense codons + 3 stops
    standard = CodonTable.unambiguous_dna_by_id[STANDARD_CODON_TABLE_ID]
    table = dict(standard.forward_table)
    table.update({codon: STOP_SYMBOL for codon in standard.stop_codons})
    return MappingProxyType(table)


CODON_TABLE = _build_codon_table()

COMPLEMENT_MAP = MappingProxyType(
    {
        "A": "T",
        "T": "A",
        "C": "G",
        "G": "C",
        "a": "t",
        "t": "a",
        "c": "g",
        "g": "c",
    }
)

COMPLEMENT_TRANSLATION = str.maketrans(dict(COMPLEMENT_MAP))

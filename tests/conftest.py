"""Shared fixtures for biotools tests."""

import pytest


@pytest.fixture
def mixed_fasta():
    """One DNA and one RNA record."""
    return ">seq1 desc one\nATCG\nATCG\n>seq2\nAUCG"


@pytest.fixture
def typed_fasta():
    """One record of every sequence type, in a fixed order."""
    return "\n".join(
        [
            ">dna_1 forward strand",
            "ATGAAATAG",
            ">rna_1",
            "AUGAAAUAG",
            ">prot_1 short peptide",
            "MKV*",
            ">junk_1",
            "ACGX",
        ]
    )

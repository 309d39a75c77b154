import re

from ...models.sequence_models import SequenceType
from .sequence_ops import strip_whitespace

# Checked in order; the first full match wins, so "ACG" is DNA
TYPE_PATTERNS = (
    (SequenceType.DNA, re.compile(r"[ATCG]+", re.IGNORECASE | re.ASCII)),
    (SequenceType.RNA, re.compile(r"[AUCG]+", re.IGNORECASE | re.ASCII)),
    (SequenceType.PROTEIN, re.compile(r"[ACDEFGHIKLMNPQRSTVWY*]+", re.IGNORECASE | re.ASCII)),
)


def classify(sequence: str) -> SequenceType:
    clean_seq = strip_whitespace(sequence)
    if not clean_seq:
        return SequenceType.UNKNOWN

    for sequence_type, pattern in TYPE_PATTERNS:
        if pattern.fullmatch(clean_seq):
            return sequence_type

    return SequenceType.UNKNOWN

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..constants.constants import *


class SequenceType(Enum):
    DNA = SEQUENCE_TYPE_DNA
    RNA = SEQUENCE_TYPE_RNA
    PROTEIN = SEQUENCE_TYPE_PROTEIN
    UNKNOWN = SEQUENCE_TYPE_UNKNOWN

    @property
    def is_nucleic_acid(self) -> bool:
        return self in (SequenceType.DNA, SequenceType.RNA)


@dataclass(frozen=True)
class SequenceRecord:
    id: str
    description: str
    sequence: str
    type: SequenceType

    @property
    def header(self) -> str:
        if self.description:
            return f"{self.id}{FASTA_HEADER_SEPARATOR}{self.description}"
        return self.id


@dataclass(frozen=True)
class SequenceStats:
    length: int
    composition: dict[str, int] = field(default_factory=dict)
    gc_content: Optional[float] = None
    molecular_weight: Optional[float] = None


@dataclass(frozen=True)
class LengthSummary:
    count: int = 0
    total: int = 0
    average: int = 0
    longest: int = 0
    shortest: int = 0

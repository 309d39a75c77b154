from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TransformOperation(Enum):
    REVERSE_COMPLEMENT = "reverse-complement"
    TO_LOWERCASE = "to-lowercase"
    TO_UPPERCASE = "to-uppercase"
    DNA_TO_RNA = "dna-to-rna"
    RNA_TO_DNA = "rna-to-dna"
    DNA_TRANSLATE = "dna-translate"
    RNA_TRANSLATE = "rna-translate"
    SEQUENCE_LENGTH = "sequence-length"
    SEQUENCE_STATS = "sequence-stats"
    REMOVE_NEWLINES = "remove-newlines"


@dataclass(frozen=True)
class TransformResult:
    success: bool
    operation: TransformOperation
    result: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, operation: TransformOperation, result: str) -> "TransformResult":
        return cls(success=True, operation=operation, result=result)

    @classmethod
    def failure(cls, operation: TransformOperation, error: str) -> "TransformResult":
        return cls(success=False, operation=operation, error=error)

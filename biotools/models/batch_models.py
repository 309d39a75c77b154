from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .sequence_models import SequenceRecord, SequenceStats, SequenceType


class BatchOperation(Enum):
    REVERSE_COMPLEMENT = "reverse-complement"
    TRANSLATE = "translate"
    RNA_TO_DNA = "rna-to-dna"
    DNA_TO_RNA = "dna-to-rna"
    REMOVE_NEW_LINE = "remove-new-line"
    STATS = "stats"
    TO_LOWERCASE = "to-lowercase"
    TO_UPPERCASE = "to-uppercase"


@dataclass(frozen=True)
class BatchResult:
    success: bool
    sequence_id: str
    original_sequence: str
    sequence_type: SequenceType
    result: Optional[str] = None
    stats: Optional[SequenceStats] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.success and (self.result is None or self.error is not None):
            raise ValueError("A successful batch result carries a result and no error")
        if not self.success and (self.error is None or self.result is not None or self.stats is not None):
            raise ValueError("A failed batch result carries an error and nothing else")

    @classmethod
    def succeeded(
        cls, record: SequenceRecord, result: str, stats: Optional[SequenceStats] = None
    ) -> "BatchResult":
        return cls(
            success=True,
            sequence_id=record.id,
            original_sequence=record.sequence,
            sequence_type=record.type,
            result=result,
            stats=stats,
        )

    @classmethod
    def failed(cls, record: SequenceRecord, error: str) -> "BatchResult":
        return cls(
            success=False,
            sequence_id=record.id,
            original_sequence=record.sequence,
            sequence_type=record.type,
            error=error,
        )


@dataclass(frozen=True)
class BatchResponse:
    results: list[BatchResult] = field(default_factory=list)
    total_count: int = 0
    success_count: int = 0
    error_count: int = 0

    def __post_init__(self) -> None:
        if not (self.success_count + self.error_count == self.total_count == len(self.results)):
            raise ValueError(
                f"Inconsistent batch totals: {self.success_count} + {self.error_count} "
                f"!= {self.total_count} ({len(self.results)} results)"
            )

    @classmethod
    def from_results(cls, results: list[BatchResult]) -> "BatchResponse":
        success_count = sum(1 for result in results if result.success)
        return cls(
            results=list(results),
            total_count=len(results),
            success_count=success_count,
            error_count=len(results) - success_count,
        )

    @property
    def successful(self) -> list[BatchResult]:
        return [result for result in self.results if result.success]

    @property
    def failed(self) -> list[BatchResult]:
        return [result for result in self.results if not result.success]

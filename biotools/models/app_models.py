from dataclasses import dataclass
from typing import Optional

from .batch_models import BatchOperation, BatchResponse


@dataclass
class BatchRunResult:
    success: bool
    operation: BatchOperation
    response: Optional[BatchResponse] = None
    report: Optional[str] = None
    fasta_output: Optional[str] = None
    error: Optional[str] = None


@dataclass
class ToolInfo:
    identifier: str
    name: str
    description: str

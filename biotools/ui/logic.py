import logging
from typing import Union

from ..core.batch_processor import BATCH_OPERATIONS, BatchProcessor, resolve_batch_operation
from ..core.exceptions import BioToolsError
from ..core.sequence_tools import SEQUENCE_TOOLS, resolve_operation, transform
from ..models.app_models import BatchRunResult, ToolInfo
from ..models.batch_models import BatchOperation
from ..models.transform_models import TransformOperation, TransformResult
from .report import format_batch_report, results_to_fasta

logger = logging.getLogger(__name__)


class AppLogic:
    def __init__(self) -> None:
        self.batch_processor = BatchProcessor()

    def list_tools(self) -> list[ToolInfo]:
        return [
            ToolInfo(identifier=tool.operation.value, name=tool.name, description=tool.description)
            for tool in SEQUENCE_TOOLS.values()
        ]

    def list_batch_operations(self) -> list[ToolInfo]:
        return [
            ToolInfo(identifier=spec.operation.value, name=spec.name, description=spec.description)
            for spec in BATCH_OPERATIONS.values()
        ]

    def run_tool(self, sequence: str, operation: Union[str, TransformOperation]) -> TransformResult:
        result = transform(sequence, resolve_operation(operation))
        if not result.success:
            logger.warning(f"{result.operation.value} did not complete: {result.error}")
        return result

    def run_batch(self, fasta_content: str, operation: Union[str, BatchOperation]) -> BatchRunResult:
        batch_operation = resolve_batch_operation(operation)

        try:
            response = self.batch_processor.process(fasta_content, batch_operation)
        except BioToolsError as e:
            logger.error(f"Batch processing failed: {e}")
            return BatchRunResult(success=False, operation=batch_operation, error=str(e))

        # stats output is a report, not sequences
        fasta_output = None
        if batch_operation is not BatchOperation.STATS:
            fasta_output = results_to_fasta(response)

        return BatchRunResult(
            success=True,
            operation=batch_operation,
            response=response,
            report=format_batch_report(response, batch_operation),
            fasta_output=fasta_output,
        )

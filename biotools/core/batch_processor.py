import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..constants.constants import *
from ..models.batch_models import BatchOperation, BatchResponse, BatchResult
from ..models.sequence_models import SequenceRecord, SequenceStats, SequenceType
from ..settings import settings
from ..tools.bio import sequence_ops
from ..tools.bio.sequence_stats import calculate_stats, format_stats_summary
from ..tools.fasta.fasta_parser import FastaParser
from .exceptions import EmptyInputError, InputTooLargeError, UnsupportedOperationError

logger = logging.getLogger(__name__)

RecordOutput = tuple[str, Optional[SequenceStats]]

DNA_ONLY = frozenset({SequenceType.DNA})
RNA_ONLY = frozenset({SequenceType.RNA})
NUCLEIC_ACIDS = frozenset({SequenceType.DNA, SequenceType.RNA})


@dataclass(frozen=True)
class BatchOperationSpec:
    operation: BatchOperation
    name: str
    description: str
    process: Callable[[SequenceRecord], RecordOutput]
    allowed_types: Optional[frozenset[SequenceType]] = None
    type_error: Optional[str] = None

    def accepts(self, sequence_type: SequenceType) -> bool:
        return self.allowed_types is None or sequence_type in self.allowed_types


def _text_only(func: Callable[[str], str]) -> Callable[[SequenceRecord], RecordOutput]:
    def process(record: SequenceRecord) -> RecordOutput:
        return func(record.sequence), None

    return process


def _translate_record(record: SequenceRecord) -> RecordOutput:
    if record.type is SequenceType.RNA:
        return sequence_ops.translate_rna(record.sequence), None
    return sequence_ops.translate(record.sequence), None


def _stats_record(record: SequenceRecord) -> RecordOutput:
    stats = calculate_stats(record.sequence, record.type)
    return format_stats_summary(stats), stats


BATCH_OPERATIONS: dict[BatchOperation, BatchOperationSpec] = {
    spec.operation: spec
    for spec in (
        BatchOperationSpec(
            operation=BatchOperation.REVERSE_COMPLEMENT,
            name="Reverse Complement",
            description="Generate reverse complement sequence of DNA",
            process=_text_only(sequence_ops.reverse_complement),
            allowed_types=DNA_ONLY,
            type_error="Reverse complement only applies to DNA sequences",
        ),
        BatchOperationSpec(
            operation=BatchOperation.TRANSLATE,
            name="Translation",
            description="Translate DNA/RNA sequence to protein sequence",
            process=_translate_record,
            allowed_types=NUCLEIC_ACIDS,
            type_error="Translation only applies to DNA or RNA sequences",
        ),
        BatchOperationSpec(
            operation=BatchOperation.STATS,
            name="Statistical Analysis",
            description="Get sequence statistics (length, composition, GC content, etc.)",
            process=_stats_record,
        ),
        BatchOperationSpec(
            operation=BatchOperation.REMOVE_NEW_LINE,
            name="Remove Newlines",
            description="Remove newline characters from FASTA sequences",
            process=_text_only(sequence_ops.remove_newlines),
        ),
        BatchOperationSpec(
            operation=BatchOperation.TO_LOWERCASE,
            name="Convert to Lowercase",
            description="Convert all letters in FASTA sequences to lowercase",
            process=_text_only(sequence_ops.to_lowercase),
        ),
        BatchOperationSpec(
            operation=BatchOperation.TO_UPPERCASE,
            name="Convert to Uppercase",
            description="Convert all letters in FASTA sequences to uppercase",
            process=_text_only(sequence_ops.to_uppercase),
        ),
        BatchOperationSpec(
            operation=BatchOperation.DNA_TO_RNA,
            name="DNA to RNA",
            description="Convert DNA sequence to RNA sequence (T→U)",
            process=_text_only(sequence_ops.transcribe),
            allowed_types=DNA_ONLY,
            type_error="Transcription only applies to DNA sequences",
        ),
        BatchOperationSpec(
            operation=BatchOperation.RNA_TO_DNA,
            name="RNA to DNA",
            description="Convert RNA sequence to DNA sequence (U→T)",
            process=_text_only(sequence_ops.reverse_transcribe),
            allowed_types=RNA_ONLY,
            type_error="Reverse transcription only applies to RNA sequences",
        ),
    )
}


def resolve_batch_operation(operation: Union[str, BatchOperation]) -> BatchOperation:
    if isinstance(operation, BatchOperation):
        return operation
    try:
        return BatchOperation(operation)
    except ValueError:
        logger.error(f"Unsupported operation requested: {operation!r}")
        raise UnsupportedOperationError(
            operation, [op.value for op in BatchOperation]
        ) from None


def get_batch_operation(operation: Union[str, BatchOperation]) -> BatchOperationSpec:
    return BATCH_OPERATIONS[resolve_batch_operation(operation)]


class BatchProcessor:
    def __init__(
        self,
        parser: Optional[FastaParser] = None,
        parallel_threshold: Optional[int] = None,
        max_workers: Optional[int] = None,
    ):
        self.parser = parser or FastaParser()
        self.parallel_threshold = parallel_threshold or settings.batch_parallel_threshold
        self.max_workers = max_workers or settings.batch_max_workers

    def process(self, fasta_content: str, operation: Union[str, BatchOperation]) -> BatchResponse:
        spec = get_batch_operation(operation)
        self._check_input(fasta_content)

        records = self.parser.parse(fasta_content)
        results = self._run(records, spec)
        response = BatchResponse.from_results(results)

        logger.info(
            f"{spec.name}: processed {response.total_count} sequences "
            f"({response.success_count} succeeded, {response.error_count} failed)"
        )
        return response

    def _check_input(self, fasta_content: str) -> None:
        if not fasta_content or not fasta_content.strip():
            logger.error("Batch processing called with empty input")
            raise EmptyInputError(EMPTY_FASTA_MESSAGE)
        if len(fasta_content) > settings.max_input_length:
            logger.error(f"Batch input of {len(fasta_content):,} characters rejected")
            raise InputTooLargeError(len(fasta_content), settings.max_input_length)

    def _run(self, records: list[SequenceRecord], spec: BatchOperationSpec) -> list[BatchResult]:
        if len(records) < self.parallel_threshold or self.max_workers <= 1:
            return [self.process_record(record, spec) for record in records]

        logger.debug(f"Processing {len(records)} records on {self.max_workers} threads")
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            # map() yields in submission order
            return list(executor.map(lambda record: self.process_record(record, spec), records))

    def process_record(self, record: SequenceRecord, spec: BatchOperationSpec) -> BatchResult:
        if not spec.accepts(record.type):
            logger.warning(f"Skipping {record.id} ({record.type.value}): {spec.type_error}")
            return BatchResult.failed(record, spec.type_error or UNKNOWN_ERROR)

        try:
            result, stats = spec.process(record)
        except Exception as e:
            logger.error(f"{spec.name} failed for {record.id}: {e}")
            return BatchResult.failed(record, str(e) or UNKNOWN_ERROR)

        return BatchResult.succeeded(record, result, stats)


def batch_process(fasta_content: str, operation: Union[str, BatchOperation]) -> BatchResponse:
    return BatchProcessor().process(fasta_content, operation)

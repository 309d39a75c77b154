"""Tests for FASTA batch processing."""

import pytest

from biotools.core.batch_processor import (
    BATCH_OPERATIONS,
    BatchProcessor,
    batch_process,
    get_batch_operation,
)
from biotools.core.exceptions import EmptyInputError, InputTooLargeError, UnsupportedOperationError
from biotools.models.batch_models import BatchOperation, BatchResponse, BatchResult
from biotools.models.sequence_models import SequenceRecord, SequenceType
from biotools.settings import settings


def _assert_consistent(response: BatchResponse) -> None:
    assert response.success_count + response.error_count == response.total_count
    assert response.total_count == len(response.results)
    for result in response.results:
        if result.success:
            assert result.result is not None and result.error is None
        else:
            assert result.error is not None and result.result is None and result.stats is None


class TestBatchProcess:
    def test_dna_to_rna_rejects_rna(self, mixed_fasta):
        response = batch_process(mixed_fasta, "dna-to-rna")

        _assert_consistent(response)
        assert response.success_count == 1
        assert response.error_count == 1
        assert response.results[0].result == "AUCGAUCG"
        assert response.results[1].sequence_id == "seq2"
        assert "only applies to DNA sequences" in response.results[1].error

    def test_results_keep_input_order(self, typed_fasta):
        response = batch_process(typed_fasta, BatchOperation.TO_LOWERCASE)
        assert [result.sequence_id for result in response.results] == [
            "dna_1",
            "rna_1",
            "prot_1",
            "junk_1",
        ]
        assert response.success_count == 4

    def test_reverse_complement(self, typed_fasta):
        response = batch_process(typed_fasta, "reverse-complement")
        _assert_consistent(response)
        assert response.results[0].result == "CTATTTCAT"
        assert response.error_count == 3
        assert response.results[2].error == "Reverse complement only applies to DNA sequences"

    def test_rna_to_dna(self, typed_fasta):
        response = batch_process(typed_fasta, "rna-to-dna")
        assert response.results[1].result == "ATGAAATAG"
        assert response.results[0].error == "Reverse transcription only applies to RNA sequences"

    def test_translate_dna_and_rna(self, typed_fasta):
        response = batch_process(typed_fasta, "translate")
        _assert_consistent(response)
        assert response.results[0].result == "MK*"
        assert response.results[1].result == "MK*"
        assert response.results[2].error == "Translation only applies to DNA or RNA sequences"
        assert response.results[3].error == "Translation only applies to DNA or RNA sequences"

    def test_remove_new_line_has_no_type_restriction(self, typed_fasta):
        response = batch_process(typed_fasta, "remove-new-line")
        assert response.error_count == 0

    def test_stats(self, typed_fasta):
        response = batch_process(typed_fasta, "stats")
        _assert_consistent(response)
        assert response.error_count == 0

        dna = response.results[0]
        assert dna.result == "Length: 9, Composition: A:5, T:2, G:2"
        assert dna.stats.length == 9
        assert dna.stats.gc_content == 22.2
        assert dna.stats.molecular_weight == 9 * 650.0

        protein = response.results[2]
        assert protein.stats.gc_content is None
        assert protein.stats.molecular_weight == 4 * 110.0

        unknown = response.results[3]
        assert unknown.stats.molecular_weight is None

    def test_original_sequence_and_type_reported(self, mixed_fasta):
        result = batch_process(mixed_fasta, "to-uppercase").results[1]
        assert result.original_sequence == "AUCG"
        assert result.sequence_type == SequenceType.RNA

    def test_no_records(self):
        response = batch_process("just some text", "stats")
        assert response == BatchResponse()

    def test_unsupported_operation(self, mixed_fasta):
        with pytest.raises(UnsupportedOperationError, match="Unsupported operation: reverse"):
            batch_process(mixed_fasta, "reverse")

    @pytest.mark.parametrize("content", ["", "   \n\t"])
    def test_empty_input(self, content):
        with pytest.raises(EmptyInputError):
            batch_process(content, "stats")

    def test_input_too_large(self, monkeypatch):
        monkeypatch.setattr(settings, "max_input_length", 10)
        with pytest.raises(InputTooLargeError, match="exceeds"):
            batch_process(">a\nACGTACGTACGT", "stats")


class TestRecordIsolation:
    def test_failing_transform_is_recorded(self, monkeypatch, mixed_fasta):
        spec = get_batch_operation("to-uppercase")

        def explode(record):
            if record.id == "seq1":
                raise RuntimeError("boom")
            return record.sequence.upper(), None

        monkeypatch.setitem(
            BATCH_OPERATIONS,
            BatchOperation.TO_UPPERCASE,
            type(spec)(
                operation=spec.operation,
                name=spec.name,
                description=spec.description,
                process=explode,
            ),
        )

        response = batch_process(mixed_fasta, "to-uppercase")
        _assert_consistent(response)
        assert response.results[0].error == "boom"
        assert response.results[1].result == "AUCG"


class TestParallelProcessing:
    def test_parallel_matches_sequential(self):
        fasta = "\n".join(
            f">s{i}\n{'ACGU' if i % 3 == 0 else 'ATGAAATAG'}" for i in range(50)
        )
        sequential = BatchProcessor(parallel_threshold=1000, max_workers=1).process(fasta, "translate")
        parallel = BatchProcessor(parallel_threshold=2, max_workers=4).process(fasta, "translate")

        assert parallel == sequential
        assert [r.sequence_id for r in parallel.results] == [f"s{i}" for i in range(50)]


class TestBatchModels:
    def test_result_invariant(self):
        record = SequenceRecord(id="a", description="", sequence="AC", type=SequenceType.DNA)
        with pytest.raises(ValueError):
            BatchResult(
                success=True,
                sequence_id=record.id,
                original_sequence=record.sequence,
                sequence_type=record.type,
                result="x",
                error="y",
            )
        with pytest.raises(ValueError):
            BatchResult(
                success=False,
                sequence_id=record.id,
                original_sequence=record.sequence,
                sequence_type=record.type,
            )

    def test_response_invariant(self):
        with pytest.raises(ValueError, match="Inconsistent batch totals"):
            BatchResponse(results=[], total_count=1, success_count=1, error_count=0)

    def test_every_operation_is_registered(self):
        assert set(BATCH_OPERATIONS) == set(BatchOperation)

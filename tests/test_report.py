"""Tests for batch report rendering."""

from biotools.core.batch_processor import batch_process
from biotools.ui.report import format_batch_report, results_to_fasta


class TestFormatBatchReport:
    def test_transform_report(self, mixed_fasta):
        response = batch_process(mixed_fasta, "dna-to-rna")
        report = format_batch_report(response, "dna-to-rna")

        assert report.startswith("# Batch Processing Results - DNA to RNA\n")
        assert "**Total**: 2 sequences" in report
        assert "**Success**: 1" in report
        assert "**Failed**: 1" in report
        assert "- **seq2**: Transcription only applies to DNA sequences" in report
        assert "```\n>seq1\nAUCGAUCG\n```" in report

    def test_stats_report(self, mixed_fasta):
        response = batch_process(mixed_fasta, "stats")
        report = format_batch_report(response, "stats")

        assert "## Statistical Results" in report
        assert "- **Total Length**: 12 bp/aa" in report
        assert "- **Average Length**: 6 bp/aa" in report
        assert "- **Longest Sequence**: 8 bp/aa" in report
        assert "- **Shortest Sequence**: 4 bp/aa" in report
        assert "#### seq1" in report
        assert "- **Type**: DNA" in report
        assert "- **GC Content**: 50.0%" in report
        assert "- **Molecular Weight**: 5,200 Da" in report
        assert "  - A: 2 (25.0%)" in report
        assert "Error Information" not in report

    def test_error_list_is_capped(self):
        fasta = "\n".join(f">p{i}\nMKV" for i in range(5))
        response = batch_process(fasta, "translate")
        report = format_batch_report(response, "translate", max_errors=2)

        assert "- **p1**:" in report
        assert "- **p2**:" not in report
        assert "- ... and 3 more" in report
        assert "Processing Results" not in report


class TestResultsToFasta:
    def test_only_successful_results(self, mixed_fasta):
        response = batch_process(mixed_fasta, "rna-to-dna")
        assert results_to_fasta(response) == ">seq2\nATCG"

from typing import Optional, Union

from ..constants.constants import *
from ..core.batch_processor import get_batch_operation
from ..models.batch_models import BatchOperation, BatchResponse, BatchResult
from ..settings import settings
from ..tools.bio.sequence_stats import composition_percentages, summarize_lengths


def format_batch_report(
    response: BatchResponse,
    operation: Union[str, BatchOperation],
    max_errors: Optional[int] = None,
) -> str:
    spec = get_batch_operation(operation)
    max_errors = max_errors or settings.report_max_errors

    lines = [
        f"# Batch Processing Results - {spec.name}",
        "",
        f"**Total**: {response.total_count} sequences",
        f"**Success**: {response.success_count}",
        f"**Failed**: {response.error_count}",
        "",
    ]

    if response.error_count > 0:
        lines.extend(_format_errors(response.failed, max_errors))

    successful = response.successful
    if successful:
        if spec.operation is BatchOperation.STATS:
            lines.extend(_format_stats_section(successful))
        else:
            lines.extend(["## Processing Results", "", "```", results_to_fasta(response), "```"])

    return "\n".join(lines) + "\n"


def _format_errors(failed: list[BatchResult], max_errors: int) -> list[str]:
    lines = ["## Error Information", ""]
    for result in failed[:max_errors]:
        lines.append(f"- **{result.sequence_id}**: {result.error}")
    if len(failed) > max_errors:
        lines.append(f"- ... and {len(failed) - max_errors} more")
    lines.append("")
    return lines


def _format_stats_section(successful: list[BatchResult]) -> list[str]:
    summary = summarize_lengths(result.stats for result in successful if result.stats)

    lines = [
        "## Statistical Results",
        "",
        "### Summary Information",
        f"- **Total Length**: {summary.total:,} {LENGTH_UNIT_LABEL}",
        f"- **Average Length**: {summary.average:,} {LENGTH_UNIT_LABEL}",
        f"- **Longest Sequence**: {summary.longest:,} {LENGTH_UNIT_LABEL}",
        f"- **Shortest Sequence**: {summary.shortest:,} {LENGTH_UNIT_LABEL}",
        "",
        "### Detailed Statistics",
        "",
    ]

    for result in successful:
        stats = result.stats
        if not stats:
            continue

        lines.append(f"#### {result.sequence_id}")
        lines.append(f"- **Type**: {result.sequence_type.value}")
        lines.append(f"- **Length**: {stats.length:,}")
        if stats.gc_content is not None:
            lines.append(f"- **GC Content**: {stats.gc_content}%")
        if stats.molecular_weight is not None:
            lines.append(f"- **Molecular Weight**: {stats.molecular_weight:,.0f} {WEIGHT_UNIT_LABEL}")

        lines.append("- **Composition**:")
        percentages = composition_percentages(stats.composition)
        for char, count in sorted(stats.composition.items(), key=lambda item: item[1], reverse=True):
            lines.append(f"  - {char}: {count} ({percentages[char]:.1f}%)")
        lines.append("")

    return lines


def results_to_fasta(response: BatchResponse) -> str:
    return "\n".join(
        f"{FASTA_HEADER_PREFIX}{result.sequence_id}\n{result.result}"
        for result in response.successful
    )

import math
from typing import Iterable, Optional

from Bio.SeqUtils import gc_fraction

from ...constants.constants import *
from ...models.sequence_models import LengthSummary, SequenceStats, SequenceType
from .sequence_ops import clean_sequence, get_sequence_composition

# Average weight per residue; the products are rough estimates, not exact masses
MOLECULAR_WEIGHT_FACTORS = {
    SequenceType.DNA: DNA_AVERAGE_WEIGHT_PER_BASE,
    SequenceType.RNA: RNA_AVERAGE_WEIGHT_PER_BASE,
    SequenceType.PROTEIN: PROTEIN_AVERAGE_WEIGHT_PER_RESIDUE,
}

NUCLEOTIDE_BASES = ("A", "T", "U", "G", "C")


def calculate_stats(sequence: str, sequence_type: SequenceType) -> SequenceStats:
    composition = get_sequence_composition(sequence)
    length = sum(composition.values())

    gc_content = None
    if sequence_type.is_nucleic_acid:
        gc_content = _calculate_gc_content(sequence, composition)

    return SequenceStats(
        length=length,
        composition=composition,
        gc_content=gc_content,
        molecular_weight=_estimate_molecular_weight(length, sequence_type),
    )


def round_half_up(value: float, decimals: int = 0) -> float:
    scale = 10**decimals
    return math.floor(value * scale + 0.5) / scale


def _calculate_gc_content(sequence: str, composition: dict[str, int]) -> Optional[float]:
    # gc_fraction returns 0 when nothing is countable
    if not any(composition.get(base, 0) for base in NUCLEOTIDE_BASES):
        return None

    return round_half_up(
        gc_fraction(clean_sequence(sequence)) * PERCENTAGE_MULTIPLIER, GC_CONTENT_DECIMALS
    )


def _estimate_molecular_weight(length: int, sequence_type: SequenceType) -> Optional[float]:
    factor = MOLECULAR_WEIGHT_FACTORS.get(sequence_type)
    if factor is None:
        return None
    return float(length * factor)


def format_stats_summary(stats: SequenceStats) -> str:
    composition = ", ".join(f"{char}:{count}" for char, count in stats.composition.items())
    return f"Length: {stats.length}, Composition: {composition}"


def format_composition(composition: dict[str, int]) -> str:
    ordered = sorted(composition.items(), key=lambda item: item[1], reverse=True)
    return ", ".join(f"{char}: {count}" for char, count in ordered)


def composition_percentages(composition: dict[str, int]) -> dict[str, float]:
    total = sum(composition.values())
    if total == 0:
        return {char: 0.0 for char in composition}
    return {
        char: round_half_up(count / total * PERCENTAGE_MULTIPLIER, COMPOSITION_PERCENT_DECIMALS)
        for char, count in composition.items()
    }


def summarize_lengths(stats_list: Iterable[SequenceStats]) -> LengthSummary:
    lengths = [stats.length for stats in stats_list]
    if not lengths:
        return LengthSummary()

    return LengthSummary(
        count=len(lengths),
        total=sum(lengths),
        average=math.floor(sum(lengths) / len(lengths) + 0.5),
        longest=max(lengths),
        shortest=min(lengths),
    )

import logging
from typing import Iterable, Optional

from ...constants.constants import *
from ...models.sequence_models import SequenceRecord
from ...settings import settings
from ..bio.classifier import classify

logger = logging.getLogger(__name__)


class FastaParser:
    """Permissive FASTA reader/writer.

    Text before the first header is ignored and headers without any sequence
    lines are dropped rather than reported as errors.
    """

    def __init__(self, id_placeholder_prefix: Optional[str] = None):
        self.id_placeholder_prefix = id_placeholder_prefix or settings.id_placeholder_prefix

    def parse(self, content: str) -> list[SequenceRecord]:
        records: list[SequenceRecord] = []
        seen_ids: set[str] = set()
        current_id = ""
        current_description = ""
        current_lines: list[str] = []
        in_record = False

        for line in content.strip().split("\n"):
            line = line.strip()
            if line.startswith(FASTA_HEADER_PREFIX):
                if in_record:
                    self._emit(records, seen_ids, current_id, current_description, current_lines)

                current_id, current_description = self._parse_header(line, len(records))
                current_lines = []
                in_record = True
            elif line and in_record:
                current_lines.append(line)

        if in_record:
            self._emit(records, seen_ids, current_id, current_description, current_lines)

        logger.debug(f"Parsed {len(records)} FASTA records")
        return records

    def _parse_header(self, line: str, emitted_count: int) -> tuple[str, str]:
        header_parts = line[len(FASTA_HEADER_PREFIX) :].split(FASTA_HEADER_SEPARATOR)
        record_id = header_parts[0] or f"{self.id_placeholder_prefix}{emitted_count + 1}"
        description = FASTA_HEADER_SEPARATOR.join(header_parts[1:])
        return record_id, description

    def _emit(
        self,
        records: list[SequenceRecord],
        seen_ids: set[str],
        record_id: str,
        description: str,
        lines: list[str],
    ) -> None:
        sequence = "".join(lines)
        if not sequence:
            logger.warning(f"Dropping FASTA header '{record_id}' with no sequence data")
            return

        if record_id in seen_ids:
            logger.warning(f"Duplicate FASTA record id '{record_id}'")
        seen_ids.add(record_id)

        records.append(
            SequenceRecord(
                id=record_id,
                description=description,
                sequence=sequence,
                type=classify(sequence),
            )
        )

    def to_fasta(self, records: Iterable[SequenceRecord]) -> str:
        return "\n".join(
            f"{FASTA_HEADER_PREFIX}{record.header}\n{record.sequence}" for record in records
        )


def parse_fasta(content: str) -> list[SequenceRecord]:
    return FastaParser().parse(content)


def sequences_to_fasta(records: Iterable[SequenceRecord]) -> str:
    return FastaParser().to_fasta(records)

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..constants.constants import *
from ..models.transform_models import TransformOperation, TransformResult
from ..settings import settings
from ..tools.bio import sequence_ops
from ..tools.bio.sequence_stats import format_composition
from .exceptions import (
    EmptyInputError,
    InputTooLargeError,
    SequenceValidationError,
    UnsupportedOperationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceTool:
    operation: TransformOperation
    name: str
    description: str
    process: Callable[[str], str]
    validate: Optional[Callable[[str], bool]] = None
    required_alphabet: Optional[str] = None


def _describe_length(sequence: str) -> str:
    return f"Sequence length: {sequence_ops.get_sequence_length(sequence)} {LENGTH_UNIT_LABEL}"


def _describe_composition(sequence: str) -> str:
    return format_composition(sequence_ops.get_sequence_composition(sequence))


SEQUENCE_TOOLS: dict[TransformOperation, SequenceTool] = {
    tool.operation: tool
    for tool in (
        SequenceTool(
            operation=TransformOperation.REVERSE_COMPLEMENT,
            name="Reverse Complement",
            description="Generate reverse complement sequence of DNA",
            process=sequence_ops.reverse_complement,
            validate=sequence_ops.is_valid_dna,
            required_alphabet=SEQUENCE_TYPE_DNA,
        ),
        SequenceTool(
            operation=TransformOperation.TO_LOWERCASE,
            name="To Lowercase",
            description="Convert sequence to lowercase letters",
            process=sequence_ops.to_lowercase,
        ),
        SequenceTool(
            operation=TransformOperation.TO_UPPERCASE,
            name="To Uppercase",
            description="Convert sequence to uppercase letters",
            process=sequence_ops.to_uppercase,
        ),
        SequenceTool(
            operation=TransformOperation.DNA_TO_RNA,
            name="DNA to RNA",
            description="Transcribe DNA sequence to RNA sequence (T→U)",
            process=sequence_ops.transcribe,
            validate=sequence_ops.is_valid_dna,
            required_alphabet=SEQUENCE_TYPE_DNA,
        ),
        SequenceTool(
            operation=TransformOperation.RNA_TO_DNA,
            name="RNA to DNA",
            description="Reverse transcribe RNA sequence to DNA sequence (U→T)",
            process=sequence_ops.reverse_transcribe,
            validate=sequence_ops.is_valid_rna,
            required_alphabet=SEQUENCE_TYPE_RNA,
        ),
        SequenceTool(
            operation=TransformOperation.DNA_TRANSLATE,
            name="DNA Translate",
            description="Translate DNA sequence to protein sequence",
            process=sequence_ops.translate,
            validate=sequence_ops.is_valid_dna,
            required_alphabet=SEQUENCE_TYPE_DNA,
        ),
        SequenceTool(
            operation=TransformOperation.RNA_TRANSLATE,
            name="RNA Translate",
            description="Translate RNA sequence to protein sequence",
            process=sequence_ops.translate_rna,
            validate=sequence_ops.is_valid_rna,
            required_alphabet=SEQUENCE_TYPE_RNA,
        ),
        SequenceTool(
            operation=TransformOperation.SEQUENCE_LENGTH,
            name="Sequence Length",
            description="Calculate the length of sequence (excluding spaces)",
            process=_describe_length,
        ),
        SequenceTool(
            operation=TransformOperation.SEQUENCE_STATS,
            name="Sequence Statistics",
            description="Count nucleotides/amino acids in the sequence",
            process=_describe_composition,
        ),
        SequenceTool(
            operation=TransformOperation.REMOVE_NEWLINES,
            name="Remove Newlines",
            description="Remove all newline characters from text",
            process=sequence_ops.remove_newlines,
        ),
    )
}


def resolve_operation(operation: Union[str, TransformOperation]) -> TransformOperation:
    if isinstance(operation, TransformOperation):
        return operation
    try:
        return TransformOperation(operation)
    except ValueError:
        logger.error(f"Unsupported operation requested: {operation!r}")
        raise UnsupportedOperationError(
            operation, [op.value for op in TransformOperation]
        ) from None


def get_tool(operation: Union[str, TransformOperation]) -> SequenceTool:
    return SEQUENCE_TOOLS[resolve_operation(operation)]


def check_input(sequence: str) -> None:
    if not sequence or not sequence.strip():
        raise EmptyInputError(EMPTY_INPUT_MESSAGE)
    if len(sequence) > settings.max_input_length:
        raise InputTooLargeError(len(sequence), settings.max_input_length)


def validate_sequence(tool: SequenceTool, sequence: str) -> None:
    if tool.validate and not tool.validate(sequence):
        raise SequenceValidationError(tool.name, tool.required_alphabet or SEQUENCE_TYPE_UNKNOWN)


def transform(sequence: str, operation: Union[str, TransformOperation]) -> TransformResult:
    tool = get_tool(operation)

    try:
        check_input(sequence)
        validate_sequence(tool, sequence)
    except (EmptyInputError, InputTooLargeError, SequenceValidationError) as e:
        logger.error(f"{tool.name} rejected input: {e}")
        return TransformResult.failure(tool.operation, str(e))

    result = tool.process(sequence)
    logger.debug(f"{tool.name} produced {len(result)} characters")
    return TransformResult.ok(tool.operation, result)

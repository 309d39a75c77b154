# Sequence type labels
SEQUENCE_TYPE_DNA = "DNA"
SEQUENCE_TYPE_RNA = "RNA"
SEQUENCE_TYPE_PROTEIN = "PROTEIN"
SEQUENCE_TYPE_UNKNOWN = "UNKNOWN"

# Codon translation
CODON_LENGTH = 3
STOP_SYMBOL = "*"
UNKNOWN_AMINO_ACID = "X"
STANDARD_CODON_TABLE_ID = 1

# Average residue weights (Da), estimates only
DNA_AVERAGE_WEIGHT_PER_BASE = 650
RNA_AVERAGE_WEIGHT_PER_BASE = 340
PROTEIN_AVERAGE_WEIGHT_PER_RESIDUE = 110

PERCENTAGE_MULTIPLIER = 100
GC_CONTENT_DECIMALS = 1
COMPOSITION_PERCENT_DECIMALS = 1

# FASTA
FASTA_HEADER_PREFIX = ">"
FASTA_HEADER_SEPARATOR = " "
DEFAULT_ID_PLACEHOLDER_PREFIX = "seq_"

# Settings defaults
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_INPUT_LENGTH = 10_000_000
DEFAULT_BATCH_PARALLEL_THRESHOLD = 500
DEFAULT_BATCH_MAX_WORKERS = 4
DEFAULT_REPORT_MAX_ERRORS = 100
VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

# Messages
EMPTY_INPUT_MESSAGE = "Input sequence is empty"
EMPTY_FASTA_MESSAGE = "Please enter FASTA format sequence content"
UNKNOWN_ERROR = "Unknown error"
LENGTH_UNIT_LABEL = "bp/aa"
WEIGHT_UNIT_LABEL = "Da"

# UI
UI_TEXTAREA_HEIGHT = 220
UI_PAGE_TITLE = "biotools"
UI_FASTA_PLACEHOLDER = """>seq1_dna_sample
ATCGATCGATCGATCGATCG
>seq2_longer_dna
ATGAAATTTGGGCCCAAATTTGGGCCC
>seq3_rna_sample
AUCGAUCGAUCGAUCGAUCG"""

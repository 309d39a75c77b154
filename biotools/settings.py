import logging
from pydantic_settings import BaseSettings

from .constants.constants import *

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    log_level: str = DEFAULT_LOG_LEVEL

    # Input limits
    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH

    # Batch processing
    batch_parallel_threshold: int = DEFAULT_BATCH_PARALLEL_THRESHOLD
    batch_max_workers: int = DEFAULT_BATCH_MAX_WORKERS

    # FASTA parsing
    id_placeholder_prefix: str = DEFAULT_ID_PLACEHOLDER_PREFIX

    # Reporting
    report_max_errors: int = DEFAULT_REPORT_MAX_ERRORS

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        for field_name in (
            "max_input_length",
            "batch_parallel_threshold",
            "batch_max_workers",
            "report_max_errors",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"{field_name.upper()} must be a positive integer.")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {self.log_level!r}."
            )
        self.log_level = self.log_level.upper()

    model_config = {
        "env_file": ".env",
        "env_prefix": "BIOTOOLS_",
        "case_sensitive": False,
        "extra": "allow",
    }


settings = Settings()

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_HOST = "http://localhost:9200"
DEFAULT_INDEX_NAME = "test_index_01"
DEFAULT_BATCH_SIZE = 1000
DEFAULT_LOG_LEVEL = "info"


class SeederSettings(BaseModel):
    """Runtime settings for a seeding run."""

    host: str = Field(default=DEFAULT_HOST, description="Elasticsearch node URI")
    index_name: str = Field(
        default=DEFAULT_INDEX_NAME, min_length=1, description="Destination index"
    )
    size: int = Field(
        default=DEFAULT_BATCH_SIZE, ge=0, description="Number of documents to generate"
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")
    log_file: Optional[str] = Field(
        default=None, description="Optional path of a log file"
    )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "SeederSettings":
        """
        Build settings from environment variables, loading a .env file first.

        Variables already set in the environment win over the .env file.
        """
        load_dotenv(dotenv_path)
        return cls(
            host=os.getenv("ES_HOST", DEFAULT_HOST),
            index_name=os.getenv("INDEX_NAME", DEFAULT_INDEX_NAME),
            size=os.getenv("BATCH_SIZE", DEFAULT_BATCH_SIZE),
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL),
            log_file=os.getenv("LOG_FILE") or None,
        )

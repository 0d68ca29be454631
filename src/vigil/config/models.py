# src/vigil/config/models.py

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DemoMessages(BaseModel):
    model_config = ConfigDict(extra="forbid")

    warning: str = "This is a warning message."
    error: str = "This is an error message."
    fatal: str = "This is a fatal error message."


class VigilConfig(BaseModel):
    """Settings for the demonstration run."""

    model_config = ConfigDict(extra="forbid")

    error_log: Path = Path("error_log.txt")          # FileErrorListener target
    fatal_log: Path = Path("fatal_error_log.txt")    # ConsoleAndFileFatalListener target
    isolate_failures: bool = False                   # keep dispatching when a listener raises
    log_dir: Optional[Path] = None                   # diagnostic run log; none when unset
    messages: DemoMessages = Field(default_factory=DemoMessages)

import pydantic
from typing import Literal, Optional


class WordStatsArgs(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="forbid")

    source_dir: str = "."
    include_subdirectories: bool = True
    output_format: Literal["text", "table", "json"] = "text"

    log_level: str = "WARNING"
    log_file: Optional[str] = None

    file: Optional[str] = None

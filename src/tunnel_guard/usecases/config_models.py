from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures; unknown keys fail fast.


class ScanConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # Number of preceding steps a new step may be composed from.
    window_length: int = Field(default=25, ge=1)


class InputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    value_type: Literal["int", "decimal"] = "int"
    encoding: str = "utf-8"


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    format: Literal["text", "json"] = "text"
    # Display-only offset; the scanner always reports 0-based indices.
    index_base: Literal[0, 1] = 0
    # Accept both output.file and output.file_path; stdout when absent.
    file_path: str | None = Field(default=None, validation_alias=AliasChoices("file_path", "file"))
    atomic_replace: bool = False


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stdout", "stderr", "jsonl"] = "none"
    path: str | None = None
    level: Literal["debug", "info", "warning", "error"] = "info"

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    scan: ScanConfig = Field(default_factory=ScanConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

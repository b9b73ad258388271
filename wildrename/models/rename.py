"""Rename operation data models."""

from pydantic import BaseModel, ConfigDict, Field

from wildrename.models.pattern import PatternShape


class RenameMapping(BaseModel):
    """A single computed file rename."""

    model_config = ConfigDict(frozen=True)

    source_name: str = Field(description="Original filename (without directory path)")
    dest_name: str = Field(description="New filename (without directory path)")

    def __str__(self) -> str:
        return f"'{self.source_name}' -> '{self.dest_name}'"


class RenamePlan(BaseModel):
    """All renames computed for one batch, in candidate order."""

    shape: PatternShape = Field(description="Shape of the pattern pair the batch was mapped with")
    mappings: list[RenameMapping] = Field(
        description="List of rename mappings to perform",
        default_factory=list,
    )

    def __len__(self) -> int:
        return len(self.mappings)

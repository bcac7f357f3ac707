"""Move operation data models."""

from pydantic import BaseModel, Field


class MoveOp(BaseModel):
    """A single file move operation."""

    source: str = Field(description="Path of the matched source file")
    destination: str = Field(description="Path the source file is moved to")
    captures: list[str] = Field(
        description="Substrings matched by each wildcard of the source pattern",
        default_factory=list,
    )
    replaces_existing: bool = Field(
        description="Whether an existing file at the destination is replaced (force mode)",
        default=False,
    )

    @property
    def is_same(self) -> bool:
        """Whether source and destination name the same path."""
        return self.source == self.destination

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"


class MovePlan(BaseModel):
    """All moves of one batch, computed before anything touches the disk."""

    operations: list[MoveOp] = Field(
        description="Move operations in source enumeration order",
        default_factory=list,
    )
    output_directory: str = Field(
        description="Directory component of the destination template",
        default="",
    )

    def __len__(self) -> int:
        return len(self.operations)

    @property
    def replaced_count(self) -> int:
        """Number of operations replacing an existing destination."""
        return sum(1 for op in self.operations if op.replaces_existing)

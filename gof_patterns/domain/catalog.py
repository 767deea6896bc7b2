"""Catalog models - pattern metadata and demo results."""
import re
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from gof_patterns.domain.exceptions import ValidationError


class PatternCategory(str, Enum):
    """GoF pattern families."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @classmethod
    def parse(cls, value: str) -> "PatternCategory":
        """Parse a category name, case-insensitively."""
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            valid = [c.value for c in cls]
            raise ValidationError(
                f"Invalid category '{value}'. Must be one of: {valid}"
            ) from e


_SEPARATORS = re.compile(r"[\s_]+")


def normalize_pattern_name(value: str) -> str:
    """
    Normalize a pattern name to its registry slug.

    Args:
        value: Human or slug form, e.g. "Chain of Responsibility"

    Returns:
        Lower-case slug with hyphens, e.g. "chain-of-responsibility"
    """
    slug = _SEPARATORS.sub("-", value.strip().lower())
    if not slug:
        raise ValidationError("Pattern name must not be empty")
    return slug


class PatternInfo(BaseModel):
    """Descriptive metadata for one design pattern."""
    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    category: PatternCategory
    intent: str
    applicability: List[str] = Field(default_factory=list)
    identification: str = ""
    complexity: int = Field(1, ge=0, le=3)
    popularity: int = Field(1, ge=0, le=3)
    reference_url: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Store names as slugs."""
        return normalize_pattern_name(v)


class DemoResult(BaseModel):
    """Captured console output of one demo run."""
    pattern: str
    variant: str
    output: str
    duration_ms: float = 0.0

    @computed_field
    @property
    def lines(self) -> List[str]:
        """Output split into lines."""
        return self.output.splitlines()

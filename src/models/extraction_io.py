"""
Typed Pydantic models for the extraction layer → audit engine interface.

Covers the auxiliary blocks of the extraction payload (metadata and the
inconsistencies the LLM reported on its own). The financial figures are not
modelled here: they go to FinancialStatement untouched so the structural
check can report malformed values instead of rejecting the payload.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from src.models.statement import FinancialStatement


class ReportedInconsistency(BaseModel):
    """An inconsistency reported by the extraction LLM (advisory only)."""

    tipo: str = Field(..., description="Short inconsistency label.")
    descricao: str = Field(..., description="Free-text description.")
    nivel_criticidade: str = Field(..., description="'baixo' | 'médio' | 'alto'")

    @field_validator("nivel_criticidade")
    @classmethod
    def validate_nivel(cls, v: str) -> str:
        normalized = v.strip().lower().replace("medio", "médio")
        allowed = {"baixo", "médio", "alto"}
        if normalized not in allowed:
            raise ValueError(f"nivel_criticidade must be one of {allowed}, got '{v}'")
        return normalized


class ExtractionMetadata(BaseModel):
    """Provenance of the extracted figures."""

    extraction_method: Literal["llm", "fallback", "sample"]
    processing_time_ms: int = Field(0, ge=0)
    file_size_bytes: int = Field(0, ge=0)
    confidence_score: float = Field(..., ge=0.0, le=1.0)
    warnings: List[str] = Field(default_factory=list)


@dataclass(frozen=True)
class ExtractionPayload:
    """Parsed extraction payload: the statement plus its advisory blocks."""

    statement: FinancialStatement
    inconsistencias: Tuple[ReportedInconsistency, ...] = field(default=())
    metadata: Optional[ExtractionMetadata] = None

    @property
    def is_sample_data(self) -> bool:
        """True when the extractor fell back to synthetic figures."""
        return self.metadata is not None and self.metadata.extraction_method != "llm"

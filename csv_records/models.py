from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class EncodingReport(BaseModel):
    detected: Optional[str] = None
    decode_used: str
    decode_fallback: bool = False


class ReportSummary(BaseModel):
    rows: int = 0
    columns: int = 0
    warnings: int = 0
    errors: int = 0


class ReportItem(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class ParseReport(BaseModel):
    summary: ReportSummary
    encoding: EncodingReport
    warnings: List[ReportItem] = Field(default_factory=list)
    errors: List[ReportItem] = Field(default_factory=list)


class ParseResponse(BaseModel):
    separator: str = Field(default=",")
    header: List[str] = Field(default_factory=list)
    records: List[Dict[str, str]] = Field(default_factory=list)
    report: ParseReport

class HealthResponse(BaseModel):
    ok: bool = True

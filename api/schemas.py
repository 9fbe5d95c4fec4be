from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict


class FlatRateRecordModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sleeve: str
    colour: str
    clarity: str
    rate: float


class MatrixRateRecordModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sleeve: str
    colour: str
    vvs: float = 0.0
    vs1: float = 0.0
    vs2: float = 0.0
    si1: float = 0.0
    si2: float = 0.0
    si3: float = 0.0
    i1: float = 0.0
    i2: float = 0.0


class RecordsResponse(BaseModel):
    layout: str
    count: int
    records: List[Union[FlatRateRecordModel, MatrixRateRecordModel]]


class PipelineStatusResponse(BaseModel):
    ok: bool
    layout: str
    count: int
    error_kind: Optional[str] = None
    message: Optional[str] = None

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Tuple, Union


CLARITY_GRADES: Tuple[str, ...] = ("vvs", "vs1", "vs2", "si1", "si2", "si3", "i1", "i2")


@dataclass(frozen=True)
class FlatRateRecord:
    sleeve: str
    colour: str
    clarity: str
    rate: float

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class MatrixRateRecord:
    """One sleeve/colour row priced across every clarity grade (0 = not priced)."""

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

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    def rates(self) -> Dict[str, float]:
        return {grade: getattr(self, grade) for grade in CLARITY_GRADES}


PriceRecord = Union[FlatRateRecord, MatrixRateRecord]

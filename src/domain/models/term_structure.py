"""Term structure domain models.

TermStructureSummary — front-spread reading of a VIX futures curve.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .enums import TermStructureState


class TermStructureSummary(BaseModel):
    """M1/M2 reading of the curve.

    Missing tenors count as 0.0.  spread = m2_price − m1_price; the curve is
    in CONTANGO when spread ≥ 0 and BACKWARDATION otherwise.
    """

    model_config = ConfigDict(frozen=True)

    m1_price: float
    m2_price: float
    spread: float
    state: TermStructureState

    @property
    def is_contango(self) -> bool:
        return self.state == TermStructureState.CONTANGO

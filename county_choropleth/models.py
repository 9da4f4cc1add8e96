# county_choropleth/models.py

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EducationRecord:
    """One county's share of adults holding a bachelor's degree or higher."""
    fips: int
    area_name: str
    state: str
    bachelorsOrHigher: float


@dataclass(frozen=True)
class CountyGeometry:
    """A decoded county shape, keyed by the FIPS code it joins on."""
    id: int
    geometry: Any

# county_choropleth/join.py

import logging
from typing import Dict, Iterable

from .exceptions import JoinMismatchError
from .models import EducationRecord

logger = logging.getLogger(__name__)

class JoinIndex:
    """
    Maps county FIPS codes to their education record.

    Built once from the education dataset. When several records share a FIPS code the
    first one in dataset order wins. A lookup for an unknown code raises
    JoinMismatchError; the caller aborts the render rather than substituting a default.
    """

    def __init__(self, records_by_fips: Dict[int, EducationRecord]):
        self._records = records_by_fips

    @classmethod
    def from_records(cls, records: Iterable[EducationRecord]) -> 'JoinIndex':
        records_by_fips = {}
        duplicates = 0
        for record in records:
            if record.fips in records_by_fips:
                duplicates += 1
                continue
            records_by_fips[record.fips] = record
        if duplicates:
            logger.warning(f"Ignored {duplicates} education records with a repeated FIPS code.")
        logger.info(f"Join index built with {len(records_by_fips)} counties.")
        return cls(records_by_fips)

    def lookup(self, fips: int) -> EducationRecord:
        try:
            return self._records[fips]
        except KeyError:
            raise JoinMismatchError(f"No education record for county FIPS {fips}.") from None

    def __contains__(self, fips) -> bool:
        return fips in self._records

    def __len__(self) -> int:
        return len(self._records)

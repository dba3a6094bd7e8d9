"""
models.py — Python dataclasses for the garden planner application.

Plant mirrors the records handed out by the plant provider;
CompatibilityReport and MonthRange are produced by the companion engine
and the month-range codec. Seed-calendar entries stay plain dicts.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass
class Plant:
    """
    A plant as seen by the companion engine.

    companions / antagonists are None when the record has not been
    loaded yet (see companion_engine.enrich_plants); the engine treats
    None as an empty list.
    """
    id: str = ""
    name: str = ""
    companions: Optional[List[str]] = None
    antagonists: Optional[List[str]] = None
    benefits: Optional[List[str]] = None
    scientific_name: str = ""
    description: str = ""

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Plant":
        """Build a Plant from a provider dict, keeping ids as strings."""
        def listed(key):
            value = record.get(key)
            if value is None:
                return None
            # A bare string is not a list of ids or benefits
            return list(value) if isinstance(value, (list, tuple)) else []

        def id_list(key):
            values = listed(key)
            return None if values is None else [str(v) for v in values]

        def benefit_list():
            values = listed('benefits')
            return None if values is None else [b for b in values if isinstance(b, str)]

        def text(key):
            value = record.get(key)
            return value if isinstance(value, str) else ''

        return cls(
            id=str(record.get('id', '')),
            name=text('name'),
            companions=id_list('companions'),
            antagonists=id_list('antagonists'),
            benefits=benefit_list(),
            scientific_name=text('scientific_name'),
            description=text('description'),
        )

    @property
    def is_complete(self) -> bool:
        """True when both relationship lists have been loaded."""
        return self.companions is not None and self.antagonists is not None


@dataclass
class CompatibilityBucket:
    """Pair labels plus the reasons collected for them."""
    pairs: List[str] = field(default_factory=list)
    reasons: List[str] = field(default_factory=list)


@dataclass
class CompatibilityReport:
    """Result of classifying every unordered pair of selected plants."""
    compatible: CompatibilityBucket = field(default_factory=CompatibilityBucket)
    incompatible: CompatibilityBucket = field(default_factory=CompatibilityBucket)
    neutral: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.compatible.pairs or self.incompatible.pairs or self.neutral)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'compatible': {
                'pairs': list(self.compatible.pairs),
                'reasons': list(self.compatible.reasons),
            },
            'incompatible': {
                'pairs': list(self.incompatible.pairs),
                'reasons': list(self.incompatible.reasons),
            },
            'neutral': list(self.neutral),
        }


@dataclass
class MonthRange:
    """Inclusive, non-wrapping run of month indices (0 = January)."""
    start: int = 0
    end: int = 0

    @property
    def length(self) -> int:
        return self.end - self.start + 1


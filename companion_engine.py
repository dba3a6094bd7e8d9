"""
companion_engine.py — Companion planting analysis for a selection of plants.

This module implements:
- Pairwise classification of selected plants into compatible,
  incompatible and neutral pairs
- Reason aggregation: plant benefits for compatible pairs, generic
  cautions for incompatible pairs
- Optional enrichment of partially loaded plants from a plant provider

Algorithm details:
- Every unordered pair (i, j) with i < j is evaluated, in input order
- Relationship data is not symmetric: a pair is companion if EITHER plant
  lists the other as a companion (same for antagonists)
- Precedence: compatible > incompatible > neutral. A pair listed both as
  companion and antagonist is reported as compatible.
- Reasons are deduplicated at the end, first occurrence wins
"""

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from models import Plant, CompatibilityReport


logger = logging.getLogger(__name__)

DEFAULT_BENEFIT = "Enhance growth and health"

INCOMPATIBLE_REASONS = (
    "May inhibit growth",
    "Compete for resources",
    "Potential pest attraction",
)

PlantProvider = Callable[[List[str]], Iterable[dict]]


def pair_label(first: Plant, second: Plant) -> str:
    """Display label for a pair, in selection order (not alphabetical)."""
    return f"{first.name} & {second.name}"


def _dedupe(items: Iterable[str]) -> List[str]:
    """Drop repeated strings, keeping first-occurrence order."""
    return list(dict.fromkeys(items))


def _lists(plant: Plant, other: Plant, attr: str) -> bool:
    return other.id in (getattr(plant, attr) or [])


def is_companion_pair(first: Plant, second: Plant) -> bool:
    return _lists(first, second, 'companions') or _lists(second, first, 'companions')


def is_antagonist_pair(first: Plant, second: Plant) -> bool:
    return _lists(first, second, 'antagonists') or _lists(second, first, 'antagonists')


def classify(plants: Sequence[Plant]) -> CompatibilityReport:
    """
    Classify every unordered pair of plants.

    Args:
        plants: Selected plants, in the order the user picked them.

    Returns:
        CompatibilityReport. Empty when fewer than two plants are given.
    """
    report = CompatibilityReport()
    if len(plants) < 2:
        return report

    for i in range(len(plants)):
        for j in range(i + 1, len(plants)):
            first, second = plants[i], plants[j]
            label = pair_label(first, second)

            if is_companion_pair(first, second):
                report.compatible.pairs.append(label)
                benefits = _dedupe(list(first.benefits or []) + list(second.benefits or []))
                if benefits:
                    report.compatible.reasons.extend(benefits)
                else:
                    report.compatible.reasons.append(DEFAULT_BENEFIT)
            elif is_antagonist_pair(first, second):
                report.incompatible.pairs.append(label)
                report.incompatible.reasons.extend(INCOMPATIBLE_REASONS)
            else:
                report.neutral.append(label)

    report.compatible.reasons = _dedupe(report.compatible.reasons)
    report.incompatible.reasons = _dedupe(report.incompatible.reasons)
    return report


def enrich_plants(plants: Sequence[Plant], provider: PlantProvider) -> List[Plant]:
    """
    Fill in relationship data for plants that were only partially loaded.

    The provider is called once with every selected id, and only when at
    least one plant is missing its companions or antagonists. Record
    fields override the plant's own. Plants without a record, and every
    plant when the provider fails, are returned unchanged.
    """
    plants = list(plants)
    if all(p.is_complete for p in plants):
        return plants

    try:
        records = list(provider([p.id for p in plants]))
    except Exception:
        logger.exception("Could not load companion data for %d plants", len(plants))
        return plants

    if not records:
        logger.debug("Plant provider returned no records")
        return plants

    by_id = {str(r.get('id')): r for r in records}
    enriched = []
    for plant in plants:
        record = by_id.get(plant.id)
        if record is None:
            enriched.append(plant)
            continue
        merged = {
            'id': plant.id,
            'name': plant.name,
            'companions': plant.companions,
            'antagonists': plant.antagonists,
            'benefits': plant.benefits,
            'scientific_name': plant.scientific_name,
            'description': plant.description,
        }
        merged.update({k: v for k, v in record.items() if k in merged and k != 'id'})
        enriched.append(Plant.from_record(merged))
    return enriched


def analyze(plants: Sequence[Plant], provider: Optional[PlantProvider] = None) -> CompatibilityReport:
    """Enrich (when a provider is given) and classify a plant selection."""
    if len(plants) < 2:
        return CompatibilityReport()
    if provider is not None:
        plants = enrich_plants(plants, provider)
    return classify(plants)

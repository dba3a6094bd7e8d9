"""
tests/test_companion_engine.py — Unit tests for the companion planting analysis.

Tests cover:
- Empty and single-plant selections
- Pair classification in both relationship directions
- Compatible-over-incompatible precedence
- Reason aggregation, fallback reason and deduplication
- Enrichment of partially loaded plants from a provider
"""

from itertools import combinations

import pytest

from companion_engine import (
    classify,
    enrich_plants,
    analyze,
    pair_label,
    DEFAULT_BENEFIT,
    INCOMPATIBLE_REASONS,
)
from models import Plant


def _plant(id, name, companions=None, antagonists=None, benefits=None):
    return Plant(id=id, name=name, companions=companions, antagonists=antagonists, benefits=benefits)


@pytest.fixture
def garden():
    return [
        _plant('t', 'Tomato', companions=['b'], antagonists=['p'], benefits=['Improves flavor']),
        _plant('b', 'Basil', benefits=['Repels flies']),
        _plant('p', 'Potato', antagonists=['c']),
        _plant('c', 'Cucumber'),
        _plant('m', 'Marigold', companions=['t']),
    ]


class TestEmptySelections:

    def test_no_plants(self):
        report = classify([])
        assert report.compatible.pairs == []
        assert report.compatible.reasons == []
        assert report.incompatible.pairs == []
        assert report.incompatible.reasons == []
        assert report.neutral == []
        assert report.is_empty

    def test_single_plant(self):
        report = classify([_plant('t', 'Tomato', companions=['t'])])
        assert report.is_empty


class TestScenarios:

    def test_tomato_and_basil(self):
        plants = [
            _plant('t', 'Tomato', companions=['b'], benefits=['Improves flavor']),
            _plant('b', 'Basil'),
        ]
        report = classify(plants)

        assert report.compatible.pairs == ['Tomato & Basil']
        assert report.compatible.reasons == ['Improves flavor']
        assert report.incompatible.pairs == []
        assert report.incompatible.reasons == []
        assert report.neutral == []

    def test_potato_and_cucumber(self):
        plants = [_plant('p', 'Potato', antagonists=['c']), _plant('c', 'Cucumber')]
        report = classify(plants)

        assert report.incompatible.pairs == ['Potato & Cucumber']
        assert report.incompatible.reasons == list(INCOMPATIBLE_REASONS)
        assert report.compatible.pairs == []
        assert report.neutral == []


class TestClassification:

    def test_every_pair_in_exactly_one_bucket(self, garden):
        report = classify(garden)
        all_pairs = report.compatible.pairs + report.incompatible.pairs + report.neutral

        expected = [pair_label(a, b) for a, b in combinations(garden, 2)]
        assert sorted(all_pairs) == sorted(expected)
        assert len(all_pairs) == len(set(all_pairs))

    def test_relationship_listed_by_second_plant(self):
        plants = [_plant('b', 'Basil'), _plant('t', 'Tomato', companions=['b'])]
        assert classify(plants).compatible.pairs == ['Basil & Tomato']

    def test_antagonist_listed_by_second_plant(self):
        plants = [_plant('c', 'Cucumber'), _plant('p', 'Potato', antagonists=['c'])]
        assert classify(plants).incompatible.pairs == ['Cucumber & Potato']

    def test_compatible_wins_over_incompatible(self):
        plants = [
            _plant('a', 'Dill', companions=['b']),
            _plant('b', 'Carrot', antagonists=['a']),
        ]
        report = classify(plants)
        assert report.compatible.pairs == ['Dill & Carrot']
        assert report.incompatible.pairs == []

    def test_neutral_pairs(self, garden):
        report = classify(garden)
        assert 'Basil & Cucumber' in report.neutral
        assert 'Tomato & Cucumber' in report.neutral

    def test_label_keeps_input_order_and_casing(self):
        plants = [_plant('z', 'zucchini'), _plant('a', 'Asparagus')]
        assert classify(plants).neutral == ['zucchini & Asparagus']

    def test_ids_are_compared_exactly(self):
        plants = [_plant('T1', 'Tomato', companions=['b1']), _plant('B1', 'Basil')]
        report = classify(plants)
        assert report.compatible.pairs == []
        assert report.neutral == ['Tomato & Basil']

    def test_missing_fields_are_empty(self):
        plants = [Plant(id='x', name='X'), Plant(id='y', name='Y')]
        assert classify(plants).neutral == ['X & Y']


class TestReasons:

    def test_fallback_reason_without_benefits(self):
        plants = [_plant('a', 'Beans', companions=['b']), _plant('b', 'Corn')]
        assert classify(plants).compatible.reasons == [DEFAULT_BENEFIT]

    def test_benefits_from_both_plants(self, garden):
        report = classify(garden)
        assert report.compatible.reasons[:2] == ['Improves flavor', 'Repels flies']

    def test_reasons_are_deduplicated(self):
        plants = [
            _plant('t', 'Tomato', companions=['b', 'm'], benefits=['Repels aphids']),
            _plant('b', 'Basil', benefits=['Repels aphids']),
            _plant('m', 'Marigold', benefits=['Repels aphids', 'Repels nematodes']),
            _plant('p', 'Potato', antagonists=['t', 'b']),
        ]
        report = classify(plants)

        assert report.compatible.reasons == ['Repels aphids', 'Repels nematodes']
        assert len(report.incompatible.pairs) == 2
        assert report.incompatible.reasons == list(INCOMPATIBLE_REASONS)

    def test_fallback_reason_mixed_with_benefits(self):
        plants = [
            _plant('a', 'Beans', companions=['b', 'c']),
            _plant('b', 'Corn'),
            _plant('c', 'Squash', benefits=['Suppresses weeds']),
        ]
        report = classify(plants)
        assert report.compatible.reasons == [DEFAULT_BENEFIT, 'Suppresses weeds']


class TestReportDict:

    def test_to_dict(self):
        plants = [_plant('t', 'Tomato', companions=['b']), _plant('b', 'Basil')]
        assert classify(plants).to_dict() == {
            'compatible': {'pairs': ['Tomato & Basil'], 'reasons': [DEFAULT_BENEFIT]},
            'incompatible': {'pairs': [], 'reasons': []},
            'neutral': [],
        }


class TestEnrichment:

    def test_provider_fills_missing_relationships(self):
        calls = []

        def provider(ids):
            calls.append(ids)
            return [
                {'id': 't', 'name': 'Tomato', 'companions': ['b'], 'antagonists': [], 'benefits': ['Improves flavor']},
                {'id': 'b', 'name': 'Basil', 'companions': [], 'antagonists': [], 'benefits': []},
            ]

        plants = [Plant(id='t', name='Tomato'), Plant(id='b', name='Basil')]
        enriched = enrich_plants(plants, provider)

        assert calls == [['t', 'b']]
        assert enriched[0].companions == ['b']
        assert enriched[0].benefits == ['Improves flavor']
        assert classify(enriched).compatible.pairs == ['Tomato & Basil']

    def test_provider_not_called_when_complete(self):
        def provider(ids):
            raise AssertionError("provider should not be called")

        plants = [_plant('a', 'A', [], []), _plant('b', 'B', [], [])]
        assert enrich_plants(plants, provider) == plants

    def test_provider_failure_returns_plants_unchanged(self):
        def provider(ids):
            raise RuntimeError("database unavailable")

        plants = [Plant(id='t', name='Tomato'), Plant(id='b', name='Basil')]
        assert enrich_plants(plants, provider) == plants

    def test_plant_without_record_is_kept(self):
        def provider(ids):
            return [{'id': 't', 'name': 'Tomato', 'companions': ['b'], 'antagonists': []}]

        plants = [Plant(id='t', name='Tomato'), Plant(id='b', name='Basil')]
        enriched = enrich_plants(plants, provider)
        assert enriched[1] is plants[1]
        assert enriched[0].companions == ['b']

    def test_analyze_skips_provider_for_single_plant(self):
        def provider(ids):
            raise AssertionError("provider should not be called")

        assert analyze([Plant(id='t', name='Tomato')], provider=provider).is_empty

    def test_analyze_with_provider(self):
        def provider(ids):
            return [{'id': 'p', 'name': 'Potato', 'antagonists': ['c'], 'companions': []}]

        report = analyze([Plant(id='p', name='Potato'), Plant(id='c', name='Cucumber')], provider=provider)
        assert report.incompatible.pairs == ['Potato & Cucumber']


class TestPlantFromRecord:

    def test_ids_become_strings(self):
        plant = Plant.from_record({'id': 3, 'name': 'Tomato', 'companions': [4, '5'], 'antagonists': []})
        assert plant.id == '3'
        assert plant.companions == ['4', '5']
        assert plant.is_complete

    def test_missing_lists_stay_unloaded(self):
        plant = Plant.from_record({'id': '3', 'name': 'Tomato'})
        assert plant.companions is None
        assert plant.benefits is None
        assert not plant.is_complete

    def test_string_lists_are_not_split(self):
        plant = Plant.from_record({
            'id': 't', 'name': 'Tomato',
            'companions': 'basil', 'antagonists': 5, 'benefits': 'Improves flavor',
        })
        assert plant.companions == []
        assert plant.antagonists == []
        assert plant.benefits == []

    def test_string_benefits_give_fallback_reason(self):
        tomato = Plant.from_record({'id': 't', 'name': 'Tomato', 'companions': ['b'], 'antagonists': [],
                                    'benefits': 'Improves flavor'})
        basil = Plant.from_record({'id': 'b', 'name': 'Basil', 'companions': [], 'antagonists': []})
        assert classify([tomato, basil]).compatible.reasons == [DEFAULT_BENEFIT]

    def test_non_string_text_fields(self):
        plant = Plant.from_record({'id': 't', 'name': 5, 'benefits': ['Repels aphids', 7]})
        assert plant.name == ''
        assert plant.benefits == ['Repels aphids']

"""
tests/test_plant_database.py — Tests for the plant database module.

Tests cover:
- Normalization function
- Plant CRUD operations
- Provider lookups by id
- Search ranking
- JSON import/export with relationships resolved by name
- Default plant seeding
"""

import pytest
import os
import tempfile

from plant_database import (
    normalize_name,
    init_plant_db,
    create_plant,
    get_plant,
    get_all_plants,
    get_plants_by_ids,
    update_plant,
    delete_plant,
    search_plants,
    find_plant_by_name,
    export_plants_json,
    import_plants_json,
    resolve_plant_names,
    get_plant_count,
    check_plant_db_health,
    seed_default_plants,
)


@pytest.fixture
def temp_plant_db(monkeypatch):
    """Create a temporary plant database for testing."""
    db_fd, db_path = tempfile.mkstemp(suffix='.db')

    monkeypatch.setenv('PLANT_DB_PATH', db_path)

    from plant_database import get_plant_db_path
    assert get_plant_db_path() == db_path

    init_plant_db()

    yield db_path

    os.close(db_fd)
    try:
        os.unlink(db_path)
    except PermissionError:
        pass  # Windows may hold the file


# ========================================
# Normalization Tests
# ========================================

class TestNormalization:
    """Tests for the normalize_name function."""

    def test_basic_lowercase(self):
        assert normalize_name("TOMATO") == "tomato"

    def test_trim_and_collapse_whitespace(self):
        assert normalize_name("  sweet   alyssum  ") == "sweet alyssum"

    def test_remove_diacritics(self):
        assert normalize_name("Jalapeño") == "jalapeno"

    def test_remove_hyphens_punctuation(self):
        assert normalize_name("Bell-Pepper") == "bell pepper"
        assert normalize_name("Brassica oleracea var. capitata") == "brassica oleracea var capitata"

    def test_empty_string(self):
        assert normalize_name("") == ""
        assert normalize_name(None) == ""


# ========================================
# Plant CRUD Tests
# ========================================

class TestPlantCRUD:
    """Tests for plant CRUD operations."""

    def test_create_plant_basic(self, temp_plant_db):
        plant_id, error = create_plant("Tomato", "Solanum lycopersicum")
        assert plant_id is not None
        assert error is None
        assert isinstance(plant_id, str)

    def test_create_plant_requires_name(self, temp_plant_db):
        plant_id, error = create_plant("   ")
        assert plant_id is None
        assert error

    def test_create_plant_non_string_name(self, temp_plant_db):
        plant_id, error = create_plant(5)
        assert plant_id is None
        assert error == "Plant name is required."

    def test_create_plant_string_lists_are_not_split(self, temp_plant_db):
        plant_id, _ = create_plant("Okra", companions="basil", antagonists="fennel", benefits="Repels")
        plant = get_plant(plant_id)
        assert plant['companions'] == []
        assert plant['antagonists'] == []
        assert plant['benefits'] == []

    def test_create_plant_normalized_duplicate(self, temp_plant_db):
        create_plant("Bell Pepper")
        plant_id, error = create_plant("bell-pepper")
        assert plant_id is None
        assert "already exists" in error

    def test_get_plant(self, temp_plant_db):
        basil_id, _ = create_plant("Basil")
        plant_id, _ = create_plant(
            "Tomato",
            companions=[basil_id, basil_id, ''],
            antagonists=[],
            benefits=["Improves flavor", " ", "Improves flavor"],
        )

        plant = get_plant(plant_id)
        assert plant['id'] == plant_id
        assert plant['name'] == "Tomato"
        assert plant['companions'] == [basil_id]
        assert plant['antagonists'] == []
        assert plant['benefits'] == ["Improves flavor"]

    def test_get_plant_not_found(self, temp_plant_db):
        assert get_plant(9999) is None

    def test_get_all_plants(self, temp_plant_db):
        create_plant("Tomato")
        create_plant("Basil", benefits=["Repels flies"])
        plants = get_all_plants()
        assert [p['name'] for p in plants] == ["Basil", "Tomato"]
        assert "repels flies" in plants[0]['search_text']

    def test_update_plant(self, temp_plant_db):
        plant_id, _ = create_plant("Tomato")
        success, error = update_plant(plant_id, benefits=["Improves flavor"], antagonists=["42"])
        assert success and error is None

        plant = get_plant(plant_id)
        assert plant['benefits'] == ["Improves flavor"]
        assert plant['antagonists'] == ["42"]
        assert plant['name'] == "Tomato"

    def test_update_plant_duplicate_name(self, temp_plant_db):
        create_plant("Tomato")
        basil_id, _ = create_plant("Basil")
        success, error = update_plant(basil_id, name="TOMATO")
        assert not success
        assert "already exists" in error

    def test_update_plant_not_found(self, temp_plant_db):
        success, error = update_plant(9999, name="Ghost")
        assert not success
        assert error == "Plant not found."

    def test_delete_plant_removes_relationships(self, temp_plant_db):
        basil_id, _ = create_plant("Basil")
        fennel_id, _ = create_plant("Fennel")
        tomato_id, _ = create_plant("Tomato", companions=[basil_id], antagonists=[fennel_id])

        success, error = delete_plant(fennel_id)
        assert success and error is None
        assert get_plant(fennel_id) is None
        assert get_plant(tomato_id)['antagonists'] == []
        assert get_plant(tomato_id)['companions'] == [basil_id]

    def test_delete_plant_not_found(self, temp_plant_db):
        success, error = delete_plant(9999)
        assert not success

    def test_health_and_count(self, temp_plant_db):
        create_plant("Tomato")
        healthy, message = check_plant_db_health()
        assert healthy
        assert "1 plants" in message
        assert get_plant_count() == 1


# ========================================
# Provider Tests
# ========================================

class TestProvider:

    def test_get_plants_by_ids_keeps_request_order(self, temp_plant_db):
        a, _ = create_plant("Tomato")
        b, _ = create_plant("Basil")
        c, _ = create_plant("Carrot")

        records = get_plants_by_ids([c, a, b])
        assert [r['name'] for r in records] == ["Carrot", "Tomato", "Basil"]

    def test_get_plants_by_ids_skips_unknown(self, temp_plant_db):
        a, _ = create_plant("Tomato")
        assert [r['id'] for r in get_plants_by_ids([a, '9999', a])] == [a]

    def test_get_plants_by_ids_accepts_ints(self, temp_plant_db):
        a, _ = create_plant("Tomato")
        assert get_plants_by_ids([int(a)])[0]['name'] == "Tomato"

    def test_get_plants_by_ids_empty(self, temp_plant_db):
        assert get_plants_by_ids([]) == []


# ========================================
# Search Tests
# ========================================

class TestSearch:

    def test_search_ranking(self, temp_plant_db):
        create_plant("Sweet Pepper")
        create_plant("Pepper")
        create_plant("Peppermint")

        results = search_plants("pepper")
        assert [r['name'] for r in results] == ["Pepper", "Peppermint", "Sweet Pepper"]
        assert [r['ranking'] for r in results] == ['exact', 'prefix', 'substring']

    def test_search_scientific_name(self, temp_plant_db):
        create_plant("Tomato", "Solanum lycopersicum")
        assert search_plants("solanum")[0]['name'] == "Tomato"

    def test_search_empty_query(self, temp_plant_db):
        create_plant("Tomato")
        assert search_plants("") == []
        assert search_plants("   ") == []

    def test_search_limit(self, temp_plant_db):
        for name in ("Bean A", "Bean B", "Bean C"):
            create_plant(name)
        assert len(search_plants("bean", limit=2)) == 2

    def test_find_plant_by_name(self, temp_plant_db):
        create_plant("Bell Pepper")
        assert find_plant_by_name("bell-pepper")['name'] == "Bell Pepper"
        assert find_plant_by_name("Tomato") is None


# ========================================
# JSON Export / Import Tests
# ========================================

class TestJSONExportImport:

    def test_resolve_names_exact_then_substring(self):
        name_to_id = {'tomato': '1', 'bell pepper': '2', 'basil': '3'}
        assert resolve_plant_names(['Basil', 'Pepper', 'Tomatoes', 'Okra'], name_to_id) == ['3', '2', '1']

    def test_resolve_names_ignores_bare_string(self):
        name_to_id = {'basil': '1', 'bean': '2'}
        assert resolve_plant_names('basil', name_to_id) == []
        assert resolve_plant_names(['Basil', 5, None], name_to_id) == ['1']

    def test_import_string_relationships_do_not_match_letters(self, temp_plant_db):
        create_plant("Basil")
        success, _, stats = import_plants_json({'plants': [
            {'name': 'Okra', 'companions': 'basil', 'benefits': 'Heat tolerant', 'scientific_name': 5},
        ]})
        assert success
        assert stats['added'] == 1
        okra = find_plant_by_name('Okra')
        assert okra['companions'] == []
        assert okra['benefits'] == []
        assert okra['scientific_name'] == ''

    def test_import_non_object(self, temp_plant_db):
        success, _, _ = import_plants_json(5)
        assert not success

    def test_resolve_names_excludes_self(self):
        assert resolve_plant_names(['Tomato'], {'tomato': '1'}, exclude='1') == []

    def test_import_resolves_relationships(self, temp_plant_db):
        data = {'plants': [
            {'name': 'Tomato', 'companions': ['Basil'], 'antagonists': ['Potato'], 'benefits': ['Improves flavor']},
            {'name': 'Basil'},
            {'name': 'Potato', 'antagonists': ['Tomato']},
        ]}
        success, message, stats = import_plants_json(data)

        assert success
        assert stats == {'added': 3, 'updated': 0, 'errors': 0}

        tomato = find_plant_by_name('Tomato')
        basil = find_plant_by_name('Basil')
        potato = find_plant_by_name('Potato')
        assert tomato['companions'] == [basil['id']]
        assert tomato['antagonists'] == [potato['id']]
        assert potato['antagonists'] == [tomato['id']]
        assert tomato['benefits'] == ['Improves flavor']

    def test_import_merge_updates_existing(self, temp_plant_db):
        create_plant("Tomato", "Solanum lycopersicum", benefits=["Old"])
        success, _, stats = import_plants_json({'plants': [{'name': 'tomato', 'benefits': ['New']}]})

        assert success
        assert stats['updated'] == 1
        plant = find_plant_by_name('Tomato')
        assert plant['benefits'] == ['New']
        assert plant['scientific_name'] == "Solanum lycopersicum"

    def test_import_replace(self, temp_plant_db):
        create_plant("Old Plant")
        success, _, _ = import_plants_json({'plants': [{'name': 'Carrot'}]}, mode='replace')
        assert success
        assert [p['name'] for p in get_all_plants()] == ['Carrot']

    def test_import_invalid_json(self, temp_plant_db):
        success, message, _ = import_plants_json({'not_plants': []})
        assert not success
        success, message, _ = import_plants_json({'plants': 'Tomato'})
        assert not success

    def test_import_counts_invalid_entries(self, temp_plant_db):
        success, message, stats = import_plants_json({'plants': ['Tomato', {'name': ''}, {'name': 'Basil'}]})
        assert success
        assert stats['added'] == 1
        assert stats['errors'] == 2

    def test_export_uses_names(self, temp_plant_db):
        basil_id, _ = create_plant("Basil")
        create_plant("Tomato", companions=[basil_id], benefits=["Improves flavor"])

        exported = export_plants_json()
        tomato = next(p for p in exported['plants'] if p['name'] == 'Tomato')
        assert tomato['companions'] == ['Basil']
        assert tomato['antagonists'] == []
        assert tomato['benefits'] == ['Improves flavor']

    def test_roundtrip_export_import(self, temp_plant_db):
        basil_id, _ = create_plant("Basil")
        create_plant("Tomato", companions=[basil_id])
        exported = export_plants_json()

        import_plants_json(exported, mode='replace')
        tomato = find_plant_by_name('Tomato')
        assert tomato['companions'] == [find_plant_by_name('Basil')['id']]


class TestSeeding:

    def test_seed_default_plants(self, temp_plant_db):
        seed_default_plants()
        count = get_plant_count()
        assert count > 20

        tomato = find_plant_by_name('Tomato')
        basil = find_plant_by_name('Basil')
        assert basil['id'] in tomato['companions']

        seed_default_plants()
        assert get_plant_count() == count

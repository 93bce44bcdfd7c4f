from __future__ import annotations

import copy
from pathlib import Path

import pytest
from pydantic import ValidationError

from conftest import SAMPLE_TERMS, write_glossary
from crust_crumb.core.exceptions import GlossaryLoadError
from crust_crumb.services.glossary import GlossaryStore, load_glossary


def test_bundled_dataset_loads() -> None:
    store = load_glossary()

    assert len(store) > 0
    assert store.get_term_by_id("fermentolyse") is not None
    assert set(store.get_all_categories()) >= {"Starter", "Technique"}


def test_camel_case_fields_are_mapped(store: GlossaryStore) -> None:
    term = store.get_term_by_id("starter")

    assert term.short_definition == "Your pet yeast."
    assert term.alternate_questions == ("How do I feed the Beast?",)
    assert term.troubleshooting[0].problem == "Flat starter"
    assert term.model_dump(by_alias=True)["shortDefinition"] == "Your pet yeast."


def test_absent_category_and_difficulty_are_none(store: GlossaryStore) -> None:
    term = store.get_term_by_id("crumb")

    assert term.category is None
    assert term.difficulty is None
    assert term.related_term_ids == ()


def test_terms_are_immutable(store: GlossaryStore) -> None:
    term = store.get_term_by_id("autolyse")
    with pytest.raises(ValidationError):
        term.term = "Changed"


def test_term_sequences_cannot_be_mutated(store: GlossaryStore) -> None:
    term = store.get_term_by_id("starter")

    assert isinstance(term.alternate_questions, tuple)
    with pytest.raises(AttributeError):
        term.alternate_questions.append("zzqq marker")
    assert store.search_terms("zzqq") == []


def test_null_sequences_load_as_empty(tmp_path: Path) -> None:
    records = copy.deepcopy(SAMPLE_TERMS)
    records[1].update(
        {"alternateQuestions": None, "troubleshooting": None, "relatedTermIds": None}
    )

    store = load_glossary(write_glossary(tmp_path / "glossary.json", records))
    term = store.get_term_by_id("autolyse")

    assert term.alternate_questions == ()
    assert term.troubleshooting == ()
    assert term.related_term_ids == ()
    assert store.search_terms("resting") == [term]


def test_missing_file_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(GlossaryLoadError):
        load_glossary(tmp_path / "nope.json")


def test_invalid_json_is_fatal(tmp_path: Path) -> None:
    path = tmp_path / "glossary.json"
    path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(GlossaryLoadError):
        load_glossary(path)


def test_top_level_must_be_an_array(tmp_path: Path) -> None:
    path = write_glossary(tmp_path / "glossary.json", {"terms": SAMPLE_TERMS})
    with pytest.raises(GlossaryLoadError, match="JSON array"):
        load_glossary(path)


def test_record_without_definition_is_fatal(tmp_path: Path) -> None:
    records = copy.deepcopy(SAMPLE_TERMS)
    del records[1]["definition"]
    with pytest.raises(GlossaryLoadError, match="failed validation"):
        load_glossary(write_glossary(tmp_path / "glossary.json", records))


def test_unknown_difficulty_is_fatal(tmp_path: Path) -> None:
    records = copy.deepcopy(SAMPLE_TERMS)
    records[0]["difficulty"] = "Expert"
    with pytest.raises(GlossaryLoadError):
        load_glossary(write_glossary(tmp_path / "glossary.json", records))


def test_duplicate_ids_are_rejected(tmp_path: Path) -> None:
    records = copy.deepcopy(SAMPLE_TERMS) + [dict(SAMPLE_TERMS[0], term="Another Starter")]
    with pytest.raises(GlossaryLoadError, match="Duplicate"):
        load_glossary(write_glossary(tmp_path / "glossary.json", records))


def test_glossary_path_setting_is_used(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    from crust_crumb.core import config

    path = write_glossary(tmp_path / "custom.json", SAMPLE_TERMS[:2])
    monkeypatch.setattr(config, "GLOSSARY_PATH", str(path))

    assert len(load_glossary()) == 2

"""
Pytest configuration and fixtures.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from crust_crumb.core import config
from crust_crumb.main import create_app
from crust_crumb.services.glossary import GlossaryStore, load_glossary

SAMPLE_TERMS = [
    {
        "id": "starter",
        "term": "Sourdough Starter",
        "definition": "A culture of wild yeast and bacteria kept in flour and water.",
        "shortDefinition": "Your pet yeast.",
        "category": "Starter",
        "difficulty": "Beginner",
        "alternateQuestions": ["How do I feed the Beast?"],
        "troubleshooting": [{"problem": "Flat starter", "solution": "Keep it warmer."}],
    },
    {
        "id": "autolyse",
        "term": "Autolyse",
        "definition": "Resting flour and water before mixing in salt.",
        "category": "Technique",
        "difficulty": "Intermediate",
    },
    {
        "id": "cold-retard",
        "term": "Cold Retard",
        "definition": "Proofing shaped dough in the refrigerator.",
        "shortDefinition": "Fridge proof.",
        "category": "Fermentation",
        "difficulty": "Advanced",
        "alternateQuestions": ["Can I leave dough overnight?"],
    },
    {
        "id": "float-test",
        "term": "Float Test",
        "definition": "Checking whether a spoonful of starter floats in water.",
        "category": "Technique",
        "difficulty": "Beginner",
    },
    {
        "id": "crumb",
        "term": "Crumb",
        "definition": "The inside of a loaf.",
    },
]


def write_glossary(path: Path, records) -> Path:
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def glossary_file(tmp_path: Path) -> Path:
    return write_glossary(tmp_path / "glossary.json", SAMPLE_TERMS)


@pytest.fixture
def store(glossary_file: Path) -> GlossaryStore:
    return load_glossary(glossary_file)


@pytest.fixture
def client(glossary_file: Path):
    with TestClient(create_app(glossary_file)) as test_client:
        yield test_client


@pytest.fixture
def provider_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "GEMINI_API_KEY", "gemini-test-key")
    monkeypatch.setattr(config, "YOUTUBE_API_KEY", "youtube-test-key")
    monkeypatch.setattr(config, "GOOGLE_SEARCH_API_KEY", "search-test-key")
    monkeypatch.setattr(config, "GOOGLE_SEARCH_ENGINE_ID", "engine-id")


@pytest.fixture
def mock_http(monkeypatch: pytest.MonkeyPatch) -> Callable[[Callable], List[httpx.Request]]:
    """
    Route every httpx.AsyncClient through a MockTransport.

    Call the fixture with a handler(request) -> httpx.Response; it returns
    the list that collects the requests the code under test sent.
    """
    real_async_client = httpx.AsyncClient

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> List[httpx.Request]:
        sent: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        def factory(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(recording_handler)
            return real_async_client(*args, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", factory)
        return sent

    return install

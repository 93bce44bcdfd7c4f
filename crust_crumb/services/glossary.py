"""
In-memory glossary of baking terms.

The dataset is read once by ``load_glossary`` and wrapped in a read-only
``GlossaryStore``. Every query is a linear scan over the loaded terms and
returns results in dataset order; nothing is mutated after construction,
so a single store can be shared between concurrent requests.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from crust_crumb.core import config
from crust_crumb.core.exceptions import GlossaryLoadError
from crust_crumb.schemas.glossary import GlossaryTerm

logger = logging.getLogger(__name__)

DIFFICULTIES = ("Beginner", "Intermediate", "Advanced")

_TERMS_ADAPTER = TypeAdapter(List[GlossaryTerm])


def _require_str(name: str, value) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


class GlossaryStore:
    """Read-only query layer over a fixed collection of glossary terms."""

    def __init__(self, terms: Iterable[GlossaryTerm]):
        self._terms = tuple(terms)
        self._by_id: Dict[str, GlossaryTerm] = {}
        for term in self._terms:
            if term.id in self._by_id:
                raise GlossaryLoadError(f"Duplicate glossary term id: {term.id!r}")
            self._by_id[term.id] = term
        self._categories = tuple(sorted({t.category for t in self._terms if t.category}))

    @property
    def terms(self) -> List[GlossaryTerm]:
        return list(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[GlossaryTerm]:
        return iter(self._terms)

    def get_term_by_id(self, term_id: str) -> Optional[GlossaryTerm]:
        """Return the term with this id, or None when it is unknown."""
        _require_str("term_id", term_id)
        return self._by_id.get(term_id)

    def get_terms_by_category(self, category: str) -> List[GlossaryTerm]:
        _require_str("category", category)
        return [t for t in self._terms if t.category == category]

    def get_terms_by_difficulty(self, difficulty: str) -> List[GlossaryTerm]:
        _require_str("difficulty", difficulty)
        return [t for t in self._terms if t.difficulty == difficulty]

    def search_terms(self, query: str) -> List[GlossaryTerm]:
        """
        Case-insensitive substring search.

        A term matches when the query appears in its name, definition,
        short definition or any of its alternate questions. Results are
        not ranked; an empty query matches every term.
        """
        needle = _require_str("query", query).lower()
        return [t for t in self._terms if _matches(t, needle)]

    def get_all_categories(self) -> List[str]:
        """Distinct categories present in the dataset, sorted ascending."""
        return list(self._categories)

    @staticmethod
    def get_all_difficulties() -> List[str]:
        return list(DIFFICULTIES)


def _matches(term: GlossaryTerm, needle: str) -> bool:
    if needle in term.term.lower() or needle in term.definition.lower():
        return True
    if term.short_definition and needle in term.short_definition.lower():
        return True
    return any(needle in q.lower() for q in term.alternate_questions)


def load_glossary(path: Optional[Union[str, Path]] = None) -> GlossaryStore:
    """
    Read and validate the glossary dataset.

    Args:
        path: JSON file holding an array of term records. Defaults to
            GLOSSARY_PATH (the bundled dataset unless overridden).

    Returns:
        A populated GlossaryStore.

    Raises:
        GlossaryLoadError: the file is missing, is not valid JSON, is not an
            array, a record fails validation, or two records share an id.
    """
    path = Path(path or config.GLOSSARY_PATH)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise GlossaryLoadError(f"Cannot read glossary at {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise GlossaryLoadError(f"Glossary at {path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise GlossaryLoadError(
            f"Glossary at {path} must be a JSON array, got {type(raw).__name__}"
        )

    try:
        terms = _TERMS_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise GlossaryLoadError(f"Glossary at {path} failed validation:\n{e}") from e

    store = GlossaryStore(terms)
    logger.info(
        f"Loaded {len(store)} glossary terms "
        f"({len(store.get_all_categories())} categories) from {path}"
    )
    return store

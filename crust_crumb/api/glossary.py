from typing import Optional

from fastapi import APIRouter, Depends, Request

from crust_crumb.api.errors import error_response
from crust_crumb.services.glossary import GlossaryStore

router = APIRouter(prefix="/glossary")


def get_glossary(request: Request) -> GlossaryStore:
    """The store loaded at startup by the app lifespan."""
    return request.app.state.glossary


def _dump(term) -> dict:
    return term.model_dump(by_alias=True)


@router.get("/terms")
async def list_terms(
    category: Optional[str] = None,
    difficulty: Optional[str] = None,
    q: Optional[str] = None,
    store: GlossaryStore = Depends(get_glossary),
):
    """
    List glossary terms in dataset order.

    Optional filters are combined: `category` and `difficulty` are exact
    matches, `q` is a case-insensitive substring search.
    """
    selections = []
    if q is not None:
        selections.append(store.search_terms(q))
    if category is not None:
        selections.append(store.get_terms_by_category(category))
    if difficulty is not None:
        selections.append(store.get_terms_by_difficulty(difficulty))

    terms = store.terms
    for selected in selections:
        ids = {t.id for t in selected}
        terms = [t for t in terms if t.id in ids]

    return {"terms": [_dump(t) for t in terms], "count": len(terms)}


@router.get("/terms/{term_id}")
async def get_term(term_id: str, store: GlossaryStore = Depends(get_glossary)):
    term = store.get_term_by_id(term_id)
    if term is None:
        return error_response(404, "Term not found")
    return _dump(term)


@router.get("/categories")
async def categories(store: GlossaryStore = Depends(get_glossary)):
    return {"categories": store.get_all_categories()}


@router.get("/difficulties")
async def difficulties(store: GlossaryStore = Depends(get_glossary)):
    return {"difficulties": store.get_all_difficulties()}

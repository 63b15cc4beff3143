# homefinder/api/routes.py
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from typing import List
from .. import schemas
from ..comparison import InvalidArity, compare, comparison_table
from ..services import ChatSession, get_session
from ..utils import logger

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/listings", response_model=List[schemas.Listing])
def listings(
    max_price: int | None = Query(None),
    min_bedrooms: int | None = Query(None),
    property_type: schemas.PropertyType | None = Query(None),
    session: ChatSession = Depends(get_session)
):
    return session.catalog.search(
        max_price=max_price,
        min_bedrooms=min_bedrooms,
        property_type=property_type,
    )


@router.get("/listings/{listing_id}", response_model=schemas.Listing)
def get_listing(listing_id: str, session: ChatSession = Depends(get_session)):
    try:
        return session.catalog.get(listing_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Listing not found")


@router.post("/chat", response_model=schemas.ChatTurn)
def chat(payload: schemas.ChatRequest, session: ChatSession = Depends(get_session)):
    try:
        turn = session.send(payload.text)
    except InvalidArity as e:
        logger.warning("Comparison rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    if turn is None:
        return Response(status_code=204)
    return turn


@router.get("/messages", response_model=List[schemas.ChatTurn])
def messages(session: ChatSession = Depends(get_session)):
    return list(session.turns)


@router.get("/selection", response_model=List[schemas.Listing])
def selection(session: ChatSession = Depends(get_session)):
    return list(session.selection.snapshot())


@router.post("/selection/{listing_id}", response_model=List[schemas.Listing])
def toggle_selection(listing_id: str, session: ChatSession = Depends(get_session)):
    try:
        listing = session.catalog.get(listing_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Listing not found")
    session.selection.toggle(listing)
    return list(session.selection.snapshot())


@router.delete("/selection")
def clear_selection(session: ChatSession = Depends(get_session)):
    session.selection.clear()
    return {"status": "cleared"}


@router.post("/compare", response_model=schemas.ComparisonOut)
def compare_listings(payload: schemas.CompareRequest, session: ChatSession = Depends(get_session)):
    try:
        chosen = [session.catalog.get(i) for i in payload.listing_ids]
    except KeyError:
        raise HTTPException(status_code=404, detail="Listing not found")
    try:
        report = compare(chosen, session.currency)
    except InvalidArity as e:
        logger.warning("Comparison rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return {"report": report, "table": comparison_table(report, session.currency)}

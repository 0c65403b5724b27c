# backend/sportclass/routes/v1/sports.py
"""
Sport routes - API v1

Endpoints:
    POST /                  → Create a sport
    GET /                   → List sports (optional category filter)
    GET /{sport_id}         → Get one sport
    PUT /{sport_id}         → Rename / recategorise
    DELETE /{sport_id}      → Delete an unused sport
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.params import Path

from ...core.constants import DEFAULT_QUERY_LIMIT, MAX_QUERY_LIMIT
from ...core.exceptions import DomainException
from ...schemas.sport import SportCreate, SportResponse, SportUpdate
from ...services.sport_service import SportService
from .dependencies import ULID_PATH_PATTERN, get_sport_service, handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sports-v1"])


@router.post("", response_model=SportResponse, status_code=status.HTTP_201_CREATED)
async def create_sport(
    payload: SportCreate,
    sport_service: SportService = Depends(get_sport_service),
) -> SportResponse:
    try:
        sport = await asyncio.to_thread(sport_service.create_sport, payload.name, payload.category)
        return SportResponse.from_entity(sport)
    except DomainException as e:
        handle_domain_exception(e)


@router.get("", response_model=List[SportResponse])
async def list_sports(
    category: Optional[str] = Query(None, min_length=1),
    skip: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_QUERY_LIMIT, ge=1, le=MAX_QUERY_LIMIT),
    sport_service: SportService = Depends(get_sport_service),
) -> List[SportResponse]:
    try:
        if category:
            sports = await asyncio.to_thread(sport_service.find_by_category, category)
        else:
            sports = await asyncio.to_thread(sport_service.list_sports, skip, limit)
        return [SportResponse.from_entity(sport) for sport in sports]
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/{sport_id}", response_model=SportResponse)
async def get_sport(
    sport_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    sport_service: SportService = Depends(get_sport_service),
) -> SportResponse:
    try:
        sport = await asyncio.to_thread(sport_service.get_sport, sport_id)
        return SportResponse.from_entity(sport)
    except DomainException as e:
        handle_domain_exception(e)


@router.put("/{sport_id}", response_model=SportResponse)
async def update_sport(
    payload: SportUpdate,
    sport_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    sport_service: SportService = Depends(get_sport_service),
) -> SportResponse:
    try:
        sport = await asyncio.to_thread(
            sport_service.update_sport, sport_id, payload.name, payload.category
        )
        return SportResponse.from_entity(sport)
    except DomainException as e:
        handle_domain_exception(e)


@router.delete("/{sport_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sport(
    sport_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    sport_service: SportService = Depends(get_sport_service),
) -> Response:
    try:
        await asyncio.to_thread(sport_service.delete_sport, sport_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except DomainException as e:
        handle_domain_exception(e)

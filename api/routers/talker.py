"""
Talker endpoints.

Each protected route declares ``require_token`` in ``dependencies`` so it
runs before the body/query checks; the checks themselves run in a fixed
order and the first failure answers the request.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from api.domain.talkers import (
    TALKER_CHECKS,
    as_integer,
    run_checks,
    validate_date_param,
    validate_rate_param,
    validate_rate_patch,
)
from api.routers.deps import get_talker_service, json_body, require_token
from api.services.talker_service import TalkerService, parse_id

router = APIRouter(prefix="/talker", tags=["talker"])


def talker_payload(payload: dict = Depends(json_body)) -> dict:
    run_checks(TALKER_CHECKS, payload)
    return payload


def rate_patch_payload(payload: dict = Depends(json_body)) -> dict:
    validate_rate_patch(payload)
    return payload


def search_params(
    q: Optional[str] = Query(None),
    rate: Optional[str] = Query(None),
    date: Optional[str] = Query(None),
) -> dict:
    validate_rate_param(rate)
    validate_date_param(date)
    return {"q": q, "rate": rate, "date": date}


@router.get("")
def list_talkers(svc: TalkerService = Depends(get_talker_service)):
    return svc.list_all()


@router.get("/db")
def list_talkers_from_db(svc: TalkerService = Depends(get_talker_service)):
    return svc.list_from_db()


@router.get("/search", dependencies=[Depends(require_token)])
def search_talkers(params: dict = Depends(search_params), svc: TalkerService = Depends(get_talker_service)):
    return svc.search(**params)


@router.get("/{talker_id}")
def get_talker(talker_id: str, svc: TalkerService = Depends(get_talker_service)):
    return svc.get(parse_id(talker_id))


@router.post("", status_code=201, dependencies=[Depends(require_token)])
def create_talker(payload: dict = Depends(talker_payload), svc: TalkerService = Depends(get_talker_service)):
    return svc.create(payload)


@router.put("/{talker_id}", dependencies=[Depends(require_token)])
def update_talker(
    talker_id: str,
    payload: dict = Depends(talker_payload),
    svc: TalkerService = Depends(get_talker_service),
):
    return svc.update(parse_id(talker_id), payload)


@router.delete("/{talker_id}", status_code=204, dependencies=[Depends(require_token)])
def delete_talker(talker_id: str, svc: TalkerService = Depends(get_talker_service)):
    try:
        parsed = int(talker_id)
    except ValueError:
        # nothing can match; still a no-op success
        return Response(status_code=204)
    svc.delete(parsed)
    return Response(status_code=204)


@router.patch("/rate/{talker_id}", status_code=204, dependencies=[Depends(require_token)])
def update_talker_rate(
    talker_id: str,
    payload: dict = Depends(rate_patch_payload),
    svc: TalkerService = Depends(get_talker_service),
):
    svc.update_rate(parse_id(talker_id), as_integer(payload["rate"]))
    return Response(status_code=204)

"""Mock persistence endpoint for the form wizard.

Endpoints:
  GET  /api/form-data  → current shared record
  POST /api/form-data  → merge a partial record, or reset on
                         {"status": "completed"}

Design:
  - One record per application (``app.state.form_data``), shared by every
    caller. No auth, no per-caller state, nothing survives a restart.
  - Responses are delayed by ``api_latency_ms`` to simulate a real backend.
  - The record is not locked across the delay; concurrent writers race
    and the last merge wins.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from formwizard.config import Settings
from formwizard.schemas.wizard import FormData, FormDataUpdate
from formwizard.services.form_data import FormDataRepository

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Dependencies ─────────────────────────────────────────────

def get_repository(request: Request) -> FormDataRepository:
    return request.app.state.form_data


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def _simulate_latency(settings: Settings) -> None:
    if settings.api_latency_ms > 0:
        await asyncio.sleep(settings.api_latency_ms / 1000)


# ── GET /api/form-data ───────────────────────────────────────

@router.get("", response_model=FormData)
async def read_form_data(
    repo: FormDataRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    await _simulate_latency(settings)
    return repo.get()


# ── POST /api/form-data ──────────────────────────────────────

@router.post("", response_model=FormData)
async def write_form_data(
    body: FormDataUpdate,
    repo: FormDataRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    """Merge the posted sub-records, or reset when the wizard completes."""
    logger.info("Form data POST: %s", body.model_dump(by_alias=True, exclude_unset=True))

    record = repo.apply(body)
    await _simulate_latency(settings)
    return record

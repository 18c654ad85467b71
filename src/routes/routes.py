import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from src.app.models.input_models import AnalyzeInput, OptimizeInput
from src.app.services.text_generation import compose_meta_prompt
from src.app.services.text_generation.analyze_prompt import analyze_prompt
from src.app.services.text_generation.model_catalog import ModelProfileCatalog
from src.app.services.text_generation.normalize_fields import normalize
from src.app.utils.exceptions import UnknownModelError

router = APIRouter()


def get_catalog(request: Request) -> ModelProfileCatalog:
    return request.app.state.optimizer.catalog


def get_optimizer(request: Request):
    return request.app.state.optimizer


def get_provider(request: Request):
    return request.app.state.provider


def get_store(request: Request):
    return request.app.state.store


def _check_length(record, catalog: ModelProfileCatalog):
    profile = catalog.resolve_profile(record.target_model_id)
    if profile and record.response_length_tokens > profile.max_output_tokens:
        raise HTTPException(
            status_code=422,
            detail=f"responseLengthTokens must be at most {profile.max_output_tokens} for {profile.label}",
        )


@router.get("/")
async def root():
    return {"message": "Prompt optimizer is running"}


@router.get("/models")
async def list_models(catalog: ModelProfileCatalog = Depends(get_catalog)):
    return {"status": True, "models": catalog.describe(), "options": catalog.form_options()}


@router.post("/meta_prompt/preview")
async def preview_meta_prompt(input_data: OptimizeInput, catalog: ModelProfileCatalog = Depends(get_catalog)):
    """
    Returns the composed meta-prompt without calling the provider.
    Unknown models are composed against the generic profile.
    """
    record = normalize(input_data)
    profile = catalog.resolve_profile(record.target_model_id)
    composed = compose_meta_prompt.compose(record, profile)
    return {
        "status": True,
        "meta_prompt": composed.text,
        "target_label": composed.target_label,
        "known_model": record.target_model_id in catalog,
    }


@router.post("/optimize")
async def optimize_prompt(input_data: OptimizeInput, optimizer=Depends(get_optimizer)):
    """
    Optimizes the raw prompt for the selected target model.
    """
    record = normalize(input_data)
    _check_length(record, optimizer.catalog)
    try:
        result = await optimizer.optimize(record)
    except UnknownModelError as e:
        logging.error(f"Unknown target model requested: {e.model_id}")
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": True, "result": result.model_dump()}


@router.post("/analyze")
async def analyze(input_data: AnalyzeInput, provider=Depends(get_provider)):
    """
    Suggests form values for a raw prompt.
    """
    analysis = await analyze_prompt(provider, input_data.user_prompt)
    return {"status": True, "analysis": analysis.model_dump()}


@router.get("/sessions")
async def list_sessions(user_id: Optional[str] = None, store=Depends(get_store)):
    response = await store.list_for_user(user_id)
    if not response.get("status"):
        raise HTTPException(status_code=500, detail=response.get("message", "Failed to list sessions"))
    return response


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str, user_id: Optional[str] = None, store=Depends(get_store)):
    response = await store.delete_by_id(session_id, user_id=user_id)
    if not response.get("status"):
        raise HTTPException(status_code=404, detail=response.get("message", "Failed to delete session"))
    return response

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_estimator
from config import settings
from models.requests import AnalyzeRequest, GuidanceRequest, LegalCostRequest
from models.responses import AnalysisResponse, JurisdictionSummary, PricingResponse
from models.schemas.cost_analysis import CostAnalysis
from models.schemas.employee_profile import EmployeeProfile
from models.schemas.entitlement_estimate import EntitlementEstimate
from models.schemas.guidance_entry import GuidanceEntry
from services import entitlement_engine, jurisdictions
from services.pipeline import orchestrator
from services.pipeline.base import BaseStageService
from services.pipeline.s1_severance_estimator import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _warn_if_unknown(code: str) -> bool:
    recognized = jurisdictions.is_known_jurisdiction(code)
    if not recognized:
        logger.warning("Unrecognized jurisdiction %r, using defaults", code)
    return recognized


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "jurisdictions": len(jurisdictions.list_jurisdictions()),
    }


@router.get("/jurisdictions", response_model=list[JurisdictionSummary])
async def list_jurisdictions():
    return [
        JurisdictionSummary(
            code=code,
            tax_rate=jurisdictions.lookup_tax_rate(code),
            tax_label=jurisdictions.tax_label(code),
        )
        for code in jurisdictions.list_jurisdictions()
    ]


@router.get("/jurisdictions/{code}/pricing", response_model=PricingResponse)
async def jurisdiction_pricing(code: str):
    recognized = _warn_if_unknown(code)
    return PricingResponse(
        pricing=entitlement_engine.lookup_pricing(code),
        tax_rate=entitlement_engine.lookup_tax_rate(code),
        recognized=recognized,
    )


@router.post("/estimate", response_model=EntitlementEstimate)
@limiter.limit(settings.rate_limit)
async def estimate(
    request: Request,
    body: EmployeeProfile,
    estimator: BaseStageService = Depends(get_estimator),
):
    _warn_if_unknown(body.jurisdiction)
    try:
        return estimator.run(profile=body)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/legal-costs", response_model=CostAnalysis)
@limiter.limit(settings.rate_limit)
async def legal_costs(request: Request, body: LegalCostRequest):
    _warn_if_unknown(body.jurisdiction)
    try:
        return entitlement_engine.analyze_legal_costs(
        pricing=entitlement_engine.lookup_pricing(body.jurisdiction),
        jurisdiction=body.jurisdiction,
        offer=body.current_offer,
        recommended_amount=body.recommended_amount,
        potential_gap=body.potential_gap,
        statutory_minimum=body.statutory_minimum,
        overrides=body.overrides,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/guidance", response_model=list[GuidanceEntry])
@limiter.limit(settings.rate_limit)
async def guidance(request: Request, body: GuidanceRequest):
    return entitlement_engine.compose_guidance(body.potential_gap, body.options)


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, body: AnalyzeRequest):
    try:
        return orchestrator.analyze(body.profile, body.overrides, include_tax=body.include_tax)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

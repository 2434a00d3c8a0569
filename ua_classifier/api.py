# ua_classifier/api.py

from fastapi import APIRouter, HTTPException, Query, Request
from typing import Dict, List, Optional, Union
from pydantic import ValidationError
from ua_classifier.catalog import list_browsers, list_device_types, list_operating_systems
from ua_classifier.classifier import classify_user_agent_cached
from ua_classifier.context import current_user_agent
from ua_classifier.i18n import LOCALE_PATTERN, get_translator
from ua_classifier.schemas import CatalogOption, ClassifyRequest, ClassifyResponse, UserAgentClassification
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

CATALOGS = {
    "browsers": list_browsers,
    "operating-systems": list_operating_systems,
    "device-types": list_device_types,
}


@router.get("/api/user-agent", response_model=UserAgentClassification)
async def classify_current(ua: Optional[str] = Query(default=None)) -> UserAgentClassification:
    """
    Classify the given ?ua= string, or the caller's own User-Agent header.
    """
    user_agent = ua if ua is not None else current_user_agent()
    return UserAgentClassification.from_info(classify_user_agent_cached(user_agent))


@router.post("/api/classify", response_model=ClassifyResponse)
async def classify_batch(request: Request) -> ClassifyResponse:
    """
    Classify submitted user agents.
    Accepts a single object or an array of objects.
    """
    try:
        body = await request.json()
    except ValueError as e:
        logger.warning(f"Rejected classification body: {e}")
        return ClassifyResponse(status="error", processed=0, errors=1)

    # Normalize to list
    if isinstance(body, dict):
        items = [body]
    elif isinstance(body, list):
        items = body
    else:
        return ClassifyResponse(status="error", processed=0, errors=1)

    processed = 0
    errors = 0
    results: List[UserAgentClassification] = []

    for item in items:
        try:
            payload = ClassifyRequest(**item)
        except (TypeError, ValidationError) as e:
            errors += 1
            logger.warning(f"Rejected classification item: {e}")
            continue

        info = classify_user_agent_cached(payload.user_agent)
        results.append(UserAgentClassification.from_info(info))
        processed += 1

    return ClassifyResponse(
        status="ok" if errors == 0 else "partial",
        processed=processed,
        errors=errors,
        results=results,
    )


@router.get(
    "/api/catalog/{kind}",
    response_model=Union[List[CatalogOption], Dict[str, str]],
)
async def catalog(
    kind: str,
    as_options: bool = False,
    locale: Optional[str] = Query(default=None, pattern=LOCALE_PATTERN),
):
    """Every value of one category the classifier can report"""
    builder = CATALOGS.get(kind)
    if builder is None:
        raise HTTPException(status_code=404, detail=f"Unknown catalog: {kind}")

    return builder(as_options=as_options, translate=get_translator(locale))


@router.get("/health")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy"}

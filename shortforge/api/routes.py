import json
from datetime import datetime, timezone

import httpx
from fastapi import APIRouter, Depends, Request

from shortforge.agent.planner import make_plan
from shortforge.api.options import form_options
from shortforge.api.types import GenerateResponse, validate_brief
from shortforge.core.errors import InvalidRequestBody, ShortForgeError, Unexpected
from shortforge.core.logging import get_logger
from shortforge.llm.router import get_http_client


"""
FastAPI routes for the blueprint generator.
What it provides:
- Generate endpoint (brief in, validated plan out)
- Form options for the page
- Health check

And, the main purpose:
Expose plan generation over HTTP. Errors are raised as ShortForgeError
and turned into {"error": ...} by the handler in shortforge.main.
"""

log = get_logger("api.routes")

router = APIRouter()
@router.post("/api/generate", response_model=GenerateResponse, response_model_by_alias=True)
async def api_generate(request: Request, client: httpx.AsyncClient = Depends(get_http_client)):
    raw = await request.body()
    try:
        payload = json.loads(raw)
    except ValueError:
        raise InvalidRequestBody("Invalid JSON payload")

    brief = validate_brief(payload)
    log.info(f"Generating plan: platform={brief.platform_focus!r} duration={brief.duration!r}")

    try:
        plan = await make_plan(client, brief)
    except ShortForgeError:
        raise
    except Exception as e:
        log.exception("Unexpected failure while generating plan")
        raise Unexpected(str(e) or "Unexpected server error")

    return GenerateResponse(plan=plan)

@router.get("/api/options")
async def api_options():
    return form_options()

@router.get("/health")
async def health():
    return {"ok": True, "ts": datetime.now(timezone.utc).isoformat()}

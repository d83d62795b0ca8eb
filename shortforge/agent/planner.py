"""
Creates the short-form video plan.
What it does:
- Renders the brief into the planner prompt
- Sends it to the completion API (one call)
- Parses the completion as JSON
- Validates the full shape against ShortPlan

And, the main purpose:
Convert a brief into a trusted, validated plan.
"""



from typing import Optional

import httpx
from pydantic import ValidationError

from shortforge.api.types import Brief
from shortforge.core.errors import SchemaViolation
from shortforge.core.logging import get_logger
from shortforge.llm.json_parse import parse_completion
from shortforge.llm.prompts import SYSTEM_PROMPT, build_user_prompt
from shortforge.llm.router import chat_completion
from shortforge.llm.schemas import ShortPlan

log = get_logger("agent.planner")


def _describe(e: ValidationError) -> str:
    parts = []
    for err in e.errors()[:5]:
        where = ".".join(str(p) for p in err.get("loc", ())) or "(root)"
        parts.append(f"{where}: {err.get('msg')}")
    return "Model response did not match the plan schema: " + "; ".join(parts)


async def make_plan(client: Optional[httpx.AsyncClient], brief: Brief) -> ShortPlan:
    text = await chat_completion(client, brief.api_key, SYSTEM_PROMPT, build_user_prompt(brief))
    raw = parse_completion(text)
    try:
        plan = ShortPlan.model_validate(raw)
    except ValidationError as e:
        log.warning(f"Schema rejected completion ({e.error_count()} errors)")
        raise SchemaViolation(_describe(e))
    log.info(f"Plan ready: '{plan.title}' with {len(plan.beats)} beats")
    return plan

"""
API request and response schemas.
What it defines:
- Brief (the creative brief posted by the page)
- GenerateResponse ({"plan": ...})
- Presence checks for the required brief fields

And, the main purpose:
Ensure structured communication between client and server.
"""


from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shortforge.core.errors import InvalidRequestBody, MissingField
from shortforge.llm.schemas import ShortPlan

REQUIRED_FIELDS = ("topic", "audience", "tone", "goal", "duration", "platformFocus")


class Brief(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(..., alias="apiKey", repr=False)
    topic: str
    audience: str
    tone: str
    goal: str
    duration: str
    platform_focus: str = Field(..., alias="platformFocus")
    include_captions: bool = Field(True, alias="includeCaptions")
    include_broll: bool = Field(True, alias="includeBroll")


class GenerateResponse(BaseModel):
    plan: ShortPlan


def validate_brief(payload: Any) -> Brief:
    """
    Presence checks first (same messages the page shows), then type
    validation through the Brief model.
    """
    if not isinstance(payload, dict):
        raise InvalidRequestBody("Invalid JSON payload")

    api_key = payload.get("apiKey")
    if not api_key or not isinstance(api_key, str):
        raise MissingField("Missing OpenAI API key")

    if not all(payload.get(name) for name in REQUIRED_FIELDS):
        raise MissingField("All fields are required")

    # null flags fall back to the defaults
    data = {k: v for k, v in payload.items() if v is not None}
    try:
        return Brief.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first.get("loc", ()))
        raise InvalidRequestBody(f"Invalid brief field '{where}': {first.get('msg')}")

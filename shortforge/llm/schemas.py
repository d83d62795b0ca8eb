from pydantic import BaseModel, Field
from typing import List

class Beat(BaseModel):
    timestamp: str = Field(..., description="Window inside the short, e.g. 0:00-0:03")
    narration: str
    visual: str

class ShortPlan(BaseModel):
    # only the wire names are accepted
    title: str
    hook: str
    summary: str
    pacing: str
    beats: List[Beat]
    cta: str
    hashtags: List[str]
    distribution_tips: List[str] = Field(..., alias="distributionTips")

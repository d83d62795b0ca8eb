from __future__ import annotations

import copy
import json

import httpx

VALID_PLAN = {
    "title": "Three Hooks That Stop the Scroll",
    "hook": "Your first second is losing 70% of viewers.",
    "summary": "A fast breakdown of three hook formats that lift retention on Shorts.",
    "pacing": "Cut every 1.5s, slow down on the reveal, snap back for the CTA.",
    "beats": [
        {"timestamp": "0:00-0:02", "narration": "Your first second is losing 70% of viewers.", "visual": "Hard zoom on face, red retention graph."},
        {"timestamp": "0:02-0:15", "narration": "Hook one: the open loop.", "visual": "Text pop 'OPEN LOOP', B-roll of cliffhanger."},
        {"timestamp": "0:15-0:30", "narration": "Hook two: the bold claim.", "visual": "Whip pan to whiteboard."},
        {"timestamp": "0:30-0:45", "narration": "Subscribe for hook four.", "visual": "Point at subscribe button."},
    ],
    "cta": "Subscribe for hook four tomorrow.",
    "hashtags": ["#shorts", "#youtubetips", "#hooks", "#retention", "#creator"],
    "distributionTips": [
        "Post at 6pm local time.",
        "Pin a comment with hook four teaser.",
        "Reuse the first beat as the thumbnail frame.",
    ],
}

VALID_BRIEF = {
    "apiKey": "sk-test-1234567890",
    "topic": "3 hooks to instantly increase retention on Shorts",
    "audience": "Creators stuck at 1-10k subscribers",
    "tone": "Energetic hype",
    "goal": "Drive channel subscriptions",
    "duration": "45 seconds",
    "platformFocus": "YouTube Shorts",
}


def plan(**overrides) -> dict:
    p = copy.deepcopy(VALID_PLAN)
    p.update(overrides)
    return p


def brief(**overrides) -> dict:
    b = dict(VALID_BRIEF)
    b.update(overrides)
    return b


def completion_response(content) -> httpx.Response:
    return httpx.Response(
        200,
        json={"id": "chatcmpl-1", "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]},
    )


class FakeUpstream:
    """Records outbound requests and replies with a fixed response."""

    def __init__(self, response: httpx.Response | None = None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return self.response

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def dependency(self):
        async def _override():
            async with self.client() as c:
                yield c
        return _override

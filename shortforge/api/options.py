"""
Form vocabulary served to the page: select options, defaults, quick presets.
"""

TONE_OPTIONS = [
    "Energetic hype",
    "Inspirational mentor",
    "Deadpan humor",
    "Authoritative",
    "Story-driven cinematic",
]

GOAL_OPTIONS = [
    "Drive channel subscriptions",
    "Promote product awareness",
    "Grow newsletter signups",
    "Boost course enrollment",
    "Spark viral conversation",
]

DURATION_OPTIONS = ["30 seconds", "45 seconds", "60 seconds", "75 seconds"]

PLATFORMS = [
    "YouTube Shorts",
    "Instagram Reels",
    "TikTok",
    "Facebook Reels",
]

FORM_DEFAULTS = {
    "topic": "How to double your YouTube editing speed without losing quality",
    "audience": "Solo content creators and editors",
    "tone": TONE_OPTIONS[0],
    "goal": GOAL_OPTIONS[0],
    "duration": DURATION_OPTIONS[1],
    "platformFocus": PLATFORMS[0],
    "includeCaptions": True,
    "includeBroll": True,
}

# partial overrides applied on top of the current form
PRESETS = [
    {
        "label": "Creator acceleration",
        "topic": "3 hooks to instantly increase retention on Shorts",
        "audience": "Creators stuck at 1-10k subscribers",
        "tone": "Energetic hype",
        "goal": "Drive channel subscriptions",
    },
    {
        "label": "Product drop",
        "topic": "Launch teaser for AI-powered note-taking app",
        "audience": "Busy tech professionals",
        "tone": "Story-driven cinematic",
        "goal": "Promote product awareness",
    },
    {
        "label": "Education viral",
        "topic": "Explain quantum computing using coffee shop analogies",
        "audience": "Curious lifelong learners",
        "tone": "Inspirational mentor",
        "goal": "Spark viral conversation",
    },
]


def form_options() -> dict:
    return {
        "defaults": FORM_DEFAULTS,
        "tones": TONE_OPTIONS,
        "goals": GOAL_OPTIONS,
        "durations": DURATION_OPTIONS,
        "platforms": PLATFORMS,
        "presets": PRESETS,
    }

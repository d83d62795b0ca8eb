"""
Plain-text renderings of a validated plan.
What it produces:
- The beat sheet (timestamp, narration, visual per beat)
- The full blueprint (everything, ready to paste into a doc)

And, the main purpose:
Same text the page copies to the clipboard, usable from the CLI.
"""


from shortforge.llm.schemas import ShortPlan


def beat_sheet_text(plan: ShortPlan) -> str:
    return "\n\n".join(
        f"{b.timestamp} — Narration: {b.narration}\nVisual: {b.visual}"
        for b in plan.beats
    )


def full_text(plan: ShortPlan) -> str:
    tips = "\n- ".join(plan.distribution_tips)
    return (
        f"Title: {plan.title}\n"
        f"Hook: {plan.hook}\n"
        f"Summary: {plan.summary}\n"
        f"Pacing: {plan.pacing}\n"
        f"\n"
        f"Beats:\n{beat_sheet_text(plan)}\n"
        f"\n"
        f"CTA: {plan.cta}\n"
        f"Hashtags: {', '.join(plan.hashtags)}\n"
        f"Distribution tips:\n- {tips}"
    )

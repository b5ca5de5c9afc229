"""Progress summaries shown on the achievements views."""
from __future__ import annotations

from dataclasses import dataclass

from .const import TOTAL_DAYS


@dataclass(frozen=True)
class ProgressTitle:
    emoji: str
    title: str
    description: str


@dataclass(frozen=True)
class WorkshopStage:
    id: int
    name: str
    emoji: str
    description: str
    min_days: int
    max_days: int


WORKSHOP_STAGES = [
    WorkshopStage(0, "The Quiet Workshop", "🌙",
                  "The workshop is quiet and dark. Santa's helpers are getting ready for the big night!", 0, 1),
    WorkshopStage(1, "Lights Turn On!", "💡",
                  "The workshop lights up! The magic of Christmas is beginning to sparkle.", 2, 5),
    WorkshopStage(2, "The Elves Arrive!", "🧝",
                  "Santa's helpful elves have arrived! They're busy preparing for Christmas.", 6, 9),
    WorkshopStage(3, "Reindeer Arrive!", "🦌",
                  "The reindeer have arrived at the workshop! They're getting ready to fly.", 10, 13),
    WorkshopStage(4, "The Sleigh Appears!", "🛷",
                  "Santa's magical sleigh is ready! It's almost time for the big journey.", 14, 17),
    WorkshopStage(5, "Gifts Stack Up!", "🎁",
                  "The workshop is filling with beautiful gifts! Christmas is getting closer!", 18, 21),
    WorkshopStage(6, "Santa Gets Ready!", "🎅",
                  "Santa is putting on his suit and checking his list! The big night is almost here!", 22, 23),
    WorkshopStage(7, "Santa Takes Off!", "🚀",
                  "Merry Christmas! Santa has taken off on his journey around the world! "
                  "You completed all 24 days!", 24, 24),
]

MILESTONES = {
    1: "Opened your first door!",
    5: "Completed 5 days!",
    12: "Halfway there!",
    18: "Almost there!",
    24: "Completed all 24 days!",
}


def completion_percentage(completed: int, total: int = TOTAL_DAYS) -> int:
    """Percentage of days completed, rounded half up and capped at 100."""
    if total <= 0:
        return 0
    return min(100, int(completed * 100 / total + 0.5))


def progress_title(completed: int) -> ProgressTitle:
    if completed <= 0:
        return ProgressTitle("🌱", "Christmas Beginner", "Just getting started!")
    if completed <= 5:
        return ProgressTitle("❄️", "Snowflake Starter", "You're learning the basics!")
    if completed <= 10:
        return ProgressTitle("🎄", "Tree Decorator", "You're making great progress!")
    if completed <= 15:
        return ProgressTitle("🌟", "Star Shiner", "You're really shining!")
    if completed <= 20:
        return ProgressTitle("🎁", "Gift Wrapper", "You're wrapping up your journey!")
    if completed < TOTAL_DAYS:
        return ProgressTitle("🎅", "Santa's Helper", "You're almost there!")
    return ProgressTitle("🏆", "Christmas Champion", "You completed everything! Amazing!")


def workshop_stage(completed: int) -> WorkshopStage:
    for stage in WORKSHOP_STAGES:
        if stage.min_days <= completed <= stage.max_days:
            return stage
    if completed > TOTAL_DAYS:
        return WORKSHOP_STAGES[-1]
    return WORKSHOP_STAGES[0]


def next_stage(completed: int) -> WorkshopStage | None:
    """The stage after the current one, None once the final stage is reached."""
    current = workshop_stage(completed)
    if current.id + 1 < len(WORKSHOP_STAGES):
        return WORKSHOP_STAGES[current.id + 1]
    return None


def milestone_description(day: int) -> str | None:
    return MILESTONES.get(day)


def streak_message(new_streak: int | None) -> str:
    if not new_streak:
        return ""
    if new_streak > 1:
        return f"You're on a {new_streak}-day streak! 🔥"
    return "You started a new streak! 🔥"

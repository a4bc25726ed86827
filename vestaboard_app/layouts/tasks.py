"""
Task list layout: a colored icon per owning list, then the title.

Tasks whose list matches no rule are left off the board. When more tasks
qualify than there are rows, a random sample is shown.
"""

import random
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..board.grid import COLS, ROWS, Grid
from ..data.models import Task
from ..logging import get_layout_logger

logger = get_layout_logger(__name__, "tasks")


@dataclass(frozen=True)
class TaskRule:
    """Maps task lists whose name contains `fragment` to `icon`."""
    fragment: str
    icon: str

    def matches(self, task_list: str) -> bool:
        return self.fragment.lower() in task_list.lower()


class TaskLayout:
    """Up to ROWS tasks, each prefixed with its list's icon."""

    def __init__(self, rules: Iterable, rng: Optional[random.Random] = None):
        self.rules = tuple(r if isinstance(r, TaskRule) else TaskRule(*r) for r in rules)
        self.rng = rng or random.Random()

    def icon_for(self, task: Task) -> Optional[str]:
        for rule in self.rules:
            if rule.matches(task.task_list):
                return rule.icon
        return None

    def render(self, tasks: Sequence[Task]) -> Grid:
        classified = []
        for task in tasks:
            icon = self.icon_for(task)
            if icon is not None:
                classified.append((icon, task))

        picked = self.rng.sample(classified, min(ROWS, len(classified)))
        logger.debug("Tasks picked", total=len(tasks), matched=len(classified), shown=len(picked))

        # Icon takes the first cell, the title gets the rest
        rows = [icon + task.title[:COLS - 1] for icon, task in picked]
        return Grid.compose(rows)

"""Sentence starter picker for the writing spinner."""

from __future__ import annotations

import random
from typing import Dict, List, Mapping, Optional, Sequence


class StarterPicker:
    """Draws starters per category without showing the same one again
    until the whole pool has been used.

    After a full cycle the last pick is held back once, so the same starter
    never appears twice in a row (unless the pool has a single item).
    """

    def __init__(self, starters: Mapping[str, Sequence[str]], rng: Optional[random.Random] = None):
        self.starters = starters
        self.rng = rng or random.Random()
        self._recent: Dict[str, List[int]] = {}

    def categories(self) -> List[str]:
        return list(self.starters)

    def pick(self, category: str) -> Optional[str]:
        pool = self.starters.get(category)
        if not pool:
            return None

        recent = self._recent.setdefault(category, [])
        available = [i for i in range(len(pool)) if i not in recent]

        if not available:
            last = recent[-1]
            recent.clear()
            available = [i for i in range(len(pool)) if i != last] or [last]

        idx = self.rng.choice(available)
        recent.append(idx)
        return pool[idx]

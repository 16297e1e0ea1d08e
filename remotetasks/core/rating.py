"""Five-star rating model for the video player."""

import math
from typing import List, Optional

from .state import ObservableValue

MAX_STARS = 5


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative ratings (4.5 -> 5)."""
    return int(math.floor(value + 0.5))


class StarRating:
    """
    Stars filled from one source of truth.

    A rating the user tapped takes precedence; until then the record's fixed
    rating (rounded half-up) is shown. With neither, no stars are filled.
    """

    def __init__(self, fixed_rating: Optional[float] = None):
        self.fixed_rating = fixed_rating
        self.user_rating: ObservableValue[Optional[int]] = ObservableValue(None)

    def tap(self, index: int) -> int:
        if not 1 <= index <= MAX_STARS:
            raise ValueError(f"Star index must be between 1 and {MAX_STARS}, got {index}")
        self.user_rating.set(index)
        return index

    def effective_rating(self) -> int:
        tapped = self.user_rating.get()
        if tapped is not None:
            return tapped
        if self.fixed_rating is None:
            return 0
        return min(MAX_STARS, max(0, round_half_up(self.fixed_rating)))

    def stars(self) -> List[bool]:
        filled = self.effective_rating()
        return [index <= filled for index in range(1, MAX_STARS + 1)]

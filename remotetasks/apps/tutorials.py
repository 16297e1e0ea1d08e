"""Udemy tutorials - card list with title search."""

from typing import Iterable, List

from ..core.sample_data import SAMPLE_TUTORIALS
from ..core.schema import TutorialCard
from ..core.search_service import SearchState
from ..core.state import SelectionState


class TutorialListViewModel:
    def __init__(self, cards: Iterable[TutorialCard] = SAMPLE_TUTORIALS):
        self.cards = tuple(cards)
        self.search = SearchState(self.cards, field="title")
        self.selection: SelectionState[TutorialCard] = SelectionState("tutorials.card")

    def visible_cards(self) -> List[TutorialCard]:
        return self.search.results.get()

    def select_card(self, card: TutorialCard) -> None:
        self.selection.select(card)

"""
WeatherWiz - home screen, mock location search, forecast strip and favorites.
Favorites are the only state that outlives the view-model; they go through the
injected settings store.
"""

from datetime import datetime, timedelta
from typing import Callable, Iterable, List, Optional, Union

from ..core import config
from ..core.favorites import FavoriteSet
from ..core.sample_data import SAMPLE_LOCATIONS
from ..core.schema import DailyForecast, HourlyForecast, Location
from ..core.search_service import SearchState
from ..core.settings_store import SettingsStore
from ..core.state import ObservableValue, SelectionState

HOURLY = "hourly"
DAILY = "daily"

PLACEHOLDER_CITY = "City"
PLACEHOLDER_ICON = "questionmark"


def hourly_forecast(start: datetime, slots: Optional[int] = None) -> List[HourlyForecast]:
    """Mock hourly strip starting at the top of `start`'s day."""
    midnight = start.replace(hour=0, minute=0, second=0, microsecond=0)
    count = slots if slots is not None else config.HOURLY_SLOTS
    return [
        HourlyForecast(time=midnight + timedelta(hours=hour), temperature=23.0, weather_icon="cloud.sun")
        for hour in range(count)
    ]


def daily_forecast(start: datetime, slots: Optional[int] = None) -> List[DailyForecast]:
    """Mock daily strip starting today."""
    count = slots if slots is not None else config.DAILY_SLOTS
    return [
        DailyForecast(date=(start + timedelta(days=day)).date(), high_temp=25.0, low_temp=18.0, weather_icon="sun.max")
        for day in range(count)
    ]


class WeatherHomeViewModel:
    """
    Home screen state.

    `is_favorite` mirrors the selected location's membership in the favorite
    set for the lifetime of the screen; it is refreshed on appear and
    whenever a location is picked, and updated by every toggle.
    """

    def __init__(
        self,
        store: SettingsStore,
        locations: Iterable[Location] = SAMPLE_LOCATIONS,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.locations = tuple(locations)
        self.clock = clock
        self.favorites = FavoriteSet(store)
        self.selection: SelectionState[Location] = SelectionState("weatherwiz.location")
        self.search = SearchState(self.locations, field="name")
        self.is_favorite = ObservableValue(False)
        self.forecast_mode = ObservableValue(HOURLY)

    # Location search and selection

    def search_locations(self, text: str) -> List[Location]:
        return self.search.set_query(text)

    def pick_location(self, location: Location) -> None:
        """Select a search result and close the search."""
        self.selection.select(location)
        self.search.reset()
        self._refresh_favorite()

    @property
    def selected_location(self) -> Optional[Location]:
        return self.selection.current()

    # Favorites

    def on_appear(self) -> None:
        self._refresh_favorite()

    def _refresh_favorite(self) -> None:
        location = self.selection.current()
        if location is None:
            return
        self.is_favorite.set(self.favorites.is_member(location.name))

    def toggle_favorite(self) -> bool:
        """Toggle the selected location; with nothing selected this does nothing."""
        location = self.selection.current()
        if location is None:
            return self.is_favorite.get()

        is_member = self.favorites.toggle(location.name)
        self.is_favorite.set(is_member)
        return is_member

    def favorite_locations(self) -> List[Location]:
        """Saved favorites resolved against the sample locations, in saved order."""
        by_name = {}
        for location in self.locations:
            by_name.setdefault(location.name, location)
        return [by_name[name] for name in self.favorites.names() if name in by_name]

    # Header

    @property
    def city_name(self) -> str:
        location = self.selection.current()
        return location.name if location else PLACEHOLDER_CITY

    @property
    def icon(self) -> str:
        location = self.selection.current()
        return location.icon if location else PLACEHOLDER_ICON

    @property
    def current_temp(self) -> int:
        location = self.selection.current()
        return location.current_temp if location else 0

    @property
    def high_low(self) -> tuple:
        location = self.selection.current()
        if location is None:
            return (0, 0)
        return (location.high_temp, location.low_temp)

    @property
    def conditions(self) -> str:
        location = self.selection.current()
        return location.description if location else ""

    # Forecast strip

    def show_hourly(self) -> None:
        self.forecast_mode.set(HOURLY)

    def show_daily(self) -> None:
        self.forecast_mode.set(DAILY)

    def forecast(self) -> List[Union[HourlyForecast, DailyForecast]]:
        if self.forecast_mode.get() == HOURLY:
            return hourly_forecast(self.clock())
        return daily_forecast(self.clock())

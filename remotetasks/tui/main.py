"""
Terminal front-end - renders the WeatherWiz, StudyHive and EduStream view-models.
Screens subscribe to view-model state and redraw on change; all behaviour
lives in the view-models.
"""

from typing import Callable, List, Optional

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, OptionList, Static

from ..apps.edustream import TITLE as VIDEOS_TITLE, VideoListViewModel, VideoPlayerViewModel
from ..apps.studyhive import TITLE as STUDYHIVE_TITLE, ChatSessionViewModel, StudyHiveViewModel
from ..apps.weatherwiz import WeatherHomeViewModel
from ..core.config import VERSION, get_settings_store
from ..core.errors import RecordValidationError
from ..core.settings_store import SettingsStore
from ..util.logging import logger
from .formatting import (
    favorite_label,
    format_conditions,
    format_favorite_row,
    format_forecast,
    format_messages,
    star_row,
)


class SubscribingScreen(Screen):
    """Screen that drops its view-model subscriptions when unmounted."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._unsubscribers: List[Callable[[], None]] = []

    def watch_state(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribers.append(unsubscribe)

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()


class WeatherScreen(SubscribingScreen):
    """WeatherWiz home: header, favorite toggle, forecast strip and location search."""

    @property
    def vm(self) -> WeatherHomeViewModel:
        return self.app.weather

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Horizontal(
                Static(self.vm.city_name, id="city"),
                Button(favorite_label(False), id="favorite"),
                Static(self.vm.icon, id="icon"),
                classes="row",
            ),
            Static(id="conditions"),
            Horizontal(
                Button("Hourly", id="hourly"),
                Button("Daily", id="daily"),
                classes="row",
            ),
            Static(id="forecast"),
            Input(id="location-search", placeholder="Search for a location"),
            OptionList(id="location-results"),
            Static("Favorites", classes="section-title"),
            Static(id="favorites"),
            id="weather-container",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.watch_state(self.vm.selection.subscribe(lambda _: self._render_header()))
        self.watch_state(self.vm.is_favorite.subscribe(self._render_favorite))
        self.watch_state(self.vm.forecast_mode.subscribe(lambda _: self._render_forecast()))
        self.watch_state(self.vm.search.subscribe(self._render_results))

        self.vm.on_appear()
        self._render_header()
        self._render_favorite(self.vm.is_favorite.get())
        self._render_forecast()
        self._render_results(self.vm.search.results.get())
        self._render_favorites()

    def _render_header(self) -> None:
        high, low = self.vm.high_low
        self.query_one("#city", Static).update(self.vm.city_name)
        self.query_one("#icon", Static).update(self.vm.icon)
        self.query_one("#conditions", Static).update(
            format_conditions(self.vm.current_temp, self.vm.conditions, high, low)
        )

    def _render_favorite(self, is_favorite: bool) -> None:
        self.query_one("#favorite", Button).label = favorite_label(is_favorite)
        self._render_favorites()

    def _render_forecast(self) -> None:
        self.query_one("#forecast", Static).update(format_forecast(self.vm.forecast()))

    def _render_results(self, results) -> None:
        options = self.query_one("#location-results", OptionList)
        options.clear_options()
        if results:
            options.add_options([location.name for location in results])
        else:
            options.add_option("No results")

    def _render_favorites(self) -> None:
        rows = [format_favorite_row(location) for location in self.vm.favorite_locations()]
        self.query_one("#favorites", Static).update("\n".join(rows) or "No favorites yet")

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "location-search":
            self.vm.search_locations(event.value)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        results = self.vm.search.results.get()
        if event.option_index >= len(results):
            return
        self.vm.pick_location(results[event.option_index])
        self.query_one("#location-search", Input).value = ""

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "favorite":
            self.vm.toggle_favorite()
        elif event.button.id == "hourly":
            self.vm.show_hourly()
        elif event.button.id == "daily":
            self.vm.show_daily()


class StudyHiveScreen(SubscribingScreen):
    """Study groups, group creation and a chat session for the selected group."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session: Optional[ChatSessionViewModel] = None
        self._session_unsubscribe: Optional[Callable[[], None]] = None

    @property
    def vm(self) -> StudyHiveViewModel:
        return self.app.studyhive

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Static(STUDYHIVE_TITLE, classes="title"),
            Input(id="group-filter", placeholder="Filter groups"),
            OptionList(id="groups"),
            Horizontal(
                Input(id="group-name", placeholder="Group Name"),
                Input(id="group-description", placeholder="Description"),
                Button("Create", id="create-group", variant="primary"),
                classes="row",
            ),
            Static(id="session-title", classes="section-title"),
            Static(id="messages"),
            Input(id="message", placeholder="Type your message..."),
            Static(id="status", classes="hint"),
            id="studyhive-container",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.watch_state(self.vm.search.subscribe(self._render_groups))
        self.watch_state(self.vm.create_error.subscribe(self._render_create_error))
        self._render_groups(self.vm.visible_groups())

    def on_unmount(self) -> None:
        if self._session_unsubscribe:
            self._session_unsubscribe()
            self._session_unsubscribe = None
        super().on_unmount()

    def _render_groups(self, groups) -> None:
        options = self.query_one("#groups", OptionList)
        options.clear_options()
        options.add_options([group.name for group in groups] or ["No groups"])

    def _render_create_error(self, error: Optional[RecordValidationError]) -> None:
        self._status(f"Could not create group: {error.message}" if error else "")

    def _render_messages(self, messages) -> None:
        self.query_one("#messages", Static).update(format_messages(messages))

    def _status(self, text: str) -> None:
        self.query_one("#status", Static).update(text)

    def _open_session(self, index: int) -> None:
        groups = self.vm.visible_groups()
        if index >= len(groups):
            return
        group = groups[index]
        self.vm.select_group(group)

        if self._session_unsubscribe:
            self._session_unsubscribe()
        self.session = self.vm.join_session(group)
        self._session_unsubscribe = self.session.messages.subscribe(self._render_messages)

        self.query_one("#session-title", Static).update(self.session.title)
        self._render_messages(self.session.messages.items())

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "group-filter":
            self.vm.search.set_query(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "message" or self.session is None:
            return
        self.session.set_draft(event.value)
        try:
            self.session.send()
        except RecordValidationError as e:
            self._status(e.message)
            return
        event.input.value = ""
        self._status("")

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id == "groups":
            self._open_session(event.option_index)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "create-group":
            return
        name_input = self.query_one("#group-name", Input)
        description_input = self.query_one("#group-description", Input)

        self.vm.begin_create()
        if self.vm.create_group(name_input.value, description_input.value):
            name_input.value = ""
            description_input.value = ""


class VideosScreen(SubscribingScreen):
    """EduStream list with a player panel; keys 1-5 rate the open video."""

    BINDINGS = [(str(i), f"rate({i})", f"Rate {i}") for i in range(1, 6)]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.player: Optional[VideoPlayerViewModel] = None

    @property
    def vm(self) -> VideoListViewModel:
        return self.app.videos

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Static(VIDEOS_TITLE, classes="title"),
            Input(id="video-search", placeholder="Search videos"),
            OptionList(id="videos"),
            Static(id="player"),
            Static(id="stars"),
            id="videos-container",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.watch_state(self.vm.search.subscribe(self._render_videos))
        self._render_videos(self.vm.visible_videos())

    def _render_videos(self, videos) -> None:
        options = self.query_one("#videos", OptionList)
        options.clear_options()
        options.add_options([video.title for video in videos] or ["No results"])

    def _render_player(self) -> None:
        if self.player is None:
            return
        video = self.player.video
        self.query_one("#player", Static).update(f"{video.title}\n{video.description}\n{self.player.stream_url}")
        self.query_one("#stars", Static).update(star_row(self.player.rating.stars()))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "video-search":
            self.vm.search.set_query(event.value)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        videos = self.vm.visible_videos()
        if event.option_index >= len(videos):
            return
        self.player = self.vm.open_player(videos[event.option_index])
        self._render_player()

    def action_rate(self, index: int) -> None:
        if self.player is None:
            return
        self.player.tap_star(index)
        self._render_player()


class RemoteTasksApp(App):
    """Terminal host for the demo view-models."""

    TITLE = "RemoteTasks"
    SUB_TITLE = f"v{VERSION}"

    CSS = """
    .title {
        text-style: bold;
        margin-bottom: 1;
    }

    .section-title {
        text-style: bold;
        margin-top: 1;
    }

    .hint {
        color: $text-muted;
    }

    #weather-container, #studyhive-container, #videos-container {
        overflow-y: auto;
    }

    .row {
        height: auto;
    }

    .row Input {
        width: 1fr;
    }

    #city {
        width: 1fr;
        height: 3;
        content-align: left middle;
        text-style: bold;
    }

    #icon {
        width: auto;
        height: 3;
        content-align: left middle;
        margin-left: 1;
    }

    OptionList {
        max-height: 8;
    }
    """

    BINDINGS = [
        ("w", "switch_screen('weather')", "Weather"),
        ("s", "switch_screen('studyhive')", "Study Hive"),
        ("v", "switch_screen('videos')", "Videos"),
        ("q", "quit", "Quit"),
    ]

    SCREENS = {
        "weather": WeatherScreen,
        "studyhive": StudyHiveScreen,
        "videos": VideosScreen,
    }

    def __init__(self, store: Optional[SettingsStore] = None, start_screen: str = "weather"):
        super().__init__()
        self.weather = WeatherHomeViewModel(store if store is not None else get_settings_store())
        self.studyhive = StudyHiveViewModel()
        self.videos = VideoListViewModel()
        self.start_screen = start_screen if start_screen in self.SCREENS else "weather"

    def on_mount(self) -> None:
        logger.info(f"Starting terminal front-end on '{self.start_screen}'")
        self.push_screen(self.start_screen)


def main(start_screen: str = "weather"):
    """Run the terminal front-end."""
    app = RemoteTasksApp(start_screen=start_screen)
    app.run()


if __name__ == "__main__":
    main()

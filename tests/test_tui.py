"""
Terminal front-end tests - text formatting, app wiring and the launcher script.
"""

import asyncio
from datetime import date, datetime

import pytest
from unittest.mock import patch

from remotetasks.core.sample_data import SAMPLE_LOCATIONS, SAMPLE_MESSAGES
from remotetasks.core.schema import DailyForecast, HourlyForecast
from remotetasks.core.settings_store import InMemorySettingsStore
from remotetasks.tui.formatting import (
    favorite_label,
    format_conditions,
    format_favorite_row,
    format_forecast,
    format_messages,
    star_row,
)
from remotetasks.tui.main import RemoteTasksApp


class TestFormatting:
    """Test plain-text renderings."""

    def test_favorite_label(self):
        assert favorite_label(True) == "♥ Favorite"
        assert favorite_label(False) == "♡ Favorite"

    def test_conditions(self):
        assert format_conditions(65, "Partly Cloudy", 70, 58) == "65°C, Partly Cloudy\nH: 70°C L: 58°C"

    def test_hourly_forecast(self):
        entries = [
            HourlyForecast(time=datetime(2024, 3, 10, 0), temperature=23.0, weather_icon="cloud.sun"),
            HourlyForecast(time=datetime(2024, 3, 10, 1), temperature=23.0, weather_icon="cloud.sun"),
        ]
        assert format_forecast(entries) == "0:00 cloud.sun 23°C  |  1:00 cloud.sun 23°C"

    def test_daily_forecast(self):
        entries = [DailyForecast(date=date(2024, 3, 10), high_temp=25.0, low_temp=18.0, weather_icon="sun.max")]
        assert format_forecast(entries) == "Mar 10 sun.max H: 25°C L: 18°C"

    def test_favorite_row(self):
        assert format_favorite_row(SAMPLE_LOCATIONS[2]) == "London  58°C (H: 62°C L: 53°C)  cloud.rain"

    def test_messages(self):
        assert format_messages(SAMPLE_MESSAGES) == "User A: Hello, everyone!\nUser B: Hi, how's it going?"

    def test_star_row(self):
        assert star_row([True, True, False, False, False]) == "★★☆☆☆"


class TestRemoteTasksApp:
    """Test app wiring."""

    def test_viewmodels_use_given_store(self):
        store = InMemorySettingsStore()
        app = RemoteTasksApp(store=store)
        assert app.weather.favorites.store is store

    def test_unknown_start_screen_defaults_to_weather(self):
        app = RemoteTasksApp(store=InMemorySettingsStore(), start_screen="nope")
        assert app.start_screen == "weather"

    def test_favorite_button_toggles_selected_location(self):
        """The header row fits an 80-column terminal and the toggle is clickable."""
        store = InMemorySettingsStore()
        app = RemoteTasksApp(store=store)
        app.weather.pick_location(SAMPLE_LOCATIONS[2])

        async def drive():
            async with app.run_test(size=(80, 24)) as pilot:
                await pilot.pause()
                favorite = app.screen.query_one("#favorite")
                assert favorite.region.right <= 80
                assert app.screen.query_one("#icon").region.right <= 80
                await pilot.click("#favorite")
                await pilot.pause()

        asyncio.run(drive())

        assert store.get("locations") == ["London"]
        assert app.weather.is_favorite.get() == True


class TestRunTuiScript:
    """Test the launcher script."""

    def test_launches_requested_screen(self):
        from scripts.run_tui import main

        with patch("remotetasks.tui.main.main") as tui_main:
            assert main(["--screen", "studyhive"]) == 0

        tui_main.assert_called_once_with(start_screen="studyhive")

    def test_config_problems_abort(self, capsys):
        from scripts.run_tui import main

        with patch("remotetasks.core.config.validate_config", return_value=["Invalid LOG_LEVEL: LOUD"]), \
             patch("remotetasks.tui.main.main") as tui_main:
            assert main([]) == 1

        tui_main.assert_not_called()
        assert "Invalid LOG_LEVEL: LOUD" in capsys.readouterr().out

    def test_rejects_unknown_screen(self):
        from scripts.run_tui import main

        with pytest.raises(SystemExit):
            main(["--screen", "timevault"])

    def test_version_flag(self, capsys):
        from scripts.run_tui import main

        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "0.3.0" in capsys.readouterr().out

    def test_app_subtitle_shows_version(self):
        assert RemoteTasksApp.SUB_TITLE == "v0.3.0"

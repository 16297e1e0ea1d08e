"""Plain-text renderings of view-model state for the terminal screens."""

from typing import Iterable, List, Sequence, Union

from ..core.schema import ChatMessage, DailyForecast, HourlyForecast, Location


def favorite_label(is_favorite: bool) -> str:
    return "♥ Favorite" if is_favorite else "♡ Favorite"


def format_conditions(current_temp: int, conditions: str, high: int, low: int) -> str:
    return f"{current_temp}°C, {conditions}\nH: {high}°C L: {low}°C"


def format_forecast(entries: Iterable[Union[HourlyForecast, DailyForecast]]) -> str:
    cells = []
    for entry in entries:
        if isinstance(entry, HourlyForecast):
            cells.append(f"{entry.time.hour}:00 {entry.weather_icon} {entry.temperature:.0f}°C")
        else:
            cells.append(
                f"{entry.date:%b %d} {entry.weather_icon} H: {entry.high_temp:.0f}°C L: {entry.low_temp:.0f}°C"
            )
    return "  |  ".join(cells)


def format_favorite_row(location: Location) -> str:
    return (
        f"{location.name}  {location.current_temp}°C "
        f"(H: {location.high_temp}°C L: {location.low_temp}°C)  {location.icon}"
    )


def format_messages(messages: Sequence[ChatMessage]) -> str:
    return "\n".join(f"{message.sender}: {message.text}" for message in messages)


def star_row(stars: List[bool]) -> str:
    return "".join("★" if filled else "☆" for filled in stars)

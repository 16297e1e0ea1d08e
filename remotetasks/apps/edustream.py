"""
EduStream - educational video list, player detail and star rating.
"""

from typing import Iterable, List, Optional

from ..core.rating import StarRating
from ..core.sample_data import SAMPLE_VIDEOS
from ..core.schema import Video
from ..core.search_service import SearchState
from ..core.state import SelectionState

TITLE = "Educational Videos"


class VideoPlayerViewModel:
    """Detail screen for one video: playback source plus its rating widget."""

    def __init__(self, video: Video):
        self.video = video
        self.rating = StarRating(video.rating)

    @property
    def stream_url(self) -> str:
        return self.video.video_url

    def tap_star(self, index: int) -> List[bool]:
        self.rating.tap(index)
        return self.rating.stars()


class VideoListViewModel:
    def __init__(self, videos: Iterable[Video] = SAMPLE_VIDEOS):
        self.videos = tuple(videos)
        self.search = SearchState(self.videos, field="title")
        self.selection: SelectionState[Video] = SelectionState("edustream.video")

    def visible_videos(self) -> List[Video]:
        return self.search.results.get()

    def open_player(self, video: Video) -> VideoPlayerViewModel:
        self.selection.select(video)
        return VideoPlayerViewModel(video)

    def close_player(self) -> None:
        self.selection.clear()

    @property
    def selected_video(self) -> Optional[Video]:
        return self.selection.current()

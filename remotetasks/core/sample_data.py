"""
Seed records for every demo app.
Built once at import and never modified; stores are tuples of frozen records.
"""

from .schema import ChatMessage, Location, StudyGroup, TutorialCard, Video

SAMPLE_VIDEOS = (
    Video(
        title="Introduction to Physics",
        description="Explore the fundamental laws of motion.",
        thumbnail_url="https://upload.wikimedia.org/wikipedia/commons/b/bc/Refresh_icon.png",
        video_url="https://example.com/physicsvideo.mp4",
        rating=4.5,
    ),
    Video(
        title="The Wonders of Biology",
        description="Discover the intricate workings of living organisms.",
        thumbnail_url="https://example.com/biology.jpg",
        video_url="https://example.com/biologyvideo.mp4",
        rating=4.5,
    ),
    Video(
        title="Mathematical Mysteries",
        description="Unravel the beauty and power of mathematics.",
        thumbnail_url="https://example.com/math.jpg",
        video_url="https://example.com/mathvideo.mp4",
        rating=4.5,
    ),
    Video(
        title="Historical Journeys",
        description="Travel through time and explore pivotal events.",
        thumbnail_url="https://example.com/history.jpg",
        video_url="https://example.com/historyvideo.mp4",
        rating=4.5,
    ),
    Video(
        title="Coding Fundamentals",
        description="Learn the basics of computer programming.",
        thumbnail_url="https://example.com/coding.jpg",
        video_url="https://example.com/codingvideo.mp4",
        rating=4.5,
    ),
)

SAMPLE_STUDY_GROUPS = (
    StudyGroup(name="Calculus 101", description="Calculus study group"),
    StudyGroup(name="Intro to Biology", description="Biology topics overview"),
    StudyGroup(name="Web Development", description="Learning web technologies"),
)

SAMPLE_MESSAGES = (
    ChatMessage(sender="User A", text="Hello, everyone!"),
    ChatMessage(sender="User B", text="Hi, how's it going?"),
)

SAMPLE_LOCATIONS = (
    Location(name="San Francisco", current_temp=65, high_temp=70, low_temp=58, description="Partly Cloudy", icon="cloud.sun"),
    Location(name="New York", current_temp=72, high_temp=78, low_temp=65, description="Sunny", icon="sun.max.fill"),
    Location(name="London", current_temp=58, high_temp=62, low_temp=53, description="Rainy", icon="cloud.rain"),
    Location(name="San Mateo", current_temp=58, high_temp=62, low_temp=53, description="Rainy", icon="cloud.rain"),
    Location(name="Palo Alto", current_temp=58, high_temp=62, low_temp=53, description="Rainy", icon="cloud.rain"),
    Location(name="Vallejo", current_temp=58, high_temp=62, low_temp=53, description="Rainy", icon="cloud.rain"),
)

# Placeholder cards; the tutorials app ships no card content of its own
SAMPLE_TUTORIALS = (
    TutorialCard(title="SwiftUI Essentials", headline="Build your first declarative interface.", icon="swift"),
    TutorialCard(title="Layout and Stacks", headline="Arrange views with stacks, grids and spacers.", icon="square.stack.3d.up"),
    TutorialCard(title="State and Data Flow", headline="Keep views in sync with changing data.", icon="arrow.triangle.2.circlepath"),
    TutorialCard(title="Navigation Basics", headline="Move between screens with links and sheets.", icon="map"),
)

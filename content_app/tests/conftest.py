import pytest

from content_app.models import Video


# -----------------------------------------------------------------------------------
# Sample Video objects
# -----------------------------------------------------------------------------------
@pytest.fixture
def sample_video(db):
    """Free video with a Livepeer-style HLS source."""
    return Video.objects.create(
        title="Test Video",
        description="Sample video for testing.",
        hls_url="https://livepeercdn.com/hls/abc123xyz/index.m3u8",
    )

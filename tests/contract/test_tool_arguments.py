import pytest
from yt_grab.builder import NO_PLAYLIST_FLAG, build, request_arguments
from yt_grab.classifier import classify

# Contract: the exact argument vector handed to yt-dlp


@pytest.mark.contract
@pytest.mark.parametrize("url,expected", [
    (
        "https://x.test/watch?v=AAA",
        ["-S", "vcodec:h264,acodec:aac", "--merge-output-format", "mp4", "https://x.test/watch?v=AAA"],
    ),
    (
        "https://x.test/watch?v=AAA&list=PLxyz",
        [
            "-S",
            "vcodec:h264,acodec:aac",
            "--merge-output-format",
            "mp4",
            "--no-playlist",
            "https://x.test/watch?v=AAA&list=PLxyz",
        ],
    ),
])
def test_tool_arguments(url, expected):
    assert request_arguments(build(url, classify(url).is_playlist)) == expected


@pytest.mark.contract
@pytest.mark.parametrize("url", ["", "list=", "x", "https://x.test/p/list=1/v"])
def test_restriction_flag_iff_playlist(url):
    args = request_arguments(build(url, classify(url).is_playlist))
    assert (NO_PLAYLIST_FLAG in args) == classify(url).is_playlist

import pytest

from media_suite.sources import ApiSource, LocalSource, MediaApp, StreamSource, select_source


@pytest.mark.parametrize(
    "text, expected",
    [
        ("local", LocalSource),
        ("stream", StreamSource),
        ("STREAM", StreamSource),
        ("api", ApiSource),
        ("Api", ApiSource),
        ("apı", ApiSource),
        ("ſtream", StreamSource),
        ("LOCAL", LocalSource),
        ("xyz", LocalSource),
        ("", LocalSource),
        ("LOCAL ", LocalSource),
        (" api", LocalSource),
        ("stream\t", LocalSource),
        (None, LocalSource),
    ],
)
def test_select_source(text, expected):
    assert type(select_source(text)) is expected


def test_sources_describe_access_method(capsys):
    LocalSource().connect("a.mp3")
    StreamSource().connect("b.m3u8")
    ApiSource().connect("c")
    assert capsys.readouterr().out.splitlines() == [
        "Opening local file: a.mp3",
        "Accessing HLS stream: b.m3u8",
        "Requesting media from remote API: c",
    ]


def test_media_app_prints_banner_then_connects(capsys):
    MediaApp(StreamSource()).play_media("live.m3u8")
    assert capsys.readouterr().out.splitlines() == [
        "",
        "[Adapter Pattern]",
        "Accessing HLS stream: live.m3u8",
    ]


@pytest.mark.parametrize(
    "name",
    ["[bold]clip[/bold] :smile:.mp4", "a\tb.mp3", "a\rb.mp3", "x\x1b[31m.mp3"],
)
def test_media_name_is_printed_verbatim(capsys, name):
    LocalSource().connect(name)
    assert capsys.readouterr().out == f"Opening local file: {name}\n"

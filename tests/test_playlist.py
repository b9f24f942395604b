from media_suite.playlist import Playlist, PlaylistManager, Track, build_demo_playlist


def test_track_shows_title(capsys):
    Track("one.mp3").show_info()
    assert capsys.readouterr().out == "Track: one.mp3\n"


def test_playlist_is_preorder_and_insertion_ordered(capsys):
    inner = Playlist("Inner")
    inner.add(Track("b"))
    outer = Playlist("Outer")
    outer.add(inner)
    outer.add(Track("a"))
    inner.add(Track("c"))  # added after nesting, still shown
    outer.show_info()
    assert capsys.readouterr().out.splitlines() == [
        "Playlist: Outer",
        "Playlist: Inner",
        "Track: b",
        "Track: c",
        "Track: a",
    ]


def test_add_keeps_duplicates():
    pl = Playlist("Dupes")
    t = Track("same")
    pl.add(t)
    pl.add(t)
    assert pl.items == (t, t)


def test_empty_playlist_shows_only_title(capsys):
    Playlist("Empty").show_info()
    assert capsys.readouterr().out == "Playlist: Empty\n"


def test_demo_playlist(capsys):
    root = build_demo_playlist("song.mp3")
    PlaylistManager(root).show_all()
    assert capsys.readouterr().out.splitlines() == [
        "",
        "[Composite Pattern]",
        "Playlist: Main Playlist",
        "Track: song.mp3",
        "Track: Bonus Track.mp3",
        "Playlist: Chill Mix",
        "Track: TrackA.mp3",
        "Track: TrackB.mp3",
    ]
    assert len(root.items) == 3
    assert isinstance(root.items[2], Playlist)

from ytt.player import Playback, format_timestamp


class FakeReader:
    def __init__(self, progress=0.0):
        self.progress = progress
        self.seeks = []

    def seek(self, position):
        self.seeks.append(position)


class FakePlayer:
    def __init__(self):
        self.playing = True
        self._volume = 1.0

    def play(self):
        self.playing = True

    def pause(self):
        self.playing = False

    def is_playing(self):
        return self.playing

    def set_volume(self, volume):
        self._volume = volume

    def volume(self):
        return self._volume


class Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_format_timestamp():
    assert format_timestamp(0) == "00:00:00"
    assert format_timestamp(3725) == "01:02:05"
    assert format_timestamp(59.9) == "00:00:59"


def test_timestamp_without_reader():
    assert Playback().timestamp() == "00:00:00"


def test_timestamp_follows_reader():
    reader = FakeReader(progress=3725)
    assert Playback(reader=reader).timestamp() == format_timestamp(3725)


def test_seek_debounced_after_start():
    clock = Clock()
    reader = FakeReader(progress=100)
    playback = Playback(reader=reader, clock=clock)
    playback.seek(10)
    assert reader.seeks == []
    assert reader.progress == 100


def test_seek_forward_is_halved():
    clock = Clock()
    reader = FakeReader(progress=100)
    playback = Playback(reader=reader, clock=clock)
    clock.now += 1
    playback.seek(10)
    assert reader.progress == 105
    assert reader.seeks == [reader.progress]


def test_seek_backward_is_doubled_and_debounced():
    clock = Clock()
    reader = FakeReader(progress=100)
    playback = Playback(reader=reader, clock=clock)
    clock.now += 1
    playback.seek(-10)
    assert reader.progress == 80
    clock.now += 0.1
    playback.seek(-10)
    assert reader.progress == 80
    assert len(reader.seeks) == 1


def test_toggle():
    player = FakePlayer()
    playback = Playback(player=player)
    assert playback.is_playing()
    playback.toggle()
    assert not playback.is_playing()
    playback.toggle()
    assert playback.is_playing()


def test_no_player_defaults():
    playback = Playback()
    playback.toggle()
    playback.set_volume(50)
    assert playback.is_playing() is False
    assert playback.volume() == 0


def test_volume_is_clamped():
    playback = Playback(player=FakePlayer())
    playback.set_volume(200)
    assert playback.volume() == 150
    playback.set_volume(-5)
    assert playback.volume() == 0
    playback.set_volume(80)
    assert playback.volume() == 80
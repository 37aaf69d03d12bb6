import pygame
import pytest

from basketo.assets import AssetError, AssetManager, MusicTrack


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return ("asset",) + args


def failing(*args):
    raise OSError("missing file")


@pytest.fixture
def loaders():
    return {
        "texture_loader": Recorder(),
        "sound_loader": Recorder(),
        "font_loader": Recorder(),
        "music_loader": Recorder(),
    }


@pytest.fixture
def manager(loaders):
    m = AssetManager(**loaders)
    m.init(object())
    return m


def test_instance_is_shared(tmp_path):
    path = tmp_path / "shared.ogg"
    path.write_bytes(b"")
    shared = AssetManager.instance()
    shared.load_music("shared_song", str(path))
    try:
        assert AssetManager.instance().music("shared_song") == MusicTrack(str(path))
        assert AssetManager().music("shared_song") is None
    finally:
        shared.cleanup()


def test_texture_requires_renderer(loaders):
    m = AssetManager(**loaders)
    with pytest.raises(AssetError):
        m.load_texture("hero", "hero.png")
    assert loaders["texture_loader"].calls == []


def test_load_and_get_texture(manager, loaders):
    manager.load_texture("hero", "hero.png")
    assert manager.texture("hero") == ("asset", "hero.png")
    assert dict(manager.textures) == {"hero": ("asset", "hero.png")}


def test_second_load_is_noop(manager, loaders):
    manager.load_sound("jump", "a.wav")
    manager.load_sound("jump", "b.wav")
    assert loaders["sound_loader"].calls == [("a.wav",)]
    assert manager.sound("jump") == ("asset", "a.wav")


def test_font_key_includes_size(manager, loaders):
    manager.load_font("roboto", "r.ttf", 16)
    manager.load_font("roboto", "r.ttf", 24)
    assert manager.font("roboto_16") == ("asset", "r.ttf", 16)
    assert manager.font("roboto_24") == ("asset", "r.ttf", 24)
    assert manager.font("roboto") is None


def test_missing_lookup_returns_none(manager):
    assert manager.texture("nope") is None
    assert manager.sound("nope") is None
    assert manager.music("nope") is None


def test_failed_load_raises_and_stores_nothing():
    m = AssetManager(sound_loader=failing, music_loader=failing)
    with pytest.raises(AssetError):
        m.load_sound("s", "s.wav")
    with pytest.raises(AssetError):
        m.load_music("m", "m.ogg")
    assert dict(m.sounds) == {}
    assert m.music("m") is None


def test_views_are_read_only(manager):
    manager.load_texture("hero", "hero.png")
    with pytest.raises(TypeError):
        manager.textures["other"] = 1
    assert dict(manager.textures) == {"hero": ("asset", "hero.png")}
    assert manager.texture("other") is None


def test_cleanup_clears_everything(manager):
    manager.load_texture("t", "t.png")
    manager.load_sound("s", "s.wav")
    manager.load_font("f", "f.ttf", 12)
    manager.load_music("m", "m.ogg")
    manager.cleanup()
    assert manager.renderer is None
    assert dict(manager.textures) == {}
    assert dict(manager.sounds) == {}
    assert manager.font("f_12") is None
    assert manager.music("m") is None


def test_default_texture_loader_reads_image(tmp_path):
    surface = pygame.Surface((3, 2))
    path = tmp_path / "img.bmp"
    pygame.image.save(surface, str(path))
    m = AssetManager()
    m.init(object())
    m.load_texture("img", str(path))
    assert m.texture("img").get_size() == (3, 2)


def test_default_texture_loader_missing_file(tmp_path):
    m = AssetManager()
    m.init(object())
    with pytest.raises(AssetError):
        m.load_texture("img", str(tmp_path / "absent.png"))


def test_default_music_loader(tmp_path):
    path = tmp_path / "song.ogg"
    path.write_bytes(b"")
    m = AssetManager()
    m.load_music("song", str(path))
    assert m.music("song") == MusicTrack(str(path))
    with pytest.raises(AssetError):
        m.load_music("other", str(tmp_path / "absent.ogg"))
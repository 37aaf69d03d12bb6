import pytest

from basketo.scene import Scene, SceneManager


class RecordingScene(Scene):
    def __init__(self):
        self.events = []
        self.elapsed = 0.0
        self.frames = 0

    def handle_input(self, event):
        self.events.append(event)

    def update(self, delta_time):
        self.elapsed += delta_time

    def render(self):
        self.frames += 1


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()


def test_instance_is_shared():
    scene = RecordingScene()
    SceneManager.instance().change_scene(scene)
    try:
        assert SceneManager.instance().active_scene is scene
        assert SceneManager().active_scene is None
    finally:
        SceneManager.instance().change_scene(None)


def test_new_manager_has_no_scene():
    assert SceneManager().active_scene is None


def test_change_scene_replaces_active():
    m = SceneManager()
    first, second = RecordingScene(), RecordingScene()
    m.change_scene(first)
    assert m.active_scene is first
    m.change_scene(second)
    assert m.active_scene is second
    m.change_scene(None)
    assert m.active_scene is None


def test_active_scene_receives_calls():
    m = SceneManager()
    scene = RecordingScene()
    m.change_scene(scene)
    m.active_scene.handle_input("quit")
    m.active_scene.update(0.5)
    m.active_scene.render()
    assert scene.events == ["quit"]
    assert scene.elapsed == 0.5
    assert scene.frames == 1
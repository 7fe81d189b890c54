import pytest

from vectorpaint.device import Device, RenderTarget, Texture
from vectorpaint.units import Point, Rect, Size, Transform2D
from vectorpaint.vertex import ColoredVertex, TexturedVertex, TexturedY8Vertex


class _Texture(Texture):
    def __init__(self, width, height):
        self._size = (width, height)
        self.updates = []

    def size(self):
        return self._size

    def update(self, memory, offset_x, offset_y, width, height):
        self.updates.append((bytes(memory), offset_x, offset_y, width, height))


class _Target(RenderTarget):
    def __init__(self, width, height):
        self._size = (width, height)

    def update_size(self, width, height):
        self._size = (width, height)

    def size(self):
        return self._size

    def aspect_ratio(self):
        return self._size[0] / self._size[1]

    def device_transform(self):
        return Transform2D.identity()


class _RecordingDevice(Device):
    def __init__(self):
        self.calls = []

    def create_texture(self, memory, width, height, format, updatable):
        return _Texture(width, height)

    def create_render_target(self, width, height):
        return _Texture(width, height), _Target(width, height)

    def clear(self, target, color):
        self.calls.append(("clear", target, color))

    def triangles_colored(self, target, vertices, transform):
        self.calls.append(("colored", target, list(vertices), transform))

    def triangles_textured(self, target, texture, filtering, vertices, transform):
        self.calls.append(("textured", target, texture, filtering, list(vertices), transform))

    def triangles_textured_y8(self, target, texture, filtering, vertices, transform):
        self.calls.append(("y8", target, texture, filtering, list(vertices), transform))

    def line(self, target, color, thickness, start_point, end_point, transform):
        self.calls.append(("line", color, thickness, start_point, end_point))

    def stroke(self, target, paint, texture, filtering, paths, thickness, fringe_width,
               antialiasing, scissor, composite_operation_state, transform):
        self.calls.append(("stroke", paths, thickness))

    def fill(self, target, paint, texture, filtering, paths, bounds, fringe_width,
             antialiasing, scissor, composite_operation_state, transform):
        self.calls.append(("fill", paths, bounds))


RECT = Rect(Point(100.5, 101.5), Size(200.0, 50.0))
COLOR = (1.0, 0.0, 0.0, 1.0)
UV = (0.0, 0.0, 1.0, 1.0)


def _corners():
    return {
        (RECT.min_x, RECT.min_y),
        (RECT.max_x, RECT.min_y),
        (RECT.min_x, RECT.max_y),
        (RECT.max_x, RECT.max_y),
    }


def test_device_is_abstract():
    with pytest.raises(TypeError):
        Device()


def test_texture_and_target_are_abstract():
    with pytest.raises(TypeError):
        Texture()
    with pytest.raises(TypeError):
        RenderTarget()


def test_rect_colored_emits_two_triangles():
    device = _RecordingDevice()
    target = _Target(800, 600)
    transform = Transform2D.identity()
    device.rect_colored(target, COLOR, RECT, transform)

    (kind, got_target, vertices, got_transform), = device.calls
    assert kind == "colored"
    assert got_target is target
    assert got_transform == transform
    assert len(vertices) == 6
    assert all(isinstance(v, ColoredVertex) for v in vertices)
    assert all(v.color == COLOR for v in vertices)
    assert {v.pos for v in vertices} == _corners()
    assert vertices[0].pos == (RECT.min_x, RECT.min_y)
    assert vertices[4].pos == (RECT.max_x, RECT.max_y)


def test_rect_textured_maps_uv_to_corners():
    device = _RecordingDevice()
    texture = _Texture(4, 4)
    uv = (0.25, 0.5, 0.75, 1.0)
    device.rect_textured(_Target(10, 10), texture, True, COLOR, RECT, uv, Transform2D.identity())

    (kind, _, got_texture, filtering, vertices, _), = device.calls
    assert kind == "textured"
    assert got_texture is texture
    assert filtering is True
    assert len(vertices) == 6
    assert all(type(v) is TexturedVertex for v in vertices)
    for v in vertices:
        expected_u = uv[0] if v.pos[0] == RECT.min_x else uv[2]
        expected_v = uv[1] if v.pos[1] == RECT.min_y else uv[3]
        assert v.tex_coords == (expected_u, expected_v)
        assert v.color == COLOR
    assert {v.pos for v in vertices} == _corners()


def test_rect_textured_y8_uses_y8_vertices():
    device = _RecordingDevice()
    texture = _Texture(8, 8)
    device.rect_textured_y8(_Target(10, 10), texture, False, COLOR, RECT, UV, Transform2D.identity())

    (kind, _, got_texture, filtering, vertices, _), = device.calls
    assert kind == "y8"
    assert got_texture is texture
    assert filtering is False
    assert all(isinstance(v, TexturedY8Vertex) for v in vertices)
    assert [v.tex_coords for v in vertices] == [
        (0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)
    ]


def test_render_target_created_with_backing_texture():
    device = _RecordingDevice()
    texture, target = device.create_render_target(320, 240)
    assert texture.size() == (320, 240)
    assert target.size() == (320, 240)
    target.update_size(100, 50)
    assert target.size() == (100, 50)
    assert target.aspect_ratio() == 2.0
    assert target.device_transform() == Transform2D.identity()


def test_state_defaults_record_nothing():
    device = _RecordingDevice()
    device.save_state()
    device.set_clip_rect(RECT)
    device.set_clip_path([])
    device.transform(Transform2D.identity())
    device.restore_state()
    assert device.calls == []


def test_texture_update_receives_region():
    device = _RecordingDevice()
    texture = device.create_texture(None, 2, 2, None, True)
    texture.update(b"\x00\xff", 1, 0, 1, 1)
    assert texture.updates == [(b"\x00\xff", 1, 0, 1, 1)]
    assert texture.size() == (2, 2)

    device.rect_textured(_Target(2, 2), texture, False, COLOR, RECT, UV, Transform2D.identity())
    (kind, _, got_texture, _, vertices, _), = device.calls
    assert kind == "textured"
    assert got_texture is texture
    assert len(vertices) == 6
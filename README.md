# vectorpaint

Building blocks for a device-independent 2D vector renderer, in pure Python
and with no dependencies. It produces geometry, triangle-strip vertices and
paint parameters. A drawing back end that you supply turns them into pixels.

## Modules

- **`vectorpaint.units`**: frozen dataclasses `Point`, `Size` and `Rect`.
  `Rect` has the properties `min_x`, `min_y`, `max_x` and `max_y`, and an
  `intersection` method that returns `None` when the overlap has no area.
  `Transform2D` is a 2D affine transform in row-vector form with
  `identity`, `then`, `inverse` (which returns `None` for a singular
  matrix), `then_translate`, `pre_translate`, `pre_rotate` (in radians) and
  `transform_point`. Aliases such as `PixelPoint`, `PixelRect` and
  `PixelTransform` name the same classes.
- **`vectorpaint.color`**: `Color` (built with `Color.rgb` or `Color.rgba`),
  the enums `ColorSpace` and `ColorFormat` (`RGBA`, `Y8`), and
  `convert_color`, which returns an `(r, g, b, a)` tuple.
- **`vectorpaint.vertex`**: `ColoredVertex`, `TexturedVertex` and
  `TexturedY8Vertex`. `bytes(vertex)` gives the packed little-endian float32
  layout. A component tuple of the wrong length raises `ValueError`.
- **`vectorpaint.clipping`**: `clip_line` (Cohen–Sutherland), `clip_rect`
  and `clip_image`. Each returns the clipped geometry, or `None` when nothing
  is visible. `clip_image` also maps the `(u0, v0, u1, v1)` texture
  coordinates onto the clipped area.
- **`vectorpaint.scissor`**: `Scissor`, a clip rectangle given by the
  transform of its centre and half its size. Create one with
  `Scissor.empty()` or `Scissor.from_rect(rect)`, then combine it with
  `intersect_with_rect(rect, current_transform)` and `apply_transform`.
- **`vectorpaint.path`**: the path elements `MoveTo`, `LineTo`, `BezierTo`,
  `ClosePath` and `SetSolidity`, and the enums `Solidity`, `LineCap` and
  `LineJoin`. `FlattenedPath.from_elements(path, dist_tol, tess_tol)`
  flattens Bézier curves, merges near-duplicate points, closes paths whose
  last point equals the first, enforces winding by solidity and computes
  `bounds`. `calculate_joins` computes extrusion vectors and bevel flags.
  `poly_area` and `curve_divs` are helpers. An unknown element raises
  `TypeError`.
- **`vectorpaint.expand`**: `expand_stroke` and `expand_fill`. They fill
  each sub-path's `stroke` and `fill` lists with `TexturedVertex` strips,
  including anti-aliasing fringes.
- **`vectorpaint.paint`**: `Paint`, a box gradient in the space of its
  transform. It has the constructors `solid`, `linear_gradient`,
  `radial_gradient`, `shadow_gradient` and `image_pattern`, and the method
  `set_color`, which turns the paint into a solid one.
- **`vectorpaint.device`**: the abstract classes `Texture`, `RenderTarget`
  and `Device`. `Device` already implements these methods:
  - `rect_colored`, `rect_textured` and `rect_textured_y8`, which build two
    triangles and pass them to the matching `triangles_*` method
  - `save_state`, `restore_state`, `set_clip_rect`, `set_clip_path` and
    `transform`, which record settings in `drawing_state`
- **`vectorpaint.api`**: the abstract classes `Context`,
  `DisplayListBuilder` and `Surface`, and the exception `DrawingError`, which
  back ends raise when they cannot draw.

## Example

```python
from vectorpaint.units import Point
from vectorpaint.path import FlattenedPath, MoveTo, LineTo, ClosePath, LineCap, LineJoin
from vectorpaint.expand import expand_stroke
from vectorpaint.clipping import clip_line

print(clip_line(-10.0, 5.0, 20.0, 5.0, 0.0, 0.0, 10.0, 10.0))
# (0.0, 5.0, 10.0, 5.0)

flat = FlattenedPath.from_elements(
    [MoveTo(Point(0, 0)), LineTo(Point(100, 0)), LineTo(Point(100, 100)), ClosePath()],
    0.01,
    0.25,
)
expand_stroke(flat, 2.0, 1.0, LineCap.BUTT, LineJoin.MITER, 10.0, 0.25)
for sub in flat.paths:
    print(len(sub.stroke), "stroke vertices")
```

## What it does not do

The package draws nothing by itself. It has no rasteriser and no
OpenGL or other GPU back end. It has no windowing, font loading or text
layout. `Device`, `Texture`, `RenderTarget`, `Context`,
`DisplayListBuilder` and `Surface` are interfaces only, and a back end has to
implement them.

## Running the tests

```
pip install -e .[test]
pytest
```
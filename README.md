# sdltour

A compact 2D toolkit built on pygame, plus a graded series of demos.
The demos start with a window and a surface and work up through textures,
blending, scrolling, fonts, image formats, sprite sheets, rectangle
collision and rotation.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The toolkit

| Name | Module | What it does |
| --- | --- | --- |
| `GameObject` | `sdltour.game_object` | A sprite with any number of colliders that follow it. |
| `Collider2D` | `sdltour.collider` | An axis-aligned box placed relative to its parent. |
| `TextureRectangle` | `sdltour.texture_rectangle` | An image stretched into a destination rectangle, optionally with a colour key. |
| `AnimatedSprite` | `sdltour.sprite` | Shows one frame at a time from a horizontal strip of frames. |
| `Sound`, `Music` | `sdltour.audio` | Short effects loaded into memory and streamed music. |
| `DynamicText` | `sdltour.text` | Text that can be re-rendered whenever it changes. |
| `ResourceManager`, `get_resources`, `destroy_resources` | `sdltour.resources` | The shared cache of loaded images and the audio mixer. |

### Colliders

A collider's box is its parent's position plus its own relative offset,
and is brought up to date by `update`. Empty boxes never collide.

```python
from sdltour.collider import Collider2D

a = Collider2D()
a.set_dimensions(100, 100)
a.set_parent_position(50, 50)
a.update(0)

b = Collider2D()
b.set_rel_position(25, 25)
b.set_dimensions(50, 25)
b.set_parent_position(120, 60)
b.update(0)

print(a.is_colliding(b))   # True
```

`render(target)` outlines the box in yellow.

### Texture rectangles and game objects

`TextureRectangle(filepath, color_key)` takes its image from the shared
cache; `color_key` is an optional `(r, g, b)` colour made transparent.
`set_position`, `set_dimensions` and `render(target)` place and draw it;
`is_colliding(other)` is true when the two destination rectangles share
at least one pixel.

```python
from sdltour.game_object import GameObject

paddle = GameObject()
paddle.set_texture_rect("assets/images/leftpaddle.bmp", None)
index = paddle.add_collider()
paddle.collider(index).set_dimensions(20, 200)
paddle.set_position(10, 200)
paddle.update(0)
```

`set_position` moves the sprite and passes the new position to every
collider; `update` then moves the collider boxes. `collider(index)` raises
`IndexError` for an unknown index. `is_colliding(other_colliders)` checks
this object's colliders against any iterable of colliders, such as another
object's `colliders` list.

### Sprite sheets

```python
from sdltour.sprite import AnimatedSprite

sprite = AnimatedSprite("images/edited.bmp")
sprite.draw(200, 200, 150, 150)          # where on screen
sprite.play_frame(0, 0, 170, 110, 3)     # fourth 170x110 cell of the strip
sprite.render(screen)
```

### Sound, music and text

`Sound(filepath).play()` plays an effect and returns the channel used;
`stop()` stops it and `length` gives its duration in seconds.
`Music(filepath).play(loops)` streams a file, with `-1` repeating forever and
`0` playing once. Missing files raise `FileNotFoundError`.

`get_resources()` returns the shared `ResourceManager`. Its
`set_volume(channel, volume)` sets a channel's volume on a 0–128 scale
(channel `-1` means every channel), `set_music_volume(volume)` does the same
for music; both return the previous volume, and a negative volume only
queries. `set_mixer_device` and `set_audio_device` reopen the output on a
named device (`None` for the default). `destroy_resources()` drops the cache
and closes the mixer.

`DynamicText(filepath, font_size)` loads a TrueType font (`None` picks
pygame's built-in font); `set_text(text, color)` renders text without
anti-aliasing, `set_position(rect)` sets the rectangle it is stretched into
and `render(target)` draws it.

## The demos

Each demo opens a 640×480 window and quits on Escape or when the window is
closed. Each takes an optional file argument; by default it loads from a
path relative to the working directory, shown below. Errors loading files
are reported on standard error with exit status 1.

| Command | Default file | Shows |
| --- | --- | --- |
| `sdltour-surface` | `images/demo.bmp` | Drawing straight onto the window surface; holding the left button paints pixels |
| `sdltour-render-draw` | — | A line following the mouse and a rectangle outline |
| `sdltour-texture` | `images/test.bmp` | An image stretched into a rectangle |
| `sdltour-color-key` | `images/kong.bmp` | Magenta made transparent |
| `sdltour-blending` | `images/kong.bmp` | Blend modes: left button adds, right blends, middle modulates |
| `sdltour-scrolling` | `images/pool2.bmp` | Two scrolling layers; left adds, middle blends, right modulates, R resets |
| `sdltour-fonts` | `fonts/8bitOperatorPlus8-Regular.ttf` | Rendering text |
| `sdltour-images` | `images/mario.png` | A PNG or JPEG image over the whole window |
| `sdltour-texture-class` | `images/test.bmp` | Twenty `TextureRectangle`s sharing one image |
| `sdltour-sprite-animation` | `images/edited.bmp` | `AnimatedSprite` cycling through seven frames |
| `sdltour-rect-collision` | `images/test.bmp` | Rectangle collision, printed on left click |
| `sdltour-rotate-texture` | `images/test.bmp` | A rotating image and a highlighted rectangle intersection |

## What the package does not do

There is no reusable application class with a main loop, frame limiting
or timers; each demo runs its own loop. There are no demos that play sound
or music, use `GameObject` or `DynamicText`, and no playable game such as
Pong: those pieces of the toolkit are available to build on but nothing in
the package puts them together.
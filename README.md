# gameframe

A small game framework built around a few simple ideas:

- **Prototypes.** Components and game objects are registered once per level
  as prototypes and then cloned whenever a new instance is needed.
- **Layers.** Cloned game objects live in named layers, grouped by level.
  Every frame each object gets a priority update, an update and a late
  update, in that order.
- **Render groups.** During its late update an object queues itself in a
  render group (`RenderGroup.PRIORITY`, `NONBLEND`, `BLEND`, `UI`). The
  renderer draws the groups in that order and empties them after each frame.
- **Levels.** Exactly one level is current. Opening a new level clears the
  prototypes and objects that belonged to the level being left.

Everything is drawn through `gameframe.device.GraphicDevice`, a software
device that records what it is given: transforms, render states, textures,
bound vertex and index buffers, and one `DrawCall` per indexed draw. No
window system or graphics driver is involved.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running the sample game

```
gameframe --frames 600 --key SPACE --key RETURN
```

Options:

- `--frames N`: number of frames to run; without it the loop runs until
  interrupted with Ctrl-C.
- `--time-delta SECONDS`: time step passed to every update (default 0.0016).
- `--key NAME`: a key held down for the whole run; may be repeated. Names
  are upper-cased, for example `UP`, `DOWN`, `LEFT`, `RIGHT`, `SPACE`,
  `RETURN`, `W`, `A`, `S`, `D`.

When the run ends the command prints the number of frames completed and the
last window title.

The client starts on a loading level that prepares the logo level on a
background thread. Once loading has finished, holding `SPACE` opens the logo
level; there, `RETURN` opens a loading level for the game-play level, and
`SPACE` again opens it once loaded. The logo level shows a textured quad
(arrow keys move and turn it); the game-play level has a camera (moved with
W, A, S, D) and a 200 x 200 wireframe terrain.

Each level writes its state into the window title: the loading text while
loading ("Loading textures.", ..., "Loading complete."), then
"This is the logo level." or "This is the gameplay level."

### Texture files

Loading reads images with Pillow from paths relative to the current working
directory:

- `../Bin/Resources/Textures/Default0.jpg` and `Default1.jpg` for the logo
  background,
- `../Bin/Resources/Textures/Terrain/Tile0.jpg` for the terrain.

These files are not part of the package. If they are missing, loading stops
with an `EngineError` kept on the loader, the loading level never finishes,
and the title stays at the last loading text.

## Using the engine from code

```python
from gameframe.client.app import run
from gameframe.client.defines import KeyState
from gameframe.client.main_app import MainApp

keys = KeyState()
app = MainApp.create(keys)
completed = run(app, frames=600, time_delta=0.0016)
app.close()
```

`run` returns the number of frames completed; it stops early when rendering
raises `EngineError` or on a keyboard interrupt. Input comes from a
`KeyState` rather than the operating system, so a script or a test drives the
game with `keys.press(...)` and `keys.release(...)`; objects ask
`keys.is_down(...)`. `MainApp` keeps its window as a simple object with a
`title` attribute, available as `app.window`.

### The engine facade

`gameframe.game_instance.GameInstance` ties the managers together:

- `initialize_engine(desc)` takes an `EngineDesc` from `gameframe.structs`,
  creates the graphics device, the level manager, the prototype and object
  managers and the renderer, and returns the device.
- `add_prototype(level_index, tag, prototype)` and
  `clone_prototype(kind, level_index, tag, arg)` register and clone
  prototypes. `kind` is a `Prototype` from `gameframe.enums`.
- `add_game_object_to_layer(layer_level, layer_tag, prototype_level, prototype_tag, arg)`
  clones a game-object prototype into a layer, creating the layer if needed.
- `add_render_group(group, render_object)` queues an object for drawing.
- `update_engine(time_delta)`, `render_begin(color)`, `draw()` and
  `render_end()` make up one frame.
- `open_level(level_id, new_level)` switches levels, and
  `clear_resources(level_id)` drops everything a level owned.
- `release_engine()` drops the device and every manager.

Failures the engine detects, such as a duplicate prototype tag, an unknown
prototype, an out-of-range level index, a duplicate component tag or a
missing texture file, raise `EngineError` from `gameframe.structs`.

### Components

- `gameframe.transform.Transform` holds a world matrix with right, up, look
  and position rows (`State`). It offers `go_straight`, `go_backward`,
  `go_left`, `go_right`, `look_at`, `move_to`, `rotation`, `turn` and
  `scaling`. The helpers `normalize`, `rotation_axis`, `look_at_lh` and
  `perspective_fov_lh` build left-handed view and projection matrices.
- `gameframe.vibuffer.RectBuffer` is a unit quad made of two triangles.
- `gameframe.vibuffer.TerrainBuffer` is a grid of vertices in the XZ plane,
  one unit apart, with texture coordinates from 0 to 1.
- `gameframe.texture.Texture` loads a numbered series of image files from a
  path pattern, putting 0, 1, ... into its `%d`.

### Timing

`gameframe.timer.TimerManager` keeps named timers. `add_timer(tag)` creates
one, `compute_time_delta(tag)` advances it, and `get_time_delta(tag)` reads
the seconds elapsed between its last two computations (0.0 for an unknown
tag). The sample client's loop does not use timers; it passes a fixed time
step.

## What it does not do

- It opens no window and draws no pixels: the device only records state and
  draw calls.
- It reads no keyboard or mouse from the operating system; input is whatever
  is put into a `KeyState`.
- It ships no texture images.
# dfengine

The core pieces of a small game engine, with no windowing or graphics backend of its own.

## Modules

- `dfengine.singleton`: `Singleton`, a base class that keeps one live instance per subclass. You create it with `initialize(*args, **kwargs)`, remove it with `deinitialize()` and read it with `instance()`, which returns `None` when there is none. Initializing twice, or deinitializing when nothing is initialized, raises `SingletonError`.
- `dfengine.events`: `Event`, a multicast callback. Each owner, matched by identity, holds at most one subscription. Subscribing the same owner again replaces its function. `invoke(*args)` calls every subscribed function.
- `dfengine.event_manager`: `EventManager`, a singleton registry of `Event`s looked up by name. It has `subscribe(name, owner, function)`, `unsubscribe(name, owner)` and `invoke(name, *args)`. The module also defines the names `INPUT`, `UPDATE`, `RENDER_3D`, `RENDER_2D`, `IMGUI` and `ON_WINDOW_RESIZE`.
- `dfengine.event_types`: the numeric event type codes as `IntEnum`s, one per `EventCategory` (`ApplicationEvent`, `WindowEvent`, `KeyboardEvent`, `MouseEvent` and so on). `events_of(category)` returns the enum for a category. `category_of(event_type)` returns the category of a code and raises `ValueError` for unknown codes.
- `dfengine.input_types`: the `Key`, `MouseButton`, `KeyModifier` (a flag) and `Action` enums. It also holds the per-frame state dataclasses `KeyboardState`, `MouseButtonState`, `MouseCursor`, `MouseScroll` and `Inputs`. `Inputs.reset_frame()` clears key and button actions and zeroes the deltas.
- `dfengine.input_manager`: `InputManager`, a singleton that folds input records into an `Inputs` state. The records are `KeyInput`, `ButtonInput`, `MotionInput`, `WheelInput` and `SystemInput`.
  - After each handled record, the state is published on the `"input"` event, if an `EventManager` is initialized, and then its per-frame parts are reset.
  - A `SystemInput` for quit, window minimized, restored or resized sets `quit_requested`, `window_minimized` or `window_resized`, and calls the optional hook given to `initialize()`.
  - Other system events are ignored.
  - `check_key(key[, action])` and `check_button(button[, action])` query the state. `inputs()` returns it.
- `dfengine.player_controller`: `PlayerController`, an abstract base with an `input(inputs)` method. `set_active(True)` subscribes it to `"input"` on the `EventManager` and `set_active(False)` unsubscribes it. `update(delta_time)` adds to `elapsed_time`.
- `dfengine.transform`: `Transform`, a node with `local` and `world` 4x4 numpy matrices in a parent/child tree.
  - `update()` sets `world = local @ parent.world`, or just `local` for a root, and recurses into the children.
  - `add_child`, `remove_child`, `set_parent` and `remove_parent` raise `TransformError` on invalid links.
  - `detach()` breaks every link.
- `dfengine.timer`: `Timer`, which reports time since the last update (`delta_nano`/`micro`/`milli`/`second(update=True)`) and since creation (`life_*`). The clock is injectable; it must return integer nanoseconds.
- `dfengine.color`: `Color`, a frozen RGBA dataclass with component-wise `+ - * /` against another colour or a scalar. There are also named constants such as `RED`, `WHITE` and `ORANGE`.
- `dfengine.render_callback`: `RenderCallback`, which builds one data item per source with a factory. `render(*args)` calls `callback(item, *args)` for each item. `close()`, or leaving a `with` block, closes the items.
- `dfengine.render_callback_manager`: `RenderCallbackManager`, a singleton registry of render callbacks with `create`, `get`, `render`, `destroy` (by name or by object) and `clear`. `create` returns `None` when the name is taken.
- `dfengine.window_types`: `WindowFlag`, the window flag bits. `parse_flags(names)` combines flags given as names, either an iterable or one string separated by `|`, commas or spaces. It raises `ValueError` for unknown names.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dfengine.event_manager import EventManager
from dfengine.input_manager import InputManager, KeyInput
from dfengine.input_types import Action, Key
from dfengine.player_controller import PlayerController


class Mover(PlayerController):
    def __init__(self):
        super().__init__()
        self.pressed = []

    def input(self, inputs):
        state = inputs.keyboard.get(Key.W)
        if state is not None and state.action == Action.PRESS:
            self.pressed.append(Key.W)


EventManager.initialize()
InputManager.initialize()

mover = Mover()
mover.set_active(True)
InputManager.update([KeyInput(key=Key.W, down=True)])
assert mover.pressed == [Key.W]

InputManager.deinitialize()
EventManager.deinitialize()
```

Subscribers see the state while it is published. Once `update` returns, the per-frame key and button actions have already been cleared.

## What it does not do

The package does not open windows, poll the operating system for events, or draw anything. You gather input records and pass them to `InputManager.update` yourself. Render callbacks call whatever function you give them; no graphics API is behind them. Nothing here loads or manages models, textures or other assets.
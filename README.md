# patternengine

The core of a small 2D game engine built around a nine-node "draw the pattern"
battle mechanic. It is a library: it has no command-line entry point and no
third-party dependencies.

## Modules

- `patternengine.datas`: dataclasses for sprite sheets (`Sprite`,
  `SpriteSheet`), animation clips (`FrameInfo`, `AnimationClip`), animator
  controllers (`Parameter`, `Condition`, `Transition`, `AnyStateTransition`,
  `State`, `AnimatorController`), plus the `ParameterType` and `RenderLayer`
  enums and `CollisionInfo`. `AnimatorController.get_state` returns a state by
  name or `None`. `SpriteSheet.index_of` raises `KeyError` for unknown sprites.
- `patternengine.loaders`: `load_sprite_sheet(path)`,
  `load_animation_clip(path, sprite_sheet)` and
  `load_animator_controller(path)` read JSON files. They raise `LoaderError`
  when a file cannot be opened, is not valid JSON, lacks a field or has a field
  of the wrong type, or when a clip frame names a sprite the sheet lacks.
  Controller conditions get their `ParameterType` from the controller's
  parameters.
- `patternengine.events`: `EventDelegate`, a list of callbacks. `add` returns
  an id, `set` replaces every listener, `remove_by_id` and `clear` remove
  listeners, and `invoke` (or calling the delegate) calls them in order.
- `patternengine.timing`: `GameTime` (delta, fixed 1/60 s step and elapsed
  time, with an injectable clock), `FpsCounter`, and `format_bytes`, which
  gives `"512 B"`, `"1.50 KB"` and so on.
- `patternengine.csv_data`: records filled from CSV rows: `AllNodePattern`,
  `EnemyAttackPattern`, `EnemyData`, `PlayerData`, `PlayerAttackPattern`, and
  `NodeList` with `NodeData`. `"null"` cells read as 0 where the record allows
  them. Rows that are too short raise `ValueError`.
- `patternengine.csv_store`: `CsvDataStorage` keeps records by id.
  `CsvDataManager` has one storage per record type. `load_csv(record_type,
  path)` skips the sheet's header lines (11 for `PlayerAttackPattern`, 5 for
  the others) and keys each row by its first cell. It also has `get`, `ids`,
  `skip_lines` and `print_records`.
- `patternengine.pattern`: `PatternManager` turns a trail of `TrailStamp`s into
  the ordered node numbers (1-9) it passed through. It fills in a skipped middle
  node. It also tells whether a point has left the padded box around the nodes
  and gives the `Line` segments of the pattern.
- `patternengine.live_objects`: `Player` and `Enemy` copy their stats from a
  `CsvDataManager`. `Player` also handles cooldowns, spirit drain and random
  pattern choice.
- `patternengine.systems`: component registries (`MonoBehaviorSystem`,
  `ScriptSystem`, `TransformSystem`, `UISystem`, `PhysicSystem`,
  `CollisionSystem`, `RenderSystem`) and `EngineSystems`, which holds one of
  each. `CollisionSystem` sends `on_collider_*` / `on_trigger_*` enter, stay
  and exit calls to the owners' behaviours.
- `patternengine.scene`: the abstract `Scene`, the `SceneState` enum, and
  `SceneManager`, which adds scenes by index and switches scenes between frames.
- `patternengine.resources`: `BitmapResourceManager` takes a loader callable.
  It hands out one `BitmapResource` per path for as long as something still
  holds it.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from patternengine.pattern import PatternManager, Point, TrailStamp

pm = PatternManager()
centers = [Point(x, y) for y in (200, 350, 500) for x in (300, 450, 600)]
pm.set_nodes(centers, 45.0)

trail = [TrailStamp(Point(300, 200)), TrailStamp(Point(600, 200))]
print(pm.check_trails(trail))  # [1, 2, 3]: node 2 is filled in between 1 and 3
```

## What it does not do

The package draws nothing, opens no window, plays no sound and reads no
keyboard or mouse input. It has no game-object, component or renderer classes
of its own. You supply the objects that the systems and scenes drive, and they
must have the members those calls use. A scene's game objects need:

- `name` and `marked_for_removal`
- `destroy()`, `mark_setup_complete()` and `process_start_queue()`

Colliders need:

- `owner`, `started` and `is_trigger`
- `fixed_update(components, out_infos)`

Render components need:

- `owner.render_layer` and `order_in_layer`
- `render(manager)`

The bitmap loader passed to `BitmapResourceManager` is also yours to provide.
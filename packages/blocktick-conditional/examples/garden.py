"""Garden -- crops that grow on a timer and soil that reacts to water.

Demonstrates:
- A ChangingBlocks sequence (seed -> sprout -> crop) advancing on the clock
- A BlockNearby rule turning dirt into farmland when water is poured
- An EntityNearby rule trampling farmland when a player walks over it
- Signals flushing once per tick so reactions land on the next tick

Run: python -m examples.garden
"""

from blocktick import Engine
from blocktick_conditional import (
    BlockNearby,
    ConditionalBlocks,
    EntityNearby,
    install_conditional_blocks,
)
from blocktick_sequence import (
    ChangingBlocks,
    SequenceConfig,
    StageSequence,
    install_changing_blocks,
)
from blocktick_signal import SEQUENCE_COMPLETE, SignalBus, make_signal_system
from blocktick_voxel import (
    BlockType,
    Catalog,
    Category,
    Location,
    VoxelRaycaster,
    VoxelWorld,
    move_entity,
)

CATALOG = Catalog(
    BlockType("dirt"),
    BlockType("farmland"),
    BlockType("water"),
    BlockType("seed", penetrable=True),
    BlockType("sprout", penetrable=True),
    BlockType("crop", penetrable=True),
)


def main() -> None:
    print("=== Garden ===\n")

    engine = Engine(tps=10, seed=42)
    bus = SignalBus()
    voxels = VoxelWorld(bus)
    world = engine.world

    bus.subscribe(
        SEQUENCE_COMPLETE,
        lambda name, data: print(f"  crop at {data['position']} is ripe ({data['stage']})"),
    )
    install_changing_blocks(
        engine, voxels, CATALOG, bus, SequenceConfig(check_interval_ms=100)
    )
    install_conditional_blocks(engine, bus, voxels, CATALOG, VoxelRaycaster(voxels, world))
    engine.add_system(make_signal_system(bus))

    # A row of crops.
    for x in range(3):
        voxels.set_block((x, 1, 0), CATALOG.resolve("seed"))
        world.spawn(
            Location((float(x), 1.0, 0.0)),
            ChangingBlocks(StageSequence.of({"seed": 200, "sprout": 300, "crop": 0})),
        )

    # Soil under them: water wets it, a player tramples wet soil.
    for x in range(3):
        voxels.set_block((x, 0, 0), CATALOG.resolve("dirt"))
        world.spawn(
            Location((float(x), 0.0, 0.0)),
            ConditionalBlocks((
                BlockNearby(trigger="water", target="farmland", max_distance=4.0, adjacent=True),
                EntityNearby(trigger="player", target="dirt", chance=0.5, ignore_occlusion=True),
            )),
        )
    player = world.spawn(Location((0.0, 5.0, 5.0)), Category("player"))

    engine.start()
    voxels.set_block((-1, 0, 0), CATALOG.resolve("water"))
    for tick in range(1, 11):
        if tick == 6:
            move_entity(world, bus, player, (1.0, 1.0, 0.5))
        engine.step()
        row = " ".join(voxels.block_at((x, 0, 0)) for x in range(3))
        crops = " ".join(voxels.block_at((x, 1, 0)) for x in range(3))
        print(f"  tick {tick:2d}  soil: {row:<26}  crops: {crops}")
    engine.stop()

    print(f"\nDone at tick {engine.clock.tick_number}.")


if __name__ == "__main__":
    main()

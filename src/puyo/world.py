import random

from esper import World

from puyo.components.game_config import GameConfig
from puyo.components.game_state import GameState
from puyo.components.palette import Palette


def create_world(
    *,
    config: GameConfig | None = None,
    rng: random.Random | None = None,
) -> World:
    """Create the world with the game-state and palette singletons.

    The board entity is added by BoardSystem.
    """
    config = config or GameConfig()
    world = World()
    setattr(world, "random", rng or random.Random())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(tick_time=config.tick_time))
    world.add_component(state_entity, config)

    palette = Palette()
    palette.set_active_count(config.palette_size)
    world.create_entity(palette)
    return world

from __future__ import annotations

from esper import World

from puyo.components.board import Board
from puyo.components.game_config import GameConfig
from puyo.components.game_state import GameState
from puyo.components.palette import Palette
from puyo.components.pair_source import PairSource


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState not found")


def get_config(world: World) -> GameConfig:
    for _, config in world.get_component(GameConfig):
        return config
    raise RuntimeError("GameConfig not found")


def get_palette(world: World) -> Palette:
    for _, palette in world.get_component(Palette):
        return palette
    raise RuntimeError("Palette definitions not found")


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def get_pair_source(world: World) -> PairSource:
    for _, source in world.get_component(PairSource):
        return source
    raise RuntimeError("PairSource not found")

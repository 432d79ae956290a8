"""Loading and validating map files."""

from enum import IntEnum

from termshmup.state import (
    BOSS_HP,
    HERO_HP,
    MAX_BOARD_HEIGHT,
    MAX_BOARD_WIDTH,
    MAX_COLLECTIBLES,
    MAX_ENTITY,
    MOB_HP,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Camera,
    Game,
)
from termshmup.tiles import (
    BOSS_LEFT,
    BOSS_RIGHT,
    COLLEC,
    EMPTY,
    GROUND,
    HERO,
    Move,
    is_mob,
    is_wall,
)

INFO_LINE_SIZE = 16
MIN_BOARD_HEIGHT = 42
MIN_BOARD_WIDTH = 100


class MapErrorKind(IntEnum):
    WRONG_INFO_LINE = 1
    WRONG_SIZE_INFO = 2
    WRONG_WIDTH_SIZE = 3
    WRONG_HEIGHT_SIZE = 4
    WRONG_ENTITIES = 5


_MESSAGES = {
    MapErrorKind.WRONG_INFO_LINE: "Info line is incorrect.",
    MapErrorKind.WRONG_SIZE_INFO: "Info line sizes are incorrect.",
    MapErrorKind.WRONG_WIDTH_SIZE: "Width doesnt match the info line.",
    MapErrorKind.WRONG_HEIGHT_SIZE: "Height doesnt match the info line.",
    MapErrorKind.WRONG_ENTITIES: "Entities are incorrect.",
}


class MapError(ValueError):
    """A map file that cannot be played."""

    def __init__(self, kind):
        self.kind = MapErrorKind(kind)
        super().__init__(_MESSAGES[self.kind])


def _read_lengths(info):
    """Read two whitespace-separated numbers; -1 where a number is missing."""
    pos = 0
    values = []
    for _ in range(2):
        while pos < len(info) and info[pos : pos + 1].isspace():
            pos += 1
        start = pos
        while pos < len(info) and info[pos : pos + 1].isdigit():
            pos += 1
        values.append(int(info[start:pos]) if pos > start else -1)
    return values


def _read_rows(body, width):
    stride = width + 1
    rows = []
    for offset in range(0, len(body) - stride + 1, stride):
        chunk = body[offset : offset + stride]
        if chunk[width] != ord("\n"):
            raise MapError(MapErrorKind.WRONG_WIDTH_SIZE)
        rows.append(list(chunk[:width].decode("latin-1")))
        if len(rows) == MAX_BOARD_HEIGHT:
            break
    return rows


def _border_is_empty(board):
    edges = board[0] + board[-1] + [row[0] for row in board] + [row[-1] for row in board]
    return all(tile == EMPTY for tile in edges)


def _populate(game):
    """Register the map's entities and collectibles; return whether all is well."""
    heroes = enemies = bosses = 0
    bad_tile = False
    for y, row in enumerate(game.board):
        cells = enumerate(row)
        for x, tile in cells:
            if tile == HERO:
                if not heroes:
                    hero = game.entities[0]
                    hero.type, hero.hp = HERO, HERO_HP
                    hero.x, hero.y = x, y
                    hero.x_dir = hero.y_dir = 0
                    hero.dir = Move.UP
                heroes += 1
            elif tile == COLLEC:
                if game.collec_qty == MAX_COLLECTIBLES - 1:
                    raise MapError(MapErrorKind.WRONG_ENTITIES)
                collectible = game.collectibles[game.collec_qty]
                collectible.x, collectible.y, collectible.active = x, y, True
                game.collec_qty += 1
            elif is_mob(tile):
                if game.ent_qty == MAX_ENTITY - 1:
                    raise MapError(MapErrorKind.WRONG_ENTITIES)
                mob = game.entities[game.ent_qty]
                mob.type, mob.x, mob.y = tile, x, y
                mob.hp, mob.alive = MOB_HP, True
                game.ent_qty += 1
                enemies += 1
            elif tile == BOSS_LEFT:
                right = next(cells, None)
                if right is None or right[1] != BOSS_RIGHT:
                    raise MapError(MapErrorKind.WRONG_ENTITIES)
                boss = game.entities[1]
                boss.type, boss.hp = BOSS_LEFT, BOSS_HP
                boss.x, boss.y, boss.alive = right[0], y, True
                bosses += 1
            elif not is_wall(tile) and tile not in (EMPTY, GROUND):
                bad_tile = True
    collectibles = game.collec_qty
    return not (
        bad_tile
        or enemies < 1
        or bosses != 1
        or heroes != 1
        or (collectibles and collectibles != MAX_COLLECTIBLES - 1)
    )


def parse(data):
    """Build a Game from the bytes of a map file, raising MapError if invalid."""
    header_size = INFO_LINE_SIZE + 1
    if len(data) < header_size or data[INFO_LINE_SIZE - 1 : INFO_LINE_SIZE] != b"$":
        raise MapError(MapErrorKind.WRONG_INFO_LINE)
    height, width = _read_lengths(data[:header_size])
    if not (
        MIN_BOARD_HEIGHT <= height <= MAX_BOARD_HEIGHT - 1
        and MIN_BOARD_WIDTH <= width <= MAX_BOARD_WIDTH - 1
    ):
        raise MapError(MapErrorKind.WRONG_SIZE_INFO)

    rows = _read_rows(data[header_size:], width)
    if len(rows) != height:
        raise MapError(MapErrorKind.WRONG_HEIGHT_SIZE)

    game = Game(board=rows, board_height=height, board_width=width)
    border_ok = _border_is_empty(game.board)
    if not _populate(game) or not border_ok:
        raise MapError(MapErrorKind.WRONG_ENTITIES)

    hero = game.entities[0]
    game.camera = Camera(
        max(0, hero.x - SCREEN_WIDTH // 2), max(0, hero.y - SCREEN_HEIGHT // 2)
    )
    return game


def parse_file(path):
    """Read and parse the map file at path."""
    with open(path, "rb") as handle:
        return parse(handle.read())
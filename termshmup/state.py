"""Game state: entities, projectiles, collectibles and the board."""

from dataclasses import dataclass, field
from enum import IntEnum

from termshmup.tiles import COLLEC, EMPTY, GROUND, HERO, Move

MAX_ENTITY = 30
MAX_PROJECTILES = 8
MAX_COLLECTIBLES = 9
MAX_BOARD_WIDTH = 1000
MAX_BOARD_HEIGHT = 1000
CAM_TRESH = 20
ENEMY_SHOOT_RANGE = 20
MOB_HP = 1
BOSS_HP = 5
HERO_HP = 3
HERO_MAX_HP = 5
COLLEC_REWARD = 300
COLLEC_RESPAWN = 20

SCREEN_WIDTH = 100
SCREEN_HEIGHT = 42


class QuitReason(IntEnum):
    """Why a game update asks the main loop to stop."""

    USER_QUIT = 1
    HERO_DEATH = 2


class Hit(IntEnum):
    """Outcome of moving a projectile one step."""

    OUTOFBOUND = 0
    NO_HIT = 1
    WALL_HIT = 2
    HERO_HIT = 3
    ENEMY_HIT = 4
    BOSS_HIT = 5
    TIME_NO_SHOOT = 6


@dataclass
class Projectile:
    x: int = 0
    y: int = 0
    x_dir: int = 0
    y_dir: int = 0
    active: bool = False

    def fire(self, x, y, x_dir, y_dir):
        """Activate the projectile at a position with a direction."""
        self.x, self.y = x, y
        self.x_dir, self.y_dir = x_dir, y_dir
        self.active = True


@dataclass
class Collectible:
    x: int = 0
    y: int = 0
    active: bool = False


@dataclass
class Entity:
    type: str = ""
    x: int = 0
    y: int = 0
    hp: int = 0
    x_dir: int = 0
    y_dir: int = 0
    dir: Move = Move.UP
    projectiles: list = field(
        default_factory=lambda: [Projectile() for _ in range(MAX_PROJECTILES)]
    )
    active_proj_qty: int = 0
    alive: bool = False

    @property
    def hero(self):
        """True when this entity is the player's hero."""
        return self.type == HERO


@dataclass
class Camera:
    x: int = 0
    y: int = 0


@dataclass
class Game:
    """Whole game state; slot 0 is the hero and slot 1 the boss."""

    board: list = field(default_factory=list)
    board_height: int = 0
    board_width: int = 0
    score: int = 0
    score_calc: int = 0
    entities: list = field(
        default_factory=lambda: [Entity() for _ in range(MAX_ENTITY)]
    )
    ent_qty: int = 2
    collectibles: list = field(
        default_factory=lambda: [Collectible() for _ in range(MAX_COLLECTIBLES)]
    )
    collec_qty: int = 0
    camera: Camera = field(default_factory=Camera)

    def __post_init__(self):
        if self.board and not self.board_height:
            self.board_height = len(self.board)
            self.board_width = len(self.board[0])

    def _inside(self, x, y):
        return 0 <= y < len(self.board) and 0 <= x < len(self.board[y])

    def tile(self, x, y):
        """Tile at (x, y); cells outside the board read as EMPTY."""
        return self.board[y][x] if self._inside(x, y) else EMPTY

    def set_tile(self, x, y, tile):
        """Set the tile at (x, y); writes outside the board are dropped."""
        if self._inside(x, y):
            self.board[y][x] = tile

    def find_entity(self, x, y):
        """First entity slot at (x, y), or None."""
        return next((e for e in self.entities if e.x == x and e.y == y), None)

    def find_collectible(self, x, y):
        """First collectible slot at (x, y), or None."""
        return next((c for c in self.collectibles if c.x == x and c.y == y), None)

    def add_score(self, points):
        """Add points to the score and to the pool that buys back health."""
        self.score += points
        self.score_calc += points


def respawn_collectibles(game, seconds):
    """Bring back picked collectibles on every COLLEC_RESPAWN-th second."""
    if seconds % COLLEC_RESPAWN:
        return
    for collectible in game.collectibles[: game.collec_qty]:
        if not collectible.active and game.tile(collectible.x, collectible.y) == GROUND:
            collectible.active = True
            game.set_tile(collectible.x, collectible.y, COLLEC)
"""Asteroids game state, input handling and drawing onto a vector canvas."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass
from typing import Any, Optional, Sequence, TypeVar

from .shapes import (
    BULLET,
    FLAME,
    LOGO,
    LOGO_RADIUS,
    ROID_MODELS,
    ROID_RADII,
    ROID_SPLITS,
    ROIDS,
    SHIP,
    SHIP_RADIUS,
    transform,
)

PI = math.pi

SAFE_ZONE = 150.0
DRAG = 0.25
THRUST = 1.0
SPIN = PI / 16
MAX_ROIDS = 32
INIT_ROIDS = 4
ROID_SPEED = 3.0
MAX_BULLETS = 5
BULLET_SPEED = 15.0
BULLET_RANGE = 500
RAPIDFIRE_ENABLE = 1
RAPIDFIRE_DELAY = 5
ROID_RESPAWN_THRESHOLD = 5
ROID_RESPAWN_DELAY = 40
ROID_RESPAWN_RATE = 0.6
MAX_FRAGMENTS = 4
FRAGMENT_MIN_AGE = 15
FRAGMENT_MAX_AGE = 25
SAMPLE_ROIDS = 7

SCREEN = 1000.0
BOX = ((0.0, 0.0), (1000.0, 0.0), (1000.0, 1000.0), (0.0, 1000.0))
BOX_WEIGHT = 0.3

T = TypeVar("T")


class Control(enum.Enum):
    """Player actions, whatever device they come from."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    FIRE = enum.auto()
    RESPAWN = enum.auto()
    MODE = enum.auto()
    QUIT = enum.auto()


@dataclass
class Roid:
    model: int
    split: int
    angle: float
    spin: float
    pos_x: float
    pos_y: float
    spd_x: float
    spd_y: float


@dataclass
class Bullet:
    pos_x: float
    pos_y: float
    spd_x: float
    spd_y: float
    angle: float
    age: int


@dataclass
class Fragment:
    pos_x: float
    pos_y: float
    spd_x: float
    spd_y: float
    angle: float
    spin: float
    age: int


def rand_real(rng: random.Random, low: float, high: float) -> float:
    """A uniform random number in [low, high)."""
    return low + rng.random() * (high - low)


def draw_shape(
    canvas: Any,
    shape: Sequence[tuple[float, float]],
    angle: float,
    radius: float,
    off_x: float,
    off_y: float,
    bright: float,
) -> None:
    """Draw a polar outline; shapes of fewer than two points are skipped."""
    if len(shape) < 2:
        return
    points = transform(shape, angle, radius, off_x, off_y)
    x, y = points[0]
    canvas.move_to(x, y)
    canvas.line_to(x, y, bright / 2)
    for x, y in points[1:]:
        canvas.line_to(x, y, bright)


def recenter(canvas: Any, rng: random.Random) -> None:
    """Draw a border round the screen from a random corner, steadying an analogue scope."""
    offs = rng.randrange(4)
    canvas.move_to(*BOX[offs])
    for i in range(1, 5):
        x, y = BOX[(i + offs) % 4]
        canvas.line_to(x, y, BOX_WEIGHT)


def _wrap(value: float) -> float:
    if value > SCREEN:
        return value - SCREEN
    if value < 0:
        return value + SCREEN
    return value


def _wrap_angle(angle: float) -> float:
    if angle > PI:
        return angle - 2 * PI
    if angle < -PI:
        return angle + 2 * PI
    return angle


def _first_free(slots: list[Optional[T]]) -> Optional[int]:
    return next((i for i, item in enumerate(slots) if item is None), None)


class Game:
    """The whole game: ship, asteroids, bullets and debris, advanced one frame per step."""

    def __init__(self, rng: Optional[random.Random] = None, joystick: bool = False) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.joystick = joystick
        self.running = True
        self.title_screen = True
        self.mode = 0
        self.dead = False
        self.kills = 0
        self._last_kills = 0
        self._respawn_timer = 0
        self.messages: list[str] = []
        self.roids: list[Optional[Roid]] = [None] * MAX_ROIDS
        self.bullets: list[Optional[Bullet]] = [None] * MAX_BULLETS
        self.fragments: list[Optional[Fragment]] = [None] * MAX_FRAGMENTS
        self._reset_ship()

        for i in range(SAMPLE_ROIDS):
            rng_ = self.rng
            self.roids[i] = Roid(
                model=rng_.randrange(ROID_MODELS),
                split=rng_.randrange(ROID_SPLITS),
                angle=rand_real(rng_, -PI, PI),
                spin=rand_real(rng_, -PI / 64, PI / 64),
                spd_x=rand_real(rng_, -ROID_SPEED, ROID_SPEED),
                spd_y=rand_real(rng_, -ROID_SPEED, ROID_SPEED),
                pos_x=rand_real(rng_, 0, 1000),
                pos_y=rand_real(rng_, 300, 1000),
            )

    def _reset_ship(self) -> None:
        self.pos_x = self.pos_y = 500.0
        self.spd_x = self.spd_y = 0.0
        self.angle = -PI / 2
        self.shoot = self.spin = self.thrust = 0
        self.flame = False

    @property
    def _active(self) -> bool:
        return not self.dead and not self.title_screen

    def _spawn_roid(self, zone: float) -> Roid:
        rng = self.rng
        model = rng.randrange(ROID_MODELS)
        angle = rand_real(rng, -PI, PI)
        spin = rand_real(rng, -PI / 64, PI / 64)
        spd_x = rand_real(rng, -ROID_SPEED, ROID_SPEED)
        spd_y = rand_real(rng, -ROID_SPEED, ROID_SPEED)
        while True:
            x = rand_real(rng, 0, 1000)
            y = rand_real(rng, 0, 1000)
            near = (self.pos_x - zone < x < self.pos_x + zone
                    and self.pos_y - zone < y < self.pos_y + zone)
            if not near:
                break
        return Roid(model=model, split=0, angle=angle, spin=spin,
                    pos_x=x, pos_y=y, spd_x=spd_x, spd_y=spd_y)

    def _start(self) -> None:
        self.title_screen = False
        self.roids = [None] * MAX_ROIDS
        for i in range(INIT_ROIDS):
            self.roids[i] = self._spawn_roid(SAFE_ZONE)

    def press(self, control: Control) -> None:
        """Handle a control being pressed."""
        if control is Control.RESPAWN:
            if self.dead:
                self.dead = False
                self.messages.append("Respawned")
        elif control is Control.FIRE:
            if self.title_screen:
                self._start()
            elif not self.dead:
                self.shoot = RAPIDFIRE_DELAY
        elif control is Control.UP:
            if self._active:
                self.thrust = 1 if self.thrust >= 0 else 0
        elif control is Control.DOWN:
            if self._active:
                self.thrust = -1 if self.thrust <= 0 else 0
        elif control is Control.LEFT:
            if self._active:
                self.spin = -1 if self.spin <= 0 else 0
        elif control is Control.RIGHT:
            if self._active:
                self.spin = 1 if self.spin >= 0 else 0
        elif control is Control.MODE:
            if self.title_screen:
                self.mode = (self.mode + 1) % 8
        elif control is Control.QUIT:
            self.running = False

    def release(self, control: Control) -> None:
        """Handle a control being released."""
        if control is Control.FIRE:
            self.shoot = 0
        elif not self._active:
            return
        elif control is Control.UP:
            self.thrust = 0 if self.thrust > 0 else -1
        elif control is Control.DOWN:
            self.thrust = 0 if self.thrust < 0 else 1
        elif control is Control.LEFT:
            self.spin = 0 if self.spin < 0 else 1
        elif control is Control.RIGHT:
            self.spin = 0 if self.spin > 0 else -1

    def axis(self, axis: int, value: int) -> None:
        """Handle joystick motion: axis 0 turns, axis 1 thrusts."""
        if axis == 0 and value < 0:
            self.press(Control.LEFT)
        elif axis == 0 and value > 0:
            self.press(Control.RIGHT)
        elif axis == 1 and value < 0:
            self.press(Control.UP)
        elif axis == 1 and value > 0:
            self.press(Control.DOWN)

    def button(self, button: int) -> None:
        """Handle a joystick button press."""
        self.messages.append(f"button {button}")
        control = {0: Control.FIRE, 2: Control.RESPAWN, 4: Control.MODE, 7: Control.QUIT}.get(button)
        if control is not None:
            self.press(control)

    def step(self, canvas: Any) -> None:
        """Advance the game by one frame and draw it onto ``canvas``."""
        if self.thrust:
            self.spd_x += self.thrust * THRUST * math.cos(self.angle)
            self.spd_y += self.thrust * THRUST * math.sin(self.angle)
        self.angle = _wrap_angle(self.angle + self.spin * SPIN)
        self.pos_x += self.spd_x
        self.pos_y += self.spd_y
        speed = math.hypot(self.spd_x, self.spd_y)
        heading = math.atan2(self.spd_y, self.spd_x)
        speed = speed - DRAG if speed > DRAG else 0.0
        self.spd_x = speed * math.cos(heading)
        self.spd_y = speed * math.sin(heading)
        self.pos_x = _wrap(self.pos_x)
        self.pos_y = _wrap(self.pos_y)

        if self.shoot:
            ready = self.shoot >= RAPIDFIRE_DELAY
            self.shoot += 1
            if ready:
                self.shoot = RAPIDFIRE_ENABLE
                slot = _first_free(self.bullets)
                if slot is not None:
                    self.bullets[slot] = Bullet(
                        pos_x=self.pos_x,
                        pos_y=self.pos_y,
                        spd_x=BULLET_SPEED * math.cos(self.angle),
                        spd_y=BULLET_SPEED * math.sin(self.angle),
                        angle=self.angle,
                        age=int(BULLET_RANGE / BULLET_SPEED),
                    )

        if self.joystick:
            self.thrust = self.spin = self.shoot = 0

        canvas.set_mode(self.mode)

        if self.title_screen:
            for letter in LOGO:
                draw_shape(canvas, letter, 0.0, LOGO_RADIUS, 500, 150, 1.0)
                recenter(canvas, self.rng)

        if self._active:
            draw_shape(canvas, SHIP, self.angle, SHIP_RADIUS, self.pos_x, self.pos_y, 1.0)
            self.flame = not self.flame if self.thrust > 0 else False
            if self.flame:
                for _ in range(2):
                    draw_shape(canvas, FLAME, self.angle, SHIP_RADIUS, self.pos_x, self.pos_y, 1.0)

        self._update_bullets(canvas)
        recenter(canvas, self.rng)
        self._update_fragments(canvas)
        count = self._update_roids(canvas)
        self._maybe_respawn(count)
        recenter(canvas, self.rng)

    def _update_bullets(self, canvas: Any) -> None:
        for i, bullet in enumerate(self.bullets):
            if bullet is None:
                continue
            if bullet.age <= 0:
                self.bullets[i] = None
                continue
            bullet.age -= 1
            bullet.pos_x = _wrap(bullet.pos_x + bullet.spd_x)
            bullet.pos_y = _wrap(bullet.pos_y + bullet.spd_y)

            for j, roid in enumerate(self.roids):
                if roid is None:
                    continue
                dx = roid.pos_x - bullet.pos_x
                dy = roid.pos_y - bullet.pos_y
                reach = ROID_RADII[roid.split]
                if dx * dx + dy * dy < reach * reach:
                    self.bullets[i] = None
                    self._hit(j, roid)
                    break

            if not self.title_screen:
                draw_shape(canvas, BULLET, bullet.angle, 1.0, bullet.pos_x, bullet.pos_y, 1.0)

    def _hit(self, index: int, roid: Roid) -> None:
        roid.split += 1
        if roid.split >= ROID_SPLITS:
            self.roids[index] = None
            if self.kills == 0:
                self.messages.append("FIRST BLOOD - You've destroyed an asteroid!")
            self.kills += 1
            return

        slot = _first_free(self.roids)
        if slot is None:
            self.messages.append("WARNING: out of space for new asteroids!")
            return
        rng = self.rng
        model = rng.randrange(ROID_MODELS)
        angle = rand_real(rng, -PI, PI)
        spin = rand_real(rng, -PI / 64, PI / 64)
        spd_x = -roid.spd_x + rand_real(rng, -ROID_SPEED, ROID_SPEED)
        spd_y = -roid.spd_y + rand_real(rng, -ROID_SPEED, ROID_SPEED)
        # the extra push keeps the halves from sitting on top of each other
        self.roids[slot] = Roid(
            model=model, split=roid.split, angle=angle, spin=spin,
            pos_x=roid.pos_x + 6 * spd_x, pos_y=roid.pos_y + 6 * spd_y,
            spd_x=spd_x, spd_y=spd_y,
        )
        roid.model = rng.randrange(ROID_MODELS)
        roid.angle = rand_real(rng, -PI, PI)
        roid.spin = rand_real(rng, -PI / 64, PI / 64)
        roid.spd_x += rand_real(rng, -ROID_SPEED, ROID_SPEED)
        roid.spd_y += rand_real(rng, -ROID_SPEED, ROID_SPEED)
        roid.pos_x += 6 * roid.spd_x
        roid.pos_y += 6 * roid.spd_y

    def _update_fragments(self, canvas: Any) -> None:
        for i, frag in enumerate(self.fragments):
            if frag is None:
                continue
            if frag.age <= 0:
                self.fragments[i] = None
                continue
            frag.age -= 1
            frag.pos_x = _wrap(frag.pos_x + frag.spd_x)
            frag.pos_y = _wrap(frag.pos_y + frag.spd_y)
            frag.angle += frag.spin
            draw_shape(canvas, BULLET, frag.angle, 2.0, frag.pos_x, frag.pos_y, 1.0)

    def _update_roids(self, canvas: Any) -> int:
        count = 0
        for roid in self.roids:
            if roid is None:
                continue
            count += 1
            radius = ROID_RADII[roid.split]
            roid.angle = _wrap_angle(roid.angle + roid.spin)
            roid.pos_x = _wrap(roid.pos_x + roid.spd_x)
            roid.pos_y += roid.spd_y
            if self.title_screen:
                if roid.pos_y > SCREEN or roid.pos_y - radius < 250:
                    roid.spd_y = -roid.spd_y
            else:
                roid.pos_y = _wrap(roid.pos_y)

            dx = roid.pos_x - self.pos_x
            dy = roid.pos_y - self.pos_y
            reach = SHIP_RADIUS + radius
            if self._active and dx * dx + dy * dy < reach * reach:
                self._die()

            draw_shape(canvas, ROIDS[roid.model], roid.angle, radius,
                       roid.pos_x, roid.pos_y, 0.8 - 0.1 * roid.split)
            recenter(canvas, self.rng)
        return count

    def _die(self) -> None:
        rng = self.rng
        for k in range(MAX_FRAGMENTS):
            self.fragments[k] = Fragment(
                pos_x=self.pos_x + rand_real(rng, -SHIP_RADIUS, SHIP_RADIUS),
                pos_y=self.pos_y + rand_real(rng, -SHIP_RADIUS, SHIP_RADIUS),
                spd_x=rand_real(rng, -4, 4),
                spd_y=rand_real(rng, -4, 4),
                angle=rand_real(rng, -PI, PI),
                spin=rand_real(rng, -PI / 16, PI / 16),
                age=int(rand_real(rng, FRAGMENT_MIN_AGE, FRAGMENT_MAX_AGE)),
            )
        self.dead = True
        self._reset_ship()
        this_kills = self.kills - self._last_kills
        self._last_kills = self.kills
        if this_kills == 0:
            self.messages.append("You are DEAD, and you've accomplished NOTHING!")
        elif this_kills == 1:
            self.messages.append("You are DEAD, and you only destroyed one asteroid!")
        elif this_kills < 10:
            self.messages.append(f"You are DEAD, and you only destroyed {this_kills} asteroids!")
        else:
            self.messages.append(
                f"You are DEAD, but you destroyed {this_kills} asteroids! Congratulations!"
            )
        self.messages.append("\tPress R to respawn . . .")

    def _maybe_respawn(self, count: int) -> None:
        if count >= ROID_RESPAWN_THRESHOLD or self.kills <= 0:
            return
        self._respawn_timer += 1
        if self._respawn_timer <= ROID_RESPAWN_DELAY:
            return
        if rand_real(self.rng, 0.0, 1.0) < ROID_RESPAWN_RATE:
            slot = _first_free(self.roids)
            if slot is None:
                self.messages.append("WARNING: Can't respawn asteroid because the array is full!")
            else:
                self.roids[slot] = self._spawn_roid(2 * SAFE_ZONE)
        self._respawn_timer = 0
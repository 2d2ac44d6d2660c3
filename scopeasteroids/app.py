"""Command-line entry point: runs the game on an oscilloscope or in a window."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

import pygame

from .game import Control, Game
from .scope import DEFAULT_BUFFER, DEFAULT_FREQ, ScopeCanvas
from .window import SIZE, WindowCanvas

FRAME_DELAY_MS = 50
_PUMP_INTERVAL_MS = 5
_BYTES_PER_PAIR = 4

_KEYS = {
    pygame.K_UP: Control.UP,
    pygame.K_DOWN: Control.DOWN,
    pygame.K_LEFT: Control.LEFT,
    pygame.K_RIGHT: Control.RIGHT,
    pygame.K_SPACE: Control.FIRE,
    pygame.K_r: Control.RESPAWN,
    pygame.K_m: Control.MODE,
    pygame.K_ESCAPE: Control.QUIT,
    pygame.K_q: Control.QUIT,
}

_RULE = "-" * 80
_BANNER = "\n".join(
    [
        "",
        _RULE,
        _RULE,
        "------------------------------ A S T E R O I D S -------------------------------",
        _RULE,
        _RULE,
        'PROTIP: Picture wrong way round? Press "M" on the title screen\n'
        "\tto cycle through all possible orientations!\n",
        "Keys: arrows=thrusters, space=cannon, R=respawn when dead\n"
        "Press space to start the game.\n",
        "The game window must be focussed to receive input.\n"
        "Pressing keys in the terminal won't work.",
        "If joystick is present, it can be used in parallel (left/right = spin; "
        "for/back = thrust;",
        "button 4 = cycle through orientations; button 0 = fire; "
        "button 2 = respawn; button 7 = quit.",
        _RULE,
    ]
)


def key_control(key: int) -> Optional[Control]:
    """The game control bound to a pygame key, or None if the key is unbound."""
    return _KEYS.get(key)


class ScopeOutput:
    """Keeps a pygame mixer channel fed with audio from a scope canvas."""

    def __init__(self, canvas: ScopeCanvas) -> None:
        self.canvas = canvas
        self.chunk_bytes = canvas.buffer * _BYTES_PER_PAIR
        self._channel = None

    def _next_sound(self):
        return pygame.mixer.Sound(buffer=self.canvas.queue.fill(self.chunk_bytes))

    def pump(self) -> int:
        """Queue audio so the channel never runs dry; return how many chunks were added."""
        if self._channel is None:
            self._channel = pygame.mixer.Channel(0)
        channel = self._channel
        queued = 0
        if not channel.get_busy():
            channel.play(self._next_sound())
            queued += 1
        if channel.get_queue() is None:
            channel.queue(self._next_sound())
            queued += 1
        return queued


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="scopeasteroids",
        description="Asteroids drawn on an oscilloscope through the sound card.",
    )
    parser.add_argument(
        "--window", action="store_true", help="draw in a window instead of on a scope"
    )
    parser.add_argument("--freq", type=int, default=DEFAULT_FREQ, help="audio sample rate")
    parser.add_argument(
        "--buffer", type=int, default=DEFAULT_BUFFER, help="audio buffer size in samples"
    )
    return parser.parse_args(argv)


def _open_joystick() -> bool:
    pygame.joystick.init()
    if pygame.joystick.get_count() == 0:
        print("no joystick found")
        return False
    pygame.joystick.Joystick(0).init()
    return True


def _handle(game: Game, event: pygame.event.Event) -> None:
    if event.type == pygame.KEYDOWN:
        control = key_control(event.key)
        if control is not None:
            game.press(control)
    elif event.type == pygame.KEYUP:
        control = key_control(event.key)
        if control is not None:
            game.release(control)
    elif event.type == pygame.JOYAXISMOTION:
        game.axis(event.axis, event.value)
    elif event.type == pygame.JOYBUTTONDOWN:
        game.button(event.button)
    elif event.type == pygame.QUIT:
        game.running = False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until the player quits; return the exit status."""
    args = _parse_args(argv)
    pygame.display.init()
    try:
        output: Optional[ScopeOutput] = None
        if args.window:
            surface = pygame.display.set_mode((SIZE, SIZE))
            pygame.display.set_caption("Vector Output Window")
            canvas = WindowCanvas(surface)
        else:
            pygame.display.set_mode((320, 240))
            freq = args.freq if args.freq > 0 else DEFAULT_FREQ
            buffer = args.buffer if args.buffer > 0 else DEFAULT_BUFFER
            try:
                pygame.mixer.init(frequency=freq, size=-16, channels=2, buffer=buffer)
            except pygame.error as exc:
                print(f"Couldn't open audio: {exc}", file=sys.stderr)
                return 1
            actual = pygame.mixer.get_init()
            canvas = ScopeCanvas(actual[0] if actual else freq, buffer)
            output = ScopeOutput(canvas)
        canvas.set_scale(0, 1000, 0, 1000, 100)

        joystick = _open_joystick()
        print(_BANNER)

        game = Game(random.Random(), joystick=joystick)
        while game.running:
            for event in pygame.event.get():
                _handle(game, event)
            game.step(canvas)
            for message in game.messages:
                print(message)
            game.messages.clear()
            canvas.flip(True)
            title = f"Asteroids [{int(canvas.refresh_rate + 0.5)} Hz]"
            pygame.display.set_caption(title)

            deadline = pygame.time.get_ticks() + FRAME_DELAY_MS
            while True:
                if output is not None:
                    output.pump()
                if pygame.time.get_ticks() >= deadline:
                    break
                pygame.time.delay(_PUMP_INTERVAL_MS)

        remaining = game.rng.randrange(2**31) + 9001
        print(
            "\nProgram terminating. Showing great courage, you have destroyed "
            f"{game.kills} asteroid(s),\nbut {remaining} more remain.\n"
        )
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
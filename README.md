# scopeasteroids

This is a small Asteroids game drawn entirely with vector lines. The picture can
go to an oscilloscope in X/Y mode through the sound card's stereo output. It can
also be shown in an ordinary pygame window.

## Hooking up an oscilloscope

1. Connect the left audio channel to the vertical input.
2. Connect the right channel to the horizontal input.
3. Set the scope to use an external horizontal drive signal. Do not use external *sync*.
4. Adjust both inputs so that they move the beam about the same distance per volt.

The beam cannot be switched off, so faint lines join the separate shapes. Each
frame, a border is traced around the screen from a random corner. This helps
keep the picture steady.

## Installing and running

```
pip install .
scopeasteroids
```

When run without options, the game draws on the oscilloscope. It opens a small
320×240 window to receive input and plays the picture as audio through pygame's
mixer.

| Option          | Meaning                                                        |
|-----------------|----------------------------------------------------------------|
| `--window`      | Draw in a 480×480 window instead of on a scope                 |
| `--freq N`      | Audio sample rate (default 44100; 0 or less means the default) |
| `--buffer N`    | Audio buffer size in samples (default 1024; 0 or less means the default) |

```
scopeasteroids --window
scopeasteroids --help
```

If the audio device cannot be opened, the command prints `Couldn't open audio: ...`
and exits with status 1.

While the game runs, the window title shows the refresh rate of the last frame in
Hz. In window mode this is always 0. Game messages are printed to the terminal,
such as kills, deaths and the respawn prompt.

## Controls

| Action                     | Keyboard     | Joystick           |
|----------------------------|--------------|--------------------|
| Start / fire               | Space        | button 0           |
| Thrust forward / backward  | Up / Down    | stick forward/back |
| Rotate                     | Left / Right | stick left/right   |
| Respawn after dying        | R            | button 2           |
| Cycle picture orientation  | M (title)    | button 4 (title)   |
| Quit                       | Esc or Q     | button 7           |

The game window must have focus to receive keys.

If the picture on the scope is mirrored or rotated, press M on the title screen.
This steps through all eight orientations, which are combinations of mirroring X,
mirroring Y and swapping the axes.

If a joystick is found, it is used alongside the keyboard. With a joystick, thrust,
spin and fire act only for the frame in which the stick moves or the button is
pressed.

## Using the drawing code

Both canvases share one interface:

- `set_scale` sets the coordinate space.
- `move_to` and `line_to` draw.
- `set_mode` sets the orientation.
- `flip` finishes the frame.

```python
from scopeasteroids.scope import ScopeCanvas

canvas = ScopeCanvas(44100, 1024)
canvas.set_scale(0, 1000, 0, 1000, 100)
canvas.move_to(100, 100)
canvas.line_to(900, 900, 1.0)
canvas.flip(True)
audio = canvas.queue.fill(4096)   # next 4096 bytes of 16-bit stereo samples
```

### ScopeCanvas

`ScopeCanvas` renders each frame to PCM with `render_frame`. It then queues the
frame on its `FrameQueue`:

- `fill` loops the current frame.
- At the end of the current frame, `fill` swaps in the waiting frame, if there is one.
- `submit` replaces any frame that is still waiting.

A canvas keeps at most 4096 points per frame. Further drawing calls are ignored
until the next clearing `flip`. The canvas does not play anything by itself. In
the command, `scopeasteroids.app.ScopeOutput` keeps a pygame mixer channel fed
from the queue.

### WindowCanvas

`scopeasteroids.window.WindowCanvas` draws the same calls onto a pygame surface
using `bresenham` lines. Overlapping lines add brightness, up to white.

### Game

`scopeasteroids.game.Game` draws on either canvas through `Game.step`. It takes
input through `press`, `release`, `axis` and `button`. It collects its messages
in `Game.messages`.

## Limits

- There is no scoring beyond a count of destroyed asteroids.
- The game has no saved state and no sound effects.
- The audio output is the picture itself.
- The package cannot tell whether an oscilloscope is attached.
"""
input_manager.py
----------------
Keyboard polling that produces one InputSnapshot per tick.

Provides:
- Key bindings from logical Button to pygame key codes
- Edge detection (pressed this tick vs. held)
- Overlap warnings for keys bound to more than one button
"""

import pygame

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.core.services.input_snapshot import Button, InputSnapshot


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    Button.RIGHT: [pygame.K_RIGHT],
    Button.LEFT: [pygame.K_LEFT],
    Button.DOWN: [pygame.K_DOWN],
    Button.UP: [pygame.K_UP],
    Button.JUMP: [pygame.K_a, pygame.K_SPACE],
    Button.SPRINT: [pygame.K_s, pygame.K_LSHIFT],
}


class KeyboardInput:
    """
    Polls the keyboard and reports logical button state.

    Usage:
        keyboard = KeyboardInput()
        snapshot = keyboard.poll()     # once per fixed update
        if snapshot.pressed(Button.JUMP): ...
    """

    def __init__(self, key_bindings=None, key_state_source=None):
        """
        Args:
            key_bindings: Button -> list of pygame key codes
                (uses DEFAULT_KEY_BINDINGS if None)
            key_state_source: Callable returning a key-state sequence
                indexed by key code (defaults to pygame.key.get_pressed)
        """
        DebugLogger.init_entry("KeyboardInput")

        self.key_bindings = {
            Button(button): tuple(keys)
            for button, keys in (key_bindings or DEFAULT_KEY_BINDINGS).items()
        }
        self._key_state_source = key_state_source or pygame.key.get_pressed
        self._prev_held = frozenset()

        self._validate_bindings()

    def _validate_bindings(self):
        """Warn if one key drives more than one button."""
        seen = {}
        for button, keys in self.key_bindings.items():
            for key in keys:
                if key in seen and seen[key] != button:
                    DebugLogger.warn(
                        f"Key {key} bound to both {seen[key].name} and {button.name}",
                        category="input"
                    )
                seen.setdefault(key, button)

    # ===========================================================
    # Polling
    # ===========================================================

    def poll(self) -> InputSnapshot:
        """Read the keyboard once and return this tick's snapshot."""
        keys = self._key_state_source()
        held = frozenset(
            button for button, codes in self.key_bindings.items()
            if any(keys[code] for code in codes)
        )
        pressed = held - self._prev_held
        self._prev_held = held

        if pressed:
            DebugLogger.trace(f"Pressed {sorted(b.name for b in pressed)}", category="input")
        return InputSnapshot(held, pressed)

    def reset(self):
        """Forget held state so the next poll reports every held key as pressed."""
        self._prev_held = frozenset()

"""Controller button bit layouts for FMV and FM2 frame bytes."""

from enum import IntFlag


class FmvButton(IntFlag):
    """Button bits of one FMV controller byte."""

    RIGHT = 0x01
    LEFT = 0x02
    UP = 0x04
    DOWN = 0x08
    B = 0x10
    A = 0x20
    SELECT = 0x40
    START = 0x80


class Fm2Button(IntFlag):
    """Button bits of one binary FM2 controller byte."""

    A = 0x01
    B = 0x02
    SELECT = 0x04
    START = 0x08
    UP = 0x10
    DOWN = 0x20
    LEFT = 0x40
    RIGHT = 0x80


# FM2 text logs print buttons in this order
FM2_BUTTON_ORDER = "RLDUTSBA"

_BUTTON_LETTERS = {
    "RIGHT": "R",
    "LEFT": "L",
    "DOWN": "D",
    "UP": "U",
    "START": "T",
    "SELECT": "S",
    "B": "B",
    "A": "A",
}


def describe_buttons(value: int) -> str:
    """Render an FM2 controller byte as an RLDUTSBA mnemonic string.

    Released buttons are shown as dots, e.g. 0x81 -> "R......A".
    """
    pressed = {
        _BUTTON_LETTERS[button.name]
        for button in Fm2Button
        if button.name is not None and value & button
    }
    return "".join(letter if letter in pressed else "." for letter in FM2_BUTTON_ORDER)

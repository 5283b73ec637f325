from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


SEVERITY_STYLE = {
    "off": UIStyle.DIM.value,
    "warn": UIStyle.YELLOW.value,
    "error": UIStyle.RED.value,
}

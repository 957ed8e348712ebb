from enum import Enum

from agents_md.rules.models import Impact


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


IMPACT_STYLE = {
    Impact.CRITICAL: UIStyle.RED.value,
    Impact.HIGH: UIStyle.YELLOW.value,
    Impact.MEDIUM: UIStyle.CYAN.value,
    Impact.LOW: UIStyle.DIM.value,
}

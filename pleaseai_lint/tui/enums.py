from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"


class WriteStatus(str, Enum):
    WRITTEN = "written"
    FAILED = "failed"


WRITE_STATUS_STYLE = {
    WriteStatus.WRITTEN: UIStyle.GREEN.value,
    WriteStatus.FAILED: UIStyle.RED.value,
}


def outcome_style(ok: bool) -> str:
    return UIStyle.GREEN.value if ok else UIStyle.RED.value

"""ANSI escape sequences and named color styling.

Color names follow the chalk vocabulary used by existing deck configs
(``red``, ``blueBright``, ``bgYellow``, ``bold``...). Lookups ignore case,
underscores and dashes, so ``red_bright`` and ``redBright`` are the same.
"""

CLEAR_SCREEN = "\033[2J\033[H"
RESET = "\033[0m"

# name -> (open code, close code)
_STYLES: dict[str, tuple[int, int]] = {
    # modifiers
    "reset": (0, 0),
    "bold": (1, 22),
    "dim": (2, 22),
    "italic": (3, 23),
    "underline": (4, 24),
    "inverse": (7, 27),
    "hidden": (8, 28),
    "strikethrough": (9, 29),
    # foreground
    "black": (30, 39),
    "red": (31, 39),
    "green": (32, 39),
    "yellow": (33, 39),
    "blue": (34, 39),
    "magenta": (35, 39),
    "cyan": (36, 39),
    "white": (37, 39),
    "gray": (90, 39),
    "grey": (90, 39),
    "blackbright": (90, 39),
    "redbright": (91, 39),
    "greenbright": (92, 39),
    "yellowbright": (93, 39),
    "bluebright": (94, 39),
    "magentabright": (95, 39),
    "cyanbright": (96, 39),
    "whitebright": (97, 39),
    # background
    "bgblack": (40, 49),
    "bgred": (41, 49),
    "bggreen": (42, 49),
    "bgyellow": (43, 49),
    "bgblue": (44, 49),
    "bgmagenta": (45, 49),
    "bgcyan": (46, 49),
    "bgwhite": (47, 49),
    "bggray": (100, 49),
    "bggrey": (100, 49),
    "bgblackbright": (100, 49),
    "bgredbright": (101, 49),
    "bggreenbright": (102, 49),
    "bgyellowbright": (103, 49),
    "bgbluebright": (104, 49),
    "bgmagentabright": (105, 49),
    "bgcyanbright": (106, 49),
    "bgwhitebright": (107, 49),
}


def _normalize(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


def is_known_color(name: str) -> bool:
    """Return True if ``name`` is a supported color or modifier name."""
    return _normalize(name) in _STYLES


def colorize(text: str, color: str) -> str:
    """Wrap ``text`` in the escape codes for ``color``.

    Multi-line text is styled line by line so that each terminal line opens
    and closes its own style. Empty text stays empty.
    """
    try:
        open_code, close_code = _STYLES[_normalize(color)]
    except KeyError:
        raise ValueError(f"Unknown terminal color '{color}'") from None
    if not text:
        return text
    start, end = f"\033[{open_code}m", f"\033[{close_code}m"
    return "\n".join(f"{start}{line}{end}" for line in text.split("\n"))

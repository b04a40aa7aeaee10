from typing import Optional

from nock.types.noun import Noun, Cell, format_atom

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_ATOM = "\033[94m"
COLOR_BRACKET = "\033[90m"
COLOR_LOOBEAN = "\033[92m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_depth": None,
    "collapse": True,
    "group_digits": False,
    "color_atoms": False,
    "color_brackets": False,
    "color_loobeans": False,
}

COLOR_OPTIONS = {
    **DEFAULT_OPTIONS,
    "color_atoms": True,
    "color_brackets": True,
    "color_loobeans": True,
}

ELLIPSIS = "..."


def group_digits(value: int) -> str:
    """Write an atom the way Hoon does, with dots between thousands: 65.537."""
    text = format_atom(value)
    if text.startswith("0x"):
        return text
    groups = []
    while len(text) > 3:
        groups.append(text[-3:])
        text = text[:-3]
    groups.append(text)
    return ".".join(reversed(groups))


# ----------------- Colorize utility -----------------
def colorize_atom(value: int, options: dict = DEFAULT_OPTIONS) -> str:
    text = group_digits(value) if options.get("group_digits", False) else format_atom(value)
    if value in (0, 1) and options.get("color_loobeans", False):
        return f"{COLOR_LOOBEAN}{text}{RESET}"
    if options.get("color_atoms", False):
        return f"{COLOR_ATOM}{text}{RESET}"
    return text


def colorize_bracket(bracket: str, options: dict = DEFAULT_OPTIONS) -> str:
    if options.get("color_brackets", False):
        return f"{COLOR_BRACKET}{bracket}{RESET}"
    return bracket


# ----------------- Pretty printer -----------------
def pprint_noun(
    value: Noun,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
) -> str:
    """Render a noun in bracket notation.

    With `collapse` on, right-nested cells drop their brackets, so the
    noun [1 [2 3]] prints as [1 2 3]. Uncoloured output without digit
    grouping or depth elision reads back to the same noun.
    """
    if not isinstance(value, Cell):
        return colorize_atom(value.value, options)

    max_depth: Optional[int] = options.get("max_depth")
    if max_depth is not None and _current_depth >= max_depth:
        return ELLIPSIS

    items = [value.head]
    rest = value.tail
    if options.get("collapse", True):
        # Walk the tail spine iteratively; only heads recurse.
        while isinstance(rest, Cell):
            items.append(rest.head)
            rest = rest.tail
    items.append(rest)

    inner = " ".join(pprint_noun(item, options, _current_depth + 1) for item in items)
    return f"{colorize_bracket('[', options)}{inner}{colorize_bracket(']', options)}"


if __name__ == "__main__":
    from nock.types.noun import noun

    print(pprint_noun(noun([[1, 2], 3, 4, 65537]), {**COLOR_OPTIONS, "group_digits": True}))

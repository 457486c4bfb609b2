"""
Bit-level text rendering: binary octets and bit rulers.

A bit ruler is drawn above a row of binary octets and spans exactly as
many columns as the bits it labels, counting the space between octets.
"""

# Rulers too short for the "|-- n --|" form
SHORT_RULERS = {
    0: "",
    1: "1",
    2: "2 ",
    3: "|3|",
    4: "|4 |",
}


def ruler_width(n: int) -> int:
    """Columns taken by ``n`` bits of space-separated octets."""
    if n <= 0:
        return 0
    return n + (n - 1) // 8


def mask_line(n: int) -> str:
    """Draw a ruler for ``n`` bits, labelled with ``n``.

    Examples:
        mask_line(7)  -> "|- 7 -|"
        mask_line(17) -> "|------ 17 -------|"
    """
    if n < 0:
        raise ValueError(f"bit count must be non-negative, got {n}")
    if n in SHORT_RULERS:
        return SHORT_RULERS[n]
    return _mask_line_dynamic(n)


def _mask_line_dynamic(n: int) -> str:
    label = str(n)
    # two borders, two spaces around the label
    fill = max(ruler_width(n) - 2 - 2 - len(label), 0)
    # odd dash goes to the right
    left = "-" * (fill // 2)
    right = "-" * (fill // 2 + fill % 2)
    return f"|{left} {label} {right}|"


def binary_octets(address: bytes) -> list[str]:
    return [f"{b:08b}" for b in address]


def binary(address: bytes) -> str:
    """Render address bytes as space-separated 8-bit groups."""
    return " ".join(binary_octets(address))

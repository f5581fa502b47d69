from typing import Dict, List, Tuple

from .nodes import Node, NodeKind

# Define the menu structure
NODES_BY_CATEGORY: List[Tuple[str, List[Tuple[str, NodeKind]]]] = [
    ("Noise", [
        ("Value", NodeKind.VALUE),
        ("Value Cubic", NodeKind.VALUE_CUBIC),
        ("Perlin", NodeKind.PERLIN),
        ("Simplex", NodeKind.SIMPLEX),
        ("OpenSimplex2", NodeKind.OPEN_SIMPLEX2),
        ("OpenSimplex2s", NodeKind.OPEN_SIMPLEX2S),
        ("Cell Value", NodeKind.CELL_VALUE),
        ("Cell Distance", NodeKind.CELL_DISTANCE),
        ("Cell Distance Squared", NodeKind.CELL_DISTANCE_SQ),
    ]),
    ("Transform", [
        ("Fractal", NodeKind.FRACTAL),
        ("Frequency", NodeKind.FREQUENCY),
        ("Translate", NodeKind.TRANSLATE_XY),
    ]),
    ("Math", [
        ("Abs", NodeKind.ABS),
        ("Neg", NodeKind.NEG),
        ("Sqrt", NodeKind.SQRT),
        ("Floor", NodeKind.FLOOR),
        ("Ceil", NodeKind.CEIL),
        ("Round", NodeKind.ROUND),
        ("Add", NodeKind.ADD),
        ("Sub", NodeKind.SUB),
        ("Mul", NodeKind.MUL),
        ("Div", NodeKind.DIV),
        ("Rem", NodeKind.REM),
        ("Pow", NodeKind.POW),
        ("Min", NodeKind.MIN),
        ("Max", NodeKind.MAX),
        ("Lerp", NodeKind.LERP),
        ("Clamp", NodeKind.CLAMP),
        ("Triangle Wave", NodeKind.TRIANGLE_WAVE),
    ]),
    ("Seed", [
        ("Add Seed", NodeKind.ADD_SEED),
        ("Mul Seed", NodeKind.MUL_SEED),
    ]),
    ("Input", [
        ("Position", NodeKind.POSITION),
    ]),
]

MENU_ITEMS: Dict[str, NodeKind] = {
    label: kind for _, items in NODES_BY_CATEGORY for label, kind in items
}


def create_from_menu(label: str) -> Node:
    """New node, with its default constants, for a menu entry label."""
    try:
        kind = MENU_ITEMS[label]
    except KeyError:
        raise KeyError(f"No menu entry named '{label}'") from None
    return Node(kind)

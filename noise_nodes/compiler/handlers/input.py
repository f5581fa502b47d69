# Input Node Handlers
# Handles: Position

from ... import primitives as prim

POSITION_OUTPUTS = (prim.PositionX, prim.PositionY)


def handle_position(ctx):
    """X or Y of the queried point, selected by the compiled output."""
    return POSITION_OUTPUTS[ctx.output]()

def apply_gravity(body, gravity):
    """Accelerate the body downward by one frame of gravity."""
    body.vel.y += gravity


def bounce_off_walls(body, width, height):
    """
    Reflect the body off the viewport walls and snap it back inside.

    Each axis resolves at most one wall per frame: left wins over right,
    top wins over bottom. Only the offending component is clamped.
    """
    r = body.radius

    if body.pos.x - r < 0.0:
        body.vel.x = abs(body.vel.x)  # bounce right
        body.pos.x = r
    elif body.pos.x + r > width:
        body.vel.x = -abs(body.vel.x)  # bounce left
        body.pos.x = width - r

    if body.pos.y - r < 0.0:
        body.vel.y = abs(body.vel.y)  # bounce down
        body.pos.y = r
    elif body.pos.y + r > height:
        body.vel.y = -abs(body.vel.y)  # bounce up
        body.pos.y = height - r


def integrate_body(body, width, height, gravity):
    """
    Advance one body by a single frame.

    Gravity goes in first, then the wall response, then the move, so a
    velocity reflected this frame is the one that moves the body.
    """
    apply_gravity(body, gravity)
    bounce_off_walls(body, width, height)
    body.pos += body.vel
    return body

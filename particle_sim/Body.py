from .Vec2 import Vec2


class Body:
    """
    Physics state of one circular particle.

    Holds no presentation data: the world keeps each body's color in a
    parallel list under the same index.
    """

    def __init__(self, pos, vel=None, radius=10.0):
        radius = float(radius)
        if radius <= 0.0:
            raise ValueError(f"Body radius must be positive, got {radius}")

        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        if vel is None:
            self.vel = Vec2(0.0, 0.0)
        else:
            self.vel = vel.copy() if isinstance(vel, Vec2) else Vec2(vel[0], vel[1])
        self._radius = radius

    @property
    def radius(self):
        return self._radius

    def __repr__(self):
        return f"Body(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), vel=({self.vel.x:.2f}, {self.vel.y:.2f}), radius={self.radius})"

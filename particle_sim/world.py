import logging
import random

import numpy as np

from . import constants
from .Body import Body
from .Vec2 import Vec2
from .boundary import integrate_body
from .collision import iter_colliding_pairs, resolve_body_collision

logger = logging.getLogger("particle_sim.world")


class World:
    def __init__(self, width=constants.WIDTH, height=constants.HEIGHT, gravity=constants.GRAVITY,
                 fps=constants.FPS, restitution=constants.RESTITUTION, seed=constants.SEED):
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must have positive size, got {width}x{height}")
        self.width = width
        self.height = height
        self.gravity = gravity
        self.fps = fps
        self.restitution = restitution  # Coefficient of restitution for body-body collisions

        # Single generator for all spawning randomness, seeded once here
        self.rng = random.Random(seed)

        self.bodies = []
        self.colors = []  # colors[i] belongs to bodies[i]

        self.frame = 0
        self.collision_count = 0

    def add_body(self, body, color):
        self.bodies.append(body)
        self.colors.append(tuple(color))

    def spawn_body(self, radius):
        """Create one body at a random position inside the viewport, inset by radius."""
        rng = self.rng
        span_x = int(self.width - 2 * radius)
        span_y = int(self.height - 2 * radius)
        if span_x <= 0 or span_y <= 0:
            raise ValueError(f"Radius {radius} does not fit a {self.width}x{self.height} viewport")

        x = radius + rng.randrange(span_x)
        y = radius + rng.randrange(span_y)
        vel = Vec2((rng.randrange(200) - 100) / 50.0, (rng.randrange(200) - 100) / 50.0)
        color = (rng.randrange(256), rng.randrange(256), rng.randrange(256))

        body = Body(Vec2(x, y), vel, radius)
        self.add_body(body, color)
        return body

    def populate(self, count=constants.PARTICLE_COUNT, radius=constants.PARTICLE_RADIUS):
        if count < 0:
            raise ValueError(f"Particle count must not be negative, got {count}")
        for _ in range(count):
            self.spawn_body(radius)
        logger.info(f"World populated with {count} bodies of radius {radius} in a {self.width}x{self.height} viewport.")
        return self.bodies

    def update(self):
        """
        Run one simulation step: integrate every body, then resolve each
        overlapping pair in index order.

        Resolution is sequential and in place, so a pair later in the scan
        sees the positions and velocities left by earlier pairs this frame.
        Returns the number of pairs that received an impulse.
        """
        for b in self.bodies:
            integrate_body(b, self.width, self.height, self.gravity)

        resolved = 0
        for i, j in iter_colliding_pairs(self.bodies):
            if resolve_body_collision(self.bodies[i], self.bodies[j], restitution=self.restitution):
                resolved += 1

        self.frame += 1
        self.collision_count += resolved
        return resolved

    # State access

    def snapshot(self):
        """(pos, radius, color) per body, for drawing."""
        return [(b.pos.to_tuple(), b.radius, c) for b, c in zip(self.bodies, self.colors)]

    def get_state(self):
        """(n_bodies, 4) -> [x, y, vx, vy]"""
        if not self.bodies:
            return np.zeros((0, 4))
        return np.array([[b.pos.x, b.pos.y, b.vel.x, b.vel.y] for b in self.bodies])

    # Conserved quantities (unit masses)

    def total_momentum(self):
        state = self.get_state()
        return state[:, 2:4].sum(axis=0)

    def kinetic_energy(self):
        state = self.get_state()
        return float(0.5 * np.sum(state[:, 2:4] ** 2))

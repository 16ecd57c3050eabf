def detect_body_collision(b1, b2):
    """
    Detect collision between two bodies.
    Returns True if their centers are closer than the sum of their radii.
    """
    return b1.pos.distance_to(b2.pos) < (b1.radius + b2.radius)


def iter_colliding_pairs(bodies):
    """
    Yield every overlapping index pair (i, j), i < j, in increasing order.

    Each pair is tested against the bodies' current state when it is
    reached, so resolving a yielded pair before advancing the generator is
    visible to the pairs that follow it.
    """
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            if detect_body_collision(bodies[i], bodies[j]):
                yield i, j


def resolve_body_collision(b1, b2, restitution=1.0):
    """
    Push two overlapping bodies apart and exchange momentum along the
    collision normal. Both bodies are treated as unit mass.

    Returns True if an impulse was applied, False when the pair was skipped
    (coincident centers) or already separating.
    """
    # vector from b1 to b2
    delta = b2.pos - b1.pos
    dist = delta.length()
    if dist == 0.0:
        return False

    # negative while the bodies overlap
    overlap = 0.5 * (dist - b1.radius - b2.radius)

    norm = delta / dist

    b1.pos += norm * overlap
    b2.pos -= norm * overlap

    rv = b2.vel - b1.vel
    vel_along_norm = rv.dot(norm)

    # already moving apart
    if vel_along_norm > 0:
        return False

    j = -(1 + restitution) * vel_along_norm / 2
    impulse = norm * j

    b1.vel -= impulse
    b2.vel += impulse
    return True

import logging

from . import constants
from .renderer import Window
from .world import World

logger = logging.getLogger("particle_sim")


def setup_simulation(world=None):
    if world is None:
        world = World(constants.WIDTH, constants.HEIGHT, gravity=constants.GRAVITY, fps=constants.FPS,
                      restitution=constants.RESTITUTION, seed=constants.SEED)
    world.populate(constants.PARTICLE_COUNT, constants.PARTICLE_RADIUS)
    return world


def _log_stats(world):
    momentum = world.total_momentum()
    logger.debug(
        f"Frame {world.frame}: collisions={world.collision_count}, "
        f"kinetic_energy={world.kinetic_energy():.3f}, momentum=({momentum[0]:.3f}, {momentum[1]:.3f})"
    )


def main():
    logging.basicConfig(level=constants.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    window = Window(constants.WIDTH, constants.HEIGHT, constants.TITLE, constants.FPS)

    # --- Physics World ---
    world = setup_simulation()

    # --- Main Loop ---
    running = True
    while running:
        if window.poll_close_requested():
            running = False
            continue

        # --- Update ---
        world.update()
        if world.frame % constants.STATS_INTERVAL == 0 and logger.isEnabledFor(logging.DEBUG):
            _log_stats(world)

        # --- Draw ---
        window.clear(constants.BACKGROUND_COLOR)
        window.draw_world(world)
        window.present_frame()

    logger.info(f"Simulation closed after {world.frame} frames and {world.collision_count} collisions.")
    window.close()
    return 0

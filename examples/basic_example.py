"""Basic example of using the galaxy dynamics core."""

import logging
from galaxy_dynamics import InteractionParams, Simulator
from galaxy_dynamics.physics.diagnostics import temperature_summary
from galaxy_dynamics.presets import build_galaxy
from galaxy_dynamics.utils import setup_logging

logger = logging.getLogger("galaxy_dynamics.examples")


def main():
    """Run two spirals through a tidal encounter and a merger."""
    setup_logging("INFO")

    sim = Simulator(dt=1.0 / 60.0, apply_dust_lanes=True)
    a = sim.add_galaxy(build_galaxy("milky-way-like", n_particles=2000, seed=42))
    b = sim.add_galaxy(build_galaxy("andromeda-like", n_particles=2000, seed=7, offset=[30.0, 0.0, 0.0]))

    sim.add_interaction(InteractionParams("tidal", strength=0.5, duration=5.0, distance=60.0), a, b)
    sim.add_interaction(InteractionParams("merger", strength=0.2, duration=10.0), a, b, seed=1)

    for step in range(600):
        sim.step()
        if step % 100 == 0:
            logger.info(
                "Step %d: t=%.2f counts=%s temperature=%s",
                step, sim.time, sim.particle_counts(), temperature_summary(a.field),
            )

    logger.info("Simulation complete")


if __name__ == "__main__":
    main()

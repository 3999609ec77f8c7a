"""Physical and tuning constants used by the dynamics core.

Every number that shapes the simulation lives here so that the numeric
behaviour can be audited in one place and stays independent of any
rendering scale.
"""

# Physical constants (SI)
G = 6.67430e-11  # Gravitational constant, m^3 kg^-1 s^-2
SOLAR_MASS_KG = 1.989e30  # One solar mass in kilograms

# Thermal model (per simulated second, not physically derived)
COOLING_RATE = 0.1

# Color mapping: (red, green, blue) = (n, GREEN_RATIO * n, 1 - n)
GREEN_RATIO = 0.6

# Dust lanes
DUST_SPIRAL_WINDING = 4.0  # Phase turns per unit size
DUST_DARKENING = 0.3  # Color multiplier inside a lane (70% darker)

# Interactions
MERGER_ABSORPTION_START = 0.5  # Progress at which absorption begins
MERGER_ABSORPTION_SCALE = 0.25  # (p - start) / 2 * 0.5
SHOCKWAVE_FREQUENCY = 10.0  # rad per simulated second
COLLISION_HEATING = 0.1  # Temperature gain per unit strength per second
STRIPPING_PROBABILITY_SCALE = 0.1  # Per-tick removal chance = strength * scale
HARASSMENT_TIME_SCALE = 5.0
HARASSMENT_PHASES = (1.0, 1.3, 0.7)  # x, y, z phase multipliers

# Mass (solar masses) for which G * M_kg == 1 in simulation units; presets
# express galaxy masses as multiples of it so orbits suit a 60 Hz clock.
SIMULATION_MASS_UNIT = 1.0 / (G * SOLAR_MASS_KG)

# --- Constants ---
WIDTH, HEIGHT = 800, 600
FPS = 60
TITLE = "Particle Interaction Simulator"

# --- Simulation ---
PARTICLE_COUNT = 50
PARTICLE_RADIUS = 10.0
GRAVITY = 0.2  # units / frame^2
RESTITUTION = 1.0  # perfectly elastic
SEED = None  # None seeds from the OS

# --- Diagnostics ---
STATS_INTERVAL = 300  # frames between debug stat lines
LOG_LEVEL = "INFO"  # "DEBUG" adds the periodic stat lines

# --- Colors ---
BLACK = (0, 0, 0)
BACKGROUND_COLOR = BLACK

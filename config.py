# Game Configuration Constants

import math
import os

# Screen dimensions
SCREEN_W = 800
SCREEN_H = 800
FPS = 60

# Never integrate more than this much simulated time in one tick.
MAX_FRAME_DT = 1.0 / 20.0

# Logging
LOG_LEVEL = os.environ.get("ASTEROIDS_LOG_LEVEL", "INFO").upper()

# Persistence
SAVE_FILE = os.environ.get(
    "ASTEROIDS_SAVE_FILE",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "player_data.json"),
)
MAX_HIGH_SCORES = 10

# Assets
AUDIO_DIR = os.environ.get(
    "ASTEROIDS_AUDIO_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets", "audio"),
)

# Session rules
RESPAWN_DELAY = 2.0
SAFE_SPAWN_RADIUS = 150.0
EXTRA_LIFE_SCORE = 10_000
DEFAULT_DIFFICULTY = "medium"

# Player ship
SHIP_RADIUS = 15.0
SHIP_START_ROTATION = math.radians(-90.0)  # facing up
SHIP_THRUST = 5.0
SHIP_FRICTION = 0.99
SHIP_TURN_SPEED = 360.0  # degrees per second
SHIP_FIRE_COOLDOWN = 0.25
SHIP_INVULNERABILITY = 3.0
SHIP_BLINK_INTERVAL = 0.2
# Thrust is tuned per 60 Hz frame; scale it back to per-second.
THRUST_FRAME_SCALE = 60.0

# Hyperspace
HYPERSPACE_COOLDOWN = 5.0
HYPERSPACE_SELF_DESTRUCT_CHANCE = 0.1

# Projectiles
PLAYER_BULLET_SPEED = 500.0
SAUCER_BULLET_SPEED = 350.0
BULLET_LIFETIME = 1.2
BULLET_RADIUS = 2.0

# Asteroids
ASTEROID_BASE_SPEED = 30.0
ASTEROID_JAGGEDNESS = 0.4
ASTEROID_MAX_SPIN = 90.0  # degrees per second
ASTEROID_SPLIT_KICK = 20.0
ASTEROID_SPLIT_SPEED_RANGE = (1.1, 1.5)

# Saucers
SAUCER_RADIUS = 15.0
SAUCER_SPEED = 100.0
SAUCER_SCORE = 200
SAUCER_FIRE_INTERVAL = 2.0
SAUCER_SPAWN_BASE_INTERVAL = 15.0
MAX_ACTIVE_SAUCERS = 1

# Achievements
NOTIFICATION_DURATION = 3.0

# Colors
PALETTE = {
    "background": (0, 0, 0),
    "ship": (255, 255, 255),
    "thrust": (255, 140, 20),
    "asteroid": (235, 235, 235),
    "saucer": (50, 255, 80),
    "player_projectile": (255, 255, 255),
    "enemy_projectile": (50, 255, 80),
    "hud_text": (255, 255, 255),
    "menu_text": (255, 255, 255),
    "menu_selected": (255, 230, 60),
    "menu_active": (0, 220, 255),
    "locked": (150, 150, 150),
    "unlocked": (255, 200, 60),
    "notification": (255, 230, 60),
}

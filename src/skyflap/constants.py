"""
constants.py: Centralized tuning values for the simulation and the client.
"""

# -------- Window & Client Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800
RENDER_FPS = 60
WINDOW_TITLE = "Skyflap"

# -------- Persistence --------
DB_FILE = "skyflap.db"
BEST_SCORE_KEY = "flappy_best"

# -------- Bird Config --------
BIRD_WIDTH = 38
BIRD_HEIGHT = 28
BIRD_X_RATIO = 0.25             # Bird x as a share of viewport width
BIRD_Y_RATIO = 0.4              # Spawn / idle baseline as a share of viewport height

# -------- Physics Config (pixels / frame) --------
GRAVITY = 0.45                  # Added to vertical velocity every frame
JUMP_VELOCITY = -7.5            # Velocity after a flap (hard reset, not additive)
PITCH_SCALE = 3.0               # Degrees of tilt per unit of velocity
MIN_ROTATION = -30.0
MAX_ROTATION = 70.0
FLAP_POSE_FRAMES = 6

# -------- Idle Sway --------
IDLE_PHASE_STEP = 0.04          # Radians per frame
IDLE_AMPLITUDE = 12.0

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 150
PIPE_SPEED = 2.5                # Horizontal speed (pixels/frame)
PIPE_SPAWN_INTERVAL = 1800.0    # Milliseconds between spawns
PIPE_SPAWN_MARGIN = 80          # Keeps the gap away from ceiling and ground
PIPE_OVERSCAN = 10              # Pipes appear just past the right edge
PIPE_EXPIRE_SLACK = 10          # Removed once this far past the left edge

# -------- World Config --------
GROUND_HEIGHT = 80
COLLISION_MARGIN = 4            # Forgiveness on every side of the bird box
PARALLAX_FACTOR = 0.5
BG_TILE = 24

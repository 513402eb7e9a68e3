"""
constants.py: Centralized configuration for the game world and the client.
"""

# -------- Client Config --------
WINDOW_TITLE = "Flappy Bird"
DEFAULT_FPS = 60                # Ticks per second driven by the client loop

# -------- Game World Config --------
SCREEN_WIDTH = 640              # Logical resolution, independent of window size
SCREEN_HEIGHT = 480
BIRD_SIZE = 20                  # Bird is a square
BIRD_START_X = SCREEN_WIDTH / 4
BIRD_START_Y = SCREEN_HEIGHT / 2

# -------- Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 120
PIPE_SPEED = 3                  # Horizontal speed (pixels/frame)
PIPE_SPAWN_INTERVAL = 90        # Spawn once the timer exceeds this many frames
PIPE_GAP_MIN = SCREEN_HEIGHT // 8
PIPE_GAP_RANGE = SCREEN_HEIGHT // 2   # gap_y drawn from [MIN, MIN + RANGE)

# -------- Physics Config (pixels / frame) --------
GRAVITY = 0.25                  # Added to velocity every frame
JUMP_STRENGTH = -5.0            # Velocity overwrite on jump

# -------- Colors --------
SKY_COLOR = (135, 206, 235)
BIRD_COLOR = (255, 255, 0)
PIPE_COLOR = (34, 139, 34)
TEXT_COLOR = (255, 255, 255)

"""
constants.py: Centralized configuration for game, physics and rendering.
"""

# -------- Screen Config --------
SCREEN_WIDTH = 320
SCREEN_HEIGHT = 480
GROUND_HEIGHT = 70
RENDER_FPS = 60                 # Physics below is tuned per frame at this rate
WINDOW_TITLE = "Flappy"

# -------- Bird Config --------
BIRD_X = 50                     # Fixed bird X position
BIRD_START_Y = 150
BIRD_WIDTH = 30
BIRD_HEIGHT = 30

# -------- Physics Config (Pixels / Frame) --------
GRAVITY = 0.25                  # Added to velocity every tick
JUMP_VELOCITY = -4.6            # Velocity is set (not added) on flap

# -------- Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 150
PIPE_SPEED = 2
PIPE_SPAWN_INTERVAL_TICKS = 100 # Spawn every 100 ticks

# -------- Cloud Config --------
CLOUD_COUNT = 3
CLOUD_SPEED = 1
CLOUD_WIDTH = 60
CLOUD_HEIGHT = 40

# -------- Render Config --------
SKY_COLOR = (0x70, 0xC5, 0xCE)
PIPE_COLOR = (0x00, 0xCC, 0x66)
BIRD_FALLBACK_COLOR = (0xFF, 0xFF, 0x00)
GROUND_FALLBACK_COLOR = (0xDE, 0xD8, 0x95)
TEXT_COLOR = (0, 0, 0)
FONT_SIZE = 26                  # pygame default font, roughly 20px Arial
SCORE_POS = (20, 30)
GAME_OVER_X = 50                # Drawn at half screen height
GAME_OVER_TEXT = "Game Over! Tap to Restart"

# -------- Asset Config --------
BIRD_IMAGE = "bird.png"
GROUND_IMAGE = "ground.png"
CLOUD_IMAGE = "cloud.png"
DEFAULT_ASSET_DIR = "assets"

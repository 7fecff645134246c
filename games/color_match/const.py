# Game rules (manifest options override these)
INITIAL_LIVES       = 3
INITIAL_TIME        = 60      # seconds on the clock at start
MAX_TIME            = 90      # time bonuses never push the clock past this
LEVEL_UP_THRESHOLD  = 3       # correct picks needed to clear a level
TIME_BONUS          = 3       # seconds added per correct pick
HINT_COST           = 5       # points
BASE_POINTS         = 10
LEVEL_BONUS         = 2       # extra points per level on a correct pick
TICK_MS             = 1000    # countdown cadence

# Colour generation: channels stay in the mid range for vivid, legible tones
CHANNEL_MIN         = 80
CHANNEL_MAX         = 219
INITIAL_TARGET      = "#ffffff"

# Transient effects
TARGET_PULSE_MS     = 500
CORRECT_FLASH_MS    = 500
HINT_FLASH_MS       = 900

# Geometry / UI
EDGE_MARGIN         = 24
HUD_HEIGHT          = 96
SIDEBAR_WIDTH       = 300
GRID_GAP            = 8
BUTTON_WIDTH        = 220
BUTTON_HEIGHT       = 56
PREVIEW_SIZE        = 150
PULSE_GROW          = 12      # px the preview swells by while pulsing

HUD_FONT_SIZE       = 28
STATUS_FONT_SIZE    = 24
BIG_FONT_SIZE       = 40

HUD_COLOR           = (230, 230, 230)
BUTTON_COLOR        = (230, 230, 230)
HIGHLIGHT_COLOR     = (255, 255, 255)
DISABLED_OVERLAY    = (12, 14, 18, 150)

TONE_COLORS = {
    "neutral": (200, 200, 200),
    "info":    (100, 180, 255),
    "success": (50, 220, 80),
    "warn":    (255, 170, 40),
}

# config.py
"""
Configuration settings for the Chronos clock face.
"""
import os

# ── Frame cadence ───────────────────────────────────────────────────────────

# Length of one logic tick window (s); virtual time advances once per window
TICK_SECONDS = 0.016

# ── Character-cell display ─────────────────────────────────────────────────

# Grid size in cells (columns × rows)
COLS = 120
ROWS = 46

# Pixel size of one cell; CELL_H / CELL_W is the cell aspect ratio
CELL_W = 10
CELL_H = 21

# Rows are this many times taller than columns are wide
ANISOTROPY = CELL_H / CELL_W

MARGIN_CELLS  = 1
HEADER_ROWS   = 3
FOOTER_ROWS   = 3
MIN_CANVAS_ROWS = 10

FULLSCREEN = False
FONT_NAME  = "monospace"
FONT_SIZE  = 17

# ── Note store ─────────────────────────────────────────────────────────────

# Where notes are kept; `--notes` on the command line wins over both
NOTES_PATH = os.environ.get("CHRONOS_NOTES", "chronos_notes.json")

# ── Time dilation ──────────────────────────────────────────────────────────

START_MULTIPLIER = 1.0
MULTIPLIER_STEP  = 0.1

# ── Breathing cycle (seconds) ──────────────────────────────────────────────

INHALE_SEC = 4.0
HOLD_SEC   = 1.0
EXHALE_SEC = 8.0
BREATH_PERIOD = INHALE_SEC + HOLD_SEC + EXHALE_SEC
EMANATION_COUNT = 3

# ── Palette ────────────────────────────────────────────────────────────────

BG          = (0, 0, 0)
GOLD        = (212, 175, 55)
GOLD_DIM    = (100, 80, 20)
ACTIVE_HAND = (252, 246, 186)
SECOND_HAND = (180, 50, 50)
WHITE       = (255, 255, 255)
GREEN       = (0, 200, 0)
RED         = (220, 40, 40)
YEL         = (230, 210, 40)
DARK_GRAY   = (110, 110, 110)

# ── Shader layer ───────────────────────────────────────────────────────────

# Clock radius in rows: min(ROWS·0.45, COLS·0.22) of the canvas region
RADIUS_ROW_FRACTION = 0.45
RADIUS_COL_FRACTION = 0.22

VIGNETTE_TINT = (10.0, 10.0, 15.0)

RING_EXPANSION = 1.5
RING_THICKNESS = 4.0
RING_GAIN      = 0.5
RING_TINT      = (212.0, 175.0, 55.0)

SPIRIT_RADIUS      = 95.0     # canvas units, same scale as the hands
SPIRIT_GLOW_RADIUS = 12.0     # cells
SPIRIT_TINT        = (255.0, 215.0, 0.0)

LOTUS_PETALS    = 8
LOTUS_AMPLITUDE = 6.0
LOTUS_BAND      = 2.5
LOTUS_SPIN      = 0.1         # rad per virtual second, turning backwards
LOTUS_TINT      = (255.0, 215.0, 50.0)

# Breathing light: BASE + SWING·|sin(RATE·t)|
LIGHT_BASE  = 0.7
LIGHT_SWING = 0.3
LIGHT_RATE  = 0.5

# Cells whose brightest channel stays at or below this are not painted
PAINT_THRESHOLD = 15

# ── Vector overlay (canvas units; 100 = clock radius) ─────────────────────

CANVAS_BOUND  = 120.0
CLOCK_RADIUS  = 100.0
TICK_INNER    = 98.0
PETAL_BASE    = 102.0
PETAL_APEX    = 118.0
PETAL_HALF_DEG = 6.0
MARKER_RADIUS = 90.0
MARKER_ARM    = 2.0
SECOND_LEN    = 95.0
MINUTE_LEN    = 85.0
HOUR_LEN      = 60.0
HUB_OUTER     = 3.0
HUB_INNER     = 1.0
SELECT_MARK   = 4.0

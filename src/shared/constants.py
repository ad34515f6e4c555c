"""Constants shared by the heightmap pipeline, its settings and the CLI."""

# Reference color of contour (relief) lines, RGB
RELIEF_COLOR = (0, 0, 0)

# Squared RGB distance up to which a pixel still counts as a relief line (inclusive)
ALLOWED_ERROR = 100_000

# Relative height increment when crossing one relief line
ELEVATION_STEP = 5

# --- Mask cell values
# Pixel of a relief line
MASK_LINE = 255
# Any other pixel
MASK_BACKGROUND = 1
# Pixel already consumed by a flood fill (labeler's working copy only)
MASK_CONSUMED = 0

# --- Label grid
# Label 0 marks an unlabeled pixel and is never given to a component
LABEL_NONE = 0
# Largest label that fits into the uint8 label grid
LABEL_MAX = 255

# Baseline height of the seed line of every connected island
HEIGHT_BASELINE = 0

# --- Debug artifacts written by the CLI
RAW_MASK_FILENAME = 'raw_mask.png'
MASK_FILENAME = 'mask.png'
REGIONS_FILENAME = 'regions.png'
HEIGHTMAP_FILENAME = 'heightmap.png'

# Settings file name inside the configs directory
SETTINGS_FILENAME = 'heightmap.toml'

# Logging format used by the CLI
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# psutil availability
PSUTIL_AVAILABLE = True

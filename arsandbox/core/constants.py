"""
Constants shared by the calibration pipeline.
"""

# ==================== ENVIRONMENT VARIABLES ====================
ENV_BOX_LAYOUT = "SANDBOX_BOX_LAYOUT"
ENV_VIEWER = "SANDBOX_VIEWER"
ENV_SAND_OFFSET = "SANDBOX_SAND_OFFSET"
ENV_DRY_RUN = "SANDBOX_DRY_RUN"  # presence-only flag

# ==================== DEPENDENCY DISCOVERY ====================
# Version-suffixed install directories, e.g. /usr/local/etc/SARndbox-2.8
DEFAULT_BOX_LAYOUT_GLOB = "/usr/local/etc/SARndbox-*/BoxLayout.txt"
DEFAULT_VIEWER_PROGRAM = "RawKinectViewer"

# ==================== CALIBRATION CONSTANTS ====================
DEFAULT_SAND_OFFSET = "8.7"  # camera units, kept as text for Decimal
DEFAULT_PLANE_TOLERANCE = 10.0  # max corner distance from base plane
BACKUP_SUFFIX = ".bak"

# ==================== EXIT CODES ====================
EXIT_OK = 0
EXIT_DEPENDENCY = 2
EXIT_VIEWER = 3
EXIT_INCOMPLETE = 4
EXIT_WRITE = 5
EXIT_CONFIG = 6
EXIT_INTERRUPTED = 130

# ==================== LOGGING CONSTANTS ====================
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024  # 10MB

# ==================== USER MESSAGES ====================
PAUSE_PROMPT = "Press Enter to exit..."
ERROR_MISSING_VALUE = "Calibration value not found in viewer output: {}"
SUCCESS_LAYOUT_WRITTEN = "Box layout written to: {}"

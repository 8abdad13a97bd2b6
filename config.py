# config.py
import os
import sys

def get_data_dir():
    """Get the appropriate data directory for user files."""
    if hasattr(sys, '_MEIPASS'):
        # Running as PyInstaller EXE - use user's AppData directory
        if sys.platform == "win32":
            data_dir = os.path.join(os.path.expanduser('~'), 'AppData', 'Local', 'TeamCalendar')
        else:
            data_dir = os.path.join(os.path.expanduser('~'), '.teamcalendar')
    else:
        # Running in development mode - use current directory
        data_dir = os.path.dirname(os.path.abspath(__file__))

    os.makedirs(data_dir, exist_ok=True)
    return data_dir

# --- File Paths ---
_DATA_DIR = get_data_dir()
SETTINGS_FILE = os.path.join(_DATA_DIR, "settings.json")

# --- Day View Layout ---
COLUMN_MODE_GLOBAL = "global"    # one column width for the whole day
COLUMN_MODE_CLUSTER = "cluster"  # width sized per group of overlapping events
COLUMN_MODES = (COLUMN_MODE_GLOBAL, COLUMN_MODE_CLUSTER)
DEFAULT_DAY_COLUMN_MODE = COLUMN_MODE_GLOBAL

# --- Time ---
DEFAULT_USER_TIMEZONE = "UTC"

# logger.py
# Colored console logger shared by every BASIC_PSO module.
# Call sites pass their module name, usually Path(__file__).stem.

import sys
import datetime

# --- Configuration ---
# Set to False to disable color output (e.g., if logging to a file)
ENABLE_COLOR = True
IS_TERMINAL = sys.stdout.isatty()

DEBUG = False


# --- ANSI Escape Codes ---
class Colors:
    RESET = "\033[0m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"
    BLUE = "\033[0;34m"
    PURPLE = "\033[0;35m"
    CYAN = "\033[0;36m"
    WHITE = "\033[0;37m"
    BOLD_RED = "\033[1;31m"
    BOLD_GREEN = "\033[1;32m"
    BOLD_YELLOW = "\033[1;33m"
    BOLD_BLUE = "\033[1;34m"


# --- Color Mapping ---
COLOR_MAP = {
    "default": Colors.RESET,
    "red": Colors.RED,
    "green": Colors.GREEN,
    "yellow": Colors.YELLOW,
    "blue": Colors.BLUE,
    "purple": Colors.PURPLE,
    "cyan": Colors.CYAN,
    "white": Colors.WHITE,
    # --- Semantic Mappings ---
    "error": Colors.BOLD_RED,
    "warning": Colors.BOLD_YELLOW,
    "info": Colors.CYAN,
    "success": Colors.BOLD_GREEN,
    "debug": Colors.PURPLE,
    "header": Colors.BOLD_BLUE,
}

DEFAULT_COLOR_CODE = Colors.RESET


def log(message: str, module_name: str = "INFO", color_name: str = "default"):
    """
    Prints a formatted log message to the console with color.

    Args:
        message (str): The message to print.
        module_name (str): The name of the calling module (e.g., Path(__file__).stem).
        color_name (str): The name of the color to use (e.g., "red", "info", "warning").
    """
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    color_code = COLOR_MAP.get(color_name.lower(), DEFAULT_COLOR_CODE)
    reset_code = Colors.RESET

    if not (ENABLE_COLOR and IS_TERMINAL):
        color_code = ""
        reset_code = ""

    padded_module = f"[{module_name:<15}]"
    formatted_message = f"{timestamp} {padded_module} {color_code}{message}{reset_code}"

    print(formatted_message, file=sys.stdout)
    sys.stdout.flush()


# --- Helper Functions for Common Levels ---

def log_error(message: str, module_name: str = "ERROR"):
    """Logs an error message."""
    log(message, module_name, "error")


def log_warning(message: str, module_name: str = "WARNING"):
    """Logs a warning message."""
    log(message, module_name, "warning")


def log_info(message: str, module_name: str = "INFO"):
    """Logs an informational message."""
    log(message, module_name, "info")


def log_success(message: str, module_name: str = "SUCCESS"):
    """Logs a success message."""
    log(message, module_name, "success")


def log_debug(message: str, module_name: str = "DEBUG"):
    """Logs a debug message. Silent unless DEBUG is set."""
    if DEBUG:
        log(message, module_name, "debug")


def log_header(message: str, module_name: str = "HEADER"):
    """Logs a header/section title message."""
    log(message, module_name, "header")


def set_debug(enabled: bool):
    """Toggles debug output at runtime (used by the --debug CLI flag)."""
    global DEBUG
    DEBUG = enabled

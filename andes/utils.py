import os
import sys


def get_resource_path(relative_path):
    """
    Get absolute path to a bundled asset, works for dev and for PyInstaller
    """
    if hasattr(sys, "_MEIPASS"):
        return os.path.join(sys._MEIPASS, "andes", relative_path)
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), relative_path)

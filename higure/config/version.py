"""
Version information helper.
"""

import subprocess
from importlib import metadata


def get_version():
    # Installed distributions know their own version
    try:
        return metadata.version('higure')
    except metadata.PackageNotFoundError:
        pass

    # Source checkouts inside Docker ship a VERSION file
    try:
        with open('VERSION', 'r') as f:
            return f.read().strip()
    except FileNotFoundError:
        pass

    try:
        return subprocess.check_output(['git', 'describe', '--tags', '--abbrev=0'],
                                       stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

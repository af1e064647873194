"""Device OS version lookup for hosts that don't supply one."""

import platform
import re


def current_os_version() -> str:
    """Dot-separated numeric OS version of this machine ("" if unknown)."""
    system = platform.system()
    if system == 'Darwin':
        version = platform.mac_ver()[0]
    elif system == 'Windows':
        version = platform.version()
    else:
        version = platform.release()

    # Linux releases carry suffixes such as "6.1.0-13-amd64"
    match = re.match(r'\d+(?:\.\d+)*', version or '')
    return match.group(0) if match else ''

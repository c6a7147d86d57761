# src/analyzer/utils/launcher.py
import importlib.util
import logging
import socket
import subprocess
import sys
from typing import Optional

logger = logging.getLogger(__name__)

STUDIO_MODULE = "analyzer.server.app"
PORT_SCAN_RANGE = 10


def find_free_port(start_port: int = 5000, max_tries: int = PORT_SCAN_RANGE,
                   host: str = "127.0.0.1") -> Optional[int]:
    """
    Returns the first port from `start_port` upwards that `host` can bind,
    trying `max_tries` ports, or None when all of them are taken.
    """
    for port in range(start_port, start_port + max_tries):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
            try:
                probe.bind((host, port))
            except OSError:
                logger.debug("Port %d on %s is busy.", port, host)
                continue
            return port
    return None


def launch_studio_detached(start_port: int = 5000, host: str = "127.0.0.1") -> Optional[int]:
    """
    Starts TextPiper Studio as a separate background process
    (`python -m analyzer.server.app`) so its request log stays out of the shell.

    Returns:
        The port Studio listens on, or None when it could not be started.
    """
    port = find_free_port(start_port, PORT_SCAN_RANGE, host)
    if port is None:
        print(f"❌ Error: No free ports found between {start_port} and {start_port + PORT_SCAN_RANGE - 1}.")
        return None

    if importlib.util.find_spec(STUDIO_MODULE) is None:
        print(f"❌ Error: Cannot find the Studio module '{STUDIO_MODULE}'.")
        return None

    command = [sys.executable, "-m", STUDIO_MODULE, "--host", host, "--port", str(port)]
    print(f"🚀 Launching TextPiper Studio on http://{host}:{port} ...")
    try:
        subprocess.Popen(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        print(f"❌ Failed to launch Studio: {e}")
        logger.error("Studio launch failed: %s", e, exc_info=True)
        return None

    return port

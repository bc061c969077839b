"""
Shared API state - sio.
Initialized by main.py after creating app.
"""

from typing import Any

# Set by main.py
sio: Any = None


def init_api_state(sio_instance):
    global sio
    sio = sio_instance

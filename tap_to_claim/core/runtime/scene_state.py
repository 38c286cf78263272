"""
scene_state.py
--------------
Defines the lifecycle states a stage can be in.
"""

from enum import Enum


class StageState(Enum):
    """Lifecycle states for stage management."""
    INACTIVE = "inactive"     # Created, no hook has run yet
    SETUP = "setup"           # Running setup_once / prepare_assets
    LOADING = "loading"       # Waiting for declared assets
    BUILDING = "building"     # Running build
    LIVE = "live"             # Ticking once per frame
    EXITED = "exited"         # Replaced by another stage

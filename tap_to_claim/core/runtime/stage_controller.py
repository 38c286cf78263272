"""
stage_controller.py
-------------------
Activates one stage at a time and drives it through its lifecycle.

Responsibilities
----------------
- Resolve stage names through an explicit StageRegistry.
- Run setup_once -> prepare_assets -> (asset loading) -> build, in order.
- Tick the live stage once per frame; forward input only to a live stage.
- Destroy the previous stage on every successful start() (no stack).
"""

from tap_to_claim.core.debug.debug_logger import DebugLogger
from tap_to_claim.core.runtime.scene_state import StageState
from tap_to_claim.core.services.asset_loader import AssetLoader


class StageController:
    """Linear, manual stage switcher. Each stage calls start(next) itself."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, registry, services, asset_base_path: str = None):
        """
        Args:
            registry: StageRegistry with the fixed stage order
            services: ServiceLocator handed to every stage
            asset_base_path: Root for asset paths (None = Assets.BASE_PATH)
        """
        self.registry = registry
        self.services = services
        self.asset_base_path = asset_base_path
        services.stage_controller = self

        self._current = None
        self._current_name = None
        self.history = []

        DebugLogger.init_entry("StageController")
        DebugLogger.init_sub(f"Stage order: {registry.names}")

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def current(self):
        return self._current

    @property
    def current_name(self):
        return self._current_name

    @property
    def is_live(self) -> bool:
        return self._current is not None and self._current.state is StageState.LIVE

    # ===========================================================
    # Stage Control
    # ===========================================================

    def start(self, name: str) -> bool:
        """
        Replace the current stage with a fresh instance of ``name``.

        Returns:
            bool: False if the name is unknown (current stage is kept)
        """
        stage_class = self.registry.get(name)
        if stage_class is None:
            DebugLogger.warn(f"Unknown stage: '{name}'")
            return False

        previous = self._current
        if previous is not None:
            DebugLogger.system(f"Transitioning [{self._current_name}] → [{name}]")
            previous.state = StageState.EXITED
            previous.destroy()
        else:
            DebugLogger.system(f"Loading Initial Stage: [{name}]")

        stage = stage_class(self.services)
        stage.name = name
        stage.index = self.registry.index_of(name)
        stage.loader = AssetLoader(self.services.textures, base_path=self.asset_base_path)

        self._current = stage
        self._current_name = name
        self.history.append(name)

        # Hooks may call start() themselves; stop as soon as we are replaced
        stage.state = StageState.SETUP
        stage.run_setup()
        if self._current is not stage:
            return True

        stage.prepare_assets(stage.loader)
        if self._current is not stage:
            return True

        if stage.loader.pending:
            stage.state = StageState.LOADING
            DebugLogger.state(f"Loading {stage.loader.total} assets for {name}")
            return True

        self._build(stage)
        return True

    def _build(self, stage):
        stage.state = StageState.BUILDING
        DebugLogger.state(f"Building {stage.name}")
        stage.build()

        if self._current is stage:
            stage.state = StageState.LIVE
            DebugLogger.section(f"Live Stage: {stage.name}")

    # ===========================================================
    # Event, Update, Draw Delegation
    # ===========================================================

    def update(self, dt: float):
        """
        Advance the current stage by one frame.

        Raises:
            AssetLoadError: Propagated from the loader; no retry
        """
        stage = self._current
        if stage is None:
            return

        if stage.state is StageState.LOADING:
            if stage.loader.update() and self._current is stage:
                self._build(stage)
            return

        if stage.state is StageState.LIVE:
            stage.step(dt)

    def handle_event(self, event) -> bool:
        """Forward a pygame event to the live stage."""
        if not self.is_live:
            return False
        return self._current.handle_event(event)

    def draw(self, draw_manager):
        if self._current is not None and self._current.state is not StageState.EXITED:
            self._current.draw(draw_manager)

    def shutdown(self):
        """Destroy the current stage. Used when the loop exits."""
        if self._current is not None:
            self._current.state = StageState.EXITED
            self._current.destroy()
            DebugLogger.state(f"Shut down {self._current_name}")
        self._current = None
        self._current_name = None

"""
progress_reporter.py
--------------------
Maps loader progress notifications onto a bar element's width.
"""

from tap_to_claim.core.services.event_manager import LoadProgressEvent


class ProgressReporter:
    """
    Observes LoadProgressEvent and resizes ``bar``.

    Width is ``min_width + (max_width - min_width) * clamp(fraction, 0, 1)``.
    Monotonicity is the loader's business: a smaller fraction shrinks the bar.
    """

    def __init__(self, bar, min_width: float = 4, max_width: float = 464):
        if max_width < min_width:
            raise ValueError("max_width must not be smaller than min_width")
        self.bar = bar
        self.min_width = min_width
        self.max_width = max_width
        self.last_fraction = 0.0

    def width_for(self, fraction: float) -> float:
        clamped = max(0.0, min(1.0, fraction))
        return self.min_width + (self.max_width - self.min_width) * clamped

    def report(self, fraction: float):
        self.last_fraction = fraction
        self.bar.width = self.width_for(fraction)

    def on_progress(self, event: LoadProgressEvent):
        self.report(event.fraction)

    def attach(self, loader):
        """Subscribe to the loader's progress notifications."""
        loader.on(LoadProgressEvent, self.on_progress)
        return self

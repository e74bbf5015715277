"""Backend integrations."""

from integrations.anchor_reporter import AnchorCorrection, AnchorReporter

__all__ = ["AnchorCorrection", "AnchorReporter"]

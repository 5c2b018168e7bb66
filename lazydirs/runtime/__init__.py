"""Runtime wiring: config, logging, terminal control and the event loop.

Submodules are imported directly (``lazydirs.runtime.config`` and friends) so
low-level modules can read config without pulling in the feature layer.
"""

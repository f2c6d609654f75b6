"""PyQt6 user interface: board rendering, panels, service bridge."""

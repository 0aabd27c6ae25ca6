"""zellij-whip — bring a terminal window, zellij tab and pane to the front."""

__version__ = "0.3.0"

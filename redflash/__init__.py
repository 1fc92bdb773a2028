"""RedFlash: a full-screen countdown timer with a red flash alarm."""

__version__ = "0.1.0"

"""pomo - a command-line Pomodoro interval timer."""

__version__ = "v0.0.1"

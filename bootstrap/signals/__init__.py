from .bootstrap_signals import *  # noqa: F401,F403

"""CLI sub-command groups registered by ``tuxmate.main``."""

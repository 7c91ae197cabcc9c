"""Configuration loading — tuxmate.yml selection profiles."""

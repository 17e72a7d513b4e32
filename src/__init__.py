"""Source package for the fitness assessment service."""

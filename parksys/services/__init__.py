"""Domain services that sit above the repositories."""

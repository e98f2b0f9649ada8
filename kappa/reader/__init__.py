"""Reader: turns Kappa source text into forms."""

"""Runtime value model: sentinels, symbols, pairs, closures and environments."""

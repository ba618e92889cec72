"""Chess rules engine: positions, legal actions and algebraic notation."""

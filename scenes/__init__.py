"""scenes — The game's screens: the difficulty menu and the race."""

"""Rules engine and terminal front-end for the Color Lines puzzle game."""

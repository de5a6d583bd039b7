"""Dense 2D grid shared by the daily puzzle solvers."""

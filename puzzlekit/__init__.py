"""Solved algorithm puzzles from competitive programming and interview practice."""

__version__ = "0.1.0"
__all__ = ["arrays", "codechef", "codeforces", "cses", "grids", "searching", "strings", "structures"]
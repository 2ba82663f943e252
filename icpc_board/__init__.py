"""icpc_board - ICPC style contest scoreboard with freeze and scroll."""

__version__ = "1.0.0"

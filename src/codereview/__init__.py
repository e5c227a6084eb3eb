"""codereview — pattern-based code review tool for agent runtimes."""

__version__ = "0.1.0"

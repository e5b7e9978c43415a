"""Worked solutions to the course exercises, one module per topic."""

__all__: list[str] = []
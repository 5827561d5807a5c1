"""Host-side services for termtop: metric sampling for the tables."""

from tt_app.sampling import sample_cpu_usage, sample_temperatures

__all__ = ["sample_cpu_usage", "sample_temperatures"]

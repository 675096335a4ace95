"""Classic algorithms and data structures for study: complexity counters,
recursion, sorting, benchmarks, linear structures, schedulers and trees."""

__version__ = "0.1.0"
"""Benchmark driver package.

Provides the runner that walks the timing grid and prints the report, plus
helpers that persist and summarise the collected timings.
"""

"""Starter .shannon-bench.toml template."""

DEFAULT_TOML = """\
# shannon benchmark configuration
version = "1.0"

[bench]
iterations = 100
warmup = 5
# seed = 42                 # fix the random inputs across runs
charset = "alphanumeric"    # alphanumeric | mixed (adds non-ASCII code points)

[bench.cases]
empty = 0
small = 64
medium = 1024
large = 65536

[output]
format = "terminal"         # terminal | json
show_summary = true
"""

"""Starter .picomap.toml template."""

DEFAULT_TOML = """\
# picomap configuration
version = "1.0"

[render]
smoothing = "forward"     # forward | symmetric (also joins runs of top halves)

[output]
format = "plain"          # plain | terminal | json
show_summary = true
"""

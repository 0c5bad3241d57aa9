"""Starter .linedrift.toml template."""

DEFAULT_TOML = """\
# linedrift configuration
version = "1.0"
# profile = "syslog"        # see `linedrift profiles`

[detect]
threshold = "50%"           # fraction (0.5) or percentage ("50%")
fail_on_change = false      # exit 1 when any line is flagged

[extract]
# offset = 16               # drop the first N characters
# chars = "0..8,12"         # select characters (0-based, lo..hi excludes hi)
# fields = "1,3"            # select fields instead (not with offset/chars)
# delimiter = "\\\\s+"        # field delimiter regex

[context]
# context = 2               # lines before and after
# before = 1                # overrides context for lines before
# after = 3                 # overrides context for lines after

[output]
format = "plain"            # plain | json | terminal
show_summary = true
"""

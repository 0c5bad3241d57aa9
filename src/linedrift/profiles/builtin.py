"""Built-in profiles."""

from linedrift.profiles.models import Profile

SYSLOG = Profile(
    id="syslog",
    description="Skip the 16-character 'Mmm dd hh:mm:ss ' syslog timestamp.",
    offset=16,
)

CSV = Profile(
    id="csv",
    description="Compare all comma-separated fields, ignoring the commas.",
    fields="..",
    delimiter=",",
)

TSV = Profile(
    id="tsv",
    description="Compare all tab-separated fields, ignoring the tabs.",
    fields="..",
    delimiter="\t",
)

WORDS = Profile(
    id="words",
    description="Compare whitespace-separated words, ignoring spacing changes.",
    fields="..",
)

ALL_BUILTIN_PROFILES = [SYSLOG, CSV, TSV, WORDS]

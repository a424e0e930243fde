from calverlex.tags.date_prefix import compute_date_prefix, iso_week
from calverlex.tags.sequencer import ParsedVersion, TagSequencer, parse_version
from calverlex.tags.source import (
    GitHubTagSource,
    RefsJsonTagSource,
    StaticTagSource,
    TagSource,
)
from calverlex.tags.suffix import decode, encode

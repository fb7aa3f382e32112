from __future__ import annotations

from dataclasses import dataclass

from . import canon


@dataclass
class ParserConfig:
    # Text decoding for file and resource sources
    encoding: str = canon.DEFAULT_ENCODING

    # Emit a DEBUG log line per state-machine transition
    log_transitions: bool = True


def default_config() -> ParserConfig:
    return ParserConfig()

"""Voterinfo feed library: parse contest, candidate and polling place data.

Public API:
    - parse_voter_info_feed: Parse a decoded JSON dict into VoterInfoFeed
    - load_voter_info_feed: Read and parse a JSON file
    - VoterInfoFeed: Top-level feed model
    - FeedParseError: Read/decode/validation error type
"""

from voter_info.lib.voter_info_feed.parser import (
    FeedCandidate,
    FeedContest,
    FeedParseError,
    FeedPollingLocation,
    VoterInfoFeed,
    load_voter_info_feed,
    parse_voter_info_feed,
)

__all__ = [
    "FeedCandidate",
    "FeedContest",
    "FeedParseError",
    "FeedPollingLocation",
    "VoterInfoFeed",
    "load_voter_info_feed",
    "parse_voter_info_feed",
]

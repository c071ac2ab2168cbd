# stats_fetcher.py
# Fetches a player's stats from the OSRS hiscore and translates them into structured data

import csv
import logging
import re
from dataclasses import asdict, dataclass, field
from importlib.metadata import version
from itertools import islice
from typing import List, NamedTuple, Optional

import requests

from catalog import DELIMITER_LEN, MINIGAMES, SKILLS
from config import Config
from errors import HiscoreParseError, UpstreamError

__version__ = version('osrs-hiscore-proxy')

# Helpful User-Agent makes everyone happy
USER_AGENT = f'osrs-hiscore-proxy/{__version__}'

# Optional minus sign and ASCII digits, nothing else
INTEGER_RE = re.compile(r'-?[0-9]+')

logger = logging.getLogger(__name__)


class RawHiscoreRow(NamedTuple):
    """One row of the hiscore CSV. Any field can be -1, Jagex's way of saying "missing"."""
    rank: int
    # For skills, the level. For everything else, the completion count
    score: int
    # Total experience. Only present for skills
    xp: Optional[int] = None


@dataclass(frozen=True)
class HiscoreSkill:
    name: str
    rank: int
    level: int
    experience: int


@dataclass(frozen=True)
class HiscoreMinigame:
    name: str
    rank: int
    score: int


@dataclass
class HiscorePlayer:
    """Hiscore statistics for a single player."""
    skills: List[HiscoreSkill] = field(default_factory=list)
    minigames: List[HiscoreMinigame] = field(default_factory=list)

    def to_dict(self):
        return {
            'primaryStats': [asdict(skill) for skill in self.skills],
            'secondaryStats': [asdict(minigame) for minigame in self.minigames],
        }


def fetch_player_stats(player_name):
    """
    Load a player's stats from the hiscore. This will:
    - Get the player's stats from the Jagex API
    - Parse the CSV
    - Convert it to a HiscorePlayer, which is easily JSON-able
    Raises UpstreamError or HiscoreParseError; there is never a partial result.
    """
    return build_player(load_hiscore_rows(player_name))


def load_hiscore_rows(player_name):
    """Get the raw hiscore CSV for a player and parse it into rows."""
    logger.debug("Fetching hiscore for %r", player_name)
    try:
        response = requests.get(
            Config.HISCORE_URL,
            params={'player': player_name},
            headers={'User-Agent': USER_AGENT},
            timeout=Config.HISCORE_TIMEOUT,
        )
        response.raise_for_status()
    except requests.HTTPError as e:
        raise UpstreamError(str(e), e.response.status_code) from e
    except requests.RequestException as e:
        raise UpstreamError(str(e)) from e

    rows = parse_hiscore_rows(response.text)
    logger.debug("Parsed %d hiscore rows for %r", len(rows), player_name)
    return rows


def parse_hiscore_rows(csv_text):
    """
    Parse the hiscore CSV into RawHiscoreRows. Rows may have 2 or 3 fields,
    and an empty third field means no xp. If *any* row fails to parse we abort
    the whole thing, since that means the hiscore sent us garbage and we don't
    want to pass on incomplete data.
    """
    rows = []
    for line_num, fields in enumerate(csv.reader(csv_text.splitlines()), start=1):
        # Only a truly empty line is skipped. A line of blank fields is still a row
        if not fields:
            continue
        if len(fields) not in (2, 3):
            raise HiscoreParseError(f"Line {line_num}: expected 2 or 3 fields, got {len(fields)}")
        if len(fields) == 3 and fields[2] == '':
            fields = fields[:2]
        for value in fields:
            if not INTEGER_RE.fullmatch(value):
                raise HiscoreParseError(f"Line {line_num}: invalid integer {value!r}")
        rows.append(RawHiscoreRow(*(int(value) for value in fields)))
    return rows


def build_player(rows, skills=SKILLS, minigames=MINIGAMES, delimiter_len=DELIMITER_LEN):
    """
    Map parsed rows onto category names by position. Skills come first, then
    delimiter_len padding rows, then minigames. Categories with missing data
    are left out entirely. Leftover rows at the end are ignored.
    """
    rows = iter(rows)
    player = HiscorePlayer()

    # Names go first in zip() so it stops without pulling an extra row
    for name, row in zip(skills, rows):
        rank, level, xp = _present(row.rank), _present(row.score), _present(row.xp)
        if None not in (rank, level, xp):
            player.skills.append(HiscoreSkill(name, rank, level, xp))

    for _ in islice(rows, delimiter_len):
        pass

    for name, row in zip(minigames, rows):
        rank, score = _present(row.rank), _present(row.score)
        if None not in (rank, score):
            player.minigames.append(HiscoreMinigame(name, rank, score))

    return player


def _present(value):
    """Convert a raw hiscore value to None if it's missing (-1 or absent)."""
    if value is None or value < 0:
        return None
    return value

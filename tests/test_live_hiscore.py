"""
Make sure our parsing lines up with the current format of the real hiscore.
Expect this to break whenever Jagex adds a row (usually a new minigame or boss);
the fix is normally appending the new name to MINIGAMES in catalog.py.
"""
import os

import pytest

from catalog import DELIMITER_LEN, MINIGAMES, SKILLS
from stats_fetcher import build_player, load_hiscore_rows

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(not os.getenv('HISCORE_LIVE_TESTS'), reason='needs network, set HISCORE_LIVE_TESTS=1'),
]

PLAYER_NAME = 'Hey Jase'


def test_hiscore_response_parse():
    raw_rows = load_hiscore_rows(PLAYER_NAME)
    player = build_player(raw_rows)

    assert len(raw_rows) == len(SKILLS) + DELIMITER_LEN + len(MINIGAMES), \
        'Unexpected number of rows in hiscore response. Skill or minigame list needs to be updated.'

    for i, skill in enumerate(player.skills):
        raw_row = raw_rows[i]
        assert skill.rank == raw_row.rank, f'Incorrect rank for skill {skill.name}'
        assert skill.level == raw_row.score, f'Incorrect level for skill {skill.name}'
        assert skill.experience == raw_row.xp, f'Incorrect XP for skill {skill.name}'

    # Minigames without enough score come back as -1 and are left out of the parsed data
    skipped = 0
    for i, raw_row in enumerate(raw_rows[len(SKILLS) + DELIMITER_LEN:]):
        if raw_row.rank == -1:
            skipped += 1
            continue
        minigame = player.minigames[i - skipped]
        assert minigame.rank == raw_row.rank, f'Incorrect rank for minigame {minigame.name}'
        assert minigame.score == raw_row.score, f'Incorrect score for minigame {minigame.name}'

"""
Draft Pick Issuer

Issues each team its ordinary picks for a draft year and the transition
step that purges used picks and issues the new year's set.

Pick ids have the form ``{kind}-{year}-R{round}-{team_id}``; picks are
issued round by round, every team once per round.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Dict, List, Sequence

from league.draft import DraftPick
from league.league_state import GameState
from league.state_step import GameStateStep
from season.season_exceptions import DraftPickCountException


class DraftPickIssuer(ABC):
    """Creates the picks for a draft year."""

    @abstractmethod
    def generate(self, year: int, team_ids: Sequence[str], kind: str) -> List[DraftPick]:
        """
        Issue picks for a year.

        Args:
            year: Draft year
            team_ids: Every team receiving picks
            kind: Pick kind, used as the id prefix ("pick" for ordinary picks)

        Returns:
            rounds × len(team_ids) picks, each owned by its original team
        """


class StandardDraftPickIssuer(DraftPickIssuer):
    """One pick per team per round."""

    def __init__(self, rounds: int = 7):
        self.rounds = rounds

    def generate(self, year: int, team_ids: Sequence[str], kind: str) -> List[DraftPick]:
        picks = []
        for round_number in range(1, self.rounds + 1):
            for team_id in team_ids:
                picks.append(DraftPick(
                    id=f"{kind}-{year}-R{round_number}-{team_id}",
                    year=year,
                    round=round_number,
                    original_team_id=team_id,
                    current_team_id=team_id,
                ))
        return picks


class DraftPickStep(GameStateStep):
    """
    Step 7: purge picks for the finished year (and earlier), then issue the
    new year's picks alongside any future picks already held.
    """

    name = "draft_picks"

    def __init__(self, issuer: DraftPickIssuer, rounds: int = 7, kind: str = "pick", logger=None):
        super().__init__(logger)
        self.issuer = issuer
        self.rounds = rounds
        self.kind = kind

    def apply(self, state: GameState) -> GameState:
        current_year = state.current_year
        next_year = current_year + 1
        team_ids = state.league.team_ids

        retained: Dict[str, DraftPick] = {
            pick_id: pick for pick_id, pick in state.draft_picks.items() if pick.year > current_year
        }
        purged = len(state.draft_picks) - len(retained)

        issued = self.issuer.generate(next_year, team_ids, self.kind)
        expected = self.rounds * len(team_ids)
        if len(issued) != expected:
            raise DraftPickCountException(year=next_year, expected=expected, actual=len(issued))

        # A retained pick with the same id carries traded ownership; keep it
        draft_picks = dict(retained)
        for pick in issued:
            draft_picks.setdefault(pick.id, pick)

        self.logger.info(
            f"Purged {purged} used draft picks, issued {len(issued)} picks for {next_year}, "
            f"kept {len(retained)} future picks"
        )
        return replace(state, draft_picks=draft_picks)

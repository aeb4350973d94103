"""
League Factory

Builds a complete 32-team league snapshot: teams in AFC/NFC East, North,
South and West, coaching staffs, generated rosters with contracts, draft
picks and finances. Used by the demo script and the tests.
"""

from dataclasses import replace
from typing import Dict, List, Optional, Tuple
import logging
import random

from league.contracts import ContractStatus, ContractYear, PlayerContract
from league.league_state import (
    CareerStats,
    CareerTeamEntry,
    GameState,
    InSeasonState,
    League,
    PlayoffBracket,
    PlayoffMatchup,
    SeasonCalendar,
    SeasonPhase,
)
from league.player import Player
from league.staff import Coach, StaffHierarchy
from league.team import Team, TeamFinances, TeamRecord
from offseason.draft_pick_issuer import StandardDraftPickIssuer
from offseason.offseason_phases import OffseasonPhase
from season.season_constants import SeasonConstants
from season.transition_config import TransitionConfig

from .player_generator import ROSTER_COMPOSITION, PlayerConstraints, PlayerGenerator


logger = logging.getLogger(__name__)


# (conference, division) -> (city, nickname, abbreviation)
NFL_TEAMS: Dict[Tuple[str, str], List[Tuple[str, str, str]]] = {
    ("AFC", "East"): [
        ("Buffalo", "Bills", "BUF"), ("Miami", "Dolphins", "MIA"),
        ("New England", "Patriots", "NE"), ("New York", "Jets", "NYJ"),
    ],
    ("AFC", "North"): [
        ("Baltimore", "Ravens", "BAL"), ("Cincinnati", "Bengals", "CIN"),
        ("Cleveland", "Browns", "CLE"), ("Pittsburgh", "Steelers", "PIT"),
    ],
    ("AFC", "South"): [
        ("Houston", "Texans", "HOU"), ("Indianapolis", "Colts", "IND"),
        ("Jacksonville", "Jaguars", "JAX"), ("Tennessee", "Titans", "TEN"),
    ],
    ("AFC", "West"): [
        ("Denver", "Broncos", "DEN"), ("Kansas City", "Chiefs", "KC"),
        ("Las Vegas", "Raiders", "LV"), ("Los Angeles", "Chargers", "LAC"),
    ],
    ("NFC", "East"): [
        ("Dallas", "Cowboys", "DAL"), ("New York", "Giants", "NYG"),
        ("Philadelphia", "Eagles", "PHI"), ("Washington", "Commanders", "WAS"),
    ],
    ("NFC", "North"): [
        ("Chicago", "Bears", "CHI"), ("Detroit", "Lions", "DET"),
        ("Green Bay", "Packers", "GB"), ("Minnesota", "Vikings", "MIN"),
    ],
    ("NFC", "South"): [
        ("Atlanta", "Falcons", "ATL"), ("Carolina", "Panthers", "CAR"),
        ("New Orleans", "Saints", "NO"), ("Tampa Bay", "Buccaneers", "TB"),
    ],
    ("NFC", "West"): [
        ("Arizona", "Cardinals", "ARI"), ("Los Angeles", "Rams", "LAR"),
        ("San Francisco", "49ers", "SF"), ("Seattle", "Seahawks", "SEA"),
    ],
}

PRACTICE_SQUAD_SIZE = 6


def create_default_league(
    year: int = 2025,
    rng: Optional[random.Random] = None,
    user_team_id: str = "DET",
    user_name: str = "General Manager"
) -> GameState:
    """
    Build a fresh 32-team league at the start of a regular season.

    Args:
        year: Season year of the calendar
        rng: Random source; a new unseeded one when omitted
        user_team_id: Team controlled by the user
        user_name: Display name of the user

    Returns:
        GameState with every team at 0-0, draft picks for this year and the
        next, and an empty prospect pool
    """
    rng = rng or random.Random()
    generator = PlayerGenerator(rng, id_prefix="player")
    salary_cap = TransitionConfig().salary_cap_for(year)

    teams: Dict[str, Team] = {}
    players: Dict[str, Player] = {}
    coaches: Dict[str, Coach] = {}
    contracts: Dict[str, PlayerContract] = {}

    for (conference, division), members in NFL_TEAMS.items():
        for city, nickname, abbreviation in members:
            team_id = abbreviation

            head_coach = Coach(
                id=f"coach-{team_id}-hc",
                first_name=rng.choice(PlayerGenerator.FIRST_NAMES),
                last_name=rng.choice(PlayerGenerator.LAST_NAMES),
                role="head_coach",
                development_rating=rng.randint(35, 90),
            )
            coaches[head_coach.id] = head_coach

            roster = _generate_roster(generator)
            practice_squad = [
                generator.generate(PlayerConstraints(min_age=22, max_age=25, tier="fringe"))
                for _ in range(PRACTICE_SQUAD_SIZE)
            ]

            for player in roster + practice_squad:
                contract = _generate_contract(rng, player, team_id, year)
                contracts[contract.id] = contract
                players[player.id] = replace(player, contract_id=contract.id)

            team_contracts = [c for c in contracts.values() if c.team_id == team_id]
            usage = sum(c.cap_hit_for(year) for c in team_contracts)

            teams[team_id] = Team(
                id=team_id,
                city=city,
                nickname=nickname,
                abbreviation=abbreviation,
                conference=conference,
                division=division,
                finances=replace(
                    TeamFinances.default(salary_cap),
                    current_cap_usage=usage,
                    cap_space=salary_cap - usage,
                ),
                staff_hierarchy=StaffHierarchy(head_coach=head_coach.id),
                roster_player_ids=tuple(p.id for p in roster),
                practice_squad_ids=tuple(p.id for p in practice_squad),
            )

    team_ids = tuple(teams)
    issuer = StandardDraftPickIssuer(rounds=SeasonConstants.DRAFT_ROUNDS)
    draft_picks = {
        pick.id: pick
        for draft_year in (year, year + 1)
        for pick in issuer.generate(draft_year, team_ids, SeasonConstants.ORDINARY_PICK_KIND)
    }

    user_team = teams[user_team_id]
    league = League(
        id="league-1",
        name="National Football League",
        team_ids=team_ids,
        calendar=SeasonCalendar(current_year=year, current_week=1, current_phase=SeasonPhase.REGULAR_SEASON),
    )

    logger.info(f"Created league for {year}: {len(teams)} teams, {len(players)} players, {len(contracts)} contracts")

    return GameState(
        user_team_id=user_team_id,
        user_name=user_name,
        league=league,
        teams=teams,
        players=players,
        coaches=coaches,
        contracts=contracts,
        draft_picks=draft_picks,
        prospects={},
        career_stats=CareerStats(
            team_history=(CareerTeamEntry(team_id=user_team_id, team_name=user_team.full_name, year_start=year),)
        ),
        in_season=InSeasonState(),
    )


def with_season_results(state: GameState, rng: random.Random) -> GameState:
    """
    Fill in a finished season: records, playoff seeds, a champion, and the
    calendar parked at the end of the offseason.

    Records are drawn independently per team; no games are played.
    """
    teams: Dict[str, Team] = {}
    for team_id, team in state.teams.items():
        ties = 1 if rng.random() < 0.05 else 0
        wins = rng.randint(0, SeasonConstants.REGULAR_SEASON_GAMES_PER_TEAM - ties)
        losses = SeasonConstants.REGULAR_SEASON_GAMES_PER_TEAM - ties - wins
        points_for = rng.randint(250, 500)
        teams[team_id] = replace(team, current_record=TeamRecord(
            wins=wins,
            losses=losses,
            ties=ties,
            points_for=points_for,
            points_against=points_for + rng.randint(-150, 150),
        ))

    # Seven playoff teams per conference
    for conference in ("AFC", "NFC"):
        ranked = sorted(
            (t for t in teams.values() if t.conference == conference),
            key=lambda t: (-t.current_record.win_percentage, -t.current_record.point_differential, t.id),
        )
        for seed, team in enumerate(ranked, start=1):
            if seed <= 7:
                teams[team.id] = replace(team, playoff_seed=seed)
            else:
                teams[team.id] = replace(team, is_eliminated=True)

    afc_top = next(t.id for t in teams.values() if t.conference == "AFC" and t.playoff_seed == 1)
    nfc_top = next(t.id for t in teams.values() if t.conference == "NFC" and t.playoff_seed == 1)
    bracket = PlayoffBracket(super_bowl=PlayoffMatchup(
        home_team_id=afc_top,
        away_team_id=nfc_top,
        winner_id=rng.choice((afc_top, nfc_top)),
    ))

    league = replace(
        state.league,
        playoff_bracket=bracket,
        calendar=replace(
            state.league.calendar,
            current_week=22,
            current_phase=SeasonPhase.OFFSEASON,
            offseason_phase=OffseasonPhase.SEASON_START.value,
        ),
    )
    return replace(state, teams=teams, league=league)


def _generate_roster(generator: PlayerGenerator) -> List[Player]:
    roster = []
    for position, count in ROSTER_COMPOSITION.items():
        for _ in range(count):
            roster.append(generator.generate(PlayerConstraints(position=position, min_age=22, max_age=36)))
    return roster


def _generate_contract(rng: random.Random, player: Player, team_id: str, year: int) -> PlayerContract:
    skill = sum(s.true_value for s in player.skills.values()) / max(1, len(player.skills))
    base_salary = max(800, round((skill - 40) ** 2 * 6)) if skill > 40 else 800
    years = rng.randint(1, 5)

    return PlayerContract(
        id=f"contract-{player.id}",
        player_id=player.id,
        team_id=team_id,
        status=ContractStatus.ACTIVE,
        years_remaining=years,
        year_breakdown=tuple(
            ContractYear(year=year + offset, base_salary=base_salary, cap_hit=base_salary)
            for offset in range(years)
        ),
        contract_type="rookie" if player.experience <= 1 else "veteran",
    )


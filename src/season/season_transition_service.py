"""
Season Transition Service

Turns the GameState at the close of one season into the GameState for the
start of the next by threading it through eleven ordered steps:

     1. HistoryRecorder        - archive the finished season
     2. RetirementResolver     - remove aged-out players
     3. ContractAdvancer       - age contracts, release expired deals
     4. AgingStep              - age and experience +1
     5. DevelopmentStep        - coach-driven skill progression
     6. DraftClassStep         - next year's prospects
     7. DraftPickStep          - purge used picks, issue next year's
     8. ScheduleStep           - next year's regular season
     9. CareerStatsAggregator  - fold the user's season into the career
    10. FinanceRecalculator    - cap usage, space and commitments
    11. TransientResetStep     - zero season-scoped state

Usage:
    from season.season_transition_service import transition_to_new_season

    next_state = transition_to_new_season(state, rng=random.Random(7))
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional
import logging
import random

from league.contracts import ContractStatus
from league.league_state import GameState
from league.player import InjuryStatus
from league.state_step import GameStateStep
from offseason.draft_class_generator import DraftClassGenerator, DraftClassStep, StandardDraftClassGenerator
from offseason.draft_pick_issuer import DraftPickIssuer, DraftPickStep, StandardDraftPickIssuer
from offseason.player_development import AgingStep, DevelopmentStep
from offseason.progression_model import CoachProgressionModel, ProgressionModel
from offseason.retirement_resolver import RetirementResolver
from salary_cap.cap_calculator import CapCalculator
from salary_cap.contract_advancer import ContractAdvancer, ContractYearAdvancer, StandardContractYearAdvancer
from salary_cap.finance_recalculator import FinanceRecalculator
from scheduling.config import ScheduleConfig
from scheduling.schedule_generator import NFLScheduleGenerator, ScheduleGenerator
from scheduling.schedule_step import ScheduleStep

from .career_stats import CareerStatsAggregator, CareerStatsUpdater, StandardCareerStatsUpdater
from .history_recorder import HistoryRecorder
from .season_exceptions import SeasonTransitionFailedException
from .state_validator import LeagueStateValidator
from .transient_reset import TransientResetStep
from .transition_config import TransitionConfig


@dataclass
class TransitionCollaborators:
    """Replaceable collaborators the transition steps delegate to."""
    draft_class_generator: DraftClassGenerator
    draft_pick_issuer: DraftPickIssuer
    schedule_generator: ScheduleGenerator
    progression_model: ProgressionModel
    contract_advancer: ContractYearAdvancer
    cap_calculator: CapCalculator
    career_stats_updater: CareerStatsUpdater
    injury_status_factory: Callable[[], InjuryStatus] = InjuryStatus.healthy

    @classmethod
    def defaults(cls, rng: random.Random, config: TransitionConfig) -> "TransitionCollaborators":
        """Standard collaborators drawing randomness from rng."""
        return cls(
            draft_class_generator=StandardDraftClassGenerator(
                rng,
                min_size=config.draft_class_min_size,
                max_size=config.draft_class_max_size,
            ),
            draft_pick_issuer=StandardDraftPickIssuer(rounds=config.draft_rounds),
            schedule_generator=NFLScheduleGenerator(ScheduleConfig(total_weeks=config.regular_season_weeks)),
            progression_model=CoachProgressionModel(),
            contract_advancer=StandardContractYearAdvancer(),
            cap_calculator=CapCalculator(),
            career_stats_updater=StandardCareerStatsUpdater(),
        )


@dataclass
class TransitionReport:
    """Result of a season transition."""
    state: GameState
    from_year: int
    to_year: int
    retired_player_ids: List[str] = field(default_factory=list)
    expired_contract_ids: List[str] = field(default_factory=list)
    removed_contract_ids: List[str] = field(default_factory=list)
    prospects_generated: int = 0
    picks_issued: int = 0
    picks_purged: int = 0
    games_scheduled: int = 0
    completed_steps: List[str] = field(default_factory=list)

    def summary(self) -> str:
        """One-line description of the transition"""
        return (
            f"{self.from_year} → {self.to_year}: {len(self.retired_player_ids)} retired, "
            f"{len(self.expired_contract_ids)} contracts expired, "
            f"{self.prospects_generated} prospects, {self.picks_issued} picks issued, "
            f"{self.games_scheduled} games scheduled"
        )


class SeasonTransitionService:
    """
    Runs the eleven transition steps in order.

    The input snapshot is never modified. If any step raises, the failure is
    re-raised as SeasonTransitionFailedException naming the step and no
    partial state is returned.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config: Optional[TransitionConfig] = None,
        collaborators: Optional[TransitionCollaborators] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the transition service.

        Args:
            rng: Random source for retirement draws and prospect generation
            config: Transition tuning; defaults to TransitionConfig()
            collaborators: Replacement collaborators; defaults built from rng and config
            logger: Optional logger

        Raises:
            ValueError: config fails validation
        """
        self.rng = rng or random.Random()
        self.config = config or TransitionConfig()
        self.logger = logger or logging.getLogger(__name__)

        is_valid, errors = self.config.validate()
        if not is_valid:
            raise ValueError(f"Invalid transition config: {'; '.join(errors)}")

        self.collaborators = collaborators or TransitionCollaborators.defaults(self.rng, self.config)
        self.validator = LeagueStateValidator()
        self.steps = self._build_steps()

    def _build_steps(self) -> List[GameStateStep]:
        c = self.collaborators
        return [
            HistoryRecorder(),
            RetirementResolver(self.rng, self.config.retirement_probability),
            ContractAdvancer(c.contract_advancer),
            AgingStep(),
            DevelopmentStep(c.progression_model),
            DraftClassStep(c.draft_class_generator),
            DraftPickStep(c.draft_pick_issuer, rounds=self.config.draft_rounds, kind=self.config.pick_kind),
            ScheduleStep(c.schedule_generator),
            CareerStatsAggregator(c.career_stats_updater),
            FinanceRecalculator(c.cap_calculator, self.config.salary_cap_for),
            TransientResetStep(
                morale_floor=self.config.morale_floor,
                morale_ceiling=self.config.morale_ceiling,
                injury_status_factory=c.injury_status_factory,
            ),
        ]

    def run(self, state: GameState) -> TransitionReport:
        """
        Transition state to the next season.

        Args:
            state: Snapshot at the close of a season

        Returns:
            TransitionReport holding the new snapshot

        Raises:
            DanglingContractReferenceException: Input or output snapshot has
                a player pointing at a missing or foreign contract
            SeasonTransitionFailedException: A step raised
        """
        from_year = state.current_year
        self.logger.info(f"Starting season transition {from_year} → {from_year + 1}")

        if self.config.validate_input:
            self.validator.validate(state, stage="input")

        report = TransitionReport(state=state, from_year=from_year, to_year=from_year + 1)
        current = state

        for step in self.steps:
            self.logger.debug(f"Running step {step.name}")
            before = current
            try:
                current = step.apply(current)
            except Exception as e:
                self.logger.error(f"Season transition failed in {step.name}: {type(e).__name__}: {e}")
                raise SeasonTransitionFailedException(step.name, from_year, original_exception=e) from e

            self._record_step(report, step, before, current)
            report.completed_steps.append(step.name)
            self.logger.debug(f"Finished step {step.name}")

        self.validator.validate(current, stage="output")

        report.state = current
        self.logger.info(f"Season transition complete: {report.summary()}")
        return report

    def _record_step(self, report: TransitionReport, step: GameStateStep, before: GameState, after: GameState) -> None:
        if isinstance(step, RetirementResolver):
            report.retired_player_ids = sorted(set(before.players) - set(after.players))

        elif isinstance(step, ContractAdvancer):
            report.removed_contract_ids = sorted(set(before.contracts) - set(after.contracts))
            report.expired_contract_ids = sorted(
                contract_id for contract_id, contract in after.contracts.items()
                if contract.status is ContractStatus.EXPIRED
                and before.contracts[contract_id].status is not ContractStatus.EXPIRED
            )

        elif isinstance(step, DraftClassStep):
            report.prospects_generated = len(after.prospects)

        elif isinstance(step, DraftPickStep):
            report.picks_purged = sum(1 for pick in before.draft_picks.values() if pick.year <= before.current_year)
            report.picks_issued = sum(1 for pick in after.draft_picks.values() if pick.year == before.current_year + 1)

        elif isinstance(step, ScheduleStep):
            schedule = after.league.schedule
            report.games_scheduled = len(schedule.regular_season) if schedule else 0


def transition_to_new_season(
    state: GameState,
    rng: Optional[random.Random] = None,
    config: Optional[TransitionConfig] = None,
    collaborators: Optional[TransitionCollaborators] = None
) -> GameState:
    """
    Produce the GameState for the start of the next season.

    Args:
        state: Snapshot at the close of a season; left untouched
        rng: Random source; a new unseeded one when omitted
        config: Transition tuning
        collaborators: Replacement collaborators

    Returns:
        New snapshot one year later
    """
    return SeasonTransitionService(rng=rng, config=config, collaborators=collaborators).run(state).state

"""Universe generation: picks the stelliferous era and the age of the universe."""

import logging
from typing import List, Tuple

from ..models import GenerationSettings, StelliferousEra, Universe
from ..utils import OUR_UNIVERSE_AGE, RollToProcess, SeededDiceRoller
from ..utils.constants import ANCIENT_STELLIFEROUS_START, END_STELLIFEROUS_END

logger = logging.getLogger(__name__)

OUR_UNIVERSE_ERA = StelliferousEra.MIDDLE_STELLIFEROUS

# Weight of each era when picked at random
ERA_WEIGHTS = {
    StelliferousEra.ANCIENT_STELLIFEROUS: 1,
    StelliferousEra.EARLY_STELLIFEROUS: 40,
    StelliferousEra.MIDDLE_STELLIFEROUS: 218,
    StelliferousEra.LATE_STELLIFEROUS: 40,
    StelliferousEra.END_STELLIFEROUS: 1,
}

_ERA_ORDER = list(StelliferousEra)


def generate_universe(settings: GenerationSettings) -> Universe:
    """Generate the universe for the given settings.

    Algorithm:
    1. ``universe.use_ours`` gives our universe, ``universe.fixed_age`` gives
       that age
    2. Otherwise narrow the allowed age range with the era and age settings,
       pick an era among those overlapping the range (weights 1/40/218/40/1)
       and roll an age inside it, to the hundredth of a billion years
    3. An age that falls outside every era, or a range no era overlaps, gives
       our universe instead

    Args:
        settings: Generation settings

    Returns:
        The generated Universe
    """
    universe_settings = settings.universe
    if universe_settings.use_ours:
        age = OUR_UNIVERSE_AGE
    elif universe_settings.fixed_age is not None:
        age = universe_settings.fixed_age
    else:
        age = _roll_age(settings)

    if not ANCIENT_STELLIFEROUS_START <= age < END_STELLIFEROUS_END:
        logger.warning(
            f"Universe age {age} is outside the stelliferous era, using our universe instead"
        )
        return Universe(OUR_UNIVERSE_ERA, OUR_UNIVERSE_AGE)

    universe = Universe(StelliferousEra.from_age(age), age)
    logger.info(f"Generated {universe}")
    return universe


def _roll_age(settings: GenerationSettings) -> float:
    rng = SeededDiceRoller(settings.seed, "uni_age")
    min_age, max_age = get_min_and_max_age(settings)
    possible_eras = filter_unwanted_eras(min_age, max_age)
    if not possible_eras:
        logger.warning(
            f"No era fits ages between {min_age} and {max_age}, using our universe instead"
        )
        return OUR_UNIVERSE_AGE

    era = rng.get_result(RollToProcess.simple((era, ERA_WEIGHTS[era]) for era in possible_eras))
    min_age = max(min_age, era.min_age)
    max_age = min(max_age, era.max_age)
    span = int((max_age - min_age) * 100)
    if span == 0:
        return round(min_age * 100) / 100
    return rng.roll(1, span, int(min_age * 100)) / 100


def get_min_and_max_age(settings: GenerationSettings) -> Tuple[float, float]:
    """Age range allowed by the universe settings, in billion years.

    ``era_after`` starts the range at the end of the given era and
    ``era_before`` ends it at the start of the given era.

    Examples:
        >>> get_min_and_max_age(GenerationSettings())
        (0.4, 100000.0)
    """
    universe_settings = settings.universe
    min_age = ANCIENT_STELLIFEROUS_START
    max_age = END_STELLIFEROUS_END
    if universe_settings.era_after is not None:
        min_age = max(min_age, universe_settings.era_after.max_age)
    if universe_settings.era_before is not None:
        max_age = min(max_age, universe_settings.era_before.min_age)
    if universe_settings.fixed_era is not None:
        min_age = max(min_age, universe_settings.fixed_era.min_age)
        max_age = min(max_age, universe_settings.fixed_era.max_age)
    if universe_settings.age_after is not None:
        min_age = max(min_age, universe_settings.age_after)
    if universe_settings.age_before is not None:
        max_age = min(max_age, universe_settings.age_before)
    return min_age, max_age


def filter_unwanted_eras(min_age: float, max_age: float) -> List[StelliferousEra]:
    """Eras overlapping the ``[min_age, max_age)`` range, in chronological order."""
    return [era for era in _ERA_ORDER if min_age < era.max_age and max_age > era.min_age]

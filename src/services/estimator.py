"""
Estimation d'une courbe de collections journalieres.

La source box-office ne publie qu'un total par film. Pour les graphiques,
une courbe de 30 jours est fabriquee a partir de ce total avec un
calendrier de decroissance fixe:

- Jour 1: 25% du total, jour 2: 15%, jour 3: 12%
- Jours 4 a 7: 8% - (jour - 4) x 1%
- Jours 8 a 30: reste non distribue / (31 - jour), recalcule chaque jour

C'est une heuristique d'affichage, pas une mesure. La fonction est pure:
le meme total produit toujours la meme courbe.
"""

from src.core.entities.box_office import DayPoint
from src.utils.constants import (
    ESTIMATE_HORIZON_DAYS,
    FIRST_WEEK_DAILY_DROP,
    FIRST_WEEK_LAST_DAY,
    FIRST_WEEK_START_SHARE,
    OPENING_DAY_SHARES,
)
from src.utils.helpers import parse_amount


def _day_amount(day: int, total: float, remaining: float) -> float:
    """Montant brut du jour selon le calendrier de decroissance."""
    if day in OPENING_DAY_SHARES:
        return total * OPENING_DAY_SHARES[day]
    if day <= FIRST_WEEK_LAST_DAY:
        return total * (FIRST_WEEK_START_SHARE - (day - 4) * FIRST_WEEK_DAILY_DROP)
    return remaining / (ESTIMATE_HORIZON_DAYS + 1 - day)


def estimate_daily_collections(total_collection: str | float) -> list[DayPoint]:
    """
    Fabrique la courbe journaliere d'un film a partir de son total.

    Args:
        total_collection: Total en chaine libre ("917.00 Cr") ou en nombre

    Returns:
        Jusqu'a 30 DayPoint, vide si le total est nul, negatif ou illisible

    Example:
        points = estimate_daily_collections("200.00 Cr")
        points[0].collection            # "50.00"
        points[2].cumulative_collection  # "104.00"
    """
    total = parse_amount(total_collection)

    points: list[DayPoint] = []
    remaining = total
    day = 1
    while day <= ESTIMATE_HORIZON_DAYS and remaining > 0:
        amount = max(_day_amount(day, total, remaining), 0.0)
        remaining -= amount

        points.append(
            DayPoint(
                day=day,
                label=f"Day {day}",
                collection=f"{amount:.2f}",
                cumulative_collection=f"{total - remaining:.2f}",
            )
        )
        day += 1

    return points

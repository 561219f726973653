from __future__ import annotations

import random
from collections.abc import Sequence

from ..flowers.models import Flower
from .config import DEFAULT_RECOMMENDATION_CONFIG


def select_flowers(
    catalog: Sequence[Flower],
    include: Sequence[str],
    exclude: Sequence[str],
    target: int = DEFAULT_RECOMMENDATION_CONFIG.target_count,
    rng: random.Random | None = None,
) -> list[Flower]:
    """Pick flowers for a combination.

    Included ids come first, in the caller's order; ids missing from the
    catalog are skipped. If that leaves fewer than *target* flowers, the
    rest is drawn uniformly without replacement from flowers that are
    neither included nor excluded. An include list longer than *target*
    is kept whole. The result may be shorter than *target*, or empty,
    when the catalog runs out.
    """
    by_id = {f.flower_id: f for f in catalog}
    selected = [by_id[fid] for fid in include if fid in by_id]

    # An id in both lists was consumed by the include pass above.
    blocked = set(include) | set(exclude)
    pool = [f for f in catalog if f.flower_id not in blocked]

    need = target - len(selected)
    if need > 0 and pool:
        rng = rng or random.Random()
        selected.extend(rng.sample(pool, min(need, len(pool))))

    return selected

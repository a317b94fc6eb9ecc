from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

import pandas as pd

from ..config import VaRConfig
from ..models.sampling import make_sampler
from ..pipeline import run_pipeline
from ..types import ContractParameters


def alpha_cases(
    base: ContractParameters,
    alphas: Iterable[float] = (0.01, 0.025, 0.05, 0.1),
) -> list[tuple[str, ContractParameters]]:
    """Copies of `base` at several tail levels, labelled by confidence."""
    out: list[tuple[str, ContractParameters]] = []
    for a in alphas:
        p = replace(base, alpha=float(a))
        out.append((f"{100.0 * p.confidence:g}%", p))
    return out


def var_table(
    cases: list[tuple[str, ContractParameters]],
    *,
    hist_data: int = 250,
    seed: int | None = 0,
    per_case_seed: bool = True,
    cfg: VaRConfig | None = None,
) -> pd.DataFrame:
    """
    One VaR run per case.

    With ``per_case_seed=True`` case ``i`` draws from seed ``seed + i``;
    otherwise every case replays the same path, which isolates the effect
    of the contract parameters.
    """
    cfg = cfg or VaRConfig()
    rows: list[dict[str, object]] = []

    for i, (name, p) in enumerate(cases):
        seed_i: int | None = None
        if seed is not None:
            seed_i = int(seed) + i if per_case_seed else int(seed)

        sampler = make_sampler(replace(cfg.random, seed=seed_i))
        res = run_pipeline(p, hist_data, sampler=sampler, cfg=cfg)

        rows.append(
            {
                "case": name,
                "alpha": float(p.alpha),
                "K": float(p.K),
                "r": float(p.r),
                "sigma": float(p.sigma),
                "T": float(p.T),
                "today": float(p.today),
                "tau": float(p.tau),
                "position_size": float(p.position_size),
                "hist_data": int(hist_data),
                "seed": seed_i,
                "VaR": res.var,
                "loss": res.loss,
                "ES": res.expected_shortfall,
                "report": res.report,
            }
        )

    return pd.DataFrame(rows)

# -*- coding: utf-8 -*-
from bitree.utils.checker import check


def get_cfg() -> dict:
    cfg = dict(
        seed=None,
        checker=dict(
            size=1000,
            low=-1000,
            high=1000,
            dtype="int64",
            init=None,
            update_ratio=0.5,
        ),
        run=dict(
            steps=100000,
            verify_every=1000,
        ),
    )

    return cfg


if __name__ == "__main__":
    cfg = get_cfg()
    info = check(cfg)
    if info["mismatches"] > 0:
        raise SystemExit(1)

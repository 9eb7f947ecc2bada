import math


def require_non_negative_number(v: float, name: str = "value") -> None:
    # nan/inf не проходят: иначе total_cost превращается в nan
    if not math.isfinite(v) or v < 0:
        raise ValueError(f"{name} must be a finite number >= 0")


def require_non_empty(v: str, name: str = "value") -> None:
    if not v:
        raise ValueError(f"{name} must not be empty")

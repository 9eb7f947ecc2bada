from greenify.config import settings

def money(v: float) -> str:
    return f"{settings.currency} {v:.{settings.decimals}f}"

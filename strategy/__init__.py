from .engine import recommend_action, resolve
from .tables import STRATEGY_TABLE, describe_table

__all__ = ["recommend_action", "resolve", "STRATEGY_TABLE", "describe_table"]

from gauntlet.operators.boolean import BooleanOperators
from gauntlet.operators.collection import CollectionOperators
from gauntlet.operators.equality import EqualityOperators, values_are_equal
from gauntlet.operators.identity import IdentityOperators
from gauntlet.operators.meta import MetaOperators
from gauntlet.operators.optional import OptionalOperators
from gauntlet.operators.raising import RaisingOperators
from gauntlet.operators.reasons import ReasonOperators
from gauntlet.operators.results import ResultOperators, split_result
from gauntlet.operators.then import ThenOperators
from gauntlet.operators.threads import ThreadOperators
from gauntlet.operators.types import TypeOperators

__all__ = [
    "BooleanOperators",
    "CollectionOperators",
    "EqualityOperators",
    "IdentityOperators",
    "MetaOperators",
    "OptionalOperators",
    "RaisingOperators",
    "ReasonOperators",
    "ResultOperators",
    "ThenOperators",
    "ThreadOperators",
    "TypeOperators",
    "split_result",
    "values_are_equal",
]

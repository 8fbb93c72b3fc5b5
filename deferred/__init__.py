"""Deferred values: handles of eventual outcomes of concurrent computations."""

from .deferred_core import DeferredBase, DeferredState
from .deferred_value import DeferredValue
from .outcome import Outcome, Success, Failure
from .resolver import Resolver
from .exceptions import (Error, InvalidStateError, TimeoutError, CancelledError,
                         EmptyInputError, AllFailedError)
from .config import Default
from .synchronous_executor import Synchronous
from .substrate import SubstrateBase, ThreadPoolSubstrate, ThreadPerTaskSubstrate

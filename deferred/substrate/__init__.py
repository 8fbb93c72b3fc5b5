from .substrate_base import SubstrateBase
from .thread_pool import ThreadPoolSubstrate, ThreadPerTaskSubstrate

__version__ = '1.0.0'

from .entry import Entry
from .index import Indexed
from .table import WeightedRoundRobin

from . import config
from . import entry
from . import index
from . import selectors
from . import table

import numpy as np

from . import config as configlib
from . import entry as entrylib
from . import index
from . import selectors


class WeightedRoundRobin:
  """Weighted random selection over a mutable set of keyed entries.

  Each call to next() is an independent draw that returns the value of an
  entry with probability proportional to its weight. Every mutation rebuilds
  the ranged index in full. The table does not lock, so callers sharing it
  across threads have to serialize mutations themselves.

  Args:
    entries: Initial entries. Invalid ones are dropped.
    config: An elements.Config with the keys of the packaged defaults. When
      omitted, the defaults are read from configs.yaml.
    rng: Random source exposing integers(low, high). Defaults to a numpy
      generator seeded with seed.
    seed: Seed for the default random source.
    **overrides: Values for default_weight, bisect_border or key_order. None
      values are ignored.
  """

  def __init__(self, entries=(), config=None, rng=None, seed=None, **overrides):
    if config is None:
      config = configlib.load(**overrides)
    else:
      overrides = {k: v for k, v in overrides.items() if v is not None}
      config = config.update(overrides) if overrides else config
      configlib.check(config)
    self.config = config
    self.default_weight = config.default_weight
    self.bisect_border = config.bisect_border
    self.key_order = config.key_order
    self.rng = np.random.default_rng(seed) if rng is None else rng
    self._items = []
    self._total = 0
    self.metrics = {
        'samples': 0,
        'rebuilds': 0,
        'rejected': 0,
    }
    self.set(entries)

  def __len__(self):
    return len(self._items)

  def __iter__(self):
    return iter(tuple(self._items))

  def __contains__(self, key):
    return self._find(key) is not None

  def __repr__(self):
    return (
        f'WeightedRoundRobin(entries={len(self._items)}, ' +
        f'total={self._total})')

  def __call__(self):
    return self.next()

  @property
  def total(self):
    return self._total

  @property
  def items(self):
    return tuple(self._items)

  def get(self, key, default=None):
    position = self._find(key)
    return default if position is None else self._items[position]

  def stats(self):
    return {
        'entries': len(self._items),
        'total': self._total,
        **self.metrics,
    }

  def set(self, entries):
    self._rebuild(entries)
    return True

  def add(self, entry):
    entry = entrylib.normalize(entry, self.default_weight)
    if entry is None or self._find(entry.key) is not None:
      self.metrics['rejected'] += 1
      return False
    self._rebuild([*self._items, entry])
    return True

  def replace(self, entry):
    entry = entrylib.normalize(entry, self.default_weight)
    position = None if entry is None else self._find(entry.key)
    if position is None:
      self.metrics['rejected'] += 1
      return False
    candidates = list(self._items)
    candidates[position] = entry
    self._rebuild(candidates)
    return True

  def remove(self, key):
    position = self._find(key)
    if position is None:
      self.metrics['rejected'] += 1
      return False
    candidates = list(self._items)
    del candidates[position]
    self._rebuild(candidates)
    return True

  def next(self, default=None):
    if not self._items:
      return default
    draw = int(self.rng.integers(0, self._total))
    self.metrics['samples'] += 1
    return selectors.choose(self._items, draw, self.bisect_border).value

  def _find(self, key):
    if key is None:
      return None
    target = index.token(key, self.key_order)
    for i, item in enumerate(self._items):
      if index.token(item.key, self.key_order) == target:
        return i
    return None

  def _rebuild(self, candidates):
    self._items, self._total = index.build(
        candidates, self.default_weight, self.key_order)
    self.metrics['rebuilds'] += 1

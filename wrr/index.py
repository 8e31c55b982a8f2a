from . import entry as entrylib


class Indexed(entrylib.Entry):
  """Entry with its range start, owned by a table and read-only."""

  __slots__ = ('start',)

  def __init__(self, entry, start):
    object.__setattr__(self, 'value', entry.value)
    object.__setattr__(self, 'key', entry.key)
    object.__setattr__(self, 'weight', entry.weight)
    object.__setattr__(self, 'start', start)

  def __setattr__(self, name, value):
    raise AttributeError(f'Indexed entries are read-only: {name}')

  def __delattr__(self, name):
    raise AttributeError(f'Indexed entries are read-only: {name}')

  @property
  def stop(self):
    return self.start + self.weight

  def __repr__(self):
    return (
        f'Indexed(key={self.key!r}, value={self.value!r}, ' +
        f'weight={self.weight}, range=[{self.start}, {self.stop}))')

  def __eq__(self, other):
    if type(self) is not type(other):
      return NotImplemented
    return super().__eq__(other) and self.start == other.start

  __hash__ = None


def token(key, order='str'):
  if order == 'str':
    return str(key)
  elif order == 'native':
    return key
  else:
    raise NotImplementedError(order)


def build(candidates, default_weight, order='str'):
  """Build the ranged item list and total weight from candidate entries.

  Rejected candidates are dropped and duplicate keys keep the last entry.
  Ranges are assigned in ascending key order starting at zero and the list is
  returned reversed, so the first item holds the largest key and range start
  and the last item holds the range starting at zero.
  """
  normalized = {}
  for candidate in candidates:
    candidate = entrylib.normalize(candidate, default_weight)
    if candidate is None:
      continue
    normalized.pop(candidate.key, None)
    normalized[candidate.key] = candidate
  ordered = sorted(normalized.values(), key=lambda x: token(x.key, order))
  items = []
  total = 0
  for candidate in ordered:
    items.append(Indexed(candidate, total))
    total += candidate.weight
  items.reverse()
  return items, total

import numbers


class Entry:

  __slots__ = ('value', 'key', 'weight')

  def __init__(self, value, key=None, weight=0):
    self.value = value
    self.key = key
    self.weight = weight

  def __repr__(self):
    return f'Entry(key={self.key!r}, value={self.value!r}, weight={self.weight})'

  def __eq__(self, other):
    if type(self) is not type(other):
      return NotImplemented
    return (
        (self.key, self.value, self.weight) ==
        (other.key, other.value, other.weight))

  __hash__ = None


def normalize(entry, default_weight):
  """Return a normalized copy of the entry, or None if it is unusable.

  Entries without a value and entries with a negative or non-integer weight
  are rejected. A zero weight becomes the default weight and a missing key
  falls back to the value. The given entry is not modified, and tables only
  store the copies, so changing an entry after handing it to a table has no
  effect on that table.
  """
  if entry.value is None:
    return None
  weight = entry.weight
  if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
    return None
  if weight < 0:
    return None
  if weight == 0:
    weight = default_weight
  key = entry.value if entry.key is None else entry.key
  return Entry(entry.value, key, int(weight))
